"""Command-line parsing: rule sets, the parser and its results."""

from .context import CommandParsingContext
from .parser import CommandLineParser, CommandResult, ValueKind
from .results import CommandResultSet
from .rules import (
    UNIX_PROFILE,
    WINDOWS_PROFILE,
    CommandLineRuleSet,
    CommandPrefixes,
    CommandSeparators,
)

__all__ = [
    "CommandLineParser",
    "CommandLineRuleSet",
    "CommandParsingContext",
    "CommandPrefixes",
    "CommandResult",
    "CommandResultSet",
    "CommandSeparators",
    "UNIX_PROFILE",
    "ValueKind",
    "WINDOWS_PROFILE",
]
