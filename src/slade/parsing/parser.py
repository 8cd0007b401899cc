# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Turn raw command-line arguments into key/value commands.

An argument is a command when it starts with one of the configured prefix
literals. Exactly one prefix is removed, then the first occurrence of any
separator literal splits the key from the value::

    /key=value          -> CommandResult("key", "value")
    /key:a;b;c          -> CommandResult("key", ["a", "b", "c"])
    --switch            -> CommandResult("switch", None)

Arguments that are not commands are dropped from the output.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from ..errors import require
from ..lib._util.strings import index_of_any, starts_with_any, trim_prefix
from ..lib.util.logging_utils import _log_debug
from .context import CommandParsingContext
from .rules import MULTIPLE_VALUES_SEPARATOR, WINDOWS_PROFILE, CommandLineRuleSet

CommandValue = str | list[str] | None


class ValueKind(Enum):
    ABSENT = "absent"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(eq=False)
class CommandResult:
    """A command parsed from a single argument.

    ``key`` may be an empty string (e.g. ``/=value``). ``handled`` is left
    for consumers to set once they have acted on the command.
    """

    key: str
    value: CommandValue = None
    handled: bool = False

    @property
    def has_value(self) -> bool:
        return self.value is not None

    @property
    def kind(self) -> ValueKind:
        if self.value is None:
            return ValueKind.ABSENT
        if isinstance(self.value, list):
            return ValueKind.MULTIPLE
        return ValueKind.SINGLE

    def __repr__(self) -> str:
        return f"CommandResult(key={self.key!r}, value={self.value!r}, handled={self.handled})"


class CommandLineParser:
    """Parses arguments according to :attr:`rule_set`.

    With ``strict=True`` the ``allow_multiple_values`` and ``allow_switches``
    toggles of the rule set are enforced: values are not split on ``;`` when
    multiple values are disallowed, and valueless commands are dropped when
    switches are disallowed.
    """

    def __init__(
        self, rule_set: CommandLineRuleSet = WINDOWS_PROFILE, *, strict: bool = False
    ) -> None:
        require(rule_set, "rule_set")
        self.rule_set = rule_set
        self.strict = strict

    def parse(self, arguments: Iterable[str]) -> Iterator[CommandResult]:
        """Return a lazy iterator of commands parsed from *arguments*.

        Raises:
            InvalidArgumentError: *arguments* is None. Raised by this call,
                not on first iteration.
        """
        require(arguments, "arguments")
        context = CommandParsingContext(self.rule_set)
        return self._iter_commands(context, arguments)

    def _iter_commands(
        self, context: CommandParsingContext, arguments: Iterable[str]
    ) -> Iterator[CommandResult]:
        for argument in arguments:
            command = self._parse_argument(context, argument)
            if command is not None:
                yield command

    def _parse_argument(self, context: CommandParsingContext, argument: str) -> CommandResult | None:
        prefixes = context.get_prefixes()
        if not starts_with_any(argument, prefixes):
            _log_debug(f"parser: ignoring non-command argument {argument!r}")
            return None

        body = trim_prefix(argument, prefixes)
        separators = context.get_separators()
        split_index, separator = index_of_any(body, separators)

        if separator is None:
            if self.strict and not self.rule_set.allow_switches:
                _log_debug(f"parser: switches disallowed, dropping {argument!r}")
                return None
            return CommandResult(body)

        key = body[:split_index]
        return CommandResult(key, self._extract_value(body[split_index + len(separator) :]))

    def _extract_value(self, raw: str) -> CommandValue:
        if MULTIPLE_VALUES_SEPARATOR not in raw:
            return raw
        if self.strict and not self.rule_set.allow_multiple_values:
            return raw
        return [part for part in raw.split(MULTIPLE_VALUES_SEPARATOR) if part]
