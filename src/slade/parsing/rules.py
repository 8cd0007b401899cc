# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Grammar configuration for the command-line parser.

A :class:`CommandLineRuleSet` is an immutable value. The two presets,
:data:`WINDOWS_PROFILE` and :data:`UNIX_PROFILE`, are shared module
constants; derive a working rule set from one with :meth:`CommandLineRuleSet.copy`.
"""

import dataclasses
from dataclasses import dataclass
from enum import Flag

MULTIPLE_VALUES_SEPARATOR = ";"


class CommandPrefixes(Flag):
    """Combinable set of literals that mark an argument as a command."""

    NONE = 0
    FORWARD_SLASH = 1 << 1  # /key
    SINGLE_HYPHEN = 1 << 2  # -k
    DOUBLE_HYPHEN = 1 << 3  # --key


class CommandSeparators(Flag):
    """Combinable set of literals that split a command key from its value."""

    NONE = 0
    EQUALS = 1 << 1
    COLON = 1 << 2


PREFIX_LITERALS: dict[CommandPrefixes, str] = {
    CommandPrefixes.FORWARD_SLASH: "/",
    CommandPrefixes.SINGLE_HYPHEN: "-",
    CommandPrefixes.DOUBLE_HYPHEN: "--",
}

SEPARATOR_LITERALS: dict[CommandSeparators, str] = {
    CommandSeparators.EQUALS: "=",
    CommandSeparators.COLON: ":",
}


@dataclass(frozen=True)
class CommandLineRuleSet:
    """Rules used when parsing command-line arguments.

    ``allow_multiple_values`` and ``allow_switches`` are only enforced by a
    parser created with ``strict=True``; otherwise they are informational.
    """

    prefixes: CommandPrefixes = CommandPrefixes.NONE
    separators: CommandSeparators = CommandSeparators.NONE
    allow_multiple_values: bool = False
    allow_switches: bool = False

    def copy(self, **changes) -> "CommandLineRuleSet":
        """Return a new rule set with *changes* applied on top of this one."""
        return dataclasses.replace(self, **changes)


WINDOWS_PROFILE = CommandLineRuleSet(
    prefixes=CommandPrefixes.FORWARD_SLASH | CommandPrefixes.SINGLE_HYPHEN,
    separators=CommandSeparators.EQUALS | CommandSeparators.COLON,
    allow_multiple_values=True,
    allow_switches=True,
)

UNIX_PROFILE = CommandLineRuleSet(
    prefixes=CommandPrefixes.SINGLE_HYPHEN | CommandPrefixes.DOUBLE_HYPHEN,
    allow_multiple_values=True,
    allow_switches=True,
)
