# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Literal prefix and separator lists derived from a rule set."""

from ..errors import require
from ..lib._util.enums import extract_flag_values
from .rules import PREFIX_LITERALS, SEPARATOR_LITERALS, CommandLineRuleSet


class CommandParsingContext:
    """Caches the literal strings implied by a :class:`CommandLineRuleSet`.

    The literal tuples are computed on first access and kept until
    :meth:`flush` is called. Replacing :attr:`rule_set` flushes implicitly.
    Order follows the declaration order of the flag enums, which is also
    the order prefixes and separators are tried in.
    """

    def __init__(self, rule_set: CommandLineRuleSet) -> None:
        require(rule_set, "rule_set")
        self._rule_set = rule_set
        self._prefixes: tuple[str, ...] | None = None
        self._separators: tuple[str, ...] | None = None

    @property
    def rule_set(self) -> CommandLineRuleSet:
        return self._rule_set

    @rule_set.setter
    def rule_set(self, value: CommandLineRuleSet) -> None:
        require(value, "rule_set")
        self._rule_set = value
        self.flush()

    def get_prefixes(self) -> tuple[str, ...]:
        if self._prefixes is None:
            self._prefixes = tuple(
                PREFIX_LITERALS[flag] for flag in extract_flag_values(self._rule_set.prefixes)
            )
        return self._prefixes

    def get_separators(self) -> tuple[str, ...]:
        if self._separators is None:
            self._separators = tuple(
                SEPARATOR_LITERALS[flag] for flag in extract_flag_values(self._rule_set.separators)
            )
        return self._separators

    def flush(self) -> None:
        """Drop cached literals so the next access re-reads the rule set."""
        self._prefixes = None
        self._separators = None
