# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from ..errors import require, require_text
from .parser import CommandResult

if TYPE_CHECKING:
    from ..conversion.factory import ObjectConverterFactory


class CommandResultSet:
    """The commands of one parse pass, indexed by key.

    Keys are matched case-insensitively. When several commands share a key
    the last one wins in the index, while iteration still yields every
    command in parse order.
    """

    def __init__(
        self, object_converter_factory: ObjectConverterFactory, commands: Iterable[CommandResult]
    ) -> None:
        require(object_converter_factory, "object_converter_factory")
        require(commands, "commands")
        self._factory = object_converter_factory
        self._commands: list[CommandResult] = list(commands)
        self._keyed: dict[str, CommandResult] = {}
        for command in self._commands:
            self._keyed[command.key.casefold()] = command

    def __iter__(self) -> Iterator[CommandResult]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._keyed

    def get_command(self, key: str) -> CommandResult | None:
        require_text(key, "key")
        return self._keyed.get(key.casefold())

    def try_get_value(self, key: str, value_type: type = str) -> tuple[bool, Any]:
        """Look up the last command stored under *key* and convert its value.

        Returns ``(False, None)`` if no command has that key, otherwise
        ``(True, value)`` with the value converted to *value_type*.

        Raises:
            InvalidArgumentError: *key* is empty or blank.
            ConversionNotSupportedError: the value cannot become *value_type*.
        """
        command = self.get_command(key)
        if command is None:
            return False, None
        converter = self._factory.create(value_type)
        return True, converter.convert(command.value)
