# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Bind command names to typed handlers.

Each registration resolves its converter when it is registered, so an
unsupported value type is reported at start-up rather than when the
command is first used::

    registrar.register("launch", launch_program)            # str value
    registrar.register("register", add_program, list)       # string array
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..conversion.converters import ObjectConverter
from ..conversion.factory import ObjectConverterFactory
from ..errors import (
    CommandExecutionError,
    ConversionNotSupportedError,
    InvalidArgumentError,
    SladeError,
    require,
    require_text,
)
from ..parsing.parser import CommandResult

CommandHandler = Callable[[Any], None]


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of executing one command."""

    name: str
    succeeded: bool
    error: SladeError | None = None


class ExecutableCommandRegistration:
    """A command name, the value type its handler expects and the handler."""

    def __init__(
        self,
        name: str,
        handler: CommandHandler,
        value_type: type,
        converter: ObjectConverter,
    ) -> None:
        require_text(name, "name")
        if not callable(handler):
            raise InvalidArgumentError("'handler' must be callable")
        require(converter, "converter")
        self.name = name
        self.handler = handler
        self.value_type = value_type
        self.converter = converter

    def __repr__(self) -> str:
        return f"ExecutableCommandRegistration(name={self.name!r}, value_type={self.value_type!r})"

    def execute(self, result: CommandResult) -> None:
        """Convert the command's value and invoke the handler with it.

        Raises:
            InvalidArgumentError: *result* is None or carries no value.
            ConversionNotSupportedError: the value cannot become :attr:`value_type`.
            CommandExecutionError: the handler raised; the original is the cause.
        """
        require(result, "result")
        try:
            value = self.converter.convert(result.value)
        except SladeError:
            raise
        except Exception as e:
            raise ConversionNotSupportedError(
                f"Cannot convert the value of '{self.name}' to {getattr(self.value_type, '__name__', self.value_type)}: {e}"
            ) from e
        try:
            self.handler(value)
        except Exception as e:
            raise CommandExecutionError(self.name) from e

    def try_execute(self, result: CommandResult) -> DispatchResult:
        """Like :meth:`execute`, but report failure instead of raising it."""
        try:
            self.execute(result)
        except SladeError as e:
            return DispatchResult(self.name, False, e)
        return DispatchResult(self.name, True)


class ExecutableCommandRegistrar:
    """Case-insensitive name → :class:`ExecutableCommandRegistration` mapping."""

    def __init__(self, object_converter_factory: ObjectConverterFactory) -> None:
        require(object_converter_factory, "object_converter_factory")
        self._factory = object_converter_factory
        self._registrations: dict[str, ExecutableCommandRegistration] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        value_type: type = str,
        *,
        converter: ObjectConverter | None = None,
    ) -> ExecutableCommandRegistration:
        """Register *handler* under *name*, replacing any earlier registration.

        Unless an explicit *converter* is given, the converter registered for
        *value_type* in the factory is used.

        Raises:
            InvalidArgumentError: *name* is blank or *handler* is not callable.
            ConversionNotSupportedError: no converter exists for *value_type*.
        """
        require_text(name, "name")
        if not callable(handler):
            raise InvalidArgumentError("'handler' must be callable")
        if converter is None:
            converter = self._factory.create(value_type)
        registration = ExecutableCommandRegistration(name, handler, value_type, converter)
        self._registrations[name.casefold()] = registration
        return registration

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)

    def get_names(self) -> list[str]:
        """Names of all registered commands, in no particular order."""
        return [registration.name for registration in self._registrations.values()]

    def get_command_registration(self, name: str) -> ExecutableCommandRegistration | None:
        require_text(name, "name")
        return self._registrations.get(name.casefold())
