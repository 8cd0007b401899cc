# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Error kinds raised by the parsing, conversion and dispatch layers."""

from enum import IntEnum


class SladeError(Exception):
    """Base class for all slade errors."""


class InvalidArgumentError(SladeError, ValueError):
    """A required input was missing, None or blank."""


class ConversionNotSupportedError(SladeError, TypeError):
    """No converter exists for a type, or a value cannot be coerced to it."""


class CommandExecutionError(SladeError, RuntimeError):
    """A registered command handler raised while executing.

    The handler's exception is available as ``__cause__``.
    """

    def __init__(self, command_name: str, message: str | None = None) -> None:
        self.command_name = command_name
        super().__init__(message or f"An error occurred while executing the command '{command_name}'.")


class RegistryFormatError(SladeError, ValueError):
    """A persisted program registry is truncated or malformed."""


class ExitCode(IntEnum):
    """Process exit codes returned by the console applications."""

    OK = 0
    EXECUTION_FAILED = 1
    INVALID_ARGUMENT = 2
    NOT_SUPPORTED = 3
    PARSE_FAILED = 4
    UNEXPECTED = 70


def require(value: object, name: str) -> None:
    """Raise :class:`InvalidArgumentError` if *value* is None."""
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None")


def require_text(value: str | None, name: str) -> None:
    """Raise :class:`InvalidArgumentError` unless *value* is a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"'{name}' must be a non-empty string")


def exit_code_for(exc: BaseException) -> ExitCode:
    """Map an exception to the exit code a console application reports."""
    if isinstance(exc, CommandExecutionError):
        return ExitCode.EXECUTION_FAILED
    if isinstance(exc, InvalidArgumentError):
        return ExitCode.INVALID_ARGUMENT
    if isinstance(exc, ConversionNotSupportedError):
        return ExitCode.NOT_SUPPORTED
    return ExitCode.UNEXPECTED
