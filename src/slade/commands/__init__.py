"""Command registration, dispatch and the console application base class."""

from .application import ApplicationContext, ConsoleApplication
from .registrar import DispatchResult, ExecutableCommandRegistrar, ExecutableCommandRegistration

__all__ = [
    "ApplicationContext",
    "ConsoleApplication",
    "DispatchResult",
    "ExecutableCommandRegistrar",
    "ExecutableCommandRegistration",
]
