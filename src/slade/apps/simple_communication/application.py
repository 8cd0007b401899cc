# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""One node of a simple peer-to-peer messaging network.

Only the command surface exists so far: ``/listen=<port>`` and
``/send=<message>`` are parsed, validated and acknowledged, but no
channel is opened.
"""

from collections.abc import Sequence

from ...commands.application import ConsoleApplication
from ...commands.registrar import ExecutableCommandRegistrar
from ...conversion.converters import IntObjectConverter
from ...errors import InvalidArgumentError
from ...parsing.rules import CommandPrefixes, CommandSeparators
from ...ui_utils import console


class SimpleCommunicationApplicationContext:
    """Nothing is persisted between runs yet."""

    def load(self) -> None:
        pass

    def save(self) -> None:
        pass


class SimpleCommunicationConsoleApplication(ConsoleApplication):
    def __init__(
        self,
        application_context: SimpleCommunicationApplicationContext,
        arguments: Sequence[str],
    ) -> None:
        super().__init__(application_context, arguments)
        # Messages are passed on verbatim, so the parser must not split on ";".
        # Switches stay allowed for /help.
        self.configure(
            strict=True,
            allow_multiple_values=False,
            allow_switches=True,
            prefixes=CommandPrefixes.FORWARD_SLASH,
            separators=CommandSeparators.EQUALS,
        )

    def register_commands(self, registrar: ExecutableCommandRegistrar) -> None:
        super().register_commands(registrar)
        # Registration resolves converters eagerly, so int must exist first.
        self.converter_factory.register(int, IntObjectConverter)
        registrar.register("listen", self.handle_listening, int)
        registrar.register("send", self.handle_sending, str)

    def handle_listening(self, port: int) -> None:
        if not 0 < port < 65536:
            raise InvalidArgumentError(f"Port {port} is outside the range 1-65535.")
        console.warning(f"Listening on port {port} is not available yet; no channel was opened.")

    def handle_sending(self, message: str) -> None:
        if not message:
            raise InvalidArgumentError("Cannot send an empty message.")
        console.warning(f"Sending is not available yet; message of {len(message)} characters dropped.")
