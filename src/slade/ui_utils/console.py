# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Colour-coded console messages.

Information is printed in cyan, warnings in yellow (both to stdout) and
errors in red to stderr. Colour follows ``console.color`` from the global
config; ``auto`` defers to NO_COLOR / FORCE_COLOR and TTY detection.
"""

import sys
from enum import Enum
from typing import TextIO

from ..lib._util.ansi import cyan, red, supports_color, yellow
from ..lib.core.config import get_console_color_mode


class ConsoleMessageType(Enum):
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


_STYLES = {
    ConsoleMessageType.INFORMATION: cyan,
    ConsoleMessageType.WARNING: yellow,
    ConsoleMessageType.ERROR: red,
}


def _stream_for(message_type: ConsoleMessageType) -> TextIO:
    return sys.stderr if message_type is ConsoleMessageType.ERROR else sys.stdout


def color_enabled(stream: TextIO) -> bool:
    mode = get_console_color_mode()
    if mode == "always":
        return True
    if mode == "never":
        return False
    return supports_color(stream)


def write_line(message_type: ConsoleMessageType, message: str) -> None:
    """Print *message* styled for *message_type*."""
    stream = _stream_for(message_type)
    style = _STYLES.get(message_type)
    text = style(message, color_enabled(stream)) if style else message
    print(text, file=stream)


def info(message: str) -> None:
    write_line(ConsoleMessageType.INFORMATION, message)


def warning(message: str) -> None:
    write_line(ConsoleMessageType.WARNING, message)


def error(message: str) -> None:
    write_line(ConsoleMessageType.ERROR, message)
