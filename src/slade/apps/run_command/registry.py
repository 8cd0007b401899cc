# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Program registrations and their flat binary file format.

Layout (little-endian)::

    int32               number of entries
    entry * count       string name, string path

Each string is a 7-bit variable-length encoded byte count followed by that
many UTF-8 bytes, the layout .NET's ``BinaryWriter.Write(string)`` uses.
"""

import io
import struct
from collections.abc import Iterable, Iterator, MutableMapping
from typing import BinaryIO

from ...errors import RegistryFormatError

_COUNT = struct.Struct("<i")


class ProgramRegistry(MutableMapping[str, str]):
    """Case-insensitive name → program path mapping.

    Insertion order is kept, and so is the spelling a name was first
    registered with.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] = ()) -> None:
        self._entries: dict[str, tuple[str, str]] = {}
        self.update(entries)

    def __getitem__(self, name: str) -> str:
        return self._entries[name.casefold()][1]

    def __setitem__(self, name: str, path: str) -> None:
        folded = name.casefold()
        existing = self._entries.get(folded)
        self._entries[folded] = (existing[0] if existing else name, path)

    def __delitem__(self, name: str) -> None:
        del self._entries[name.casefold()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._entries

    def __repr__(self) -> str:
        return f"ProgramRegistry({dict(self.items())!r})"

    def reset(self, entries: Iterable[tuple[str, str]]) -> None:
        """Replace every registration with *entries*."""
        self._entries.clear()
        self.update(entries)


def _write_length(stream: BinaryIO, length: int) -> None:
    while length >= 0x80:
        stream.write(bytes(((length & 0x7F) | 0x80,)))
        length >>= 7
    stream.write(bytes((length,)))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise RegistryFormatError("Unexpected end of registry data")
    return data


def _read_length(stream: BinaryIO) -> int:
    length = 0
    for shift in range(0, 35, 7):
        byte = _read_exact(stream, 1)[0]
        length |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return length
    raise RegistryFormatError("Invalid string length prefix in registry data")


def write_string(stream: BinaryIO, text: str) -> None:
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise RegistryFormatError(f"Cannot encode {text!r} as UTF-8") from e
    _write_length(stream, len(data))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    data = _read_exact(stream, _read_length(stream))
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RegistryFormatError("Registry string is not valid UTF-8") from e


def write_entries(stream: BinaryIO, entries: Iterable[tuple[str, str]]) -> None:
    entries = list(entries)
    stream.write(_COUNT.pack(len(entries)))
    for name, path in entries:
        write_string(stream, name)
        write_string(stream, path)


def read_entries(stream: BinaryIO) -> Iterator[tuple[str, str]]:
    (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
    if count < 0:
        raise RegistryFormatError(f"Negative entry count {count} in registry data")
    for _ in range(count):
        name = read_string(stream)
        path = read_string(stream)
        yield name, path


def dumps(registry: ProgramRegistry) -> bytes:
    buffer = io.BytesIO()
    write_entries(buffer, registry.items())
    return buffer.getvalue()


def loads(data: bytes) -> list[tuple[str, str]]:
    return list(read_entries(io.BytesIO(data)))
