# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Small string helpers used by the command-line parser."""

from collections.abc import Iterable, Sequence


def starts_with_any(source: str, values: Iterable[str]) -> bool:
    """Return True if *source* starts with at least one of *values*."""
    return any(source.startswith(value) for value in values if value)


def trim_prefix(source: str, values: Sequence[str]) -> str:
    """Remove a single leading occurrence of the first matching value.

    Values are tried in the given order. Only one occurrence is removed, so
    ``trim_prefix("--a", ["-"])`` returns ``"-a"``.
    """
    for value in values:
        if value and source.startswith(value):
            return source[len(value) :]
    return source


def index_of_any(source: str, values: Iterable[str]) -> tuple[int, str | None]:
    """Find the lowest index at which any of *values* occurs in *source*.

    Returns ``(index, matched_value)`` or ``(-1, None)`` when none occur.
    Values that are absent from *source* never win.
    """
    best_index = -1
    best_value: str | None = None
    for value in values:
        if not value:
            continue
        index = source.find(value)
        if index < 0:
            continue
        if best_index < 0 or index < best_index:
            best_index = index
            best_value = value
    return best_index, best_value
