# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Helpers for working with :class:`enum.Flag` values."""

from collections.abc import Iterator
from enum import Flag
from typing import TypeVar

F = TypeVar("F", bound=Flag)


def extract_flag_values(value: F, exclude_zero: bool = True) -> Iterator[F]:
    """Yield every member of ``type(value)`` whose bits are all set in *value*.

    Members are yielded in declaration order, not numeric order. The zero
    member (``NONE``) is contained in every value, so it is skipped unless
    *exclude_zero* is False.
    """
    raw = value.value
    for member in type(value).__members__.values():
        bits = member.value
        if (raw & bits) != bits:
            continue
        if exclude_zero and bits == 0:
            continue
        yield member
