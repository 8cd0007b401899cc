"""Conversion of raw command values into handler value types."""

from .converters import (
    BoolObjectConverter,
    IntObjectConverter,
    ObjectConverter,
    StringArrayObjectConverter,
    StringObjectConverter,
)
from .factory import ObjectConverterFactory

__all__ = [
    "BoolObjectConverter",
    "IntObjectConverter",
    "ObjectConverter",
    "ObjectConverterFactory",
    "StringArrayObjectConverter",
    "StringObjectConverter",
]
