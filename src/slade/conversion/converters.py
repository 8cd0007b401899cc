# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Stateless converters from raw command values to handler value types.

Every converter first checks whether the value already is of the target
type and returns it unchanged; only then is the type-specific
:meth:`ObjectConverter.convert_core` consulted.
"""

from typing import Any, ClassVar

from ..errors import ConversionNotSupportedError, require
from ..parsing.rules import MULTIPLE_VALUES_SEPARATOR


class ObjectConverter:
    """Base class for converters to :attr:`target_type`."""

    target_type: ClassVar[type]

    def supports(self, value_type: type) -> bool:
        """Return True if this converter targets exactly *value_type*."""
        return value_type is self.target_type

    def supports_value(self, value: Any) -> bool:
        """Return True if *value* can be returned without conversion."""
        return isinstance(value, self.target_type)

    def convert(self, value: Any) -> Any:
        """Convert *value* to :attr:`target_type`.

        Raises:
            InvalidArgumentError: *value* is None.
            ConversionNotSupportedError: *value* cannot be converted.
        """
        require(value, "value")
        if self.supports_value(value):
            return value
        return self.convert_core(value)

    def convert_core(self, value: Any) -> Any:
        raise NotImplementedError

    def _unsupported(self, value: Any) -> ConversionNotSupportedError:
        return ConversionNotSupportedError(
            f"Cannot convert a value of type '{type(value).__name__}' "
            f"to '{self.target_type.__name__}'."
        )


class StringObjectConverter(ObjectConverter):
    target_type = str

    def convert_core(self, value: Any) -> str:
        # Multi-value commands are joined back into their command-line form.
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return MULTIPLE_VALUES_SEPARATOR.join(value)
        return str(value)


class StringArrayObjectConverter(ObjectConverter):
    """Accepts string lists only; there is no coercion from other values."""

    target_type = list

    def supports_value(self, value: Any) -> bool:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)

    def convert_core(self, value: Any) -> list[str]:
        raise self._unsupported(value)


class IntObjectConverter(ObjectConverter):
    target_type = int

    def supports_value(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def convert_core(self, value: Any) -> int:
        if isinstance(value, list):
            raise self._unsupported(value)
        try:
            return int(str(value).strip())
        except ValueError as e:
            raise ConversionNotSupportedError(f"'{value}' is not a valid integer.") from e


class BoolObjectConverter(ObjectConverter):
    target_type = bool

    _TRUE = frozenset({"true", "yes", "on", "1"})
    _FALSE = frozenset({"false", "no", "off", "0"})

    def convert_core(self, value: Any) -> bool:
        if isinstance(value, str):
            text = value.strip().lower()
            if text in self._TRUE:
                return True
            if text in self._FALSE:
                return False
            raise ConversionNotSupportedError(f"'{value}' is not a valid boolean.")
        raise self._unsupported(value)
