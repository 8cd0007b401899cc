# SPDX-FileCopyrightText: 2026 The slade authors
#
# SPDX-License-Identifier: Apache-2.0

"""Type-keyed registry of lazily created converter singletons."""

from collections.abc import Callable

from ..errors import ConversionNotSupportedError, InvalidArgumentError, require
from .converters import ObjectConverter, StringArrayObjectConverter, StringObjectConverter

ConverterFactory = Callable[[], ObjectConverter]


class _ConverterRegistration:
    def __init__(self, target_type: type, create: ConverterFactory) -> None:
        self.target_type = target_type
        self._create = create
        self._instance: ObjectConverter | None = None

    def get_instance(self) -> ObjectConverter:
        if self._instance is None:
            instance = self._create()
            if instance is None:
                raise InvalidArgumentError(
                    f"The converter factory for '{self.target_type.__name__}' returned None."
                )
            self._instance = instance
        return self._instance


class ObjectConverterFactory:
    """Creates converters by exact target type.

    ``str`` and ``list`` (string arrays) are registered on construction.
    Converter instances are created on first request and reused for the
    lifetime of the factory, so converters must be stateless.
    """

    def __init__(self) -> None:
        self._converters: dict[type, _ConverterRegistration] = {}
        self.register(str, StringObjectConverter)
        self.register(list, StringArrayObjectConverter)

    def register(self, target_type: type, converter_factory: ConverterFactory) -> None:
        """Install *converter_factory* for *target_type*, replacing any existing one."""
        require(target_type, "target_type")
        if not callable(converter_factory):
            raise InvalidArgumentError("'converter_factory' must be callable")
        self._converters[target_type] = _ConverterRegistration(target_type, converter_factory)

    def is_registered(self, target_type: type) -> bool:
        return target_type in self._converters

    def create(self, target_type: type) -> ObjectConverter:
        """Return the converter for *target_type*.

        Raises:
            ConversionNotSupportedError: nothing is registered for *target_type*.
        """
        registration = self._converters.get(target_type)
        if registration is None:
            name = getattr(target_type, "__qualname__", repr(target_type))
            raise ConversionNotSupportedError(
                f"No converters are registered that support conversion of objects to the type '{name}'."
            )
        return registration.get_instance()
