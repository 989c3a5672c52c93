"""Descriptor to JSON Schema conversion.

Two converters can be involved. The schema library's own ``to_json_schema``
is preferred when the library has one. Otherwise, or when that call raises,
the legacy converter supplied with the backend is used. The probe happens on
every call; nothing about the library is remembered between conversions.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rpc_openapi.errors import InvalidSchemaError, SchemaConversionError
from rpc_openapi.schema.kinds import classify

logger = logging.getLogger(__name__)

NATIVE_CONVERTER = "to_json_schema"


@dataclass(frozen=True)
class SchemaBackend:
    """The schema library the descriptors were built with.

    ``library`` must provide ``object(shape)``; it may provide
    ``to_json_schema(descriptor)``. ``legacy_converter`` is the standalone
    converter used when the native one is missing or fails.
    """

    library: Any
    legacy_converter: Callable[[Any], dict] | None = None

    def object(self, shape: dict) -> Any:
        return self.library.object(shape)


def native_converter(backend: SchemaBackend) -> Callable[[Any], dict] | None:
    """Return the library's own converter, or None if this library has none."""
    native = getattr(backend.library, NATIVE_CONVERTER, None)
    return native if callable(native) else None


def to_json_schema(descriptor: Any, backend: SchemaBackend) -> dict:
    """Convert a descriptor to a JSON Schema dict without the ``$schema`` key."""
    native = native_converter(backend)
    if native is not None:
        try:
            result = native(descriptor)
        except Exception as exc:
            logger.debug("Native JSON Schema conversion failed (%s), using legacy converter", exc)
            result = _legacy_convert(descriptor, backend)
    else:
        result = _legacy_convert(descriptor, backend)
    return _strip_schema_uri(result)


def as_schema(value: Any) -> Any:
    """Return ``value`` unchanged if it classifies as any kind, else raise."""
    if classify(value) is None:
        raise InvalidSchemaError(value)
    return value


def _legacy_convert(descriptor: Any, backend: SchemaBackend) -> dict:
    if backend.legacy_converter is None:
        raise SchemaConversionError(
            "Schema library has no native JSON Schema support and no legacy converter was given"
        )
    return backend.legacy_converter(descriptor)


def _strip_schema_uri(result: dict) -> dict:
    return {key: value for key, value in result.items() if key != "$schema"}
