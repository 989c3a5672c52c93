"""Import routers, schema libraries and converters from dotted references."""

import importlib
from typing import Any

from rpc_openapi.errors import RouterLoadError
from rpc_openapi.schema.convert import SchemaBackend


def load_object(reference: str) -> Any:
    """Import ``package.module:attribute`` and return the attribute.

    Nested attributes may be given with dots after the colon (``app:api.router``).
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise RouterLoadError(f"Expected 'module:attribute', got {reference!r}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise RouterLoadError(f"Cannot import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise RouterLoadError(f"{module_name!r} has no attribute {attr_path!r}") from e
    return obj


def load_backend(library: str, legacy_converter: str | None = None) -> SchemaBackend:
    """Build a SchemaBackend from a module name and an optional converter reference."""
    try:
        module = importlib.import_module(library)
    except ImportError as e:
        raise RouterLoadError(f"Cannot import schema library {library!r}: {e}") from e
    converter = load_object(legacy_converter) if legacy_converter else None
    return SchemaBackend(library=module, legacy_converter=converter)
