"""Uniform field access for collaborator objects.

Routers, procedures and type descriptors come from other libraries and may be
plain objects or mappings. Everything in this package reads them through
``read_field`` so both shapes are accepted.
"""

from collections.abc import Mapping
from typing import Any


def read_field(obj: Any, name: str) -> Any:
    """Return ``obj.name`` or ``obj[name]``, or None when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)
