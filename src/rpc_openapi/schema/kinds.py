"""Kind classification for type descriptors.

Descriptors come in two tagging dialects:

- Dialect A keeps a prefixed tag at ``_def.type_name`` (``"TypeObject"``).
- Dialect B keeps a lowercase tag at ``_def.type`` or ``def_.type`` (``"object"``).

``classify`` folds both onto the prefixed vocabulary so the rest of the
package only ever compares against ``CanonicalKind``.
"""

from enum import Enum
from typing import Any

from rpc_openapi.fields import read_field

KIND_PREFIX = "Type"


class CanonicalKind(str, Enum):
    OBJECT = "TypeObject"
    ARRAY = "TypeArray"
    VOID = "TypeVoid"
    OPTIONAL = "TypeOptional"
    NULLABLE = "TypeNullable"
    STRING = "TypeString"
    NUMBER = "TypeNumber"
    BOOLEAN = "TypeBoolean"
    DATE = "TypeDate"
    ENUM = "TypeEnum"
    LITERAL = "TypeLiteral"
    UNION = "TypeUnion"
    RECORD = "TypeRecord"
    TUPLE = "TypeTuple"
    ANY = "TypeAny"
    UNKNOWN = "TypeUnknown"


MERGEABLE_KINDS = frozenset({CanonicalKind.OBJECT, CanonicalKind.VOID, CanonicalKind.OPTIONAL})
_KNOWN_KINDS = {kind.value: kind for kind in CanonicalKind}


def classify(descriptor: Any) -> CanonicalKind | str | None:
    """Return the canonical kind of a descriptor, or None if it is not one.

    Known kinds come back as ``CanonicalKind`` members; kinds outside the
    enumeration are returned as their canonical tag string.
    """
    internal_def = read_field(descriptor, "_def")
    tag = (
        read_field(internal_def, "type_name")
        or read_field(internal_def, "type")
        or read_field(read_field(descriptor, "def_"), "type")
    )
    if not tag or not isinstance(tag, str):
        return None
    tag = canonicalize(tag)
    return _KNOWN_KINDS.get(tag, tag)


def canonicalize(tag: str) -> str:
    """Convert a dialect B tag (``"object"``) to the prefixed form (``"TypeObject"``)."""
    if tag.startswith(KIND_PREFIX):
        return tag
    return KIND_PREFIX + tag[0].upper() + tag[1:]


def shape_flags(descriptor: Any) -> dict:
    """Report which dialect marker fields a descriptor carries."""
    internal_def = read_field(descriptor, "_def")
    public_def = read_field(descriptor, "def_")
    return {
        "has_internal_def": internal_def is not None,
        "has_def": public_def is not None,
        "internal_def_type": read_field(internal_def, "type"),
        "def_type": read_field(public_def, "type"),
        "internal_def_type_name": read_field(internal_def, "type_name"),
    }
