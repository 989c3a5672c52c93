"""Collapse a procedure's declared inputs into one request schema."""

from typing import Any

from rpc_openapi.errors import InvalidInputShapeError
from rpc_openapi.schema.convert import SchemaBackend
from rpc_openapi.schema.kinds import MERGEABLE_KINDS, CanonicalKind, classify, shape_flags


def reconcile_inputs(inputs: list[Any], backend: SchemaBackend) -> Any:
    """Return the effective input descriptor for a list of chained inputs.

    An array first input is returned as-is and anything after it is ignored.
    Otherwise the inputs are merged left to right with the library's own
    ``merge``, so later keys override earlier ones.
    """
    if inputs and classify(inputs[0]) == CanonicalKind.ARRAY:
        return inputs[0]

    accumulator = _as_mergeable(inputs[0] if inputs else backend.object({}))
    for descriptor in inputs[1:]:
        accumulator = accumulator.merge(_as_mergeable(descriptor))
    return accumulator


def _as_mergeable(descriptor: Any) -> Any:
    kind = classify(descriptor)
    if kind not in MERGEABLE_KINDS:
        raise InvalidInputShapeError(kind, shape_flags(descriptor))
    return descriptor
