"""Enumerate the procedures of a router.

The RPC framework flattens nested routers itself: ``router._def.procedures``
maps dotted names to procedures, so no recursion happens here.
"""

from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from rpc_openapi.errors import InvalidRouterError
from rpc_openapi.fields import read_field
from rpc_openapi.router.base import Procedure


def iter_procedures(router: Any) -> Iterator[Procedure]:
    """Yield every procedure of ``router`` in declaration order."""
    procedures = read_field(read_field(router, "_def"), "procedures")
    if procedures is None:
        raise InvalidRouterError(f"Router has no _def.procedures map: {router!r}")
    for name, procedure in procedures.items():
        try:
            definition = Procedure.from_definition(name, read_field(procedure, "_def"))
        except ValidationError as e:
            raise InvalidRouterError(f"Invalid procedure definition {name!r}: {e}") from e
        yield definition
