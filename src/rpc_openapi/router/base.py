"""Procedure model read from a router's flattened procedures map."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rpc_openapi.fields import read_field


class ProcedureKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


class Procedure(BaseModel):
    """A single procedure: its kind, declared inputs, output and meta."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str  # dotted, e.g. users.getAll
    kind: str  # query / mutation / subscription
    inputs: list[Any] = Field(default_factory=list)
    output: Any = None
    meta: Any = None

    @property
    def is_query(self) -> bool:
        return self.kind == ProcedureKind.QUERY.value

    @classmethod
    def from_definition(cls, name: str, definition: Any) -> "Procedure":
        """Build a Procedure from a framework procedure definition object."""
        return cls(
            name=name,
            kind=read_field(definition, "kind"),
            inputs=list(read_field(definition, "inputs") or []),
            output=read_field(definition, "output"),
            meta=read_field(definition, "meta"),
        )
