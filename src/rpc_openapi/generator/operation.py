"""Build one OpenAPI operation per procedure."""

import copy
from typing import Any

from rpc_openapi.fields import read_field
from rpc_openapi.router.base import Procedure
from rpc_openapi.schema.convert import SchemaBackend, as_schema, to_json_schema
from rpc_openapi.schema.inputs import reconcile_inputs

JSON_CONTENT = "application/json"

# Meta keys copied (as deep copies) onto the operation; anything else is left for process_operation.
ALLOWED_OPERATION_KEYS = ("tags", "summary", "description", "externalDocs", "deprecated")


def compute_path(name: str, path_prefix: str = "/") -> str:
    """Join the prefix segments and the dotted procedure name into a URL path."""
    segments = [s for s in (path_prefix or "/").split("/") if s]
    return "/".join(["", *segments, name])


def operation_tags(name: str) -> list[str]:
    """Tag a nested procedure with its top-level segment; top-level procedures get none."""
    segments = name.split(".")
    return segments[:1] if len(segments) > 1 else []


def build_operation(procedure: Procedure, backend: SchemaBackend) -> tuple[str, dict]:
    """Return ``(method, operation)`` for a procedure."""
    input_schema = to_json_schema(reconcile_inputs(procedure.inputs, backend), backend)

    operation: dict[str, Any] = {"tags": operation_tags(procedure.name)}
    for key in ALLOWED_OPERATION_KEYS:
        value = read_field(procedure.meta, key)
        if value:
            operation[key] = copy.deepcopy(value)
    operation["operationId"] = procedure.name
    operation["responses"] = _build_responses(procedure.output, backend)

    if procedure.is_query:
        operation["parameters"] = [
            {
                "in": "query",
                "name": "input",
                "content": {JSON_CONTENT: {"schema": input_schema}},
            }
        ]
        return "get", operation

    operation["requestBody"] = {"content": {JSON_CONTENT: {"schema": input_schema}}}
    return "post", operation


def _build_responses(output: Any, backend: SchemaBackend) -> dict:
    if output is None:
        return {"200": {"description": ""}}

    output = as_schema(output)
    # Responses travel wrapped as {"result": {"data": ...}}
    envelope = backend.object({"result": backend.object({"data": output})})
    return {
        "200": {
            "description": read_field(output, "description") or "",
            "content": {JSON_CONTENT: {"schema": to_json_schema(envelope, backend)}},
        }
    }
