"""Assemble the OpenAPI document for a whole router."""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from rpc_openapi.errors import DuplicateOperationError
from rpc_openapi.generator.operation import build_operation, compute_path
from rpc_openapi.router.base import Procedure
from rpc_openapi.router.walker import iter_procedures
from rpc_openapi.schema.convert import SchemaBackend

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"
DEFAULT_TITLE = "HTTP-RPC"

ProcessOperation = Callable[[dict, Any], dict | None]


class GenerateOptions(BaseModel):
    """Caller-facing knobs for document generation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path_prefix: str = "/"
    # Called with (operation, meta); a non-None return value replaces the operation
    process_operation: ProcessOperation | None = None
    title: str = DEFAULT_TITLE
    version: str = ""


def generate_openapi_document(
    router: Any,
    backend: SchemaBackend,
    options: GenerateOptions | None = None,
) -> dict:
    """Convert an RPC router into an OpenAPI 3.0 document.

    Query procedures become ``GET`` operations taking their input as a single
    JSON-encoded ``input`` query parameter; every other procedure becomes a
    ``POST`` with a JSON request body. Nothing in ``router`` is modified.

    Raises:
        InvalidInputShapeError: an input cannot be merged into the request schema.
        InvalidSchemaError: an output is not a schema descriptor.
        DuplicateOperationError: two procedures map to the same path and method.
    """
    options = options or GenerateOptions()
    paths: dict[str, dict[str, dict]] = {}
    owners: dict[tuple[str, str], str] = {}

    for procedure in iter_procedures(router):
        method, operation = build_operation(procedure, backend)
        operation = _process(operation, procedure, options.process_operation)
        path = compute_path(procedure.name, options.path_prefix)

        if (path, method) in owners:
            raise DuplicateOperationError(path, method, (owners[(path, method)], procedure.name))
        owners[(path, method)] = procedure.name
        paths.setdefault(path, {})[method] = operation
        logger.debug("Added %s %s from %s", method.upper(), path, procedure.name)

    logger.info("Generated OpenAPI document with %d operations", len(owners))
    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": options.title, "version": options.version},
        "paths": paths,
    }


def _process(operation: dict, procedure: Procedure, hook: ProcessOperation | None) -> dict:
    if hook is None:
        return operation
    result = hook(operation, procedure.meta)
    return operation if result is None else result
