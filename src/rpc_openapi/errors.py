"""Exceptions raised while building an OpenAPI document."""


class RpcOpenApiError(Exception):
    """Base class for all rpc-openapi errors."""


class InvalidInputShapeError(RpcOpenApiError):
    """An input descriptor cannot be merged into the request schema."""

    def __init__(self, kind: str | None, shape_flags: dict):
        kind = getattr(kind, "value", kind)
        self.kind = kind
        self.shape_flags = shape_flags
        super().__init__(
            f"Expected an object, void or optional input, but got kind: {kind}. "
            f"Shape: {shape_flags}"
        )


class InvalidSchemaError(RpcOpenApiError):
    """A value passed where a type descriptor is required is not one."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Expected a schema descriptor, received: {value!r}")


class SchemaConversionError(RpcOpenApiError):
    """No JSON Schema converter is available for a descriptor."""


class DuplicateOperationError(RpcOpenApiError):
    """Two procedures resolve to the same path and HTTP method."""

    def __init__(self, path: str, method: str, names: tuple[str, str]):
        self.path = path
        self.method = method
        self.names = names
        super().__init__(
            f"{method.upper()} {path} is produced by both {names[0]!r} and {names[1]!r}"
        )


class InvalidRouterError(RpcOpenApiError):
    """The router object does not expose a procedures map."""


class RouterLoadError(RpcOpenApiError):
    """A ``module:attribute`` reference could not be imported."""
