import pytest

from fakes import FakeLibrary, NativeLibrary, legacy_to_json_schema
from rpc_openapi.schema.convert import SchemaBackend


@pytest.fixture
def z():
    return FakeLibrary(dialect="a")


@pytest.fixture
def backend(z):
    return SchemaBackend(library=z, legacy_converter=legacy_to_json_schema)


@pytest.fixture
def z4():
    return NativeLibrary(dialect="b")


@pytest.fixture
def native_backend(z4):
    return SchemaBackend(library=z4, legacy_converter=legacy_to_json_schema)
