import pytest

from fakes import make_router, procedure
from rpc_openapi.errors import InvalidRouterError
from rpc_openapi.router.base import Procedure
from rpc_openapi.router.walker import iter_procedures


class TestIterProcedures:
    def test_declaration_order(self, z):
        router = make_router({
            "users.getAll": procedure("query"),
            "users.create": procedure("mutation", inputs=[z.object({})]),
            "health": procedure("query"),
        })
        names = [p.name for p in iter_procedures(router)]
        assert names == ["users.getAll", "users.create", "health"]

    def test_procedure_fields(self, z):
        name_input = z.object({"name": z.string()})
        router = make_router({
            "hello": procedure("query", inputs=[name_input], output=z.string(), meta={"summary": "hi"}),
        })
        [proc] = list(iter_procedures(router))
        assert proc.kind == "query"
        assert proc.is_query is True
        assert proc.inputs == [name_input]
        assert proc.meta == {"summary": "hi"}

    def test_mapping_router(self):
        router = {"_def": {"procedures": {"ping": {"_def": {"kind": "mutation", "inputs": []}}}}}
        [proc] = list(iter_procedures(router))
        assert proc.name == "ping"
        assert proc.is_query is False
        assert proc.output is None

    def test_empty_router(self):
        assert list(iter_procedures(make_router({}))) == []

    def test_procedure_without_kind(self):
        router = {"_def": {"procedures": {"users.get": {"_def": {"inputs": []}}}}}
        with pytest.raises(InvalidRouterError, match="users.get"):
            list(iter_procedures(router))

    def test_missing_procedures(self):
        with pytest.raises(InvalidRouterError):
            list(iter_procedures(object()))


class TestProcedure:
    def test_defaults(self):
        proc = Procedure(name="a.b.c", kind="subscription")
        assert proc.is_query is False
        assert proc.output is None
        assert proc.inputs == []
