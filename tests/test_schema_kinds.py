from types import SimpleNamespace

from fakes import FakeLibrary
from rpc_openapi.schema.kinds import CanonicalKind, canonicalize, classify, shape_flags


class TestClassify:
    def test_dialect_a_tag(self):
        z = FakeLibrary(dialect="a")
        assert classify(z.object({})) == CanonicalKind.OBJECT
        assert classify(z.array(z.string())) == "TypeArray"

    def test_dialect_b_internal_tag_is_canonicalized(self):
        z = FakeLibrary(dialect="b")
        assert classify(z.object({})) == "TypeObject"
        assert classify(z.optional(z.string())) == CanonicalKind.OPTIONAL

    def test_dialect_b_public_def_only(self):
        z = FakeLibrary(dialect="b-public")
        assert classify(z.void()) == CanonicalKind.VOID

    def test_dialect_a_takes_priority(self):
        descriptor = SimpleNamespace(_def=SimpleNamespace(type_name="TypeArray", type="object"))
        assert classify(descriptor) == CanonicalKind.ARRAY

    def test_mapping_descriptor(self):
        assert classify({"_def": {"type": "string"}}) == CanonicalKind.STRING

    def test_known_kinds_are_enum_members(self):
        z = FakeLibrary(dialect="b")
        assert classify(z.object({})) is CanonicalKind.OBJECT
        assert classify(FakeLibrary(dialect="a").array(z.string())) is CanonicalKind.ARRAY

    def test_unlisted_kind_keeps_canonical_tag(self):
        descriptor = SimpleNamespace(def_=SimpleNamespace(type="bigint"))
        kind = classify(descriptor)
        assert kind == "TypeBigint"
        assert not isinstance(kind, CanonicalKind)

    def test_not_a_schema(self):
        assert classify(None) is None
        assert classify("hello") is None
        assert classify(SimpleNamespace(_def=SimpleNamespace())) is None


class TestCanonicalize:
    def test_prefixed_tag_unchanged(self):
        assert canonicalize("TypeObject") == "TypeObject"

    def test_camel_case_kind(self):
        assert canonicalize("nativeEnum") == "TypeNativeEnum"


class TestShapeFlags:
    def test_dialect_a_flags(self):
        flags = shape_flags(FakeLibrary(dialect="a").string())
        assert flags == {
            "has_internal_def": True,
            "has_def": False,
            "internal_def_type": None,
            "def_type": None,
            "internal_def_type_name": "TypeString",
        }

    def test_dialect_b_flags(self):
        flags = shape_flags(FakeLibrary(dialect="b").string())
        assert flags["has_def"] is True
        assert flags["internal_def_type"] == "string"
        assert flags["def_type"] == "string"
        assert flags["internal_def_type_name"] is None
