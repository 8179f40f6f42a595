"""Tests for union types."""

import dataclasses

import pytest

from typedecl.errors import UnionConstructionError, UnresolvableClassError
from typedecl.names import TypeName
from typedecl.types import (
    NullType, MixedType, VoidType, UnknownType, SimpleType, IterableType,
    GenericObjectType, ObjectType, UnionType,
)


INT = SimpleType("int")
STRING = SimpleType("string")
FLOAT = SimpleType("float")


class TestConstruction:
    @pytest.mark.parametrize("types", [(), (INT,), (NullType(),)])
    def test_needs_two_types(self, types):
        with pytest.raises(UnionConstructionError, match="at least two types"):
            UnionType(*types)

    @pytest.mark.parametrize("types", [
        (UnknownType(), INT),
        (INT, UnknownType()),
        (INT, STRING, UnknownType()),
    ])
    def test_rejects_unknown_type(self, types):
        with pytest.raises(UnionConstructionError, match="unknown type"):
            UnionType(*types)

    @pytest.mark.parametrize("types", [
        (VoidType(), INT),
        (INT, VoidType()),
        (INT, NullType(), VoidType()),
    ])
    def test_rejects_void_type(self, types):
        with pytest.raises(UnionConstructionError, match="void type"):
            UnionType(*types)

    def test_single_invalid_member_reports_count_first(self):
        with pytest.raises(UnionConstructionError, match="at least two types"):
            UnionType(VoidType())

    def test_permitted_members(self):
        nested = UnionType(INT, UnionType(STRING, NullType()))
        assert len(nested.types) == 2
        assert len(UnionType(INT, INT).types) == 2
        assert len(UnionType(SimpleType("int", True), STRING, MixedType()).types) == 3

    def test_members_are_owned(self):
        members = [INT, STRING]
        union = UnionType(*members)
        members.append(NullType())
        assert union.types == (INT, STRING)

    def test_frozen(self):
        union = UnionType(INT, STRING)
        with pytest.raises(dataclasses.FrozenInstanceError):
            union.types = (INT,)


class TestRendering:
    def test_sorted(self):
        assert UnionType(INT, STRING).as_string() == "int|string"
        assert UnionType(STRING, INT).as_string() == "int|string"
        assert UnionType(STRING, NullType()).as_string() == "null|string"

    def test_independent_of_order(self):
        members = [STRING, NullType(), FLOAT, INT]
        forward = UnionType(*members).as_string()
        assert forward == UnionType(*reversed(members)).as_string()
        assert forward == "float|int|null|string"

    def test_nullable_member_renders_inline(self):
        assert UnionType(STRING, SimpleType("int", True)).as_string() == "?int|string"

    def test_no_deduplication(self):
        assert UnionType(INT, SimpleType("integer")).as_string() == "int|int"

    def test_nested_union(self):
        assert UnionType(STRING, UnionType(NullType(), INT)).as_string() == "int|null|string"

    def test_objects(self, classpath):
        user = ObjectType(TypeName.from_qualified_name("app.User"), False, classpath)
        assert UnionType(INT, user).as_string() == "app.User|int"

    def test_return_type_declaration(self):
        assert UnionType(INT, STRING).as_return_type_declaration() == ": int|string"

    def test_name(self):
        assert UnionType(STRING, INT).name == "int|string"

    def test_to_dict(self):
        data = UnionType(STRING, NullType()).to_dict()
        assert data["_type"] == "UnionType"
        assert data["as_string"] == "null|string"
        assert data["allows_null"] is True
        assert [member["_type"] for member in data["types"]] == ["SimpleType", "NullType"]


class TestAllowsNull:
    def test_with_null_member(self):
        assert UnionType(STRING, NullType()).allows_null()

    def test_without_null_member(self):
        assert not UnionType(INT, STRING).allows_null()

    def test_nullable_member_is_not_a_null_member(self):
        assert not UnionType(SimpleType("int", True), STRING).allows_null()


class TestAssignability:
    def test_any_member_accepts(self):
        union = UnionType(INT, NullType())
        assert union.is_assignable(NullType())
        assert not INT.is_assignable(NullType())
        assert union.is_assignable(INT)
        assert not union.is_assignable(STRING)

    def test_no_member_accepts(self):
        assert not UnionType(INT, STRING).is_assignable(FLOAT)
        assert not UnionType(INT, STRING).is_assignable(VoidType())

    def test_order_does_not_change_result(self):
        candidates = [INT, STRING, FLOAT, NullType(), IterableType(False)]
        forward = UnionType(INT, NullType(), IterableType(False))
        backward = UnionType(IterableType(False), NullType(), INT)
        for candidate in candidates:
            assert forward.is_assignable(candidate) == backward.is_assignable(candidate)

    def test_stops_at_first_match(self, classpath):
        missing = ObjectType(TypeName.from_qualified_name("app.Missing"), False, classpath)
        # GenericObjectType accepts before IterableType needs the class
        assert UnionType(GenericObjectType(), IterableType(False)).is_assignable(missing)
        with pytest.raises(UnresolvableClassError):
            UnionType(INT, IterableType(False)).is_assignable(missing)

    def test_union_candidate(self):
        union = UnionType(INT, STRING)
        assert MixedType().is_assignable(union)
        assert not NullType().is_assignable(union)
