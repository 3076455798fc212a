"""
Unit tests for NamedObject and dependency utilities.
"""

from migrast.ast import (
    NO_DEPENDENCIES,
    NamedObject,
    concat_dependencies,
    dependencies_to_list,
    depends_on,
)


class TestNamedObject:
    """Test cases for the (schema, object, field) key."""

    def test_defaults_are_empty(self):
        key = NamedObject()
        assert (key.schema, key.object, key.field) == ("", "", "")

    def test_equality_is_exact_triple_match(self):
        assert NamedObject("s", "t", "") == NamedObject("s", "t")
        assert NamedObject("s", "t", "") != NamedObject("s", "t", "c")
        assert len({NamedObject("s", "t"), NamedObject("s", "t")}) == 1

    def test_str_joins_non_empty_parts(self):
        assert str(NamedObject("public", "users", "id")) == "public.users.id"
        assert str(NamedObject("public")) == "public"

    def test_dict_conversion(self):
        key = NamedObject("public", "users", "id")
        assert key.to_dict() == {"schema": "public", "object": "users", "field": "id"}


class TestDependencyUtilities:
    """Test cases for building and combining Dependencies."""

    def test_depends_on_builds_single_edge(self):
        assert depends_on("s", "t") == (NamedObject("s", "t", ""),)
        assert depends_on("s", "t", "c") == (NamedObject("s", "t", "c"),)

    def test_concat_preserves_order_and_duplicates(self):
        a = NamedObject("s", "a")
        b = NamedObject("s", "b")
        result = concat_dependencies((a, b), None, (), (a,))
        assert result == (a, b, a)
        assert isinstance(result, tuple)

    def test_concat_of_nothing_is_empty(self):
        assert concat_dependencies() == NO_DEPENDENCIES

    def test_dependencies_to_list(self):
        assert dependencies_to_list(depends_on("s", "t")) == [{"schema": "s", "object": "t", "field": ""}]
