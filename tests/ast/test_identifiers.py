"""
Unit tests for identifiers, targets and name resolution.
"""

import pytest

from migrast.ast import Name, Selector, SqlTarget, as_identifier, resolve_name
from migrast.shared.exceptions import MigrastError, UnresolvableSchemaReference


class TestIdentifiers:
    """Test cases for Name and Selector."""

    def test_name_get_name_returns_whole_text(self):
        assert Name("public.users").get_name() == "public.users"
        assert str(Name("users")) == "users"

    def test_selector_get_name_returns_rightmost_component(self):
        selector = Selector("public", "users")
        assert selector.get_name() == "users"
        assert str(selector) == "public.users"

    def test_as_identifier_wraps_strings(self):
        assert as_identifier("users") == Name("users")

    def test_as_identifier_passes_identifiers_through(self):
        selector = Selector("public", "users")
        assert as_identifier(selector) is selector

    def test_as_identifier_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_identifier(42)

    def test_target_renders_as_sql_noun(self):
        assert str(SqlTarget.TABLE) == "table"
        assert str(SqlTarget.CONSTRAINT) == "constraint"
        assert SqlTarget("index") is SqlTarget.INDEX


class TestResolveName:
    """Test cases for splitting identifiers into schema and object."""

    def test_selector_uses_container_as_schema(self):
        assert resolve_name(SqlTarget.TABLE, Selector("public", "users")) == ("public", "users")

    def test_dotted_name_is_split(self):
        assert resolve_name(SqlTarget.TABLE, Name("public.users")) == ("public", "users")

    def test_dotted_name_splits_on_first_separator(self):
        assert resolve_name(SqlTarget.INDEX, Name("a.b.c")) == ("a", "b.c")

    def test_unqualified_schema_name_resolves_to_schema_only(self):
        assert resolve_name(SqlTarget.SCHEMA, Name("billing")) == ("billing", "")

    def test_unqualified_name_for_other_targets_raises(self):
        with pytest.raises(UnresolvableSchemaReference) as exc_info:
            resolve_name(SqlTarget.TABLE, Name("users"))

        assert exc_info.value.name == "users"
        assert exc_info.value.target is SqlTarget.TABLE
        assert str(exc_info.value) == "cannot resolve schema for `users`"

    def test_unresolvable_reference_is_recoverable_migrast_error(self):
        with pytest.raises(MigrastError):
            resolve_name(SqlTarget.COLUMN, Name("email"))

    @pytest.mark.parametrize("text", [".users", "public."])
    def test_dotted_name_with_empty_part_raises(self, text):
        with pytest.raises(UnresolvableSchemaReference) as exc_info:
            resolve_name(SqlTarget.TABLE, Name(text))
        assert exc_info.value.name == text

    def test_selector_without_container_raises(self):
        with pytest.raises(UnresolvableSchemaReference):
            resolve_name(SqlTarget.TABLE, Selector("", "users"))

    @pytest.mark.parametrize("target", [SqlTarget.TABLE, SqlTarget.INDEX, SqlTarget.COLUMN])
    def test_selector_without_name_raises(self, target):
        with pytest.raises(UnresolvableSchemaReference) as exc_info:
            resolve_name(target, Selector("public", ""))
        assert exc_info.value.name == "public."
        assert exc_info.value.target is target

    def test_selector_without_name_resolves_for_schema_target(self):
        assert resolve_name(SqlTarget.SCHEMA, Selector("public", "")) == ("public", "")

    def test_unknown_identifier_type_raises_type_error(self):
        with pytest.raises(TypeError):
            resolve_name(SqlTarget.TABLE, "public.users")
