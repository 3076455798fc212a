"""
Unit tests for expression nodes.
"""

import dataclasses
from dataclasses import dataclass

import pytest

from migrast.ast import (
    AddColumnExpr,
    AddConstraintExpr,
    BinaryExpr,
    Dependencies,
    DropColumnExpr,
    Expression,
    FieldDescriber,
    IdentExpr,
    Literal,
    Name,
    NamedObject,
    ReferencesExpr,
    RenameToExpr,
    Selector,
    SetExpr,
    TableBodyDescriber,
    as_expression,
)
from migrast.shared.exceptions import UnresolvableSchemaReference


@dataclass(frozen=True)
class DependentExpr(Expression):
    """Expression stub with fixed text and dependencies."""

    text: str
    deps: Dependencies = ()

    def render(self) -> str:
        return self.text

    def depended_on(self) -> Dependencies:
        return self.deps


class TestSimpleExpressions:
    """Test cases for literal, identifier and binary expressions."""

    def test_literal_renders_verbatim(self):
        assert Literal("now()").render() == "now()"
        assert str(Literal("'x'")) == "'x'"
        assert Literal("1").depended_on() == ()

    def test_ident_expression_renders_qualified_selector(self):
        assert IdentExpr(Selector("u", "id")).render() == "u.id"
        assert IdentExpr("id").ident == Name("id")

    def test_binary_expression(self):
        expr = BinaryExpr(IdentExpr("id"), "=", Literal("1"))
        assert expr.render() == "id = 1"

    def test_binary_expression_coerces_strings(self):
        expr = BinaryExpr("a = 1", "and", "b = 2")
        assert expr.render() == "a = 1 and b = 2"

    def test_binary_expression_concatenates_dependencies(self):
        left = DependentExpr("a", (NamedObject("s", "a"),))
        right = DependentExpr("b", (NamedObject("s", "b"), NamedObject("s", "c")))
        expr = BinaryExpr(left, "or", right)
        assert expr.depended_on() == (NamedObject("s", "a"), NamedObject("s", "b"), NamedObject("s", "c"))

    def test_set_expression(self):
        expr = SetExpr("name", Literal("'bob'"))
        assert expr.render() == "name = 'bob'"

    def test_set_expression_takes_value_dependencies(self):
        expr = SetExpr("total", DependentExpr("public.tax(1)", (NamedObject("public", "tax"),)))
        assert expr.depended_on() == (NamedObject("public", "tax"),)

    def test_as_expression_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_expression(3.5)

    def test_expressions_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Literal("a").text = "b"


class TestReferencesExpr:
    """Test cases for foreign key references."""

    def test_render_with_all_parts(self):
        expr = ReferencesExpr("public.users", "id", on_delete="cascade", on_update="restrict")
        assert expr.render() == "references public.users (id) on delete cascade on update restrict"

    def test_render_without_column(self):
        assert ReferencesExpr(Selector("public", "users")).render() == "references public.users"

    def test_depends_on_table_and_column(self):
        expr = ReferencesExpr(Selector("public", "users"), "id")
        assert expr.depended_on() == (
            NamedObject("public", "users", ""),
            NamedObject("public", "users", "id"),
        )

    def test_depends_on_table_only_without_column(self):
        assert ReferencesExpr("public.users").depended_on() == (NamedObject("public", "users"),)

    def test_unqualified_table_cannot_be_resolved(self):
        with pytest.raises(UnresolvableSchemaReference):
            ReferencesExpr("users", "id").depended_on()


class TestFieldDescriber:
    """Test cases for column definitions."""

    def test_render(self):
        field = FieldDescriber("id", "integer", ["not null", Literal("default 0")])
        assert field.render() == "id integer not null default 0"

    def test_builtin_type_has_no_dependencies(self):
        assert FieldDescriber("id", "bigint").depended_on() == ()

    def test_qualified_type_depends_on_user_type(self):
        assert FieldDescriber("state", Selector("public", "state_t")).depended_on() == (
            NamedObject("public", "state_t"),
        )
        assert FieldDescriber("amount", "billing.money").depended_on() == (
            NamedObject("billing", "money"),
        )

    def test_constraint_dependencies_follow_type_dependencies(self):
        field = FieldDescriber(
            "owner",
            "auth.user_id",
            [ReferencesExpr("auth.users", "id")],
        )
        assert field.render() == "owner auth.user_id references auth.users (id)"
        assert field.depended_on() == (
            NamedObject("auth", "user_id"),
            NamedObject("auth", "users"),
            NamedObject("auth", "users", "id"),
        )


class TestTableBodyDescriber:
    """Test cases for table bodies."""

    def test_render_in_declaration_order(self, users_body):
        assert users_body.render() == "(a integer not null, b text)"
        assert users_body.field_names() == ["a", "b"]

    def test_empty_body(self):
        assert TableBodyDescriber().render() == "()"
        assert TableBodyDescriber().field_names() == []

    def test_dependencies_of_all_fields_in_order(self):
        body = TableBodyDescriber(
            [
                FieldDescriber("a", "s.t1"),
                FieldDescriber("b", "text"),
                FieldDescriber("c", "s.t2"),
            ]
        )
        assert body.depended_on() == (NamedObject("s", "t1"), NamedObject("s", "t2"))
        assert isinstance(body.fields, tuple)


class TestAlterActions:
    """Test cases for alter table actions."""

    def test_add_column(self):
        expr = AddColumnExpr(FieldDescriber("email", "text", ["not null"]))
        assert expr.render() == "add column email text not null"
        assert expr.column_name == "email"

    def test_add_column_if_not_exists(self):
        expr = AddColumnExpr(FieldDescriber("email", "text"), if_not_exists=True)
        assert expr.render() == "add column if not exists email text"

    def test_add_column_dependencies_come_from_field(self):
        expr = AddColumnExpr(FieldDescriber("state", "public.state_t"))
        assert expr.depended_on() == (NamedObject("public", "state_t"),)

    def test_drop_column(self):
        assert DropColumnExpr("email").render() == "drop column email"
        assert DropColumnExpr("email").depended_on() == ()

    def test_add_constraint(self):
        expr = AddConstraintExpr("orders_user_fk", BinaryExpr("foreign key (user_id)", "", ReferencesExpr("public.users", "id")))
        assert expr.render() == "add constraint orders_user_fk foreign key (user_id) references public.users (id)"
        assert expr.depended_on() == (
            NamedObject("public", "users"),
            NamedObject("public", "users", "id"),
        )

    def test_rename_to(self):
        assert RenameToExpr("people").render() == "rename to people"
