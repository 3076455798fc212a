"""
Unit tests for sqlglot-backed validation of rendered SQL.
"""

from unittest.mock import patch

import pytest
from sqlglot.errors import ParseError

from migrast.ast import CreateStmt, InsertStmt, SelectStmt, SqlTarget, TableDesc
from migrast.rendering import DialectChecker
from migrast.shared.exceptions import RenderValidationError


class TestDialectChecker:
    """Test cases for DialectChecker."""

    def test_defaults_to_postgres(self):
        assert DialectChecker().dialect == "postgres"

    def test_unknown_dialect_raises(self):
        with pytest.raises(ValueError):
            DialectChecker("not_a_real_dialect")

    def test_validate_create_table(self, create_users):
        sql = DialectChecker("postgres").validate(create_users)
        assert sql == create_users.render()

    def test_validate_insert_and_select(self):
        checker = DialectChecker()
        checker.validate(InsertStmt(TableDesc("public.users"), [("a", "1"), ("b", "'x'")]))
        checker.validate(SelectStmt(["a", "b"], TableDesc("public.users", "u")))

    def test_validate_accepts_rendered_text(self):
        assert DialectChecker().validate("select 1") == "select 1"

    def test_parse_error_becomes_render_validation_error(self):
        stmt = CreateStmt(SqlTarget.SCHEMA, "billing")
        with patch("migrast.rendering.dialects.sqlglot.parse_one", side_effect=ParseError("boom")):
            with pytest.raises(RenderValidationError) as exc_info:
                DialectChecker().validate(stmt)

        assert exc_info.value.dialect == "postgres"
        assert exc_info.value.sql == "create schema billing"
        assert "boom" in str(exc_info.value)

    def test_transpile(self):
        stmt = SelectStmt(["id"], TableDesc("public.users"))
        converted = DialectChecker("postgres").transpile(stmt, "duckdb")
        assert converted.startswith("SELECT id FROM public.users")
