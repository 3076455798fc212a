"""
SQL dialect checks for rendered statements.

Rendered text is handed to sqlglot to confirm it parses in the target dialect
and, when needed, to transpile it to another dialect. sqlglot is never used
to build statement trees.
"""

import logging

import sqlglot
from sqlglot.dialects import Dialect
from sqlglot.errors import SqlglotError

from migrast.ast.statements import Statement
from migrast.shared.constants import DEFAULT_DIALECT
from migrast.shared.exceptions import RenderValidationError


class DialectChecker:
    """Validates and transpiles rendered SQL for one dialect."""

    def __init__(self, dialect: str | None = None) -> None:
        self.dialect = dialect or DEFAULT_DIALECT
        self.logger = logging.getLogger(self.__class__.__name__)
        # Fail early on unknown dialect names
        Dialect.get_or_raise(self.dialect)

    def validate(self, statement: Statement | str) -> str:
        """
        Check that a statement renders to SQL the dialect can parse.

        Args:
            statement: Statement node or already rendered SQL

        Returns:
            The rendered SQL text

        Raises:
            RenderValidationError: If sqlglot rejects the SQL
        """
        sql = statement if isinstance(statement, str) else statement.render()
        try:
            sqlglot.parse_one(sql, read=self.dialect)
        except SqlglotError as e:
            raise RenderValidationError(sql, self.dialect, str(e)) from e

        self.logger.debug(f"Validated {self.dialect} SQL: {sql}")
        return sql

    def transpile(self, statement: Statement | str, target_dialect: str) -> str:
        """
        Render a statement and convert it to another dialect.

        Args:
            statement: Statement node or already rendered SQL
            target_dialect: Dialect to convert to

        Returns:
            SQL text in the target dialect

        Raises:
            RenderValidationError: If the SQL cannot be parsed or converted
        """
        sql = statement if isinstance(statement, str) else statement.render()
        try:
            parsed = sqlglot.parse_one(sql, read=self.dialect)
            converted = parsed.sql(dialect=target_dialect)
        except (SqlglotError, ValueError) as e:
            raise RenderValidationError(sql, self.dialect, str(e)) from e

        if target_dialect != self.dialect:
            self.logger.debug(
                f"Converted SQL from {self.dialect} to {target_dialect}. "
                f"Please review the converted statement for correctness."
            )
        return converted

