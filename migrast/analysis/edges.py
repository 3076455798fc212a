"""
Dependency edge extraction for a batch of statements.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from migrast.ast.dependencies import Dependencies, NamedObject, dependencies_to_list
from migrast.ast.statements import Statement
from migrast.shared.exceptions import MigrastError, StatementDependencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatementEdges:
    """Rendered text and dependency edges of one statement in a batch."""

    index: int
    statement: Statement
    sql: str
    depended_on: Dependencies
    solved: Dependencies

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "sql": self.sql,
            "depended_on": dependencies_to_list(self.depended_on),
            "solved": dependencies_to_list(self.solved),
        }


class EdgeExtractor:
    """Collects depended-on and solved edges for every statement of a batch."""

    def extract(self, statements: Iterable[Statement]) -> list[StatementEdges]:
        """
        Extract edges for each statement, in batch order.

        Args:
            statements: Statements of one migration batch

        Returns:
            One StatementEdges entry per statement

        Raises:
            StatementDependencyError: If resolution fails for a statement; the
                error carries the statement index and the offending name
        """
        result = []
        for index, statement in enumerate(statements):
            result.append(self._extract_one(index, statement))

        logger.info(f"Extracted dependency edges for {len(result)} statements")
        return result

    def _extract_one(self, index: int, statement: Statement) -> StatementEdges:
        sql = statement.render()
        try:
            depended_on = statement.depended_on()
            solved = statement.solved()
        except MigrastError as e:
            raise StatementDependencyError(index, sql, e) from e

        logger.debug(f"Statement #{index} depends on {_format(depended_on)}, solves {_format(solved)}")
        return StatementEdges(
            index=index,
            statement=statement,
            sql=sql,
            depended_on=depended_on,
            solved=solved,
        )


def _format(deps: Iterable[NamedObject]) -> str:
    return "[" + ", ".join(str(key) for key in deps) + "]"


def extract_edges(statements: Iterable[Statement]) -> list[StatementEdges]:
    """
    Convenience function to extract edges for a batch of statements.

    Args:
        statements: Statements of one migration batch

    Returns:
        One StatementEdges entry per statement, in batch order
    """
    return EdgeExtractor().extract(statements)
