"""
Export of migration scripts and dependency edge documents.
"""

import json
import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

import yaml

from migrast.analysis.edges import StatementEdges
from migrast.ast.statements import Statement
from migrast.shared.constants import DEFAULT_TERMINATOR, SUPPORTED_OUTPUT_FORMATS

# Configure logging
logger = logging.getLogger(__name__)


class MigrationExporter:
    """Renders statement batches to scripts and edge documents."""

    def __init__(
        self,
        terminator: str = DEFAULT_TERMINATOR,
        renderer: Callable[[Statement], str] | None = None,
    ) -> None:
        """
        Initialize the exporter.

        Args:
            terminator: Text appended to every rendered statement
            renderer: Produces the SQL text of a statement (defaults to its render())
        """
        self.terminator = terminator
        self.renderer = renderer or (lambda statement: statement.render())

    def render_script(self, statements: Iterable[Statement]) -> str:
        """Render statements in order, one terminated statement per line."""
        return "".join(f"{self.renderer(s)}{self.terminator}\n" for s in statements)

    def write_script(self, statements: Sequence[Statement], output_file: str | Path) -> Path:
        """
        Write a migration script to disk.

        Args:
            statements: Statements in execution order
            output_file: Destination path; parent folders are created

        Returns:
            Path to the written file
        """
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(self.render_script(statements), encoding="utf-8")
        logger.info(f"Wrote {len(statements)} statements to {output_file}")
        return output_file

    def edges_document(self, edges: Iterable[StatementEdges]) -> dict[str, Any]:
        return {"statements": [e.to_dict() for e in edges]}

    def dump_edges(self, edges: Iterable[StatementEdges], output_format: str = "json") -> str:
        """
        Serialize edges as JSON or YAML text.

        Raises:
            ValueError: If the output format is not supported
        """
        if output_format not in SUPPORTED_OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid format '{output_format}'. Must be one of: {', '.join(SUPPORTED_OUTPUT_FORMATS)}"
            )

        document = self.edges_document(edges)
        if output_format == "yaml":
            return yaml.safe_dump(document, default_flow_style=False, sort_keys=False, allow_unicode=True)
        return json.dumps(document, indent=2, ensure_ascii=False)
