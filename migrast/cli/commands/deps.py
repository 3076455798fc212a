"""
Deps command implementation.
"""

import typer

from migrast.analysis import extract_edges
from migrast.cli.context import CommandContext
from migrast.io import MigrationExporter, load_statements
from migrast.shared.exceptions import MigrastError


def cmd_deps(
    statements_file: str,
    format: str | None = None,
    verbose: bool = False,
) -> None:
    """
    Print the depended-on and solved edges of every statement.

    Args:
        statements_file: Path to the YAML/JSON statement document
        format: Output format ("json" or "yaml")
        verbose: Enable verbose output
    """
    ctx = CommandContext(verbose=verbose, output_format=format)

    try:
        statements = load_statements(statements_file)
        edges = extract_edges(statements)
        exporter = MigrationExporter(terminator=ctx.config.terminator)
        typer.echo(exporter.dump_edges(edges, ctx.config.output_format))

    except (MigrastError, ValueError) as e:
        ctx.handle_error(e)
