"""
Render command implementation.
"""

from functools import partial

import typer

from migrast.cli.context import CommandContext
from migrast.io import MigrationExporter, load_statements
from migrast.rendering import DialectChecker
from migrast.shared.exceptions import MigrastError


def cmd_render(
    statements_file: str,
    dialect: str | None = None,
    validate: bool | None = None,
    output: str | None = None,
    to_dialect: str | None = None,
    verbose: bool = False,
) -> None:
    """
    Render a statement document to a migration script.

    Args:
        statements_file: Path to the YAML/JSON statement document
        dialect: Dialect used for validation
        validate: Validate each statement before writing
        output: Optional output file; prints to stdout when omitted
        to_dialect: Convert rendered statements to this dialect with sqlglot
        verbose: Enable verbose output
    """
    ctx = CommandContext(verbose=verbose, dialect=dialect, validate=validate)

    try:
        statements = load_statements(statements_file)
        checker = DialectChecker(ctx.config.dialect) if ctx.config.validate or to_dialect else None

        if checker and ctx.config.validate:
            for statement in statements:
                checker.validate(statement)

        renderer = partial(checker.transpile, target_dialect=to_dialect) if to_dialect else None

        exporter = MigrationExporter(terminator=ctx.config.terminator, renderer=renderer)
        if output:
            path = exporter.write_script(statements, output)
            typer.echo(f"✅ Wrote {len(statements)} statements to {path}")
        else:
            typer.echo(exporter.render_script(statements), nl=False)

    except (MigrastError, ValueError) as e:
        ctx.handle_error(e)
