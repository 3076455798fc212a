"""
Validate command implementation.
"""

import typer

from migrast.cli.context import CommandContext
from migrast.io import load_statements
from migrast.rendering import DialectChecker
from migrast.shared.exceptions import MigrastError


def cmd_validate(
    statements_file: str,
    dialect: str | None = None,
    verbose: bool = False,
) -> None:
    """Check that every statement renders to SQL the dialect can parse."""
    ctx = CommandContext(verbose=verbose, dialect=dialect)

    try:
        statements = load_statements(statements_file)
        checker = DialectChecker(ctx.config.dialect)
        for statement in statements:
            checker.validate(statement)

        typer.echo(f"✅ {len(statements)} statements are valid {checker.dialect} SQL")

    except (MigrastError, ValueError) as e:
        ctx.handle_error(e)
