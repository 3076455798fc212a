"""
migrast CLI Main Module

Command-line interface for rendering statement batches and inspecting their
dependency edges.
"""

from typing import Any, Literal

import typer

from migrast.cli.commands import cmd_deps, cmd_render, cmd_validate
from migrast.shared.constants import SUPPORTED_OUTPUT_FORMATS

OutputFormat = Literal["json", "yaml"]


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_format(value: str | None) -> OutputFormat | None:
    """Validate format option (json or yaml)."""
    if value is not None and value not in SUPPORTED_OUTPUT_FORMATS:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid format '{value}'. Must be 'json' or 'yaml'."
        )
    return value  # type: ignore[return-value]


app = typer.Typer(
    name="migrast",
    help="migrast - render migration statements and their dependency edges",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


STATEMENTS_FILE_ARG = typer.Argument(None, help="Path to a YAML or JSON statement document")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
DIALECT_OPTION = typer.Option(None, "-d", "--dialect", help="SQL dialect (default: postgres)")


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def render(
    ctx: typer.Context,
    statements_file: str | None = STATEMENTS_FILE_ARG,
    dialect: str | None = DIALECT_OPTION,
    validate: bool = typer.Option(False, "--validate", help="Validate rendered SQL with sqlglot"),
    output: str | None = typer.Option(None, "-o", "--output", help="Write the script to a file"),
    to_dialect: str | None = typer.Option(
        None, "-t", "--to-dialect", help="Convert rendered statements to another SQL dialect"
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Render statements to a migration script."""
    _check_required_argument(ctx, "statements_file", statements_file)
    cmd_render(
        statements_file=statements_file,
        dialect=dialect,
        validate=validate or None,
        output=output,
        to_dialect=to_dialect,
        verbose=verbose,
    )


@app.command()
def deps(
    ctx: typer.Context,
    statements_file: str | None = STATEMENTS_FILE_ARG,
    format: str | None = typer.Option(
        None, "-f", "--format", help="Output format: json or yaml", callback=validate_format
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the depended-on and solved edges of each statement."""
    _check_required_argument(ctx, "statements_file", statements_file)
    cmd_deps(
        statements_file=statements_file,
        format=format,
        verbose=verbose,
    )


@app.command()
def validate(
    ctx: typer.Context,
    statements_file: str | None = STATEMENTS_FILE_ARG,
    dialect: str | None = DIALECT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check that rendered statements parse in the target dialect."""
    _check_required_argument(ctx, "statements_file", statements_file)
    cmd_validate(
        statements_file=statements_file,
        dialect=dialect,
        verbose=verbose,
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
