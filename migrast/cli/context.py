"""
Command context for shared setup across CLI commands.
"""

import traceback

import typer

from migrast.config import MigrastConfig, load_config

from .utils import setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: loading configuration, applying command-line
    overrides and setting up logging.
    """

    def __init__(
        self,
        verbose: bool = False,
        dialect: str | None = None,
        validate: bool | None = None,
        output_format: str | None = None,
        project_root: str | None = None,
    ):
        """
        Initialize command context from parameters.

        Args:
            verbose: Enable verbose output
            dialect: Dialect override
            validate: Validation override
            output_format: Edge document format override
            project_root: Folder to read configuration from (defaults to cwd)
        """
        self.verbose = verbose
        setup_logging(self.verbose)

        self.config: MigrastConfig = load_config(project_root)
        if dialect:
            self.config.dialect = dialect
        if validate is not None:
            self.config.validate = validate
        if output_format:
            self.config.output_format = output_format

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        if show_traceback:
            traceback.print_exc()
        raise typer.Exit(1)
