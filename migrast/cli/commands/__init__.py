"""
CLI command implementations.
"""

from migrast.cli.commands.deps import cmd_deps
from migrast.cli.commands.render import cmd_render
from migrast.cli.commands.validate import cmd_validate

__all__ = ["cmd_render", "cmd_deps", "cmd_validate"]
