"""
Input/output layer: statement documents in, scripts and edge documents out.
"""

from .exporter import MigrationExporter
from .loader import StatementLoader, load_statements

__all__ = [
    "MigrationExporter",
    "StatementLoader",
    "load_statements",
]
