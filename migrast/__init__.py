"""
migrast Module

Statement model for SQL schema migrations: render statements to reproducible
SQL text and extract the dependency edges used to order a migration batch.
"""

from .analysis import EdgeExtractor, StatementEdges, extract_edges
from .ast import (
    AddColumnExpr,
    AlterStmt,
    CreateStmt,
    Dependencies,
    DropStmt,
    FieldDescriber,
    InsertStmt,
    Name,
    NamedObject,
    OnConflict,
    Selector,
    SelectStmt,
    SqlTarget,
    Statement,
    TableBodyDescriber,
    TableDesc,
    UpdateStmt,
    WithStmt,
    resolve_name,
)
from .config import MigrastConfig, load_config
from .io import MigrationExporter, load_statements
from .shared import MigrastError, StatementDependencyError, UnresolvableSchemaReference

__all__ = [
    "SqlTarget",
    "Name",
    "Selector",
    "resolve_name",
    "NamedObject",
    "Dependencies",
    "FieldDescriber",
    "TableBodyDescriber",
    "AddColumnExpr",
    "Statement",
    "TableDesc",
    "OnConflict",
    "AlterStmt",
    "CreateStmt",
    "DropStmt",
    "InsertStmt",
    "UpdateStmt",
    "SelectStmt",
    "WithStmt",
    "EdgeExtractor",
    "StatementEdges",
    "extract_edges",
    "MigrationExporter",
    "load_statements",
    "MigrastConfig",
    "load_config",
    "MigrastError",
    "UnresolvableSchemaReference",
    "StatementDependencyError",
]
