"""
Statement and expression model with dependency extraction.
"""

from .dependencies import (
    NO_DEPENDENCIES,
    Dependencies,
    NamedObject,
    concat_dependencies,
    dependencies_to_list,
    depends_on,
)
from .expressions import (
    AddColumnExpr,
    AddConstraintExpr,
    BinaryExpr,
    DropColumnExpr,
    Expression,
    FieldDescriber,
    IdentExpr,
    Literal,
    ReferencesExpr,
    RenameToExpr,
    SetExpr,
    TableBodyDescriber,
    as_expression,
)
from .identifiers import Identifier, Name, Selector, as_identifier
from .resolution import resolve_name
from .statements import (
    AlterStmt,
    CreateStmt,
    DropStmt,
    InsertStmt,
    OnConflict,
    SelectStmt,
    Statement,
    TableDesc,
    UpdateStmt,
    WithStmt,
)
from .targets import SqlTarget

__all__ = [
    # Targets and identifiers
    "SqlTarget",
    "Identifier",
    "Name",
    "Selector",
    "as_identifier",
    "resolve_name",
    # Dependencies
    "NamedObject",
    "Dependencies",
    "NO_DEPENDENCIES",
    "depends_on",
    "concat_dependencies",
    "dependencies_to_list",
    # Expressions
    "Expression",
    "Literal",
    "IdentExpr",
    "BinaryExpr",
    "SetExpr",
    "ReferencesExpr",
    "FieldDescriber",
    "TableBodyDescriber",
    "AddColumnExpr",
    "DropColumnExpr",
    "AddConstraintExpr",
    "RenameToExpr",
    "as_expression",
    # Statements
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
]
