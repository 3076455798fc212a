"""
Statement document loading.

Builds statement trees from YAML or JSON documents so a batch can be written
down declaratively (for fixtures, generators or the CLI). Each statement and
expression document carries a ``kind``; bare strings stand for literals.
"""

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

from migrast.ast.expressions import (
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
)
from migrast.ast.identifiers import Identifier, Name, Selector
from migrast.ast.statements import (
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
from migrast.ast.targets import SqlTarget
from migrast.shared.constants import SUPPORTED_DOCUMENT_EXTENSIONS
from migrast.shared.exceptions import StatementLoadError
from migrast.shared.text import to_bool

logger = logging.getLogger(__name__)


class StatementLoader:
    """Builds statement and expression nodes from plain documents."""

    def __init__(self) -> None:
        self._statement_builders: dict[str, Callable[[Mapping, str], Statement]] = {
            "alter": self._build_alter,
            "create": self._build_create,
            "drop": self._build_drop,
            "insert": self._build_insert,
            "update": self._build_update,
            "select": self._build_select,
            "with": self._build_with,
        }
        self._expression_builders: dict[str, Callable[[Mapping, str], Expression]] = {
            "literal": lambda doc, loc: Literal(str(_require(doc, "text", loc))),
            "ident": lambda doc, loc: IdentExpr(self.build_identifier(_require(doc, "ident", loc), loc)),
            "binary": self._build_binary,
            "set": self._build_set,
            "references": self._build_references,
            "field": self._build_field,
            "table_body": self._build_table_body,
            "add_column": self._build_add_column,
            "drop_column": lambda doc, loc: DropColumnExpr(self.build_identifier(_require(doc, "name", loc), loc)),
            "add_constraint": self._build_add_constraint,
            "rename_to": lambda doc, loc: RenameToExpr(self.build_identifier(_require(doc, "new_name", loc), loc)),
        }

    def load_file(self, path: str | Path) -> list[Statement]:
        """
        Load statements from a YAML or JSON file.

        Args:
            path: Path to the statement document

        Returns:
            Statements in document order

        Raises:
            StatementLoadError: If the file cannot be read or is malformed
        """
        path = Path(path)
        file_format = SUPPORTED_DOCUMENT_EXTENSIONS.get(path.suffix.lower())
        if file_format is None:
            supported = ", ".join(sorted(SUPPORTED_DOCUMENT_EXTENSIONS))
            raise StatementLoadError(str(path), f"unsupported file type (expected {supported})")

        try:
            with open(path, encoding="utf-8") as f:
                if file_format == "yaml":
                    document = yaml.safe_load(f)
                else:
                    document = json.load(f)
        except OSError as e:
            raise StatementLoadError(str(path), f"cannot read file: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise StatementLoadError(str(path), f"cannot parse {file_format}: {e}") from e

        statements = self.load_document(document, location=path.name)
        logger.info(f"Loaded {len(statements)} statements from {path}")
        return statements

    def load_document(self, document: Any, location: str = "document") -> list[Statement]:
        """
        Build statements from a loaded document.

        The document is either a list of statement documents or a mapping with
        a ``statements`` list.
        """
        if isinstance(document, Mapping):
            document = _require(document, "statements", location)
        if not isinstance(document, list):
            raise StatementLoadError(location, "expected a list of statements")

        return [
            self.build_statement(doc, f"{location}:statements[{i}]")
            for i, doc in enumerate(document)
        ]

    def build_statement(self, doc: Any, location: str = "statement") -> Statement:
        """Build one statement node from its document."""
        if not isinstance(doc, Mapping):
            raise StatementLoadError(location, "statement must be a mapping")
        kind = str(_require(doc, "kind", location)).lower()
        builder = self._statement_builders.get(kind)
        if builder is None:
            raise StatementLoadError(location, f"unknown statement kind '{kind}'")
        return builder(doc, location)

    def build_expression(self, doc: Any, location: str = "expression") -> Expression:
        """Build one expression node; strings and numbers become literals."""
        if isinstance(doc, bool):
            return Literal("true" if doc else "false")
        if isinstance(doc, (str, int, float)):
            return Literal(str(doc))
        if not isinstance(doc, Mapping):
            raise StatementLoadError(location, f"cannot build an expression from {type(doc).__name__}")
        kind = str(_require(doc, "kind", location)).lower()
        builder = self._expression_builders.get(kind)
        if builder is None:
            raise StatementLoadError(location, f"unknown expression kind '{kind}'")
        return builder(doc, location)

    def build_identifier(self, doc: Any, location: str) -> Identifier:
        """Strings become names; ``{container, name}`` mappings become selectors."""
        if isinstance(doc, str):
            return Name(doc)
        if isinstance(doc, Mapping):
            name = str(_require(doc, "name", location))
            container = doc.get("container")
            return Selector(str(container), name) if container else Name(name)
        raise StatementLoadError(location, f"cannot build an identifier from {type(doc).__name__}")

    def build_target(self, doc: Any, location: str) -> SqlTarget:
        try:
            return SqlTarget(str(doc).lower())
        except ValueError as e:
            raise StatementLoadError(location, f"unknown target '{doc}'") from e

    def build_table(self, doc: Any, location: str) -> TableDesc:
        if isinstance(doc, Mapping) and "table" in doc:
            return TableDesc(
                self.build_identifier(doc["table"], f"{location}.table"),
                str(doc.get("alias") or ""),
            )
        return TableDesc(self.build_identifier(doc, location))

    # Statements

    def _build_alter(self, doc: Mapping, loc: str) -> AlterStmt:
        return AlterStmt(
            target=self.build_target(_require(doc, "target", loc), f"{loc}.target"),
            name=self.build_identifier(_require(doc, "name", loc), f"{loc}.name"),
            alter=self.build_expression(_require(doc, "alter", loc), f"{loc}.alter"),
        )

    def _build_create(self, doc: Mapping, loc: str) -> CreateStmt:
        create = doc.get("create")
        return CreateStmt(
            target=self.build_target(_require(doc, "target", loc), f"{loc}.target"),
            name=self.build_identifier(_require(doc, "name", loc), f"{loc}.name"),
            create=self.build_expression(create, f"{loc}.create") if create is not None else None,
            if_not_exists=_flag(doc, "if_not_exists", loc),
        )

    def _build_drop(self, doc: Mapping, loc: str) -> DropStmt:
        return DropStmt(
            target=self.build_target(_require(doc, "target", loc), f"{loc}.target"),
            name=self.build_identifier(_require(doc, "name", loc), f"{loc}.name"),
        )

    def _build_insert(self, doc: Mapping, loc: str) -> InsertStmt:
        raw_values = _require(doc, "values", loc)
        if isinstance(raw_values, Mapping):
            pairs = list(raw_values.items())
        elif isinstance(raw_values, list):
            pairs = []
            for i, item in enumerate(raw_values):
                item_loc = f"{loc}.values[{i}]"
                if not isinstance(item, Mapping):
                    raise StatementLoadError(item_loc, "value must be a mapping with 'field' and 'value'")
                pairs.append((_require(item, "field", item_loc), _require(item, "value", item_loc)))
        else:
            raise StatementLoadError(f"{loc}.values", "expected a mapping or a list of field/value pairs")

        values = [
            (str(field), self.build_expression(value, f"{loc}.values.{field}"))
            for field, value in pairs
        ]

        on_conflict = None
        conflict_doc = doc.get("on_conflict")
        if conflict_doc is not None:
            conflict_loc = f"{loc}.on_conflict"
            if not isinstance(conflict_doc, Mapping):
                raise StatementLoadError(conflict_loc, "on_conflict must be a mapping")
            on_conflict = OnConflict(
                cause=self.build_expression(_require(conflict_doc, "cause", conflict_loc), f"{conflict_loc}.cause"),
                set=self._build_list(conflict_doc.get("set", []), f"{conflict_loc}.set"),
            )

        return InsertStmt(
            table=self.build_table(_require(doc, "table", loc), f"{loc}.table"),
            values=values,
            on_conflict=on_conflict,
        )

    def _build_update(self, doc: Mapping, loc: str) -> UpdateStmt:
        where = doc.get("where")
        return UpdateStmt(
            table=self.build_table(_require(doc, "table", loc), f"{loc}.table"),
            set=self._build_list(_require(doc, "set", loc), f"{loc}.set"),
            where=self.build_expression(where, f"{loc}.where") if where is not None else None,
        )

    def _build_select(self, doc: Mapping, loc: str) -> SelectStmt:
        where = doc.get("where")
        return SelectStmt(
            columns=self._build_list(_require(doc, "columns", loc), f"{loc}.columns"),
            from_=self.build_table(_require(doc, "from", loc), f"{loc}.from"),
            where=self.build_expression(where, f"{loc}.where") if where is not None else None,
        )

    def _build_with(self, doc: Mapping, loc: str) -> WithStmt:
        return WithStmt(
            name=str(_require(doc, "name", loc)),
            with_=self._build_embedded_select(_require(doc, "with", loc), f"{loc}.with"),
            select=self._build_embedded_select(_require(doc, "select", loc), f"{loc}.select"),
        )

    def _build_embedded_select(self, doc: Any, loc: str) -> SelectStmt:
        if not isinstance(doc, Mapping):
            raise StatementLoadError(loc, "expected a select mapping")
        return self._build_select(doc, loc)

    # Expressions

    def _build_list(self, docs: Any, loc: str) -> list[Expression]:
        if not isinstance(docs, list):
            raise StatementLoadError(loc, "expected a list")
        return [self.build_expression(d, f"{loc}[{i}]") for i, d in enumerate(docs)]

    def _build_binary(self, doc: Mapping, loc: str) -> BinaryExpr:
        return BinaryExpr(
            left=self.build_expression(_require(doc, "left", loc), f"{loc}.left"),
            operator=str(_require(doc, "operator", loc)),
            right=self.build_expression(_require(doc, "right", loc), f"{loc}.right"),
        )

    def _build_set(self, doc: Mapping, loc: str) -> SetExpr:
        return SetExpr(
            field=self.build_identifier(_require(doc, "field", loc), f"{loc}.field"),
            value=self.build_expression(_require(doc, "value", loc), f"{loc}.value"),
        )

    def _build_references(self, doc: Mapping, loc: str) -> ReferencesExpr:
        return ReferencesExpr(
            table=self.build_identifier(_require(doc, "table", loc), f"{loc}.table"),
            column=str(doc.get("column") or ""),
            on_delete=str(doc.get("on_delete") or ""),
            on_update=str(doc.get("on_update") or ""),
        )

    def _build_field(self, doc: Mapping, loc: str) -> FieldDescriber:
        if not isinstance(doc, Mapping):
            raise StatementLoadError(loc, "field must be a mapping")
        return FieldDescriber(
            name=self.build_identifier(_require(doc, "name", loc), f"{loc}.name"),
            data_type=self.build_identifier(_require(doc, "type", loc), f"{loc}.type"),
            constraints=tuple(self._build_list(doc.get("constraints", []), f"{loc}.constraints")),
        )

    def _build_table_body(self, doc: Mapping, loc: str) -> TableBodyDescriber:
        fields = doc.get("fields", [])
        if not isinstance(fields, list):
            raise StatementLoadError(f"{loc}.fields", "expected a list")
        return TableBodyDescriber(
            tuple(self._build_field(f, f"{loc}.fields[{i}]") for i, f in enumerate(fields))
        )

    def _build_add_column(self, doc: Mapping, loc: str) -> AddColumnExpr:
        return AddColumnExpr(
            field=self._build_field(_require(doc, "field", loc), f"{loc}.field"),
            if_not_exists=_flag(doc, "if_not_exists", loc),
        )

    def _build_add_constraint(self, doc: Mapping, loc: str) -> AddConstraintExpr:
        return AddConstraintExpr(
            name=self.build_identifier(_require(doc, "name", loc), f"{loc}.name"),
            body=self.build_expression(_require(doc, "body", loc), f"{loc}.body"),
        )


def _require(doc: Mapping, key: str, location: str) -> Any:
    if key not in doc or doc[key] is None:
        raise StatementLoadError(location, f"missing '{key}'")
    return doc[key]


def _flag(doc: Mapping, key: str, location: str) -> bool:
    value = doc.get(key)
    if value is None:
        return False
    try:
        return to_bool(value)
    except ValueError as e:
        raise StatementLoadError(f"{location}.{key}", str(e)) from e


def load_statements(path: str | Path) -> list[Statement]:
    """
    Convenience function to load statements from a YAML or JSON file.

    Args:
        path: Path to the statement document

    Returns:
        Statements in document order
    """
    return StatementLoader().load_file(path)
