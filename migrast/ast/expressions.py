"""
Expression nodes.

Every expression renders to SQL text. Most contribute no dependency edges;
the ones that reference other schema objects (user-defined types, foreign
keys, added columns, table bodies) report them through ``depended_on()``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from migrast.shared.text import join_list, join_non_empty

from .dependencies import NO_DEPENDENCIES, Dependencies, concat_dependencies, depends_on
from .identifiers import Identifier, Name, Selector, as_identifier
from .resolution import SCHEMA_SEPARATOR, resolve_name
from .targets import SqlTarget


class Expression(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def render(self) -> str:
        """Render the expression to SQL text."""
        pass

    def depended_on(self) -> Dependencies:
        """Schema objects this expression requires to exist."""
        return NO_DEPENDENCIES

    def __str__(self) -> str:
        return self.render()


def as_expression(value: "str | Expression") -> Expression:
    """Coerce a string into a Literal, passing expressions through unchanged."""
    if isinstance(value, Expression):
        return value
    if isinstance(value, str):
        return Literal(value)
    raise TypeError(f"Cannot build an expression from {type(value).__name__}")


def _set_identifier(node: object, attr: str) -> None:
    object.__setattr__(node, attr, as_identifier(getattr(node, attr)))


def _set_expression(node: object, attr: str) -> None:
    object.__setattr__(node, attr, as_expression(getattr(node, attr)))


@dataclass(frozen=True)
class Literal(Expression):
    """Verbatim SQL text: a value, keyword sequence or opaque fragment."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class IdentExpr(Expression):
    """An identifier used as an expression (column or table reference)."""

    ident: Identifier

    def __post_init__(self) -> None:
        _set_identifier(self, "ident")

    def render(self) -> str:
        return str(self.ident)


@dataclass(frozen=True)
class BinaryExpr(Expression):
    """``left <operator> right``; also used for compound where clauses."""

    left: Expression
    operator: str
    right: Expression

    def __post_init__(self) -> None:
        _set_expression(self, "left")
        _set_expression(self, "right")

    def render(self) -> str:
        return join_non_empty(self.left, self.operator, self.right)

    def depended_on(self) -> Dependencies:
        return concat_dependencies(self.left.depended_on(), self.right.depended_on())


@dataclass(frozen=True)
class SetExpr(Expression):
    """Assignment ``field = value`` of an update or on-conflict clause."""

    field: Identifier
    value: Expression

    def __post_init__(self) -> None:
        _set_identifier(self, "field")
        _set_expression(self, "value")

    def render(self) -> str:
        return f"{self.field} = {self.value}"

    def depended_on(self) -> Dependencies:
        return self.value.depended_on()


@dataclass(frozen=True)
class ReferencesExpr(Expression):
    """Foreign key reference: ``references <table> (<column>)``."""

    table: Identifier
    column: str = ""
    on_delete: str = ""
    on_update: str = ""

    def __post_init__(self) -> None:
        _set_identifier(self, "table")

    def render(self) -> str:
        return join_non_empty(
            "references",
            self.table,
            f"({self.column})" if self.column else "",
            f"on delete {self.on_delete}" if self.on_delete else "",
            f"on update {self.on_update}" if self.on_update else "",
        )

    def depended_on(self) -> Dependencies:
        schema, obj = resolve_name(SqlTarget.TABLE, self.table)
        if self.column:
            return concat_dependencies(depends_on(schema, obj), depends_on(schema, obj, self.column))
        return depends_on(schema, obj)


@dataclass(frozen=True)
class FieldDescriber(Expression):
    """Column definition: ``<name> <type> <constraints...>``."""

    name: Identifier
    data_type: Identifier
    constraints: tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        _set_identifier(self, "name")
        _set_identifier(self, "data_type")
        object.__setattr__(self, "constraints", tuple(as_expression(c) for c in self.constraints))

    def render(self) -> str:
        return join_non_empty(self.name, self.data_type, *self.constraints)

    def type_dependencies(self) -> Dependencies:
        # Only schema-qualified types are user-defined; built-ins never are.
        data_type = self.data_type
        if isinstance(data_type, Selector) or (
            isinstance(data_type, Name) and SCHEMA_SEPARATOR in data_type.get_name()
        ):
            schema, obj = resolve_name(SqlTarget.TYPE, data_type)
            return depends_on(schema, obj)
        return NO_DEPENDENCIES

    def depended_on(self) -> Dependencies:
        return concat_dependencies(
            self.type_dependencies(), *(c.depended_on() for c in self.constraints)
        )


@dataclass(frozen=True)
class TableBodyDescriber(Expression):
    """Ordered column definitions of a table: ``(<field>, <field>, ...)``."""

    fields: tuple[FieldDescriber, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def field_names(self) -> list[str]:
        return [f.name.get_name() for f in self.fields]

    def render(self) -> str:
        return f"({join_list(self.fields)})"

    def depended_on(self) -> Dependencies:
        return concat_dependencies(*(f.depended_on() for f in self.fields))


@dataclass(frozen=True)
class AddColumnExpr(Expression):
    """Alter action ``add column <field>``."""

    field: FieldDescriber
    if_not_exists: bool = False

    @property
    def column_name(self) -> str:
        return self.field.name.get_name()

    def render(self) -> str:
        return join_non_empty("add column", "if not exists" if self.if_not_exists else "", self.field)

    def depended_on(self) -> Dependencies:
        return self.field.depended_on()


@dataclass(frozen=True)
class DropColumnExpr(Expression):
    """Alter action ``drop column <name>``."""

    name: Identifier

    def __post_init__(self) -> None:
        _set_identifier(self, "name")

    def render(self) -> str:
        return f"drop column {self.name}"


@dataclass(frozen=True)
class AddConstraintExpr(Expression):
    """Alter action ``add constraint <name> <body>``."""

    name: Identifier
    body: Expression

    def __post_init__(self) -> None:
        _set_identifier(self, "name")
        _set_expression(self, "body")

    def render(self) -> str:
        return join_non_empty("add constraint", self.name, self.body)

    def depended_on(self) -> Dependencies:
        return self.body.depended_on()


@dataclass(frozen=True)
class RenameToExpr(Expression):
    """Alter action ``rename to <new_name>``."""

    new_name: Identifier

    def __post_init__(self) -> None:
        _set_identifier(self, "new_name")

    def render(self) -> str:
        return f"rename to {self.new_name}"
