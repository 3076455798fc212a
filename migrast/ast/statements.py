"""
Statement nodes.

Each statement renders to SQL text and reports two dependency sequences:
``depended_on()`` lists the schema objects that must already exist, and
``solved()`` lists the schema objects the statement brings into existence.
Statements are frozen once built; every operation is a pure function of the
tree, so a built statement can be shared between threads.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from migrast.shared.constants import ALWAYS_TRUE_CONDITION
from migrast.shared.text import join_list, join_non_empty

from .dependencies import (
    NO_DEPENDENCIES,
    Dependencies,
    NamedObject,
    concat_dependencies,
    depends_on,
)
from .expressions import AddColumnExpr, Expression, TableBodyDescriber, as_expression
from .identifiers import Identifier, as_identifier
from .resolution import resolve_name
from .targets import SqlTarget


class Statement(ABC):
    """Base class for all statement nodes."""

    @abstractmethod
    def render(self) -> str:
        """Render the statement to SQL text."""
        pass

    @abstractmethod
    def depended_on(self) -> Dependencies:
        """Schema objects that must exist before this statement runs."""
        pass

    @abstractmethod
    def solved(self) -> Dependencies:
        """Schema objects this statement brings into existence."""
        pass

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class TableDesc:
    """A table reference with an optional alias."""

    table: Identifier
    alias: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", as_identifier(self.table))

    def __str__(self) -> str:
        return join_non_empty(self.table, self.alias)


@dataclass(frozen=True)
class OnConflict:
    """``on conflict ... do update set ...`` clause of an insert."""

    cause: Expression
    set: tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "cause", as_expression(self.cause))
        object.__setattr__(self, "set", tuple(as_expression(s) for s in self.set))

    def render(self) -> str:
        return join_non_empty("on conflict", self.cause, "do update set", join_list(self.set))

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class AlterStmt(Statement):
    target: SqlTarget
    name: Identifier
    alter: Expression

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", as_identifier(self.name))
        object.__setattr__(self, "alter", as_expression(self.alter))

    def render(self) -> str:
        return join_non_empty("alter", self.target, self.name, self.alter)

    def depended_on(self) -> Dependencies:
        return self.alter.depended_on()

    def solved(self) -> Dependencies:
        schema, obj = resolve_name(self.target, self.name)
        if isinstance(self.alter, AddColumnExpr):
            return depends_on(schema, obj, self.alter.column_name)
        return depends_on(schema, obj)


@dataclass(frozen=True)
class CreateStmt(Statement):
    target: SqlTarget
    name: Identifier
    create: Expression | None = None
    if_not_exists: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", as_identifier(self.name))
        if self.create is not None:
            object.__setattr__(self, "create", as_expression(self.create))

    def render(self) -> str:
        if self.target is SqlTarget.CONSTRAINT:
            # The constraint body names its own table and constraint.
            return join_non_empty("create", self.create)
        return join_non_empty(
            "create",
            self.target,
            "if not exists" if self.if_not_exists else "",
            self.name,
            self.create,
        )

    def depended_on(self) -> Dependencies:
        if self.create is not None:
            return self.create.depended_on()
        return NO_DEPENDENCIES

    def solved(self) -> Dependencies:
        schema, obj = resolve_name(self.target, self.name)
        result = depends_on(schema, obj)
        if isinstance(self.create, TableBodyDescriber):
            columns = tuple(NamedObject(schema, obj, f) for f in self.create.field_names())
            result = concat_dependencies(result, columns)
        return result


@dataclass(frozen=True)
class DropStmt(Statement):
    """Drops are dependency-inert: they neither need nor provide objects."""

    target: SqlTarget
    name: Identifier

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", as_identifier(self.name))

    def render(self) -> str:
        return join_non_empty("drop", self.target, self.name)

    def depended_on(self) -> Dependencies:
        return NO_DEPENDENCIES

    def solved(self) -> Dependencies:
        return NO_DEPENDENCIES


@dataclass(frozen=True)
class InsertStmt(Statement):
    """
    Insert of one row.

    ``values`` is an ordered sequence of (field, expression) pairs; rendering
    keeps that order so generated text is stable across runs.
    """

    table: TableDesc
    values: tuple[tuple[str, Expression], ...] = ()
    on_conflict: OnConflict | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.table, TableDesc):
            object.__setattr__(self, "table", TableDesc(self.table))
        values = self.values.items() if isinstance(self.values, Mapping) else self.values
        object.__setattr__(
            self, "values", tuple((str(f), as_expression(v)) for f, v in values)
        )

    @property
    def fields(self) -> list[str]:
        return [f for f, _ in self.values]

    def render(self) -> str:
        return join_non_empty(
            "insert into",
            self.table.table,
            f"({join_list(self.fields)})",
            "values",
            f"({join_list(v for _, v in self.values)})",
            self.on_conflict,
        )

    def depended_on(self) -> Dependencies:
        schema, obj = resolve_name(SqlTarget.TABLE, self.table.table)
        return depends_on(schema, obj)

    def solved(self) -> Dependencies:
        return NO_DEPENDENCIES


@dataclass(frozen=True)
class UpdateStmt(Statement):
    table: TableDesc
    set: tuple[Expression, ...] = ()
    where: Expression | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.table, TableDesc):
            object.__setattr__(self, "table", TableDesc(self.table))
        object.__setattr__(self, "set", tuple(as_expression(s) for s in self.set))
        if self.where is not None:
            object.__setattr__(self, "where", as_expression(self.where))

    def render(self) -> str:
        return join_non_empty(
            "update",
            self.table,
            "set",
            join_list(self.set),
            "where",
            self.where if self.where is not None else ALWAYS_TRUE_CONDITION,
        )

    def depended_on(self) -> Dependencies:
        # The where clause is not inspected.
        return concat_dependencies(*(s.depended_on() for s in self.set))

    def solved(self) -> Dependencies:
        return NO_DEPENDENCIES


@dataclass(frozen=True)
class SelectStmt(Statement):
    """A bare select; usually embedded in a create or with statement."""

    columns: tuple[Expression, ...]
    from_: TableDesc
    where: Expression | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(as_expression(c) for c in self.columns))
        if not isinstance(self.from_, TableDesc):
            object.__setattr__(self, "from_", TableDesc(self.from_))
        if self.where is not None:
            object.__setattr__(self, "where", as_expression(self.where))

    def render(self) -> str:
        return join_non_empty(
            "select",
            join_list(self.columns),
            "from",
            self.from_,
            "where",
            self.where if self.where is not None else ALWAYS_TRUE_CONDITION,
        )

    def depended_on(self) -> Dependencies:
        return NO_DEPENDENCIES

    def solved(self) -> Dependencies:
        return NO_DEPENDENCIES


@dataclass(frozen=True)
class WithStmt(Statement):
    """``with <name> as (<with_>) <select>``."""

    name: str
    with_: SelectStmt
    select: SelectStmt

    def render(self) -> str:
        return join_non_empty("with", self.name, "as", f"({self.with_})", self.select)

    def depended_on(self) -> Dependencies:
        return concat_dependencies(self.select.depended_on(), self.with_.depended_on())

    def solved(self) -> Dependencies:
        return concat_dependencies(self.select.solved(), self.with_.solved())
