"""
Custom exceptions for migrast.
"""


class MigrastError(Exception):
    """Base exception for all migrast errors."""

    pass


class UnresolvableSchemaReference(MigrastError):
    """Raised when an unqualified name cannot be split into schema and object."""

    def __init__(self, name: str, target: object = None, *args: object) -> None:
        super().__init__(*args)
        self.name = name
        self.target = target

    def __str__(self) -> str:
        return f"cannot resolve schema for `{self.name}`"


class StatementDependencyError(MigrastError):
    """Raised when dependency extraction fails for one statement of a batch."""

    def __init__(self, index: int, statement: object, cause: Exception, *args: object) -> None:
        super().__init__(*args)
        self.index = index
        self.statement = statement
        self.cause = cause

    @property
    def name(self) -> str | None:
        """The offending name, when the cause carries one."""
        return getattr(self.cause, "name", None)

    def __str__(self) -> str:
        return f"Statement #{self.index} ({self.statement}): {self.cause}"


class StatementLoadError(MigrastError):
    """Raised when a statement document is malformed."""

    def __init__(self, location: str, reason: str, *args: object) -> None:
        super().__init__(*args)
        self.location = location
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid statement document at '{self.location}': {self.reason}"


class RenderValidationError(MigrastError):
    """Raised when rendered SQL is rejected by the SQL toolkit."""

    def __init__(self, sql: str, dialect: str | None, reason: str, *args: object) -> None:
        super().__init__(*args)
        self.sql = sql
        self.dialect = dialect
        self.reason = reason

    def __str__(self) -> str:
        return f"Rendered SQL is not valid {self.dialect or 'SQL'}: {self.reason} [{self.sql}]"
