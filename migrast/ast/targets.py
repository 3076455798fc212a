"""
DDL object kinds addressed by statements.
"""

from enum import Enum


class SqlTarget(Enum):
    """Kinds of schema objects a DDL statement can address."""

    SCHEMA = "schema"
    TABLE = "table"
    COLUMN = "column"
    CONSTRAINT = "constraint"
    INDEX = "index"
    TYPE = "type"
    DOMAIN = "domain"
    SEQUENCE = "sequence"
    VIEW = "view"
    FUNCTION = "function"
    TRIGGER = "trigger"
    EXTENSION = "extension"

    def __str__(self) -> str:
        return self.value
