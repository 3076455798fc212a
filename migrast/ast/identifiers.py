"""
Identifier model: plain names and qualified selectors.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Name:
    """An unqualified (or dot-joined) name such as ``users`` or ``public.users``."""

    name: str

    def get_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Selector:
    """A name qualified by its container, e.g. ``public`` + ``users``."""

    container: str
    name: str

    def get_name(self) -> str:
        """Return the rightmost component."""
        return self.name

    def __str__(self) -> str:
        return f"{self.container}.{self.name}"


Identifier = Name | Selector


def as_identifier(value: "str | Identifier") -> Identifier:
    """
    Coerce a string into a Name, passing identifiers through unchanged.

    Dotted strings stay a single Name; name resolution splits them later.

    Raises:
        TypeError: If value is neither a string nor an identifier
    """
    if isinstance(value, (Name, Selector)):
        return value
    if isinstance(value, str):
        return Name(value)
    raise TypeError(f"Cannot build an identifier from {type(value).__name__}")
