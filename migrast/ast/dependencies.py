"""
Dependency edge types.

A NamedObject is the unit of dependency tracking: a (schema, object, field)
key where an empty component means "unspecified at this level". Dependencies
are ordered tuples of such keys; insertion order is significant because
consumers report the first offending edge.
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class NamedObject:
    """Three-level qualified key: schema, object, field."""

    schema: str = ""
    object: str = ""
    field: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"schema": self.schema, "object": self.object, "field": self.field}

    def __str__(self) -> str:
        return ".".join(part for part in (self.schema, self.object, self.field) if part)


Dependencies = tuple[NamedObject, ...]

NO_DEPENDENCIES: Dependencies = ()


def depends_on(schema: str, obj: str = "", field: str = "") -> Dependencies:
    """Build a single-edge Dependencies sequence."""
    return (NamedObject(schema, obj, field),)


def concat_dependencies(*groups: Iterable[NamedObject] | None) -> Dependencies:
    """
    Concatenate dependency groups, preserving order and duplicates.

    ``None`` groups are treated as empty.
    """
    result: list[NamedObject] = []
    for group in groups:
        if group:
            result.extend(group)
    return tuple(result)


def dependencies_to_list(deps: Iterable[NamedObject]) -> list[dict[str, str]]:
    """Convert keys to plain dicts for serialization."""
    return [key.to_dict() for key in deps]
