"""
Name resolution: splitting an identifier into its schema and object parts.
"""

from migrast.shared.exceptions import UnresolvableSchemaReference

from .identifiers import Identifier, Name, Selector
from .targets import SqlTarget

SCHEMA_SEPARATOR = "."


def resolve_name(target: SqlTarget, name: Identifier) -> tuple[str, str]:
    """
    Resolve an identifier to a (schema, object) pair.

    Args:
        target: Kind of object the identifier names
        name: Identifier to resolve

    Returns:
        Tuple of (schema, object); object is empty for schema targets

    Raises:
        UnresolvableSchemaReference: If an unqualified name does not name a schema
        TypeError: If name is not a known identifier variant
    """
    if isinstance(name, Selector):
        if not name.container:
            raise UnresolvableSchemaReference(name.name, target)
        if not name.name and target is not SqlTarget.SCHEMA:
            raise UnresolvableSchemaReference(str(name), target)
        return name.container, name.name
    if isinstance(name, Name):
        text = name.get_name()
        if SCHEMA_SEPARATOR in text:
            schema, obj = text.split(SCHEMA_SEPARATOR, 1)
            if not schema or not obj:
                raise UnresolvableSchemaReference(text, target)
            return schema, obj
        if target is SqlTarget.SCHEMA:
            return text, ""
        raise UnresolvableSchemaReference(text, target)
    raise TypeError(f"Unsupported identifier: {name!r}")
