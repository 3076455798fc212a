"""
Text helpers shared by every renderer.
"""

from collections.abc import Iterable


def join_non_empty(*parts: object, separator: str = " ") -> str:
    """
    Join the string form of each part, skipping parts that render empty.

    ``None`` parts are skipped as well, so optional tokens can be passed
    directly without leaving blank gaps.

    Args:
        parts: Tokens to join (any object with a meaningful ``str()``)
        separator: Separator placed between non-empty tokens

    Returns:
        Joined text without leading, trailing or doubled separators
    """
    tokens = []
    for part in parts:
        if part is None:
            continue
        text = str(part)
        if text:
            tokens.append(text)
    return separator.join(tokens)


def join_list(items: Iterable[object]) -> str:
    """Comma-join items in the order given."""
    return ", ".join(str(item) for item in items)


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def to_bool(value: object) -> bool:
    """
    Parse a boolean flag from a document or environment value.

    Raises:
        ValueError: If the value is not a recognised boolean spelling
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value '{value}'")
