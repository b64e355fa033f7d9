# ============================================================================
# SCOPE: CORE LAYER
# Description: Path Query Engine over Generic Values.
# ============================================================================
"""Path Query Engine.

A path is a sequence of string keys. Keys address mapping entries by local
name; when the current value is a list, the key must be a non-negative
decimal index. Any mismatch resolves to ``None``.
"""

from collections.abc import Sequence

from .values import GenericValue, ListValue, Mapping, Scalar


def parse_index(key: str) -> int | None:
    """Return ``key`` as a list index, or None if it is not a plain integer."""
    if not key.isdecimal():
        return None
    try:
        return int(key)
    except ValueError:
        # Too many digits for int(); no list is that long.
        return None


def resolve(value: GenericValue, keys: Sequence[str]) -> GenericValue | None:
    """Walk ``value`` along ``keys``.

    Args:
        value: Starting value (a cursor snapshot).
        keys: Path keys.

    Returns:
        The value at the path, or None if the path does not resolve.
    """
    current: GenericValue | None = value
    for key in keys:
        match current:
            case Mapping():
                current = current.get(key)
            case ListValue():
                index = parse_index(key)
                if index is None or index >= len(current):
                    return None
                current = current[index]
            case _:
                return None
        if current is None:
            return None
    return current


def resolve_string(value: GenericValue, keys: Sequence[str]) -> str | None:
    """Resolve ``keys`` and return the text if the result is a scalar."""
    result = resolve(value, keys)
    if isinstance(result, Scalar):
        return result.text
    return None
