# ============================================================================
# SCOPE: CORE LAYER
# Description: Namespace registry consumed by document builders.
# ============================================================================
"""Namespace Registry.

Maps short namespace prefixes to URIs. Element builders *consume* an entry
the first time its prefix is used so the ``xmlns`` declaration is emitted
once; attribute builders only *look up* entries because the declaration must
be repeated on each element that carries a qualified attribute.
"""

from .exceptions import ArityError


class NamespaceRegistry:
    """Mutable prefix -> URI mapping owned by one document root."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def declare(self, prefix: str, uri: str) -> None:
        """Store a namespace, replacing any previous URI for ``prefix``."""
        self._entries[prefix] = uri

    def declare_pairs(self, *pairs: str) -> "NamespaceRegistry":
        """Declare ``(prefix, uri, prefix, uri, ...)`` pairs.

        Raises:
            ArityError: If an odd number of strings is given.
        """
        if len(pairs) % 2 != 0:
            raise ArityError("declare_pairs", 2, len(pairs))
        for i in range(0, len(pairs), 2):
            self.declare(pairs[i], pairs[i + 1])
        return self

    def consume(self, prefix: str) -> str | None:
        """Remove and return the URI for ``prefix``, or None if not declared."""
        return self._entries.pop(prefix, None)

    def lookup(self, prefix: str) -> str | None:
        """Return the URI for ``prefix`` without removing it."""
        return self._entries.get(prefix)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NamespaceRegistry({self._entries!r})"
