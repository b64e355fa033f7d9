# ============================================================================
# SCOPE: CORE LAYER
# Description: Builder and query cursors over document trees.
# ============================================================================
"""Document cursors.

Two kinds of cursor share one query/serialize capability:

- ``LiveCursor`` wraps a Node under construction. It can add children and
  attributes until it is first queried; the first query materializes the
  subtree and freezes the cursor. ``str()`` only renders a preview and
  leaves the cursor live.
- ``MaterializedCursor`` wraps an immutable Generic Value snapshot, e.g. a
  sub-result returned by ``get_builder``. It has no registry and no parent.

Usage:
    registry = NamespaceRegistry().declare_pairs("mes", "urn:messages")
    body = LiveCursor.root("Body", "SOAP-ENV", registry)
    request = body.add_object("Request", "mes", "Status", "OK", "Id", "7")
    request.get_string_value("Request", "Status")  # "OK"
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..config.settings import get_settings
from .exceptions import ArityError, FrozenCursorError
from .materializer import materialize
from .namespaces import NamespaceRegistry
from .node import Node
from .query import resolve, resolve_string
from .serializer import TextSerializer
from .values import GenericValue, Mapping

logger = logging.getLogger(__name__)


class DocumentCursor(ABC):
    """Query and serialization operations common to all cursors."""

    @abstractmethod
    def snapshot(self) -> Mapping:
        """Return the materialized value queries run against."""

    def get_value(self, *keys: str) -> GenericValue | None:
        """Return the value at ``keys`` or None if the path does not resolve.

        Example:
            For ``<Security><UsernameToken><Username>joe</Username>...``
            ``get_value("Security", "UsernameToken", "Username")`` is
            ``Scalar("joe")``.
        """
        return resolve(self.snapshot(), keys)

    def has_value(self, *keys: str) -> bool:
        return self.get_value(*keys) is not None

    def get_string_value(self, *keys: str) -> str | None:
        """Return the text at ``keys`` if it is a scalar, else None."""
        return resolve_string(self.snapshot(), keys)

    def get_builder(self, *keys: str) -> MaterializedCursor | None:
        """Return a cursor rooted at the mapping found at ``keys``.

        Returns None when the path is missing or does not lead to a mapping.
        """
        result = self.get_value(*keys)
        if isinstance(result, Mapping):
            return MaterializedCursor(result)
        return None

    def to_xml_string(self, *keys: str, escape: bool | None = None) -> str | None:
        """Render the value at ``keys`` as tab-indented tagged text.

        Args:
            *keys: Path of the value to render.
            escape: Escape scalar text; defaults to ``SOAPKIT_ESCAPE_TEXT``.

        Returns:
            The rendered text, or None if nothing can be rendered.
        """
        if escape is None:
            escape = get_settings().SOAPKIT_ESCAPE_TEXT
        return TextSerializer(escape=escape).to_xml_string(self.snapshot(), keys)

    def to_python(self) -> dict[str, Any]:
        """Return the snapshot as plain dicts, lists and strings."""
        return self.snapshot().to_python()

    def _peek(self) -> Mapping:
        return self.snapshot()

    def __str__(self) -> str:
        """Render the whole document; never freezes a live cursor."""
        serializer = TextSerializer(escape=get_settings().SOAPKIT_ESCAPE_TEXT)
        return serializer.to_xml_string(self._peek()) or ""


class MaterializedCursor(DocumentCursor):
    """Read-only cursor over an existing snapshot."""

    def __init__(self, value: Mapping) -> None:
        self._value = value

    def snapshot(self) -> Mapping:
        return self._value

    def __repr__(self) -> str:
        return f"MaterializedCursor(keys={list(self._value.entries)!r})"


class LiveCursor(DocumentCursor):
    """Builder cursor over a Node under construction.

    Attributes:
        node: The element this cursor builds on.
        registry: Namespace registry shared with every cursor of the document.
    """

    def __init__(
        self,
        node: Node,
        registry: NamespaceRegistry,
        parent: LiveCursor | None = None,
    ) -> None:
        self.node = node
        self.registry = registry
        self._parent = parent
        self._snapshot: Mapping | None = None

    @classmethod
    def root(
        cls,
        name: str,
        prefix: str | None = None,
        registry: NamespaceRegistry | None = None,
    ) -> LiveCursor:
        """Create a cursor over a new, parentless element."""
        return cls(Node(local_name=name, prefix=prefix), registry if registry is not None else NamespaceRegistry())

    @property
    def is_materialized(self) -> bool:
        return self._snapshot is not None

    def snapshot(self) -> Mapping:
        """Materialize the subtree on first use and cache the result."""
        if self._snapshot is None:
            self._snapshot = materialize(self.node)
        return self._snapshot

    def _peek(self) -> Mapping:
        # Uncached view of the current tree, for display while still building.
        if self._snapshot is not None:
            return self._snapshot
        return materialize(self.node)

    # =========================================================================
    # Building
    # =========================================================================

    def add_object(self, name: str, prefix: str, *pairs: str) -> LiveCursor:
        """Add a child element with one leaf child per ``(name, value)`` pair.

        Example:
            ``add_object("UpdatePaymentStatusRequest", "mes",
            "NewStatus", "APPROVED", "PaymentIdentifier", "12345")`` builds::

                <mes:UpdatePaymentStatusRequest xmlns:mes="...">
                  <mes:NewStatus>APPROVED</mes:NewStatus>
                  <mes:PaymentIdentifier>12345</mes:PaymentIdentifier>
                </mes:UpdatePaymentStatusRequest>

            The ``xmlns`` declaration is only emitted if ``mes`` was still in
            the registry; it is consumed here.

        Args:
            name: Local name of the new element.
            prefix: Namespace prefix for the element and its leaves.
            *pairs: Alternating leaf names and text values.

        Returns:
            A cursor over the new element.

        Raises:
            ArityError: If ``pairs`` has odd length.
            FrozenCursorError: If this cursor has already been queried.
        """
        self._ensure_mutable("add_object")
        if len(pairs) % 2 != 0:
            raise ArityError("add_object", 2, len(pairs))

        element = Node(local_name=name, prefix=prefix)
        uri = self.registry.consume(prefix)
        if uri is not None:
            element.declarations[prefix] = uri
        for i in range(0, len(pairs), 2):
            element.add_child(Node(local_name=pairs[i], prefix=prefix, text=pairs[i + 1]))

        self.node.add_child(element)
        return LiveCursor(element, self.registry, self)

    def add_object_to_list(self, name: str, prefix: str, *pairs: str) -> LiveCursor:
        """Like ``add_object`` but returns this cursor, for repeated siblings."""
        self.add_object(name, prefix, *pairs)
        return self

    def add_list(self, name: str, prefix: str) -> LiveCursor:
        """Add an empty child element meant to hold repeated entries."""
        self._ensure_mutable("add_list")
        element = self.node.add_child(Node(local_name=name, prefix=prefix))
        return LiveCursor(element, self.registry, self)

    def add_attribute(self, *pairs: str) -> LiveCursor:
        """Set plain attributes from ``(name, value)`` pairs.

        Raises:
            ArityError: If ``pairs`` has odd length.
        """
        self._ensure_mutable("add_attribute")
        if len(pairs) % 2 != 0:
            raise ArityError("add_attribute", 2, len(pairs))
        for i in range(0, len(pairs), 2):
            self.node.attributes[(None, pairs[i])] = pairs[i + 1]
        return self

    def add_attribute_with_namespace(self, *triples: str) -> LiveCursor:
        """Set qualified attributes from ``(name, value, prefix)`` triples.

        Each prefix is looked up (not consumed) in the registry and declared
        on this element. Triples whose prefix is unknown are skipped.

        Raises:
            ArityError: If ``triples`` is not a multiple of three long.
        """
        self._ensure_mutable("add_attribute_with_namespace")
        if len(triples) % 3 != 0:
            raise ArityError("add_attribute_with_namespace", 3, len(triples))

        for i in range(0, len(triples), 3):
            name, value, prefix = triples[i], triples[i + 1], triples[i + 2]
            uri = self.registry.lookup(prefix)
            if uri is None:
                logger.debug(f"Skipping attribute {prefix}:{name}, namespace not declared")
                continue
            self.node.declarations[prefix] = uri
            self.node.attributes[(prefix, name)] = value
        return self

    def set_value(self, text: str) -> LiveCursor:
        """Set the element's text content."""
        self._ensure_mutable("set_value")
        self.node.text = text
        return self

    def get_parent(self) -> LiveCursor | None:
        """Return the cursor this one was created from, or None at the root."""
        return self._parent

    def _ensure_mutable(self, operation: str) -> None:
        if self._snapshot is not None:
            raise FrozenCursorError(f"{operation}: cursor over <{self.node.local_name}> has already been materialized")

    def __repr__(self) -> str:
        state = "materialized" if self.is_materialized else "live"
        return f"LiveCursor(<{self.node.qualified_name}>, {state})"
