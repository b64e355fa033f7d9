# ============================================================================
# SCOPE: CORE LAYER
# Description: Construction-time element model.
# ============================================================================
"""Node - a single namespace-qualified element.

Nodes are produced by ``LiveCursor`` when building and by
``xml_codec.parse`` when reading a received document.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Node:
    """An element with attributes and either text or child elements.

    Attributes:
        local_name: Element name without prefix.
        prefix: Namespace prefix used when rendering, if any.
        namespace: Namespace URI, when known (received documents).
        declarations: ``xmlns:prefix`` declarations emitted on this element.
        attributes: Attribute values keyed by ``(prefix, name)``.
        children: Child elements in document order.
        text: Text content of a leaf element.
    """

    local_name: str
    prefix: str | None = None
    namespace: str | None = None
    declarations: dict[str, str] = field(default_factory=dict)
    attributes: dict[tuple[str | None, str], str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    text: str | None = None

    @property
    def qualified_name(self) -> str:
        """Name as rendered in markup, e.g. ``mes:Request``."""
        return f"{self.prefix}:{self.local_name}" if self.prefix else self.local_name

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def add_child(self, child: Node) -> Node:
        """Append a child and return it for chaining."""
        self.children.append(child)
        return child

    def find(self, local_name: str) -> Node | None:
        """Return the first direct child with the given local name."""
        for child in self.children:
            if child.local_name == local_name:
                return child
        return None
