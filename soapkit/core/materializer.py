# ============================================================================
# SCOPE: CORE LAYER
# Description: Node tree -> Generic Value conversion.
# ============================================================================
"""Document Materializer.

Converts a Node subtree into a Generic Value snapshot. The snapshot of a node
is a one-entry mapping keyed by the node's own local name, so the element a
cursor points at is always the first key of a query path.
"""

import logging

from .node import Node
from .values import GenericValue, Mapping, Scalar, coalesce

logger = logging.getLogger(__name__)


def materialize(node: Node) -> Mapping:
    """Build the snapshot ``{node.local_name: value(node)}``.

    Args:
        node: Root of the subtree to convert.

    Returns:
        Mapping with a single entry for ``node``.
    """
    entries: dict[str, GenericValue] = {}
    coalesce(entries, node.local_name, _value_of(node))
    logger.debug(f"Materialized <{node.local_name}> subtree")
    return Mapping(entries)


def _value_of(node: Node) -> GenericValue:
    # Leaf and explicitly empty elements both become scalars.
    if node.is_leaf:
        return Scalar(node.text or "")

    entries: dict[str, GenericValue] = {}
    for child in node.children:
        coalesce(entries, child.local_name, _value_of(child))
    return Mapping(entries)
