"""
Document core: namespace registry, node model, materializer, path queries,
text serializer and cursors.
"""

from .cursor import DocumentCursor, LiveCursor, MaterializedCursor
from .exceptions import ArityError, DocumentParseError, FrozenCursorError, SoapKitError, TransportError
from .materializer import materialize
from .namespaces import NamespaceRegistry
from .node import Node
from .query import resolve, resolve_string
from .serializer import TextSerializer
from .values import GenericValue, ListValue, Mapping, Scalar, coalesce

__all__ = [
    "NamespaceRegistry",
    "Node",
    "GenericValue",
    "Scalar",
    "Mapping",
    "ListValue",
    "coalesce",
    "materialize",
    "resolve",
    "resolve_string",
    "TextSerializer",
    "DocumentCursor",
    "LiveCursor",
    "MaterializedCursor",
    "SoapKitError",
    "ArityError",
    "FrozenCursorError",
    "DocumentParseError",
    "TransportError",
]
