"""
soapkit

Builder and materializer for SOAP-style namespace-qualified XML documents:
build envelopes with fluent cursors, send them through a transport, and
query or re-render the received document by path.
"""

from soapkit.application.request import ResponseStatus, SoapRequest, SoapResponse
from soapkit.core import (
    ArityError,
    DocumentCursor,
    DocumentParseError,
    FrozenCursorError,
    GenericValue,
    ListValue,
    LiveCursor,
    Mapping,
    MaterializedCursor,
    NamespaceRegistry,
    Node,
    Scalar,
    SoapKitError,
    TransportError,
)
from soapkit.infrastructure.transport import HttpxTransport, Transport

__version__ = "0.1.0"

__all__ = [
    # Envelope and send cycle
    "SoapRequest",
    "SoapResponse",
    "ResponseStatus",
    # Document core
    "NamespaceRegistry",
    "Node",
    "DocumentCursor",
    "LiveCursor",
    "MaterializedCursor",
    "GenericValue",
    "Scalar",
    "Mapping",
    "ListValue",
    # Transport
    "Transport",
    "HttpxTransport",
    # Errors
    "SoapKitError",
    "ArityError",
    "FrozenCursorError",
    "DocumentParseError",
    "TransportError",
]
