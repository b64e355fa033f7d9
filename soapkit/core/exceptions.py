# ============================================================================
# SCOPE: CORE LAYER
# Description: Error taxonomy for document building, parsing and transport.
# ============================================================================
"""soapkit exceptions.

Missing paths are never raised: query operations return ``None`` instead.
"""


class SoapKitError(Exception):
    """Base class for all soapkit errors."""

    pass


class ArityError(SoapKitError, ValueError):
    """Raised when a variadic pairs/triples argument has the wrong length."""

    def __init__(self, operation: str, group_size: int, received: int) -> None:
        self.operation = operation
        self.group_size = group_size
        self.received = received
        kind = "even" if group_size == 2 else f"a multiple of {group_size}"
        super().__init__(f"{operation}: expected argument count to be {kind}, got {received}")


class FrozenCursorError(SoapKitError):
    """Raised when building on a cursor that has already been materialized."""

    pass


class DocumentParseError(SoapKitError):
    """Raised when received text is not a well-formed XML document."""

    pass


class TransportError(SoapKitError):
    """Raised by a transport when a document could not be exchanged.

    Attributes:
        status_code: HTTP status code, if the server answered.
        body: Response body, if the server answered.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)
