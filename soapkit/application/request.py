# ============================================================================
# SCOPE: APPLICATION LAYER
# Description: SOAP envelope assembly and the send/receive cycle.
# ============================================================================
"""SOAP Request.

Owns one envelope document and its namespace registry, hands out builder
cursors for the Header and Body, and exchanges the rendered envelope through
a ``Transport``.

Usage:
    request = SoapRequest("http://host/service", "mes", "urn:messages")
    request.get_body().add_object("GetStatus", "mes", "Id", "7")

    async with HttpxTransport() as transport:
        response = await request.send(transport)

    if response.is_successful:
        status = response.result.get_string_value("GetStatusResponse", "Status")
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ..config.settings import Settings, get_settings
from ..core.cursor import LiveCursor, MaterializedCursor
from ..core.exceptions import ArityError, DocumentParseError, TransportError
from ..core.namespaces import NamespaceRegistry
from ..core.node import Node
from ..infrastructure import xml_codec
from ..infrastructure.transport import Transport

logger = logging.getLogger(__name__)


class ResponseStatus(Enum):
    """Outcome of a send cycle."""

    SUCCESS = "success"
    EMPTY_BODY = "empty_body"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class SoapResponse:
    """Result of ``SoapRequest.send``.

    ``result`` is a cursor over the contents of the response Body; it is only
    set on success.
    """

    status: ResponseStatus
    result: MaterializedCursor | None = None
    error: str | None = None

    @classmethod
    def success(cls, result: MaterializedCursor) -> "SoapResponse":
        """Factory for successful response."""
        return cls(status=ResponseStatus.SUCCESS, result=result)

    @classmethod
    def failure(cls, status: ResponseStatus, error: str | None = None) -> "SoapResponse":
        """Factory for failed response."""
        return cls(status=status, error=error)

    @property
    def is_successful(self) -> bool:
        return self.status == ResponseStatus.SUCCESS

    @property
    def has_fault(self) -> bool:
        """Whether the Body carries a SOAP Fault."""
        return self.result is not None and self.result.has_value("Fault")

    @property
    def fault(self) -> MaterializedCursor | None:
        if self.result is None:
            return None
        return self.result.get_builder("Fault")

    @property
    def fault_string(self) -> str | None:
        if self.result is None:
            return None
        return self.result.get_string_value("Fault", "faultstring")

    def __str__(self) -> str:
        text = self.status.name
        if self.error:
            text += f"\n{self.error}"
        return text


class SoapRequest:
    """A SOAP envelope under construction, bound to an endpoint URL."""

    def __init__(
        self,
        url: str,
        *namespaces: str,
        soap_action: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize request.

        Args:
            url: Endpoint the envelope is posted to.
            *namespaces: ``(prefix, uri, ...)`` pairs declared on the envelope.
            soap_action: Value for the SOAPAction HTTP header, if any.
            settings: Optional settings; defaults to ``get_settings()``.

        Raises:
            ArityError: If ``namespaces`` has odd length.
        """
        settings = settings or get_settings()
        self.url = url
        self.soap_action = soap_action
        self.registry = NamespaceRegistry()

        self._prefix = settings.SOAPKIT_ENVELOPE_PREFIX
        self._envelope = Node(
            local_name="Envelope",
            prefix=self._prefix,
            namespace=settings.SOAPKIT_ENVELOPE_NAMESPACE,
            declarations={self._prefix: settings.SOAPKIT_ENVELOPE_NAMESPACE},
        )
        self._header: Node | None = None
        self._body = self._envelope.add_child(Node(local_name="Body", prefix=self._prefix))

        self.add_namespace(*namespaces)

    def add_namespace(self, *pairs: str) -> "SoapRequest":
        """Declare ``(prefix, uri)`` pairs on the Envelope element."""
        if len(pairs) % 2 != 0:
            raise ArityError("add_namespace", 2, len(pairs))
        for i in range(0, len(pairs), 2):
            self._envelope.declarations[pairs[i]] = pairs[i + 1]
        return self

    def add_local_namespace(self, *pairs: str) -> "SoapRequest":
        """Register ``(prefix, uri)`` pairs to be declared where first used."""
        self.registry.declare_pairs(*pairs)
        return self

    def get_header(self) -> LiveCursor:
        """Return a builder cursor on the Header, creating the element if needed."""
        if self._header is None:
            self._header = Node(local_name="Header", prefix=self._prefix)
            self._envelope.children.insert(0, self._header)
        return LiveCursor(self._header, self.registry)

    def get_body(self) -> LiveCursor:
        """Return a builder cursor on the Body."""
        return LiveCursor(self._body, self.registry)

    def to_xml(self) -> str:
        """Render the envelope, including the XML declaration."""
        return xml_codec.render(self._envelope, xml_declaration=True)

    async def send(self, transport: Transport) -> SoapResponse:
        """Post the envelope and wrap the response Body.

        Transport and parse failures are reported as ``TRANSPORT_ERROR``
        responses rather than raised.

        Args:
            transport: Transport used for the exchange.

        Returns:
            SoapResponse with the Body contents or the failure reason.
        """
        payload = self.to_xml()
        headers = {"SOAPAction": self.soap_action} if self.soap_action is not None else {}
        logger.debug(f"Sending SOAP request ({len(payload)} chars) to {self.url}")

        try:
            response_text = await transport.post(self.url, payload, headers)
            envelope = xml_codec.parse(response_text)
        except TransportError as e:
            logger.error(f"Transport error calling {self.url}: {e}")
            return SoapResponse.failure(ResponseStatus.TRANSPORT_ERROR, str(e))
        except DocumentParseError as e:
            logger.error(f"Unreadable response from {self.url}: {e}")
            return SoapResponse.failure(ResponseStatus.TRANSPORT_ERROR, str(e))

        body = envelope.find("Body")
        result = LiveCursor(body, self.registry).get_builder("Body") if body is not None else None
        if result is None:
            logger.warning(f"Empty SOAP Body in response from {self.url}")
            return SoapResponse.failure(ResponseStatus.EMPTY_BODY, response_text)

        return SoapResponse.success(result)

    def __str__(self) -> str:
        return self.to_xml()
