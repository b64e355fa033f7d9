"""
Shared pytest fixtures for all tests.

Provides namespace registries, builder cursors, canned SOAP responses and a
fake transport.
"""

import pytest

from soapkit.config.settings import reset_settings
from soapkit.core.cursor import LiveCursor
from soapkit.core.exceptions import TransportError
from soapkit.core.namespaces import NamespaceRegistry
from soapkit.infrastructure.transport import Transport

SOAP_ENV = "http://schemas.xmlsoap.org/soap/envelope/"


# ============================================================================
# SETTINGS
# ============================================================================


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from cached settings and SOAPKIT_* environment."""
    for name in (
        "SOAPKIT_HTTP_TIMEOUT",
        "SOAPKIT_USER_AGENT",
        "SOAPKIT_ENVELOPE_PREFIX",
        "SOAPKIT_ENVELOPE_NAMESPACE",
        "SOAPKIT_ESCAPE_TEXT",
        "SOAPKIT_MAX_DEPTH",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


# ============================================================================
# DOCUMENT FIXTURES
# ============================================================================


@pytest.fixture
def registry() -> NamespaceRegistry:
    """Registry with the 'mes' and 'wsu' prefixes declared."""
    return NamespaceRegistry().declare_pairs("mes", "urn:messages", "wsu", "urn:utility")


@pytest.fixture
def body(registry: NamespaceRegistry) -> LiveCursor:
    """Root builder cursor over an empty Body element."""
    return LiveCursor.root("Body", "SOAP-ENV", registry)


def soap_envelope(body_xml: str) -> str:
    """Wrap ``body_xml`` in a SOAP 1.1 envelope."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<soap:Envelope xmlns:soap="{SOAP_ENV}">'
        "<soap:Header/>"
        f"<soap:Body>{body_xml}</soap:Body>"
        "</soap:Envelope>"
    )


# ============================================================================
# TRANSPORT FIXTURES
# ============================================================================


class FakeTransport(Transport):
    """Transport returning a canned response or raising a canned error."""

    def __init__(self, response: str | None = None, error: TransportError | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, dict[str, str] | None]] = []
        self.closed = False

    async def post(self, url: str, payload: str, headers: dict[str, str] | None = None) -> str:
        self.calls.append((url, payload, headers))
        if self.error is not None:
            raise self.error
        return self.response or ""

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def status_response() -> str:
    """Response whose Body holds a GetStatusResponse with a repeated Item."""
    return soap_envelope(
        '<m:GetStatusResponse xmlns:m="urn:messages">'
        "<m:Status>OK</m:Status>"
        "<m:Items><m:Item>a</m:Item><m:Item>b</m:Item></m:Items>"
        "</m:GetStatusResponse>"
    )


@pytest.fixture
def make_envelope():
    """Factory wrapping Body markup in a SOAP 1.1 envelope."""
    return soap_envelope


@pytest.fixture
def fake_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport
