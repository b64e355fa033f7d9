"""SOAP envelope assembly and send cycle."""

from .request import ResponseStatus, SoapRequest, SoapResponse

__all__ = ["SoapRequest", "SoapResponse", "ResponseStatus"]
