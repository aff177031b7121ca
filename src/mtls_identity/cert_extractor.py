"""Client certificate chain extraction from API Gateway authorizer events."""

from cryptography import x509

from ._types import APIGatewayAuthorizerEventV2
from .chain import chain_from_pem, decode_chain


def extract_client_cert_pem(event: APIGatewayAuthorizerEventV2) -> str | None:
    """Extract the PEM client certificate from the mTLS request context."""
    request_context = event.get("requestContext", {})
    authentication = request_context.get("authentication", {})
    client_cert = authentication.get("clientCert", {})
    return client_cert.get("clientCertPem") or None


def extract_header(event: APIGatewayAuthorizerEventV2, header_name: str) -> str | None:
    """Case-insensitive header lookup."""
    wanted = header_name.lower()
    for name, value in event.get("headers", {}).items():
        if name.lower() == wanted:
            return value
    return None


def extract_cert_chain(
    event: APIGatewayAuthorizerEventV2, header_name: str
) -> list[x509.Certificate] | None:
    """Build the client certificate chain for a request.

    The mTLS context certificate takes precedence over the base64 header.
    Returns None when neither source is present.
    """
    pem = extract_client_cert_pem(event)
    if pem:
        return chain_from_pem(pem)

    encoded = extract_header(event, header_name)
    if encoded is None:
        return None
    return decode_chain(encoded.strip())
