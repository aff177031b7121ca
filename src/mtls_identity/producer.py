"""Per-request identity production.

The request's certificate chain travels in an explicit AuthnContext built for
each authorizer invocation, so no state outlives the request.
"""

from dataclasses import dataclass

from cryptography import x509

from ._types import APIGatewayAuthorizerEventV2
from .cert_extractor import extract_cert_chain
from .chain import primary_certificate
from .subject import extract_cn, subject_name

ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class X509Identity:
    """Subject of the client certificate presented on a request."""

    subject_dn: str
    anonymous_cn: str = ANONYMOUS

    @property
    def common_name(self) -> str | None:
        return extract_cn(self.subject_dn)

    def has_cert(self) -> bool:
        """True when the subject carries a real, non-anonymous CN."""
        common_name = self.common_name
        return bool(common_name) and common_name != self.anonymous_cn


@dataclass
class AuthnContext:
    """Authentication inputs for a single request."""

    chain: list[x509.Certificate] | None

    @classmethod
    def from_event(cls, event: APIGatewayAuthorizerEventV2, header_name: str) -> "AuthnContext":
        """Build the context from an authorizer event.

        Raises:
            DecodeError: the presented certificate data is malformed
        """
        return cls(chain=extract_cert_chain(event, header_name))


def produce_x509_identity(context: AuthnContext, anonymous_cn: str = ANONYMOUS) -> X509Identity:
    """Return the identity of the request's primary client certificate.

    Raises:
        ChainError: no certificate chain, or an empty one
        SubjectError: the primary certificate has no subject
    """
    cert = primary_certificate(context.chain)
    return X509Identity(subject_dn=subject_name(cert), anonymous_cn=anonymous_cn)
