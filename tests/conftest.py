"""Fixtures for mTLS identity tests."""

import base64
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509.oid import NameOID

from mtls_identity._types import APIGatewayAuthorizerEventV2, LambdaContext

DATA_DIR = Path(__file__).parent / "data"

FULL_CN = "TARGARYEN.DAENERYS.MIDDLE.1234567890"
NO_MIDDLE_CN = "TARGARYEN.DAENERYS.1234567890"
EMAIL = "daenerys.targeryen@dragonstone.got"


def _name(common_name: str) -> x509.Name:
    return x509.Name(
        [
            x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "U.S. Government"),
            x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "DoD"),
            x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "PKI"),
            x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "CONTRACTOR"),
            x509.NameAttribute(NameOID.COMMON_NAME, common_name),
        ]
    )


def build_certificate(
    subject: x509.Name,
    issuer: x509.Name,
    public_key: rsa.RSAPublicKey,
    issuer_key: RSAPrivateKey,
    san: list[x509.GeneralName] | None = None,
    ca: bool = False,
) -> x509.Certificate:
    """Sign a certificate for tests; validity and serial are not under test."""
    now = datetime.now(UTC)
    builder = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)
        .public_key(public_key)
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
    )
    if san is not None:
        builder = builder.add_extension(x509.SubjectAlternativeName(san), critical=False)
    return builder.sign(issuer_key, hashes.SHA256())


def to_base64(*certs: x509.Certificate) -> str:
    """Base64 of the concatenated DER encodings."""
    der = b"".join(cert.public_bytes(serialization.Encoding.DER) for cert in certs)
    return base64.b64encode(der).decode("ascii")


def to_pem(*certs: x509.Certificate) -> str:
    return "".join(cert.public_bytes(serialization.Encoding.PEM).decode("ascii") for cert in certs)


@pytest.fixture(scope="session")
def ca_key() -> RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def leaf_key() -> RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def intermediate_cert(ca_key: RSAPrivateKey) -> x509.Certificate:
    """Self-signed issuing CA."""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Test Intermediate CA")])
    return build_certificate(name, name, ca_key.public_key(), ca_key, ca=True)


@pytest.fixture(scope="session")
def leaf_cert(
    leaf_key: RSAPrivateKey, ca_key: RSAPrivateKey, intermediate_cert: x509.Certificate
) -> x509.Certificate:
    """Client certificate with a DNS and an email SAN entry."""
    return build_certificate(
        _name(FULL_CN),
        intermediate_cert.subject,
        leaf_key.public_key(),
        ca_key,
        san=[x509.DNSName("client.dragonstone.got"), x509.RFC822Name(EMAIL)],
    )


@pytest.fixture(scope="session")
def no_middle_cert(leaf_key: RSAPrivateKey, ca_key: RSAPrivateKey) -> x509.Certificate:
    """Client certificate without a middle name and without SAN extension."""
    return build_certificate(
        _name(NO_MIDDLE_CN),
        x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Test Intermediate CA")]),
        leaf_key.public_key(),
        ca_key,
    )


@pytest.fixture
def sample_san_email_b64() -> str:
    """Real-world client cert whose SAN holds the email address."""
    return (DATA_DIR / "leaf_san_email.b64").read_text().strip()


@pytest.fixture
def sample_subject_email_b64() -> str:
    """Real-world client cert with the email only in the subject DN."""
    return (DATA_DIR / "leaf_subject_email.b64").read_text().strip()


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear authorizer configuration for all tests."""
    for name in ("CLIENT_CERT_HEADER", "REQUIRE_EMAIL", "ANONYMOUS_CN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def lambda_context() -> LambdaContext:
    """Create mock Lambda context."""
    ctx = LambdaContext()
    ctx.function_name = "mtls-identity-authorizer"
    ctx.memory_limit_in_mb = 128
    ctx.invoked_function_arn = "arn:aws:lambda:eu-west-2:123456789:function:mtls-identity-authorizer"
    ctx.aws_request_id = "test-request-id"
    return ctx


@pytest.fixture
def base_event() -> APIGatewayAuthorizerEventV2:
    """Base authorizer event without mTLS cert."""
    return {
        "type": "REQUEST",
        "routeArn": "arn:aws:execute-api:eu-west-2:123456789:abc123/$default/GET/profile",
        "routeKey": "GET /profile",
        "rawPath": "/profile",
        "rawQueryString": "",
        "headers": {},
        "requestContext": {
            "accountId": "123456789",
            "apiId": "abc123",
            "http": {"method": "GET", "path": "/profile"},
        },
    }


@pytest.fixture
def event_with_mtls_cert(
    base_event: APIGatewayAuthorizerEventV2,
    leaf_cert: x509.Certificate,
    intermediate_cert: x509.Certificate,
) -> APIGatewayAuthorizerEventV2:
    """Event with the leaf + intermediate PEM in the mTLS request context."""
    base_event["requestContext"]["authentication"] = {  # type: ignore[reportTypedDictNotRequiredAccess]
        "clientCert": {
            "clientCertPem": to_pem(leaf_cert, intermediate_cert),
            "subjectDN": leaf_cert.subject.rfc4514_string(),
            "issuerDN": intermediate_cert.subject.rfc4514_string(),
        }
    }
    return base_event
