"""Client identity extraction from mTLS X.509 certificate chains."""

from .chain import chain_from_pem, decode_chain, primary_certificate
from .exceptions import (
    AlternativeNamesEmptyError,
    ChainEmptyError,
    ChainError,
    ChainNotAvailableError,
    DecodeError,
    EmailError,
    EmailNotFoundError,
    EmptyEmailError,
    FormatError,
    InvalidEmailError,
    SubjectError,
    X509Error,
)
from .extraction import email_from_chain, identity_from_base64, identity_from_chain
from .models import AlternativeNameEntry, CommonName
from .producer import AuthnContext, X509Identity, produce_x509_identity
from .san import alternative_names, primary_email
from .subject import extract_cn, parse_common_name, subject_name

__all__ = [
    "AlternativeNameEntry",
    "AlternativeNamesEmptyError",
    "AuthnContext",
    "ChainEmptyError",
    "ChainError",
    "ChainNotAvailableError",
    "CommonName",
    "DecodeError",
    "EmailError",
    "EmailNotFoundError",
    "EmptyEmailError",
    "FormatError",
    "InvalidEmailError",
    "SubjectError",
    "X509Error",
    "X509Identity",
    "alternative_names",
    "chain_from_pem",
    "decode_chain",
    "email_from_chain",
    "extract_cn",
    "identity_from_base64",
    "identity_from_chain",
    "parse_common_name",
    "primary_certificate",
    "primary_email",
    "produce_x509_identity",
    "subject_name",
]
