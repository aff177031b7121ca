"""End-to-end identity extraction from a client certificate chain.

Usage:

1. Obtain the chain (list of certificates):
   - decode_chain(base64_string)
   - chain_from_pem(pem_text)
2. Select the primary certificate with primary_certificate(chain).
3. Extract from the primary certificate:
   - subject_name(cert) -> "CN=TARGARYEN.DAENERYS.MIDDLE.1234567890,OU=CONTRACTOR,..."
   - extract_cn(subject) -> "TARGARYEN.DAENERYS.MIDDLE.1234567890"
   - parse_common_name(cn) -> CommonName(last_name, first_name, middle_name, edipi)
   - primary_email(cert) -> Address

The helpers below compose those steps and let any stage's error propagate.
"""

from collections.abc import Sequence
from email.headerregistry import Address

from cryptography import x509

from .chain import decode_chain, primary_certificate
from .exceptions import FormatError
from .models import CommonName
from .san import primary_email
from .subject import extract_cn, parse_common_name, subject_name


def identity_from_chain(chain: Sequence[x509.Certificate] | None) -> CommonName:
    """Decode the structured identity from the primary certificate's CN."""
    subject = subject_name(primary_certificate(chain))
    cn = extract_cn(subject)
    if cn is None:
        raise FormatError(f"no CN attribute in subject {subject}")
    return parse_common_name(cn)


def email_from_chain(chain: Sequence[x509.Certificate] | None) -> Address:
    """Return the primary certificate's SAN email address."""
    return primary_email(primary_certificate(chain))


def identity_from_base64(encoded: str) -> CommonName:
    return identity_from_chain(decode_chain(encoded))
