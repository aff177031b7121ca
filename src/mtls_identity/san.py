"""Subject Alternative Name lookup and email extraction."""

from email.errors import HeaderParseError
from email.headerregistry import Address

from cryptography import x509

from .exceptions import (
    AlternativeNamesEmptyError,
    EmailError,
    EmailNotFoundError,
    EmptyEmailError,
    InvalidEmailError,
)
from .models import (
    DIRECTORY_NAME,
    DNS_NAME,
    IP_ADDRESS,
    OTHER_NAME,
    REGISTERED_ID,
    RFC822_NAME,
    URI,
    AlternativeNameEntry,
)


def _to_entry(name: x509.GeneralName) -> AlternativeNameEntry | None:
    if isinstance(name, x509.RFC822Name):
        return AlternativeNameEntry(RFC822_NAME, name.value)
    if isinstance(name, x509.DNSName):
        return AlternativeNameEntry(DNS_NAME, name.value)
    if isinstance(name, x509.UniformResourceIdentifier):
        return AlternativeNameEntry(URI, name.value)
    if isinstance(name, x509.IPAddress):
        return AlternativeNameEntry(IP_ADDRESS, str(name.value))
    if isinstance(name, x509.DirectoryName):
        return AlternativeNameEntry(DIRECTORY_NAME, name.value.rfc4514_string())
    if isinstance(name, x509.RegisteredID):
        return AlternativeNameEntry(REGISTERED_ID, name.value.dotted_string)
    if isinstance(name, x509.OtherName):
        return AlternativeNameEntry(OTHER_NAME, name.value)
    return None


def alternative_names(cert: x509.Certificate) -> list[AlternativeNameEntry] | None:
    """Return SAN entries in certificate order, or None if the extension is absent.

    Raises:
        EmailError: the extension data could not be parsed
    """
    try:
        extension = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName)
    except x509.ExtensionNotFound:
        return None
    except ValueError as exc:
        raise EmailError("failed to parse Subject Alternative Names from cert") from exc

    entries = []
    for name in extension.value:
        entry = _to_entry(name)
        if entry is not None:
            entries.append(entry)
    return entries


def _parse_address(raw: str) -> Address:
    """Parse raw as a bare addr-spec; comments, display names and rewrites are rejected."""
    try:
        address = Address(addr_spec=raw)
    except (ValueError, IndexError, AttributeError, HeaderParseError) as exc:
        raise InvalidEmailError(raw) from exc
    if not address.username or not address.domain or address.addr_spec != raw:
        raise InvalidEmailError(raw)
    return address


def primary_email(cert: x509.Certificate) -> Address:
    """Return the first rfc822Name SAN entry as a validated address.

    Only the first email entry is considered.

    Raises:
        AlternativeNamesEmptyError: no SAN extension or no entries
        EmailNotFoundError: SAN entries present but none is an email
        EmptyEmailError: email entry with an empty value
        InvalidEmailError: email entry that is not a valid addr-spec
    """
    entries = alternative_names(cert)
    if not entries:
        raise AlternativeNamesEmptyError()

    candidate = next((entry for entry in entries if entry.type_tag == RFC822_NAME), None)
    if candidate is None:
        raise EmailNotFoundError()

    raw = candidate.value
    if isinstance(raw, bytes):
        raw = raw.decode("ascii", errors="replace")
    if not raw:
        raise EmptyEmailError(raw)
    return _parse_address(raw)
