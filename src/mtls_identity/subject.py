"""Subject DN and common name parsing.

Typical DoD style subject:

    CN=TARGARYEN.DAENERYS.MIDDLE.1234567890,OU=CONTRACTOR,OU=PKI,OU=DoD,O=U.S. Government,C=US
"""

import re

from cryptography import x509

from .exceptions import FormatError, SubjectError
from .models import CommonName

_MIN_CN_PARTS = 3
_MAX_CN_PARTS = 4
_EDIPI_MAX = 2**63 - 1
_EDIPI_MAX_DIGITS = len(str(_EDIPI_MAX))
_DIGITS = re.compile(r"[0-9]+")


def subject_name(cert: x509.Certificate) -> str:
    """Return the certificate subject as an RFC 4514 string."""
    try:
        subject = cert.subject
    except ValueError as exc:
        raise SubjectError("failed to decode subject in X509 certificate") from exc
    if subject is None:
        raise SubjectError("null subject in X509 certificate")
    return subject.rfc4514_string()


def extract_cn(subject_dn: str) -> str | None:
    """Return the first CN value of a formatted DN, or None if there is none.

    Splits naively on ',' and '=' so escaped separators inside values are not
    honoured.
    """
    if subject_dn is None:
        raise TypeError("subject_dn must not be None")

    for pair in subject_dn.split(","):
        key, sep, value = pair.partition("=")
        if sep and key.strip().upper() == "CN":
            return value.strip()
    return None


def parse_common_name(cn: str) -> CommonName:
    """Decode LAST.FIRST[.MIDDLE].EDIPI into a CommonName.

    Raises:
        FormatError: wrong number of segments or non-numeric EDIPI
    """
    if cn is None:
        raise TypeError("cn must not be None")

    parts = cn.split(".")
    if not _MIN_CN_PARTS <= len(parts) <= _MAX_CN_PARTS:
        raise FormatError(
            f"unexpected parts in cn {cn}, expected "
            f"{_MIN_CN_PARTS}-{_MAX_CN_PARTS}, but parsed {len(parts)}",
            cn=cn,
        )

    edipi_string = parts[-1]
    if (
        not _DIGITS.fullmatch(edipi_string)
        or len(edipi_string.lstrip("0")) > _EDIPI_MAX_DIGITS
        or int(edipi_string) > _EDIPI_MAX
    ):
        raise FormatError(f"failed to parse edipi from string {edipi_string} in CN {cn}", cn=cn)

    return CommonName(
        last_name=parts[0],
        first_name=parts[1],
        middle_name=parts[2] if len(parts) == _MAX_CN_PARTS else None,
        edipi=int(edipi_string),
    )
