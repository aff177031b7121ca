"""Value objects produced by certificate identity extraction."""

from dataclasses import dataclass
from typing import NamedTuple

# RFC 5280 GeneralName tags
OTHER_NAME = 0
RFC822_NAME = 1
DNS_NAME = 2
DIRECTORY_NAME = 4
URI = 6
IP_ADDRESS = 7
REGISTERED_ID = 8


@dataclass(frozen=True)
class CommonName:
    """Identity decoded from a LAST.FIRST[.MIDDLE].EDIPI common name.

    middle_name is None when the common name has no middle segment.
    """

    last_name: str
    first_name: str
    middle_name: str | None
    edipi: int


class AlternativeNameEntry(NamedTuple):
    """Single subject alternative name as (GeneralName tag, value)."""

    type_tag: int
    value: str | bytes
