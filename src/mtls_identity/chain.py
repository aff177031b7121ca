"""Certificate chain decoding and primary certificate selection."""

import base64
import binascii
from collections.abc import Sequence

from cryptography import x509

from .exceptions import ChainEmptyError, ChainNotAvailableError, DecodeError

_SEQUENCE_TAG = 0x30
_PEM_MARKER = b"-----BEGIN"


def _der_record_end(buffer: bytes, offset: int) -> int:
    """Return the offset just past the DER SEQUENCE starting at offset."""
    remaining = len(buffer) - offset
    if remaining < 2:
        raise DecodeError(f"truncated certificate record at offset {offset}")
    if buffer[offset] != _SEQUENCE_TAG:
        raise DecodeError(
            f"expected certificate SEQUENCE at offset {offset}, found tag 0x{buffer[offset]:02x}"
        )

    first = buffer[offset + 1]
    header = 2
    if first & 0x80:
        count = first & 0x7F
        if count == 0 or count > 4:
            raise DecodeError(f"unsupported DER length encoding at offset {offset}")
        if remaining < 2 + count:
            raise DecodeError(f"truncated certificate record at offset {offset}")
        length = int.from_bytes(buffer[offset + 2 : offset + 2 + count], "big")
        header += count
    else:
        length = first

    end = offset + header + length
    if end > len(buffer):
        raise DecodeError(
            f"truncated certificate record at offset {offset}: "
            f"needs {header + length} bytes, {remaining} available"
        )
    return end


def _load_der_chain(data: bytes) -> list[x509.Certificate]:
    chain: list[x509.Certificate] = []
    offset = 0
    while offset < len(data):
        end = _der_record_end(data, offset)
        try:
            chain.append(x509.load_der_x509_certificate(data[offset:end]))
        except ValueError as exc:
            raise DecodeError("failed to read certificate from base64 data") from exc
        offset = end
    return chain


def chain_from_pem(pem: str | bytes) -> list[x509.Certificate]:
    """Load every PEM certificate block, in order of appearance."""
    if isinstance(pem, str):
        pem = pem.encode("ascii", errors="replace")
    try:
        return x509.load_pem_x509_certificates(pem)
    except ValueError as exc:
        raise DecodeError("failed to read certificate from PEM data") from exc


def decode_chain(encoded: str) -> list[x509.Certificate]:
    """Decode a base64 certificate chain into certificates in stream order.

    The decoded payload is a concatenation of DER certificates, or PEM text.
    Any malformed record fails the whole chain.

    Raises:
        DecodeError: invalid base64 or a malformed certificate record
    """
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("certificate chain is not valid base64") from exc

    if data.lstrip().startswith(_PEM_MARKER):
        return chain_from_pem(data)
    return _load_der_chain(data)


def primary_certificate(chain: Sequence[x509.Certificate] | None) -> x509.Certificate:
    """Return the leaf (first) certificate of the chain.

    Raises:
        ChainNotAvailableError: chain is None
        ChainEmptyError: chain has no certificates
    """
    if chain is None:
        raise ChainNotAvailableError()
    if len(chain) == 0:
        raise ChainEmptyError()
    return chain[0]
