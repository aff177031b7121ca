"""Errors raised while extracting identity from X.509 certificates."""


class X509Error(Exception):
    """Base error for certificate chain and identity extraction."""


class DecodeError(X509Error):
    """Encoded chain is not valid base64 or holds a malformed certificate."""


class ChainError(X509Error):
    """Certificate chain cannot supply a primary certificate."""


class ChainNotAvailableError(ChainError):
    def __init__(self) -> None:
        super().__init__("cert chain not available")


class ChainEmptyError(ChainError):
    def __init__(self) -> None:
        super().__init__("cert chain empty")


class SubjectError(X509Error):
    """Certificate exposes no usable subject."""


class FormatError(X509Error):
    """Common name does not follow the LAST.FIRST[.MIDDLE].EDIPI layout."""

    def __init__(self, message: str, cn: str | None = None) -> None:
        super().__init__(message)
        self.cn = cn


class EmailError(X509Error):
    """Subject alternative names do not yield a usable email address."""

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class AlternativeNamesEmptyError(EmailError):
    def __init__(self) -> None:
        super().__init__("Subject Alternative Name list is empty")


class EmailNotFoundError(EmailError):
    def __init__(self) -> None:
        super().__init__("no email entry found in Subject Alternative Names")


class EmptyEmailError(EmailError):
    def __init__(self, raw: str | None = None) -> None:
        super().__init__("email type found in SAN, but value was null or empty", raw=raw)


class InvalidEmailError(EmailError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"failed to parse email address string: {raw}", raw=raw)
