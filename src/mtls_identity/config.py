"""Authorizer configuration."""

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class AuthorizerConfig:
    """Authorizer settings, loaded from environment variables in Lambda."""

    cert_header: str = "x-client-cert-chain"
    require_email: bool = False
    anonymous_cn: str = "anonymous"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AuthorizerConfig":
        """Build config from CLIENT_CERT_HEADER, REQUIRE_EMAIL, ANONYMOUS_CN and LOG_LEVEL.

        An unknown LOG_LEVEL falls back to INFO.
        """
        defaults = cls()
        log_level = os.environ.get("LOG_LEVEL", defaults.log_level).strip().upper()
        if log_level not in _LOG_LEVELS:
            logging.getLogger(__name__).warning(
                "Unknown LOG_LEVEL %r, using %s", log_level, defaults.log_level
            )
            log_level = defaults.log_level
        return cls(
            cert_header=os.environ.get("CLIENT_CERT_HEADER", defaults.cert_header),
            require_email=os.environ.get("REQUIRE_EMAIL", "false").strip().lower() in _TRUTHY,
            anonymous_cn=os.environ.get("ANONYMOUS_CN", defaults.anonymous_cn),
            log_level=log_level,
        )
