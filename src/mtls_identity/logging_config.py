"""JSON logging configuration for the authorizer."""

import logging

from pythonjsonlogger import jsonlogger

from .config import AuthorizerConfig


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with focused field set.

    Includes only timestamp, level, message, exc_info, funcName and lineno, so
    authorizer log lines stay small in CloudWatch.
    """

    def add_fields(self, log_record, record, message_dict):
        """Override to include only the focused fields.

        Args:
            log_record: Dict to be logged as JSON
            record: LogRecord object from logging framework
            message_dict: Dict containing message and args
        """
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        allowed_fields = {
            "timestamp",
            "level",
            "message",
            "exc_info",
            "funcName",
            "lineno",
        }
        for key in [key for key in log_record if key not in allowed_fields]:
            log_record.pop(key)


def configure_logger(config: AuthorizerConfig) -> logging.Logger:
    """Apply the configured level to the authorizer logger.

    Lambda reuses the module between invocations, so the level is re-applied
    per invocation from the current environment.

    Args:
        config: Authorizer configuration with a validated log level

    Returns:
        The authorizer logger
    """
    LOGGER.setLevel(config.log_level)
    return LOGGER


def _setup_logger(level: str) -> logging.Logger:
    """Initialize the singleton authorizer logger.

    Args:
        level: Initial log level name

    Returns:
        Logger writing CustomJsonFormatter output to stderr
    """
    logger = logging.getLogger("mtls_identity")

    # Module reload must not stack handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = CustomJsonFormatter(
        fmt="%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
        timestamp=True,
    )
    handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


LOGGER = _setup_logger(AuthorizerConfig.from_env().log_level)
