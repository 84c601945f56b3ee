"""Validation and interpretation of service configuration values."""

from __future__ import annotations

import enum

from .uri import Uri, UriError

_SCHEME_ERROR = "uri must be http or https scheme"


class LogLevel(enum.IntEnum):
    """Log levels the service can be configured with, usable with logging."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    ERROR = 40
    CRITICAL = 50


_LOG_LEVELS = {
    "": LogLevel.TRACE,
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
}


def validate_uri(uri: str, uri_name: str, required_scheme: str) -> Uri:
    """Parse uri and check it has the required scheme and no query or fragment.

    Returns the parsed Uri; raises ValueError describing the problem otherwise.
    """
    scheme_message = f"invalid {uri_name}: uri must be {required_scheme} scheme: {uri}"
    try:
        parsed = Uri(uri)
    except UriError as exc:
        if _SCHEME_ERROR in str(exc):
            raise ValueError(scheme_message) from exc
        raise ValueError(f"invalid {uri_name}: {exc}") from exc
    if parsed.has_query() or parsed.has_fragment():
        raise ValueError(
            f"invalid {uri_name}: query params and fragments not allowed: {uri}"
        )
    if parsed.scheme != required_scheme:
        raise ValueError(scheme_message)
    return parsed


def configured_log_level(log_level: str) -> LogLevel:
    """Map a configured log level name to a LogLevel; empty means trace."""
    try:
        return _LOG_LEVELS[log_level]
    except KeyError:
        raise ValueError(
            f"Unexpected log_level config '{log_level}': must be one of "
            "[trace, debug, info, error, critical]"
        ) from None


def configured_address(listen_address: str, listen_port: int) -> str:
    """Join the listen address and decimal port as address:port."""
    return f"{listen_address}:{int(listen_port)}"