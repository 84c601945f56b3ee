"""HTTP codecs, URI parsing, an HTTPS POST client, random session strings, trigger rules and configuration checks for an OIDC authentication service."""

__version__ = "0.1.0"

__all__ = [
    "client",
    "config",
    "http_codec",
    "randomness",
    "session_string_generator",
    "time_service",
    "trigger_rules",
    "uri",
]