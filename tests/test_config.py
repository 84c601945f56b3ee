import logging
import re

import pytest

from authsvc.config import (
    LogLevel,
    configured_address,
    configured_log_level,
    validate_uri,
)


def test_validate_uri_returns_parsed_uri():
    uri = validate_uri("https://example.com/auth", "authorization_uri", "https")
    assert uri.scheme == "https"
    assert uri.host == "example.com"
    assert uri.path == "/auth"


def test_validate_uri_accepts_http_proxy():
    uri = validate_uri("http://proxy.example.com:3128", "proxy_uri", "http")
    assert uri.scheme == "http"
    assert uri.port == 3128


def test_validate_uri_wrong_scheme():
    uri = "http://example.com/callback"
    expected = f"invalid callback_uri: uri must be https scheme: {uri}"
    with pytest.raises(ValueError, match=re.escape(expected)):
        validate_uri(uri, "callback_uri", "https")


def test_validate_uri_unsupported_scheme():
    uri = "ftp://example.com"
    expected = f"invalid token_uri: uri must be https scheme: {uri}"
    with pytest.raises(ValueError, match=re.escape(expected)):
        validate_uri(uri, "token_uri", "https")


@pytest.mark.parametrize(
    "uri", ["https://example.com/token?a=b", "https://example.com/token#frag"]
)
def test_validate_uri_rejects_query_and_fragment(uri):
    expected = f"invalid token_uri: query params and fragments not allowed: {uri}"
    with pytest.raises(ValueError, match=re.escape(expected)):
        validate_uri(uri, "token_uri", "https")


def test_validate_uri_wraps_other_parse_errors():
    uri = "https://host:a8/path"
    expected = f"invalid token_uri: port not valid in uri: {uri}"
    with pytest.raises(ValueError, match=re.escape(expected)):
        validate_uri(uri, "token_uri", "https")


def test_validate_uri_no_host():
    uri = "https://"
    expected = f"invalid authorization_uri: no host in uri: {uri}"
    with pytest.raises(ValueError, match=re.escape(expected)):
        validate_uri(uri, "authorization_uri", "https")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", LogLevel.TRACE),
        ("trace", LogLevel.TRACE),
        ("debug", LogLevel.DEBUG),
        ("info", LogLevel.INFO),
        ("error", LogLevel.ERROR),
        ("critical", LogLevel.CRITICAL),
    ],
)
def test_configured_log_level(name, expected):
    assert configured_log_level(name) is expected


@pytest.mark.parametrize("name", ["warn", "INFO", "verbose"])
def test_configured_log_level_rejects_unknown(name):
    with pytest.raises(ValueError, match=re.escape(f"'{name}'")):
        configured_log_level(name)


def test_log_levels_are_ordered_by_severity():
    levels = [configured_log_level(n) for n in ("trace", "debug", "info", "error", "critical")]
    assert levels == sorted(levels)


def test_log_levels_agree_with_logging():
    assert configured_log_level("debug") == logging.DEBUG
    assert configured_log_level("info") == logging.INFO
    assert configured_log_level("error") == logging.ERROR
    assert configured_log_level("critical") == logging.CRITICAL
    assert configured_log_level("trace") < logging.DEBUG


def test_configured_address():
    assert configured_address("0.0.0.0", 10003) == "0.0.0.0:10003"


def test_configured_address_splits_back():
    address = configured_address("127.0.0.1", 8080)
    host, _, port = address.rpartition(":")
    assert (host, int(port)) == ("127.0.0.1", 8080)