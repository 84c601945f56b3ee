"""Percent-encoding, form/query data, basic auth and cookie helpers."""

from __future__ import annotations

import base64
import itertools
import string
from collections.abc import Iterable, Mapping
from operator import itemgetter
from typing import Union

# Standard HTTP header names.
AUTHORIZATION = "authorization"
COOKIE = "cookie"
CACHE_CONTROL = "cache-control"
CONTENT_TYPE = "content-type"
LOCATION = "location"
PRAGMA = "pragma"
SET_COOKIE = "set-cookie"

# Header directives.
CACHE_CONTROL_NO_CACHE = "no-cache"
CONTENT_TYPE_FORM_URL_ENCODED = "application/x-www-form-urlencoded"
PRAGMA_NO_CACHE = "no-cache"
SET_COOKIE_SECURE = "Secure"
SET_COOKIE_HTTP_ONLY = "HttpOnly"
SET_COOKIE_SAME_SITE_STRICT = "SameSite=Strict"
SET_COOKIE_SAME_SITE_LAX = "SameSite=Lax"
SET_COOKIE_MAX_AGE = "Max-Age"

Pairs = Union[Mapping[str, str], Iterable[tuple[str, str]]]

# Unreserved characters, see RFC 3986.
_URL_SAFE = frozenset(string.ascii_letters + string.digits + "-_.~")
_FORM_SAFE = _URL_SAFE | {"+"}
_HEX_DIGITS = frozenset("0123456789ABCDEF")


def _safe_encode(text: str, safe: frozenset[str]) -> str:
    return "".join(
        chr(byte) if chr(byte) in safe else f"%{byte:02X}"
        for byte in text.encode("utf-8")
    )


def _safe_decode(text: str, safe: frozenset[str]) -> str:
    decoded = bytearray()
    chars = iter(text)
    for char in chars:
        if char in safe:
            decoded.append(ord(char))
            continue
        if char != "%":
            raise ValueError(f"unexpected character {char!r} in encoded text: {text}")
        digits = "".join(itertools.islice(chars, 2))
        if len(digits) != 2 or not all(digit in _HEX_DIGITS for digit in digits):
            raise ValueError(f"invalid percent encoding in: {text}")
        decoded.append(int(digits, 16))
    try:
        return decoded.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"decoded text is not valid UTF-8: {text}") from exc


def _sorted_pairs(data: Pairs) -> list[tuple[str, str]]:
    items = data.items() if isinstance(data, Mapping) else data
    return sorted(((key, value) for key, value in items), key=itemgetter(0))


def _decode_pairs(
    text: str, safe: frozenset[str], plus_is_space: bool
) -> list[tuple[str, str]]:
    result = []
    for part in text.split("&"):
        pieces = part.split("=")
        if len(pieces) != 2:
            raise ValueError(f"malformed key/value pair {part!r} in: {text}")
        key, value = (_safe_decode(piece, safe) for piece in pieces)
        if plus_is_space:
            key = key.replace("+", " ")
            value = value.replace("+", " ")
        result.append((key, value))
    return sorted(result, key=itemgetter(0))


def url_safe_encode(url: str) -> str:
    """Percent-encode every character that is not unreserved."""
    return _safe_encode(url, _URL_SAFE)


def url_safe_decode(url: str) -> str:
    """Decode a percent-encoded string; raise ValueError if it is malformed."""
    return _safe_decode(url, _URL_SAFE)


def encode_query_data(data: Pairs) -> str:
    """Encode key/value pairs as a query string, ordered by key."""
    return "&".join(
        f"{_safe_encode(key, _URL_SAFE)}={_safe_encode(value, _URL_SAFE)}"
        for key, value in _sorted_pairs(data)
    )


def decode_query_data(query: str) -> list[tuple[str, str]]:
    """Decode a query string into key/value pairs ordered by key."""
    return _decode_pairs(query, _URL_SAFE, plus_is_space=False)


def encode_form_data(data: Pairs) -> str:
    """Encode key/value pairs as form data, ordered by key."""
    return "&".join(
        f"{_safe_encode(key.replace(' ', '+'), _FORM_SAFE)}="
        f"{_safe_encode(value.replace(' ', '+'), _FORM_SAFE)}"
        for key, value in _sorted_pairs(data)
    )


def decode_form_data(form: str) -> list[tuple[str, str]]:
    """Decode form-encoded data into key/value pairs ordered by key."""
    return _decode_pairs(form, _FORM_SAFE, plus_is_space=True)


def encode_basic_auth(username: str, password: str) -> str:
    """Build an Authorization header value for HTTP basic authentication."""
    credentials = base64.b64encode(f"{username}:{password}".encode("utf-8"))
    return f"Basic {credentials.decode('ascii')}"


def encode_set_cookie(name: str, value: str, directives: Iterable[str]) -> str:
    """Build a Set-Cookie header value; directives are sorted and deduplicated."""
    return "".join(
        [f"{name}={value}", *(f"; {directive}" for directive in sorted(set(directives)))]
    )


def decode_cookies(cookies: str) -> dict[str, str]:
    """Parse a Cookie header value; the first of repeated names wins."""
    result: dict[str, str] = {}
    for cookie in cookies.split("; "):
        name, sep, value = cookie.partition("=")
        if not sep:
            raise ValueError(f"invalid cookie encoding, expected name=value: {cookie!r}")
        result.setdefault(name, value)
    return dict(sorted(result.items()))