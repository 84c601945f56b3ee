"""Parsing of http and https URIs into scheme, host, port, path, query and fragment."""

from __future__ import annotations

import re

_SCHEMES = ("https", "http")
_DEFAULT_PORTS = {"http": 80, "https": 443}
_MAX_PORT = 65535
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
# Leading integer, as accepted by a C-style string-to-int conversion.
_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


class UriError(ValueError):
    """Raised when a URI cannot be parsed."""


class PathQueryFragment:
    """The path, query and fragment parts of a URI, split per RFC 3986."""

    __slots__ = ("path", "query", "fragment")

    def __init__(self, path_query_fragment: str) -> None:
        before_fragment, _, self.fragment = path_query_fragment.partition("#")
        self.path, _, self.query = before_fragment.partition("?")

    def has_query(self) -> bool:
        return bool(self.query)

    def has_fragment(self) -> bool:
        return bool(self.fragment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathQueryFragment):
            return NotImplemented
        return (self.path, self.query, self.fragment) == (
            other.path,
            other.query,
            other.fragment,
        )

    def __repr__(self) -> str:
        return (
            f"PathQueryFragment(path={self.path!r}, query={self.query!r}, "
            f"fragment={self.fragment!r})"
        )


def _parse_port(text: str, uri: str) -> int:
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise UriError(f"port not valid in uri: {uri}")
    port = int(match.group())
    if not _INT32_MIN <= port <= _INT32_MAX:
        raise UriError(f"port not valid in uri: {uri}")
    if not 0 <= port <= _MAX_PORT:
        raise UriError(f"port value must be between 0 and 65535: {uri}")
    return port


class Uri:
    """An absolute http or https URI."""

    __slots__ = ("scheme", "host", "port", "path_query_fragment", "_parts")

    def __init__(self, uri: str) -> None:
        for scheme in _SCHEMES:
            prefix = f"{scheme}://"
            if uri.startswith(prefix):
                break
        else:
            raise UriError(f"uri must be http or https scheme: {uri}")

        rest = uri[len(prefix):]
        if not rest:
            raise UriError(f"no host in uri: {uri}")

        end_of_authority = min(
            (index for index in map(rest.find, "/?#") if index != -1),
            default=len(rest),
        )
        host_and_port = rest[:end_of_authority]
        path_query_fragment = rest[end_of_authority:]
        if not path_query_fragment.startswith("/"):
            path_query_fragment = "/" + path_query_fragment

        host, colon, port_text = host_and_port.partition(":")
        if colon and not host:
            raise UriError(f"no host in uri: {uri}")

        self.scheme = scheme
        self.host = host
        self.port = _parse_port(port_text, uri) if colon else _DEFAULT_PORTS[scheme]
        self.path_query_fragment = path_query_fragment
        self._parts = PathQueryFragment(path_query_fragment)

    @property
    def path(self) -> str:
        return self._parts.path

    @property
    def query(self) -> str:
        return self._parts.query

    @property
    def fragment(self) -> str:
        return self._parts.fragment

    def has_query(self) -> bool:
        return self._parts.has_query()

    def has_fragment(self) -> bool:
        return self._parts.has_fragment()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return (self.scheme, self.host, self.port, self.path_query_fragment) == (
            other.scheme,
            other.host,
            other.port,
            other.path_query_fragment,
        )

    def __repr__(self) -> str:
        return (
            f"Uri(scheme={self.scheme!r}, host={self.host!r}, port={self.port!r}, "
            f"path_query_fragment={self.path_query_fragment!r})"
        )