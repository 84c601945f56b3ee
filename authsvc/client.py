"""HTTPS POST client with optional extra CA and CONNECT proxy support."""

from __future__ import annotations

import http.client
import logging
import ssl
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .uri import Uri

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and body of an HTTP response."""

    status: int
    reason: str
    headers: tuple[tuple[str, str], ...]
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str) -> Optional[str]:
        """Return the first header with the given name, ignoring case."""
        wanted = name.lower()
        return next(
            (value for key, value in self.headers if key.lower() == wanted), None
        )


class HttpClient:
    """Sends POST requests over TLS 1.2, optionally through an HTTP proxy."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def post(
        self,
        uri: str,
        headers: Mapping[str, str],
        body: str,
        ca_cert: str = "",
        proxy_uri: str = "",
    ) -> Optional[HttpResponse]:
        """POST body to uri; return None if the request fails for any reason."""
        try:
            return self._post(uri, headers, body, ca_cert, proxy_uri)
        except Exception as exc:
            logger.info("post: unexpected exception: %s", exc)
            return None

    def _ssl_context(self, ca_cert: str) -> ssl.SSLContext:
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        context.maximum_version = ssl.TLSVersion.TLSv1_2
        # The peer certificate chain is verified; the host name is not.
        context.check_hostname = False
        context.verify_mode = ssl.CERT_REQUIRED
        context.set_default_verify_paths()
        if ca_cert:
            logger.info("post: trusting the provided certificate authority")
            context.load_verify_locations(cadata=ca_cert)
        return context

    def _connection(
        self, target: Uri, proxy_uri: str, context: ssl.SSLContext
    ) -> http.client.HTTPSConnection:
        extra = {} if self.timeout is None else {"timeout": self.timeout}
        if proxy_uri:
            proxy = Uri(proxy_uri)
            logger.info(
                "post: opening connection to proxy %s for request to destination %s:%d",
                proxy_uri,
                target.host,
                target.port,
            )
            connection = http.client.HTTPSConnection(
                proxy.host, proxy.port, context=context, **extra
            )
            connection.set_tunnel(target.host, target.port)
            return connection
        logger.info("post: opening connection to %s:%d", target.host, target.port)
        return http.client.HTTPSConnection(
            target.host, target.port, context=context, **extra
        )

    def _post(
        self,
        uri: str,
        headers: Mapping[str, str],
        body: str,
        ca_cert: str,
        proxy_uri: str,
    ) -> HttpResponse:
        context = self._ssl_context(ca_cert)
        target = Uri(uri)
        request_headers = {"Host": target.host, **headers}
        connection = self._connection(target, proxy_uri, context)
        try:
            connection.request(
                "POST",
                target.path_query_fragment,
                body=body.encode("utf-8"),
                headers=request_headers,
            )
            response = connection.getresponse()
            payload = response.read()
            return HttpResponse(
                status=response.status,
                reason=response.reason,
                headers=tuple(response.getheaders()),
                body=payload,
            )
        finally:
            connection.close()