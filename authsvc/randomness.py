"""Random byte strings with a URL-safe text form and constant-time equality."""

from __future__ import annotations

import base64
import hmac
import re
import secrets

_WEB_SAFE_BASE64 = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class Random:
    """An immutable block of random bytes."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Random):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"Random(size={len(self._data)})"

    def to_string(self) -> str:
        """Return the bytes as unpadded URL-safe base64."""
        return base64.urlsafe_b64encode(self._data).decode("ascii").rstrip("=")

    @classmethod
    def from_string(cls, text: str) -> Random:
        """Parse the form made by to_string; raise ValueError if it is invalid."""
        if not _WEB_SAFE_BASE64.fullmatch(text):
            raise ValueError(f"not web-safe base64: {text!r}")
        body = text.rstrip("=")
        if len(body) % 4 == 1:
            raise ValueError(f"not web-safe base64: {text!r}")
        padded = body + "=" * (-len(body) % 4)
        try:
            data = base64.urlsafe_b64decode(padded)
        except ValueError as exc:
            raise ValueError(f"not web-safe base64: {text!r}") from exc
        return cls(data)


class RandomGenerator:
    """Produces Random values from a cryptographically secure source."""

    def generate(self, size: int) -> Random:
        return Random(secrets.token_bytes(size))