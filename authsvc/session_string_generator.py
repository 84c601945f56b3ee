"""Generation of session identifiers, nonces and OAuth state values."""

from __future__ import annotations

from .randomness import RandomGenerator


class SessionStringGenerator:
    """Creates random, URL-safe strings for session handling."""

    def generate_session_id(self) -> str:
        return self._generate_random_string(64)

    def generate_nonce(self) -> str:
        return self._generate_random_string(32)

    def generate_state(self) -> str:
        return self._generate_random_string(32)

    def _generate_random_string(self, size: int) -> str:
        return RandomGenerator().generate(size).to_string()