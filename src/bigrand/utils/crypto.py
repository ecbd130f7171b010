"""Random byte sources for big integer generation."""

from __future__ import annotations

import logging
import random
import secrets
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ByteSource(Protocol):
    """Anything that can hand out independent uniform random bytes."""

    def fill(self, count: int) -> bytes:
        """Return exactly `count` random bytes."""
        ...


class CryptoRandom:
    """Random byte source for the generators.

    Uses `secrets` for production (cryptographically secure),
    `random.Random(seed)` for deterministic testing.
    """

    def __init__(self, seed: int | None = None):
        self._seeded = seed is not None
        if self._seeded:
            self._rng = random.Random(seed)
        else:
            self._rng = None

    @property
    def seeded(self) -> bool:
        return self._seeded

    def fill(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"Cannot draw a negative number of bytes: {count}")
        if self._seeded:
            return self._rng.randbytes(count)
        return secrets.token_bytes(count)


_default_source: CryptoRandom | None = None


def default_source() -> CryptoRandom:
    """Process-wide unseeded source backed by `secrets`."""
    global _default_source
    if _default_source is None:
        logger.debug("Creating default CryptoRandom byte source")
        _default_source = CryptoRandom()
    return _default_source
