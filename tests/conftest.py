"""Shared test fixtures."""

import pytest

from bigrand.biguint import BigUInt
from bigrand.utils.crypto import CryptoRandom


@pytest.fixture
def rng():
    """Provide a seeded CryptoRandom for deterministic tests."""
    return CryptoRandom(seed=42)


class ReplayByteSource:
    """Byte source that hands out a fixed byte string in order.

    Once the data runs out, `fill` returns whatever is left, which may be
    fewer bytes than requested.
    """

    def __init__(self, data: bytes | list[int]):
        self.data = bytes(data)
        self.consumed = 0
        self.calls: list[int] = []

    def fill(self, count: int) -> bytes:
        self.calls.append(count)
        chunk = self.data[self.consumed:self.consumed + count]
        self.consumed += len(chunk)
        return chunk


class FailingByteSource:
    """Byte source whose device read always fails."""

    def fill(self, count: int) -> bytes:
        raise OSError(5, "Input/output error")


class BigUInt32(BigUInt):
    """BigUInt with 32-bit digits."""

    DIGIT_WIDTH = 32


def ones(width: int) -> ReplayByteSource:
    """Source returning just enough 0xFF bytes for one `width`-bit draw."""
    return ReplayByteSource(b"\xff" * ((width + 7) // 8))


def zeros(width: int) -> ReplayByteSource:
    """Source returning just enough zero bytes for one `width`-bit draw."""
    return ReplayByteSource(bytes((width + 7) // 8))
