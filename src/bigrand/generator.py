"""Uniform random big unsigned integers.

Three sampling modes are supported:

* ``max_width``: uniform over ``[0, 2**width)``
* ``exact_width``: uniform over ``[2**(width-1), 2**width)``
* ``less_than``: uniform over ``[0, limit)`` by rejection sampling

Only ``max_width`` talks to the byte source; the other two are built on it.
"""

from __future__ import annotations

import logging

from bigrand.biguint import BigUInt
from bigrand.errors import (
    EmptyRangeError,
    EntropySourceError,
    InvalidWidthError,
    RejectionLimitError,
)
from bigrand.utils.crypto import ByteSource, default_source

logger = logging.getLogger(__name__)


def _check_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width < 0:
        raise InvalidWidthError(width)
    return width


def _as_biguint(value: BigUInt | int, number_type: type[BigUInt]) -> BigUInt:
    if isinstance(value, BigUInt):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected BigUInt or int, got {type(value).__name__}")
    if value < 0:
        raise EmptyRangeError(f"Limit must be non-negative, got {value}")
    return number_type(value)


class BoundedGenerator:
    """Draws uniform `BigUInt` values from an injected byte source.

    Args:
        source: Object with ``fill(count) -> bytes``. Defaults to the shared
            `secrets`-backed `CryptoRandom`.
        max_attempts: Optional cap on rejection-sampling draws in `less_than`.
            None means unbounded. The cap only guards against a broken byte
            source; a healthy source needs fewer than two draws on average.
        number_type: `BigUInt` subclass to construct results with.
    """

    def __init__(
        self,
        source: ByteSource | None = None,
        max_attempts: int | None = None,
        number_type: type[BigUInt] = BigUInt,
    ):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.source = source if source is not None else default_source()
        self.max_attempts = max_attempts
        self.number_type = number_type

    def _draw(self, count: int) -> bytes:
        try:
            data = self.source.fill(count)
        except OSError as e:
            raise EntropySourceError(f"Byte source failed while drawing {count} bytes: {e}") from e
        if len(data) != count:
            raise EntropySourceError(
                f"Byte source returned {len(data)} bytes, expected {count}"
            )
        return data

    def max_width(self, width: int) -> BigUInt:
        """Return a value with `width` uniformly random low bits.

        Returns:
            A BigUInt less than ``1 << width``. Zero for a width of 0, in which
            case no bytes are drawn.
        """
        _check_width(width)
        if width == 0:
            return self.number_type()

        byte_count = (width + 7) // 8
        data = bytearray(self._draw(byte_count))
        logger.debug("Drew %d bytes for a %d-bit value", byte_count, width)
        if width % 8 != 0:
            data[0] &= (1 << (width % 8)) - 1
        return self.number_type.from_bytes(data)

    def exact_width(self, width: int) -> BigUInt:
        """Return a random value whose bit width is exactly `width`.

        The top bit is forced to one and the `width - 1` bits below it are
        uniform. Widths 0 and 1 have a single valid value each and return 0
        and 1 without drawing.
        """
        _check_width(width)
        if width <= 1:
            return self.number_type(width)

        result = self.max_width(width - 1)
        digit_width = result.DIGIT_WIDTH
        top = width - 1
        result[top // digit_width] |= 1 << (top % digit_width)
        return result

    def less_than(self, limit: BigUInt | int) -> BigUInt:
        """Return a uniformly random value in ``[0, limit)``.

        Draws ``limit.width``-bit candidates and rejects those at or above
        `limit`. More than half of the candidates are accepted.

        Raises:
            EmptyRangeError: `limit` is zero.
            RejectionLimitError: `max_attempts` draws were all rejected.
        """
        limit = _as_biguint(limit, self.number_type)
        if not limit:
            raise EmptyRangeError("Cannot draw from the empty range [0, 0)")

        width = limit.width
        attempts = 1
        candidate = self.max_width(width)
        while candidate >= limit:
            if self.max_attempts is not None and attempts >= self.max_attempts:
                logger.warning(
                    "Rejection sampling below a %d-bit limit failed after %d draws",
                    width, attempts,
                )
                raise RejectionLimitError(limit, attempts)
            candidate = self.max_width(width)
            attempts += 1

        if attempts > 1:
            logger.debug("Accepted candidate after %d draws (limit width %d)", attempts, width)
        return candidate

    def in_range(self, lower: BigUInt | int, upper: BigUInt | int) -> BigUInt:
        """Return a uniformly random value in ``[lower, upper)``."""
        lower = _as_biguint(lower, self.number_type)
        upper = _as_biguint(upper, self.number_type)
        if upper <= lower:
            raise EmptyRangeError(f"Cannot draw from the empty range [{lower}, {upper})")
        return lower + self.less_than(upper - lower)


def random_with_max_width(width: int, source: ByteSource | None = None) -> BigUInt:
    """Uniform random BigUInt less than ``1 << width``."""
    return BoundedGenerator(source).max_width(width)


def random_with_exact_width(width: int, source: ByteSource | None = None) -> BigUInt:
    """Uniform random BigUInt whose bit width is exactly `width`."""
    return BoundedGenerator(source).exact_width(width)


def random_less_than(limit: BigUInt | int, source: ByteSource | None = None) -> BigUInt:
    """Uniform random BigUInt in ``[0, limit)``."""
    return BoundedGenerator(source).less_than(limit)


def random_in_range(
    lower: BigUInt | int, upper: BigUInt | int, source: ByteSource | None = None
) -> BigUInt:
    """Uniform random BigUInt in ``[lower, upper)``."""
    return BoundedGenerator(source).in_range(lower, upper)
