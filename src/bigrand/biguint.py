"""Minimal arbitrary-precision unsigned integer with digit-level access.

Values are stored as a list of fixed-width digits, least significant first.
Only the operations the random generators rely on are provided: construction
from big-endian bytes, bit width, digit get/set, ordering, and conversion to
and from Python ints.
"""

from __future__ import annotations

from functools import total_ordering


@total_ordering
class BigUInt:
    """Unsigned big integer stored as little-endian `DIGIT_WIDTH`-bit digits."""

    DIGIT_WIDTH = 64

    __slots__ = ("_digits",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        width = cls.DIGIT_WIDTH
        # from_bytes packs whole bytes into each digit.
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0 or width % 8:
            raise TypeError(
                f"{cls.__name__}.DIGIT_WIDTH must be a positive multiple of 8, got {width!r}"
            )

    def __init__(self, value: int = 0):
        if isinstance(value, BigUInt):
            value = int(value)
        if not isinstance(value, int):
            raise TypeError(f"BigUInt expects an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"BigUInt cannot hold a negative value: {value}")
        mask = (1 << self.DIGIT_WIDTH) - 1
        digits: list[int] = []
        while value:
            digits.append(value & mask)
            value >>= self.DIGIT_WIDTH
        self._digits = digits

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> BigUInt:
        """Build a value from a big-endian byte string (first byte is most significant)."""
        step = cls.DIGIT_WIDTH // 8
        digits: list[int] = []
        end = len(data)
        while end > 0:
            start = max(0, end - step)
            digits.append(int.from_bytes(data[start:end], "big"))
            end = start
        return cls.from_digits(digits)

    @classmethod
    def from_digits(cls, digits: list[int]) -> BigUInt:
        limit = 1 << cls.DIGIT_WIDTH
        for d in digits:
            if not 0 <= d < limit:
                raise ValueError(f"Digit {d:#x} does not fit in {cls.DIGIT_WIDTH} bits")
        result = cls()
        result._digits = list(digits)
        return result

    @property
    def digits(self) -> tuple[int, ...]:
        return tuple(self._digits)

    @property
    def width(self) -> int:
        """Number of bits needed to represent the value (0 for zero)."""
        for index in range(len(self._digits) - 1, -1, -1):
            digit = self._digits[index]
            if digit:
                return index * self.DIGIT_WIDTH + digit.bit_length()
        return 0

    def __getitem__(self, index: int) -> int:
        if index < 0:
            raise IndexError(f"Digit index must be non-negative, got {index}")
        if index >= len(self._digits):
            return 0
        return self._digits[index]

    def __setitem__(self, index: int, digit: int) -> None:
        if index < 0:
            raise IndexError(f"Digit index must be non-negative, got {index}")
        if not 0 <= digit < (1 << self.DIGIT_WIDTH):
            raise ValueError(f"Digit {digit:#x} does not fit in {self.DIGIT_WIDTH} bits")
        if index >= len(self._digits):
            # Writing past the end grows the storage with zero digits.
            self._digits.extend([0] * (index + 1 - len(self._digits)))
        self._digits[index] = digit

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self._digits):
            value = (value << self.DIGIT_WIDTH) | digit
        return value

    __index__ = __int__

    def __bool__(self) -> bool:
        return any(self._digits)

    # Digits can be assigned in place, so values are not hashable.
    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (BigUInt, int)):
            return int(self) == int(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (BigUInt, int)):
            return int(self) < int(other)
        return NotImplemented

    def __add__(self, other: object) -> BigUInt:
        if isinstance(other, (BigUInt, int)):
            return type(self)(int(self) + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> BigUInt:
        """Subtract, raising ValueError when the result would be negative."""
        if isinstance(other, (BigUInt, int)):
            return type(self)(int(self) - int(other))
        return NotImplemented

    def __rsub__(self, other: object) -> BigUInt:
        if isinstance(other, int):
            return type(self)(other - int(self))
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self):#x})"

    def __str__(self) -> str:
        return str(int(self))
