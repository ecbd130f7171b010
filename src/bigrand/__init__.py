"""Uniformly distributed random arbitrary-precision unsigned integers."""

from bigrand.biguint import BigUInt
from bigrand.errors import (
    BigRandError,
    EmptyRangeError,
    EntropySourceError,
    InvalidWidthError,
    RejectionLimitError,
)
from bigrand.generator import (
    BoundedGenerator,
    random_in_range,
    random_less_than,
    random_with_exact_width,
    random_with_max_width,
)
from bigrand.utils.crypto import ByteSource, CryptoRandom

__all__ = [
    "BigUInt",
    "BigRandError", "EmptyRangeError", "EntropySourceError",
    "InvalidWidthError", "RejectionLimitError",
    "BoundedGenerator",
    "random_in_range", "random_less_than",
    "random_with_exact_width", "random_with_max_width",
    "ByteSource", "CryptoRandom",
]
