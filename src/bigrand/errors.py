"""Exceptions raised by the random big integer generators."""


class BigRandError(Exception):
    """Base class for all bigrand errors."""


class InvalidWidthError(BigRandError, ValueError):
    """A requested bit width was negative or not an integer."""

    def __init__(self, width: object):
        self.width = width
        super().__init__(f"Bit width must be a non-negative integer, got {width!r}")


class EmptyRangeError(BigRandError, ValueError):
    """The requested sampling interval contains no values."""


class EntropySourceError(BigRandError, RuntimeError):
    """The byte source failed to supply the requested bytes."""


class RejectionLimitError(BigRandError, RuntimeError):
    """Rejection sampling gave up after the configured number of draws."""

    def __init__(self, limit: object, attempts: int):
        self.limit = limit
        self.attempts = attempts
        super().__init__(
            f"No candidate below {limit} after {attempts} draws; "
            f"the byte source is likely broken"
        )
