"""Small helpers: power-of-two rounding, base lookups and parameter checks."""

from strobemers.constants import ASCII_SIZE, COMPL_BASES, SEQ_NT4_TABLE
from strobemers.errors import (
    InvalidSequenceError,
    InvalidWindowOffsetsError,
    OrderNotSupportedError,
    SequenceTooShortError,
    StrobeLengthTooSmallError,
)

_U64_LIMIT = 1 << 64


def roundup64(x):
    """Clear the lowest bit of ``x`` and round the result up to a power of two."""
    if not 0 <= x < _U64_LIMIT:
        raise ValueError(f"value out of unsigned 64-bit range: {x}")
    value = (x | 1) - 1
    result = 1 if value <= 1 else 1 << (value - 1).bit_length()
    if result >= _U64_LIMIT:
        raise OverflowError(f"next power of two of {x} exceeds 64 bits")
    return result


def _check_byte(b):
    if not 0 <= b < ASCII_SIZE:
        raise ValueError(f"not a byte value: {b}")


def complement(b):
    """Return the complementary base of byte ``b`` (``N`` for non-nucleotides)."""
    _check_byte(b)
    return COMPL_BASES[b]


def nt4(b):
    """Return the 2-bit code of byte ``b``, or 4 when it is not a nucleotide."""
    _check_byte(b)
    return SEQ_NT4_TABLE[b]


def validate_params(seq, n, k, w_min, w_max):
    """Check strobemer parameters, raising the matching error on failure."""
    if len(seq) == 0:
        raise InvalidSequenceError()
    if n not in (2, 3):
        raise OrderNotSupportedError()
    if not 1 <= k <= 64:
        raise StrobeLengthTooSmallError()
    if w_min == 0 or w_max == 0 or w_min > w_max:
        raise InvalidWindowOffsetsError()
    if len(seq) < (n - 1) * (w_max + 1):
        raise SequenceTooShortError()