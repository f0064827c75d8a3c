"""Exceptions raised while validating parameters and generating strobemers."""


class StrobeError(ValueError):
    """Base class for every error reported by this package."""

    default_message = "strobemer error"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.default_message)


class OrderNotSupportedError(StrobeError):
    """The requested strobemer order is neither 2 nor 3."""

    default_message = "strobemer order not supported (must be 2 or 3)"


class InvalidOrderError(StrobeError):
    """The requested strobemer order is below 2."""

    default_message = "strobemer order must be ≥ 2"


class InvalidSequenceError(StrobeError):
    """The sequence is empty or cannot be read as ASCII."""

    default_message = "invalid DNA sequence (empty or contains non-ASCII)"


class SequenceTooShortError(StrobeError):
    """The sequence cannot hold a single strobemer with the given parameters."""

    default_message = "sequence too short for given parameters"


class StrobeLengthTooSmallError(StrobeError):
    """The strobe (k-mer) length lies outside 1..=64."""

    default_message = "strobe length (l) must be ≥ 1 and ≤ 64"


class InvalidWindowOffsetsError(StrobeError):
    """Window offsets are zero or w_min exceeds w_max."""

    default_message = "window offsets must be > 0 and w_min ≤ w_max"


class IncompleteHashValuesError(StrobeError):
    """Fewer k-mer hashes were produced than there are k-mer positions."""

    default_message = "incomplete pre-computed hash values (nthash)"


class PrimeNumberTooSmallError(StrobeError):
    """The prime used for combining hashes is below 256."""

    default_message = "prime number too small (must be ≥ 256)"


class NtHashError(StrobeError):
    """An error reported by the ntHash k-mer hashing routine."""

    default_message = "k-mer hashing failed"