"""k-mer hashing (canonical ntHash) and sliding-window minima."""

from abc import ABC, abstractmethod
from collections import deque

from strobemers.constants import ASCII_SIZE
from strobemers.errors import (
    IncompleteHashValuesError,
    InvalidSequenceError,
    NtHashError,
    SequenceTooShortError,
    StrobeLengthTooSmallError,
)

_MASK64 = (1 << 64) - 1
_MASK33 = (1 << 33) - 1
_MASK31 = (1 << 31) - 1

_SEED_A = 0x3C8BFBB395C60474
_SEED_C = 0x3193C18562A02B4C
_SEED_G = 0x20323ED082572324
_SEED_T = 0x295549F54BE24456

_VALID = frozenset(b"ACGTacgt")


def _seed_table(pairs):
    table = [0] * ASCII_SIZE
    for bases, seed in pairs:
        for base in bases:
            table[base] = seed
    return table


_SEED = _seed_table(
    [(b"Aa", _SEED_A), (b"Cc", _SEED_C), (b"Gg", _SEED_G), (b"Tt", _SEED_T)]
)
_RC_SEED = _seed_table(
    [(b"Aa", _SEED_T), (b"Cc", _SEED_G), (b"Gg", _SEED_C), (b"Tt", _SEED_A)]
)


def _rotate(x, d):
    """Split-rotate left: low 33 bits and high 31 bits rotate independently."""
    low = x & _MASK33
    high = x >> 33
    d33, d31 = d % 33, d % 31
    if d33:
        low = ((low << d33) | (low >> (33 - d33))) & _MASK33
    if d31:
        high = ((high << d31) | (high >> (31 - d31))) & _MASK31
    return (high << 33) | low


def _rotate_right(x):
    low = x & _MASK33
    high = x >> 33
    low = (low >> 1) | ((low & 1) << 32)
    high = (high >> 1) | ((high & 1) << 30)
    return (high << 33) | low


def _base_hashes(window):
    fwd = 0
    for base in window:
        fwd = _rotate(fwd, 1) ^ _SEED[base]
    rev = 0
    for base in reversed(window):
        rev = _rotate(rev, 1) ^ _RC_SEED[base]
    return fwd, rev


def _last_invalid(window):
    for offset in range(len(window) - 1, -1, -1):
        if window[offset] not in _VALID:
            return offset
    return -1


def _nthash(seq, k):
    """Yield ``(position, hash)`` for every k-mer made only of A, C, G and T."""
    if k < 1:
        raise NtHashError("k must be positive")
    if len(seq) < k:
        raise NtHashError("sequence shorter than k")
    end = len(seq) - k
    pos = 0
    fwd = rev = None
    while pos <= end:
        if fwd is None:
            window = seq[pos:pos + k]
            bad = _last_invalid(window)
            if bad >= 0:
                pos += bad + 1
                continue
            fwd, rev = _base_hashes(window)
        else:
            incoming = seq[pos + k - 1]
            if incoming not in _VALID:
                fwd = rev = None
                pos += k
                continue
            outgoing = seq[pos - 1]
            fwd = _rotate(fwd, 1) ^ _rotate(_SEED[outgoing], k) ^ _SEED[incoming]
            rev = _rotate_right(rev ^ _RC_SEED[outgoing] ^ _rotate(_RC_SEED[incoming], k))
        yield pos, (fwd + rev) & _MASK64
        pos += 1


def _as_bytes(seq):
    if isinstance(seq, str):
        try:
            return seq.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidSequenceError() from exc
    return bytes(seq)


class KmerHasher(ABC):
    """Strategy that hashes every k-mer of a sequence."""

    @abstractmethod
    def hash_all(self, seq, k):
        """Return one hash per k-mer of ``seq``, in order."""


class NtHash64(KmerHasher):
    """Canonical 64-bit ntHash; k-mers containing non-ACGT bases are skipped."""

    def hash_all(self, seq, k):
        if not 1 <= k <= 64:
            raise StrobeLengthTooSmallError()
        data = _as_bytes(seq)
        if len(data) < k:
            raise SequenceTooShortError()
        return [value for _, value in _nthash(data, k)]


def compute_hashes(seq, k):
    """Hash every k-mer of ``seq``; every position must yield exactly one hash."""
    hashes = NtHash64().hash_all(seq, k)
    if len(hashes) != len(_as_bytes(seq)) - k + 1:
        raise IncompleteHashValuesError()
    return hashes


def compute_min_hashes(hashes, w):
    """Return ``(locs, mins)`` of the minimum over each window of width ``w``.

    Entry ``i`` describes the window ending at ``i``; for ``i < w - 1`` the
    entries keep the defaults 0 and 2**64 - 1. Ties resolve to the rightmost
    position.
    """
    if w < 1:
        raise ValueError("window size must be ≥ 1")
    values = list(hashes)
    if w == 1:
        return list(range(len(values))), values

    locs = [0] * len(values)
    mins = [_MASK64] * len(values)
    window = deque()
    for idx, value in enumerate(values):
        while window and window[-1][1] >= value:
            window.pop()
        window.append((idx, value))
        start = idx - (w - 1)
        while window[0][0] < start:
            window.popleft()
        if idx >= w - 1:
            locs[idx], mins[idx] = window[0]
    return locs, mins