"""MinStrobes: strobemers whose later strobes are window minima."""

from strobemers.constants import DEFAULT_PRIME_NUMBER
from strobemers.errors import PrimeNumberTooSmallError, SequenceTooShortError
from strobemers.hashes import NtHash64, compute_min_hashes
from strobemers.util import roundup64, validate_params

_U64_MAX = (1 << 64) - 1


class MinStrobes:
    """Iterator over order-2 or order-3 MinStrobe hashes of a sequence.

    Hashes of every k-mer and the minima of every sliding window are
    computed up front. Each step yields the combined hash of the strobemer
    starting at the next k-mer position.

    ``shrink`` controls what happens near the sequence end: when true, the
    last windows are cut short; when false, iteration stops as soon as a
    full window no longer fits.
    """

    def __init__(self, seq, n, k, w_min, w_max, hasher=None):
        validate_params(seq, n, k, w_min, w_max)
        if hasher is None:
            hasher = NtHash64()

        self.n = n
        self.k = k
        self.w_min = w_min
        self.w_max = w_max
        self.hashes = list(hasher.hash_all(seq, k))
        self._minloc, self._minval = compute_min_hashes(
            self.hashes, w_max - w_min + 1
        )

        seq_len = len(seq)
        self._end_hash = seq_len - k
        self._end_idx = seq_len - k - (n - 1) * k
        if self._end_idx < 0:
            raise SequenceTooShortError()

        self._idx = 0
        self._idx2 = 0
        self._idx3 = 0
        self.prime = DEFAULT_PRIME_NUMBER
        self.shrink = True

    def set_prime(self, q):
        """Use ``2**ceil(log2(q)) - 1`` as the combining mask; ``q`` must be ≥ 256."""
        if q < 256:
            raise PrimeNumberTooSmallError()
        self.prime = roundup64(q) - 1

    def index(self):
        """Position of the first strobe last produced, or None before the first."""
        return self._idx - 1 if self._idx > 0 else None

    def indexes(self):
        """Positions ``(m1, m2, m3)`` of the strobes last produced."""
        first = self.index()
        return (0 if first is None else first, self._idx2, self._idx3)

    def __iter__(self):
        return self

    def __next__(self):
        value = self._next_order2() if self.n == 2 else self._next_order3()
        if value is None:
            raise StopIteration
        return value

    def _next_order2(self):
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_start = idx + self.w_min
        w_end = idx + self.w_max
        h1 = self.hashes[idx]

        if w_end > self._end_hash:
            if not self.shrink:
                return None
            w_end = self._end_hash

        if w_end == idx + self.w_max:
            self._idx2 = self._minloc[w_end]
            h2 = h1 // 2 + self._minval[w_end] // 3
        else:
            best_hash, best_pos = _U64_MAX, w_start
            for pos in range(w_start, w_end + 1):
                cand = self.hashes[pos]
                if cand < best_hash:
                    best_hash, best_pos = cand, pos
            self._idx2 = best_pos
            h2 = h1 // 2 + best_hash // 3

        self._idx += 1
        return h2

    def _next_order3(self):
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_end = idx + self.w_max
        w2_start = idx + self.w_max + self.w_min
        w2_end = idx + 2 * self.w_max

        if w2_start > self._end_hash:
            return None
        if w2_end > self._end_hash:
            if not self.shrink:
                return None
            w2_end = self._end_hash

        h1 = self.hashes[idx]
        self._idx2 = self._minloc[w_end]
        h2 = h1 // 3 + self._minval[w_end] // 4

        if w2_end == idx + 2 * self.w_max:
            self._idx3 = self._minloc[w2_end]
            h3 = h2 + self._minval[w2_end] // 5
        else:
            best_hash, best_pos = _U64_MAX, w2_start
            for pos in range(w2_start, w2_end + 1):
                cand = (h2 + self.hashes[pos]) & self.prime
                if cand < best_hash:
                    best_hash, best_pos = cand, pos
            self._idx3 = best_pos
            h3 = h2 + self.hashes[best_pos] // 5

        self._idx += 1
        return h3