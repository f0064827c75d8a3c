"""RandStrobes: strobemers whose later strobes minimise a masked hash sum."""

from strobemers.constants import DEFAULT_PRIME_NUMBER
from strobemers.errors import PrimeNumberTooSmallError
from strobemers.hashes import NtHash64
from strobemers.util import roundup64, validate_params

_U64_MAX = (1 << 64) - 1


class RandStrobes:
    """Iterator over order-2 or order-3 RandStrobe hashes of a sequence.

    The first strobe sits at each k-mer position in turn; every following
    strobe is the position in its window that minimises
    ``(previous_hash + candidate_hash) & prime``.

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

        seq_len = len(seq)
        self._end_hash = max(seq_len - k, 0)
        self._end_idx = max(seq_len - (k + (n - 1) * k), 0)

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

    def _choose_min(self, base_hash, start, end):
        """Return the position in ``start..=end`` minimising the masked sum."""
        best_pos, best_val = start, _U64_MAX
        for pos in range(start, end + 1):
            cand = (base_hash + self.hashes[pos]) & _U64_MAX & self.prime
            if cand < best_val:
                best_pos, best_val = pos, cand
        return best_pos

    def _next_order2(self):
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_start = idx + self.w_min
        w_end = idx + self.w_max
        if w_end > self._end_hash:
            if not self.shrink:
                return None
            w_end = self._end_hash
        if w_start > w_end or w_end >= len(self.hashes):
            return None

        h1 = self.hashes[idx]
        pos2 = self._choose_min(h1, w_start, w_end)
        self._idx2 = pos2
        h2 = h1 // 2 + self.hashes[pos2] // 3

        self._idx += 1
        return h2

    def _next_order3(self):
        idx = self._idx
        if idx > self._end_idx:
            return None

        w1_start = idx + self.w_min
        w1_end = idx + self.w_max
        w2_start = idx + self.w_max + self.w_min
        w2_end = idx + 2 * self.w_max

        if w2_start > self._end_hash:
            return None
        if w2_end > self._end_hash:
            if not self.shrink:
                return None
            w2_end = self._end_hash
        if w2_end >= len(self.hashes):
            return None

        h1 = self.hashes[idx]
        pos2 = self._choose_min(h1, w1_start, w1_end)
        self._idx2 = pos2
        h2 = h1 // 3 + self.hashes[pos2] // 4

        pos3 = self._choose_min(h2, w2_start, w2_end)
        self._idx3 = pos3
        h3 = h2 + self.hashes[pos3] // 5

        self._idx += 1
        return h3