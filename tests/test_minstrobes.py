from itertools import islice

import pytest

from strobemers.errors import (
    InvalidSequenceError,
    InvalidWindowOffsetsError,
    OrderNotSupportedError,
    PrimeNumberTooSmallError,
    SequenceTooShortError,
    StrobeLengthTooSmallError,
)
from strobemers.hashes import KmerHasher
from strobemers.minstrobes import MinStrobes

SEQ = b"ACGATCTGGTACCTAG"
L = 3
W_MIN = 3
W_MAX = 5

MIN_O2 = [
    5508583604130516576,
    7820137869046132365,
    5541303490076687811,
    5796921065369559009,
    7864972478291945971,
    6364449594620396814,
    4156992363689746675,
    5730802552933835827,
    8690393705976365196,
    11912708257446301134,
    8953117104403771765,
]

MIN_O3 = [
    5838247918869859075,
    5824753939158295439,
    4305531019845332403,
    4497244201314985802,
    7896767773547654737,
    6896419184433288632,
]


class _DescendingHasher(KmerHasher):
    """Hash of position i is 1000 - i, so the rightmost k-mer is always smallest."""

    def hash_all(self, seq, k):
        return [1000 - i for i in range(len(seq) - k + 1)]


def test_order2_basic():
    ms = MinStrobes(b"ACGTACGTACGT", 2, 3, 1, 4)
    assert len(list(islice(ms, 1))) == 1


def test_order3_basic():
    ms = MinStrobes(b"ACGTACGTACGTACGTACGTACGT", 3, 3, 1, 4)
    assert len(list(islice(ms, 10))) == 10


@pytest.mark.parametrize("n", [2, 3])
def test_produces_items(n):
    ms = MinStrobes(SEQ, n, L, W_MIN, W_MAX)
    count = 0
    for _ in ms:
        count += 1
        m1, m2, m3 = ms.indexes()
        assert m1 + W_MIN <= m2 <= m1 + W_MAX
        assert m2 + L <= len(SEQ)
        if n == 3:
            assert m1 + W_MAX + W_MIN <= m3 <= m1 + 2 * W_MAX
            assert m3 + L <= len(SEQ)
    assert count > 0


def test_regression_order2():
    assert list(MinStrobes(SEQ, 2, L, W_MIN, W_MAX)) == MIN_O2


def test_regression_order3():
    assert list(MinStrobes(SEQ, 3, L, W_MIN, W_MAX)) == MIN_O3


def test_str_sequence_matches_bytes():
    assert list(MinStrobes(SEQ.decode("ascii"), 2, L, W_MIN, W_MAX)) == MIN_O2


def test_without_shrink_order2_stops_early():
    ms = MinStrobes(SEQ, 2, L, W_MIN, W_MAX)
    ms.shrink = False
    assert list(ms) == MIN_O2[:9]


def test_without_shrink_order3_stops_early():
    ms = MinStrobes(SEQ, 3, L, W_MIN, W_MAX)
    ms.shrink = False
    assert list(ms) == MIN_O3[:4]


def test_index_before_and_after_iteration():
    ms = MinStrobes(SEQ, 2, L, W_MIN, W_MAX)
    assert ms.index() is None
    assert ms.indexes() == (0, 0, 0)
    next(ms)
    assert ms.index() == 0
    next(ms)
    assert ms.index() == 1


def test_exhausted_iterator_stays_exhausted():
    ms = MinStrobes(SEQ, 2, L, W_MIN, W_MAX)
    assert len(list(ms)) == 11
    with pytest.raises(StopIteration):
        next(ms)


def test_iter_returns_self():
    ms = MinStrobes(SEQ, 2, L, W_MIN, W_MAX)
    assert iter(ms) is ms


def test_custom_hasher_selects_rightmost_in_window():
    seq = b"ACGTACGTAC"
    ms = MinStrobes(seq, 2, 1, 1, 3, _DescendingHasher())
    end_hash = len(seq) - 1
    seconds = []
    for _ in ms:
        m1, m2, _ = ms.indexes()
        seconds.append((m1, m2))
    assert seconds == [(m1, min(m1 + 3, end_hash)) for m1 in range(9)]


def test_set_prime_rounds_to_mask():
    ms = MinStrobes(SEQ, 3, L, W_MIN, W_MAX)
    ms.set_prime(1000)
    assert ms.prime == 1023
    ms.set_prime(256)
    assert ms.prime == 255


def test_set_prime_too_small():
    ms = MinStrobes(SEQ, 2, L, W_MIN, W_MAX)
    with pytest.raises(PrimeNumberTooSmallError):
        ms.set_prime(255)


@pytest.mark.parametrize(
    ("args", "error"),
    [
        ((b"", 2, 3, 3, 5), InvalidSequenceError),
        ((SEQ, 4, 3, 3, 5), OrderNotSupportedError),
        ((SEQ, 1, 3, 3, 5), OrderNotSupportedError),
        ((SEQ, 2, 0, 3, 5), StrobeLengthTooSmallError),
        ((SEQ, 2, 65, 3, 5), StrobeLengthTooSmallError),
        ((SEQ, 2, 3, 0, 5), InvalidWindowOffsetsError),
        ((SEQ, 2, 3, 6, 5), InvalidWindowOffsetsError),
        ((b"ACGTA", 2, 3, 3, 5), SequenceTooShortError),
        ((b"ACGTACGTACGT", 2, 10, 1, 5), SequenceTooShortError),
    ],
)
def test_invalid_parameters(args, error):
    with pytest.raises(error):
        MinStrobes(*args)