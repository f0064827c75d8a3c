"""Command-line tool that prints the strobemers of a sequence as a table."""

import argparse
import sys

from strobemers.errors import SequenceTooShortError, StrobeError
from strobemers.hashes import KmerHasher, NtHash64
from strobemers.minstrobes import MinStrobes
from strobemers.randstrobes import RandStrobes

DEFAULT_SEQUENCE = "ATCGTACGATGCATGCATGCTGACG"

_HEADER = " idx | m1  m2 (m3) | hash"
_RULE = "-----+-------------+-------------------------"

_METHODS = {"min": MinStrobes, "rand": RandStrobes}


class XorHasher(KmerHasher):
    """Hashes a k-mer as the XOR of its bytes; cheap and easy to reason about."""

    def hash_all(self, seq, k):
        data = seq.encode("ascii") if isinstance(seq, str) else bytes(seq)
        if k == 0 or len(data) < k:
            raise SequenceTooShortError()
        hashes = []
        for start in range(len(data) - k + 1):
            value = 0
            for byte in data[start:start + k]:
                value ^= byte
            hashes.append(value)
        return hashes


_HASHERS = {"nthash": NtHash64, "xor": XorHasher}


def format_table(strobes, n):
    """Consume ``strobes`` and return the lines of an index/hash table."""
    if n not in (2, 3):
        raise ValueError(f"unsupported strobemer order: {n}")
    lines = [_HEADER, _RULE]
    for value in strobes:
        m1, m2, m3 = strobes.indexes()
        if n == 2:
            lines.append(f"{m1:4} | {m1:3} {m2:3}     | 0x{value:016x}")
        else:
            lines.append(f"{m1:4} | {m1:3} {m2:3} {m3:3} | 0x{value:016x}")
    return lines


class _Limited:
    """Wraps a strobe iterator, stopping after ``limit`` items."""

    def __init__(self, strobes, limit):
        self._strobes = strobes
        self._left = limit

    def __iter__(self):
        return self

    def __next__(self):
        if self._left is not None:
            if self._left <= 0:
                raise StopIteration
            self._left -= 1
        return next(self._strobes)

    def indexes(self):
        return self._strobes.indexes()


def _parser():
    parser = argparse.ArgumentParser(
        prog="strobemers",
        description="Print the MinStrobes or RandStrobes of a nucleotide sequence.",
    )
    parser.add_argument("sequence", nargs="?", default=DEFAULT_SEQUENCE)
    parser.add_argument("-m", "--method", choices=sorted(_METHODS), default="min")
    parser.add_argument("-n", "--order", type=int, default=2)
    parser.add_argument("-k", "--length", type=int, default=6)
    parser.add_argument("--w-min", type=int, default=4)
    parser.add_argument("--w-max", type=int, default=12)
    parser.add_argument("--hasher", choices=sorted(_HASHERS), default="nthash")
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--no-shrink", action="store_true")
    return parser


def main(argv=None):
    """Run the command; returns the process exit status."""
    args = _parser().parse_args(argv)
    try:
        strobes = _METHODS[args.method](
            args.sequence,
            args.order,
            args.length,
            args.w_min,
            args.w_max,
            _HASHERS[args.hasher](),
        )
        strobes.shrink = not args.no_shrink
        lines = format_table(_Limited(strobes, args.limit), args.order)
    except StrobeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())