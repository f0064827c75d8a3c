# strobemers

Strobemer seeds for DNA and RNA sequences, in pure Python with no
dependencies.

A strobemer joins two or three k-mers ("strobes") taken from one sequence.
The first strobe sits at a fixed position. Each later strobe is picked from a
window that begins `w_min` positions and ends `w_max` positions after the
previous window start. The package offers two ways to pick:

* **MinStrobes** (`strobemers.minstrobes.MinStrobes`) take the k-mer with the
  smallest hash in the window.
* **RandStrobes** (`strobemers.randstrobes.RandStrobes`) take the k-mer that
  gives the smallest value of `(previous_hash + candidate_hash) & prime`. The
  choice looks random, but the same input always gives the same result.

By default k-mers are hashed with canonical 64-bit ntHash (`NtHash64`). You
can supply your own hasher instead.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

`MinStrobes` and `RandStrobes` take the same arguments:

```
MinStrobes(seq, n, k, w_min, w_max, hasher=None)
RandStrobes(seq, n, k, w_min, w_max, hasher=None)
```

* `seq`: the sequence, as `bytes` or an ASCII `str`
* `n`: strobemer order, 2 or 3
* `k`: strobe length, from 1 to 64
* `w_min`, `w_max`: window offsets, with `0 < w_min <= w_max`
* `hasher`: a `KmerHasher`; if you leave it out, `NtHash64()` is used

Each object is an iterator that yields one integer hash per strobemer:

```python
from strobemers.minstrobes import MinStrobes
from strobemers.randstrobes import RandStrobes

seq = b"ATCGTACGATGCATGCATGCTGACG"

strobes = MinStrobes(seq, 2, 6, 4, 12)
for value in strobes:
    m1, m2, m3 = strobes.indexes()
    print(m1, m2, f"0x{value:016x}")

rand_hashes = list(RandStrobes(seq, 3, 6, 4, 12))
```

* `index()` gives the start position of the first strobe of the value
  produced last. Before the first value it returns `None`.
* `indexes()` returns the tuple `(m1, m2, m3)` with the start positions of the
  strobes of the value produced last. For order 2, `m3` is not used.
* `set_prime(q)` sets the mask used to combine hashes. The mask becomes `q`
  rounded up to a power of two, minus one. A `q` below 256 raises
  `PrimeNumberTooSmallError`. The default mask is `2**20 - 1`
  (`strobemers.constants.DEFAULT_PRIME_NUMBER`).
* The `shrink` attribute defaults to `True`. Near the end of the sequence the
  last windows are then cut short. Set it to `False` to stop as soon as a full
  window no longer fits.

### Hashers

`strobemers.hashes.NtHash64` is canonical ntHash. It hashes each k-mer
together with its reverse complement, so a k-mer and its reverse complement
get the same hash. It only hashes k-mers made up entirely of `A`, `C`, `G` and
`T`, in upper or lower case. Any other k-mer is skipped, which means the hash
list comes out shorter. Sequences you give to `MinStrobes` or `RandStrobes`
should therefore contain only these bases.

To use a different hash, subclass `strobemers.hashes.KmerHasher` and implement
`hash_all(seq, k)`. It must return one hash per k-mer, in order:

```python
from strobemers.errors import SequenceTooShortError
from strobemers.hashes import KmerHasher
from strobemers.randstrobes import RandStrobes


class SumHasher(KmerHasher):
    def hash_all(self, seq, k):
        if k == 0 or len(seq) < k:
            raise SequenceTooShortError()
        return [sum(seq[i:i + k]) for i in range(len(seq) - k + 1)]


hashes = list(RandStrobes(b"ACGATCTGGTACCTAG", 2, 3, 2, 5, SumHasher()))
```

`strobemers.cli.XorHasher` is a ready-made example. It hashes each k-mer as
the XOR of its bytes.

### Lower-level helpers

* `strobemers.hashes.compute_hashes(seq, k)` returns the ntHash value of every
  k-mer. If any position cannot be hashed, it raises
  `IncompleteHashValuesError`.
* `strobemers.hashes.compute_min_hashes(hashes, w)` returns `(locs, mins)`.
  These are the position and value of the minimum in the sliding window of
  width `w` that ends at each index. When values are equal, the rightmost
  position wins. Entries before index `w - 1` keep the defaults `0` and
  `2**64 - 1`.
* `strobemers.util` provides:
  * `roundup64(x)`
  * `complement(b)`, which returns the complementary base byte, or `N`
  * `nt4(b)`, which returns the 2-bit code of a base, or 4
  * `validate_params(seq, n, k, w_min, w_max)`
* `strobemers.constants` holds the lookup tables `COMPL_BASES` and
  `SEQ_NT4_TABLE`.

### Errors

Every error is a subclass of `strobemers.errors.StrobeError`, which is itself
a `ValueError`:

* `OrderNotSupportedError`: the order is not 2 or 3
* `InvalidOrderError`: the order is below 2
* `InvalidSequenceError`: the sequence is empty or is a non-ASCII string
* `SequenceTooShortError`: the sequence is too short for the parameters
* `StrobeLengthTooSmallError`: `k` is outside 1..64
* `InvalidWindowOffsetsError`: an offset is zero, or `w_min > w_max`
* `IncompleteHashValuesError`: a hash is missing for some k-mer position
* `PrimeNumberTooSmallError`: the value passed to `set_prime` is below 256
* `NtHashError`: the ntHash routine failed

## Command line

The `strobemers` command prints a table of strobe positions and hashes for a
sequence:

```
strobemers ACGATCTGGTACCTAG -m rand -n 3 -k 3 --w-min 3 --w-max 5
```

Options:

* `sequence`: the sequence to process. Default: `ATCGTACGATGCATGCATGCTGACG`.
* `-m`, `--method`: `min` or `rand`. Default: `min`.
* `-n`, `--order`: strobemer order. Default: 2.
* `-k`, `--length`: strobe length. Default: 6.
* `--w-min`, `--w-max`: window offsets. Defaults: 4 and 12.
* `--hasher`: `nthash` or `xor`. Default: `nthash`.
* `--limit`: print at most this many strobemers.
* `--no-shrink`: stop when a full window no longer fits.

If the parameters are invalid, the command prints `error: <message>` to
standard error and exits with status 1. `strobemers.cli.format_table(strobes,
n)` builds the same table lines from any strobe iterator.

## What it does not do

The package works on one sequence held in memory. It does not read FASTA or
FASTQ files, index strobemers, or match them between sequences.