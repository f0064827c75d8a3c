"""Lookup tables and default values shared across the package."""

DEFAULT_PRIME_NUMBER = (1 << 20) - 1
"""Default mask (2**20 - 1) used when combining strobe hashes."""

ASCII_SIZE = 256
"""Number of possible byte values."""


def _build_table(default, mapping):
    table = bytearray([default] * ASCII_SIZE)
    for key, value in mapping.items():
        table[key] = value
    return bytes(table)


COMPL_BASES = _build_table(
    ord("N"),
    dict(zip(b"ACGTacgtUu", b"TGCATGCAAA")),
)
"""Complement of every byte: A<->T, C<->G, U->A, anything else -> N."""

SEQ_NT4_TABLE = _build_table(
    4,
    dict(zip(b"ACGTacgtUu", (0, 1, 2, 3, 0, 1, 2, 3, 3, 3))),
)
"""2-bit code of every byte: A=0, C=1, G=2, T/U=3, anything else 4."""