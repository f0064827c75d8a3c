"""MinStrobes and RandStrobes strobemer seeds for nucleotide sequences, with ntHash k-mer hashing."""

__version__ = "0.1.0"