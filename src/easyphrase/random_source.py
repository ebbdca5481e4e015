"""Random number sources shared by word selection and case mixing.

A single generator is created per run and passed explicitly to the
selector and the case transformer. Real runs draw from the operating
system's CSPRNG; tests pass a seeded generator for reproducible output.
"""

from __future__ import annotations

import random


def default_rng() -> random.Random:
    """Return a generator backed by os.urandom."""
    return random.SystemRandom()


def seeded_rng(seed: int | str | bytes) -> random.Random:
    """Return a deterministic generator. Not for real passphrases."""
    return random.Random(seed)


def randbelow(rng: random.Random, n: int) -> int:
    """Return a uniform integer in [0, n).

    Draws bit_length(n) random bits and rejects values >= n, so every
    index is equally likely regardless of n.
    """
    if n <= 0:
        raise ValueError(f"Upper bound must be positive, got {n}.")
    k = n.bit_length()
    r = rng.getrandbits(k)
    while r >= n:
        r = rng.getrandbits(k)
    return r
