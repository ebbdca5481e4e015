"""Uniform word selection with replacement."""

from __future__ import annotations

import random
from collections.abc import Sequence

from easyphrase.errors import ConfigError, EmptyListError
from easyphrase.random_source import randbelow


def select_words(words: Sequence[str], count: int, rng: random.Random) -> list[str]:
    """Return count words drawn independently and uniformly from words.

    Draws are with replacement: the same word may appear more than once,
    which keeps the strength at exactly log2(len(words)) bits per word.
    """
    if count < 1:
        raise ConfigError(f"Number of words must be at least 1, got {count}.")
    if not words:
        raise EmptyListError("Cannot select from an empty word list.")
    return [words[randbelow(rng, len(words))] for _ in range(count)]
