"""Passphrase pipeline: load, select, case, join."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence

from easyphrase.case import Case, apply_case
from easyphrase.config import PassphraseConfig
from easyphrase.random_source import default_rng
from easyphrase.selector import select_words
from easyphrase.wordlists import load_wordlist

logger = logging.getLogger(__name__)


def join_words(words: Sequence[str], separator: str) -> str:
    """Join words with separator. An empty separator concatenates them."""
    return separator.join(words)


def entropy_bits(list_length: int, number: int, case: Case = Case.LOWER) -> float:
    """Estimate passphrase strength in bits.

    Each word contributes log2(list_length). Mixed case adds at most
    log2(3) per word; less when a style leaves the word unchanged.
    """
    if list_length < 1 or number < 1:
        return 0.0
    bits = number * math.log2(list_length)
    if case is Case.MIXED:
        bits += number * math.log2(3)
    return bits


def generate_passphrase(
    config: PassphraseConfig,
    rng: random.Random | None = None,
    words: Sequence[str] | None = None,
) -> str:
    """Generate one passphrase for config.

    words: use this word list instead of resolving config.wordlist/wordfile.
    rng: random source; defaults to the system CSPRNG.
    """
    config.validate()
    if words is None:
        words = load_wordlist(config.wordlist, config.wordfile)
    if rng is None:
        rng = default_rng()

    selected = select_words(words, config.number, rng)
    cased = apply_case(selected, config.case, rng)
    logger.debug(
        "Generated %d-word passphrase (%s case, %.1f bits)",
        config.number,
        config.case.value,
        entropy_bits(len(words), config.number, config.case),
    )
    return join_words(cased, config.separator)
