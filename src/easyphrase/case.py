"""Case transformation applied to selected words."""

from __future__ import annotations

import enum
import random
from collections.abc import Sequence

from easyphrase.errors import ConfigError
from easyphrase.random_source import randbelow


class Case(enum.Enum):
    """How each word of the passphrase is cased."""

    UPPER = "upper"
    LOWER = "lower"
    CAPITALIZED = "capitalized"
    MIXED = "mixed"

    @classmethod
    def from_string(cls, value: str | Case) -> Case:
        """Parse a CLI or preset string into a Case. Raises ConfigError if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        raise ConfigError(
            f"Invalid case: '{value}'. Use one of: {', '.join(case_names())}."
        )


def case_names() -> list[str]:
    return [member.value for member in Case]


def capitalize(word: str) -> str:
    """First character uppercased, the rest lowercased."""
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


# Styles that "mixed" picks from, one per word.
_MIXED_STYLES = (str.upper, str.lower, capitalize)


def apply_case(words: Sequence[str], case: Case, rng: random.Random) -> list[str]:
    """Return words transformed according to case, same length and order.

    rng is only consumed for Case.MIXED, one draw per word.
    """
    if case is Case.UPPER:
        return [w.upper() for w in words]
    if case is Case.LOWER:
        return [w.lower() for w in words]
    if case is Case.CAPITALIZED:
        return [capitalize(w) for w in words]
    if case is Case.MIXED:
        return [_MIXED_STYLES[randbelow(rng, len(_MIXED_STYLES))](w) for w in words]
    raise ConfigError(f"Unsupported case mode: {case!r}")
