"""Bundled and user-supplied word lists."""

from __future__ import annotations

import logging
from importlib.resources import files

from easyphrase.errors import ConfigError, LoadError

logger = logging.getLogger(__name__)

# EFF word lists: https://www.eff.org/dice
BUILTIN_LISTS: dict[str, str] = {
    "long": "eff_large_wordlist.txt",
    "short1": "eff_short_wordlist_1.txt",
    "short2": "eff_short_wordlist_2_0.txt",
}


def list_names() -> list[str]:
    """Return sorted list of built-in word list identifiers."""
    return sorted(BUILTIN_LISTS.keys())


def parse_words(text: str) -> list[str]:
    """One word per line; surrounding whitespace trimmed, blank lines dropped."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_builtin(name: str) -> list[str]:
    """Load a bundled word list by identifier. Raises ConfigError if unknown."""
    if name not in BUILTIN_LISTS:
        raise ConfigError(f"Unknown word list: '{name}'. Available: {', '.join(list_names())}")
    resource = files("easyphrase").joinpath("words").joinpath(BUILTIN_LISTS[name])
    words = parse_words(resource.read_text(encoding="utf-8"))
    logger.debug("Loaded built-in list '%s' (%d words)", name, len(words))
    return words


def load_file(path: str) -> list[str]:
    """Load a custom word list from a text file.

    Raises LoadError if the file cannot be read or contains no words.
    """
    try:
        with open(path) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read word list '{path}': {e}") from e
    words = parse_words(text)
    if not words:
        raise LoadError(f"Word list '{path}' contains no words.")
    logger.debug("Loaded word list from %s (%d words)", path, len(words))
    return words


def load_wordlist(name: str = "long", path: str | None = None) -> list[str]:
    """Load word list from file path, or the named bundled list."""
    if path is not None:
        return load_file(path)
    return load_builtin(name)
