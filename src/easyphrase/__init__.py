"""Memorable xkcd-style passphrases from curated word lists."""

__version__ = "0.1.0"
