"""Exception hierarchy for passphrase generation."""

from __future__ import annotations


class PassphraseError(Exception):
    """Base class for all easyphrase errors."""


class ConfigError(PassphraseError, ValueError):
    """An invalid configuration value (count, case mode, list name, preset key)."""


class LoadError(PassphraseError):
    """A word list or preset could not be read, or held no usable entries."""


class EmptyListError(PassphraseError, ValueError):
    """Selection was attempted on a word list with no words."""
