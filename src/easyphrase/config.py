"""Passphrase configuration and preset loading/merging."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from easyphrase.case import Case
from easyphrase.errors import ConfigError, LoadError
from easyphrase.wordlists import BUILTIN_LISTS, list_names


_BUNDLED_DIR = Path(__file__).parent / "presets"


@dataclass(frozen=True)
class PassphraseConfig:
    """Validated settings for one generation run."""

    wordlist: str = "long"
    wordfile: str | os.PathLike | None = None
    case: Case = Case.LOWER
    number: int = 6
    separator: str = " "

    def __post_init__(self):
        # Frozen dataclass: coerce case strings through object.__setattr__.
        if not isinstance(self.case, Case):
            object.__setattr__(self, "case", Case.from_string(self.case))
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError if any setting is out of range."""
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise ConfigError(f"Number of words must be an integer, got {self.number!r}.")
        if self.number < 1:
            raise ConfigError(f"Number of words must be at least 1, got {self.number}.")
        if not isinstance(self.wordlist, str):
            raise ConfigError(f"Word list name must be a string, got {self.wordlist!r}.")
        # An int here would make open() read from that file descriptor.
        if self.wordfile is not None and not isinstance(self.wordfile, (str, os.PathLike)):
            raise ConfigError(f"Word file must be a path, got {self.wordfile!r}.")
        if self.wordfile is None and self.wordlist not in BUILTIN_LISTS:
            raise ConfigError(
                f"Unknown word list: '{self.wordlist}'. Available: {', '.join(list_names())}"
            )
        if not isinstance(self.case, Case):
            raise ConfigError(f"Invalid case: {self.case!r}.")
        if not isinstance(self.separator, str):
            raise ConfigError(f"Separator must be a string, got {self.separator!r}.")

    @classmethod
    def from_mapping(cls, mapping: dict) -> PassphraseConfig:
        """Build a config from a preset or merged dict. Unknown keys raise ConfigError."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(
                f"Unknown setting(s): {', '.join(unknown)}. Known: {', '.join(sorted(known))}"
            )
        return cls(**mapping)


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Load a preset by name from bundled presets or user directories.

    Searches user directories first, then bundled presets.
    Raises ConfigError if name contains a path separator,
    LoadError if preset not found.
    """
    if not name or any(sep and sep in name for sep in ("/", os.sep, os.altsep)) or name.startswith("."):
        raise ConfigError(f"Invalid preset name: '{name}'. Use a bare name such as 'compact'.")
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    for d in dirs:
        path = Path(d) / f"{name}.yaml"
        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise LoadError(f"Cannot read preset '{path}': {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Preset '{path}' must be a mapping of settings.")
            return data
    raise LoadError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def merge_config(preset: dict, overrides: dict) -> dict:
    """Merge preset config with CLI overrides. None values in overrides are ignored."""
    result = dict(preset)
    for key, value in overrides.items():
        if value is not None:
            result[key] = value
    return result


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """List available preset names from bundled and user directories."""
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    names = set()
    for d in dirs:
        d = Path(d)
        if d.is_dir():
            for f in d.glob("*.yaml"):
                names.add(f.stem)
    return sorted(names)
