"""Status output on stderr; passphrases go to stdout via click."""

from __future__ import annotations

import sys


class Console:
    """Writes status lines to stderr unless quiet; debug lines only when verbose."""

    def __init__(self, quiet: bool = False, verbose: bool = False, stream=None):
        self._quiet = quiet
        self._verbose = verbose
        self._stream = stream

    def _write(self, message: str) -> None:
        # Resolved per call so click's CliRunner can swap sys.stderr.
        print(message, file=self._stream if self._stream is not None else sys.stderr)

    def info(self, message: str) -> None:
        if not self._quiet:
            self._write(message)

    def debug(self, message: str) -> None:
        if self._verbose:
            self._write(message)

    def settings(self, source: str, list_size: int, case: str, number: int) -> None:
        """Debug line describing the resolved configuration."""
        self.debug(f"list={source} ({list_size} words) case={case} number={number}")

    def entropy(self, bits: float, number: int, list_size: int) -> None:
        self.info(f"Entropy: ~{bits:.1f} bits ({number} words x {list_size}-word list)")
