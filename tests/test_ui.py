"""Tests for the ui module: stderr status console."""

import io
from unittest.mock import patch


def test_console_output_respects_quiet_mode():
    """In quiet mode, info messages are suppressed."""
    from easyphrase.ui import Console

    console = Console(quiet=True)
    with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
        console.info("this should not appear")
        assert mock_stderr.getvalue() == ""


def test_console_output_shows_info_by_default():
    from easyphrase.ui import Console

    console = Console()
    with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
        console.info("hello")
        assert mock_stderr.getvalue() == "hello\n"


def test_console_debug_only_in_verbose():
    from easyphrase.ui import Console

    buf = io.StringIO()
    Console(stream=buf).debug("hidden")
    Console(verbose=True, stream=buf).debug("shown")
    assert buf.getvalue() == "shown\n"


def test_console_settings_line():
    from easyphrase.ui import Console

    buf = io.StringIO()
    Console(verbose=True, stream=buf).settings("short1", 1296, "upper", 4)
    assert buf.getvalue() == "list=short1 (1296 words) case=upper number=4\n"


def test_console_entropy_line():
    from easyphrase.ui import Console

    buf = io.StringIO()
    Console(stream=buf).entropy(77.549, 6, 7776)
    assert buf.getvalue() == "Entropy: ~77.5 bits (6 words x 7776-word list)\n"


def test_console_entropy_suppressed_when_quiet():
    from easyphrase.ui import Console

    buf = io.StringIO()
    Console(quiet=True, stream=buf).entropy(77.549, 6, 7776)
    assert buf.getvalue() == ""
