import pytest

from easyphrase.errors import ConfigError, LoadError
from easyphrase.wordlists import list_names, load_builtin, load_file, load_wordlist, parse_words


def test_list_names():
    assert list_names() == ["long", "short1", "short2"]


@pytest.mark.parametrize("name,size", [("long", 7776), ("short1", 1296), ("short2", 1296)])
def test_builtin_list_sizes(name, size):
    words = load_builtin(name)
    assert len(words) == size
    assert all(isinstance(w, str) and w for w in words)


def test_builtin_lists_have_no_duplicates():
    for name in list_names():
        words = load_builtin(name)
        assert len(set(words)) == len(words), name


def test_load_builtin_unknown():
    with pytest.raises(ConfigError, match="Unknown word list"):
        load_builtin("medium")


def test_parse_words_trims_and_drops_blank_lines():
    assert parse_words("apple\nbanana\n\n  cherry  \n") == ["apple", "banana", "cherry"]


def test_load_custom_wordlist(tmp_path):
    f = tmp_path / "words.txt"
    f.write_text("apple\nbanana\n\n  cherry  \n")
    assert load_file(str(f)) == ["apple", "banana", "cherry"]


def test_load_custom_wordlist_preserves_case(tmp_path):
    f = tmp_path / "words.txt"
    f.write_text("Apple\nBANANA\nt-shirt\n")
    assert load_file(str(f)) == ["Apple", "BANANA", "t-shirt"]


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError, match="Cannot read"):
        load_file(str(tmp_path / "nope.txt"))


def test_load_directory_is_load_error(tmp_path):
    with pytest.raises(LoadError):
        load_file(str(tmp_path))


def test_load_blank_file(tmp_path):
    f = tmp_path / "blank.txt"
    f.write_text("\n   \n\t\n")
    with pytest.raises(LoadError, match="no words"):
        load_file(str(f))


def test_load_wordlist_path_wins_over_name(tmp_path):
    f = tmp_path / "words.txt"
    f.write_text("only\n")
    assert load_wordlist("short1", str(f)) == ["only"]


def test_load_wordlist_default_is_long():
    assert load_wordlist() == load_builtin("long")
