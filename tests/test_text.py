import pytest

from wireframe.text import find, find_unquoted, split_words


def test_split_words_on_spaces_and_tabs():
    assert split_words("  16\t16 4  1 ") == ["16", "16", "4", "1"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


@pytest.mark.parametrize("text", ["", "   ", "\t \t"])
def test_split_words_blank_gives_nothing(text):
    assert split_words(text) == []


def test_find_returns_first_position():
    text = "width height height"
    pos = find(text, "height")
    assert pos == text.index("height")
    assert text[pos:pos + len("height")] == "height"


def test_find_missing_gives_minus_one():
    assert find("abcdef", "xyz") == -1


def test_find_needle_longer_than_text():
    assert find("ab", "abc") == -1


@pytest.mark.parametrize("function", [find, find_unquoted])
def test_empty_needle_rejected(function):
    with pytest.raises(ValueError):
        function("abc", "")


def test_find_unquoted_skips_quoted_match():
    text = '"/*" x /*'
    assert find(text, "/*") == text.index("/*")
    assert find_unquoted(text, "/*") == text.rindex("/*")


def test_find_unquoted_only_quoted_gives_minus_one():
    assert find_unquoted('"a // b"', "//") == -1


def test_find_unquoted_matches_find_without_quotes():
    text = "one // two // three"
    assert find_unquoted(text, "//") == find(text, "//")