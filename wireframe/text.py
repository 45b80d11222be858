"""Small string helpers used when reading XPM sources."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs.

    Only spaces and tabs separate words; other whitespace such as newlines
    stays part of the word it appears in.
    """
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("the string to search for must not be empty")


def find(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1."""
    _check_needle(needle)
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` outside double quotes, or -1.

    Every ``"`` met while scanning flips between quoted and unquoted text;
    matches that start inside quoted text are skipped.
    """
    _check_needle(needle)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1