"""Small string helpers: reversing, word counting, sorting and trimming."""

from __future__ import annotations

from pathlib import Path


def _words(text: str) -> list[str]:
    """Split on single spaces, dropping the empty pieces between repeated spaces."""
    return [piece for piece in text.split(" ") if piece]


def reverse_string(text: str) -> str:
    """Return the characters of ``text`` in reverse order."""
    return text[::-1]


def count_words(text: str) -> int:
    """Count the space-separated words in ``text``."""
    return len(_words(text))


def count_word(text: str, word: str) -> int:
    """Count how many space-separated words of ``text`` equal ``word`` exactly."""
    return sum(1 for piece in _words(text) if piece == word)


def sort_characters(text: str) -> str:
    """Return the characters of ``text`` in ascending order."""
    return "".join(sorted(text))


def count_words_in_file(path: str | Path) -> int:
    """Count the space-separated words on every line of a text file."""
    with Path(path).open(encoding="utf-8") as handle:
        return sum(count_words(line.rstrip("\n")) for line in handle)


def strip_leading(text: str) -> str:
    """Remove leading spaces, tabs and newlines."""
    return text.lstrip(" \t\n")


def strip_trailing(text: str) -> str:
    """Remove trailing spaces (only spaces)."""
    return text.rstrip(" ")