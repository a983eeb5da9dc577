"""Keyword lists of objects and characters: first names, name matching and "N.name" prefixes."""

from __future__ import annotations

_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


def _isalpha(char: str) -> bool:
    return char in _ASCII_LETTERS


def _lower(char: str) -> str:
    return char.lower() if "A" <= char <= "Z" else char


def fname(namelist: str) -> str:
    """Return the leading run of letters of a keyword list."""
    end = 0
    while end < len(namelist) and _isalpha(namelist[end]):
        end += 1
    return namelist[:end]


def isname(text: str, namelist: str) -> bool:
    """Tell whether ``text`` is one of the words of ``namelist``, ignoring case.

    A word of the list ends at the first character that is not a letter, so
    ``"sword"`` names ``"long-sword"`` but ``"sw"`` does not name ``"sword"``.
    """
    pos = 0
    size = len(namelist)
    while True:
        i = 0
        while True:
            at_end = i >= len(text)
            cur = namelist[pos] if pos < size else ""
            if at_end and not _isalpha(cur):
                return True
            if not cur:
                return False
            if at_end or cur == " ":
                break
            if _lower(text[i]) != _lower(cur):
                break
            i += 1
            pos += 1
        while pos < size and _isalpha(namelist[pos]):
            pos += 1
        if pos >= size:
            return False
        pos += 1


def get_number(name: str) -> tuple[int, str]:
    """Split an ``"N.name"`` reference into its count and the bare name.

    Without a dot the count is 1. A count that is not all digits gives 0,
    which means no match is possible.
    """
    prefix, dot, rest = name.partition(".")
    if not dot:
        return 1, name
    if not all("0" <= char <= "9" for char in prefix):
        return 0, rest
    return (int(prefix) if prefix else 0), rest