"""Tokenising helpers for player input: word lookup, argument splitting and abbreviations."""

from __future__ import annotations

from collections.abc import Callable, Sequence

FILL_WORDS: tuple[str, ...] = ("in", "from", "with", "the", "on", "at", "to")

_C_SPACE = frozenset(" \t\n\v\f\r")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)


def _is_word_char(char: str) -> bool:
    return ord(char) > ord(" ")


def _scan_word(
    text: str, pos: int, skip: Callable[[str], bool]
) -> tuple[str, int]:
    """Skip leading characters accepted by ``skip`` and read one lower-cased word.

    Returns the word and the position just after it.
    """
    while pos < len(text) and skip(text[pos]):
        pos += 1
    end = pos
    while end < len(text) and _is_word_char(text[end]):
        end += 1
    return _lower(text[pos:end]), end


def search_block(arg: str, words: Sequence[str], exact: bool) -> int:
    """Return the index of ``arg`` in ``words``, or -1 if it is not there.

    The comparison is case-insensitive on ``arg``. With ``exact`` false, the
    first word that ``arg`` is a prefix of matches; an empty ``arg`` then
    matches only an empty word.
    """
    needle = _lower(arg)
    if exact:
        for index, word in enumerate(words):
            if needle == word:
                return index
        return -1
    for index, word in enumerate(words):
        if needle:
            if word.startswith(needle):
                return index
        elif word == "":
            return index
    return -1


def old_search_block(
    argument: str, begin: int, length: int, words: Sequence[str], mode: int
) -> int:
    """Look up ``argument[begin:begin+length]`` in ``words``.

    Returns 0 when the segment is empty, the 1-based position of the first
    match otherwise, or -1 if nothing matches. A true ``mode`` demands the
    whole word; otherwise the segment need only be a prefix of it. The
    comparison is case-sensitive.
    """
    if length < 1:
        return 0
    segment = argument[begin:begin + length]
    if len(segment) < length:
        return -1
    for index, word in enumerate(words, start=1):
        if mode:
            if len(word) == length and word == segment:
                return index
        elif len(word) >= length and word[:length] == segment:
            return index
    return -1


def fill_word(word: str) -> bool:
    """Tell whether ``word`` is one of the filler words skipped in arguments."""
    return search_block(word, FILL_WORDS, True) >= 0


def _skip_blank(char: str) -> bool:
    return char == " "


def _skip_space(char: str) -> bool:
    return char in _C_SPACE


def argument_interpreter(argument: str) -> tuple[str, str]:
    """Return the first two non-filler words of ``argument``, lower-cased."""
    pos = 0
    while True:
        first, pos = _scan_word(argument, pos, _skip_blank)
        if not fill_word(first):
            break
    while True:
        second, pos = _scan_word(argument, pos, _skip_blank)
        if not fill_word(second):
            break
    return first, second


def one_argument(argument: str) -> tuple[str, str]:
    """Return the first non-filler word of ``argument`` and the text after it."""
    pos = 0
    while True:
        first, pos = _scan_word(argument, pos, _skip_space)
        if not fill_word(first):
            break
    return first, argument[pos:]


def is_abbrev(arg1: str, arg2: str) -> bool:
    """Tell whether ``arg1`` is a non-empty, case-insensitive abbreviation of ``arg2``."""
    if not arg1:
        return False
    return _lower(arg2).startswith(_lower(arg1))


def half_chop(text: str) -> tuple[str, str]:
    """Split ``text`` into its first word and the rest, trimming leading space of each."""
    pos = 0
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    end = pos
    while end < len(text) and text[end] not in _C_SPACE:
        end += 1
    first = text[pos:end]
    while end < len(text) and text[end] in _C_SPACE:
        end += 1
    return first, text[end:]


def is_number(text: str) -> bool:
    """Tell whether ``text`` is a non-empty run of decimal digits 0-9."""
    return bool(text) and all("0" <= char <= "9" for char in text)