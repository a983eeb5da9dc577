import pytest

from mudkit.parsing import (
    FILL_WORDS,
    argument_interpreter,
    fill_word,
    half_chop,
    is_abbrev,
    is_number,
    old_search_block,
    one_argument,
    search_block,
)


def test_fill_words_from_source():
    source_words = ("in", "from", "with", "the", "on", "at", "to")
    assert FILL_WORDS == source_words
    assert [search_block(word, FILL_WORDS, True) for word in source_words] == list(
        range(len(source_words))
    )


def test_search_block_exact_is_case_insensitive():
    assert search_block("THE", FILL_WORDS, True) == FILL_WORDS.index("the")


def test_search_block_exact_requires_whole_word():
    assert search_block("wi", FILL_WORDS, True) == -1


def test_search_block_prefix_match():
    assert search_block("Wi", FILL_WORDS, False) == FILL_WORDS.index("with")


def test_search_block_prefix_longer_than_word_fails():
    assert search_block("into", FILL_WORDS, False) == -1


def test_search_block_empty_does_not_match_first_word():
    assert search_block("", ["north", "south"], False) == -1
    assert search_block("", ["north", ""], False) == 1


def test_search_block_returns_first_of_several_matches():
    words = ["south", "sit", "sip"]
    assert search_block("s", words, False) == 0
    assert search_block("si", words, False) == words.index("sit")


def test_old_search_block_empty_segment():
    assert old_search_block("look", 0, 0, ["north"], 0) == 0


def test_old_search_block_prefix_is_one_based():
    words = ["north", "look"]
    assert old_search_block("  lo", 2, 2, words, 0) == words.index("look") + 1


def test_old_search_block_exact_mode():
    words = ["north", "look"]
    assert old_search_block("lo", 0, 2, words, 1) == -1
    assert old_search_block("look", 0, 4, words, 1) == words.index("look") + 1


def test_old_search_block_is_case_sensitive():
    assert old_search_block("LOOK", 0, 4, ["look"], 0) == -1


def test_old_search_block_no_match():
    assert old_search_block("xyz", 0, 3, ["north", "look"], 0) == -1


@pytest.mark.parametrize("word", FILL_WORDS)
def test_fill_word_true(word):
    assert fill_word(word.upper()) is True


def test_fill_word_false():
    assert fill_word("sword") is False
    assert fill_word("") is False


def test_argument_interpreter_skips_fill_words():
    assert argument_interpreter("the SWORD in the bag") == ("sword", "bag")


def test_argument_interpreter_empty():
    assert argument_interpreter("") == ("", "")


def test_argument_interpreter_single_word():
    assert argument_interpreter("  at   Torch") == ("torch", "")


def test_one_argument_returns_rest():
    assert one_argument("  at SWORD rest") == ("sword", " rest")


def test_one_argument_skips_tabs():
    assert one_argument("\tthe\tBag") == ("bag", "")


def test_one_argument_round_trip_with_rest():
    first, rest = one_argument("get coin")
    assert first == "get"
    assert one_argument(rest) == ("coin", "")


def test_is_abbrev():
    assert is_abbrev("NOR", "north") is True
    assert is_abbrev("north", "NORTH") is True
    assert is_abbrev("", "north") is False
    assert is_abbrev("northx", "north") is False
    assert is_abbrev("s", "north") is False


def test_half_chop():
    assert half_chop("  say hello world ") == ("say", "hello world ")


def test_half_chop_single_word():
    assert half_chop("look") == ("look", "")


def test_half_chop_empty():
    assert half_chop("   ") == ("", "")


def test_is_number():
    assert is_number("3001") is True
    assert is_number("") is False
    assert is_number("12a") is False
    assert is_number("-5") is False
    assert is_number(" 5") is False