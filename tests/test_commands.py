import pytest

from mudkit.commands import (
    AFF_HIDE,
    COMMAND_WORDS,
    UNIMPLEMENTED_MESSAGE,
    UNKNOWN_MESSAGE,
    CommandInterpreter,
    build_command_table,
)
from mudkit.model import Character, Position


class Recorder:
    def __init__(self):
        self.calls = []
        self.sent = []

    def handler(self, name):
        def call(ch, argument, cmd):
            self.calls.append((name, ch, argument, cmd))

        return call

    def send(self, ch, text):
        self.sent.append((ch, text))


def make(handler_names=("move", "say", "score", "echo", "look"), special=None):
    rec = Recorder()
    handlers = {name: rec.handler(name) for name in handler_names}
    return rec, CommandInterpreter(handlers, special, rec.send)


def test_table_covers_all_commands():
    table = build_command_table()
    assert len(table) == 213
    assert table[1].name == "north"
    assert table[213].name == "compact"
    assert [table[n].name for n in sorted(table)] == list(COMMAND_WORDS)


def test_table_entries_from_source():
    table = build_command_table()
    assert table[41].minimum_level == 21
    assert table[41].minimum_position == Position.SLEEPING
    assert table[169].name == "'"
    assert table[169].handler == "say"
    assert table[167].handler == "get"
    assert table[25].minimum_position == Position.FIGHTING


def test_full_word_dispatches_with_rest():
    rec, interp = make()
    ch = Character(name="Bob")
    assert interp.interpret(ch, "  NORTH") == 1
    assert rec.calls == [("move", ch, "", 1)]
    assert rec.sent == []


def test_prefix_matches_first_command():
    rec, interp = make()
    ch = Character()
    assert interp.interpret(ch, "n") == 1
    assert interp.interpret(ch, "sc") == 16
    assert [c[0] for c in rec.calls] == ["move", "score"]


def test_argument_keeps_case():
    rec, interp = make()
    ch = Character()
    interp.interpret(ch, "say Hello There")
    assert rec.calls[0][2] == " Hello There"
    assert rec.calls[0][3] == 17


def test_empty_line_does_nothing():
    rec, interp = make()
    ch = Character()
    assert interp.interpret(ch, "   ") == 0
    assert rec.calls == [] and rec.sent == []


def test_unknown_word():
    rec, interp = make()
    ch = Character()
    assert interp.interpret(ch, "xyzzy") == -1
    assert rec.sent == [(ch, UNKNOWN_MESSAGE)]


def test_level_too_low():
    rec, interp = make()
    ch = Character(level=5)
    interp.interpret(ch, "echo hi")
    assert rec.calls == []
    assert rec.sent == [(ch, UNKNOWN_MESSAGE)]


def test_position_too_low():
    rec, interp = make()
    ch = Character(position=Position.SLEEPING)
    interp.interpret(ch, "north")
    assert rec.calls == []
    assert rec.sent == [(ch, "In your dreams, or what?\n\r")]


def test_dead_character_can_still_score():
    rec, interp = make()
    ch = Character(position=Position.DEAD)
    interp.interpret(ch, "score")
    assert [c[0] for c in rec.calls] == ["score"]


def test_missing_handler_reported():
    rec, interp = make()
    ch = Character()
    interp.interpret(ch, "kiss bob")
    assert rec.sent == [(ch, UNIMPLEMENTED_MESSAGE)]


def test_special_intercepts():
    seen = []

    def special(ch, cmd, arg):
        seen.append((cmd, arg))
        return True

    rec, interp = make(special=special)
    ch = Character()
    interp.interpret(ch, "look sky")
    assert seen == [(15, " sky")]
    assert rec.calls == []


def test_special_declining_lets_handler_run():
    rec, interp = make(special=lambda ch, cmd, arg: False)
    ch = Character()
    interp.interpret(ch, "look")
    assert [c[0] for c in rec.calls] == ["look"]


@pytest.mark.parametrize("line", ["north", "xyzzy", ""])
def test_hide_is_cleared(line):
    rec, interp = make()
    ch = Character(affected_by=AFF_HIDE | 1)
    interp.interpret(ch, line)
    assert ch.affected_by == 1