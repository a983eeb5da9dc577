import pytest

from mudkit.limits import (
    MANA_LIMIT,
    Condition,
    gain_condition,
    graf,
    hit_gain,
    hit_limit,
    mana_gain,
    mana_limit,
    move_gain,
    move_limit,
)
from mudkit.model import Character, Position

POINTS = (2, 4, 17, 14, 8, 4, 3)


def fed(**kwargs):
    ch = Character(**kwargs)
    ch.conditions = [0, 10, 10]
    return ch


@pytest.mark.parametrize(
    "age, expected",
    [(0, 2), (14, 2), (15, 4), (30, 17), (45, 14), (60, 8), (80, 3), (200, 3)],
)
def test_graf_bracket_points(age, expected):
    assert graf(age, *POINTS) == expected


def test_graf_brackets_meet_at_their_ends():
    # the end of each line runs into the start of the next one
    assert graf(29, 0, 0, 15, 0, 0, 0, 0) == 14
    assert graf(44, 0, 0, 0, 15, 0, 0, 0) == 14


def test_graf_truncates_toward_zero_on_falling_lines():
    assert graf(16, 0, 10, 0, 0, 0, 0, 0) == 10


def test_graf_is_monotonic_on_rising_segment():
    values = [graf(age, 0, 0, 150, 0, 0, 0, 0) for age in range(15, 30)]
    assert values == sorted(values)


def test_mana_limit_is_fixed():
    assert mana_limit(Character()) == MANA_LIMIT
    assert mana_limit(Character(npc=True)) == MANA_LIMIT


def test_hit_limit_npc_uses_max_hit():
    assert hit_limit(Character(npc=True, max_hit=77), 40) == 77


def test_hit_limit_player_adds_age_bonus():
    ch = Character(max_hit=50)
    assert hit_limit(ch, 10) == 50 + graf(10, *POINTS)
    assert hit_limit(ch, 30) - hit_limit(ch, 10) == graf(30, *POINTS) - graf(10, *POINTS)


def test_move_limit():
    assert move_limit(Character(npc=True, max_move=33), 20) == 33
    assert move_limit(Character(), 10) == 50
    assert move_limit(Character(), 90) == 20


def test_npc_gains_equal_level():
    npc = fed(npc=True, level=7)
    assert mana_gain(npc, 20) == 7
    assert hit_gain(npc, 20) == 7
    assert move_gain(npc, 20) == 7


def test_resting_regains_more_than_standing():
    standing = fed(position=Position.STANDING)
    sleeping = fed(position=Position.SLEEPING)
    for gain in (mana_gain, hit_gain, move_gain):
        assert gain(sleeping, 30) >= gain(standing, 30)


def test_mana_doubles_while_sleeping():
    standing = fed(position=Position.STANDING, char_class=4)
    sleeping = fed(position=Position.SLEEPING, char_class=4)
    assert mana_gain(sleeping, 10) == 2 * mana_gain(standing, 10)


def test_caster_doubles_mana_and_halves_hits():
    warrior = fed(char_class=4)
    mage = fed(char_class=1)
    assert mana_gain(mage, 50) == 2 * mana_gain(warrior, 50)
    assert hit_gain(mage, 50) == hit_gain(warrior, 50) >> 1


def test_hunger_quarters_gain():
    ch = fed(char_class=4)
    normal = move_gain(ch, 30)
    ch.conditions[Condition.FULL] = 0
    assert move_gain(ch, 30) == normal >> 2


def test_poison_quarters_gain():
    ch = fed(char_class=4)
    normal = hit_gain(ch, 30)
    ch.affected_by = 4096
    assert hit_gain(ch, 30) == normal >> 2


def test_gain_condition_unchanging():
    ch = Character()
    ch.conditions = [-1, -1, -1]
    assert gain_condition(ch, Condition.FULL, -5) is None
    assert ch.conditions == [-1, -1, -1]


def test_gain_condition_clamps():
    ch = Character()
    ch.conditions = [0, 20, 5]
    assert gain_condition(ch, Condition.FULL, 100) is None
    assert ch.conditions[Condition.FULL] == 24


def test_gain_condition_hungry_and_thirsty():
    ch = Character()
    ch.conditions = [0, 1, 1]
    assert gain_condition(ch, Condition.FULL, -1) == "You are hungry.\n\r"
    assert gain_condition(ch, Condition.THIRST, -3) == "You are thirsty.\n\r"
    assert ch.conditions[Condition.THIRST] == 0


def test_gain_condition_sober():
    ch = Character()
    ch.conditions = [1, 10, 10]
    assert gain_condition(ch, Condition.DRUNK, -1) == "You are now sober.\n\r"
    assert gain_condition(ch, Condition.DRUNK, -1) is None


def test_gain_condition_rejects_unknown_condition():
    with pytest.raises(ValueError):
        gain_condition(Character(), 7, 1)