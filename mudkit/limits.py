"""Effective maxima and hourly regeneration of hit, mana and move points, and bodily conditions."""

from __future__ import annotations

from enum import IntEnum

from .model import Character, Position

_CLASS_MAGIC_USER = 1
_CLASS_CLERIC = 2

_AFF_POISON = 4096

_CONDITION_MAX = 24
_UNCHANGING = -1

MANA_LIMIT = 100


class Condition(IntEnum):
    """Indexes into a character's list of bodily conditions."""

    DRUNK = 0
    FULL = 1
    THIRST = 2


_CONDITION_MESSAGES = {
    Condition.FULL: "You are hungry.\n\r",
    Condition.THIRST: "You are thirsty.\n\r",
}


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def graf(
    age: int, p0: int, p1: int, p2: int, p3: int, p4: int, p5: int, p6: int
) -> int:
    """Interpolate a value over age brackets.

    Below 15 the value is ``p0``; from 80 on it is ``p6``. In between the
    value runs along straight lines through ``p1`` at 15, ``p2`` at 30,
    ``p3`` at 45, ``p4`` at 60 and ``p5`` at 80.
    """
    if age < 15:
        return p0
    if age <= 29:
        return p1 + _cdiv((age - 15) * (p2 - p1), 15)
    if age <= 44:
        return p2 + _cdiv((age - 30) * (p3 - p2), 15)
    if age <= 59:
        return p3 + _cdiv((age - 45) * (p4 - p3), 15)
    if age <= 79:
        return p4 + _cdiv((age - 60) * (p5 - p4), 20)
    return p6


def mana_limit(ch: Character) -> int:
    """Return the effective maximum of mana points."""
    return MANA_LIMIT


def hit_limit(ch: Character, age_years: int) -> int:
    """Return the effective maximum of hit points for a character of the given age."""
    if ch.npc:
        return ch.max_hit
    return ch.max_hit + graf(age_years, 2, 4, 17, 14, 8, 4, 3)


def move_limit(ch: Character, age_years: int) -> int:
    """Return the effective maximum of move points for a character of the given age."""
    if ch.npc:
        return ch.max_move
    return graf(age_years, 50, 70, 160, 120, 100, 40, 20)


def _starved(ch: Character) -> bool:
    return (
        ch.conditions[Condition.FULL] == 0
        or ch.conditions[Condition.THIRST] == 0
    )


def _poisoned(ch: Character) -> bool:
    return bool(ch.affected_by & _AFF_POISON)


def _is_caster(ch: Character) -> bool:
    return ch.char_class in (_CLASS_MAGIC_USER, _CLASS_CLERIC)


def _rest_bonus(gain: int, position: int, shifts: tuple[int, int, int]) -> int:
    """Add the bonus for sleeping, resting or sitting, given as right shifts."""
    sleeping, resting, sitting = shifts
    if position == Position.SLEEPING:
        return gain + (gain >> sleeping)
    if position == Position.RESTING:
        return gain + (gain >> resting)
    if position == Position.SITTING:
        return gain + (gain >> sitting)
    return gain


def mana_gain(ch: Character, age_years: int) -> int:
    """Return the mana points regained per game hour."""
    if ch.npc:
        gain = ch.level
    else:
        gain = graf(age_years, 2, 4, 6, 8, 6, 5, 8)
        gain = _rest_bonus(gain, ch.position, (0, 1, 2))
        if _is_caster(ch):
            gain += gain
    if _poisoned(ch):
        gain >>= 2
    if _starved(ch):
        gain >>= 2
    return gain


def hit_gain(ch: Character, age_years: int) -> int:
    """Return the hit points regained per game hour.

    Poison quarters the gain; the poison damage itself is dealt by the
    combat code.
    """
    if ch.npc:
        gain = ch.level
    else:
        gain = graf(age_years, 2, 5, 10, 18, 6, 4, 2)
        gain = _rest_bonus(gain, ch.position, (1, 2, 3))
        if _is_caster(ch):
            gain >>= 1
    if _poisoned(ch):
        gain >>= 2
    if _starved(ch):
        gain >>= 2
    return gain


def move_gain(ch: Character, age_years: int) -> int:
    """Return the move points regained per game hour."""
    if ch.npc:
        return ch.level
    gain = graf(age_years, 12, 18, 22, 21, 14, 10, 6)
    gain = _rest_bonus(gain, ch.position, (1, 2, 3))
    if _poisoned(ch):
        gain >>= 2
    if _starved(ch):
        gain >>= 2
    return gain


def gain_condition(ch: Character, condition: int, value: int) -> str | None:
    """Change a bodily condition by ``value``, keeping it within 0..24.

    A condition of -1 never changes. Returns the message for the character
    when the condition has just run out, otherwise None.
    """
    cond = Condition(condition)
    if ch.conditions[cond] == _UNCHANGING:
        return None

    intoxicated = ch.conditions[Condition.DRUNK] > 0
    ch.conditions[cond] = max(0, min(_CONDITION_MAX, ch.conditions[cond] + value))
    if ch.conditions[cond]:
        return None

    if cond == Condition.DRUNK:
        return "You are now sober.\n\r" if intoxicated else None
    return _CONDITION_MESSAGES[cond]