"""Applying, removing and recalculating spell and equipment effects on characters."""

from __future__ import annotations

import logging
from dataclasses import replace

from .model import Affect, Apply, Character, ItemType, WearPosition

logger = logging.getLogger(__name__)

_ABILITY_FIELDS = {
    Apply.STR: "strength",
    Apply.DEX: "dexterity",
    Apply.INT: "intelligence",
    Apply.WIS: "wisdom",
    Apply.CON: "constitution",
}

_CHARACTER_FIELDS = {
    Apply.CHAR_WEIGHT: "weight",
    Apply.CHAR_HEIGHT: "height",
    Apply.HIT: "max_hit",
    Apply.AC: "armor",
    Apply.HITROLL: "hitroll",
    Apply.DAMROLL: "damroll",
}

_SAVING_THROWS = (
    Apply.SAVING_PARA,
    Apply.SAVING_ROD,
    Apply.SAVING_PETRI,
    Apply.SAVING_BREATH,
    Apply.SAVING_SPELL,
)

_AC_WEIGHT = {
    WearPosition.BODY: 3,
    WearPosition.HEAD: 2,
    WearPosition.LEGS: 2,
    WearPosition.FEET: 1,
    WearPosition.HANDS: 1,
    WearPosition.ARMS: 1,
    WearPosition.SHIELD: 1,
}


def _halve(value: int) -> int:
    """Divide by two, truncating toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def _ability_cap(ch: Character) -> int:
    return 25 if ch.npc else 18


def affect_modify(
    ch: Character, location: int, modifier: int, bitvector: int, add: bool
) -> None:
    """Add (or with ``add`` false, take away) one modifier and its affect bits."""
    if add:
        ch.affected_by |= bitvector
    else:
        ch.affected_by &= ~bitvector
        modifier = -modifier

    try:
        loc = Apply(location)
    except ValueError:
        logger.warning("Unknown apply adjust attempt: location %r", location)
        return

    if loc in _ABILITY_FIELDS:
        attr = _ABILITY_FIELDS[loc]
        setattr(ch.tmp_abilities, attr, getattr(ch.tmp_abilities, attr) + modifier)
    elif loc in _CHARACTER_FIELDS:
        attr = _CHARACTER_FIELDS[loc]
        setattr(ch, attr, getattr(ch, attr) + modifier)
    elif loc in _SAVING_THROWS:
        ch.saving_throws[loc - Apply.SAVING_PARA] += modifier


def _apply_everything(ch: Character, add: bool) -> None:
    for item in ch.equipment:
        if item is None:
            continue
        for obj_aff in item.affected:
            affect_modify(ch, obj_aff.location, obj_aff.modifier, item.bitvector, add)
    for aff in ch.affected:
        affect_modify(ch, aff.location, aff.modifier, aff.bitvector, add)


def affect_total(ch: Character) -> None:
    """Recompute a character's current abilities from base values and all effects."""
    _apply_everything(ch, False)
    ch.tmp_abilities = ch.abilities.copy()
    _apply_everything(ch, True)

    cap = _ability_cap(ch)
    tmp = ch.tmp_abilities
    tmp.dexterity = max(0, min(tmp.dexterity, cap))
    tmp.intelligence = max(0, min(tmp.intelligence, cap))
    tmp.wisdom = max(0, min(tmp.wisdom, cap))
    tmp.constitution = max(0, min(tmp.constitution, cap))
    tmp.strength = max(0, tmp.strength)

    if ch.npc:
        tmp.strength = min(tmp.strength, cap)
    elif tmp.strength > 18:
        tmp.str_add = min(tmp.str_add + (tmp.strength - 18) * 10, 100)
        tmp.strength = 18


def affect_to_char(ch: Character, affect: Affect) -> Affect:
    """Attach a copy of ``affect`` to the character and return the stored copy."""
    stored = replace(affect)
    ch.affected.insert(0, stored)
    affect_modify(ch, stored.location, stored.modifier, stored.bitvector, True)
    affect_total(ch)
    return stored


def affect_remove(ch: Character, affect: Affect) -> None:
    """Detach ``affect`` (the very object stored on the character) and undo it."""
    if not ch.affected:
        raise ValueError("character has no affects to remove")
    index = next(
        (i for i, stored in enumerate(ch.affected) if stored is affect), None
    )
    if index is None:
        raise ValueError("affect is not attached to this character")
    affect_modify(ch, affect.location, affect.modifier, affect.bitvector, False)
    del ch.affected[index]
    affect_total(ch)


def affect_from_char(ch: Character, spell: int) -> None:
    """Remove every affect of the given spell type."""
    for aff in [a for a in ch.affected if a.type == spell]:
        affect_remove(ch, aff)


def affected_by_spell(ch: Character, spell: int) -> bool:
    """Tell whether the character carries an affect of the given spell type."""
    return any(aff.type == spell for aff in ch.affected)


def affect_join(
    ch: Character, affect: Affect, avg_dur: bool, avg_mod: bool
) -> Affect:
    """Merge ``affect`` with an existing one of the same type, or just add it.

    Durations and modifiers are summed, and halved when asked to average.
    Returns the affect now stored on the character.
    """
    existing = next((a for a in ch.affected if a.type == affect.type), None)
    if existing is None:
        return affect_to_char(ch, affect)

    duration = affect.duration + existing.duration
    if avg_dur:
        duration = _halve(duration)
    modifier = affect.modifier + existing.modifier
    if avg_mod:
        modifier = _halve(modifier)

    affect_remove(ch, existing)
    return affect_to_char(ch, replace(affect, duration=duration, modifier=modifier))


def apply_ac(ch: Character, pos: int) -> int:
    """Return the armour-class effect of the armour worn at ``pos``."""
    item = ch.equipment[pos]
    if item is None:
        raise ValueError(f"nothing is worn at position {pos}")
    if item.item_type != ItemType.ARMOR:
        return 0
    try:
        factor = _AC_WEIGHT.get(WearPosition(pos), 0)
    except ValueError:
        return 0
    return factor * item.value[0]