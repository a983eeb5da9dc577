"""The gate guard that confiscates items of the 8000-area zone carried out of it."""

from __future__ import annotations

from collections.abc import Iterable

from .model import Character, Item
from .world import World

_ZONE_LOW = 8000
_ZONE_HIGH = 8999
_MOVE_CAP = 10

PUNISHED_MESSAGE = "You have been punished by the Gods!\n\r"


def _from_zone(item: Item) -> bool:
    return _ZONE_LOW <= item.item_number < _ZONE_HIGH


def mar_gate(world: World, characters: Iterable[Character]) -> list[Character]:
    """Confiscate zone items from every playing character outside the zone.

    An item belongs to the zone when its item number lies in 8000..8998.
    Each confiscated item is destroyed and its cost taken from the owner's
    gold; a punished character also loses all mana, keeps at most 10 move
    points and has no negative gold. Returns the punished characters.
    """
    punished_list: list[Character] = []
    for ch in characters:
        if ch.npc or ch.in_room is None or ch.in_room.number >= _ZONE_LOW:
            continue
        punished = False

        for pos, item in enumerate(ch.equipment):
            if item is not None and _from_zone(item):
                obj = world.unequip_char(ch, pos)
                ch.gold -= obj.cost
                world.extract_obj(obj)
                punished = True

        for item in [i for i in ch.carrying if _from_zone(i)]:
            world.obj_from_char(item)
            ch.gold -= item.cost
            world.extract_obj(item)
            punished = True

        if punished:
            ch.gold = max(0, ch.gold)
            ch.move = min(ch.move, _MOVE_CAP)
            ch.mana = 0
            punished_list.append(ch)
    return punished_list