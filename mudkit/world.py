"""The live world: moving characters and objects between rooms, inventories and containers."""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from .affects import affect_modify, affect_total, apply_ac
from .model import (
    WEAR_TAKE,
    Character,
    ExtraDescription,
    FindTarget,
    Item,
    ItemFlag,
    ItemType,
    Room,
    WearPosition,
)
from .names import get_number, isname
from .parsing import search_block

logger = logging.getLogger(__name__)

_IGNORE_WORDS = ("the", "in", "on", "at")

T = TypeVar("T")


class WorldError(Exception):
    """An object or character is not where an operation needs it to be."""


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if "A" <= c <= "Z" else c for c in text)


def _lit_light(ch: Character) -> bool:
    light = ch.equipment[WearPosition.LIGHT]
    return light is not None and light.item_type == ItemType.LIGHT and light.value[2] != 0


def _age_items(items: Iterable[Item], use: int) -> None:
    for item in items:
        if item.timer > 0:
            item.timer -= use
        _age_items(item.contains, use)


def object_list_new_owner(items: Iterable[Item], ch: Character | None) -> None:
    """Mark every item, and everything nested inside, as carried by ``ch``."""
    for item in items:
        object_list_new_owner(item.contains, ch)
        item.carried_by = ch


class World:
    """All rooms, characters and objects, with the operations that move them."""

    def __init__(
        self,
        rooms: Iterable[Room] = (),
        can_see: Callable[[Character, Character], bool] | None = None,
        can_see_obj: Callable[[Character, Item], bool] | None = None,
    ) -> None:
        self.rooms: list[Room] = list(rooms)
        self.can_see = can_see or (lambda ch, other: True)
        self.can_see_obj = can_see_obj or (lambda ch, obj: True)
        self.characters: list[Character] = []
        self.objects: list[Item] = []
        self.obj_counts: Counter[int] = Counter()
        self.mob_counts: Counter[int] = Counter()
        self.rng = random.Random()

    # ---- registration -------------------------------------------------

    def add_character(self, ch: Character) -> None:
        """Put a character at the head of the character list."""
        self.characters.insert(0, ch)
        if ch.npc and ch.nr >= 0:
            self.mob_counts[ch.nr] += 1

    def add_object(self, obj: Item) -> None:
        """Put an object at the head of the object list."""
        self.objects.insert(0, obj)
        if obj.item_number >= 0:
            self.obj_counts[obj.item_number] += 1

    # ---- characters and rooms -----------------------------------------

    def char_to_room(self, ch: Character, room: Room) -> None:
        """Place a character in a room."""
        room.people.insert(0, ch)
        ch.in_room = room
        if _lit_light(ch):
            room.light += 1

    def char_from_room(self, ch: Character) -> None:
        """Take a character out of its room."""
        room = ch.in_room
        if room is None:
            raise WorldError("character is nowhere")
        if _lit_light(ch):
            room.light -= 1
        room.people.remove(ch)
        ch.in_room = None

    # ---- objects ------------------------------------------------------

    def obj_to_char(self, obj: Item, ch: Character) -> None:
        """Give an object to a character."""
        ch.carrying.insert(0, obj)
        obj.carried_by = ch
        obj.in_room = None
        ch.carry_weight += obj.weight
        ch.carry_items += 1

    def obj_from_char(self, obj: Item) -> None:
        """Take an object from the character carrying it."""
        owner = obj.carried_by
        if owner is None or obj not in owner.carrying:
            raise WorldError("object is not carried")
        owner.carrying.remove(obj)
        owner.carry_weight -= obj.weight
        owner.carry_items -= 1
        obj.carried_by = None

    def obj_to_room(self, obj: Item, room: Room) -> None:
        """Put an object in a room."""
        room.contents.insert(0, obj)
        obj.in_room = room
        obj.carried_by = None

    def obj_from_room(self, obj: Item) -> None:
        """Take an object out of its room."""
        room = obj.in_room
        if room is None or obj not in room.contents:
            raise WorldError("object is not in a room")
        room.contents.remove(obj)
        obj.in_room = None

    def obj_to_obj(self, obj: Item, container: Item) -> None:
        """Put an object into a container, adding its weight up the chain."""
        container.contains.insert(0, obj)
        obj.in_obj = container
        holder: Item | None = container
        while holder is not None:
            holder.weight += obj.weight
            holder = holder.in_obj

    def obj_from_obj(self, obj: Item) -> None:
        """Take an object out of its container, removing its weight up the chain."""
        container = obj.in_obj
        if container is None:
            raise WorldError("object is in no object")
        if obj not in container.contains:
            raise WorldError("object structures are inconsistent")
        container.contains.remove(obj)

        top = container
        top.weight -= obj.weight
        while top.in_obj is not None:
            top = top.in_obj
            top.weight -= obj.weight
        if top.carried_by is not None:
            top.carried_by.carry_weight -= obj.weight
        obj.in_obj = None

    # ---- equipment ----------------------------------------------------

    def equip_char(self, ch: Character, obj: Item, pos: int) -> bool:
        """Wear ``obj`` at ``pos``.

        Returns False when the item's alignment restriction zaps it onto the
        floor instead.
        """
        if not 0 <= pos < len(ch.equipment):
            raise WorldError(f"invalid wear position {pos}")
        if ch.equipment[pos] is not None:
            raise WorldError(f"position {pos} is already occupied")
        if obj.carried_by is not None:
            raise WorldError("object is carried when equipped")
        if obj.in_room is not None:
            raise WorldError("object is in a room when equipped")

        if (
            (obj.has_flag(ItemFlag.ANTI_EVIL) and ch.is_evil)
            or (obj.has_flag(ItemFlag.ANTI_GOOD) and ch.is_good)
            or (obj.has_flag(ItemFlag.ANTI_NEUTRAL) and ch.is_neutral)
        ):
            if ch.in_room is not None:
                logger.info("%s is zapped by %s", ch.name, obj.short_description)
                self.obj_to_room(obj, ch.in_room)
                return False
            logger.warning("character is nowhere when equipping")

        ch.equipment[pos] = obj
        if obj.item_type == ItemType.ARMOR:
            ch.armor -= apply_ac(ch, pos)
        for aff in obj.affected:
            affect_modify(ch, aff.location, aff.modifier, obj.bitvector, True)
        affect_total(ch)
        return True

    def unequip_char(self, ch: Character, pos: int) -> Item:
        """Remove and return the item worn at ``pos``."""
        if not 0 <= pos < len(ch.equipment):
            raise WorldError(f"invalid wear position {pos}")
        obj = ch.equipment[pos]
        if obj is None:
            raise WorldError(f"nothing is worn at position {pos}")
        if obj.item_type == ItemType.ARMOR:
            ch.armor += apply_ac(ch, pos)
        ch.equipment[pos] = None
        for aff in obj.affected:
            affect_modify(ch, aff.location, aff.modifier, obj.bitvector, False)
        affect_total(ch)
        return obj

    # ---- extraction ---------------------------------------------------

    def extract_obj(self, obj: Item) -> None:
        """Remove an object and everything inside it from the world."""
        if obj.in_room is not None:
            self.obj_from_room(obj)
        elif obj.in_obj is not None:
            if obj in obj.in_obj.contains:
                obj.in_obj.contains.remove(obj)
            obj.in_obj = None
        elif obj.carried_by is not None:
            self.obj_from_char(obj)

        while obj.contains:
            self.extract_obj(obj.contains[0])

        if obj in self.objects:
            self.objects.remove(obj)
        if obj.item_number >= 0:
            self.obj_counts[obj.item_number] -= 1

    def extract_char(self, ch: Character) -> None:
        """Remove a character from the world, leaving its belongings in its room."""
        room = ch.in_room
        if room is None:
            raise WorldError("extracting a character that is nowhere")
        if ch not in self.characters:
            raise WorldError("character is not in the character list")

        if ch.carrying:
            for item in ch.carrying:
                item.carried_by = None
                item.in_room = room
            room.contents.extend(ch.carrying)
            ch.carrying = []
            ch.carry_weight = 0
            ch.carry_items = 0

        ch.fighting = None
        for other in self.characters:
            if other.fighting is ch:
                other.fighting = None

        self.char_from_room(ch)
        for pos, item in enumerate(ch.equipment):
            if item is not None:
                self.obj_to_room(self.unequip_char(ch, pos), room)

        self.characters.remove(ch)
        ch.armor = 100
        if ch.npc and ch.nr > -1:
            self.mob_counts[ch.nr] -= 1

    def update_char_objects(self, ch: Character) -> None:
        """Burn a lit light and count down the timers of worn and carried items."""
        light = ch.equipment[WearPosition.LIGHT]
        if light is not None and light.item_type == ItemType.LIGHT and light.value[2] > 0:
            light.value[2] -= 1
        _age_items((item for item in ch.equipment if item is not None), 2)
        _age_items(ch.carrying, 1)

    # ---- lookups ------------------------------------------------------

    @staticmethod
    def _nth_named(
        name: str,
        candidates: Sequence[T],
        namelist: Callable[[T], str],
        visible: Callable[[T], bool] | None = None,
    ) -> T | None:
        number, word = get_number(name)
        if not number:
            return None
        seen = 0
        for candidate in candidates:
            if isname(word, namelist(candidate)) and (visible is None or visible(candidate)):
                seen += 1
                if seen == number:
                    return candidate
        return None

    def get_obj_in_list(self, name: str, items: Sequence[Item]) -> Item | None:
        """Find the named (optionally ``N.``-numbered) object in a list."""
        return self._nth_named(name, items, lambda o: o.name)

    def get_obj_in_list_num(self, num: int, items: Iterable[Item]) -> Item | None:
        """Find the first object in a list with the given item number."""
        return next((o for o in items if o.item_number == num), None)

    def get_obj(self, name: str) -> Item | None:
        """Find the named object anywhere in the world."""
        return self._nth_named(name, self.objects, lambda o: o.name)

    def get_obj_num(self, nr: int) -> Item | None:
        """Find the first object in the world with the given item number."""
        return self.get_obj_in_list_num(nr, self.objects)

    def get_char_room(self, name: str, room: Room) -> Character | None:
        """Find the named character in a room."""
        return self._nth_named(name, room.people, lambda c: c.name)

    def get_char(self, name: str) -> Character | None:
        """Find the named character anywhere in the world."""
        return self._nth_named(name, self.characters, lambda c: c.name)

    def get_char_num(self, nr: int) -> Character | None:
        """Find the first character with the given mobile number."""
        return next((c for c in self.characters if c.nr == nr), None)

    def get_char_room_vis(self, ch: Character, name: str) -> Character | None:
        """Find the named character that ``ch`` can see in its room."""
        people = ch.in_room.people if ch.in_room is not None else []
        return self._nth_named(name, people, lambda c: c.name, lambda c: self.can_see(ch, c))

    def get_char_vis(self, ch: Character, name: str) -> Character | None:
        """Find a visible named character, first in the room, then anywhere."""
        found = self.get_char_room_vis(ch, name)
        if found is not None:
            return found
        return self._nth_named(
            name, self.characters, lambda c: c.name, lambda c: self.can_see(ch, c)
        )

    def get_obj_in_list_vis(
        self, ch: Character, name: str, items: Sequence[Item]
    ) -> Item | None:
        """Find the named object in a list that ``ch`` can see."""
        return self._nth_named(
            name, items, lambda o: o.name, lambda o: self.can_see_obj(ch, o)
        )

    def get_obj_vis(self, ch: Character, name: str) -> Item | None:
        """Find a visible named object: carried, then in the room, then anywhere."""
        found = self.get_obj_in_list_vis(ch, name, ch.carrying)
        if found is not None:
            return found
        if ch.in_room is not None:
            found = self.get_obj_in_list_vis(ch, name, ch.in_room.contents)
            if found is not None:
                return found
        return self.get_obj_in_list_vis(ch, name, self.objects)

    # ---- money --------------------------------------------------------

    def create_money(self, amount: int) -> Item:
        """Create a pile of gold coins and add it to the object list."""
        if amount <= 0:
            raise ValueError("Try to create negative money.")

        if amount == 1:
            obj = Item(
                name="coin gold",
                short_description="a gold coin",
                description="One miserable gold coin.",
            )
            extra = ExtraDescription("coin gold", "One miserable gold coin.")
        else:
            obj = Item(
                name="coins gold",
                short_description="gold coins",
                description="A pile of gold coins.",
            )
            if amount < 10:
                text = f"There is {amount} coins."
            elif amount < 100:
                text = f"There is about {10 * (amount // 10)} coins"
            elif amount < 1000:
                text = f"It looks like something round {100 * (amount // 100)} coins"
            elif amount < 100000:
                thousands = amount // 1000
                guess = 1000 * (thousands + self.rng.randint(0, thousands))
                text = f"You guess there is {guess} coins"
            else:
                text = "There is A LOT of coins"
            extra = ExtraDescription("coins gold", text)

        obj.ex_description = [extra]
        obj.item_type = ItemType.MONEY
        obj.wear_flags = WEAR_TAKE
        obj.value[0] = amount
        obj.cost = amount
        obj.item_number = -1
        self.objects.insert(0, obj)
        return obj

    # ---- generic find -------------------------------------------------

    @staticmethod
    def _target_word(arg: str) -> str:
        name = ""
        pos = 0
        while pos < len(arg):
            while pos < len(arg) and arg[pos] == " ":
                pos += 1
            end = arg.find(" ", pos)
            if end < 0:
                end = len(arg)
            name = arg[pos:end]
            pos = end
            if search_block(name, _IGNORE_WORDS, True) > -1:
                break
        return _ascii_lower(name)

    def generic_find(
        self, arg: str, bitvector: int, ch: Character
    ) -> tuple[FindTarget, Character | None, Item | None]:
        """Look for a character or object named in ``arg`` in the places of ``bitvector``.

        Returns the place where something was found (or an empty flag), the
        character found and the object found.
        """
        name = self._target_word(arg)
        nothing = (FindTarget(0), None, None)
        if not name:
            return nothing

        if bitvector & FindTarget.CHAR_ROOM:
            found_ch = self.get_char_room_vis(ch, name)
            if found_ch is not None:
                return FindTarget.CHAR_ROOM, found_ch, None

        if bitvector & FindTarget.CHAR_WORLD:
            found_ch = self.get_char_vis(ch, name)
            if found_ch is not None:
                return FindTarget.CHAR_WORLD, found_ch, None

        if bitvector & FindTarget.OBJ_EQUIP:
            for item in ch.equipment:
                if item is not None and _ascii_lower(item.name) == name:
                    return FindTarget.OBJ_EQUIP, None, item

        if bitvector & FindTarget.OBJ_INV:
            found_obj = self.get_obj_in_list_vis(ch, name, ch.carrying)
            if found_obj is not None:
                return FindTarget.OBJ_INV, None, found_obj

        if bitvector & FindTarget.OBJ_ROOM and ch.in_room is not None:
            found_obj = self.get_obj_in_list_vis(ch, name, ch.in_room.contents)
            if found_obj is not None:
                return FindTarget.OBJ_ROOM, None, found_obj

        if bitvector & FindTarget.OBJ_WORLD:
            found_obj = self.get_obj_vis(ch, name)
            if found_obj is not None:
                return FindTarget.OBJ_WORLD, None, found_obj

        return nothing