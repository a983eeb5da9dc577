"""Core game records: characters, items, rooms and the codes that describe them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum, IntFlag

MAX_OBJ_AFFECT = 2
SAVING_THROWS = 5
WEAR_TAKE = 1

GOOD_ALIGNMENT = 350
EVIL_ALIGNMENT = -350


class Apply(IntEnum):
    """What an affect or an item modifier changes on a character."""

    NONE = 0
    STR = 1
    DEX = 2
    INT = 3
    WIS = 4
    CON = 5
    SEX = 6
    CLASS = 7
    LEVEL = 8
    AGE = 9
    CHAR_WEIGHT = 10
    CHAR_HEIGHT = 11
    MANA = 12
    HIT = 13
    MOVE = 14
    GOLD = 15
    EXP = 16
    AC = 17
    HITROLL = 18
    DAMROLL = 19
    SAVING_PARA = 20
    SAVING_ROD = 21
    SAVING_PETRI = 22
    SAVING_BREATH = 23
    SAVING_SPELL = 24


class WearPosition(IntEnum):
    """Equipment slots on a character."""

    LIGHT = 0
    FINGER_R = 1
    FINGER_L = 2
    NECK_1 = 3
    NECK_2 = 4
    BODY = 5
    HEAD = 6
    LEGS = 7
    FEET = 8
    HANDS = 9
    ARMS = 10
    SHIELD = 11
    ABOUT = 12
    WAIST = 13
    WRIST_R = 14
    WRIST_L = 15
    WIELD = 16
    HOLD = 17


class ItemType(IntEnum):
    """Kinds of object."""

    UNDEFINED = 0
    LIGHT = 1
    SCROLL = 2
    WAND = 3
    STAFF = 4
    WEAPON = 5
    FIREWEAPON = 6
    MISSILE = 7
    TREASURE = 8
    ARMOR = 9
    POTION = 10
    WORN = 11
    OTHER = 12
    TRASH = 13
    TRAP = 14
    CONTAINER = 15
    NOTE = 16
    DRINKCON = 17
    KEY = 18
    FOOD = 19
    MONEY = 20
    PEN = 21
    BOAT = 22


class ItemFlag(IntFlag):
    """Extra flags an object can carry."""

    GLOW = 1
    HUM = 2
    DARK = 4
    LOCK = 8
    EVIL = 16
    INVISIBLE = 32
    MAGIC = 64
    NODROP = 128
    BLESS = 256
    ANTI_GOOD = 512
    ANTI_EVIL = 1024
    ANTI_NEUTRAL = 2048


class Position(IntEnum):
    """Bodily state of a character, from dead to standing."""

    DEAD = 0
    MORTALLYW = 1
    INCAP = 2
    STUNNED = 3
    SLEEPING = 4
    RESTING = 5
    SITTING = 6
    FIGHTING = 7
    STANDING = 8


class FindTarget(IntFlag):
    """Places a generic search may look in; the one that matched is returned."""

    CHAR_ROOM = 1
    CHAR_WORLD = 2
    OBJ_INV = 4
    OBJ_ROOM = 8
    OBJ_WORLD = 16
    OBJ_EQUIP = 32


@dataclass
class Abilities:
    """The six basic attributes, with the exceptional-strength bonus."""

    strength: int = 0
    str_add: int = 0
    intelligence: int = 0
    wisdom: int = 0
    dexterity: int = 0
    constitution: int = 0

    def copy(self) -> Abilities:
        """Return an independent copy."""
        return replace(self)


@dataclass
class Affect:
    """A timed spell effect on a character."""

    type: int
    duration: int = 0
    modifier: int = 0
    location: int = Apply.NONE
    bitvector: int = 0


@dataclass
class ObjectAffect:
    """A permanent modifier an item grants while worn."""

    location: int = Apply.NONE
    modifier: int = 0


@dataclass
class ExtraDescription:
    """Extra text shown when looking at a keyword."""

    keyword: str
    description: str


def _object_affects() -> list[ObjectAffect]:
    return [ObjectAffect() for _ in range(MAX_OBJ_AFFECT)]


@dataclass(eq=False)
class Item:
    """An object in the world."""

    name: str = ""
    short_description: str = ""
    description: str = ""
    item_type: int = ItemType.UNDEFINED
    wear_flags: int = 0
    extra_flags: int = 0
    value: list[int] = field(default_factory=lambda: [0, 0, 0, 0])
    weight: int = 0
    cost: int = 0
    cost_per_day: int = 0
    timer: int = 0
    bitvector: int = 0
    affected: list[ObjectAffect] = field(default_factory=_object_affects)
    ex_description: list[ExtraDescription] = field(default_factory=list)
    item_number: int = -1
    in_room: Room | None = None
    carried_by: Character | None = None
    in_obj: Item | None = None
    contains: list[Item] = field(default_factory=list)

    def has_flag(self, flag: int) -> bool:
        """Tell whether every bit of ``flag`` is set in the extra flags."""
        return (self.extra_flags & flag) == flag


@dataclass(eq=False)
class Character:
    """A player or a mobile."""

    name: str = ""
    npc: bool = False
    level: int = 0
    sex: int = 0
    char_class: int = 0
    alignment: int = 0
    abilities: Abilities = field(default_factory=Abilities)
    tmp_abilities: Abilities = field(default_factory=Abilities)
    hit: int = 0
    max_hit: int = 0
    mana: int = 0
    max_mana: int = 0
    move: int = 0
    max_move: int = 0
    armor: int = 100
    hitroll: int = 0
    damroll: int = 0
    gold: int = 0
    exp: int = 0
    weight: int = 0
    height: int = 0
    saving_throws: list[int] = field(default_factory=lambda: [0] * SAVING_THROWS)
    affected_by: int = 0
    affected: list[Affect] = field(default_factory=list)
    equipment: list[Item | None] = field(
        default_factory=lambda: [None] * len(WearPosition)
    )
    carrying: list[Item] = field(default_factory=list)
    carry_weight: int = 0
    carry_items: int = 0
    in_room: Room | None = None
    was_in_room: Room | None = None
    position: int = Position.STANDING
    conditions: list[int] = field(default_factory=lambda: [0, 0, 0])
    nr: int = -1
    timer: int = 0
    fighting: Character | None = None
    master: Character | None = None
    followers: list[Character] = field(default_factory=list)
    desc: object | None = None

    @property
    def is_good(self) -> bool:
        return self.alignment >= GOOD_ALIGNMENT

    @property
    def is_evil(self) -> bool:
        return self.alignment <= EVIL_ALIGNMENT

    @property
    def is_neutral(self) -> bool:
        return not self.is_good and not self.is_evil


@dataclass(eq=False)
class Room:
    """A location holding people and objects."""

    number: int = 0
    name: str = ""
    zone: int = 0
    room_flags: int = 0
    light: int = 0
    people: list[Character] = field(default_factory=list)
    contents: list[Item] = field(default_factory=list)