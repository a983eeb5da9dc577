# mudkit

Building blocks for a classic text MUD: the pieces that turn a player's typed
line into a command, keep track of who and what is where in the world, apply
spell and equipment affects to a character, and work out how fast hit points,
mana and movement come back. It also has a small tool for merging
`#number`-keyed area files.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is in it

- `mudkit.parsing` – the word-level helpers commands use:
  `one_argument`, `argument_interpreter`, `half_chop`, `is_abbrev`,
  `is_number`, `fill_word`, `search_block` and `old_search_block`.
  Filler words ("in", "from", "with", "the", "on", "at", "to") are skipped
  by `one_argument` and `argument_interpreter`, which return their words
  as tuples.
- `mudkit.commands` – `build_command_table()` returns every command as a
  `CommandInfo` (word, handler name, minimum position, minimum level),
  keyed by command number. `CommandInterpreter(handlers, special, send)`
  matches the first word of a line by prefix, checks level and position,
  calls the optional `special` callable first, and then the handler
  registered under the command's handler name. `interpret(ch, line)`
  returns the command number, 0 for an empty line and -1 for an unknown
  word. Commands whose handler is not in `handlers` are answered with a
  "not yet implemented" message.
- `mudkit.model` – the game data as dataclasses: `Character`, `Item`,
  `Room`, `Affect`, `ObjectAffect`, `ExtraDescription` and `Abilities`,
  and the enums `Apply`, `WearPosition`, `ItemType`, `ItemFlag`,
  `Position` and `FindTarget`.
- `mudkit.affects` – adding, joining and removing affects
  (`affect_to_char`, `affect_join`, `affect_remove`, `affect_from_char`,
  `affected_by_spell`), single modifiers (`affect_modify`), armour class
  of worn armour (`apply_ac`), and recomputing a character's current
  abilities with `affect_total`.
- `mudkit.names` – keyword matching on name lists (`isname`, `fname`)
  and the `2.sword` style numbering (`get_number`).
- `mudkit.world` – the `World` class, which moves characters and items
  between rooms, inventories, containers and equipment, finds them by
  name (with or without the `can_see` / `can_see_obj` checks you pass
  in), creates money with `create_money`, searches several places at once
  with `generic_find`, and removes things with `extract_obj` and
  `extract_char`. `WorldError` is raised when something is not where an
  operation needs it.
- `mudkit.limits` – effective maxima and hourly gains of hit, mana and
  move points by age, position, class, poison and hunger (`hit_limit`,
  `move_limit`, `mana_limit`, `hit_gain`, `mana_gain`, `move_gain`, built
  on the age curve `graf`), and hunger, thirst and drunkenness via
  `gain_condition`, which returns the message to show when a condition
  runs out.
- `mudkit.gate` – `mar_gate(world, characters)` takes items numbered
  8000–8998 away from every player character standing in a room numbered
  below 8000, charges their cost in gold, drains mana, caps move points at
  10, and returns the characters it punished.
- `mudkit.merge` – merging `#number`-keyed area files (`merge`,
  `merge_files`, `MergeError`) and the `mudkit-merge` command.

## A short example

```python
from mudkit.parsing import one_argument, half_chop

word, rest = one_argument("the sword from chest")
# word == "sword", rest == " from chest"

first, remainder = half_chop("  tell bob hello there")
# first == "tell", remainder == "bob hello there"
```

## Merging area files

World files (rooms, objects, mobiles, zones) are lists of records that
start with a `#<number>` line and end with a line beginning with `$`. To lay
a builder's new file over an existing one, with records of the same number
taken from the new file:

```
mudkit-merge new_rooms.wld old_rooms.wld > merged.wld
```

The merged file is written to standard output. If a file cannot be opened
or is not in the numbered format, a message is printed and the command
exits with status 1. The same is available from Python through
`mudkit.merge.merge`, which yields merged lines, and
`mudkit.merge.merge_files`.

## What it does not do

mudkit is a library of game-world logic, not a running game. It has no
network server or connection handling, no login or character creation,
no player or world file loading and saving (apart from merging area
files), and no combat, spells or command handlers of its own: the
`CommandInterpreter` dispatches to handlers you supply.