"""Game-world logic for a text MUD: parsing, command dispatch, affects, world bookkeeping, limits and area-file merging."""

__version__ = "0.1.0"

__all__ = [
    "affects",
    "commands",
    "gate",
    "limits",
    "merge",
    "model",
    "names",
    "parsing",
    "world",
]