"""The command table and the interpreter that dispatches a player's input line."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .model import Character, Position
from .parsing import old_search_block

AFF_HIDE = 1048576

UNKNOWN_MESSAGE = "Arglebargle, glop-glyf!?!\n\r"
UNIMPLEMENTED_MESSAGE = "Sorry, but that command has yet to be implemented...\n\r"

POSITION_MESSAGES: dict[int, str] = {
    Position.DEAD: "Lie still; you are DEAD!!! :-( \n\r",
    Position.INCAP: "You are in a pretty bad shape, unable to do anything!\n\r",
    Position.MORTALLYW: "You are in a pretty bad shape, unable to do anything!\n\r",
    Position.STUNNED: "All you can do right now, is think about the stars!\n\r",
    Position.SLEEPING: "In your dreams, or what?\n\r",
    Position.RESTING: "Nah... You feel too relaxed to do that..\n\r",
    Position.SITTING: "Maybe you should get on your feet first?\n\r",
    Position.FIGHTING: "No way! You are fighting for your life!\n\r",
}

Handler = Callable[[Character, str, int], object]
Special = Callable[[Character, int, str], bool]
Sender = Callable[[Character, str], object]

_DE = Position.DEAD
_SL = Position.SLEEPING
_RE = Position.RESTING
_SI = Position.SITTING
_FI = Position.FIGHTING
_ST = Position.STANDING

# (word, handler name, minimum position, minimum level); command number is index + 1.
_COMMANDS: tuple[tuple[str, str, int, int], ...] = (
    ("north", "move", _ST, 0),
    ("east", "move", _ST, 0),
    ("south", "move", _ST, 0),
    ("west", "move", _ST, 0),
    ("up", "move", _ST, 0),
    ("down", "move", _ST, 0),
    ("enter", "enter", _ST, 0),
    ("exits", "exits", _RE, 0),
    ("kiss", "action", _RE, 0),
    ("get", "get", _RE, 0),
    ("drink", "drink", _RE, 0),
    ("eat", "eat", _RE, 0),
    ("wear", "wear", _RE, 0),
    ("wield", "wield", _RE, 0),
    ("look", "look", _RE, 0),
    ("score", "score", _DE, 0),
    ("say", "say", _RE, 0),
    ("shout", "shout", _RE, 0),
    ("tell", "tell", _DE, 0),
    ("inventory", "inventory", _DE, 0),
    ("qui", "qui", _DE, 0),
    ("bounce", "action", _ST, 0),
    ("smile", "action", _RE, 0),
    ("dance", "action", _ST, 0),
    ("kill", "kill", _FI, 0),
    ("cackle", "action", _RE, 0),
    ("laugh", "action", _RE, 0),
    ("giggle", "action", _RE, 0),
    ("shake", "action", _RE, 0),
    ("puke", "action", _RE, 0),
    ("growl", "action", _RE, 0),
    ("scream", "action", _RE, 0),
    ("insult", "insult", _RE, 0),
    ("comfort", "action", _RE, 0),
    ("nod", "action", _RE, 0),
    ("sigh", "action", _RE, 0),
    ("sulk", "action", _RE, 0),
    ("help", "help", _DE, 0),
    ("who", "who", _DE, 0),
    ("emote", "emote", _SL, 1),
    ("echo", "echo", _SL, 21),
    ("stand", "stand", _RE, 0),
    ("sit", "sit", _RE, 0),
    ("rest", "rest", _RE, 0),
    ("sleep", "sleep", _SL, 0),
    ("wake", "wake", _SL, 0),
    ("force", "force", _SL, 22),
    ("transfer", "trans", _SL, 22),
    ("hug", "action", _RE, 0),
    ("snuggle", "action", _RE, 0),
    ("cuddle", "action", _RE, 0),
    ("nuzzle", "action", _RE, 0),
    ("cry", "action", _RE, 0),
    ("news", "news", _SL, 0),
    ("equipment", "equipment", _SL, 0),
    ("buy", "not_here", _ST, 0),
    ("sell", "not_here", _ST, 0),
    ("value", "not_here", _ST, 0),
    ("list", "not_here", _ST, 0),
    ("drop", "drop", _RE, 0),
    ("goto", "goto", _SL, 21),
    ("weather", "weather", _RE, 0),
    ("read", "read", _RE, 0),
    ("pour", "pour", _ST, 0),
    ("grab", "grab", _RE, 0),
    ("remove", "remove", _RE, 0),
    ("put", "put", _RE, 0),
    ("shutdow", "shutdow", _DE, 24),
    ("save", "save", _SL, 0),
    ("hit", "hit", _FI, 0),
    ("string", "string", _SL, 23),
    ("give", "give", _RE, 0),
    ("quit", "quit", _DE, 0),
    ("stat", "stat", _DE, 21),
    ("setskill", "setskill", _SL, 22),
    ("time", "time", _DE, 0),
    ("load", "load", _DE, 22),
    ("purge", "purge", _DE, 22),
    ("shutdown", "shutdown", _DE, 24),
    ("idea", "idea", _DE, 0),
    ("typo", "typo", _DE, 0),
    ("bug", "bug", _DE, 0),
    ("whisper", "whisper", _RE, 0),
    ("cast", "cast", _SI, 1),
    ("at", "at", _DE, 21),
    ("ask", "ask", _RE, 0),
    ("order", "order", _RE, 1),
    ("sip", "sip", _RE, 0),
    ("taste", "taste", _RE, 0),
    ("snoop", "snoop", _DE, 21),
    ("follow", "follow", _RE, 0),
    ("rent", "not_here", _ST, 1),
    ("offer", "not_here", _ST, 1),
    ("poke", "action", _RE, 0),
    ("advance", "advance", _DE, 23),
    ("accuse", "action", _SI, 0),
    ("grin", "action", _RE, 0),
    ("bow", "action", _ST, 0),
    ("open", "open", _SI, 0),
    ("close", "close", _SI, 0),
    ("lock", "lock", _SI, 0),
    ("unlock", "unlock", _SI, 0),
    ("leave", "leave", _ST, 0),
    ("applaud", "action", _RE, 0),
    ("blush", "action", _RE, 0),
    ("burp", "action", _RE, 0),
    ("chuckle", "action", _RE, 0),
    ("clap", "action", _RE, 0),
    ("cough", "action", _RE, 0),
    ("curtsey", "action", _ST, 0),
    ("fart", "action", _RE, 0),
    ("flip", "action", _ST, 0),
    ("fondle", "action", _RE, 0),
    ("frown", "action", _RE, 0),
    ("gasp", "action", _RE, 0),
    ("glare", "action", _RE, 0),
    ("groan", "action", _RE, 0),
    ("grope", "action", _RE, 0),
    ("hiccup", "action", _RE, 0),
    ("lick", "action", _RE, 0),
    ("love", "action", _RE, 0),
    ("moan", "action", _RE, 0),
    ("nibble", "action", _RE, 0),
    ("pout", "action", _RE, 0),
    ("purr", "action", _RE, 0),
    ("ruffle", "action", _ST, 0),
    ("shiver", "action", _RE, 0),
    ("shrug", "action", _RE, 0),
    ("sing", "action", _RE, 0),
    ("slap", "action", _RE, 0),
    ("smirk", "action", _RE, 0),
    ("snap", "action", _RE, 0),
    ("sneeze", "action", _RE, 0),
    ("snicker", "action", _RE, 0),
    ("sniff", "action", _RE, 0),
    ("snore", "action", _SL, 0),
    ("spit", "action", _ST, 0),
    ("squeeze", "action", _RE, 0),
    ("stare", "action", _RE, 0),
    ("strut", "action", _ST, 0),
    ("thank", "action", _RE, 0),
    ("twiddle", "action", _RE, 0),
    ("wave", "action", _RE, 0),
    ("whistle", "action", _RE, 0),
    ("wiggle", "action", _ST, 0),
    ("wink", "action", _RE, 0),
    ("yawn", "action", _RE, 0),
    ("snowball", "action", _ST, 22),
    ("write", "write", _ST, 1),
    ("hold", "grab", _RE, 1),
    ("flee", "flee", _FI, 1),
    ("sneak", "sneak", _ST, 1),
    ("hide", "hide", _RE, 1),
    ("backstab", "backstab", _ST, 1),
    ("pick", "pick", _ST, 1),
    ("steal", "steal", _ST, 1),
    ("bash", "bash", _FI, 1),
    ("rescue", "rescue", _FI, 1),
    ("kick", "kick", _FI, 1),
    ("french", "action", _RE, 0),
    ("comb", "action", _RE, 0),
    ("massage", "action", _RE, 0),
    ("tickle", "action", _RE, 0),
    ("practice", "practice", _RE, 1),
    ("pat", "action", _RE, 0),
    ("examine", "examine", _SI, 0),
    ("take", "get", _RE, 0),
    ("info", "info", _SL, 0),
    ("'", "say", _RE, 0),
    ("practise", "practice", _RE, 1),
    ("curse", "action", _RE, 0),
    ("use", "use", _SI, 1),
    ("where", "where", _DE, 1),
    ("levels", "levels", _DE, 0),
    ("reroll", "reroll", _DE, 24),
    ("pray", "action", _SI, 0),
    (",", "emote", _SL, 1),
    ("beg", "action", _RE, 0),
    ("bleed", "action", _RE, 0),
    ("cringe", "action", _RE, 0),
    ("daydream", "action", _SL, 0),
    ("fume", "action", _RE, 0),
    ("grovel", "action", _RE, 0),
    ("hop", "action", _RE, 0),
    ("nudge", "action", _RE, 0),
    ("peer", "action", _RE, 0),
    ("point", "action", _RE, 0),
    ("ponder", "action", _RE, 0),
    ("punch", "action", _RE, 0),
    ("snarl", "action", _RE, 0),
    ("spank", "action", _RE, 0),
    ("steam", "action", _RE, 0),
    ("tackle", "action", _RE, 0),
    ("taunt", "action", _RE, 0),
    ("think", "action", _RE, 0),
    ("whine", "action", _RE, 0),
    ("worship", "action", _RE, 0),
    ("yodel", "action", _RE, 0),
    ("brief", "brief", _DE, 0),
    ("wizlist", "wizlist", _DE, 0),
    ("consider", "consider", _RE, 0),
    ("group", "group", _RE, 1),
    ("restore", "restore", _DE, 22),
    ("return", "return", _DE, 0),
    ("switch", "switch", _DE, 23),
    ("quaff", "quaff", _RE, 0),
    ("recite", "recite", _RE, 0),
    ("users", "users", _DE, 21),
    ("pose", "pose", _ST, 0),
    ("noshout", "noshout", _SL, 22),
    ("wizhelp", "wizhelp", _SL, 21),
    ("credits", "credits", _DE, 0),
    ("compact", "compact", _DE, 0),
)

COMMAND_WORDS: tuple[str, ...] = tuple(entry[0] for entry in _COMMANDS)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


@dataclass(frozen=True)
class CommandInfo:
    """One command: its word, the name of its handler and who may use it."""

    number: int
    name: str
    handler: str
    minimum_position: int
    minimum_level: int


def build_command_table() -> dict[int, CommandInfo]:
    """Return every command keyed by its command number, starting at 1."""
    return {
        number: CommandInfo(number, name, handler, position, level)
        for number, (name, handler, position, level) in enumerate(_COMMANDS, start=1)
    }


class CommandInterpreter:
    """Parse an input line and dispatch it to the handler of its command.

    ``handlers`` maps handler names (such as ``"move"`` or ``"look"``) to
    callables taking ``(ch, argument, cmd)``; a command whose handler is
    missing is reported as not yet implemented. ``special``, if given, is
    tried first with ``(ch, cmd, argument)`` and stops the command when it
    returns true. ``send`` delivers a message to a character.
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler],
        special: Special | None,
        send: Sender,
    ) -> None:
        self.handlers = dict(handlers)
        self.special = special
        self.send = send
        self.table = build_command_table()

    def interpret(self, ch: Character, line: str) -> int:
        """Carry out one input line and return the command number it matched.

        Returns 0 for an empty line and -1 for an unknown command.
        """
        ch.affected_by &= ~AFF_HIDE

        begin = 0
        while begin < len(line) and line[begin] == " ":
            begin += 1
        end = begin
        while end < len(line) and ord(line[end]) > ord(" "):
            end += 1
        word = line[begin:end].translate(_ASCII_LOWER)
        rest = line[end:]

        cmd = old_search_block(word, 0, len(word), COMMAND_WORDS, 0)
        if cmd == 0:
            return 0
        if cmd < 0:
            self.send(ch, UNKNOWN_MESSAGE)
            return cmd

        info = self.table[cmd]
        if ch.level < info.minimum_level:
            self.send(ch, UNKNOWN_MESSAGE)
            return cmd

        handler = self.handlers.get(info.handler)
        if handler is None:
            self.send(ch, UNIMPLEMENTED_MESSAGE)
            return cmd

        if ch.position < info.minimum_position:
            message = POSITION_MESSAGES.get(ch.position)
            if message is not None:
                self.send(ch, message)
            return cmd

        if self.special is not None and self.special(ch, cmd, rest):
            return cmd
        handler(ch, rest, cmd)
        return cmd