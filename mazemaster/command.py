"""Commands accepted at the maze prompt."""

# std imports
import enum

__all__ = ("Command", "SessionError", "CommandParseError", "parse_command")


class SessionError(Exception):
    """Base class of errors reported within a maze session."""


class CommandParseError(SessionError):
    """Input line does not name a command."""

    def __init__(self, token):
        self.token = token
        super().__init__("unknown command: {}".format(token))


class Command(enum.Enum):
    """Directional or refresh instruction, valued by its ``(dx, dy)`` delta."""

    MOVE_LEFT = (-1, 0)
    MOVE_RIGHT = (1, 0)
    MOVE_UP = (0, -1)
    MOVE_DOWN = (0, 1)
    REFRESH = (0, 0)

    @property
    def delta(self):
        return self.value


#: lowercase input token to command.
COMMANDS = {
    "left": Command.MOVE_LEFT,
    "a": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "d": Command.MOVE_RIGHT,
    "up": Command.MOVE_UP,
    "w": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "s": Command.MOVE_DOWN,
    "": Command.REFRESH,
}


def parse_command(line):
    """
    Return :class:`Command` for input ``line``, case-insensitive.

    An empty line is :attr:`Command.REFRESH`.

    :raises CommandParseError: carrying the lowercased token, when ``line``
        is not one of the known commands or their WASD aliases.
    """
    token = line.lower()
    try:
        return COMMANDS[token]
    except KeyError:
        raise CommandParseError(token) from None
