"""Per-connection maze session: the read, parse, move, render loop."""

# std imports
import asyncio
import logging

# local
from .command import Command, CommandParseError, parse_command
from .viewport import render_interface

__all__ = ("MazeSession",)

PROMPT = "> "

#: token reported for input lines exceeding the StreamReader limit.
LINE_TOO_LONG = "<line too long>"

logger = logging.getLogger("mazemaster.session")


class MazeSession:
    """
    One client's game, owning its maze, avatar position and stream.

    :param asyncio.StreamReader reader: client input.
    :param asyncio.StreamWriter writer: client output.
    :param Maze maze: maze instance owned by this session only.
    :param tuple position: starting ``(x, y)`` of the avatar.
    :param int radius: view radius of the rendered viewport.
    :param float timeout: disconnect a client idle at the prompt for this
        many seconds.  ``0`` waits forever.
    :param str encoding: stream encoding.
    :param str encoding_errors: decoding error handler for client input.
    """

    def __init__(
        self,
        reader,
        writer,
        maze,
        position=(1, 1),
        radius=6,
        timeout=0,
        encoding="utf8",
        encoding_errors="replace",
    ):
        self.reader = reader
        self.writer = writer
        self.maze = maze
        self.position = tuple(position)
        self.radius = radius
        self.timeout = timeout
        self.encoding = encoding
        self.encoding_errors = encoding_errors

    def __repr__(self):
        return "<MazeSession position={0.position} radius={0.radius}>".format(self)

    async def write(self, text):
        self.writer.write(text.encode(self.encoding))
        await self.writer.drain()

    async def print_interface(self):
        await self.write(render_interface(self.maze, self.position, self.radius))

    async def _readline(self):
        if self.timeout:
            return await asyncio.wait_for(self.reader.readline(), self.timeout)
        return await self.reader.readline()

    async def read_command(self):
        """
        Read and parse the next line of client input.

        :returns: the :class:`~.Command`, or ``None`` at end of stream.
        :raises CommandParseError: for unrecognized input, or a line longer
            than the reader's buffer limit, which is discarded.
        """
        try:
            data = await self._readline()
        except ValueError as err:
            logger.debug("%s: %s", self, err)
            raise CommandParseError(LINE_TOO_LONG) from None
        if not data:
            return None
        line = data.decode(self.encoding, self.encoding_errors)
        if line.endswith("\n"):
            line = line[:-1]
            # telnet(1) and nc -C terminate lines by CRLF
            if line.endswith("\r"):
                line = line[:-1]
        return parse_command(line)

    def try_move(self, dx, dy):
        """
        Move the avatar by ``(dx, dy)`` if the target cell is traversable.

        Out-of-bounds or wall targets leave the position unchanged.

        :returns: whether the avatar moved.
        """
        x, y = self.position
        target = (x + dx, y + dy)
        if not self.maze.in_bounds(*target):
            return False
        cell = self.maze.get_cell(*target)
        if cell is None or not cell.is_traversable:
            return False
        self.position = target
        return True

    async def apply_command(self, command):
        """Apply ``command`` and write the re-rendered interface."""
        if command is not Command.REFRESH:
            moved = self.try_move(*command.delta)
            logger.debug("%s %s: %s", self, command.name, "ok" if moved else "blocked")
        await self.print_interface()

    async def handle(self):
        """
        Run the session until the client disconnects or idles out.

        Transport errors propagate to the caller.
        """
        await self.print_interface()
        while True:
            await self.write(PROMPT)
            try:
                command = await self.read_command()
            except CommandParseError as err:
                logger.debug("%s: %s", self, err)
                await self.write("{}\n".format(err))
                continue
            except asyncio.TimeoutError:
                logger.info("%s: timeout after %ss idle", self, self.timeout)
                await self.write("\nTimeout.\n")
                return
            if command is None:
                logger.debug("%s: end of input", self)
                return
            await self.write("\n")
            await self.apply_command(command)
