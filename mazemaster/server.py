"""
The ``main`` function here is wired to the command line tool by name
mazemaster-server.  If this server's PID receives the SIGTERM signal, it
attempts to shutdown gracefully.

Each accepted connection is served by its own :class:`~.MazeSession`, with
its own copy of the maze, in its own asyncio task.  Sessions share nothing
but the immutable maze source text.
"""

# std imports
import collections
import argparse
import asyncio
import logging
import signal
import sys

# local
from . import accessories
from .maze import MazeError, parse_maze, load_maze
from .session import MazeSession

__all__ = ("Server", "create_server", "run_server", "parse_server_args")

CONFIG = collections.namedtuple(
    "CONFIG",
    [
        "host",
        "port",
        "loglevel",
        "logfile",
        "logfmt",
        "maze",
        "radius",
        "timeout",
        "lenient",
    ],
)(
    host="0.0.0.0",
    port=3000,
    loglevel="info",
    logfile=None,
    logfmt=accessories._DEFAULT_LOGFMT,
    maze=None,
    radius=6,
    timeout=0,
    lenient=False,
)
logger = logging.getLogger("mazemaster.server")


class Server:
    """
    Listening maze server, returned by :func:`create_server`.

    Tracks the sessions of connected clients so that :meth:`close` may
    disconnect them along with the listener.
    """

    def __init__(self, maze_text, strict=True, **session_kwds):
        self.maze_text = maze_text
        self.strict = strict
        self.session_kwds = session_kwds
        self._server = None
        self._sessions = []

    @property
    def clients(self):
        """List of :class:`~.MazeSession` of currently connected clients."""
        return list(self._sessions)

    @property
    def sockets(self):
        return self._server.sockets if self._server else ()

    def is_serving(self):
        return self._server is not None and self._server.is_serving()

    async def start(self, host, port):
        self._server = await asyncio.start_server(self.on_connect, host, port)
        return self

    async def on_connect(self, reader, writer):
        """Serve one client connection until it disconnects."""
        peer = writer.get_extra_info("peername")
        logger.info("Connection from %s", peer)
        session = MazeSession(
            reader, writer, parse_maze(self.maze_text, strict=self.strict),
            **self.session_kwds
        )
        self._sessions.append(session)
        try:
            await session.handle()
        except (ConnectionError, OSError) as err:
            logger.info("Connection lost for %s: %s", peer, err)
        else:
            logger.info("Connection closed for %s", peer)
        finally:
            self._sessions.remove(session)
            writer.close()
            try:
                await writer.wait_closed()
            except (ConnectionError, OSError) as err:
                logger.debug("Close of %s: %s", peer, err)

    def close(self):
        """Stop listening and disconnect all clients."""
        if self._server is not None:
            self._server.close()
        for session in self._sessions:
            session.writer.close()

    async def wait_closed(self):
        if self._server is not None:
            await self._server.wait_closed()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.close()
        await self.wait_closed()


async def create_server(host=None, port=3000, maze=None, lenient=False, **kwds):
    """
    Create a TCP maze server.

    :param str host: bind address, ``None`` binds all interfaces.
    :param int port: listen port for TCP Server.
    :param str maze: maze source text served to each client.  When
        unspecified, the bundled maze is used.
    :param bool lenient: accept maze text with lines of unequal width.
    :param int radius: view radius of each session, default 6.
    :param float timeout: disconnect clients idle for this duration, in
        seconds.  ``0`` (default) never disconnects idle clients.
    :raises MazeError: when ``maze`` cannot be parsed.  The text is parsed
        once before binding, so that each connection may parse it again
        without failure.
    :return Server: listening server.
    """
    if maze is None:
        maze = load_maze()
    parse_maze(maze, strict=not lenient)
    server = Server(maze, strict=not lenient, **kwds)
    return await server.start(host, port)


async def _sigterm_handler(server, log):
    log.info("SIGTERM received, closing server.")

    # This signals the completion of the server.wait_closed() Future,
    # allowing the main() function to complete.
    server.close()


def parse_server_args():
    parser = argparse.ArgumentParser(
        description="Maze game server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("host", nargs="?", default=CONFIG.host, help="bind address")
    parser.add_argument(
        "port", nargs="?", type=int, default=CONFIG.port, help="bind port"
    )
    parser.add_argument("--loglevel", default=CONFIG.loglevel, help="level name")
    parser.add_argument("--logfile", default=CONFIG.logfile, help="filepath")
    parser.add_argument("--logfmt", default=CONFIG.logfmt, help="log format")
    parser.add_argument(
        "--maze", default=CONFIG.maze, help="maze text filepath (default: bundled)"
    )
    parser.add_argument(
        "--radius", type=int, default=CONFIG.radius, help="view radius"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=CONFIG.timeout,
        help="idle disconnect (0 disables)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        default=CONFIG.lenient,
        help="accept maze lines of unequal width",
    )
    return vars(parser.parse_args())


async def run_server(
    host=CONFIG.host,
    port=CONFIG.port,
    loglevel=CONFIG.loglevel,
    logfile=CONFIG.logfile,
    logfmt=CONFIG.logfmt,
    maze=CONFIG.maze,
    radius=CONFIG.radius,
    timeout=CONFIG.timeout,
    lenient=CONFIG.lenient,
):
    """
    Program entry point for server daemon.

    This function configures a logger and creates a maze server for the
    given keyword arguments, serving forever, completing only upon receipt of
    SIGTERM.

    :raises MazeError: when the maze file cannot be parsed.
    :raises OSError: when the maze file cannot be read or the address
        cannot be bound.
    """
    log = accessories.make_logger(
        name="mazemaster.server", loglevel=loglevel, logfile=logfile, logfmt=logfmt
    )

    # log all function arguments.
    _locals = locals()
    log.debug(
        "Server configuration: %s",
        accessories.repr_mapping({field: _locals[field] for field in CONFIG._fields}),
    )

    loop = asyncio.get_running_loop()

    # bind
    server = await create_server(
        host,
        port,
        maze=load_maze(maze),
        lenient=lenient,
        radius=radius,
        timeout=timeout,
    )

    # SIGTERM cases server to gracefully stop
    loop.add_signal_handler(
        signal.SIGTERM, asyncio.ensure_future, _sigterm_handler(server, log)
    )

    log.info("Server ready on %s:%s", host, port)

    # await completion of server stop
    try:
        await server.wait_closed()
    finally:
        # remove signal handler on stop
        loop.remove_signal_handler(signal.SIGTERM)

    log.info("Server stop.")


def main():
    try:
        asyncio.run(run_server(**parse_server_args()))
    except (MazeError, OSError) as err:
        logger.error("%s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
