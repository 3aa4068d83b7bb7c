"""Circular ASCII viewport of the maze around the avatar."""

# std imports
import math

# local
from .maze import Cell

__all__ = ("render_view", "render_interface", "TITLE", "HELP")

TITLE = "~~ MAZE MASTER ~~"
HELP = "available commands: up, down, left, right (or use WASD)"

AVATAR, VOID = "@", "."

#: display glyph of each cell kind, differs from maze source glyphs.
_VIEW_GLYPHS = {
    Cell.FILLED: "#",
    Cell.GOAL: "*",
    Cell.EMPTY: " ",
}


def _view_glyph(maze, center, col, row, radius):
    if row == 0 and col == 0:
        return AVATAR
    x, y = center[0] + col, center[1] + row
    if math.sqrt(row ** 2 + col ** 2) < radius and maze.in_bounds(x, y):
        return _VIEW_GLYPHS[maze.get_cell(x, y) or Cell.EMPTY]
    return VOID


def render_view(maze, center, radius):
    """
    Return the viewport of ``maze`` around ``center`` as text.

    The result is ``2 * radius + 1`` lines of ``2 * radius + 1`` characters,
    each terminated by ``"\\n"``.  Cells strictly closer than ``radius`` to
    the centre are drawn, everything else, including out-of-bounds
    coordinates, is drawn as ``"."``.  The centre is always ``"@"``.

    :param Maze maze: maze to draw.
    :param tuple center: ``(x, y)`` position of the avatar.
    :param int radius: view radius in cells.
    """
    span = range(-radius, radius + 1)
    return "".join(
        "".join(_view_glyph(maze, center, col, row, radius) for col in span) + "\n"
        for row in span
    )


def render_interface(maze, center, radius):
    """Return the full screen: title, viewport and help line."""
    return "".join(
        (
            TITLE + "\n\n",
            render_view(maze, center, radius),
            "\n",
            "\n" + HELP + "\n\n",
        )
    )
