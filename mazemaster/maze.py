"""
Maze grid parsed from a fixed-width text layout.

Each character of the maze source is one cell::

    #   wall, blocks movement
    .   floor
    *   goal

The first line decides the width of the maze.
"""

from __future__ import annotations

# std imports
import enum
import importlib.resources
from typing import Optional, Tuple

__all__ = ("Cell", "Maze", "MazeError", "parse_maze", "load_maze")

#: Default dimensions of :meth:`Maze.default`.
DEFAULT_WIDTH, DEFAULT_HEIGHT = 21, 21


class MazeError(ValueError):
    """Maze source text could not be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("failed to parse maze format: {}".format(reason))


class Cell(enum.Enum):
    """Traversal kind of one grid unit."""

    FILLED = "#"
    EMPTY = "."
    GOAL = "*"

    @property
    def glyph(self) -> str:
        """Character of this cell in maze source text."""
        return self.value

    @property
    def is_traversable(self) -> bool:
        return self in (Cell.EMPTY, Cell.GOAL)

    @classmethod
    def from_glyph(cls, char: str) -> "Cell":
        try:
            return cls(char)
        except ValueError:
            raise MazeError("unknown character: {}".format(char)) from None


class Maze:
    """Immutable rectangular grid of :class:`Cell`, stored row-major."""

    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int, cells: Tuple[Cell, ...]) -> None:
        self.width = width
        self.height = height
        self.cells = tuple(cells)

    @classmethod
    def default(cls) -> "Maze":
        """Return a maze of walls only, used when no layout is available."""
        return cls(
            DEFAULT_WIDTH,
            DEFAULT_HEIGHT,
            (Cell.FILLED,) * (DEFAULT_WIDTH * DEFAULT_HEIGHT),
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """
        Return the cell at ``(x, y)``, or ``None`` when out of range.

        The lookup is by row-major offset, so callers should check
        :meth:`in_bounds` first; a negative ``x`` or ``y`` always
        returns ``None``.
        """
        if x < 0 or y < 0:
            return None
        offset = y * self.width + x
        if offset >= len(self.cells):
            return None
        return self.cells[offset]

    def to_text(self) -> str:
        """Return maze source text for this grid, one line per row."""
        return "\n".join(
            "".join(cell.glyph for cell in self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        )

    def __repr__(self) -> str:
        return "<Maze {}x{}>".format(self.width, self.height)


def parse_maze(text: str, strict: bool = True) -> Maze:
    """
    Parse maze source ``text`` into a :class:`Maze`.

    :param text: maze layout, one row per line.  Blank lines are ignored.
    :param strict: When ``True``, every line must be as wide as the first.
        When ``False``, lines are concatenated without checking, and any
        cells past the last full row are dropped.
    :raises MazeError: on empty input, unknown glyphs, or ragged lines in
        strict mode.
    """
    # only LF and CRLF end a line, other control characters are glyphs
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        raise MazeError("no first line")
    width = len(lines[0])

    cells = []
    for row, line in enumerate(lines):
        if strict and len(line) != width:
            raise MazeError(
                "line {} has width {}, expected {}".format(row + 1, len(line), width)
            )
        cells.extend(Cell.from_glyph(char) for char in line)

    height = len(cells) // width
    return Maze(width, height, cells[: width * height])


def load_maze(path: Optional[str] = None) -> str:
    """Return maze text from file ``path``, or the bundled ``maze.txt``."""
    if path is None:
        return (
            importlib.resources.files("mazemaster")
            .joinpath("maze.txt")
            .read_text(encoding="utf8")
        )
    with open(path, "r", encoding="utf8") as fin:
        return fin.read()
