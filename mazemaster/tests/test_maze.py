"""Tests for :mod:`mazemaster.maze` grid parsing and lookup."""

# std imports
import os

# 3rd party
import pytest

# local
from mazemaster.maze import Cell, Maze, MazeError, parse_maze, load_maze


class TestCell:

    def test_traversable(self):
        assert Cell.EMPTY.is_traversable
        assert Cell.GOAL.is_traversable
        assert not Cell.FILLED.is_traversable

    @pytest.mark.parametrize("glyph,cell", [("#", Cell.FILLED),
                                            (".", Cell.EMPTY),
                                            ("*", Cell.GOAL)])
    def test_from_glyph(self, glyph, cell):
        assert Cell.from_glyph(glyph) is cell
        assert cell.glyph == glyph

    def test_from_glyph_unknown(self):
        with pytest.raises(MazeError, match="unknown character: x"):
            Cell.from_glyph("x")


class TestParseMaze:

    def test_dimensions(self):
        maze = parse_maze("#####\n#.*.#\n#####\n")
        assert (maze.width, maze.height) == (5, 3)
        assert len(maze.cells) == 15

    def test_row_major(self):
        maze = parse_maze("#.\n*#")
        assert maze.get_cell(0, 0) is Cell.FILLED
        assert maze.get_cell(1, 0) is Cell.EMPTY
        assert maze.get_cell(0, 1) is Cell.GOAL
        assert maze.get_cell(1, 1) is Cell.FILLED

    def test_blank_lines_ignored(self):
        maze = parse_maze("\n##\n\n..\n\n")
        assert (maze.width, maze.height) == (2, 2)

    def test_crlf_lines(self):
        maze = parse_maze("##\r\n..\r\n")
        assert (maze.width, maze.height) == (2, 2)

    @pytest.mark.parametrize("sep", ["\r", "\x0b", "\x0c", "\x1c", "\x1d",
                                     "\x1e", "\x85", "\u2028", "\u2029"])
    def test_only_lf_separates_lines(self, sep):
        with pytest.raises(MazeError, match="unknown character"):
            parse_maze(sep.join(("###", "#.#", "###")))

    @pytest.mark.parametrize("text", ["", "\n\n"])
    def test_empty(self, text):
        with pytest.raises(MazeError, match="no first line"):
            parse_maze(text)

    def test_unknown_character(self):
        with pytest.raises(MazeError) as exc_info:
            parse_maze("###\n#@#\n###")
        assert exc_info.value.reason == "unknown character: @"
        assert str(exc_info.value) == "failed to parse maze format: unknown character: @"

    def test_ragged_strict(self):
        with pytest.raises(MazeError, match="line 2 has width 2, expected 3"):
            parse_maze("###\n#.\n###")

    def test_ragged_lenient(self):
        # cells run on across rows, the trailing partial row is dropped
        maze = parse_maze("###\n#.\n###", strict=False)
        assert (maze.width, maze.height) == (3, 2)
        assert len(maze.cells) == 6
        assert maze.get_cell(1, 1) is Cell.EMPTY
        assert maze.get_cell(2, 1) is Cell.FILLED

    def test_round_trip(self):
        text = "#####\n#.*.#\n#.#.#\n#####"
        maze = parse_maze(text)
        assert maze.to_text() == text
        lines = text.splitlines()
        for y in range(maze.height):
            for x in range(maze.width):
                assert maze.get_cell(x, y).glyph == lines[y][x]


class TestMaze:

    @pytest.mark.parametrize("x,y,expected", [
        (0, 0, True),
        (2, 1, True),
        (3, 0, False),
        (0, 2, False),
        (-1, 0, False),
        (0, -1, False),
    ])
    def test_in_bounds(self, x, y, expected):
        maze = parse_maze("...\n...")
        assert maze.in_bounds(x, y) is expected

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (0, 2), (5, 5)])
    def test_get_cell_out_of_range(self, x, y):
        maze = parse_maze("...\n...")
        assert maze.get_cell(x, y) is None

    def test_default(self):
        maze = Maze.default()
        assert (maze.width, maze.height) == (21, 21)
        assert set(maze.cells) == {Cell.FILLED}

    def test_repr(self):
        assert repr(parse_maze("...\n...")) == "<Maze 3x2>"


class TestLoadMaze:

    def test_bundled(self):
        maze = parse_maze(load_maze())
        assert (maze.width, maze.height) == (21, 21)
        # avatar starts at (1, 1)
        assert maze.get_cell(1, 1).is_traversable
        assert Cell.GOAL in maze.cells

    def test_from_path(self, tmp_path):
        path = os.path.join(str(tmp_path), "tiny.txt")
        with open(path, "w", encoding="utf8") as fout:
            fout.write("###\n#*#\n###\n")
        assert parse_maze(load_maze(path)).get_cell(1, 1) is Cell.GOAL

    def test_missing_path(self, tmp_path):
        with pytest.raises(OSError):
            load_maze(os.path.join(str(tmp_path), "missing.txt"))
