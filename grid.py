"""
Dense rectangular grids addressed by position.

Cells are stored flat in row-major order: the cell at (x, y) lives at offset
width * y + x. CharGrid is the byte specialisation used for puzzle maps
parsed from text.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, MutableSequence, Sequence, TypeVar

from area import Area
from direction import Direction
from pos import Pos, PosIdx

__all__ = ["Grid", "CharGrid", "GridDimensionError", "ParseGridError"]

logger = logging.getLogger(__name__)

C = TypeVar("C")


class GridDimensionError(ValueError):
    """Raised when grid dimensions are zero or do not match the cell data."""


class ParseGridError(ValueError):
    """Raised when text cannot be parsed into a grid, or bytes are not valid text."""


@dataclass
class Grid(Generic[C]):
    """
    A width x height grid of cells.

    Indexing with grid[pos] requires an in-bounds position and raises
    IndexError otherwise; check has() first when unsure. extract() and
    destination() are the lenient lookups.

    The grid always stores its own copy of data, so grids built from the
    same sequence never share cells.
    """

    width: int
    height: int
    data: MutableSequence[C]

    def __post_init__(self) -> None:
        self.data = self._store(self.data)
        if self.width <= 0 or self.height <= 0:
            raise GridDimensionError(
                f"Grid dimensions must be positive\n"
                f"  Got: width {self.width}, height {self.height}"
            )
        if len(self.data) != self.width * self.height:
            raise GridDimensionError(
                f"Grid data does not match its dimensions\n"
                f"  Expected: {self.width} x {self.height} = {self.width * self.height} cells\n"
                f"  Got: {len(self.data)} cells"
            )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def filled(cls, width: int, height: int, value: C) -> Grid[C]:
        """A grid with every cell set to its own shallow copy of value."""
        if width <= 0 or height <= 0:
            raise GridDimensionError(
                f"Grid dimensions must be positive\n"
                f"  Got: width {width}, height {height}"
            )
        fill = cls._coerce(value)
        return cls(width, height, [copy.copy(fill) for _ in range(width * height)])

    @classmethod
    def with_data(cls, width: int, data: Sequence[C]) -> Grid[C]:
        """
        A grid over a copy of flat row-major data; height is len(data) / width.

        Raises:
            GridDimensionError: If width is zero, data is empty, or len(data)
                is not a multiple of width
        """
        if width <= 0 or not data or len(data) % width != 0:
            raise GridDimensionError(
                f"Cannot lay out {len(data)} cells in rows of {width}\n"
                f"  Width must be positive and divide a non-empty data length"
            )
        return cls(width, len(data) // width, data)

    @classmethod
    def _store(cls, data: Iterable[C]) -> MutableSequence[C]:
        return list(data)

    @classmethod
    def _coerce(cls, value: object) -> C:
        return value  # type: ignore[return-value]

    # =========================================================================
    # Indexing
    # =========================================================================

    def _offset(self, pos: Pos[int]) -> int:
        if not self.has(pos):
            raise IndexError(f"Position {pos} out of bounds for {self.width}x{self.height} grid")
        return self.width * pos.y + pos.x

    def _pos_at(self, offset: int) -> PosIdx:
        return PosIdx(offset % self.width, offset // self.width)

    def __getitem__(self, pos: Pos[int]) -> C:
        return self.data[self._offset(pos)]

    def __setitem__(self, pos: Pos[int], value: C) -> None:
        self.data[self._offset(pos)] = self._coerce(value)

    def swap(self, pos: Pos[int], other: Pos[int]) -> None:
        """Exchange two cells. Both positions must be in bounds."""
        i, j = self._offset(pos), self._offset(other)
        self.data[i], self.data[j] = self.data[j], self.data[i]

    # =========================================================================
    # Queries
    # =========================================================================

    def area(self) -> Area[int]:
        """The Area [0, width - 1] x [0, height - 1], iterating PosIdx values."""
        return Area(self.width - 1, self.height - 1, 0, 0, pos_type=PosIdx)

    def has(self, pos: Pos[int]) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def size(self) -> int:
        return self.width * self.height

    def rows(self) -> Iterator[Sequence[C]]:
        for y in range(self.height):
            yield self.data[y * self.width : (y + 1) * self.width]

    def find(self, value: C) -> PosIdx | None:
        """Position of the first cell equal to value in row-major order, or None."""
        return next(self.find_all(value), None)

    def find_all(self, value: C) -> Iterator[PosIdx]:
        """Positions of every cell equal to value, in row-major order."""
        value = self._coerce(value)
        return (self._pos_at(i) for i, cell in enumerate(self.data) if cell == value)

    def extract(self, positions: Iterable[Pos[int]]) -> Iterator[C]:
        """Cell values at positions; out-of-bounds positions are skipped."""
        return (self[p] for p in positions if self.has(p))

    def destination(self, pos: Pos[int], distance: int, direction: Direction) -> C | None:
        """The cell distance steps from pos, or None if that lands outside the grid."""
        dest = pos.checked_dest(distance, direction)
        if dest is None or not self.has(dest):
            return None
        return self[dest]

    def format_cell(self, cell: C) -> str:
        return str(cell)

    def __str__(self) -> str:
        return "\n".join(" ".join(self.format_cell(cell) for cell in row) for row in self.rows())


def _split_lines(text: str) -> list[str]:
    """Split on newlines; one trailing newline does not start a new line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CharGrid(Grid[int]):
    """
    A grid of bytes, one per cell, usually parsed from a puzzle map.

    Cell arguments may be given as an int code unit, a single byte or a
    single character: grid.find("^") and grid.find(ord("^")) are the same.
    """

    @classmethod
    def from_str(cls, text: str) -> CharGrid:
        """
        Parse line-delimited text, one cell per byte.

        Raises:
            ParseGridError: If text is empty, the first line is empty, or any
                line's length differs from the first line's
        """
        if not text:
            raise ParseGridError("Cannot parse a grid from empty text")

        rows = [line.encode("utf-8") for line in _split_lines(text)]
        if not rows or not rows[0]:
            raise ParseGridError("Cannot parse a grid with an empty first line")

        width = len(rows[0])
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
        if mismatched:
            error_msg = (
                f"Inconsistent line lengths in grid text\n"
                f"  Expected: {width} cells (from line 0)\n"
                f"  Mismatched lines:\n"
            )
            for row_idx, actual in mismatched:
                error_msg += f"    Line {row_idx}: {actual} cells\n"
            error_msg += "  All lines must have the same length"
            raise ParseGridError(error_msg)

        logger.debug("from_str: parsed %dx%d grid", width, len(rows))
        return cls(width, len(rows), b"".join(rows))

    @classmethod
    def _store(cls, data: Iterable[int]) -> bytearray:
        if isinstance(data, (bytes, bytearray)):
            return bytearray(data)
        return bytearray(cls._coerce(cell) for cell in data)

    @classmethod
    def _coerce(cls, value: object) -> int:
        if isinstance(value, (bytes, bytearray)) and len(value) == 1:
            return value[0]
        if isinstance(value, str) and len(value) == 1:
            return ord(value)
        return value  # type: ignore[return-value]

    def format_cell(self, cell: int) -> str:
        return chr(cell)

    def extract_string(self, positions: Iterable[Pos[int]]) -> str:
        """
        Decode the bytes at positions as UTF-8; out-of-bounds positions are skipped.

        Raises:
            ParseGridError: If the collected bytes are not valid UTF-8
        """
        raw = bytes(self.extract(positions))
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ParseGridError(f"Extracted bytes are not valid UTF-8: {raw!r}") from err

    def to_text(self) -> str:
        """The grid as text, one line per row, without cell separators."""
        return "\n".join(bytes(row).decode("utf-8", errors="replace") for row in self.rows())
