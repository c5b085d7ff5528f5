"""
The eight movement directions of a 2D grid and their rotation algebra.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Direction"]


class Direction(Enum):
    """Cardinal and diagonal direction. UP is +y, RIGHT is +x."""

    UP = "up (north)"
    DOWN = "down (south)"
    LEFT = "left (west)"
    RIGHT = "right (east)"
    TOP_LEFT = "top left (north west)"
    TOP_RIGHT = "top right (north east)"
    BOTTOM_LEFT = "bottom left (south west)"
    BOTTOM_RIGHT = "bottom right (south east)"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def all(cls) -> tuple[Direction, ...]:
        return tuple(cls)

    @classmethod
    def cross(cls) -> tuple[Direction, ...]:
        return (cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT)

    @classmethod
    def diagonal(cls) -> tuple[Direction, ...]:
        return (cls.TOP_LEFT, cls.TOP_RIGHT, cls.BOTTOM_LEFT, cls.BOTTOM_RIGHT)

    @classmethod
    def from_byte(cls, value: int | bytes | str) -> Direction:
        """
        Read a direction from an arrow symbol.

        '^', '<' and '>' map to UP, LEFT and RIGHT; anything else is DOWN.
        Accepts an int code unit, a single byte or a single character.
        """
        if isinstance(value, (bytes, bytearray)):
            value = value[0] if len(value) == 1 else -1
        elif isinstance(value, str):
            value = ord(value) if len(value) == 1 else -1

        match value:
            case 0x5E:  # ^
                return cls.UP
            case 0x3C:  # <
                return cls.LEFT
            case 0x3E:  # >
                return cls.RIGHT
            case _:
                return cls.DOWN

    @property
    def is_cardinal(self) -> bool:
        return self in _CARDINAL

    @property
    def is_diagonal(self) -> bool:
        return not self.is_cardinal

    def back(self) -> Direction:
        """The opposite direction."""
        return _BACK[self]

    def left(self) -> Direction:
        """Quarter turn counter-clockwise; diagonals stay diagonal."""
        return _LEFT[self]

    def right(self) -> Direction:
        """Quarter turn clockwise; diagonals stay diagonal."""
        return _RIGHT[self]


_CARDINAL = frozenset(Direction.cross())

_BACK = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.TOP_LEFT: Direction.BOTTOM_RIGHT,
    Direction.TOP_RIGHT: Direction.BOTTOM_LEFT,
    Direction.BOTTOM_LEFT: Direction.TOP_RIGHT,
    Direction.BOTTOM_RIGHT: Direction.TOP_LEFT,
}

_LEFT = {
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.DOWN,
    Direction.RIGHT: Direction.UP,
    Direction.TOP_LEFT: Direction.BOTTOM_LEFT,
    Direction.TOP_RIGHT: Direction.TOP_LEFT,
    Direction.BOTTOM_LEFT: Direction.BOTTOM_RIGHT,
    Direction.BOTTOM_RIGHT: Direction.TOP_RIGHT,
}

# Right is the inverse of left
_RIGHT = {turned: d for d, turned in _LEFT.items()}
