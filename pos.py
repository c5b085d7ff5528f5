"""
2D positions and vectors.

Pos is a frozen (x, y) value over any Python number. Its subclasses model
fixed-width integer coordinates: plain operators raise OverflowError when a
result leaves the range, and every operator has a checked_* twin that
returns None instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import ClassVar, Generic, TypeVar

from direction import Direction
from numeric import I32, I64, UNBOUNDED, USIZE, IntRange, Number, modulo, trunc_div, trunc_rem

__all__ = ["Pos", "PosI32", "PosI64", "PosIdx", "DirectionalPos"]

T = TypeVar("T", int, float, Fraction)


def _unit(direction: Direction) -> tuple[int, int]:
    """Per-axis sign of a step in the given direction."""
    match direction:
        case Direction.UP:
            return (0, 1)
        case Direction.DOWN:
            return (0, -1)
        case Direction.LEFT:
            return (-1, 0)
        case Direction.RIGHT:
            return (1, 0)
        case Direction.TOP_LEFT:
            return (-1, 1)
        case Direction.TOP_RIGHT:
            return (1, 1)
        case Direction.BOTTOM_LEFT:
            return (-1, -1)
        case Direction.BOTTOM_RIGHT:
            return (1, -1)
    raise ValueError(f"Unknown direction: {direction!r}")


@total_ordering
@dataclass(frozen=True, eq=False)
class Pos(Generic[T]):
    """A position (or vector) in 2D space, ordered by x then y."""

    x: T
    y: T

    numeric: ClassVar[IntRange] = UNBOUNDED

    def __post_init__(self) -> None:
        if self.numeric is not UNBOUNDED:
            self.numeric.check(self.x)
            self.numeric.check(self.y)

    # Equality and ordering look at coordinates only, so PosIdx(1, 2) == Pos(1, 2)
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # =========================================================================
    # Construction helpers
    # =========================================================================

    @classmethod
    def origin(cls) -> Pos[T]:
        return cls(0, 0)

    @classmethod
    def unit_x(cls) -> Pos[T]:
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> Pos[T]:
        return cls(0, 1)

    @classmethod
    def with_same(cls, xy: T) -> Pos[T]:
        """Position with both axes set to xy."""
        return cls(xy, xy)

    @classmethod
    def from_direction(cls, direction: Direction) -> Pos[T]:
        """Unit vector of a direction. Raises OverflowError on unsigned classes for negative axes."""
        return cls(*_unit(direction))

    def _checked(self, x: Number, y: Number) -> Pos[T] | None:
        if not (self.numeric.contains(x) and self.numeric.contains(y)):
            return None
        return type(self)(x, y)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: Pos[T]) -> Pos[T]:
        if not isinstance(other, Pos):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos[T]) -> Pos[T]:
        if not isinstance(other, Pos):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: T) -> Pos[T]:
        if isinstance(scalar, Pos):
            return NotImplemented
        return type(self)(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: T) -> Pos[T]:
        """Scalar division; integer coordinates truncate toward zero."""
        if isinstance(scalar, Pos):
            return NotImplemented
        return type(self)(trunc_div(self.x, scalar), trunc_div(self.y, scalar))

    def __mod__(self, other: Pos[T]) -> Pos[T]:
        """Component-wise remainder; the sign follows the dividend. See modulo()."""
        if not isinstance(other, Pos):
            return NotImplemented
        return type(self)(trunc_rem(self.x, other.x), trunc_rem(self.y, other.y))

    def __neg__(self) -> Pos[T]:
        return type(self)(-self.x, -self.y)

    def __abs__(self) -> Pos[T]:
        return type(self)(abs(self.x), abs(self.y))

    def checked_add(self, other: Pos[T]) -> Pos[T] | None:
        return self._checked(self.x + other.x, self.y + other.y)

    def checked_sub(self, other: Pos[T]) -> Pos[T] | None:
        return self._checked(self.x - other.x, self.y - other.y)

    def checked_mul(self, scalar: T) -> Pos[T] | None:
        return self._checked(self.x * scalar, self.y * scalar)

    def checked_div(self, scalar: T) -> Pos[T] | None:
        if scalar == 0:
            return None
        return self._checked(trunc_div(self.x, scalar), trunc_div(self.y, scalar))

    def checked_rem(self, other: Pos[T]) -> Pos[T] | None:
        if other.x == 0 or other.y == 0:
            return None
        return self._checked(trunc_rem(self.x, other.x), trunc_rem(self.y, other.y))

    def checked_neg(self) -> Pos[T] | None:
        return self._checked(-self.x, -self.y)

    def modulo(self, other: Pos[T]) -> Pos[T]:
        """
        Mathematical modulo per axis: ((v % m) + m) % m.

        For positive moduli the result always lies in [0, m), which is what
        toroidal wrapping needs.
        """
        return type(self)(modulo(self.x, other.x), modulo(self.y, other.y))

    # =========================================================================
    # Geometry
    # =========================================================================

    def dest(self, distance: T, direction: Direction) -> Pos[T]:
        """The position distance steps away; diagonals move both axes by distance."""
        sx, sy = _unit(direction)
        return type(self)(self.x + sx * distance, self.y + sy * distance)

    def checked_dest(self, distance: T, direction: Direction) -> Pos[T] | None:
        """Like dest(), but None if either axis leaves the numeric range."""
        sx, sy = _unit(direction)
        return self._checked(self.x + sx * distance, self.y + sy * distance)

    def manhattan(self, other: Pos[T]) -> T:
        """Manhattan (taxicab) distance."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def swap(self) -> Pos[T]:
        return type(self)(self.y, self.x)


class PosI32(Pos[int]):
    """Position over signed 32-bit coordinates."""

    numeric: ClassVar[IntRange] = I32


class PosI64(Pos[int]):
    """Position over signed 64-bit coordinates."""

    numeric: ClassVar[IntRange] = I64


class PosIdx(Pos[int]):
    """Position over unsigned index coordinates, as used to address grid cells."""

    numeric: ClassVar[IntRange] = USIZE

    def manhattan_unsigned(self, other: Pos[int]) -> int:
        dx = self.x - other.x if self.x >= other.x else other.x - self.x
        dy = self.y - other.y if self.y >= other.y else other.y - self.y
        return dx + dy


@dataclass(frozen=True)
class DirectionalPos(Generic[T]):
    """
    A position paired with a heading.

    Equality uses both fields, but ordering compares the position only, so
    two values at the same position with different headings are neither
    less nor greater than each other. Priority-queue users put the cost first
    and only fall back to this order for ties.
    """

    pos: Pos[T]
    direction: Direction

    def __str__(self) -> str:
        return f"{self.pos}: {self.direction}"

    def __lt__(self, other: DirectionalPos[T]) -> bool:
        if not isinstance(other, DirectionalPos):
            return NotImplemented
        return self.pos < other.pos

    def __le__(self, other: DirectionalPos[T]) -> bool:
        if not isinstance(other, DirectionalPos):
            return NotImplemented
        return self.pos <= other.pos

    def __gt__(self, other: DirectionalPos[T]) -> bool:
        if not isinstance(other, DirectionalPos):
            return NotImplemented
        return self.pos > other.pos

    def __ge__(self, other: DirectionalPos[T]) -> bool:
        if not isinstance(other, DirectionalPos):
            return NotImplemented
        return self.pos >= other.pos

    def advance(self, distance: T) -> DirectionalPos[T]:
        """Move distance steps along the current heading."""
        return DirectionalPos(self.pos.dest(distance, self.direction), self.direction)

    def checked_advance(self, distance: T) -> DirectionalPos[T] | None:
        pos = self.pos.checked_dest(distance, self.direction)
        if pos is None:
            return None
        return DirectionalPos(pos, self.direction)

    def rotate_to(self, direction: Direction) -> DirectionalPos[T]:
        return DirectionalPos(self.pos, direction)

    def turn_left(self) -> DirectionalPos[T]:
        return self.rotate_to(self.direction.left())

    def turn_right(self) -> DirectionalPos[T]:
        return self.rotate_to(self.direction.right())

    def turn_back(self) -> DirectionalPos[T]:
        return self.rotate_to(self.direction.back())
