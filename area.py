"""
Axis-aligned rectangular areas with inclusive bounds.

An Area only describes a coordinate range; it owns no cell data. Iterating
an Area walks its points in raster order (row min_y left to right, then the
next row up to max_y).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Generic, Iterable, Iterator, TypeVar

from direction import Direction
from numeric import Number, modulo
from pos import Pos

__all__ = ["Area", "AreaBoundaryError", "AreaIterator"]

T = TypeVar("T", int, float, Fraction)
P = TypeVar("P", bound=Pos)


class AreaBoundaryError(ValueError):
    """Raised when an Area's max bound is below its min bound on either axis."""


@dataclass(frozen=True)
class Area(Generic[T]):
    """
    A rectangle [min_x, max_x] x [min_y, max_y].

    Top is max_y and bottom is min_y, matching Direction.UP moving toward +y.
    pos_type is the Pos class produced by iteration and wrapping.
    """

    max_x: T
    max_y: T
    min_x: T
    min_y: T
    pos_type: type[Pos] = field(default=Pos, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_x < self.min_x or self.max_y < self.min_y:
            raise AreaBoundaryError(
                f"Inverted area bounds\n"
                f"  x: min {self.min_x}, max {self.max_x}\n"
                f"  y: min {self.min_y}, max {self.max_y}\n"
                f"  max must be >= min on both axes"
            )

    @classmethod
    def from_corners(cls, top_left: Pos[T], bottom_right: Pos[T]) -> Area[T]:
        """Build an Area from its top left (min_x, max_y) and bottom right (max_x, min_y) corners."""
        return cls(
            max_x=bottom_right.x,
            max_y=top_left.y,
            min_x=top_left.x,
            min_y=bottom_right.y,
            pos_type=type(top_left),
        )

    def __iter__(self) -> AreaIterator[T]:
        return AreaIterator(self)

    def __contains__(self, pos: object) -> bool:
        return isinstance(pos, Pos) and self.contains(pos)

    # =========================================================================
    # Queries
    # =========================================================================

    def contains(self, pos: Pos[T]) -> bool:
        return self.min_x <= pos.x <= self.max_x and self.min_y <= pos.y <= self.max_y

    def rows(self) -> T:
        return self.max_y - self.min_y + 1

    def cols(self) -> T:
        return self.max_x - self.min_x + 1

    def size(self) -> T:
        return self.rows() * self.cols()

    def on_x_boundary(self, pos: Pos[T]) -> bool:
        return pos.x == self.max_x or pos.x == self.min_x

    def on_y_boundary(self, pos: Pos[T]) -> bool:
        return pos.y == self.max_y or pos.y == self.min_y

    def on_boundary(self, pos: Pos[T]) -> bool:
        return self.on_x_boundary(pos) or self.on_y_boundary(pos)

    def on_corner(self, pos: Pos[T]) -> bool:
        return pos in (self.top_left(), self.top_right(), self.bottom_left(), self.bottom_right())

    def top_left(self) -> Pos[T]:
        return self.pos_type(self.min_x, self.max_y)

    def top_right(self) -> Pos[T]:
        return self.pos_type(self.max_x, self.max_y)

    def bottom_left(self) -> Pos[T]:
        return self.pos_type(self.min_x, self.min_y)

    def bottom_right(self) -> Pos[T]:
        return self.pos_type(self.max_x, self.min_y)

    def wrap(self, pos: P) -> P:
        """
        Project pos into this area as if the edges were joined (toroidal wrap).

        Each axis is taken modulo its extent (max - min) relative to min, so
        the max edge is identified with the min edge. An axis with zero extent
        collapses onto its single coordinate.
        """
        x = self._wrap_axis(pos.x, self.min_x, self.max_x)
        y = self._wrap_axis(pos.y, self.min_y, self.max_y)
        return type(pos)(x, y)

    @staticmethod
    def _wrap_axis(value: Number, low: Number, high: Number) -> Number:
        extent = high - low
        if extent == 0:
            return low
        return low + modulo(value - low, extent)

    # =========================================================================
    # Lazy selections
    # =========================================================================

    def filter_points(self, points: Iterable[P]) -> Iterator[P]:
        """Yield the points that lie inside this area, in input order."""
        return (p for p in points if self.contains(p))

    def neighbours(self, pos: P, distance: T, directions: Iterable[Direction]) -> Iterator[P]:
        """
        Yield the in-area points exactly distance away from pos along each direction.

        Directions whose move overflows pos's numeric range are skipped.
        """
        for direction in directions:
            dest = pos.checked_dest(distance, direction)
            if dest is not None and self.contains(dest):
                yield dest


@dataclass
class AreaIterator(Generic[T]):
    """Raster-scan cursor over an Area. Exhausted iterators stay exhausted."""

    area: Area[T]
    current_x: T = field(init=False)
    current_y: T = field(init=False)

    def __post_init__(self) -> None:
        self.current_x = self.area.min_x
        self.current_y = self.area.min_y

    def __iter__(self) -> AreaIterator[T]:
        return self

    def __next__(self) -> Pos[T]:
        if self.current_y > self.area.max_y:
            raise StopIteration

        result = self.area.pos_type(self.current_x, self.current_y)
        if self.current_x >= self.area.max_x:
            self.current_x = self.area.min_x
            self.current_y = self.current_y + 1
        else:
            self.current_x = self.current_x + 1
        return result
