"""Tests for pos module."""

from fractions import Fraction

import pytest

from direction import Direction
from numeric import I32, USIZE
from pos import DirectionalPos, Pos, PosI32, PosI64, PosIdx


# =============================================================================
# Test Pos Values
# =============================================================================


class TestPosValue:
    """Tests for equality, hashing, ordering and display."""

    def test_str(self) -> None:
        """Positions display as coordinate pairs."""
        assert str(Pos(1, -2)) == "(1, -2)"

    def test_equality_ignores_class(self) -> None:
        """Positions compare by coordinates only."""
        assert PosIdx(1, 2) == Pos(1, 2)
        assert PosI32(1, 2) == PosI64(1, 2)
        assert Pos(1, 2) != Pos(2, 1)

    def test_hash_matches_equality(self) -> None:
        """Equal positions collapse in sets."""
        assert len({Pos(1, 2), PosIdx(1, 2), PosI32(1, 2)}) == 1

    def test_ordering_x_then_y(self) -> None:
        """Positions order by x first, then y."""
        assert Pos(0, 5) < Pos(1, 0)
        assert Pos(1, 0) < Pos(1, 1)
        assert Pos(2, 2) >= Pos(2, 2)
        assert sorted([Pos(1, 1), Pos(0, 9), Pos(1, 0)]) == [Pos(0, 9), Pos(1, 0), Pos(1, 1)]

    def test_not_equal_to_tuple(self) -> None:
        """A position is not a tuple."""
        assert Pos(1, 2) != (1, 2)

    def test_bounded_construction(self) -> None:
        """Bounded classes reject coordinates outside their range."""
        with pytest.raises(OverflowError, match="usize"):
            PosIdx(-1, 0)
        with pytest.raises(OverflowError):
            PosI32(0, 2**31)

    def test_generic_numbers(self) -> None:
        """Pos works over fractions and floats."""
        half = Pos(Fraction(1, 2), Fraction(1, 2))
        assert half + half == Pos(1, 1)
        assert Pos(0.5, 1.5) * 2 == Pos(1.0, 3.0)


# =============================================================================
# Test Arithmetic
# =============================================================================


class TestPosArithmetic:
    """Tests for plain operators."""

    def test_add(self) -> None:
        """Addition is component-wise."""
        assert Pos(1, 2) + Pos(3, 4) == Pos(4, 6)
        assert Pos(-1, -2) + Pos(-3, -4) == Pos(-4, -6)

    def test_sub(self) -> None:
        """Subtraction is component-wise."""
        assert Pos(1, 2) - Pos(3, 4) == Pos(-2, -2)
        assert Pos(-1, -2) - Pos(-3, -4) == Pos(2, 2)

    def test_mul(self) -> None:
        """Scalar multiplication works from either side."""
        assert Pos(1, 2) * -3 == Pos(-3, -6)
        assert Pos(-1, -2) * 4 == Pos(-4, -8)
        assert 4 * Pos(-1, -2) == Pos(-4, -8)

    def test_div(self) -> None:
        """Integer division truncates toward zero."""
        assert Pos(3, 9) / 3 == Pos(1, 3)
        assert Pos(-4, 8) / -4 == Pos(1, -2)
        assert Pos(-7, 7) / 2 == Pos(-3, 3)

    def test_rem(self) -> None:
        """Remainder keeps the sign of the dividend."""
        assert Pos(9, 9) % Pos(10, 10) == Pos(9, 9)
        assert Pos(11, 13) % Pos(10, 11) == Pos(1, 2)
        assert Pos(-1, -1) % Pos(10, 10) == Pos(-1, -1)
        assert Pos(10, 10) % Pos(-1, -1) == Pos(0, 0)

    def test_neg(self) -> None:
        """Negation flips both axes."""
        assert -Pos(1, 2) == Pos(-1, -2)

    def test_abs(self) -> None:
        """abs() takes each axis's magnitude."""
        assert abs(Pos(1, 2)) == Pos(1, 2)
        assert abs(Pos(-1, -2)) == Pos(1, 2)

    def test_result_keeps_class(self) -> None:
        """Arithmetic results have the class of the left operand."""
        assert isinstance(PosIdx(1, 2) + Pos(1, 1), PosIdx)
        assert isinstance(PosI64(1, 2) * 3, PosI64)

    def test_plain_operators_trap_overflow(self) -> None:
        """Plain operators raise instead of wrapping."""
        with pytest.raises(OverflowError):
            PosIdx(0, 0) - PosIdx(1, 0)
        with pytest.raises(OverflowError):
            PosIdx(0, 0) + Pos(-1, 0)
        with pytest.raises(OverflowError):
            PosI32(I32.max, 0) + PosI32(1, 0)
        with pytest.raises(OverflowError):
            -PosIdx(1, 0)

    def test_division_by_zero(self) -> None:
        """Dividing by zero is not absorbed."""
        with pytest.raises(ZeroDivisionError):
            Pos(1, 1) / 0


class TestPosCheckedArithmetic:
    """Tests for the checked_* variants."""

    def test_checked_add(self) -> None:
        """checked_add returns None past the range."""
        assert Pos(1, 2).checked_add(Pos(3, 4)) == Pos(4, 6)
        assert PosIdx(1, 2).checked_add(PosIdx(USIZE.max, USIZE.max)) is None

    def test_checked_sub(self) -> None:
        """checked_sub returns None below zero for unsigned positions."""
        assert Pos(1, 2).checked_sub(Pos(3, 4)) == Pos(-2, -2)
        assert PosIdx(1, 2).checked_sub(PosIdx(3, 4)) is None

    def test_checked_mul(self) -> None:
        """checked_mul returns None past the range."""
        assert PosI32(2, 3).checked_mul(2) == Pos(4, 6)
        assert PosI32(2**30, 1).checked_mul(2) is None

    def test_checked_div(self) -> None:
        """checked_div returns None for a zero divisor or an overflowing quotient."""
        assert Pos(4, 8).checked_div(4) == Pos(1, 2)
        assert Pos(4, 8).checked_div(0) is None
        assert PosI32(I32.min, 0).checked_div(-1) is None

    def test_checked_rem(self) -> None:
        """checked_rem returns None when either divisor axis is zero."""
        assert Pos(11, 13).checked_rem(Pos(10, 11)) == Pos(1, 2)
        assert Pos(10, 10).checked_rem(Pos(0, 0)) is None
        assert Pos(10, 10).checked_rem(Pos(3, 0)) is None

    def test_checked_neg(self) -> None:
        """checked_neg returns None when the negation is unrepresentable."""
        assert Pos(1, 2).checked_neg() == Pos(-1, -2)
        assert PosIdx(1, 2).checked_neg() is None
        assert PosIdx(0, 0).checked_neg() == Pos(0, 0)
        assert PosI32(I32.min, 0).checked_neg() is None

    def test_unbounded_never_overflows(self) -> None:
        """Plain Pos has no range limit."""
        big = Pos(2**70, 2**70)
        assert big.checked_add(big) == Pos(2**71, 2**71)

    def test_modulo(self) -> None:
        """modulo is the non-negative mathematical modulo."""
        assert Pos(10, 10).modulo(Pos(10, 10)) == Pos(0, 0)
        assert Pos(9, 9).modulo(Pos(10, 10)) == Pos(9, 9)
        assert Pos(-1, -1).modulo(Pos(10, 15)) == Pos(9, 14)
        assert Pos(-21, 31).modulo(Pos(10, 15)) == Pos(9, 1)


# =============================================================================
# Test Geometry
# =============================================================================


class TestPosGeometry:
    """Tests for directional movement and helpers."""

    def test_dest(self) -> None:
        """dest moves distance steps; diagonals move both axes."""
        origin = Pos(0, 0)
        assert origin.dest(5, Direction.UP) == Pos(0, 5)
        assert origin.dest(5, Direction.DOWN) == Pos(0, -5)
        assert origin.dest(5, Direction.LEFT) == Pos(-5, 0)
        assert origin.dest(5, Direction.RIGHT) == Pos(5, 0)
        assert origin.dest(5, Direction.TOP_LEFT) == Pos(-5, 5)
        assert origin.dest(5, Direction.TOP_RIGHT) == Pos(5, 5)
        assert origin.dest(5, Direction.BOTTOM_LEFT) == Pos(-5, -5)
        assert origin.dest(5, Direction.BOTTOM_RIGHT) == Pos(5, -5)

    def test_checked_dest_unsigned(self) -> None:
        """Moves below zero on an unsigned position give None."""
        origin = PosIdx(0, 0)
        assert origin.checked_dest(5, Direction.UP) == Pos(0, 5)
        assert origin.checked_dest(5, Direction.DOWN) is None
        assert origin.checked_dest(5, Direction.LEFT) is None
        assert origin.checked_dest(5, Direction.RIGHT) == Pos(5, 0)
        assert origin.checked_dest(5, Direction.TOP_LEFT) is None
        assert origin.checked_dest(5, Direction.TOP_RIGHT) == Pos(5, 5)
        assert origin.checked_dest(5, Direction.BOTTOM_LEFT) is None
        assert origin.checked_dest(5, Direction.BOTTOM_RIGHT) is None

    def test_checked_dest_upper_bound(self) -> None:
        """Moves past the maximum give None."""
        edge = PosI32(I32.max, 0)
        assert edge.checked_dest(1, Direction.RIGHT) is None
        assert edge.checked_dest(1, Direction.LEFT) == Pos(I32.max - 1, 0)

    def test_unchecked_dest_traps(self) -> None:
        """Plain dest raises when it leaves the range."""
        with pytest.raises(OverflowError):
            PosIdx(0, 0).dest(1, Direction.DOWN)

    def test_from_direction(self) -> None:
        """Each direction has a unit vector."""
        assert Pos.from_direction(Direction.UP) == Pos(0, 1)
        assert Pos.from_direction(Direction.DOWN) == Pos(0, -1)
        assert Pos.from_direction(Direction.LEFT) == Pos(-1, 0)
        assert Pos.from_direction(Direction.RIGHT) == Pos(1, 0)
        assert Pos.from_direction(Direction.TOP_LEFT) == Pos(-1, 1)
        assert Pos.from_direction(Direction.TOP_RIGHT) == Pos(1, 1)
        assert Pos.from_direction(Direction.BOTTOM_LEFT) == Pos(-1, -1)
        assert Pos.from_direction(Direction.BOTTOM_RIGHT) == Pos(1, -1)

    def test_dest_matches_unit_vector(self) -> None:
        """dest(n, d) is the same as adding n times the unit vector."""
        start = Pos(3, -4)
        for direction in Direction.all():
            assert start.dest(7, direction) == start + Pos.from_direction(direction) * 7

    def test_constants(self) -> None:
        """The origin and unit vectors keep the calling class."""
        assert Pos.origin() == Pos(0, 0)
        assert Pos.unit_x() == Pos(1, 0)
        assert Pos.unit_y() == Pos(0, 1)
        assert isinstance(PosIdx.origin(), PosIdx)

    def test_with_same(self) -> None:
        """with_same sets both axes."""
        assert Pos.with_same(3) == Pos(3, 3)
        assert Pos.with_same(-53) == Pos(-53, -53)

    def test_swap(self) -> None:
        """swap exchanges x and y."""
        assert Pos(1, 2).swap() == Pos(2, 1)
        assert Pos(-2, 1).swap() == Pos(1, -2)

    def test_manhattan(self) -> None:
        """Manhattan distance sums the axis differences."""
        p = Pos(1, 2)
        assert p.manhattan(Pos(3, 4)) == 4
        assert p.manhattan(Pos(45, -9)) == 55
        assert Pos(-1, -2).manhattan(Pos(-45, 9)) == 55

    def test_manhattan_unsigned(self) -> None:
        """The unsigned distance never goes below zero."""
        p = PosIdx(1, 2)
        assert p.manhattan_unsigned(PosIdx(1, 2)) == 0
        assert p.manhattan_unsigned(PosIdx(3, 4)) == 4
        assert p.manhattan_unsigned(PosIdx(0, 0)) == 3


# =============================================================================
# Test DirectionalPos
# =============================================================================


class TestDirectionalPos:
    """Tests for positions with a heading."""

    def test_str(self) -> None:
        """A heading displays after its position."""
        sut = DirectionalPos(Pos(10, 30), Direction.UP)
        assert str(sut) == "(10, 30): up (north)"

    def test_fields(self) -> None:
        """Both fields are kept as given."""
        sut = DirectionalPos(Pos(10, 30), Direction.TOP_LEFT)
        assert sut.pos == Pos(10, 30)
        assert sut.direction == Direction.TOP_LEFT

    def test_ordering_uses_position(self) -> None:
        """Ordering compares positions, whatever the headings."""
        sut = DirectionalPos(Pos(1, 2), Direction.UP)
        for direction in Direction.cross():
            assert sut > DirectionalPos(Pos(0, 0), direction)
            assert sut < DirectionalPos(Pos(10, 0), direction)

    def test_same_position_orders_equal(self) -> None:
        """Same position, different heading: neither is smaller."""
        a = DirectionalPos(Pos(1, 1), Direction.UP)
        b = DirectionalPos(Pos(1, 1), Direction.DOWN)
        assert not a < b
        assert not b < a
        assert a <= b and a >= b
        assert a != b

    def test_equality_and_hash_use_direction(self) -> None:
        """Equality and hashing include the heading."""
        a = DirectionalPos(Pos(1, 1), Direction.UP)
        assert a == DirectionalPos(Pos(1, 1), Direction.UP)
        assert len({a, DirectionalPos(Pos(1, 1), Direction.UP), a.rotate_to(Direction.LEFT)}) == 2

    def test_advance(self) -> None:
        """advance moves along the heading and keeps it."""
        sut = DirectionalPos(Pos(0, 0), Direction.DOWN).advance(3)
        assert sut.pos == Pos(0, -3)
        assert sut.direction == Direction.DOWN

    def test_checked_advance(self) -> None:
        """checked_advance returns None when the move underflows."""
        sut = DirectionalPos(PosIdx(0, 0), Direction.UP).checked_advance(3)
        assert sut is not None
        assert sut.pos == Pos(0, 3)

        sut = DirectionalPos(PosIdx(0, 0), Direction.DOWN).checked_advance(3)
        assert sut is None

    def test_rotate_to(self) -> None:
        """rotate_to changes only the heading."""
        sut = DirectionalPos(Pos(0, 0), Direction.TOP_LEFT).rotate_to(Direction.UP)
        assert sut.pos == Pos(0, 0)
        assert sut.direction == Direction.UP

    def test_turns(self) -> None:
        """Turns rotate the heading in place."""
        sut = DirectionalPos(Pos(2, 2), Direction.UP)
        assert sut.turn_left().direction == Direction.LEFT
        assert sut.turn_right().direction == Direction.RIGHT
        assert sut.turn_back().direction == Direction.DOWN
        assert sut.turn_left().pos == Pos(2, 2)
