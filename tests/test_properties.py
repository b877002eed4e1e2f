"""Property-based tests for the interval algebra.

Uses Hypothesis to generate intervals of every shape over a small integer
range, so that shared and adjacent endpoints occur often.
"""

from __future__ import annotations

from functools import reduce
from typing import Any

from hypothesis import assume, given
from hypothesis import strategies as st

from intervals_general import (
    BoundPair,
    Closed,
    Empty,
    Interval,
    LeftHalfOpen,
    Open,
    RightHalfOpen,
    Singleton,
    Unbounded,
    UnboundedClosedLeft,
    UnboundedClosedRight,
    UnboundedOpenLeft,
    UnboundedOpenRight,
)

TWO_SIDED = [Closed, Open, LeftHalfOpen, RightHalfOpen]
RIGHT_ONLY = [UnboundedClosedRight, UnboundedOpenRight]
LEFT_ONLY = [UnboundedClosedLeft, UnboundedOpenLeft]

values = st.integers(min_value=-20, max_value=20)


@st.composite
def two_sided(draw: st.DrawFn, shape: Any = None) -> Interval[int]:
    """Generate a closed, open or half-open interval."""
    left = draw(values)
    right = draw(st.integers(min_value=left + 1, max_value=left + 40))
    cls = shape or draw(st.sampled_from(TWO_SIDED))
    return cls(bound_pair=BoundPair.new(left, right))


@st.composite
def intervals(draw: st.DrawFn) -> Interval[int]:
    """Generate an interval of any of the eleven shapes."""
    family = draw(
        st.sampled_from(["two_sided", "right", "left", "singleton", "unbounded", "empty"])
    )
    if family == "two_sided":
        return draw(two_sided())
    if family == "right":
        return draw(st.sampled_from(RIGHT_ONLY))(right=draw(values))
    if family == "left":
        return draw(st.sampled_from(LEFT_ONLY))(left=draw(values))
    if family == "singleton":
        return Singleton(at=draw(values))
    if family == "unbounded":
        return Unbounded()
    return Empty()


def _double_complement(interval: Interval[int]) -> Interval[int]:
    parts = [part for piece in interval.complement() for part in piece.complement()]
    return reduce(lambda acc, part: acc.intersect(part), parts)


@given(st.integers(), st.integers())
def test_bound_pair_requires_strict_order(left: int, right: int) -> None:
    """Test that a pair exists exactly when left < right."""
    pair = BoundPair.new(left, right)
    assert (pair is not None) == (left < right)


@given(st.floats(allow_nan=True), st.floats(allow_nan=True))
def test_bound_pair_floats(left: float, right: float) -> None:
    """Test the strict order rule including NaN."""
    pair = BoundPair.new(left, right)
    assert (pair is not None) == (left < right)


@given(intervals())
def test_contains_reflexive(interval: Interval[int]) -> None:
    """Test that every non-empty interval contains itself."""
    assert interval.contains(interval) == (not isinstance(interval, Empty))


@given(intervals(), intervals(), intervals())
def test_contains_transitive(
    outer: Interval[int], middle: Interval[int], inner: Interval[int]
) -> None:
    """Test that containment chains."""
    if outer.contains(middle) and middle.contains(inner):
        assert outer.contains(inner)


@given(values, values, values)
def test_contains_transitive_closed(a: int, b: int, c: int) -> None:
    """Test nested closed intervals built from sorted endpoints."""
    low, mid, high = sorted((a, b, c))
    assume(low < mid < high)
    outer = Closed(bound_pair=BoundPair.new(low - 1, high + 1))
    middle = Closed(bound_pair=BoundPair.new(low, high))
    inner = Closed(bound_pair=BoundPair.new(low, mid))
    assert outer.contains(middle)
    assert middle.contains(inner)
    assert outer.contains(inner)


same_shape_pairs = st.sampled_from(TWO_SIDED).flatmap(
    lambda cls: st.tuples(two_sided(cls), two_sided(cls))
)


@given(same_shape_pairs)
def test_intersect_never_grows_width(pair: tuple[Interval[int], Interval[int]]) -> None:
    """Test that an intersection is never wider than either operand."""
    first, second = pair
    width = first.intersect(second).width()
    if width is not None:
        assert width <= first.width()
        assert width <= second.width()


@given(intervals())
def test_intersect_empty_absorbs(interval: Interval[int]) -> None:
    """Test that intersecting with the empty interval gives empty."""
    assert interval.intersect(Empty()) == Empty()
    assert Empty().intersect(interval) == Empty()


@given(intervals(), intervals())
def test_intersect_commutative(first: Interval[int], second: Interval[int]) -> None:
    """Test that intersection ignores operand order."""
    assert first.intersect(second) == second.intersect(first)


@given(intervals(), intervals())
def test_intersection_contained_in_operands(
    first: Interval[int], second: Interval[int]
) -> None:
    """Test that a non-empty intersection lies inside both operands."""
    result = first.intersect(second)
    if not isinstance(result, Empty):
        assert first.contains(result)
        assert second.contains(result)


@given(intervals())
def test_double_complement(interval: Interval[int]) -> None:
    """Test that complementing twice restores the interval."""
    assert _double_complement(interval) == interval


@given(intervals())
def test_complement_disjoint(interval: Interval[int]) -> None:
    """Test that complement pieces never overlap the interval."""
    for piece in interval.complement():
        assert interval.intersect(piece) == Empty()
