"""Tests for Wirth-notation display."""

from __future__ import annotations

from datetime import date

import pytest

from intervals_general import (
    BoundPair,
    Closed,
    Empty,
    Interval,
    LeftHalfOpen,
    NotationConfig,
    Open,
    RightHalfOpen,
    Singleton,
    Unbounded,
    UnboundedClosedLeft,
    UnboundedClosedRight,
    UnboundedOpenLeft,
    UnboundedOpenRight,
    format_interval,
)


def _pair(left: int, right: int) -> BoundPair[int]:
    pair = BoundPair.new(left, right)
    assert pair is not None
    return pair


@pytest.mark.parametrize(
    ("interval", "expected"),
    [
        (Closed(bound_pair=_pair(1, 5)), "[1..5]"),
        (Open(bound_pair=_pair(1, 5)), "(1..5)"),
        (LeftHalfOpen(bound_pair=_pair(1, 5)), "(1..5]"),
        (RightHalfOpen(bound_pair=_pair(1, 5)), "[1..5)"),
        (UnboundedClosedRight(right=5), "(←..5]"),
        (UnboundedOpenRight(right=5), "(←..5)"),
        (UnboundedClosedLeft(left=5), "[5..→)"),
        (UnboundedOpenLeft(left=5), "(5..→)"),
        (Singleton(at=5), "[5]"),
        (Unbounded(), "(←..→)"),
        (Empty(), "Empty"),
    ],
)
def test_str(interval: Interval[int], expected: str) -> None:
    """Test the default rendering of every shape."""
    assert str(interval) == expected
    assert format_interval(interval) == expected


def test_float_values() -> None:
    """Test that endpoint values use their own text form."""
    interval = RightHalfOpen(bound_pair=BoundPair.new(1.0, 2.5))
    assert str(interval) == "[1.0..2.5)"


def test_date_values() -> None:
    """Test rendering of non-numeric endpoints."""
    interval = Closed(bound_pair=BoundPair.new(date(2024, 1, 1), date(2024, 1, 31)))
    assert str(interval) == "[2024-01-01..2024-01-31]"


def test_custom_notation() -> None:
    """Test rendering with ASCII infinity symbols."""
    notation = NotationConfig(left_infinity="-inf", right_infinity="inf", separator=", ")
    assert format_interval(Unbounded(), notation) == "(-inf, inf)"
    assert format_interval(UnboundedClosedLeft(left=0), notation) == "[0, inf)"
    assert format_interval(Closed(bound_pair=_pair(1, 2)), notation) == "[1, 2]"


def test_custom_empty_text() -> None:
    """Test rendering the empty interval with custom text."""
    notation = NotationConfig(empty="∅")
    assert format_interval(Empty(), notation) == "∅"


def test_singleton_ignores_separator() -> None:
    """Test that a singleton renders without a separator."""
    notation = NotationConfig(separator=", ")
    assert format_interval(Singleton(at=7), notation) == "[7]"
