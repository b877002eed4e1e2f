"""Normalized per-side bounds used by the interval algebra.

Each interval variant maps onto one ``Bound`` per side, so containment and
ordering only have to reason about four bound kinds instead of every pair of
interval shapes. Nothing here is part of the public package namespace.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class BoundKind(str, Enum):
    """Classification of one side of an interval."""

    NONE = "none"
    UNBOUNDED = "unbounded"
    OPEN = "open"
    CLOSED = "closed"


class Ordering(IntEnum):
    """Result of comparing two bounds on the same side."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Bound(BaseModel):
    """One side of an interval.

    Attributes
    ----------
    kind : BoundKind
        NONE for the empty interval, UNBOUNDED for an infinite side, OPEN or
        CLOSED for a finite endpoint.
    value : Any
        The endpoint for OPEN and CLOSED bounds; None otherwise.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: BoundKind
    value: Any = None

    @classmethod
    def none(cls) -> Bound:
        """Bound of the empty interval."""
        return _NONE

    @classmethod
    def unbounded(cls) -> Bound:
        """Bound of an infinite side."""
        return _UNBOUNDED

    @classmethod
    def open(cls, value: Any) -> Bound:
        """Finite bound excluding its endpoint."""
        return cls(kind=BoundKind.OPEN, value=value)

    @classmethod
    def closed(cls, value: Any) -> Bound:
        """Finite bound including its endpoint."""
        return cls(kind=BoundKind.CLOSED, value=value)

    @property
    def is_finite(self) -> bool:
        """Whether the bound carries an endpoint value."""
        return self.kind in (BoundKind.OPEN, BoundKind.CLOSED)


_NONE = Bound(kind=BoundKind.NONE)
_UNBOUNDED = Bound(kind=BoundKind.UNBOUNDED)


def left_contains(outer: Bound, inner: Bound) -> bool:
    """Whether ``outer`` reaches at least as far left as ``inner``.

    The empty interval's bound satisfies any non-empty container on this
    side, while an empty container satisfies nothing.
    """
    if outer.kind is BoundKind.NONE:
        return False
    if inner.kind is BoundKind.NONE:
        return True
    if outer.kind is BoundKind.UNBOUNDED:
        return True
    if inner.kind is BoundKind.UNBOUNDED:
        return False
    if outer.kind is BoundKind.OPEN and inner.kind is BoundKind.CLOSED:
        return outer.value < inner.value
    return outer.value <= inner.value


def right_contains(outer: Bound, inner: Bound) -> bool:
    """Whether ``outer`` reaches at least as far right as ``inner``.

    Unlike the left side, the empty interval's bound is never contained, so
    no interval contains the empty interval.
    """
    if outer.kind is BoundKind.NONE or inner.kind is BoundKind.NONE:
        return False
    if outer.kind is BoundKind.UNBOUNDED:
        return True
    if inner.kind is BoundKind.UNBOUNDED:
        return False
    if outer.kind is BoundKind.OPEN and inner.kind is BoundKind.CLOSED:
        return outer.value > inner.value
    return outer.value >= inner.value


def _value_cmp(left: Any, right: Any) -> Ordering | None:
    if left < right:
        return Ordering.LESS
    if left == right:
        return Ordering.EQUAL
    if left > right:
        return Ordering.GREATER
    # incomparable, e.g. NaN
    return None


def left_partial_cmp(first: Bound, second: Bound) -> Ordering | None:
    """Order two left bounds; an unbounded side sorts below everything.

    A closed bound extends further left than an open bound at the same
    value, so it sorts as LESS.

    Parameters
    ----------
    first : Bound
        Left bound of the first interval.
    second : Bound
        Left bound of the second interval.

    Returns
    -------
    Ordering | None
        Position of ``first`` relative to ``second``, or None when either
        bound is NONE or the endpoint values cannot be ordered.
    """
    if first.kind is BoundKind.NONE or second.kind is BoundKind.NONE:
        return None
    if first.kind is BoundKind.UNBOUNDED:
        if second.kind is BoundKind.UNBOUNDED:
            return Ordering.EQUAL
        return Ordering.LESS
    if second.kind is BoundKind.UNBOUNDED:
        return Ordering.GREATER
    try:
        if first.kind is second.kind:
            return _value_cmp(first.value, second.value)
        if first.kind is BoundKind.CLOSED:
            return Ordering.LESS if first.value <= second.value else Ordering.GREATER
        return Ordering.LESS if first.value < second.value else Ordering.GREATER
    except TypeError:
        return None


def right_partial_cmp(first: Bound, second: Bound) -> Ordering | None:
    """Order two right bounds; an unbounded side sorts above everything.

    Mirror image of :func:`left_partial_cmp`: a closed bound extends further
    right than an open bound at the same value, so it sorts as GREATER.
    """
    if first.kind is BoundKind.NONE or second.kind is BoundKind.NONE:
        return None
    if first.kind is BoundKind.UNBOUNDED:
        if second.kind is BoundKind.UNBOUNDED:
            return Ordering.EQUAL
        return Ordering.GREATER
    if second.kind is BoundKind.UNBOUNDED:
        return Ordering.LESS
    try:
        if first.kind is second.kind:
            return _value_cmp(first.value, second.value)
        if first.kind is BoundKind.CLOSED:
            return Ordering.GREATER if first.value >= second.value else Ordering.LESS
        return Ordering.GREATER if first.value > second.value else Ordering.LESS
    except TypeError:
        return None
