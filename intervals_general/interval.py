"""Interval model and set-like interval algebra.

Provides the ``Interval[T]`` base class and its eleven concrete shapes, taken
from the standard real-interval taxonomy. Using lower bound ``a`` and upper
bound ``b``:

* ``Closed`` -> ``[a, b]``
* ``Open`` -> ``(a, b)``
* ``LeftHalfOpen`` -> ``(a, b]``
* ``RightHalfOpen`` -> ``[a, b)``
* ``UnboundedClosedRight`` -> ``(-inf, a]``
* ``UnboundedOpenRight`` -> ``(-inf, a)``
* ``UnboundedClosedLeft`` -> ``[a, inf)``
* ``UnboundedOpenLeft`` -> ``(a, inf)``
* ``Singleton`` -> ``[a]``
* ``Unbounded`` -> ``(-inf, inf)``
* ``Empty``

The shapes are closed under ``intersect`` and ``complement``. Every
operation first normalizes each operand to a left and a right ``Bound`` and
then works on bound kinds only.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Generic, Literal

from pydantic import BaseModel, ConfigDict, Field

from intervals_general.bound import (
    Bound,
    BoundKind,
    Ordering,
    left_contains,
    left_partial_cmp,
    right_contains,
    right_partial_cmp,
)
from intervals_general.bound_pair import BoundPair, T
from intervals_general.display import format_interval


class Interval(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T]
    """Base class of the eleven interval shapes.

    Instances are immutable and compare structurally: two intervals are
    equal only if they are the same shape with equal endpoints. Only the
    concrete subclasses are meant to be instantiated.

    Examples
    --------
    >>> a = Closed(bound_pair=BoundPair.new(0, 10))
    >>> b = Closed(bound_pair=BoundPair.new(2, 8))
    >>> a.contains(b), b.contains(a)
    (True, False)
    >>> str(Closed(bound_pair=BoundPair.new(0, 5)).intersect(
    ...     Closed(bound_pair=BoundPair.new(5, 10))))
    '[5]'
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        ser_json_inf_nan="constants",
    )

    kind: str

    @abstractmethod
    def left_bound(self) -> Bound:
        """Normalized left side of this interval."""

    @abstractmethod
    def right_bound(self) -> Bound:
        """Normalized right side of this interval."""

    @abstractmethod
    def complement(self) -> tuple[Interval[T], ...]:
        """Intervals covering everything outside this one.

        Returns
        -------
        tuple[Interval[T], ...]
            One or two intervals. When there are two, the left piece comes
            first.

        Examples
        --------
        >>> [str(i) for i in Closed(bound_pair=BoundPair.new(1, 5)).complement()]
        ['(←..1)', '(5..→)']
        >>> Empty().complement()
        (Unbounded(),)
        """

    def contains(self, other: Interval[T]) -> bool:
        """Check whether this interval contains ``other``.

        ``self`` contains ``other`` when its left side reaches at least as
        far left as ``other``'s and its right side at least as far right.
        An open endpoint only covers a closed endpoint at a strictly smaller
        (left) or larger (right) value.

        The empty interval contains nothing, and no interval contains the
        empty interval; in particular ``Empty().contains(Empty())`` is
        False.

        Parameters
        ----------
        other : Interval[T]
            Candidate inner interval.

        Returns
        -------
        bool
            True if every point of ``other`` lies in ``self``.

        Examples
        --------
        >>> outer = RightHalfOpen(bound_pair=BoundPair.new(1.0, 5.0))
        >>> outer.contains(Open(bound_pair=BoundPair.new(1.0, 2.0)))
        True
        >>> outer.contains(Closed(bound_pair=BoundPair.new(4.0, 5.0)))
        False
        """
        left_contained = left_contains(self.left_bound(), other.left_bound())
        right_contained = right_contains(self.right_bound(), other.right_bound())
        return left_contained and right_contained

    def left_partial_cmp(self, other: Interval[T]) -> Ordering | None:
        """Compare the left sides of two intervals.

        Parameters
        ----------
        other : Interval[T]
            Interval to compare against.

        Returns
        -------
        Ordering | None
            LESS if this interval's left side extends further left, GREATER
            if it extends less far, EQUAL if the sides are identical. None
            if either interval is empty or the endpoints are incomparable.

        Examples
        --------
        >>> closed = Closed(bound_pair=BoundPair.new(0, 1))
        >>> opened = Open(bound_pair=BoundPair.new(0, 1))
        >>> closed.left_partial_cmp(opened)
        <Ordering.LESS: -1>
        >>> Unbounded().left_partial_cmp(closed)
        <Ordering.LESS: -1>
        >>> Empty().left_partial_cmp(closed) is None
        True
        """
        return left_partial_cmp(self.left_bound(), other.left_bound())

    def right_partial_cmp(self, other: Interval[T]) -> Ordering | None:
        """Compare the right sides of two intervals.

        GREATER means this interval's right side extends further right.
        See :meth:`left_partial_cmp` for the remaining rules.
        """
        return right_partial_cmp(self.right_bound(), other.right_bound())

    def intersect(self, other: Interval[T]) -> Interval[T]:
        """Compute the overlap of two intervals.

        On each side the more restrictive bound wins. Touching closed
        endpoints collapse to a ``Singleton``; sides that do not overlap, an
        empty operand, or incomparable bounds give ``Empty``.

        A NaN endpoint compared against a bound of the other kind is not
        incomparable: the mixed open/closed rules treat the failed
        comparison as GREATER. Intersections involving such endpoints
        therefore depend on operand order, e.g.
        ``UnboundedOpenLeft(left=nan).intersect(Closed(1.0, 5.0))`` is
        ``Empty`` while the reverse is ``Closed(1.0, 5.0)``.

        Parameters
        ----------
        other : Interval[T]
            Interval to intersect with.

        Returns
        -------
        Interval[T]
            The intersection.

        Examples
        --------
        >>> a = Closed(bound_pair=BoundPair.new(0, 5))
        >>> b = Closed(bound_pair=BoundPair.new(5, 10))
        >>> a.intersect(b)
        Singleton(at=5)
        >>> Open(bound_pair=BoundPair.new(0, 5)).intersect(
        ...     Open(bound_pair=BoundPair.new(5, 10)))
        Empty()
        """
        left_order = self.left_partial_cmp(other)
        right_order = self.right_partial_cmp(other)
        if left_order is None or right_order is None:
            return Empty()

        if left_order is Ordering.LESS:
            left = other.left_bound()
        else:
            left = self.left_bound()
        if right_order is Ordering.GREATER:
            right = other.right_bound()
        else:
            right = self.right_bound()
        return from_bounds(left, right)

    def width(self) -> Any | None:
        """Distance between the endpoints.

        The subtraction is the endpoint type's own, with whatever overflow
        or NaN behavior that type has.

        Returns
        -------
        Any | None
            ``right - left`` when both sides are finite; None for the empty
            interval and for any interval with an unbounded side.

        Examples
        --------
        >>> Closed(bound_pair=BoundPair.new(2, 7)).width()
        5
        >>> Singleton(at=3).width()
        0
        >>> UnboundedClosedLeft(left=0).width() is None
        True
        """
        left = self.left_bound()
        right = self.right_bound()
        if not (left.is_finite and right.is_finite):
            return None
        return right.value - left.value

    def __str__(self) -> str:
        return format_interval(self)


class Closed(Interval[T], Generic[T]):
    """``[a, b]``: both endpoints included."""

    kind: Literal["closed"] = Field(default="closed", repr=False)
    bound_pair: BoundPair[T]

    def left_bound(self) -> Bound:
        return Bound.closed(self.bound_pair.left)

    def right_bound(self) -> Bound:
        return Bound.closed(self.bound_pair.right)

    def complement(self) -> tuple[Interval[T], ...]:
        return (
            UnboundedOpenRight(right=self.bound_pair.left),
            UnboundedOpenLeft(left=self.bound_pair.right),
        )


class Open(Interval[T], Generic[T]):
    """``(a, b)``: both endpoints excluded."""

    kind: Literal["open"] = Field(default="open", repr=False)
    bound_pair: BoundPair[T]

    def left_bound(self) -> Bound:
        return Bound.open(self.bound_pair.left)

    def right_bound(self) -> Bound:
        return Bound.open(self.bound_pair.right)

    def complement(self) -> tuple[Interval[T], ...]:
        return (
            UnboundedClosedRight(right=self.bound_pair.left),
            UnboundedClosedLeft(left=self.bound_pair.right),
        )


class LeftHalfOpen(Interval[T], Generic[T]):
    """``(a, b]``: left endpoint excluded, right included."""

    kind: Literal["left_half_open"] = Field(default="left_half_open", repr=False)
    bound_pair: BoundPair[T]

    def left_bound(self) -> Bound:
        return Bound.open(self.bound_pair.left)

    def right_bound(self) -> Bound:
        return Bound.closed(self.bound_pair.right)

    def complement(self) -> tuple[Interval[T], ...]:
        return (
            UnboundedClosedRight(right=self.bound_pair.left),
            UnboundedOpenLeft(left=self.bound_pair.right),
        )


class RightHalfOpen(Interval[T], Generic[T]):
    """``[a, b)``: left endpoint included, right excluded."""

    kind: Literal["right_half_open"] = Field(default="right_half_open", repr=False)
    bound_pair: BoundPair[T]

    def left_bound(self) -> Bound:
        return Bound.closed(self.bound_pair.left)

    def right_bound(self) -> Bound:
        return Bound.open(self.bound_pair.right)

    def complement(self) -> tuple[Interval[T], ...]:
        return (
            UnboundedOpenRight(right=self.bound_pair.left),
            UnboundedClosedLeft(left=self.bound_pair.right),
        )


class UnboundedClosedRight(Interval[T], Generic[T]):
    """``(-inf, a]``: everything up to and including ``right``."""

    kind: Literal["unbounded_closed_right"] = Field(
        default="unbounded_closed_right", repr=False
    )
    right: T

    def left_bound(self) -> Bound:
        return Bound.unbounded()

    def right_bound(self) -> Bound:
        return Bound.closed(self.right)

    def complement(self) -> tuple[Interval[T], ...]:
        return (UnboundedOpenLeft(left=self.right),)


class UnboundedOpenRight(Interval[T], Generic[T]):
    """``(-inf, a)``: everything strictly below ``right``."""

    kind: Literal["unbounded_open_right"] = Field(
        default="unbounded_open_right", repr=False
    )
    right: T

    def left_bound(self) -> Bound:
        return Bound.unbounded()

    def right_bound(self) -> Bound:
        return Bound.open(self.right)

    def complement(self) -> tuple[Interval[T], ...]:
        return (UnboundedClosedLeft(left=self.right),)


class UnboundedClosedLeft(Interval[T], Generic[T]):
    """``[a, inf)``: everything from ``left`` upward, inclusive."""

    kind: Literal["unbounded_closed_left"] = Field(
        default="unbounded_closed_left", repr=False
    )
    left: T

    def left_bound(self) -> Bound:
        return Bound.closed(self.left)

    def right_bound(self) -> Bound:
        return Bound.unbounded()

    def complement(self) -> tuple[Interval[T], ...]:
        return (UnboundedOpenRight(right=self.left),)


class UnboundedOpenLeft(Interval[T], Generic[T]):
    """``(a, inf)``: everything strictly above ``left``."""

    kind: Literal["unbounded_open_left"] = Field(
        default="unbounded_open_left", repr=False
    )
    left: T

    def left_bound(self) -> Bound:
        return Bound.open(self.left)

    def right_bound(self) -> Bound:
        return Bound.unbounded()

    def complement(self) -> tuple[Interval[T], ...]:
        return (UnboundedClosedRight(right=self.left),)


class Singleton(Interval[T], Generic[T]):
    """``[a]``: the single value ``at``."""

    kind: Literal["singleton"] = Field(default="singleton", repr=False)
    at: T

    def left_bound(self) -> Bound:
        return Bound.closed(self.at)

    def right_bound(self) -> Bound:
        return Bound.closed(self.at)

    def complement(self) -> tuple[Interval[T], ...]:
        return (UnboundedOpenRight(right=self.at), UnboundedOpenLeft(left=self.at))


class Unbounded(Interval[T], Generic[T]):
    """``(-inf, inf)``: the whole domain."""

    kind: Literal["unbounded"] = Field(default="unbounded", repr=False)

    def left_bound(self) -> Bound:
        return Bound.unbounded()

    def right_bound(self) -> Bound:
        return Bound.unbounded()

    def complement(self) -> tuple[Interval[T], ...]:
        return (Empty(),)


class Empty(Interval[T], Generic[T]):
    """The empty interval."""

    kind: Literal["empty"] = Field(default="empty", repr=False)

    def left_bound(self) -> Bound:
        return Bound.none()

    def right_bound(self) -> Bound:
        return Bound.none()

    def complement(self) -> tuple[Interval[T], ...]:
        return (Unbounded(),)


def _two_sided(left: Bound, right: Bound) -> Interval[Any]:
    pair = BoundPair.new(left.value, right.value)
    if pair is None:
        if (
            left.kind is BoundKind.CLOSED
            and right.kind is BoundKind.CLOSED
            and left.value == right.value
        ):
            return Singleton(at=left.value)
        return Empty()
    if left.kind is BoundKind.CLOSED:
        if right.kind is BoundKind.CLOSED:
            return Closed(bound_pair=pair)
        return RightHalfOpen(bound_pair=pair)
    if right.kind is BoundKind.CLOSED:
        return LeftHalfOpen(bound_pair=pair)
    return Open(bound_pair=pair)


def from_bounds(left: Bound, right: Bound) -> Interval[Any]:
    """Assemble the interval described by a left and a right bound.

    Finite sides that cross, or open sides that meet, give ``Empty``; closed
    sides that meet give a ``Singleton``.

    Parameters
    ----------
    left : Bound
        Left side.
    right : Bound
        Right side.

    Returns
    -------
    Interval[Any]
        The matching interval shape.
    """
    if left.kind is BoundKind.NONE or right.kind is BoundKind.NONE:
        return Empty()
    if left.kind is BoundKind.UNBOUNDED:
        if right.kind is BoundKind.UNBOUNDED:
            return Unbounded()
        if right.kind is BoundKind.CLOSED:
            return UnboundedClosedRight(right=right.value)
        return UnboundedOpenRight(right=right.value)
    if right.kind is BoundKind.UNBOUNDED:
        if left.kind is BoundKind.CLOSED:
            return UnboundedClosedLeft(left=left.value)
        return UnboundedOpenLeft(left=left.value)
    return _two_sided(left, right)
