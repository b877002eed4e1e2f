"""Validated endpoint pair for finite two-sided intervals.

Provides ``BoundPair[T]``, an immutable pair of endpoints whose left value is
strictly less than its right value. Every two-sided interval shape (closed,
open and both half-open forms) stores one.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _strictly_less(left: Any, right: Any) -> bool:
    """Return True only when ``left < right`` evaluates true.

    Unorderable operands count as not less.
    """
    try:
        return bool(left < right)
    except TypeError:
        return False


class BoundPair(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T]
    """An ordered pair of interval endpoints with ``left < right``.

    The order is checked once at construction and never again. Equal
    endpoints are rejected: a degenerate interval is a ``Singleton``, not a
    two-sided shape.

    Attributes
    ----------
    left
        Left (lower) endpoint.
    right
        Right (upper) endpoint.

    Examples
    --------
    >>> pair = BoundPair.new(1.0, 2.0)
    >>> (pair.left, pair.right)
    (1.0, 2.0)
    >>> BoundPair.new(2, 1) is None
    True
    >>> BoundPair.new(2.0, 2.0) is None
    True
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        ser_json_inf_nan="constants",
    )

    left: T
    right: T

    @model_validator(mode="after")
    def validate_order(self) -> BoundPair[T]:
        """Validate that left is strictly less than right.

        Returns
        -------
        BoundPair[T]
            The validated pair.

        Raises
        ------
        ValueError
            If left is not strictly less than right, including when the
            two values cannot be ordered.
        """
        if not _strictly_less(self.left, self.right):
            raise ValueError(
                f"left ({self.left!r}) must be less than right ({self.right!r})"
            )
        return self

    @classmethod
    def new(cls, left: T, right: T) -> BoundPair[T] | None:
        """Create a pair, or return None if the endpoints are malformed.

        Parameters
        ----------
        left
            Left endpoint.
        right
            Right endpoint.

        Returns
        -------
        BoundPair[T] | None
            The pair when ``left < right``; None when the endpoints are
            equal, reversed or incomparable (e.g. NaN).

        Examples
        --------
        >>> BoundPair.new(1, 3)
        BoundPair(left=1, right=3)
        >>> BoundPair.new(float("nan"), 1.0) is None
        True
        """
        if not _strictly_less(left, right):
            logger.debug("Rejected bound pair left=%r right=%r", left, right)
            return None
        return cls(left=left, right=right)
