"""Wirth-notation rendering of intervals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from intervals_general.bound import Bound, BoundKind
from intervals_general.config import DEFAULT_NOTATION, NotationConfig

if TYPE_CHECKING:
    from intervals_general.interval import Interval


def _left_text(bound: Bound, notation: NotationConfig) -> str:
    if bound.kind is BoundKind.UNBOUNDED:
        return f"({notation.left_infinity}"
    if bound.kind is BoundKind.CLOSED:
        return f"[{bound.value}"
    return f"({bound.value}"


def _right_text(bound: Bound, notation: NotationConfig) -> str:
    if bound.kind is BoundKind.UNBOUNDED:
        return f"{notation.right_infinity})"
    if bound.kind is BoundKind.CLOSED:
        return f"{bound.value}]"
    return f"{bound.value})"


def format_interval(
    interval: Interval, notation: NotationConfig | None = None
) -> str:
    """Render an interval in Wirth notation.

    Square brackets mark closed sides and parentheses open or unbounded
    sides. Endpoint values are rendered with ``str``.

    Parameters
    ----------
    interval : Interval
        Interval to render.
    notation : NotationConfig | None
        Symbols to use; defaults to ``DEFAULT_NOTATION``.

    Returns
    -------
    str
        The rendered interval.

    Examples
    --------
    >>> from intervals_general import BoundPair, Closed, UnboundedOpenRight
    >>> format_interval(Closed(bound_pair=BoundPair.new(1, 5)))
    '[1..5]'
    >>> format_interval(UnboundedOpenRight(right=5))
    '(←..5)'
    >>> ascii_notation = NotationConfig(left_infinity="-inf", right_infinity="inf")
    >>> format_interval(UnboundedOpenRight(right=5), ascii_notation)
    '(-inf..5)'
    """
    notation = notation or DEFAULT_NOTATION
    left = interval.left_bound()
    if left.kind is BoundKind.NONE:
        return notation.empty
    if interval.kind == "singleton":
        return f"[{left.value}]"
    right = interval.right_bound()
    return (
        f"{_left_text(left, notation)}{notation.separator}"
        f"{_right_text(right, notation)}"
    )
