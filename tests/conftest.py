"""Shared fixtures for intervals_general tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

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
from intervals_general.config import PACKAGE_LOGGER


def _pair(left: Any, right: Any) -> BoundPair[Any]:
    pair = BoundPair.new(left, right)
    assert pair is not None, f"invalid test bounds ({left!r}, {right!r})"
    return pair


@pytest.fixture
def pair() -> Callable[[Any, Any], BoundPair[Any]]:
    """Build a bound pair that must be valid.

    Returns
    -------
    Callable[[Any, Any], BoundPair[Any]]
        Factory taking left and right endpoints.
    """
    return _pair


@pytest.fixture
def all_shapes() -> list[Interval[int]]:
    """One interval of every shape over the integers.

    Returns
    -------
    list[Interval[int]]
        Eleven intervals, one per shape.
    """
    return [
        Closed(bound_pair=_pair(1, 5)),
        Open(bound_pair=_pair(1, 5)),
        LeftHalfOpen(bound_pair=_pair(1, 5)),
        RightHalfOpen(bound_pair=_pair(1, 5)),
        UnboundedClosedRight(right=5),
        UnboundedOpenRight(right=5),
        UnboundedClosedLeft(left=1),
        UnboundedOpenLeft(left=1),
        Singleton(at=3),
        Unbounded(),
        Empty(),
    ]


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Package logger, restored to its original state after the test.

    Yields
    ------
    logging.Logger
        The ``intervals_general`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
