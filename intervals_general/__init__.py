"""intervals_general - general intervals over any orderable value type.

Represents single contiguous intervals (closed, open, half-open, unbounded,
singleton and empty) over integers, floats, or any user type supporting
``<``, and provides containment, intersection, complement and width.

Examples
--------
>>> from intervals_general import BoundPair, RightHalfOpen
>>> bounds = BoundPair.new(1.0, 2.0)
>>> str(RightHalfOpen(bound_pair=bounds))
'[1.0..2.0)'
"""

from __future__ import annotations

from intervals_general.bound import Ordering
from intervals_general.bound_pair import BoundPair
from intervals_general.config import (
    DEFAULT_NOTATION,
    IntervalsConfig,
    LoggingConfig,
    NotationConfig,
    configure_logging,
    load_config,
)
from intervals_general.display import format_interval
from intervals_general.errors import (
    ConfigurationError,
    DeserializationError,
    IntervalError,
    SerializationError,
)
from intervals_general.interval import (
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

__version__ = "0.1.1"

__all__ = [
    # Bound pair
    "BoundPair",
    # Intervals
    "Interval",
    "Closed",
    "Open",
    "LeftHalfOpen",
    "RightHalfOpen",
    "UnboundedClosedRight",
    "UnboundedOpenRight",
    "UnboundedClosedLeft",
    "UnboundedOpenLeft",
    "Singleton",
    "Unbounded",
    "Empty",
    "Ordering",
    # Display
    "format_interval",
    # Configuration
    "NotationConfig",
    "LoggingConfig",
    "IntervalsConfig",
    "DEFAULT_NOTATION",
    "load_config",
    "configure_logging",
    # Errors
    "IntervalError",
    "ConfigurationError",
    "SerializationError",
    "DeserializationError",
]
