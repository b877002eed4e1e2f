"""Structured encoding of intervals and bound pairs.

Intervals encode as a mapping with a ``kind`` tag naming the shape plus the
shape's payload fields; bound pairs encode as ``{"left": ..., "right": ...}``.
Decoding goes through a pydantic discriminated union, so decoded bound pairs
are re-validated and the ``left < right`` invariant holds for every decoded
interval.

Examples
--------
>>> from intervals_general import BoundPair, Closed
>>> data = to_dict(Closed(bound_pair=BoundPair.new(1, 5)))
>>> data
{'kind': 'closed', 'bound_pair': {'left': 1, 'right': 5}}
>>> from_dict(data) == Closed(bound_pair=BoundPair.new(1, 5))
True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Union

from pydantic import Field, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from intervals_general.bound_pair import BoundPair
from intervals_general.errors import DeserializationError, SerializationError
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

logger = logging.getLogger(__name__)

_PAYLOAD_SHAPES = (
    Closed,
    Open,
    LeftHalfOpen,
    RightHalfOpen,
    UnboundedClosedRight,
    UnboundedOpenRight,
    UnboundedClosedLeft,
    UnboundedOpenLeft,
    Singleton,
)


@lru_cache(maxsize=None)
def interval_adapter(value_type: Any = None) -> TypeAdapter[Any]:
    """Build a type adapter for the union of all interval shapes.

    Parameters
    ----------
    value_type : Any
        Endpoint type to validate payloads against (e.g. ``int``,
        ``float``, ``Decimal``). None keeps endpoints exactly as they
        appear in the payload, so JSON text carrying non-native endpoints
        such as ``Decimal`` or ``datetime`` (encoded as strings) needs an
        explicit type to decode back to equal values.

    Returns
    -------
    TypeAdapter[Any]
        Adapter dispatching on the ``kind`` field.
    """
    if value_type is None:
        shapes: tuple[Any, ...] = _PAYLOAD_SHAPES
    else:
        shapes = tuple(shape[value_type] for shape in _PAYLOAD_SHAPES)
    union = Union[(*shapes, Unbounded, Empty)]  # noqa: UP007
    return TypeAdapter(Annotated[union, Field(discriminator="kind")])


def to_dict(interval: Interval[Any]) -> dict[str, Any]:
    """Encode an interval as a plain mapping.

    Endpoint values are kept as-is (a ``Decimal`` stays a ``Decimal``), so
    :func:`from_dict` restores an equal interval without a value type. Use
    :func:`to_json` for a text encoding.
    """
    return interval.model_dump(mode="python")


def from_dict(data: Any, value_type: Any = None) -> Interval[Any]:
    """Decode an interval from a mapping.

    Parameters
    ----------
    data : Any
        Mapping produced by :func:`to_dict` or an equivalent source.
    value_type : Any
        Optional endpoint type, see :func:`interval_adapter`.

    Returns
    -------
    Interval[Any]
        The decoded interval.

    Raises
    ------
    DeserializationError
        If the mapping has an unknown ``kind``, missing or extra fields, or
        a bound pair whose left value is not less than its right value.
    """
    try:
        return interval_adapter(value_type).validate_python(data)
    except ValidationError as e:
        raise DeserializationError(f"Invalid interval payload: {e}") from e


def to_json(interval: Interval[Any]) -> str:
    """Encode an interval as a JSON string.

    Float infinities and NaN are written as the ``Infinity`` and ``NaN``
    constants. Endpoints without a native JSON type (``Decimal``,
    ``datetime``) are written as strings; decode them with a matching
    ``value_type``.

    Raises
    ------
    SerializationError
        If an endpoint value has no JSON encoding.
    """
    try:
        return interval.model_dump_json()
    except PydanticSerializationError as e:
        raise SerializationError(f"Cannot encode {interval!r}: {e}") from e


def from_json(text: str | bytes, value_type: Any = None) -> Interval[Any]:
    """Decode an interval from a JSON string.

    Raises
    ------
    DeserializationError
        If the text is not valid JSON or not a valid interval payload.
    """
    try:
        return interval_adapter(value_type).validate_json(text)
    except ValidationError as e:
        raise DeserializationError(f"Invalid interval JSON: {e}") from e


def bound_pair_to_dict(pair: BoundPair[Any]) -> dict[str, Any]:
    """Encode a bound pair as ``{"left": ..., "right": ...}``, values as-is."""
    return pair.model_dump(mode="python")


def bound_pair_from_dict(data: Any, value_type: Any = None) -> BoundPair[Any]:
    """Decode a bound pair, re-checking ``left < right``.

    Raises
    ------
    DeserializationError
        If the fields are missing or out of order.
    """
    model = BoundPair if value_type is None else BoundPair[value_type]
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DeserializationError(f"Invalid bound pair payload: {e}") from e


def write_jsonlines(
    intervals: Iterable[Interval[Any]], path: Path | str, append: bool = False
) -> int:
    """Write intervals to a JSON Lines file, one interval per line.

    Parameters
    ----------
    intervals : Iterable[Interval[Any]]
        Intervals to write.
    path : Path | str
        Output file.
    append : bool
        Append to an existing file instead of overwriting it.

    Returns
    -------
    int
        Number of intervals written.

    Raises
    ------
    SerializationError
        If an interval cannot be encoded or the file cannot be written.
    """
    path = Path(path)
    count = 0
    try:
        with path.open("a" if append else "w", encoding="utf-8") as f:
            for interval in intervals:
                f.write(to_json(interval))
                f.write("\n")
                count += 1
    except OSError as e:
        raise SerializationError(f"Cannot write {path}: {e}") from e
    logger.debug("Wrote %d intervals to %s", count, path)
    return count


def stream_jsonlines(
    path: Path | str, value_type: Any = None
) -> Iterator[Interval[Any]]:
    """Lazily read intervals from a JSON Lines file.

    Blank lines are skipped. Lines are JSON text, so endpoints without a
    native JSON type need a matching ``value_type``.

    Raises
    ------
    DeserializationError
        If the file cannot be read or a line is not a valid interval. The
        error records the offending line number.
    """
    path = Path(path)
    adapter = interval_adapter(value_type)
    try:
        with path.open(encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    logger.warning("Skipping blank line %d in %s", line_number, path)
                    continue
                try:
                    yield adapter.validate_json(line)
                except ValidationError as e:
                    raise DeserializationError(
                        f"Invalid interval in {path}: {e}", line=line_number
                    ) from e
    except OSError as e:
        raise DeserializationError(f"Cannot read {path}: {e}") from e


def read_jsonlines(path: Path | str, value_type: Any = None) -> list[Interval[Any]]:
    """Read every interval from a JSON Lines file.

    See :func:`stream_jsonlines` for the error behavior.
    """
    intervals = list(stream_jsonlines(path, value_type))
    logger.debug("Read %d intervals from %s", len(intervals), path)
    return intervals

