"""Field access helpers shared by the analytics services."""

import math
from collections.abc import Mapping
from typing import Any, Callable, Union

FieldAccessor = Union[str, Callable[[Any], Any]]


def read_field(record: Any, accessor: FieldAccessor, default: Any = None) -> Any:
    """Read a field from an object, a mapping, or through a callable."""
    if callable(accessor):
        return accessor(record)

    if isinstance(record, Mapping):
        return record.get(accessor, default)

    return getattr(record, accessor, default)


def to_number(value: Any) -> float:
    """Coerce a field value to float; missing, non-numeric or non-finite values become 0."""
    if value is None:
        return 0.0

    try:
        number = float(value)
    except (OverflowError, TypeError, ValueError):
        return 0.0

    if not math.isfinite(number):
        return 0.0

    return number
