"""Type coercion for raw request values.

Raw input arrives untyped: query strings and form fields are always strings,
JSON bodies may already carry numbers and booleans. Each coercer accepts the
natural representations of its type and raises ``CoercionError`` otherwise.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from .types import FieldType

_INTEGER_RE = re.compile(r"^[+-]?\d+$")

TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


class CoercionError(ValueError):
    """Raised when a raw value cannot be converted to a field type."""

    pass


def _to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise CoercionError(f"Cannot convert {type(value).__name__} to string")


def _to_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise CoercionError("Booleans are not integers")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise CoercionError(f"Float {value} is not integral")
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        try:
            return int(value.strip())
        except ValueError as e:
            # Past the interpreter's int digit limit
            raise CoercionError(f"Integer string too long: {len(value)} chars") from e
    raise CoercionError(f"Cannot convert {value!r} to integer")


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise CoercionError("Booleans are not numbers")
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError as e:
            raise CoercionError(f"Cannot convert {value!r} to float") from e
    else:
        raise CoercionError(f"Cannot convert {type(value).__name__} to float")
    # NaN and infinity are never meaningful request parameters
    if not math.isfinite(result):
        raise CoercionError(f"Non-finite float {value!r}")
    return result


def _to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise CoercionError(f"Cannot convert {value!r} to boolean")


def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise CoercionError(f"Cannot parse {value!r} as ISO date") from e
    raise CoercionError(f"Cannot convert {type(value).__name__} to date")


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise CoercionError(f"Cannot parse {value!r} as ISO datetime") from e
    raise CoercionError(f"Cannot convert {type(value).__name__} to datetime")


def _to_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return [_to_string(item) for item in value]
    raise CoercionError(f"Cannot convert {type(value).__name__} to list")


_COERCERS: dict[FieldType, Callable[[Any], Any]] = {
    FieldType.STRING: _to_string,
    FieldType.INTEGER: _to_integer,
    FieldType.FLOAT: _to_float,
    FieldType.BOOLEAN: _to_boolean,
    FieldType.DATE: _to_date,
    FieldType.DATETIME: _to_datetime,
    FieldType.LIST: _to_list,
}


def coerce(value: Any, field_type: FieldType) -> Any:
    """
    Convert a raw value to the given field type.

    Args:
        value: The raw, untrusted value
        field_type: Target type

    Returns:
        The converted value

    Raises:
        CoercionError: If the value has no valid representation in the type
    """
    return _COERCERS[field_type](value)
