from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict


class ValueKind(str, Enum):
    """Run-time classification of a raw store value."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    MAP = "map"
    DATETIME = "datetime"


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_integer(value: Any) -> bool:
    # bool subclasses int
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    return isinstance(value, float)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_map(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_datetime(value: Any) -> bool:
    return isinstance(value, datetime)


PREDICATES: Dict[ValueKind, Callable[[Any], bool]] = {
    ValueKind.NULL: lambda value: value is None,
    ValueKind.BOOLEAN: is_boolean,
    ValueKind.INTEGER: is_integer,
    ValueKind.FLOAT: is_float,
    ValueKind.STRING: is_string,
    ValueKind.ARRAY: is_array,
    ValueKind.MAP: is_map,
    ValueKind.DATETIME: is_datetime,
}


def matches(value: Any, kind: ValueKind) -> bool:
    return PREDICATES[kind](value)


def type_name(value: Any) -> str:
    """Return the diagnostic type name of *value*.

    Known kinds report their ``ValueKind`` name; anything else reports its
    Python class name. The value itself is never part of the result.
    """
    for kind, predicate in PREDICATES.items():
        if predicate(value):
            return kind.value
    return type(value).__name__
