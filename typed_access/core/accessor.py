from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from .errors import MissingKey, TypeMismatch
from .stores import RawStore
from .values import (
    ValueKind,
    is_array,
    is_boolean,
    is_datetime,
    is_float,
    is_integer,
    is_map,
    is_string,
    type_name,
)


class TypedAccessor:
    """Exact-type retrieval over a raw key-value store.

    Every supported type has three methods:

    - ``get_<type>(key)`` raises ``MissingKey`` when the key is absent
    - ``get_<type>_or(key, default)`` returns ``default`` when absent
    - ``get_<type>_or_none(key)`` returns ``None`` when absent

    A stored ``None`` counts as absent. A present value of another type
    raises ``TypeMismatch`` in all three modes; no coercion is attempted.
    """

    __slots__ = ("_store",)

    def __init__(self, store: RawStore) -> None:
        self._store = store

    @property
    def store(self) -> RawStore:
        return self._store

    def _require(self, key: str, predicate: Callable[[Any], bool], kind: ValueKind) -> Any:
        value = self._store.get(key)
        if value is None:
            raise MissingKey(key)
        return self._check(key, value, predicate, kind)

    def _optional(self, key: str, predicate: Callable[[Any], bool], kind: ValueKind, default: Any) -> Any:
        value = self._store.get(key)
        if value is None:
            return default
        return self._check(key, value, predicate, kind)

    @staticmethod
    def _check(key: str, value: Any, predicate: Callable[[Any], bool], kind: ValueKind) -> Any:
        if not predicate(value):
            raise TypeMismatch(key, kind.value, type_name(value))
        return value

    # string

    def get_string(self, key: str) -> str:
        return self._require(key, is_string, ValueKind.STRING)

    def get_string_or(self, key: str, default: str) -> str:
        return self._optional(key, is_string, ValueKind.STRING, default)

    def get_string_or_none(self, key: str) -> Optional[str]:
        return self._optional(key, is_string, ValueKind.STRING, None)

    # integer

    def get_int(self, key: str) -> int:
        return self._require(key, is_integer, ValueKind.INTEGER)

    def get_int_or(self, key: str, default: int) -> int:
        return self._optional(key, is_integer, ValueKind.INTEGER, default)

    def get_int_or_none(self, key: str) -> Optional[int]:
        return self._optional(key, is_integer, ValueKind.INTEGER, None)

    # float

    def get_float(self, key: str) -> float:
        return self._require(key, is_float, ValueKind.FLOAT)

    def get_float_or(self, key: str, default: float) -> float:
        return self._optional(key, is_float, ValueKind.FLOAT, default)

    def get_float_or_none(self, key: str) -> Optional[float]:
        return self._optional(key, is_float, ValueKind.FLOAT, None)

    # boolean

    def get_bool(self, key: str) -> bool:
        return self._require(key, is_boolean, ValueKind.BOOLEAN)

    def get_bool_or(self, key: str, default: bool) -> bool:
        return self._optional(key, is_boolean, ValueKind.BOOLEAN, default)

    def get_bool_or_none(self, key: str) -> Optional[bool]:
        return self._optional(key, is_boolean, ValueKind.BOOLEAN, None)

    # array: elements are returned unchecked, see validation.ensure_elements

    def get_array(self, key: str) -> List[Any]:
        return list(self._require(key, is_array, ValueKind.ARRAY))

    def get_array_or(self, key: str, default: List[Any]) -> List[Any]:
        value = self._optional(key, is_array, ValueKind.ARRAY, None)
        return default if value is None else list(value)

    def get_array_or_none(self, key: str) -> Optional[List[Any]]:
        value = self._optional(key, is_array, ValueKind.ARRAY, None)
        return None if value is None else list(value)

    # map

    def get_map(self, key: str) -> Dict[str, Any]:
        return dict(self._require(key, is_map, ValueKind.MAP))

    def get_map_or(self, key: str, default: Dict[str, Any]) -> Dict[str, Any]:
        value = self._optional(key, is_map, ValueKind.MAP, None)
        return default if value is None else dict(value)

    def get_map_or_none(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._optional(key, is_map, ValueKind.MAP, None)
        return None if value is None else dict(value)

    # datetime

    def get_datetime(self, key: str) -> datetime:
        return self._require(key, is_datetime, ValueKind.DATETIME)

    def get_datetime_or(self, key: str, default: datetime) -> datetime:
        return self._optional(key, is_datetime, ValueKind.DATETIME, default)

    def get_datetime_or_none(self, key: str) -> Optional[datetime]:
        return self._optional(key, is_datetime, ValueKind.DATETIME, None)
