import copy
import logging
import threading
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple


logger = logging.getLogger(__name__)

ALLOWED_DELIMITERS = {".", "/"}


class RawStore(Protocol):
    """Untyped key-value source wrapped by a TypedAccessor.

    ``get`` returns ``None`` both for an unset key and for a key stored as
    null. Lookups must not have side effects.
    """

    def get(self, key: str) -> Any:
        ...


class MappingStore:
    """Flat store: keys are looked up literally."""

    def __init__(self, data: Optional[Mapping] = None) -> None:
        self._data = dict(data or {})

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def __contains__(self, key: str) -> bool:
        return self._data.get(key) is not None

    def __len__(self) -> int:
        return len(self._data)


class ConfigStore:
    """Hierarchical configuration tree addressed by delimited keys.

    ``get("database.host")`` first tries the literal key at the root, then
    walks nested mappings segment by segment. Numeric segments index into
    lists. Runtime overrides via ``set`` replace the whole tree under a
    lock, so a reader always sees a complete snapshot.
    """

    def __init__(self, tree: Optional[Mapping] = None, delimiter: str = ".") -> None:
        if delimiter not in ALLOWED_DELIMITERS:
            raise ValueError(f"Unsupported key delimiter: {delimiter!r}")
        self._tree: Dict[str, Any] = copy.deepcopy(dict(tree or {}))
        self._delimiter = delimiter
        self._write_lock = threading.Lock()

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._tree)

    def get(self, key: str) -> Any:
        tree = self._tree
        if key in tree:
            return tree[key]

        node: Any = tree
        for segment in key.split(self._delimiter):
            if isinstance(node, Mapping):
                if segment not in node:
                    return None
                node = node[segment]
            elif isinstance(node, (list, tuple)) and segment.isascii() and segment.isdigit():
                index = int(segment)
                if index >= len(node):
                    return None
                node = node[index]
            else:
                return None
        return node

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def set(self, key: str, value: Any) -> None:
        segments = key.split(self._delimiter)
        with self._write_lock:
            tree = copy.deepcopy(self._tree)
            # a literal root key shadows the nested path in get
            if key in tree:
                segments = [key]
            node = tree
            for position, segment in enumerate(segments[:-1]):
                child = node.get(segment)
                if child is None:
                    child = {}
                    node[segment] = child
                elif not isinstance(child, dict):
                    path = self._delimiter.join(segments[: position + 1])
                    raise ValueError(f"Cannot set '{key}': '{path}' is not a mapping")
                node = child
            node[segments[-1]] = value
            self._tree = tree
        logger.info(f"Configuration override applied for key '{key}'")


class RequestParamsStore:
    """Flat store over merged request query and body parameters.

    Repeated query keys become a list of strings. Body values take
    precedence over query values with the same key.
    """

    def __init__(self, params: Optional[Mapping] = None) -> None:
        self._params = dict(params or {})

    @classmethod
    def from_parts(
        cls,
        query_items: Iterable[Tuple[str, Any]] = (),
        body: Optional[Mapping] = None,
    ) -> "RequestParamsStore":
        return cls(merge_params(query_items, body))

    def get(self, key: str) -> Any:
        return self._params.get(key)

    def keys(self):
        return self._params.keys()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._params)


def group_items(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    grouped: Dict[str, Any] = {}
    for key, value in items:
        if key in grouped:
            existing = grouped[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                grouped[key] = [existing, value]
        else:
            grouped[key] = value
    return grouped


def merge_params(query_items: Iterable[Tuple[str, Any]], body: Optional[Mapping] = None) -> Dict[str, Any]:
    merged = group_items(query_items)
    if body:
        merged.update(body)
    return merged
