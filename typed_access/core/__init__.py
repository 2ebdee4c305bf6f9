"""Typed accessors and the raw stores they wrap.

Modules in this package should be framework-agnostic where possible;
``http``, ``middleware`` and ``validation`` hold the FastAPI seams.
"""

from .accessor import TypedAccessor
from .errors import AccessorError, MissingKey, TypeMismatch
from .stores import ConfigStore, MappingStore, RawStore, RequestParamsStore
from .values import ValueKind, type_name

__all__ = [
    "AccessorError",
    "ConfigStore",
    "MappingStore",
    "MissingKey",
    "RawStore",
    "RequestParamsStore",
    "TypeMismatch",
    "TypedAccessor",
    "ValueKind",
    "type_name",
]
