"""Strict typed access to configuration and request parameters."""

__version__ = "1.0.0"

from .core import (  # noqa: E402
    AccessorError,
    ConfigStore,
    MappingStore,
    MissingKey,
    RawStore,
    RequestParamsStore,
    TypedAccessor,
    TypeMismatch,
    ValueKind,
)

__all__ = [
    "AccessorError",
    "ConfigStore",
    "MappingStore",
    "MissingKey",
    "RawStore",
    "RequestParamsStore",
    "TypedAccessor",
    "TypeMismatch",
    "ValueKind",
    "__version__",
]
