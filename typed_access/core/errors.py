"""Failures raised by typed accessors.

Only two kinds exist. Both carry the key that was requested; a type
mismatch also carries the expected and actual type names. Stored values
never appear in messages, since configuration and request content may be
sensitive.
"""

from typing import Any, Dict


class AccessorError(Exception):
    """Base class for typed accessor failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "invalid_input", "key": self.key}


class MissingKey(AccessorError, LookupError):
    """Raised when a required key is absent or stored as null."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing required key '{key}'")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": "missing_key", "key": self.key}


class TypeMismatch(AccessorError, TypeError):
    """Raised when a key holds a value of a different type than requested."""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        super().__init__(key, f"Key '{key}' expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": "type_mismatch",
            "key": self.key,
            "expected": self.expected,
            "actual": self.actual,
        }
