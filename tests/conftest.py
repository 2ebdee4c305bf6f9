"""Shared pytest fixtures for the typed-access test suite.

Tests never read the real process environment or a ``.env`` file;
configuration is always built from explicit mappings.
"""

import pytest

from typed_access.core.accessor import TypedAccessor
from typed_access.core.config import Config
from typed_access.core.stores import MappingStore


@pytest.fixture
def make_accessor():
    def _make(data=None) -> TypedAccessor:
        return TypedAccessor(MappingStore(data or {}))

    return _make


@pytest.fixture
def config() -> Config:
    return Config.from_env(
        {
            "APP_NAME": "typed-access-test",
            "ENVIRONMENT": "test",
            "CORS_ALLOWED_ORIGINS": "http://localhost:3000,https://example.com",
            "DEFAULT_PER_PAGE": "10",
            "MAX_PER_PAGE": "50",
        }
    )
