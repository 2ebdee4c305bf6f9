import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from .accessor import TypedAccessor
from .stores import ConfigStore


logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
LOG_LEVELS = {"CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    return env.get(name, default)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    lowered = raw.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"{name} environment variable must be a boolean")


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} environment variable must be an integer") from None


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        raise ValueError(f"{name} environment variable must be a number") from None


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Environment strings are converted to their field types here, once.
    The rest of the application reads configuration through the typed
    accessor returned by :meth:`accessor`.
    """

    APP_NAME: str = "typed-access"
    ENVIRONMENT: str = "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ALLOWED_ORIGINS: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    DEFAULT_PER_PAGE: int = 20
    MAX_PER_PAGE: int = 100
    REQUEST_SLOW_SECONDS: float = 1.0

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> "Config":
        if env is None:
            if dotenv:
                load_dotenv()
            env = os.environ

        return cls(
            APP_NAME=_env_str(env, "APP_NAME", cls.APP_NAME),
            ENVIRONMENT=_env_str(env, "ENVIRONMENT", cls.ENVIRONMENT),
            DEBUG=_env_bool(env, "DEBUG", cls.DEBUG),
            LOG_LEVEL=_env_str(env, "LOG_LEVEL", cls.LOG_LEVEL).upper(),
            HOST=_env_str(env, "HOST", cls.HOST),
            PORT=_env_int(env, "PORT", cls.PORT),
            CORS_ALLOWED_ORIGINS=_split_origins(env.get("CORS_ALLOWED_ORIGINS", "http://localhost:3000")),
            DEFAULT_PER_PAGE=_env_int(env, "DEFAULT_PER_PAGE", cls.DEFAULT_PER_PAGE),
            MAX_PER_PAGE=_env_int(env, "MAX_PER_PAGE", cls.MAX_PER_PAGE),
            REQUEST_SLOW_SECONDS=_env_float(env, "REQUEST_SLOW_SECONDS", cls.REQUEST_SLOW_SECONDS),
        )

    def allowed_origins(self, extra_origins: List[str] | None = None) -> List[str]:
        merged = list(self.CORS_ALLOWED_ORIGINS)
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    def validate(self) -> None:
        if not 0 < self.PORT < 65536:
            raise ValueError("PORT environment variable must be between 1 and 65535")
        if self.DEFAULT_PER_PAGE < 1:
            raise ValueError("DEFAULT_PER_PAGE environment variable must be positive")
        if self.MAX_PER_PAGE < 1:
            raise ValueError("MAX_PER_PAGE environment variable must be positive")
        if self.DEFAULT_PER_PAGE > self.MAX_PER_PAGE:
            raise ValueError("DEFAULT_PER_PAGE must not exceed MAX_PER_PAGE")
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL environment variable must be one of: {', '.join(sorted(LOG_LEVELS))}")

    def to_tree(self) -> Dict[str, Any]:
        return {
            "app": {
                "name": self.APP_NAME,
                "environment": self.ENVIRONMENT,
                "debug": self.DEBUG,
            },
            "logging": {"level": self.LOG_LEVEL},
            "server": {"host": self.HOST, "port": self.PORT},
            "cors": {"allowed_origins": self.allowed_origins()},
            "pagination": {
                "default_per_page": self.DEFAULT_PER_PAGE,
                "max_per_page": self.MAX_PER_PAGE,
            },
            "http": {"slow_request_seconds": self.REQUEST_SLOW_SECONDS},
        }

    def accessor(self) -> TypedAccessor:
        return TypedAccessor(ConfigStore(self.to_tree()))
