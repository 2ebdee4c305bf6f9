import logging
import time
from datetime import datetime
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core.accessor import TypedAccessor
from .core.config import Config
from .core.http import app_config, request_input
from .core.middleware import global_exception_handler, log_requests
from .core.validation import client_input_errors, ensure_elements
from .core.values import ValueKind

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the API with configuration read through a typed accessor.

    Configuration failures (invalid values or missing keys) abort here,
    before the application accepts requests.
    """
    if config is None:
        config = Config.from_env()
    config.validate()
    settings = config.accessor()

    app = FastAPI(title=settings.get_string("app.name"), debug=settings.get_bool("app.debug"))
    app.state.config = settings
    logger.info(f"Configured {app.title} for environment '{settings.get_string('app.environment')}'")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_array("cors.allowed_origins"),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    @app.exception_handler(Exception)
    async def _global_exception_handler(request, exc):
        return await global_exception_handler(request, exc)

    @app.get("/")
    async def root(settings: TypedAccessor = Depends(app_config)):
        """Return basic API information."""
        return {
            "service": settings.get_string("app.name"),
            "version": __version__,
            "endpoints": {
                "search": "/search",
                "health": "/health",
            },
            "timestamp": datetime.now().isoformat(),
        }

    @app.get("/health")
    async def health_check(settings: TypedAccessor = Depends(app_config)):
        """Basic health report for the API."""
        health_start_time = time.time()
        environment = settings.get_string("app.environment")
        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": settings.get_string("app.name"),
            "environment": environment,
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2),
        }

    @app.post("/search")
    async def search(
        params: TypedAccessor = Depends(request_input),
        settings: TypedAccessor = Depends(app_config),
    ):
        """Normalize search input from the query string and request body.

        - ``q`` string, required
        - ``page`` integer, optional (null means the first page)
        - ``per_page`` integer, defaults to the configured page size
        - ``tags`` array of strings, defaults to empty
        - ``exact`` boolean, defaults to false
        """
        default_per_page = settings.get_int("pagination.default_per_page")
        max_per_page = settings.get_int("pagination.max_per_page")

        with client_input_errors():
            query = params.get_string("q")
            page = params.get_int_or_none("page")
            per_page = params.get_int_or("per_page", default_per_page)
            tags = ensure_elements("tags", params.get_array_or("tags", []), ValueKind.STRING)
            exact = params.get_bool_or("exact", False)

        if page is None:
            page = 1
        if page < 1:
            raise HTTPException(status_code=422, detail="page must be at least 1")
        if per_page < 1 or per_page > max_per_page:
            raise HTTPException(status_code=422, detail=f"per_page must be between 1 and {max_per_page}")

        return {
            "query": query,
            "page": page,
            "per_page": per_page,
            "offset": (page - 1) * per_page,
            "tags": tags,
            "exact": exact,
        }

    return app
