import logging
import time
from typing import Callable, List

from fastapi import Request
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


def cors_allowed_origins(request: Request) -> List[str]:
    return request.app.state.config.get_array_or("cors.allowed_origins", [])


def _apply_cors_headers(request: Request, response) -> None:
    origin = request.headers.get("origin")
    if origin and origin in cors_allowed_origins(request):
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "*"


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = f"{int(time.time() * 1000)}-{id(request)}"
    slow_seconds = request.app.state.config.get_float_or("http.slow_request_seconds", 1.0)

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests or errors
        if process_time > slow_seconds or response.status_code >= 400:
            logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise


async def global_exception_handler(request: Request, exc: Exception):
    request_id = f"{int(time.time() * 1000)}-{id(request)}"
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)

    response = JSONResponse(status_code=500, content={"detail": "Internal server error"})
    _apply_cors_headers(request, response)
    return response
