import logging
from typing import Any, Dict

from fastapi import HTTPException, Request

from .accessor import TypedAccessor
from .stores import RequestParamsStore, group_items


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPES = {"application/json"}
FORM_CONTENT_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


def _media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


async def _read_body(request: Request) -> Dict[str, Any]:
    media_type = _media_type(request)

    if media_type in JSON_CONTENT_TYPES or media_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            body = await request.json()
        except ValueError:
            logger.warning(f"Rejected undecodable JSON body on {request.method} {request.url.path}")
            raise HTTPException(status_code=400, detail="Request body is not valid JSON")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Request body must be a JSON object")
        return body

    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return group_items(form.multi_items())

    return {}


async def read_request_params(request: Request) -> RequestParamsStore:
    """Materialize merged query and body parameters for *request*."""
    body = await _read_body(request)
    return RequestParamsStore.from_parts(request.query_params.multi_items(), body)


async def request_input(request: Request) -> TypedAccessor:
    return TypedAccessor(await read_request_params(request))


def app_config(request: Request) -> TypedAccessor:
    return request.app.state.config
