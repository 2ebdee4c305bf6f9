import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Sequence

from fastapi import HTTPException

from .errors import AccessorError, MissingKey, TypeMismatch
from .values import ValueKind, matches, type_name


logger = logging.getLogger(__name__)


def ensure_elements(key: str, values: Sequence[Any], kind: ValueKind) -> List[Any]:
    """Check every element of an array value against *kind*.

    Failures name the element as ``<key>.<index>``.
    """
    for index, value in enumerate(values):
        if not matches(value, kind):
            raise TypeMismatch(f"{key}.{index}", kind.value, type_name(value))
    return list(values)


def http_exception_for(error: AccessorError) -> HTTPException:
    if isinstance(error, MissingKey):
        return HTTPException(status_code=400, detail=error.to_dict())
    if isinstance(error, TypeMismatch):
        return HTTPException(status_code=422, detail=error.to_dict())
    return HTTPException(status_code=400, detail=error.to_dict())


@contextmanager
def client_input_errors() -> Iterator[None]:
    """Translate accessor failures on request input into HTTP errors."""
    try:
        yield
    except AccessorError as e:
        logger.info(f"Rejected request input: {e}")
        raise http_exception_for(e) from e
