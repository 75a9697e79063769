"""
HTTP mapping of domain errors.

``register_exception_handlers`` installs FastAPI handlers that turn
``NotFoundError``, ``ConflictError`` and ``ValidationError`` into 404,
409 and 400 responses with a ``{"detail": message}`` body, and log
every rejected request.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import ConflictError, FilmorateError, NotFoundError, ValidationError


logger = logging.getLogger(__name__)

STATUS_CODES = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(exc: FilmorateError) -> int:
    for error_type, code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def filmorate_error_handler(request: Request, exc: FilmorateError) -> JSONResponse:
    code = status_code_for(exc)
    logger.warning(
        "%s %s failed with %s (%s): %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        code,
        exc.message,
    )
    return JSONResponse(status_code=code, content={"detail": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 Bad Request.

    FastAPI answers 422 by default; the field rules of this service are
    reported as 400, so unparsable input is reported the same way.
    """
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning("%s %s rejected: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": errors})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on ``app``."""
    app.add_exception_handler(FilmorateError, filmorate_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
