"""Translate domain exceptions into ``{"error": "..."}`` JSON responses.

Clients only ever see a short message; details of unexpected failures stay
in the server log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portfolio.domain.exceptions import ForbiddenError, MissingFieldsError, PersistenceError, UploadError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _field_name(loc: tuple) -> str:
    # ("body", "title") → "title"; drop the leading location marker.
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def missing_fields_handler(request: Request, exc: MissingFieldsError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields: list[str] = []
    for err in exc.errors():
        name = _field_name(tuple(err.get("loc", ())))
        if name and name not in fields:
            fields.append(name)
    return _error(status.HTTP_400_BAD_REQUEST, f"Invalid fields: {', '.join(fields) or 'body'}")


async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    return _error(status.HTTP_403_FORBIDDEN, exc.message)


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MissingFieldsError, missing_fields_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(ForbiddenError, forbidden_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
