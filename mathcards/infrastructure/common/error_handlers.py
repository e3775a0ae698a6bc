"""Exception handlers rendering the API's JSON error bodies."""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mathcards.domain.common.exceptions import DomainError
from mathcards.domain.common.exceptions import ValidationError as DomainValidationError
from mathcards.exceptions import MathcardsError, ValidationError

logger = logging.getLogger(__name__)

AUTHENTICATE_HEADERS = {"WWW-Authenticate": "Bearer"}


def _field_errors(errors: Sequence[Any]) -> list[dict[str, str]]:
    """Flatten pydantic errors to {field, message} pairs, dropping the 'body'/'query' prefix."""
    flattened = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        flattened.append({"field": field, "message": error.get("msg", "Invalid value")})
    return flattened


def _validation_response(field: str | None, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [{"field": field or "", "message": message}]},
    )


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": _field_errors(exc.errors())},
    )


async def mathcards_error_handler(_request: Request, exc: MathcardsError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        return _validation_response(exc.field, exc.message)

    headers = AUTHENTICATE_HEADERS if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Request failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, DomainValidationError):
        return _validation_response(exc.field, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error: {exc!s}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred. Please try again later."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(MathcardsError, mathcards_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
