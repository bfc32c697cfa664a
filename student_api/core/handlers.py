# student_api/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from student_api.core.exceptions import (
    INVALID_REQUEST_BODY,
    BaseAPIException,
    InvalidInputException,
    StorageException,
)
from student_api.core.logging import logger

INTERNAL_SERVER_ERROR = "Internal server error"


def describe_validation_errors(errors) -> str:
    """
    Turn pydantic body errors into the text sent back with a 400.

    Errors about the shape of the body (not JSON, not an object, wrong field
    type, integer out of the 64-bit range) collapse to the fixed invalid-body
    message; constraint failures name each failing field. A null field counts
    as missing.
    """
    clauses = []
    for error in errors:
        loc = [str(x) for x in error.get("loc", ()) if x != "body"]
        error_type = error.get("type", "")
        if not loc:
            return INVALID_REQUEST_BODY
        if error.get("input", "") is None:
            clauses.append(f"{'.'.join(loc)}: Field required")
            continue
        if (
            error_type == "json_invalid"
            or error_type == "less_than_equal"
            or error_type.endswith("_type")
            or error_type.endswith("_parsing")
        ):
            return INVALID_REQUEST_BODY
        clauses.append(f"{'.'.join(loc)}: {error.get('msg', 'invalid value')}")

    if not clauses:
        return INVALID_REQUEST_BODY
    return "Validation error: " + "; ".join(clauses)


# 1. Handle student operation errors (raised by the service layer)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    if isinstance(exc, StorageException):
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message} ({exc.cause!r})"
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


# 2. Handle body validation errors (raised by pydantic before the endpoint runs)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_errors(exc.errors())
    logger.info(f"{request.method} {request.url.path} rejected: {message}")
    return await custom_api_exception_handler(request, InvalidInputException(message))


# 3. Handle standard HTTP errors (unknown route, wrong method...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


# 4. Handle anything else (bugs, unexpected library errors)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)
    return PlainTextResponse(
        INTERNAL_SERVER_ERROR,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
