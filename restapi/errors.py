"""Exception handlers rendering every failure as a {"message": ...} body."""

import logging

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from components.core.exceptions import FinanceTrackerError, StoreError

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "Something went wrong"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def finance_error_handler(request: Request, exc: FinanceTrackerError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error("%s %s failed: %r", request.method, request.url.path, exc.__cause__ or exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return _message(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.warning("%s %s invalid request: %s", request.method, request.url.path, details)
    return _message(400, f"Invalid request: {details}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _message(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return _message(500, GENERIC_MESSAGE)


def register_exception_handlers(app: fastapi.FastAPI) -> None:
    app.add_exception_handler(FinanceTrackerError, finance_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
