"""Translate domain exceptions into HTTP responses"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tender_crm.api.dependencies import get_request_id
from tender_crm.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"Validation error: {exc}", extra={"request_id": get_request_id(request), "field": exc.field})
    return JSONResponse(status_code=400, content={"detail": str(exc), "field": exc.field})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.warning(f"Conflict: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": str(exc)})


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Map the domain error taxonomy onto status codes"""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
    app.add_exception_handler(SQLAlchemyError, internal_error_handler)
