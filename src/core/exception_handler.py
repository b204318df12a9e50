"""
Global exception handler for the S3 Object Gateway.
Provides centralized error handling for all API exceptions.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from src.models.dto.object_dto import ErrorResponse, UPLOADS_REQUIRED_MESSAGE, UNHANDLED_ERROR_MESSAGE
from .exceptions import ValidationException

logger = logging.getLogger(__name__)


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse.with_message(message).model_dump()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    
    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        logger.warning("Rejected request to %s: %s", request.url.path, exc.message)
        return _error_response(exc.message)
    
    @app.exception_handler(RequestValidationError)
    async def handle_request_shape_error(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request body to %s: %s", request.url.path, exc.errors())
        return _error_response(UPLOADS_REQUIRED_MESSAGE)
    
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        # Unsupported methods on a known path are reported like unknown routes
        if exc.status_code == 405:
            exc = StarletteHTTPException(status_code=404)
        return await http_exception_handler(request, exc)
    
    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(UNHANDLED_ERROR_MESSAGE)
