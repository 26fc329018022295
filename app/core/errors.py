"""
Exception handlers rendering every failure as {"ok": false, "error": "<message>"}.

Handlers and dependencies raise HTTPException with a plain string detail;
this module only changes the response shape.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.cors import CORS_HEADERS
from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Starlette's own messages for unmatched paths and methods
_ROUTING_DETAILS = {"Not Found", "Method Not Allowed"}


def error_response(message: str, status_code: int, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the error envelope handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown route or unsupported method are both plain 404s
        if exc.status_code in (404, 405) and exc.detail in _ROUTING_DETAILS:
            return error_response("Not found", status.HTTP_404_NOT_FOUND)
        if exc.status_code >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning("Validation error on %s: %s", request.url.path, errors)
        message = "Invalid request"
        if errors:
            field = ".".join(str(part) for part in errors[0]["loc"] if part not in ("query", "body"))
            message = f"{field}: {errors[0]['msg']}" if field else errors[0]["msg"]
        return error_response(message, status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        # Served outside the CORS middleware, so the headers are added here
        return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR, headers=CORS_HEADERS)
