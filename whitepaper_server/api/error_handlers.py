"""Exception handlers mapping protocol errors onto HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from whitepaper_server.models.api.system import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

# JSON-RPC error code -> HTTP status for the REST-style endpoints
STATUS_BY_CODE = {
    INVALID_PARAMS: 400,
    METHOD_NOT_FOUND: 404,
    INTERNAL_ERROR: 500,
}


def error_response(code: int, message: str) -> JSONResponse:
    """Build the ``{"error": {...}}`` envelope with the mapped status."""
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(
        status_code=STATUS_BY_CODE.get(code, 500), content=body.model_dump()
    )


async def mcp_error_handler(request: Request, exc: McpError) -> JSONResponse:
    """Surface router errors verbatim."""
    logger.info(f"{request.url.path} failed: {exc.error.message}")
    return error_response(exc.error.code, exc.error.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as InvalidParams in the error envelope."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info(f"{request.url.path} rejected: {details}")
    return error_response(INVALID_PARAMS, f"Invalid request: {details}")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(INTERNAL_ERROR, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(McpError, mcp_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
