"""System and error related API models."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    message: str
    version: str
    timestamp: datetime


class RootResponse(BaseModel):
    """Response for root endpoint."""

    message: str
    version: str
    docs: str


class ErrorDetail(BaseModel):
    """JSON-RPC style error payload."""

    code: int
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned by the REST-style endpoints."""

    error: ErrorDetail


__all__ = ["HealthResponse", "RootResponse", "ErrorDetail", "ErrorResponse"]
