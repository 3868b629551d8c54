"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(ProxyError):
    def __init__(self, missing: list[str]):
        super().__init__(f"Missing required env vars: {', '.join(missing)}")
        self.missing = missing


class AuthError(ProxyError):
    def __init__(self):
        super().__init__("Unauthorized", status_code=401)


class ValidationError(ProxyError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class FetchError(ProxyError):
    """Anything that went wrong getting JSON out of the upstream."""


class UpstreamError(FetchError):
    def __init__(self, upstream_status: int, reason: str, body: str):
        super().__init__(f"{upstream_status} {reason}: {body}")
        self.upstream_status = upstream_status
        self.body = body


class NetworkError(FetchError):
    pass


class ParseError(FetchError):
    pass


class ShapingError(ProxyError):
    """Upstream payload could not be reshaped into a response."""


def error_response(exc: ProxyError) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(ProxyError)
    async def handle_proxy_error(_request: Request, exc: ProxyError):
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc)
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse({"error": "Internal server error"}, status_code=500)
