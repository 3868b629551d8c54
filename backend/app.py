"""FastAPI application entry point for the Sportradar proxy."""

import logging
import secrets
import sys
import time

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from config import Settings, settings
from errors import AuthError, ConfigError, error_response, register_error_handlers
from services.sportradar import SportradarClient

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)

# Reachable without X-API-Key
PUBLIC_PATHS = {"/healthz", "/openapi.yaml"}


def _key_matches(provided: str | None, expected: str | None) -> bool:
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


def create_app(config: Settings = settings, transport=None) -> FastAPI:
    app = FastAPI(title="Sportradar Proxy", version="1.0.0", openapi_url=None)
    app.state.settings = config
    app.state.sportradar = SportradarClient(config, transport=transport)

    # Rate limiting (innermost, runs after the access gate)
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[config.rate_limit],
        strategy="moving-window",
    )
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Access gate
    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        if request.method == "OPTIONS" or request.url.path in PUBLIC_PATHS:
            return await call_next(request)
        if not _key_matches(request.headers.get("X-API-Key"), config.proxy_api_key):
            return error_response(AuthError())
        return await call_next(request)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if config.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Access log
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, "%s %s %d %.1f ms", request.method, request.url.path, response.status_code, duration_ms)
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.matches import router as matches_router
    from routes.odds import router as odds_router

    app.include_router(health_router)
    app.include_router(matches_router)
    app.include_router(odds_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = config.validate()
        if missing:
            raise ConfigError(missing)
        logger.info("Proxying %s%s", config.sr_base_url, config.sr_soccer_base)

    return app


app = create_app()


def main() -> None:
    missing = settings.validate()
    if missing:
        logger.error("Missing required env vars: %s", ", ".join(missing))
        sys.exit(1)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
