from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idtoken_verifier.settings import get_settings
from idtoken_verifier.routes import system_router, verify_router
from idtoken_verifier.middleware.request_id import RequestIDMiddleware
from idtoken_verifier.app.exceptions import register_exception_handlers
from idtoken_verifier.app.logging_config import configure_logging
from idtoken_verifier.app.metrics import instrument_metrics


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="OpenID Connect ID token signature verification against a JWKS endpoint",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.server.debug,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins(),
        allow_credentials=False,
        allow_methods=settings.cors.methods(),
        allow_headers=settings.cors.headers(),
    )

    # Routers
    app.include_router(system_router)
    app.include_router(verify_router)

    # Middleware
    app.add_middleware(RequestIDMiddleware)

    # Exceptions, logging, metrics
    register_exception_handlers(app)
    configure_logging(settings.logging.as_json, settings.server.log_level)
    instrument_metrics(app)

    return app
