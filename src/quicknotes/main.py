# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, health_router, notes_router
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .storage import Storage

logger = get_logger("main")

ENDPOINTS = [
    "POST   /auth/mock-login",
    "POST   /notes",
    "GET    /notes",
    "GET    /notes/{id}",
    "PATCH  /notes/{id}",
    "DELETE /notes/{id}",
    "GET    /health",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting Quick Notes API",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )
    for endpoint in ENDPOINTS:
        logger.info(f"Endpoint: {endpoint}")

    yield

    logger.info("Shutting down Quick Notes API")


def _validation_message(exc: RequestValidationError) -> str:
    """First schema error as a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    loc = list(first.get("loc", ()))
    if loc and loc[0] == "body":
        # drop the request-body marker, keep a field that is itself named "body"
        loc = loc[1:]
    loc = [str(part) for part in loc]
    msg = first.get("msg", "Invalid request")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            # a known path with an unsupported method is still an unknown route
            return _route_not_found_response()
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # field rules live in the services and answer 400, keep schema errors consistent
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )


def _route_not_found_response() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Route not found"})


async def route_not_found(scope, receive, send):
    """Fallback for paths no router matches."""
    await _route_not_found_response()(scope, receive, send)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Build the app with its own, empty stores."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="User-owned text notes behind a mock bearer token",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage or Storage()

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router)
    app.include_router(notes_router)
    app.include_router(health_router)

    app.router.default = route_not_found

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("quicknotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
