"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calorie_tracker.api.auth import router as auth_router
from calorie_tracker.api.food_logs import router as food_logs_router
from calorie_tracker.api.foods import router as foods_router
from calorie_tracker.api.users import router as users_router
from calorie_tracker.api.weight import router as weight_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calorie Tracker")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(food_logs_router)
    app.include_router(weight_router)
    app.include_router(users_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "message": "Validation failed",
                "errors": [_format_validation_error(error) for error in exc.errors()],
            },
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": _server_error(container, exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _format_validation_error(error: dict[str, object]) -> dict[str, str]:
    """Flatten a pydantic error, dropping the body/query/path prefix."""
    location = [str(part) for part in error.get("loc", ())]
    if location and location[0] in {"body", "query", "path", "header"}:
        location = location[1:]
    return {"field": ".".join(location), "message": str(error.get("msg", ""))}


def _server_error(container: AppContainer, exc: Exception) -> str:
    """Return the client-facing 500 message with local debug info."""
    if container.settings.environment == "local":
        return f"Server error (debug: {type(exc).__name__}: {exc})"
    return "Server error"
