"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipe_generator.api.foods import router as foods_router
from recipe_generator.api.recipes import router as recipes_router
from recipe_generator.api.users import router as users_router
from recipe_generator.app_logging import configure_logging
from recipe_generator.config import parse_allowed_origins
from recipe_generator.containers import AppContainer
from recipe_generator.errors import (
    ConflictError,
    DuplicateFoodError,
    NotFoundError,
    NotOwnerError,
    RecipeDraftError,
    RecipeGeneratorError,
    RecipeValidationError,
)
from recipe_generator.services.bootstrap import run_with_backoff

_ERROR_STATUS: tuple[tuple[type[RecipeGeneratorError], int], ...] = (
    (RecipeValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateFoodError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotOwnerError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (RecipeDraftError, status.HTTP_502_BAD_GATEWAY),
)

_CORS_HEADERS = [
    "Content-Type",
    "Authorization",
    "cf-connecting-ip",
    "cf-ipcountry",
    "cf-ray",
    "x-forwarded-for",
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        settings = state_container.settings
        food_service = state_container.food_service
        try:
            await run_with_backoff(
                (
                    food_service.seed_default_foods
                    if settings.seed_default_foods
                    else food_service.list_default_foods
                ),
                action="database initialization",
                attempts=settings.db_connect_attempts,
                max_delay_seconds=settings.db_connect_max_delay_seconds,
            )
            yield
        finally:
            await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=_CORS_HEADERS,
    )

    @app.exception_handler(RecipeGeneratorError)
    async def domain_error_handler(
        request: Request, exc: RecipeGeneratorError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    app.include_router(recipes_router)
    app.include_router(foods_router)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: RecipeGeneratorError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
