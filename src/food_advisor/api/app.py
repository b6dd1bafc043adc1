"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_advisor.api.food import router as food_router
from food_advisor.api.recipes import router as recipes_router
from food_advisor.app_logging import configure_logging
from food_advisor.containers import AppContainer
from food_advisor.domain.errors import FoodNotFoundError
from food_advisor.services.labels import supported_foods


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Food Health Advisor", lifespan=lifespan)
    app.state.container = container

    app.include_router(food_router)
    app.include_router(recipes_router)

    @app.exception_handler(FoodNotFoundError)
    async def food_not_found(request: Request, exc: FoodNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Food not found",
                "message": f"{exc} Try one of our supported foods.",
                "supportedFoods": supported_foods(),
            },
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = first.get("msg", "Invalid request")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "message": f"{field}: {message}" if field else message,
            },
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal error",
                "message": "An unexpected error occurred.",
            },
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok", "message": "Food Health Advisor API"}

    return app
