"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nutrition_estimator.api.models import ErrorResponse, NutritionResponse
from nutrition_estimator.app_logging import configure_logging
from nutrition_estimator.config import parse_allowed_origins
from nutrition_estimator.containers import AppContainer
from nutrition_estimator.domain.errors import NutritionEstimatorError

_ESTIMATE_FAILED = "Failed to estimate nutrition"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Nutrition Estimator", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get(
        "/api/nutrition",
        response_model=NutritionResponse,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def estimate_nutrition(
        request: Request, q: str | None = None
    ) -> NutritionResponse | JSONResponse:
        """Estimate nutrition for a free-text food description."""
        state_container: AppContainer = request.app.state.container
        try:
            estimate = await state_container.meal_estimator.estimate(q)
        except NutritionEstimatorError as exc:
            logger.warning("Nutrition estimate failed for %r: %s", q, exc)
            return _error_response(exc.status_code, str(exc))
        except Exception as exc:
            logger.exception("Unexpected nutrition estimate failure")
            return _error_response(
                500, _format_error(state_container, exc, _ESTIMATE_FAILED)
            )
        return NutritionResponse.from_estimate(estimate)

    return app


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _format_error(
    state_container: AppContainer, exc: Exception, fallback: str
) -> str:
    """Return a user-facing error message with local debug info."""
    if state_container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
