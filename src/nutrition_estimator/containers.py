"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_estimator.adapters.openai_text_client import OpenAITextClient
from nutrition_estimator.adapters.pollinations_client import HttpxPollinationsClient
from nutrition_estimator.config import Settings
from nutrition_estimator.services.meals import MealEstimator
from nutrition_estimator.services.nutrition import NutritionService
from nutrition_estimator.services.recommendations import RecommendationService
from nutrition_estimator.services.text_generation import TextGenerationClient


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    text_client: TextGenerationClient
    nutrition_service: NutritionService
    recommendation_service: RecommendationService | None
    meal_estimator: MealEstimator
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    text_client: OpenAITextClient | HttpxPollinationsClient
    if resolved_settings.text_provider == "openai":
        if not resolved_settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required for the openai provider")
        text_client = OpenAITextClient.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
            timeout_seconds=resolved_settings.request_timeout_seconds,
        )
    else:
        text_client = HttpxPollinationsClient.create(
            base_url=resolved_settings.pollinations_base_url,
            model=resolved_settings.pollinations_model,
            timeout_seconds=resolved_settings.request_timeout_seconds,
        )
    nutrition_service = NutritionService(
        client=text_client,
        debug=resolved_settings.environment == "local",
    )
    recommendation_service = (
        RecommendationService(client=text_client)
        if resolved_settings.recommendations_enabled
        else None
    )
    meal_estimator = MealEstimator(
        nutrition_service=nutrition_service,
        recommendation_service=recommendation_service,
    )

    async def close_resources() -> None:
        await text_client.close()

    return AppContainer(
        settings=resolved_settings,
        text_client=text_client,
        nutrition_service=nutrition_service,
        recommendation_service=recommendation_service,
        meal_estimator=meal_estimator,
        close_resources=close_resources,
    )
