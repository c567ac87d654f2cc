"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from nutrition_estimator.config import Settings
from nutrition_estimator.containers import AppContainer
from nutrition_estimator.services.meals import MealEstimator
from nutrition_estimator.services.nutrition import NutritionService
from nutrition_estimator.services.prompts import RECOMMENDATION_SYSTEM_PROMPT
from nutrition_estimator.services.recommendations import RecommendationService
from nutrition_estimator.services.text_generation import TextGenerationClient

NUTRITION_PAYLOADS: dict[str, object] = {
    "dosa": {
        "food_name": "Plain Dosa",
        "serving_size": "1 piece",
        "calories_kcal": 133.33,
        "protein_g": 2.7,
        "carbs_g": 22.45,
        "fat_g": 3.7,
    },
    "sambar": {
        "food_name": "Sambar",
        "serving_size": "1 cup (~150ml)",
        "calories_kcal": 90,
        "protein_g": 4.5,
        "carbs_g": 13,
        "fat_g": 2.1,
    },
    "idli": {
        "food_name": "Idli",
        "serving_size": "1 piece",
        "calories_kcal": 58,
        "protein_g": 2,
        "carbs_g": 12,
        "fat_g": 0.4,
    },
    "chutney": {
        "food_name": "Coconut Chutney",
        "serving_size": "2 tbsp",
        "calories_kcal": 60,
        "protein_g": 0.8,
        "carbs_g": 2.5,
        "fat_g": 5.4,
    },
}

DEFAULT_RECOMMENDATIONS: dict[str, object] = {
    "recommendations": [
        "Add a portion of vegetables for fibre.",
        "Pair the meal with a source of lean protein.",
    ]
}


@dataclass
class FakeTextClient(TextGenerationClient):
    """Fake text client answering from in-memory payloads.

    Values may be dicts (sent as JSON), raw strings, or exceptions to raise.
    """

    nutrition: dict[str, object] = field(
        default_factory=lambda: dict(NUTRITION_PAYLOADS)
    )
    recommendations: object = field(
        default_factory=lambda: dict(DEFAULT_RECOMMENDATIONS)
    )
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if system_prompt == RECOMMENDATION_SYSTEM_PROMPT:
            answer = self.recommendations
        else:
            food = user_prompt.removeprefix("FOOD:\n")
            answer = self.nutrition.get(
                food,
                {
                    "food_name": food.title(),
                    "serving_size": "1 plate",
                    "calories_kcal": 100,
                    "protein_g": 1,
                    "carbs_g": 1,
                    "fat_g": 1,
                },
            )
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, str):
            return answer
        return json.dumps(answer)

    @property
    def nutrition_calls(self) -> list[str]:
        return [
            user_prompt
            for system_prompt, user_prompt in self.calls
            if system_prompt != RECOMMENDATION_SYSTEM_PROMPT
        ]

    @property
    def recommendation_calls(self) -> list[str]:
        return [
            user_prompt
            for system_prompt, user_prompt in self.calls
            if system_prompt == RECOMMENDATION_SYSTEM_PROMPT
        ]


def build_test_container(
    settings: Settings, text_client: FakeTextClient
) -> AppContainer:
    nutrition_service = NutritionService(client=text_client)
    recommendation_service = (
        RecommendationService(client=text_client)
        if settings.recommendations_enabled
        else None
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        text_client=text_client,
        nutrition_service=nutrition_service,
        recommendation_service=recommendation_service,
        meal_estimator=MealEstimator(
            nutrition_service=nutrition_service,
            recommendation_service=recommendation_service,
        ),
        close_resources=close_resources,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def container(settings: Settings, text_client: FakeTextClient) -> AppContainer:
    return build_test_container(settings, text_client)
