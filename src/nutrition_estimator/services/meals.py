"""Meal estimation pipeline."""

import logging
from dataclasses import dataclass

from nutrition_estimator.domain.errors import MissingParameterError
from nutrition_estimator.domain.nutrition import (
    MealEstimate,
    NutritionRecord,
    NutritionTotals,
)
from nutrition_estimator.services.nutrition import NutritionService
from nutrition_estimator.services.parsing import split_foods
from nutrition_estimator.services.recommendations import RecommendationService

_logger = logging.getLogger(__name__)


@dataclass
class MealEstimator:
    """Split a meal description, look up each food and aggregate totals."""

    nutrition_service: NutritionService
    recommendation_service: RecommendationService | None = None

    async def estimate(self, query: str | None) -> MealEstimate:
        """Estimate nutrition for every food in the query.

        Foods are looked up one at a time in query order and any failure
        aborts the whole estimate.
        """
        if query is None or not query.strip():
            raise MissingParameterError("Missing ?q parameter")

        mentions = split_foods(query)
        items: list[NutritionRecord] = []
        totals = NutritionTotals()
        for mention in mentions:
            record = await self.nutrition_service.lookup(mention)
            items.append(record)
            totals.add(record)

        recommendations: list[str] | None = None
        if self.recommendation_service is not None:
            recommendations = (
                await self.recommendation_service.recommend(totals.rounded())
                if items
                else []
            )

        _logger.info(
            "Estimated meal: items=%s total_calories=%s",
            len(items),
            totals.rounded()["calories_kcal"],
        )
        return MealEstimate(
            items=items, totals=totals, recommendations=recommendations
        )
