"""Dietary recommendations for aggregated meal totals."""

import logging
from dataclasses import dataclass

from nutrition_estimator.services.prompts import (
    RECOMMENDATION_SYSTEM_PROMPT,
    recommendation_user_prompt,
)
from nutrition_estimator.services.text_generation import (
    TextGenerationClient,
    decode_json_object,
)

_logger = logging.getLogger(__name__)


@dataclass
class RecommendationService:
    """Service that asks the text backend for short meal suggestions."""

    client: TextGenerationClient

    async def recommend(self, totals: dict[str, int]) -> list[str]:
        """Return suggestions for whole-number meal totals."""
        text = await self.client.generate(
            system_prompt=RECOMMENDATION_SYSTEM_PROMPT,
            user_prompt=recommendation_user_prompt(totals),
        )
        payload = decode_json_object(text)
        recommendations = payload.get("recommendations")
        if not isinstance(recommendations, list):
            _logger.warning("Recommendations missing from AI response")
            return []
        return [
            item.strip()
            for item in recommendations
            if isinstance(item, str) and item.strip()
        ]
