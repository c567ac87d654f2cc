"""Nutrition lookups backed by a text generation service."""

import logging
from dataclasses import dataclass

from nutrition_estimator.domain.errors import InvalidFoodError
from nutrition_estimator.domain.nutrition import FoodMention, NutritionRecord
from nutrition_estimator.services.normalization import normalize_record, scale_record
from nutrition_estimator.services.prompts import (
    INVALID_FOOD_MARKER,
    NUTRITION_SYSTEM_PROMPT,
    nutrition_user_prompt,
)
from nutrition_estimator.services.text_generation import (
    TextGenerationClient,
    decode_json_object,
)

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Service that estimates nutrition for single food mentions."""

    client: TextGenerationClient
    debug: bool = False

    async def lookup(self, mention: FoodMention) -> NutritionRecord:
        """Estimate one serving of a food and scale it to the quantity."""
        text = await self.client.generate(
            system_prompt=NUTRITION_SYSTEM_PROMPT,
            user_prompt=nutrition_user_prompt(mention.name),
        )
        if INVALID_FOOD_MARKER in text:
            raise InvalidFoodError(f"Not a recognised food: {mention.name}")
        record = normalize_record(decode_json_object(text), mention.name)
        scaled = scale_record(record, mention.quantity)
        if self.debug:
            _logger.info(
                "Nutrition lookup: food=%s quantity=%s calories=%s",
                mention.name,
                mention.quantity,
                scaled.calories_kcal,
            )
        return scaled
