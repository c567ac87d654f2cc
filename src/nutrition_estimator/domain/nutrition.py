"""Nutrition domain models."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict

from nutrition_estimator.domain.rounding import clamp_finite, round_whole


@dataclass(frozen=True)
class FoodMention:
    """A food named in the query with its leading quantity."""

    name: str
    quantity: int = 1


@dataclass(frozen=True)
class NutritionRecord:
    """Normalized nutrition data for one food item."""

    food_name: str
    serving_size: str
    calories_kcal: float
    protein_g: float
    carbs_g: float
    fat_g: float


class RawNutrition(BaseModel):
    """Nutrition payload as decoded from the text generation service.

    Every field is optional and untyped; `normalize_record` turns it into a
    `NutritionRecord`.
    """

    model_config = ConfigDict(extra="ignore")

    food_name: Any = None
    serving_size: Any = None
    calories_kcal: Any = None
    protein_g: Any = None
    carbs_g: Any = None
    fat_g: Any = None


@dataclass
class NutritionTotals:
    """Running macro totals for a single request."""

    calories_kcal: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0

    def add(self, record: NutritionRecord) -> None:
        """Accumulate a scaled record into the totals."""
        self.calories_kcal = clamp_finite(self.calories_kcal + record.calories_kcal)
        self.protein_g = clamp_finite(self.protein_g + record.protein_g)
        self.carbs_g = clamp_finite(self.carbs_g + record.carbs_g)
        self.fat_g = clamp_finite(self.fat_g + record.fat_g)

    def rounded(self) -> dict[str, int]:
        """Return whole-number totals."""
        return {
            "calories_kcal": round_whole(self.calories_kcal),
            "protein_g": round_whole(self.protein_g),
            "carbs_g": round_whole(self.carbs_g),
            "fat_g": round_whole(self.fat_g),
        }


@dataclass(frozen=True)
class MealEstimate:
    """Per-item records, totals and optional recommendations."""

    items: list[NutritionRecord]
    totals: NutritionTotals = field(default_factory=NutritionTotals)
    recommendations: list[str] | None = None

    @property
    def total_calories_kcal(self) -> int:
        """Total calories rounded to a whole number."""
        return self.totals.rounded()["calories_kcal"]
