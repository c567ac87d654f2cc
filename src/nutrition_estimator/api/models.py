"""Response models for the nutrition API."""

from pydantic import BaseModel

from nutrition_estimator.domain.nutrition import MealEstimate, NutritionRecord


class NutritionItem(BaseModel):
    """Nutrition for one food in the response."""

    food_name: str
    serving_size: str
    calories_kcal: float
    protein_g: float
    carbs_g: float
    fat_g: float

    @classmethod
    def from_record(cls, record: NutritionRecord) -> "NutritionItem":
        return cls(
            food_name=record.food_name,
            serving_size=record.serving_size,
            calories_kcal=record.calories_kcal,
            protein_g=record.protein_g,
            carbs_g=record.carbs_g,
            fat_g=record.fat_g,
        )


class NutritionResponse(BaseModel):
    """Successful nutrition estimate."""

    items: list[NutritionItem]
    total_calories_kcal: int
    recommendations: list[str] | None = None

    @classmethod
    def from_estimate(cls, estimate: MealEstimate) -> "NutritionResponse":
        return cls(
            items=[NutritionItem.from_record(item) for item in estimate.items],
            total_calories_kcal=estimate.total_calories_kcal,
            recommendations=estimate.recommendations,
        )


class ErrorResponse(BaseModel):
    """Error payload returned for failed requests."""

    error: str
