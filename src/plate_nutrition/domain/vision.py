"""Models for AI-detected foods."""

from pydantic import BaseModel, Field

from plate_nutrition.domain.foods import Portion
from plate_nutrition.domain.nutrition import NutritionProfile


class DetectedNutrition(BaseModel):
    """Nutrition estimate returned for a detected food."""

    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)
    fiber: float | None = Field(default=None, ge=0.0)
    sugar: float | None = Field(default=None, ge=0.0)
    sodium: float | None = Field(default=None, ge=0.0)


class EstimatedPortion(BaseModel):
    """Portion estimate for a detected food."""

    amount: float = Field(gt=0.0)
    unit: str


class DetectedFood(BaseModel):
    """Single food item detected in a photo."""

    name: str = ""
    category: str = ""
    nutrition: DetectedNutrition
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    estimated_portion: EstimatedPortion | None = None

    @property
    def profile(self) -> NutritionProfile:
        """Return the nutrition estimate as a domain profile."""
        return NutritionProfile(
            calories=self.nutrition.calories,
            protein=self.nutrition.protein,
            carbs=self.nutrition.carbs,
            fat=self.nutrition.fat,
            fiber=self.nutrition.fiber,
            sugar=self.nutrition.sugar,
            sodium=self.nutrition.sodium,
        )

    @property
    def portion(self) -> Portion | None:
        """Return the estimated portion, if the model provided one."""
        if self.estimated_portion is None:
            return None
        return Portion(
            amount=self.estimated_portion.amount, unit=self.estimated_portion.unit
        )
