"""Models for generated ketogenic plans."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

PLAN_DAYS = 7
MIN_TIPS = 5


class _PlanModel(BaseModel):
    """Frozen base that accepts both wire (camelCase) and python names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Macros(_PlanModel):
    """Macronutrient totals for a day or the weekly average."""

    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    fats: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)


class Meal(_PlanModel):
    """Single meal with its preparation."""

    name: str
    description: str
    recipe: str


class DayPlan(_PlanModel):
    """Menu and macro targets for one day of the week."""

    day: int
    macros: Macros
    meals: tuple[Meal, ...] = Field(min_length=1)


class SwapItem(_PlanModel):
    """Suggested ingredient substitution."""

    item: str
    reason: str


class KetoPlan(_PlanModel):
    """Structured 7-day plan returned by the generation service."""

    daily_macros_average: Macros = Field(alias="dailyMacrosAverage")
    weekly_menu: tuple[DayPlan, ...] = Field(alias="weeklyMenu")
    swaps: tuple[SwapItem, ...]
    tips: tuple[str, ...] = Field(min_length=MIN_TIPS)
    estimative: str

    @model_validator(mode="after")
    def _check_week(self) -> "KetoPlan":
        days = [day_plan.day for day_plan in self.weekly_menu]
        if sorted(days) != list(range(1, PLAN_DAYS + 1)):
            raise ValueError(
                f"weeklyMenu must contain days 1..{PLAN_DAYS} exactly once, "
                f"got {days}"
            )
        return self

    def get_day(self, day: int) -> DayPlan | None:
        """Return the plan for a given day number, if present."""
        for day_plan in self.weekly_menu:
            if day_plan.day == day:
                return day_plan
        return None

    def day_numbers(self) -> list[int]:
        return [day_plan.day for day_plan in self.weekly_menu]
