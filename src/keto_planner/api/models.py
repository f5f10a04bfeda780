"""Pydantic models for the wizard HTTP surface."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from keto_planner.domain.intake import (
    ActivityLevel,
    CholesterolLevel,
    DailyRoutine,
    DietType,
    FamilyHeartHistory,
    Gender,
    Goal,
    MedicalCondition,
)
from keto_planner.domain.plan import DayPlan, KetoPlan


class IntakeUpdate(BaseModel):
    """Partial edit of intake answers; unset fields are left untouched."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    age: str | None = None
    weight: str | None = None
    height: str | None = None
    gender: Gender | None = None
    has_medical_authorization: bool | None = None
    cholesterol_level: CholesterolLevel | None = None
    family_heart_history: FamilyHeartHistory | None = None
    activity_level: ActivityLevel | None = None
    daily_routine: DailyRoutine | None = None
    goal: Goal | None = None
    diet_type: DietType | None = None
    lactose_intolerant: bool | None = None
    meals_per_day: Literal[3, 4, 5] | None = None


class IntakeState(BaseModel):
    """Current intake answers."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    age: str
    weight: str
    height: str
    gender: Gender
    medical_conditions: list[MedicalCondition]
    no_medical_conditions: bool
    has_medical_authorization: bool
    cholesterol_level: CholesterolLevel
    family_heart_history: FamilyHeartHistory
    activity_level: ActivityLevel
    daily_routine: DailyRoutine
    goal: Goal
    diet_type: DietType
    lactose_intolerant: bool
    meals_per_day: int


class ViewState(BaseModel):
    """Results browsing state."""

    active_day: int
    expanded_meal_index: int | None
    active_day_plan: DayPlan | None


class WizardState(BaseModel):
    """Everything a renderer needs to draw the current screen."""

    step: int
    step_name: str
    progress: int | None
    can_advance: bool
    notice: str | None
    intake: IntakeState
    plan: KetoPlan | None
    view: ViewState | None
