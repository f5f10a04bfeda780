"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from keto_planner.config import Settings
from keto_planner.containers import AppContainer
from keto_planner.domain.intake import ActivityLevel, DietType, Goal, IntakeData
from keto_planner.services.generation import PlanClient, PlanGenerationService
from keto_planner.services.wizard import IntakeWizard


def plan_payload(
    days: list[int] | None = None, tips: int = 5, meals: int = 4
) -> dict[str, object]:
    """Build a plan document shaped like the generation service output."""
    day_numbers = days if days is not None else list(range(1, 8))
    return {
        "dailyMacrosAverage": {
            "calories": 1800,
            "protein": 110,
            "fats": 140,
            "carbs": 22,
        },
        "weeklyMenu": [
            {
                "day": day,
                "macros": {
                    "calories": 1800 + day,
                    "protein": 110,
                    "fats": 140,
                    "carbs": 20,
                },
                "meals": [
                    {
                        "name": f"Refeição {index + 1} do dia {day}",
                        "description": "Ovos mexidos com abacate",
                        "recipe": "Bata os ovos e cozinhe na manteiga.",
                    }
                    for index in range(meals)
                ],
            }
            for day in day_numbers
        ],
        "swaps": [{"item": "Arroz", "reason": "Troque por arroz de couve-flor."}],
        "tips": [f"Dica {index + 1}" for index in range(tips)],
        "estimative": "Perda estimada de 2 a 4 kg no primeiro mês.",
    }


def screened_intake(**overrides: object) -> IntakeData:
    """Return answers that pass every gate (Scenario A profile by default)."""
    data = IntakeData(
        name="Ana",
        age="30",
        weight="65",
        height="165",
        no_medical_conditions=True,
        meals_per_day=4,
        activity_level=ActivityLevel.SEDENTARY,
        diet_type=DietType.VEGAN,
        lactose_intolerant=True,
        goal=Goal.WEIGHT_LOSS,
    )
    for name, value in overrides.items():
        setattr(data, name, value)
    return data


@dataclass
class FakePlanClient(PlanClient):
    """Fake plan client returning a fixed payload or raising an error."""

    payload: object = field(default_factory=plan_payload)
    error: Exception | None = None
    delay_seconds: float = 0.0
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.calls.append(
            {
                "model": model,
                "reasoning_effort": reasoning_effort,
                "store": store,
                "schema": schema,
                "prompt": prompt,
            }
        )
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.payload  # type: ignore[return-value]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        environment="test",
    )


@pytest.fixture
def plan_client() -> FakePlanClient:
    return FakePlanClient()


@pytest.fixture
def generation_service(
    settings: Settings, plan_client: FakePlanClient
) -> PlanGenerationService:
    return PlanGenerationService(
        client=plan_client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
        timeout_seconds=settings.generation_timeout_seconds,
    )


@pytest.fixture
def wizard(generation_service: PlanGenerationService) -> IntakeWizard:
    return IntakeWizard(generation_service=generation_service)


@pytest.fixture
def container(
    settings: Settings,
    generation_service: PlanGenerationService,
    wizard: IntakeWizard,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        generation_service=generation_service,
        wizard=wizard,
        close_resources=close_resources,
    )
