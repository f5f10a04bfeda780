"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from keto_planner.adapters.openai_plan_client import OpenAIPlanClient
from keto_planner.config import Settings
from keto_planner.services.generation import PlanGenerationService
from keto_planner.services.wizard import IntakeWizard


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    generation_service: PlanGenerationService
    wizard: IntakeWizard
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIPlanClient.create(resolved_settings.openai_api_key)
    generation_service = PlanGenerationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        timeout_seconds=resolved_settings.generation_timeout_seconds,
    )
    wizard = IntakeWizard(
        generation_service=generation_service,
        debug_errors=resolved_settings.environment == "local",
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        generation_service=generation_service,
        wizard=wizard,
        close_resources=close_resources,
    )
