"""Plan generation service backed by a structured-output LLM."""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from keto_planner.domain.plan import KetoPlan
from keto_planner.services.plan_request import PlanRequest

_logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a plan could not be generated or validated."""


class PlanClient(Protocol):
    """Interface for LLM plan generation."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return the decoded JSON document produced for the prompt."""


@dataclass
class PlanGenerationService:
    """Service that runs one generation call and validates the plan."""

    client: PlanClient
    model: str
    reasoning_effort: str | None
    store: bool
    timeout_seconds: float | None = None

    async def generate(self, request: PlanRequest) -> KetoPlan:
        """Request a plan and return it only if the whole document is valid."""
        try:
            raw = await asyncio.wait_for(
                self.client.generate(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    schema=request.schema,
                    prompt=request.instruction,
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as exc:
            raise GenerationError(
                f"Plan generation timed out after {self.timeout_seconds}s"
            ) from exc
        except json.JSONDecodeError as exc:
            raise GenerationError("Plan response is not valid JSON") from exc
        except Exception as exc:
            raise GenerationError(f"Plan generation failed: {exc}") from exc

        if not isinstance(raw, dict):
            raise GenerationError("Plan response is not a JSON object")
        try:
            plan = KetoPlan.model_validate(raw)
        except ValidationError as exc:
            _logger.warning(
                "Plan response failed validation: %s errors",
                exc.error_count(),
                extra={"keys": sorted(raw)},
            )
            raise GenerationError(f"Plan response is incomplete: {exc}") from exc

        _logger.info(
            "Plan generated: days=%s tips=%s swaps=%s",
            len(plan.weekly_menu),
            len(plan.tips),
            len(plan.swaps),
        )
        return plan
