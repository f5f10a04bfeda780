"""Intake wizard state machine."""

import asyncio
import logging
from dataclasses import dataclass, field

from keto_planner.domain.intake import IntakeData
from keto_planner.domain.plan import KetoPlan
from keto_planner.domain.view import ResultView
from keto_planner.domain.wizard import INTAKE_STEPS, WizardStep
from keto_planner.services.gating import (
    is_biometrics_complete,
    is_screening_satisfied,
)
from keto_planner.services.generation import GenerationError, PlanGenerationService
from keto_planner.services.plan_request import build_request

_logger = logging.getLogger(__name__)

GENERATION_FAILED_NOTICE = "Erro ao gerar o plano. Tente novamente."
GENERATION_CANCELLED_NOTICE = "Geração do plano cancelada."
TOTAL_INTAKE_PAGES = 4


@dataclass
class IntakeWizard:
    """Walks the user from medical screening to a generated plan.

    Steps 0-4 are a linear walk gated by validity predicates. Moving forward
    from Preferences runs a single generation call; success lands on Results,
    failure returns to Preferences with a notice and no plan.
    """

    generation_service: PlanGenerationService
    debug_errors: bool = False
    intake: IntakeData = field(default_factory=IntakeData)
    step: WizardStep = WizardStep.MEDICAL_SCREENING
    plan: KetoPlan | None = None
    view: ResultView | None = None
    notice: str | None = None
    _pending: "asyncio.Task[KetoPlan] | None" = field(
        default=None, init=False, repr=False
    )
    _abort_requested: bool = field(default=False, init=False, repr=False)

    @property
    def progress(self) -> int | None:
        """Return the 1-based page number shown for steps 1-4."""
        if WizardStep.BIOMETRICS <= self.step <= WizardStep.PREFERENCES:
            return int(self.step)
        return None

    @property
    def is_editable(self) -> bool:
        """Return true while intake answers may still change."""
        return self.step in INTAKE_STEPS

    def can_advance(self) -> bool:
        """Return whether the forward action is enabled on the current step."""
        if self.step == WizardStep.MEDICAL_SCREENING:
            return is_screening_satisfied(self.intake)
        if self.step == WizardStep.BIOMETRICS:
            return is_biometrics_complete(self.intake)
        return self.step in {
            WizardStep.HEALTH_DETAILS,
            WizardStep.ACTIVITY,
            WizardStep.PREFERENCES,
        }

    async def advance(self) -> WizardStep:
        """Move forward one step, generating the plan from Preferences."""
        if not self.can_advance():
            return self.step
        if self.step == WizardStep.PREFERENCES:
            await self._generate()
            return self.step
        self.notice = None
        self.step = WizardStep(self.step + 1)
        return self.step

    def back(self) -> WizardStep:
        """Return to the previous intake step, if there is one."""
        if WizardStep.BIOMETRICS <= self.step <= WizardStep.PREFERENCES:
            self.notice = None
            self.step = WizardStep(self.step - 1)
        return self.step

    def restart(self) -> WizardStep:
        """Discard answers and plan and start over from the screening."""
        if self.step != WizardStep.RESULTS:
            return self.step
        self.intake = IntakeData()
        self.plan = None
        self.view = None
        self.notice = None
        self.step = WizardStep.MEDICAL_SCREENING
        return self.step

    def cancel_generation(self) -> bool:
        """Abort the outstanding generation call; return whether one was."""
        if self._pending is None or self._pending.done():
            return False
        self._abort_requested = True
        self._pending.cancel()
        return True

    async def _generate(self) -> None:
        request = build_request(self.intake)
        self.plan = None
        self.view = None
        self.notice = None
        self.step = WizardStep.GENERATING
        self._abort_requested = False
        self._pending = asyncio.ensure_future(
            self.generation_service.generate(request)
        )
        try:
            plan = await self._pending
        except asyncio.CancelledError:
            self._return_to_preferences(GENERATION_CANCELLED_NOTICE)
            if not self._abort_requested:
                raise
            _logger.info("Plan generation cancelled by user")
            return
        except GenerationError as exc:
            _logger.exception(
                "Plan generation failed",
                extra={"meals_per_day": request.meals_per_day},
            )
            self._return_to_preferences(self._failure_notice(exc))
            return
        finally:
            self._pending = None

        self.plan = plan
        self.view = ResultView(plan=plan)
        self.step = WizardStep.RESULTS

    def _return_to_preferences(self, notice: str) -> None:
        self.plan = None
        self.view = None
        self.notice = notice
        self.step = WizardStep.PREFERENCES

    def _failure_notice(self, exc: Exception) -> str:
        """Return the user-facing failure notice, with debug info if enabled."""
        if self.debug_errors:
            return f"{GENERATION_FAILED_NOTICE} (debug: {type(exc).__name__}: {exc})"
        return GENERATION_FAILED_NOTICE
