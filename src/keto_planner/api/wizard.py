"""Wizard endpoints driven by an external renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from keto_planner.api.models import IntakeState, IntakeUpdate, ViewState, WizardState
from keto_planner.domain.intake import MedicalCondition  # noqa: TC001
from keto_planner.services.wizard import IntakeWizard  # noqa: TC001

if TYPE_CHECKING:
    from keto_planner.containers import AppContainer

router = APIRouter(prefix="/wizard", tags=["wizard"])


def _get_wizard(request: Request) -> IntakeWizard:
    container: AppContainer = request.app.state.container
    return container.wizard


def _require_editable(wizard: IntakeWizard = Depends(_get_wizard)) -> IntakeWizard:
    """Reject intake edits once generation has started."""
    if not wizard.is_editable:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Intake can only be edited before generation.",
        )
    return wizard


def _require_results(wizard: IntakeWizard = Depends(_get_wizard)) -> IntakeWizard:
    """Reject view actions when no plan is being browsed."""
    if wizard.view is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No plan to browse.",
        )
    return wizard


@router.get("")
async def get_state(wizard: IntakeWizard = Depends(_get_wizard)) -> WizardState:
    """Return the current wizard state."""
    return _to_state(wizard)


@router.patch("/intake")
async def update_intake(
    update: IntakeUpdate, wizard: IntakeWizard = Depends(_require_editable)
) -> WizardState:
    """Apply field edits to the intake answers."""
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    meals_per_day = changes.pop("meals_per_day", None)
    authorization = changes.pop("has_medical_authorization", None)
    for name, value in changes.items():
        setattr(wizard.intake, name, value)
    if meals_per_day is not None:
        wizard.intake.set_meals_per_day(meals_per_day)
    if authorization is not None:
        wizard.intake.set_medical_authorization(authorization)
    return _to_state(wizard)


@router.post("/medical-conditions/{condition}")
async def toggle_medical_condition(
    condition: MedicalCondition, wizard: IntakeWizard = Depends(_require_editable)
) -> WizardState:
    """Select or deselect one medical condition."""
    wizard.intake.toggle_medical_condition(condition)
    return _to_state(wizard)


@router.post("/no-medical-conditions")
async def toggle_no_medical_conditions(
    wizard: IntakeWizard = Depends(_require_editable),
) -> WizardState:
    """Toggle the "none of the above" screening answer."""
    wizard.intake.toggle_no_medical_conditions()
    return _to_state(wizard)


@router.post("/next")
async def next_step(wizard: IntakeWizard = Depends(_get_wizard)) -> WizardState:
    """Move forward; from Preferences this generates the plan."""
    await wizard.advance()
    return _to_state(wizard)


@router.post("/back")
async def previous_step(wizard: IntakeWizard = Depends(_get_wizard)) -> WizardState:
    """Move back one intake step."""
    wizard.back()
    return _to_state(wizard)


@router.post("/restart")
async def restart(wizard: IntakeWizard = Depends(_get_wizard)) -> WizardState:
    """Start over from the medical screening."""
    wizard.restart()
    return _to_state(wizard)


@router.post("/generation/cancel")
async def cancel_generation(
    wizard: IntakeWizard = Depends(_get_wizard),
) -> WizardState:
    """Abort an outstanding plan generation."""
    wizard.cancel_generation()
    return _to_state(wizard)


@router.post("/view/day/{day}")
async def select_day(
    day: int, wizard: IntakeWizard = Depends(_require_results)
) -> WizardState:
    """Show another day of the plan."""
    wizard.view.select_day(day)
    return _to_state(wizard)


@router.post("/view/meals/{index}")
async def toggle_meal(
    index: int, wizard: IntakeWizard = Depends(_require_results)
) -> WizardState:
    """Expand or collapse one meal of the active day."""
    wizard.view.toggle_meal(index)
    return _to_state(wizard)


def _to_state(wizard: IntakeWizard) -> WizardState:
    view = None
    if wizard.view is not None:
        view = ViewState(
            active_day=wizard.view.active_day,
            expanded_meal_index=wizard.view.expanded_meal_index,
            active_day_plan=wizard.view.active_day_plan(),
        )
    return WizardState(
        step=int(wizard.step),
        step_name=wizard.step.name,
        progress=wizard.progress,
        can_advance=wizard.can_advance(),
        notice=wizard.notice,
        intake=IntakeState.model_validate(wizard.intake),
        plan=wizard.plan,
        view=view,
    )
