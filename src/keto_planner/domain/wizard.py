"""Wizard step definitions."""

import enum


class WizardStep(enum.IntEnum):
    """Screens of the intake flow, in display order."""

    MEDICAL_SCREENING = 0
    BIOMETRICS = 1
    HEALTH_DETAILS = 2
    ACTIVITY = 3
    PREFERENCES = 4
    GENERATING = 5
    RESULTS = 6


INTAKE_STEPS = frozenset(
    {
        WizardStep.MEDICAL_SCREENING,
        WizardStep.BIOMETRICS,
        WizardStep.HEALTH_DETAILS,
        WizardStep.ACTIVITY,
        WizardStep.PREFERENCES,
    }
)
