"""Predicates that decide whether the wizard may move forward."""

import math

from keto_planner.domain.intake import IntakeData


def is_screening_satisfied(data: IntakeData) -> bool:
    """Return true when the medical screening allows a ketogenic plan."""
    if data.no_medical_conditions:
        return not data.medical_conditions
    return bool(data.medical_conditions) and data.has_medical_authorization


def is_biometrics_complete(data: IntakeData) -> bool:
    """Return true when name, age, weight and height are all filled in."""
    if not data.name.strip():
        return False
    return all(
        _parse_positive_number(value) is not None
        for value in (data.age, data.weight, data.height)
    )


def _parse_positive_number(text: str) -> float | None:
    """Parse a positive number from user input, accepting a decimal comma."""
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) and value > 0 else None
