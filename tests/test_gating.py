"""Tests for wizard gating predicates."""

import itertools

import pytest

from keto_planner.domain.intake import IntakeData, MedicalCondition
from keto_planner.services.gating import is_biometrics_complete, is_screening_satisfied

_COMBINATIONS = [
    (conditions, authorized, none_selected)
    for conditions, authorized, none_selected in itertools.product(
        ([], [MedicalCondition.TYPE_1_DIABETES]), (False, True), (False, True)
    )
    if not (conditions and none_selected)
]


@pytest.mark.parametrize(("conditions", "authorized", "none_selected"), _COMBINATIONS)
def test_screening_truth_table(
    conditions: list[MedicalCondition], authorized: bool, none_selected: bool
) -> None:
    data = IntakeData(
        medical_conditions=list(conditions),
        has_medical_authorization=authorized,
        no_medical_conditions=none_selected,
    )

    expected = (none_selected and not conditions) or (bool(conditions) and authorized)

    assert is_screening_satisfied(data) is expected


def test_screening_blocks_condition_without_authorization() -> None:
    data = IntakeData()
    data.toggle_medical_condition("Diabetes Tipo 1")

    assert is_screening_satisfied(data) is False

    data.set_medical_authorization(True)
    assert is_screening_satisfied(data) is True


def test_screening_reevaluated_after_each_edit() -> None:
    data = IntakeData()
    data.toggle_no_medical_conditions()
    assert is_screening_satisfied(data) is True

    data.toggle_medical_condition(MedicalCondition.PANCREATITIS)
    assert is_screening_satisfied(data) is False


def test_biometrics_complete() -> None:
    data = IntakeData(name="Ana", age="30", weight="65,5", height="165")

    assert is_biometrics_complete(data) is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "   "},
        {"age": ""},
        {"weight": ""},
        {"height": ""},
        {"age": "trinta"},
        {"weight": "0"},
        {"height": "-170"},
        {"age": "inf"},
        {"weight": "1e400"},
        {"height": "nan"},
    ],
)
def test_biometrics_incomplete(overrides: dict[str, str]) -> None:
    values = {"name": "Ana", "age": "30", "weight": "65", "height": "165"}
    values.update(overrides)

    assert is_biometrics_complete(IntakeData(**values)) is False


def test_screening_requires_fresh_authorization_for_new_condition() -> None:
    data = IntakeData()
    data.toggle_medical_condition(MedicalCondition.TYPE_1_DIABETES)
    data.set_medical_authorization(True)
    data.toggle_medical_condition(MedicalCondition.TYPE_1_DIABETES)

    data.toggle_medical_condition(MedicalCondition.PANCREATITIS)

    assert is_screening_satisfied(data) is False
