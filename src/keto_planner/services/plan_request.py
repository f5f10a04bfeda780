"""Build generation requests for weekly ketogenic plans."""

from collections.abc import Callable
from dataclasses import dataclass

from keto_planner.domain.intake import ActivityLevel, DietType, Goal, IntakeData
from keto_planner.domain.plan import MIN_TIPS, PLAN_DAYS


@dataclass(frozen=True)
class PlanRequest:
    """Instruction and output schema sent to the generation service."""

    instruction: str
    schema: dict[str, object]
    meals_per_day: int


@dataclass(frozen=True)
class EmphasisRule:
    """Tip focus added to the instruction when the profile matches."""

    name: str
    applies: Callable[[IntakeData], bool]
    fragment: str


EMPHASIS_RULES: tuple[EmphasisRule, ...] = (
    EmphasisRule(
        name="sedentary",
        applies=lambda data: data.activity_level == ActivityLevel.SEDENTARY,
        fragment=(
            'Atividade "Sedentário": foque em hidratação, controle de eletrólitos '
            "e incentivo a pequenas movimentações diárias."
        ),
    ),
    EmphasisRule(
        name="active",
        applies=lambda data: (
            data.activity_level in {ActivityLevel.MODERATE, ActivityLevel.INTENSE}
        ),
        fragment=(
            'Atividade "Moderado" ou "Intenso": foque em recuperação muscular, '
            "timing de gorduras e reposição de sódio/potássio."
        ),
    ),
    EmphasisRule(
        name="plant_based",
        applies=lambda data: data.diet_type in {DietType.VEGAN, DietType.VEGETARIAN},
        fragment=(
            'Dieta "Vegano" ou "Vegetariano": foque em fontes de proteína vegetal '
            "compatíveis com keto (tofu, tempeh, sementes) e na suplementação "
            "necessária (B12)."
        ),
    ),
    EmphasisRule(
        name="lactose_free",
        applies=lambda data: data.lactose_intolerant,
        fragment=(
            "Lactose restrita: sugira substitutos de laticínios como leite de coco, "
            "amêndoas, gorduras sem lactose e queijos veganos gordurosos."
        ),
    ),
    EmphasisRule(
        name="weight_loss",
        applies=lambda data: data.goal == Goal.WEIGHT_LOSS,
        fragment=(
            'Objetivo "Perda de Peso": foque em saciedade, controle de lanches e '
            'manejo da "gripe cetogênica".'
        ),
    ),
    EmphasisRule(
        name="muscle_gain",
        applies=lambda data: data.goal == Goal.MUSCLE_GAIN,
        fragment=(
            'Objetivo "Ganho de Massa": foque em excedente calórico através de '
            "gorduras boas e treinos de força."
        ),
    ),
)


def matching_rules(data: IntakeData) -> list[EmphasisRule]:
    """Return every emphasis rule whose predicate holds, in table order."""
    return [rule for rule in EMPHASIS_RULES if rule.applies(data)]


def build_request(data: IntakeData) -> PlanRequest:
    """Render the plan instruction and schema for the given answers."""
    return PlanRequest(
        instruction=build_instruction(data),
        schema=build_plan_schema(data.meals_per_day),
        meals_per_day=data.meals_per_day,
    )


def build_instruction(data: IntakeData) -> str:
    """Render the Portuguese instruction embedding every intake answer."""
    lines = [
        f"Gere um PLANO CETOGÊNICO PROFISSIONAL DE {PLAN_DAYS} DIAS "
        f"(D1 a D{PLAN_DAYS}) em Português para o usuário:",
        f"Nome: {data.name.strip()}, Gênero: {data.gender.value}, "
        f"Idade: {data.age.strip()}, Peso: {data.weight.strip()}kg, "
        f"Altura: {data.height.strip()}cm.",
        f"Triagem médica: {_format_screening(data)}",
        f"Colesterol: {data.cholesterol_level.value}, "
        f"Histórico cardíaco na família: {data.family_heart_history.value}.",
        f"Dieta: {data.diet_type.value}, Lactose: {_format_lactose(data)}, "
        f"Refeições: {data.meals_per_day}.",
        f"Atividade: {data.activity_level.value}, "
        f"Rotina: {data.daily_routine.value}, Objetivo: {data.goal.value}.",
        "",
        'INSTRUÇÕES CRÍTICAS PARA DICAS PERSONALIZADAS (campo "tips"):',
    ]
    rules = matching_rules(data)
    if rules:
        lines.extend(f"- {rule.fragment}" for rule in rules)
    else:
        lines.append("- Foque em adesão à dieta e qualidade das gorduras.")
    lines.extend(
        [
            "",
            f"Cada dia deve ter exatamente {data.meals_per_day} refeições, "
            "cada uma com nome, descrição e receita.",
            f"Retorne APENAS JSON no formato exato com macros diários, "
            f"{PLAN_DAYS} dias de cardápio numerados de 1 a {PLAN_DAYS}, "
            'substituições sugeridas ("swaps"), uma estimativa de resultados '
            f'("estimative") e o array "tips" com no mínimo {MIN_TIPS} dicas '
            "altamente personalizadas para o perfil acima.",
        ]
    )
    return "\n".join(lines)


def build_plan_schema(meals_per_day: int) -> dict[str, object]:
    """Return the strict JSON schema for a weekly plan response."""
    meal = _object_schema(
        {
            "name": {"type": "string"},
            "description": {"type": "string"},
            "recipe": {"type": "string"},
        }
    )
    day_plan = _object_schema(
        {
            "day": {"type": "integer", "minimum": 1, "maximum": PLAN_DAYS},
            "macros": _macros_schema(),
            "meals": {
                "type": "array",
                "items": meal,
                "minItems": meals_per_day,
                "maxItems": meals_per_day,
            },
        }
    )
    swap = _object_schema(
        {
            "item": {"type": "string"},
            "reason": {"type": "string"},
        }
    )
    return _object_schema(
        {
            "dailyMacrosAverage": _macros_schema(),
            "weeklyMenu": {
                "type": "array",
                "items": day_plan,
                "minItems": PLAN_DAYS,
                "maxItems": PLAN_DAYS,
            },
            "swaps": {"type": "array", "items": swap},
            "tips": {
                "type": "array",
                "items": {"type": "string"},
                "minItems": MIN_TIPS,
            },
            "estimative": {"type": "string"},
        }
    )


def _macros_schema() -> dict[str, object]:
    return _object_schema(
        {
            key: {"type": "number", "minimum": 0}
            for key in ("calories", "protein", "fats", "carbs")
        }
    )


def _object_schema(properties: dict[str, object]) -> dict[str, object]:
    """Wrap properties in a strict object schema requiring every key."""
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


def _format_screening(data: IntakeData) -> str:
    if data.no_medical_conditions or not data.medical_conditions:
        return "Nenhuma condição médica relatada."
    conditions = ", ".join(condition.value for condition in data.medical_conditions)
    authorization = (
        "com autorização de médico ou nutricionista"
        if data.has_medical_authorization
        else "sem autorização profissional"
    )
    return f"{conditions} ({authorization})."


def _format_lactose(data: IntakeData) -> str:
    if data.lactose_intolerant:
        return "Não consome laticínios"
    return "Consome laticínios"
