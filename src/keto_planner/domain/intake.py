"""Domain models for the intake questionnaire."""

import enum
from dataclasses import dataclass, field


class Gender(str, enum.Enum):
    """Gender options offered in the biometrics step."""

    MALE = "Masculino"
    FEMALE = "Feminino"
    OTHER = "Outro"


class MedicalCondition(str, enum.Enum):
    """Conditions that make a ketogenic protocol unsafe without supervision."""

    TYPE_1_DIABETES = "Diabetes Tipo 1"
    KIDNEY_DISEASE = "Doença Renal"
    LIVER_FAILURE = "Insuficiência Hepática"
    PANCREATITIS = "Pancreatite"
    GALLBLADDER_ISSUES = "Problemas na Vesícula Biliar"
    PREGNANT_OR_NURSING = "Gestante ou Amamentando"
    EATING_DISORDER_HISTORY = "Transtorno Alimentar Histórico"


class CholesterolLevel(str, enum.Enum):
    NORMAL = "Normal"
    MODERATE = "Moderado"
    ELEVATED = "Elevado"


class FamilyHeartHistory(str, enum.Enum):
    NO = "Não"
    YES = "Sim"
    UNKNOWN = "Não sei"


class ActivityLevel(str, enum.Enum):
    SEDENTARY = "Sedentário"
    LIGHT = "Leve"
    MODERATE = "Moderado"
    INTENSE = "Intenso"


class DailyRoutine(str, enum.Enum):
    OFFICE = "Escritório"
    STANDING = "Fico em pé"
    ACTIVE_WORK = "Trabalho Ativo"
    SHIFTS = "Turnos"


class Goal(str, enum.Enum):
    WEIGHT_LOSS = "Perda de Peso"
    MUSCLE_GAIN = "Ganho de Massa"
    MAINTENANCE = "Manutenção"
    MENTAL_FOCUS = "Foco Mental"


class DietType(str, enum.Enum):
    OMNIVORE = "Omnívoro"
    VEGETARIAN = "Vegetariano"
    VEGAN = "Vegano"


MEALS_PER_DAY_OPTIONS = (3, 4, 5)


@dataclass
class IntakeData:
    """Answers collected by the wizard.

    Medical screening fields are only changed through the toggle methods so
    that "no conditions" and a non-empty condition list never coexist.
    """

    name: str = ""
    age: str = ""
    weight: str = ""
    height: str = ""
    gender: Gender = Gender.MALE
    medical_conditions: list[MedicalCondition] = field(default_factory=list)
    no_medical_conditions: bool = False
    has_medical_authorization: bool = False
    cholesterol_level: CholesterolLevel = CholesterolLevel.NORMAL
    family_heart_history: FamilyHeartHistory = FamilyHeartHistory.NO
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    daily_routine: DailyRoutine = DailyRoutine.OFFICE
    goal: Goal = Goal.WEIGHT_LOSS
    diet_type: DietType = DietType.OMNIVORE
    lactose_intolerant: bool = False
    meals_per_day: int = 4

    def __post_init__(self) -> None:
        self.set_meals_per_day(self.meals_per_day)
        if self.medical_conditions and self.no_medical_conditions:
            raise ValueError(
                "no_medical_conditions cannot be set with medical conditions"
            )

    def toggle_medical_condition(self, condition: MedicalCondition | str) -> None:
        """Select or deselect a condition and clear the "none" answer."""
        resolved = MedicalCondition(condition)
        self.no_medical_conditions = False
        if resolved in self.medical_conditions:
            self.medical_conditions = [
                item for item in self.medical_conditions if item != resolved
            ]
        else:
            self.medical_conditions = [*self.medical_conditions, resolved]
        if not self.medical_conditions:
            self.has_medical_authorization = False

    def toggle_no_medical_conditions(self) -> None:
        """Flip the "none of the above" answer, dropping any selection."""
        self.no_medical_conditions = not self.no_medical_conditions
        self.medical_conditions = []
        self.has_medical_authorization = False

    def set_medical_authorization(self, value: bool) -> None:
        """Record professional authorization; ignored without a condition."""
        if value and not self.medical_conditions:
            return
        self.has_medical_authorization = value

    def set_meals_per_day(self, value: int) -> None:
        if value not in MEALS_PER_DAY_OPTIONS:
            raise ValueError(f"meals_per_day must be one of {MEALS_PER_DAY_OPTIONS}")
        self.meals_per_day = value
