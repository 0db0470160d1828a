"""Profile, answers and derived-metrics contracts — Pydantic v2 models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from tungsten.engine.units import coerce_number


class Gender(str, Enum):
    male = "male"
    female = "female"


class UnitSystem(str, Enum):
    imperial = "imperial"
    metric = "metric"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    athlete = "athlete"


class CyclePhase(str, Enum):
    menstruation = "menstruation"
    follicular = "follicular"
    ovulation = "ovulation"
    luteal = "luteal"


class DietaryMode(str, Enum):
    cutting = "cutting"
    maintenance = "maintenance"
    bulking = "bulking"


class CardioTier(str, Enum):
    rebuild = "rebuild"
    build = "build"
    perform = "perform"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

NUMERIC_PROFILE_FIELDS = (
    "height_ft",
    "height_in",
    "height_cm",
    "weight",
    "goal_weight",
    "resting_hr",
    "hrmax_override",
    "cooper_meters",
)


class Profile(BaseModel):
    """User profile. Weights are in lb (imperial) or kg (metric)."""

    name: str = ""
    gender: Gender = Gender.male
    age: int = 30  # 12–100 is advisory; 0 keeps the BMR=0 degrade path
    unit_system: UnitSystem = UnitSystem.imperial
    height_ft: float = 5
    height_in: float = 10
    height_cm: float = 178
    weight: float = 190
    goal_weight: float = 180
    activity_level: ActivityLevel = ActivityLevel.moderate
    cycle_phase: CyclePhase = CyclePhase.follicular  # Only read when gender=female
    resting_hr: float = 60
    hrmax_override: float = 0  # 0 = auto (Tanaka)
    cooper_meters: float = 0  # 0 = no Cooper test

    model_config = {"validate_assignment": True}

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("age", mode="before")
    @classmethod
    def _age_as_int(cls, v: Any) -> int:
        return int(coerce_number(v))

    @field_validator(*NUMERIC_PROFILE_FIELDS, mode="before")
    @classmethod
    def _numeric(cls, v: Any) -> float:
        return coerce_number(v)


class FieldEdit(BaseModel):
    """A single (field → value) write from the presentation layer."""

    value: Any = None


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

class Macros(BaseModel):
    protein: int = 0
    fat: int = 0
    carbs: int = 0


class Hydration(BaseModel):
    water_ml: int = 0
    water_liters: float = 0.0
    sodium_mg: int = 0


class VO2Estimates(BaseModel):
    from_hr_ratio: float = 0.0
    from_cooper_test: float = 0.0

    def preferred(self) -> float:
        """Cooper estimate when positive, else the heart-rate-ratio estimate (0 if neither)."""
        for estimate in (self.from_cooper_test, self.from_hr_ratio):
            if estimate > 0:
                return estimate
        return 0.0


class HeartRateZone(BaseModel):
    name: str
    low_pct: float
    high_pct: float
    low_bpm: int
    high_bpm: int


class CardioPrescription(BaseModel):
    tier: CardioTier
    zone2_minutes: int
    interval_count: int


class CycleAdjustment(BaseModel):
    kcal_delta: int = 0
    water_ml_delta: int = 0
    sleep_bonus_hours: float = 0.0
    training_bias: str = "Balanced"
    micronutrients: list[str] = Field(default_factory=list)


class DerivedMetrics(BaseModel):
    """Full snapshot recomputed on every observation — never persisted."""

    height_cm: float = 0.0
    weight_kg: float = 0.0
    goal_weight_kg: float = 0.0
    total_score: int = 0

    bmr: int = 0
    tdee: int = 0
    target_calories: int = 0
    macros: Macros = Field(default_factory=Macros)
    dietary_mode: DietaryMode = DietaryMode.maintenance
    cycle: CycleAdjustment = Field(default_factory=CycleAdjustment)

    hydration: Hydration = Field(default_factory=Hydration)
    sleep_hours: float = 0.0

    hr_max: int = 0
    vo2: VO2Estimates = Field(default_factory=VO2Estimates)
    zones: list[HeartRateZone] = Field(default_factory=list)
    cardio: CardioPrescription


class Verse(BaseModel):
    reference: str
    text: str
    theme: str


class ContentSelection(BaseModel):
    day: str
    verse: Verse
    prayer: str
    prayer_bucket: str


class VO2Entry(BaseModel):
    """One fitness estimate per calendar day. Immutable once appended."""

    date: str
    value: float

    model_config = {"frozen": True}


class NutritionGuidance(BaseModel):
    protein_per_meal: int = 0
    meals_per_day: int = 3
    carbs_pre_workout: int = 0
    carbs_post_workout: int = 0
    fiber_target: int = 0
    omega3: str = "~2 g EPA+DHA/day"
    timing: list[str] = Field(default_factory=list)
    sample_meals: list[str] = Field(default_factory=list)
    food_ideas: dict[str, list[str]] = Field(default_factory=dict)


class ColdExposure(BaseModel):
    tier: CardioTier
    temperature_f: str
    duration: str
    frequency: str
    caution: str


class Guidance(BaseModel):
    micro_goals: list[str] = Field(default_factory=list)
    nutrition: NutritionGuidance = Field(default_factory=NutritionGuidance)
    cold_exposure: ColdExposure
    breathing: list[str] = Field(default_factory=list)
