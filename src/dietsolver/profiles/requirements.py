"""Daily nutrient requirement derivation.

Starts from USDA adult guidelines and adjusts them for body metrics,
activity, and (when present) lab markers. The optimizer only sees the
resulting requirement map; any mapping of nutrient key to daily value
works in its place.

Calorie needs use the Mifflin-St Jeor equation for BMR times an activity
multiplier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml

from dietsolver.data.nutrients import NUTRIENT_KEYS
from dietsolver.errors import InvalidRequirementError


class Sex(Enum):
    """Biological sex for BMR calculation and guideline selection."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level multipliers for calorie needs."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    ACTIVE = "active"                # Hard exercise 6-7 days/week
    EXTRA_ACTIVE = "extra_active"    # Very hard exercise, physical job


ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

# Adult daily values: key -> (amount, unit)
USDA_GUIDELINES: dict[Sex, dict[str, tuple[float, str]]] = {
    Sex.MALE: {
        "calories": (2500, "kcal"),
        "protein": (56, "g"),
        "carbs": (300, "g"),
        "fats": (65, "g"),
        "fiber": (38, "g"),
        "vitamin_a": (900, "mcg"),
        "vitamin_c": (90, "mg"),
        "vitamin_d": (20, "mcg"),
        "vitamin_e": (15, "mg"),
        "vitamin_k": (120, "mcg"),
        "thiamin": (1.2, "mg"),
        "riboflavin": (1.3, "mg"),
        "niacin": (16, "mg"),
        "vitamin_b6": (1.3, "mg"),
        "folate": (400, "mcg"),
        "vitamin_b12": (2.4, "mcg"),
        "calcium": (1000, "mg"),
        "iron": (8, "mg"),
        "magnesium": (400, "mg"),
        "phosphorus": (700, "mg"),
        "potassium": (3400, "mg"),
        "sodium": (2300, "mg"),
        "zinc": (11, "mg"),
        "copper": (0.9, "mg"),
        "manganese": (2.3, "mg"),
        "selenium": (55, "mcg"),
    },
    Sex.FEMALE: {
        "calories": (2000, "kcal"),
        "protein": (46, "g"),
        "carbs": (250, "g"),
        "fats": (50, "g"),
        "fiber": (25, "g"),
        "vitamin_a": (700, "mcg"),
        "vitamin_c": (75, "mg"),
        "vitamin_d": (20, "mcg"),
        "vitamin_e": (15, "mg"),
        "vitamin_k": (90, "mcg"),
        "thiamin": (1.1, "mg"),
        "riboflavin": (1.1, "mg"),
        "niacin": (14, "mg"),
        "vitamin_b6": (1.3, "mg"),
        "folate": (400, "mcg"),
        "vitamin_b12": (2.4, "mcg"),
        "calcium": (1000, "mg"),
        "iron": (18, "mg"),
        "magnesium": (310, "mg"),
        "phosphorus": (700, "mg"),
        "potassium": (2600, "mg"),
        "sodium": (2300, "mg"),
        "zinc": (8, "mg"),
        "copper": (0.9, "mg"),
        "manganese": (1.8, "mg"),
        "selenium": (55, "mcg"),
    },
}


@dataclass
class HealthProfile:
    """Body metrics and optional lab markers used to derive requirements."""

    sex: Sex = Sex.MALE
    age: int = 30
    weight_kg: float = 70.0
    height_cm: float = 175.0
    activity_level: ActivityLevel = ActivityLevel.MODERATE

    # Blood markers (None = not measured)
    glucose: Optional[float] = None  # mg/dL
    hemoglobin: Optional[float] = None  # g/dL
    vitamin_d: Optional[float] = None  # ng/mL
    vitamin_b12: Optional[float] = None  # pg/mL
    ferritin: Optional[float] = None  # ng/mL

    # Hair analysis (None = not measured)
    mercury: Optional[float] = None  # ppm
    lead: Optional[float] = None  # ppm

    strength_training: bool = False
    high_stress: bool = False
    low_libido: bool = False


def calculate_bmr(sex: Sex, age: int, weight_kg: float, height_cm: float) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Args:
        sex: Biological sex
        age: Age in years
        weight_kg: Weight in kilograms
        height_cm: Height in centimeters

    Returns:
        BMR in calories per day
    """
    if sex == Sex.MALE:
        return (10 * weight_kg) + (6.25 * height_cm) - (5 * age) + 5
    return (10 * weight_kg) + (6.25 * height_cm) - (5 * age) - 161


def calculate_calorie_requirement(profile: HealthProfile) -> float:
    """Daily calorie need: BMR times the activity multiplier."""
    bmr = calculate_bmr(profile.sex, profile.age, profile.weight_kg, profile.height_cm)
    return bmr * ACTIVITY_MULTIPLIERS[profile.activity_level]


def base_requirements(sex: Sex) -> dict[str, float]:
    """Unadjusted USDA daily values for ``sex``."""
    return {key: amount for key, (amount, _) in USDA_GUIDELINES[sex].items()}


def derive_requirements(profile: HealthProfile) -> dict[str, float]:
    """Derive daily nutrient targets for a profile.

    Args:
        profile: Body metrics, activity level and markers

    Returns:
        Dict mapping nutrient key to daily target
    """
    adjusted = base_requirements(profile.sex)

    # Lab markers
    if profile.glucose is not None and profile.glucose > 140:
        adjusted["carbs"] *= 0.7
    if profile.hemoglobin is not None and profile.hemoglobin < 12:
        adjusted["iron"] *= 1.5
    if profile.vitamin_d is not None and profile.vitamin_d < 30:
        adjusted["vitamin_d"] *= 1.5
    if profile.vitamin_b12 is not None and profile.vitamin_b12 < 200:
        adjusted["vitamin_b12"] *= 2.0
    if profile.ferritin is not None and profile.ferritin < 15:
        adjusted["iron"] *= 1.8

    if profile.mercury is not None and profile.mercury > 1.0:
        adjusted["selenium"] *= 1.3
    if profile.lead is not None and profile.lead > 1.0:
        adjusted["calcium"] *= 1.2

    adjusted["calories"] = calculate_calorie_requirement(profile)

    if profile.strength_training:
        adjusted["protein"] *= 1.3

    if profile.high_stress:
        adjusted["magnesium"] *= 1.2
        adjusted["thiamin"] *= 1.2

    if profile.low_libido:
        adjusted["zinc"] *= 1.2
        adjusted["vitamin_d"] *= 1.2

    return adjusted


def validate_requirements(data: dict[str, Any]) -> dict[str, float]:
    """Check keys and values of a requirement mapping.

    Raises:
        InvalidRequirementError: On unknown keys or negative/non-numeric values
    """
    validated: dict[str, float] = {}
    for key, value in data.items():
        if key not in NUTRIENT_KEYS:
            raise InvalidRequirementError(f"Unknown nutrient key: {key}")
        try:
            amount = float(value)
        except (TypeError, ValueError):
            raise InvalidRequirementError(f"Invalid value for {key}: {value!r}") from None
        if amount < 0:
            raise InvalidRequirementError(f"Requirement for {key} must be non-negative")
        validated[key] = amount
    return validated


def load_requirements(path: Path) -> dict[str, float]:
    """Load a requirement map from a YAML file of ``key: value`` pairs.

    A top-level ``requirements`` mapping is also accepted.
    """
    if not path.exists():
        raise InvalidRequirementError(f"Requirements file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidRequirementError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("requirements"), dict):
        data = data["requirements"]
    if not isinstance(data, dict):
        raise InvalidRequirementError(f"{path}: expected a mapping of nutrient -> value")

    return validate_requirements(data)
