"""Nutrient content vectors and nutrient key lookup tables.

All food profiles are stored per 100g. Requirement maps are keyed by the
short nutrient keys below (``carbs``, ``vitamin_a``, ...), which map onto
``NutrientVector`` attribute names.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Iterable

import numpy as np

# (requirement key, attribute, display label, unit)
NUTRIENT_FIELDS: tuple[tuple[str, str, str, str], ...] = (
    # Macros
    ("calories", "calories", "Calories", "kcal"),
    ("protein", "protein", "Protein", "g"),
    ("carbs", "carbohydrates", "Carbohydrates", "g"),
    ("fats", "fats", "Fats", "g"),
    ("fiber", "fiber", "Fiber", "g"),
    # Vitamins
    ("vitamin_a", "vitamin_a", "Vitamin A", "mcg"),
    ("vitamin_c", "vitamin_c", "Vitamin C", "mg"),
    ("vitamin_d", "vitamin_d", "Vitamin D", "mcg"),
    ("vitamin_e", "vitamin_e", "Vitamin E", "mg"),
    ("vitamin_k", "vitamin_k", "Vitamin K", "mcg"),
    ("thiamin", "thiamin", "Thiamin (B1)", "mg"),
    ("riboflavin", "riboflavin", "Riboflavin (B2)", "mg"),
    ("niacin", "niacin", "Niacin (B3)", "mg"),
    ("vitamin_b6", "vitamin_b6", "Vitamin B6", "mg"),
    ("folate", "folate", "Folate (B9)", "mcg"),
    ("vitamin_b12", "vitamin_b12", "Vitamin B12", "mcg"),
    # Minerals
    ("calcium", "calcium", "Calcium", "mg"),
    ("iron", "iron", "Iron", "mg"),
    ("magnesium", "magnesium", "Magnesium", "mg"),
    ("phosphorus", "phosphorus", "Phosphorus", "mg"),
    ("potassium", "potassium", "Potassium", "mg"),
    ("sodium", "sodium", "Sodium", "mg"),
    ("zinc", "zinc", "Zinc", "mg"),
    ("copper", "copper", "Copper", "mg"),
    ("manganese", "manganese", "Manganese", "mg"),
    ("selenium", "selenium", "Selenium", "mcg"),
    # Other micronutrients
    ("omega3", "omega3", "Omega-3", "g"),
    ("omega6", "omega6", "Omega-6", "g"),
    ("choline", "choline", "Choline", "mg"),
    ("betaine", "betaine", "Betaine", "mg"),
)

NUTRIENT_KEYS: tuple[str, ...] = tuple(row[0] for row in NUTRIENT_FIELDS)

# Requirement key -> NutrientVector attribute
KEY_TO_ATTRIBUTE: dict[str, str] = {row[0]: row[1] for row in NUTRIENT_FIELDS}

NUTRIENT_LABELS: dict[str, str] = {row[0]: row[2] for row in NUTRIENT_FIELDS}
NUTRIENT_UNITS: dict[str, str] = {row[0]: row[3] for row in NUTRIENT_FIELDS}


def get_attribute(key: str) -> str:
    """Translate a requirement key (or attribute name) to an attribute name.

    Raises:
        KeyError: If the key is not a known nutrient
    """
    if key in KEY_TO_ATTRIBUTE:
        return KEY_TO_ATTRIBUTE[key]
    if key in KEY_TO_ATTRIBUTE.values():
        return key
    raise KeyError(f"Unknown nutrient: {key}")


@dataclass(frozen=True)
class NutrientVector:
    """Amounts of every tracked nutrient.

    For catalog foods the amounts are per 100g. Instances are immutable;
    ``+`` and ``scaled`` always return a new vector.
    """

    calories: float = 0.0
    protein: float = 0.0  # g
    carbohydrates: float = 0.0  # g
    fats: float = 0.0  # g
    fiber: float = 0.0  # g

    vitamin_a: float = 0.0  # mcg
    vitamin_c: float = 0.0  # mg
    vitamin_d: float = 0.0  # mcg
    vitamin_e: float = 0.0  # mg
    vitamin_k: float = 0.0  # mcg
    thiamin: float = 0.0  # mg
    riboflavin: float = 0.0  # mg
    niacin: float = 0.0  # mg
    vitamin_b6: float = 0.0  # mg
    folate: float = 0.0  # mcg
    vitamin_b12: float = 0.0  # mcg

    calcium: float = 0.0  # mg
    iron: float = 0.0  # mg
    magnesium: float = 0.0  # mg
    phosphorus: float = 0.0  # mg
    potassium: float = 0.0  # mg
    sodium: float = 0.0  # mg
    zinc: float = 0.0  # mg
    copper: float = 0.0  # mg
    manganese: float = 0.0  # mg
    selenium: float = 0.0  # mcg

    omega3: float = 0.0  # g
    omega6: float = 0.0  # g
    choline: float = 0.0  # mg
    betaine: float = 0.0  # mg

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"Nutrient '{f.name}' must be non-negative, got {value}")

    @classmethod
    def zero(cls) -> NutrientVector:
        return cls()

    @classmethod
    def from_array(cls, values: np.ndarray) -> NutrientVector:
        """Build a vector from an array ordered like NUTRIENT_FIELDS."""
        if len(values) != len(NUTRIENT_FIELDS):
            raise ValueError(
                f"Expected {len(NUTRIENT_FIELDS)} values, got {len(values)}"
            )
        return cls(**{
            attr: float(value)
            for (_, attr, _, _), value in zip(NUTRIENT_FIELDS, values)
        })

    def to_array(self) -> np.ndarray:
        return np.array(
            [getattr(self, attr) for _, attr, _, _ in NUTRIENT_FIELDS],
            dtype=np.float64,
        )

    def to_dict(self) -> dict[str, float]:
        """Return amounts keyed by requirement key."""
        return {key: getattr(self, attr) for key, attr, _, _ in NUTRIENT_FIELDS}

    def get(self, key: str) -> float:
        """Amount for a requirement key such as ``carbs`` or ``vitamin_b12``."""
        return getattr(self, get_attribute(key))

    def scaled(self, grams: float) -> NutrientVector:
        """Scale a per-100g profile to the given gram amount."""
        factor = grams / 100.0
        return NutrientVector(**{k: v * factor for k, v in asdict(self).items()})

    def __add__(self, other: NutrientVector) -> NutrientVector:
        if not isinstance(other, NutrientVector):
            return NotImplemented
        return NutrientVector(**{
            f.name: getattr(self, f.name) + getattr(other, f.name)
            for f in fields(self)
        })


def add(a: NutrientVector, b: NutrientVector) -> NutrientVector:
    """Component-wise sum of two vectors."""
    return a + b


def scale(vector: NutrientVector, grams: float) -> NutrientVector:
    """Scale a per-100g vector to ``grams``."""
    return vector.scaled(grams)


def sum_vectors(vectors: Iterable[NutrientVector]) -> NutrientVector:
    total = NutrientVector.zero()
    for vector in vectors:
        total = total + vector
    return total
