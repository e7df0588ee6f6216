"""Penalty function for candidate portion assignments.

Score (lower is better):

    sum over macros    |actual - target| * weight
  + sum over micros    max(0, target - actual) * weight
  - 2 * gram-weighted taste score
  - 2 * gram-weighted digestion score
  + sum over foods     max(0, grams - 500) * 0.1

The score has no lower bound and can be negative.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dietsolver.data.nutrients import NutrientVector
from dietsolver.optimizer.models import PortionAssignment, RequirementMap

# Deviation in either direction is penalized
TWO_SIDED_WEIGHTS: dict[str, float] = {
    "calories": 0.1,
    "protein": 10.0,
    "carbs": 2.0,
    "fats": 5.0,
    "fiber": 5.0,
}

# Only shortfall is penalized; surplus is free
SHORTFALL_WEIGHTS: dict[str, float] = {
    # Vitamins
    "vitamin_a": 2.0,
    "vitamin_c": 2.0,
    "vitamin_d": 5.0,
    "vitamin_e": 2.0,
    "vitamin_k": 2.0,
    "thiamin": 10.0,
    "riboflavin": 10.0,
    "niacin": 5.0,
    "vitamin_b6": 10.0,
    "folate": 2.0,
    "vitamin_b12": 10.0,
    # Minerals
    "calcium": 0.5,
    "iron": 10.0,
    "magnesium": 2.0,
    "phosphorus": 1.0,
    "potassium": 0.1,
    "zinc": 10.0,
    "copper": 20.0,
    "manganese": 10.0,
    "selenium": 5.0,
}

TASTE_WEIGHT = 2.0
DIGESTION_WEIGHT = 2.0

CONCENTRATION_LIMIT_GRAMS = 500.0
CONCENTRATION_WEIGHT = 0.1

# Denominator floor (in 100g units) for the weighted averages
MIN_MASS_UNITS = 1.0


@dataclass
class ScoreBreakdown:
    """Individual components of a score."""

    nutrient_penalties: dict[str, float] = field(default_factory=dict)
    taste_reward: float = 0.0
    digestion_reward: float = 0.0
    concentration_penalty: float = 0.0

    @property
    def nutrient_penalty(self) -> float:
        return sum(self.nutrient_penalties.values())

    @property
    def total(self) -> float:
        return (
            self.nutrient_penalty
            - self.taste_reward
            - self.digestion_reward
            + self.concentration_penalty
        )


def weighted_average(assignment: PortionAssignment, attribute: str) -> float:
    """Gram-weighted mean of a food rating (``taste_score``/``digestion_score``).

    Weights are grams / 100 and the denominator is floored at 1.0, so an
    empty or near-empty assignment yields a value near 0 instead of failing.
    """
    weighted = 0.0
    for _, food, grams in assignment.items():
        weighted += getattr(food, attribute) * (grams / 100.0)
    return weighted / max(MIN_MASS_UNITS, assignment.total_grams() / 100.0)


def concentration_penalty(assignment: PortionAssignment) -> float:
    penalty = 0.0
    for _, _, grams in assignment.items():
        if grams > CONCENTRATION_LIMIT_GRAMS:
            penalty += (grams - CONCENTRATION_LIMIT_GRAMS) * CONCENTRATION_WEIGHT
    return penalty


def score_breakdown(
    nutrients: NutrientVector,
    requirements: RequirementMap,
    assignment: PortionAssignment,
) -> ScoreBreakdown:
    """Compute every score component for an assignment.

    Args:
        nutrients: Nutrient totals of ``assignment``
        requirements: Daily targets keyed by nutrient key
        assignment: Candidate portions

    Returns:
        ScoreBreakdown whose ``total`` is the score
    """
    breakdown = ScoreBreakdown()

    for key, weight in TWO_SIDED_WEIGHTS.items():
        target = requirements.get(key, 0.0)
        breakdown.nutrient_penalties[key] = abs(nutrients.get(key) - target) * weight

    for key, weight in SHORTFALL_WEIGHTS.items():
        target = requirements.get(key, 0.0)
        breakdown.nutrient_penalties[key] = max(0.0, target - nutrients.get(key)) * weight

    breakdown.taste_reward = TASTE_WEIGHT * weighted_average(assignment, "taste_score")
    breakdown.digestion_reward = DIGESTION_WEIGHT * weighted_average(assignment, "digestion_score")
    breakdown.concentration_penalty = concentration_penalty(assignment)

    return breakdown


def score(
    nutrients: NutrientVector,
    requirements: RequirementMap,
    assignment: PortionAssignment,
) -> float:
    """Scalar penalty for an assignment (lower is better)."""
    return score_breakdown(nutrients, requirements, assignment).total
