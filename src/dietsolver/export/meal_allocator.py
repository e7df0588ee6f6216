"""Meal slot allocation for distributing optimized portions into meals.

Uses category and digestibility heuristics to split a solved portion
assignment into breakfast, lunch and dinner. Each meal takes only a fixed
share of a food's optimized grams; the remainder is deliberately dropped
and is not renormalized, so an assembled plan carries less than the
optimizer's totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dietsolver.data.foods import FoodCategory, FoodItem, Season
from dietsolver.data.nutrients import NUTRIENT_LABELS, NUTRIENT_UNITS, NutrientVector, sum_vectors
from dietsolver.optimizer.models import PortionAssignment


class MealType(Enum):
    """Meal slots of a daily plan."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealItem:
    """A food and the grams of it served in one meal."""

    food: FoodItem
    grams: float

    @property
    def nutrients(self) -> NutrientVector:
        return self.food.nutrients.scaled(self.grams)


def _weighted_rating(items: tuple[MealItem, ...], attribute: str) -> float:
    if not items:
        return 0.0
    total_grams = sum(item.grams for item in items)
    if total_grams <= 0:
        return 0.0
    weighted = sum(getattr(item.food, attribute) * (item.grams / 100.0) for item in items)
    return weighted / (total_grams / 100.0)


@dataclass(frozen=True)
class Meal:
    """A named meal with its ordered items."""

    name: str
    meal_type: MealType
    items: tuple[MealItem, ...] = ()

    @property
    def total_nutrients(self) -> NutrientVector:
        return sum_vectors(item.nutrients for item in self.items)

    @property
    def total_grams(self) -> float:
        return sum(item.grams for item in self.items)

    @property
    def taste_score(self) -> float:
        """Gram-weighted taste rating (0 for an empty meal)."""
        return _weighted_rating(self.items, "taste_score")

    @property
    def digestion_score(self) -> float:
        """Gram-weighted digestion rating (0 for an empty meal)."""
        return _weighted_rating(self.items, "digestion_score")


@dataclass(frozen=True)
class DailyDietPlan:
    """Assembled meals for one day plus the context they were solved for.

    Aggregates are computed on demand from the meals.
    """

    meals: tuple[Meal, ...]
    season: Season
    requirements: dict[str, float] = field(default_factory=dict)

    @property
    def total_nutrients(self) -> NutrientVector:
        return sum_vectors(meal.total_nutrients for meal in self.meals)

    @property
    def total_grams(self) -> float:
        return sum(meal.total_grams for meal in self.meals)

    @property
    def overall_taste_score(self) -> float:
        if not self.meals:
            return 0.0
        return sum(meal.taste_score for meal in self.meals) / len(self.meals)

    @property
    def overall_digestion_score(self) -> float:
        if not self.meals:
            return 0.0
        return sum(meal.digestion_score for meal in self.meals) / len(self.meals)

    def get_meal(self, meal_type: MealType) -> Meal | None:
        return next((m for m in self.meals if m.meal_type == meal_type), None)


# Foods at or below this amount are treated as search noise
NOISE_THRESHOLD_GRAMS = 10.0

BREAKFAST_MAX_ITEMS = 5
BREAKFAST_PORTION = 0.30
BREAKFAST_MIN_DIGESTION = 7.0
BREAKFAST_CATEGORIES = frozenset({FoodCategory.FRUIT, FoodCategory.GRAIN, FoodCategory.DAIRY})

LUNCH_MAX_ITEMS = 8
LUNCH_PORTION = 0.35

DINNER_MAX_ITEMS = 8
DINNER_PORTION = 0.35


def is_breakfast_food(food: FoodItem) -> bool:
    """Light, easily digested foods (fruit, grain, dairy) suit breakfast."""
    return (
        food.digestion_score > BREAKFAST_MIN_DIGESTION
        and food.category in BREAKFAST_CATEGORIES
    )


def _ranked_portions(assignment: PortionAssignment) -> list[tuple[int, FoodItem, float]]:
    """Meaningful portions, largest first; ties keep catalog order."""
    portions = [
        (index, food, grams)
        for index, food, grams in assignment.items()
        if grams > NOISE_THRESHOLD_GRAMS
    ]
    # sorted() is stable, so equal grams stay in catalog order
    return sorted(portions, key=lambda p: -p[2])


def assemble_meals(assignment: PortionAssignment) -> list[Meal]:
    """Distribute a solved assignment into breakfast, lunch and dinner.

    Algorithm:
    1. Drop foods at or below 10g and sort by descending grams
    2. Breakfast: up to 5 unused breakfast foods at 30% of their grams
    3. Lunch: up to 8 unused foods of any category at 35%
    4. Dinner: up to 8 foods still unused after lunch at 35%
    5. Omit meals that received no items

    Args:
        assignment: Best assignment from the search

    Returns:
        Meals in breakfast, lunch, dinner order (empty meals omitted)
    """
    ranked = _ranked_portions(assignment)
    used: set[int] = set()
    meals: list[Meal] = []

    breakfast_items = []
    for index, food, grams in ranked:
        if len(breakfast_items) >= BREAKFAST_MAX_ITEMS:
            break
        if index in used or not is_breakfast_food(food):
            continue
        breakfast_items.append(MealItem(food=food, grams=grams * BREAKFAST_PORTION))
        used.add(index)
    if breakfast_items:
        meals.append(Meal("Breakfast", MealType.BREAKFAST, tuple(breakfast_items)))

    lunch_items = []
    for index, food, grams in ranked:
        if len(lunch_items) >= LUNCH_MAX_ITEMS:
            break
        if index in used:
            continue
        lunch_items.append(MealItem(food=food, grams=grams * LUNCH_PORTION))
        used.add(index)
    if lunch_items:
        meals.append(Meal("Lunch", MealType.LUNCH, tuple(lunch_items)))

    # Dinner foods are not added to `used`; nothing is allocated after dinner
    dinner_items = []
    for index, food, grams in ranked:
        if len(dinner_items) >= DINNER_MAX_ITEMS:
            break
        if index in used:
            continue
        dinner_items.append(MealItem(food=food, grams=grams * DINNER_PORTION))
    if dinner_items:
        meals.append(Meal("Dinner", MealType.DINNER, tuple(dinner_items)))

    return meals


def format_plan(plan: DailyDietPlan) -> dict[str, Any]:
    """Format a daily plan for JSON output.

    Args:
        plan: Assembled daily plan

    Returns:
        Dict with meal and nutrient data
    """
    totals = plan.total_nutrients
    return {
        "season": plan.season.value,
        "meals": [
            {
                "name": meal.name,
                "meal_type": meal.meal_type.value,
                "calories": round(meal.total_nutrients.calories, 0),
                "taste_score": round(meal.taste_score, 2),
                "digestion_score": round(meal.digestion_score, 2),
                "foods": [
                    {
                        "name": item.food.name,
                        "category": item.food.category.value,
                        "grams": round(item.grams, 1),
                    }
                    for item in meal.items
                ],
            }
            for meal in plan.meals
        ],
        "totals": {key: round(value, 2) for key, value in totals.to_dict().items()},
        "requirements": dict(plan.requirements),
        "taste_score": round(plan.overall_taste_score, 2),
        "digestion_score": round(plan.overall_digestion_score, 2),
    }


def format_plan_text(plan: DailyDietPlan) -> str:
    """Format a daily plan for text/markdown output.

    Args:
        plan: Assembled daily plan

    Returns:
        Markdown-formatted string
    """
    lines = [f"## Daily Plan ({plan.season.value.title()})", ""]

    if not plan.meals:
        lines.append("_No foods available for this plan._")
        return "\n".join(lines)

    for meal in plan.meals:
        lines.append(f"### {meal.name} ({round(meal.total_nutrients.calories):.0f} kcal)")
        for item in meal.items:
            lines.append(f"  - {item.food.name}: {item.grams:.0f}g")
        lines.append("")

    totals = plan.total_nutrients
    lines.append("### Totals")
    for key in ("calories", "protein", "carbs", "fats", "fiber"):
        lines.append(f"  - {NUTRIENT_LABELS[key]}: {totals.get(key):.1f} {NUTRIENT_UNITS[key]}")
    lines.append(f"  - Taste: {plan.overall_taste_score:.1f}/10")
    lines.append(f"  - Digestion: {plan.overall_digestion_score:.1f}/10")

    return "\n".join(lines)
