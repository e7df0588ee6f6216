"""Meal assembly and plan formatting."""

from dietsolver.export.meal_allocator import (
    DailyDietPlan,
    Meal,
    MealItem,
    MealType,
    assemble_meals,
)

__all__ = ["DailyDietPlan", "Meal", "MealItem", "MealType", "assemble_meals"]
