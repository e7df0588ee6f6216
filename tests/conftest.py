"""Pytest fixtures for dietsolver tests."""

from __future__ import annotations

import numpy as np
import pytest

from dietsolver.config import settings as settings_module
from dietsolver.config.settings import Settings
from dietsolver.data.foods import ALL_SEASONS, FoodCatalog, FoodCategory, FoodItem, Season
from dietsolver.data.nutrients import NutrientVector


def _make_food(
    name: str,
    category: FoodCategory = FoodCategory.OTHER,
    taste: float = 5.0,
    digestion: float = 5.0,
    seasons=ALL_SEASONS,
    **nutrients: float,
) -> FoodItem:
    return FoodItem(
        name=name,
        category=category,
        nutrients=NutrientVector(**nutrients),
        taste_score=taste,
        digestion_score=digestion,
        seasons=frozenset(seasons),
    )


@pytest.fixture
def make_food():
    """Factory for FoodItem records with sensible defaults."""
    return _make_food


@pytest.fixture
def sample_foods():
    """A small catalog-ordered list of foods (per 100g values)."""
    return [
        # Chicken: lean protein
        _make_food("Chicken Breast", FoodCategory.PROTEIN, taste=8.5, digestion=9.0,
                   calories=165, protein=31, fats=3.6, niacin=14.8, selenium=24.3),
        # Rice: carbs
        _make_food("Brown Rice", FoodCategory.GRAIN, taste=7.0, digestion=7.5,
                   calories=111, protein=2.6, carbohydrates=23, fats=0.9, fiber=1.8),
        # Broccoli: vitamin C and K
        _make_food("Broccoli", FoodCategory.VEGETABLE, taste=6.5, digestion=7.0,
                   calories=34, protein=2.8, carbohydrates=7, fats=0.4, fiber=2.6,
                   vitamin_c=89.2, vitamin_k=101.6),
        # Banana: easy breakfast fruit
        _make_food("Banana", FoodCategory.FRUIT, taste=8.5, digestion=9.5,
                   calories=89, protein=1.1, carbohydrates=23, fats=0.3, fiber=2.6,
                   potassium=358),
        # Blueberries: summer only
        _make_food("Blueberries", FoodCategory.FRUIT, taste=9.5, digestion=9.0,
                   seasons={Season.SUMMER},
                   calories=57, protein=0.7, carbohydrates=14, fats=0.3, fiber=2.4),
    ]


@pytest.fixture
def sample_catalog(sample_foods):
    return FoodCatalog(sample_foods)


@pytest.fixture
def sample_requirements():
    """A modest requirement map covering macros and a few micros."""
    return {
        "calories": 2000,
        "protein": 60,
        "carbs": 250,
        "fats": 60,
        "fiber": 30,
        "vitamin_c": 90,
        "potassium": 3400,
    }


@pytest.fixture
def rng():
    """Seeded random generator for reproducible searches."""
    return np.random.default_rng(42)


@pytest.fixture
def default_settings(monkeypatch):
    """Use default settings instead of the user's config file."""
    settings = Settings()
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings
