"""Tests for food records, seasons and catalog loading."""

from __future__ import annotations

from datetime import date

import pytest

from dietsolver.data.foods import (
    FoodCatalog,
    FoodCategory,
    Season,
    default_catalog,
    load_catalog,
)
from dietsolver.errors import CatalogError


class TestSeason:
    """Tests for Season helpers."""

    def test_for_date(self):
        assert Season.for_date(date(2024, 4, 1)) == Season.SPRING
        assert Season.for_date(date(2024, 7, 15)) == Season.SUMMER
        assert Season.for_date(date(2024, 10, 31)) == Season.FALL
        assert Season.for_date(date(2024, 12, 25)) == Season.WINTER
        assert Season.for_date(date(2024, 2, 1)) == Season.WINTER

    def test_parse(self):
        assert Season.parse("Summer") == Season.SUMMER
        assert Season.parse(" autumn ") == Season.FALL

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Unknown season"):
            Season.parse("monsoon")


class TestFoodItem:
    """Tests for FoodItem validation."""

    def test_score_out_of_range(self, make_food):
        with pytest.raises(ValueError, match="taste_score"):
            make_food("Mystery", taste=11)

    def test_empty_name(self, make_food):
        with pytest.raises(ValueError):
            make_food("  ")

    def test_key_is_case_insensitive(self, make_food):
        assert make_food("Brown Rice").key == "brown rice"


class TestFoodCatalog:
    """Tests for the catalog view."""

    def test_foods_for_season_keeps_order(self, sample_catalog):
        summer = [f.name for f in sample_catalog.foods_for_season(Season.SUMMER)]
        winter = [f.name for f in sample_catalog.foods_for_season(Season.WINTER)]
        assert summer == ["Chicken Breast", "Brown Rice", "Broccoli", "Banana", "Blueberries"]
        assert winter == ["Chicken Breast", "Brown Rice", "Broccoli", "Banana"]

    def test_get_ignores_case(self, sample_catalog):
        food = sample_catalog.get("BROWN rice")
        assert food is not None
        assert food.name == "Brown Rice"
        assert "broccoli" in sample_catalog
        assert sample_catalog.get("Kale") is None

    def test_duplicate_names_rejected(self, make_food):
        with pytest.raises(CatalogError, match="Duplicate"):
            FoodCatalog([make_food("Kale"), make_food("kale")])

    def test_default_catalog(self):
        """Built-in catalog contains seasonal and year-round foods."""
        catalog = default_catalog()
        assert len(catalog) > 15
        summer = {f.name for f in catalog.foods_for_season(Season.SUMMER)}
        winter = {f.name for f in catalog.foods_for_season(Season.WINTER)}
        assert "Blueberries" in summer
        assert "Blueberries" not in winter
        assert "Walnuts" in winter
        assert "Banana" in summer and "Banana" in winter

    def test_default_catalog_categories(self):
        catalog = default_catalog()
        assert catalog.get("Greek Yogurt").category == FoodCategory.DAIRY
        assert catalog.get("Turmeric").is_ancient
        assert catalog.get("Quinoa").nutrients.carbohydrates == 64


class TestLoadCatalog:
    """Tests for YAML and CSV catalog files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "foods.yaml"
        path.write_text(
            "foods:\n"
            "  - name: Apple\n"
            "    category: fruit\n"
            "    taste_score: 8\n"
            "    digestion_score: 8.5\n"
            "    seasons: [fall, winter]\n"
            "    nutrients: {calories: 52, carbs: 14, fiber: 2.4}\n"
            "  - name: Tofu\n"
            "    category: protein\n"
            "    calories: 76\n"
            "    protein: 8\n"
        )

        catalog = load_catalog(path)

        assert catalog.names() == ["Apple", "Tofu"]
        apple = catalog.get("apple")
        assert apple.category == FoodCategory.FRUIT
        assert apple.nutrients.carbohydrates == 14
        assert apple.seasons == frozenset({Season.FALL, Season.WINTER})
        tofu = catalog.get("tofu")
        assert tofu.nutrients.protein == 8
        assert tofu.seasons == frozenset(Season)

    def test_load_csv(self, tmp_path):
        path = tmp_path / "foods.csv"
        path.write_text(
            "name,category,taste_score,digestion_score,seasons,calories,protein,carbs\n"
            "Oats,grain,7.5,8,spring;summer,379,13.2,67.7\n"
            "Lentils,legume,7,7.5,,116,9,20\n"
        )

        catalog = load_catalog(path)

        oats = catalog.get("Oats")
        assert oats.category == FoodCategory.GRAIN
        assert oats.nutrients.carbohydrates == pytest.approx(67.7)
        assert oats.seasons == frozenset({Season.SPRING, Season.SUMMER})
        assert catalog.get("Lentils").seasons == frozenset(Season)

    def test_unknown_category(self, tmp_path):
        path = tmp_path / "foods.yaml"
        path.write_text("foods:\n  - name: Rock\n    category: mineral\n")
        with pytest.raises(CatalogError, match="Rock"):
            load_catalog(path)

    def test_unknown_nutrient(self, tmp_path):
        path = tmp_path / "foods.yaml"
        path.write_text("foods:\n  - name: Rock\n    nutrients: {mystery: 1}\n")
        with pytest.raises(CatalogError, match="mystery"):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text("Apple")
        with pytest.raises(CatalogError, match="Unsupported"):
            load_catalog(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "foods.yaml"
        path.write_text("foods:\n  - name: [unclosed\n")
        with pytest.raises(CatalogError, match="Invalid YAML"):
            load_catalog(path)

    def test_entry_must_be_mapping(self, tmp_path):
        path = tmp_path / "foods.yaml"
        path.write_text("foods:\n  - Apple\n")
        with pytest.raises(CatalogError, match="Apple"):
            load_catalog(path)

    def test_pros_and_cons_as_text(self, tmp_path):
        """A plain string becomes one note per ';'-separated part."""
        path = tmp_path / "foods.yaml"
        path.write_text(
            "foods:\n"
            "  - name: Celery\n"
            "    pros: Crunchy\n"
            "    cons: Stringy; Bland\n"
        )
        celery = load_catalog(path).get("Celery")
        assert celery.pros == ("Crunchy",)
        assert celery.cons == ("Stringy", "Bland")
