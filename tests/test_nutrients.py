"""Tests for the nutrient content model."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from dietsolver.data.nutrients import (
    NUTRIENT_FIELDS,
    NUTRIENT_KEYS,
    NutrientVector,
    add,
    get_attribute,
    scale,
    sum_vectors,
)


class TestNutrientVector:
    """Tests for NutrientVector construction and invariants."""

    def test_defaults_are_zero(self):
        """A fresh vector has every nutrient at zero."""
        vector = NutrientVector()
        assert all(value == 0 for value in vector.to_dict().values())

    def test_negative_value_rejected(self):
        """Negative amounts violate the non-negative invariant."""
        with pytest.raises(ValueError, match="iron"):
            NutrientVector(iron=-1.0)

    def test_immutable(self):
        """Vectors cannot be mutated in place."""
        vector = NutrientVector(protein=10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            vector.protein = 20  # type: ignore[misc]

    def test_get_by_requirement_key(self):
        """Requirement keys like 'carbs' resolve to attributes."""
        vector = NutrientVector(carbohydrates=23, vitamin_b12=2.4)
        assert vector.get("carbs") == 23
        assert vector.get("vitamin_b12") == 2.4
        assert vector.get("carbohydrates") == 23

    def test_unknown_key(self):
        """Unknown nutrient keys raise KeyError."""
        with pytest.raises(KeyError):
            get_attribute("unobtainium")

    def test_array_order_matches_fields(self):
        """to_array follows NUTRIENT_FIELDS order."""
        vector = NutrientVector(calories=100, selenium=5)
        array = vector.to_array()
        assert array.shape == (len(NUTRIENT_FIELDS),)
        assert array[NUTRIENT_KEYS.index("calories")] == 100
        assert array[NUTRIENT_KEYS.index("selenium")] == 5
        assert NutrientVector.from_array(array) == vector

    def test_from_array_wrong_length(self):
        with pytest.raises(ValueError):
            NutrientVector.from_array(np.zeros(3))


class TestAddition:
    """Tests for component-wise addition."""

    def test_component_wise_sum(self):
        a = NutrientVector(calories=100, protein=10, iron=1.5)
        b = NutrientVector(calories=50, fiber=4, iron=0.5)
        total = add(a, b)
        assert total.calories == 150
        assert total.protein == 10
        assert total.fiber == 4
        assert total.iron == 2.0

    def test_commutative(self):
        a = NutrientVector(calories=100, zinc=2.5)
        b = NutrientVector(calories=25, copper=0.5)
        assert add(a, b) == add(b, a)

    def test_associative(self):
        a = NutrientVector(protein=1.5)
        b = NutrientVector(protein=2.25, fats=4)
        c = NutrientVector(protein=0.25, fats=1)
        assert add(add(a, b), c) == add(a, add(b, c))

    def test_operands_unchanged(self):
        """Addition produces a new vector and leaves operands alone."""
        a = NutrientVector(protein=1)
        b = NutrientVector(protein=2)
        _ = a + b
        assert a.protein == 1
        assert b.protein == 2

    def test_sum_vectors(self):
        vectors = [NutrientVector(calories=10), NutrientVector(calories=20), NutrientVector(calories=30)]
        assert sum_vectors(vectors).calories == 60
        assert sum_vectors([]) == NutrientVector.zero()


class TestScaling:
    """Tests for per-100g scaling."""

    def test_scale_zero_is_zero_vector(self):
        profile = NutrientVector(calories=165, protein=31, selenium=24.3)
        assert scale(profile, 0) == NutrientVector.zero()

    def test_scale_hundred_is_identity(self):
        profile = NutrientVector(calories=165, protein=31, fats=3.6, niacin=14.8)
        assert scale(profile, 100) == profile

    def test_scale_by_grams(self):
        """250g of a food carries 2.5x its per-100g amounts."""
        profile = NutrientVector(calories=100, protein=10)
        scaled = profile.scaled(250)
        assert scaled.calories == pytest.approx(250)
        assert scaled.protein == pytest.approx(25)
