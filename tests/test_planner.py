"""Tests for the end-to-end solve."""

from __future__ import annotations

import numpy as np
import pytest

from dietsolver.data.foods import FoodCatalog, Season, default_catalog
from dietsolver.optimizer.search import SearchParameters
from dietsolver.planner import solve_daily_plan
from dietsolver.profiles.requirements import HealthProfile, derive_requirements


@pytest.fixture
def params():
    return SearchParameters(iterations=200)


class TestSolveDailyPlan:
    """Tests for solve_daily_plan."""

    def test_default_catalog_summer(self, params):
        requirements = derive_requirements(HealthProfile())
        result = solve_daily_plan(
            requirements, default_catalog(), Season.SUMMER,
            rng=np.random.default_rng(1), params=params,
        )
        plan = result.plan
        assert plan.season == Season.SUMMER
        assert plan.meals
        assert plan.requirements == requirements
        assert result.search.iterations == 200
        for meal in plan.meals:
            for item in meal.items:
                assert item.food.is_available(Season.SUMMER)

    def test_only_seasonal_foods_searched(self, sample_catalog, sample_requirements, params, rng):
        result = solve_daily_plan(sample_requirements, sample_catalog, Season.WINTER,
                                  rng=rng, params=params)
        names = [food.name for food in result.search.assignment.foods]
        assert "Blueberries" not in names
        assert len(names) == 4

    def test_empty_season(self, make_food, sample_requirements, params, rng):
        """A season with no foods gives an empty plan."""
        catalog = FoodCatalog([make_food("Cherries", seasons={Season.SUMMER})])
        result = solve_daily_plan(sample_requirements, catalog, Season.WINTER, rng=rng, params=params)
        assert result.plan.meals == ()
        assert result.plan.total_nutrients.calories == 0
        assert result.search.iterations == 0

    def test_same_seed_same_plan(self, sample_catalog, sample_requirements, params):
        first = solve_daily_plan(sample_requirements, sample_catalog, Season.SUMMER,
                                 rng=np.random.default_rng(3), params=params)
        second = solve_daily_plan(sample_requirements, sample_catalog, Season.SUMMER,
                                  rng=np.random.default_rng(3), params=params)
        assert first.plan == second.plan

    def test_plan_carries_less_than_search(self, sample_catalog, sample_requirements, params, rng):
        """Meal shares are not renormalized back to the optimized totals."""
        result = solve_daily_plan(sample_requirements, sample_catalog, Season.SUMMER,
                                  rng=rng, params=params)
        optimized = result.search.assignment.nutrients()
        assert result.plan.total_nutrients.calories < optimized.calories
