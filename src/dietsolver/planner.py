"""Solve entry point: catalog + requirements -> daily diet plan."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from dietsolver.data.foods import FoodCatalog, Season
from dietsolver.export.meal_allocator import DailyDietPlan, assemble_meals
from dietsolver.optimizer.models import RequirementMap, SearchResult
from dietsolver.optimizer.search import SearchParameters, run_search

logger = logging.getLogger(__name__)


@dataclass
class PlanResult:
    """A solved daily plan with the search run that produced it."""

    plan: DailyDietPlan
    search: SearchResult


def solve_daily_plan(
    requirements: RequirementMap,
    catalog: FoodCatalog,
    season: Season,
    rng: Optional[np.random.Generator] = None,
    params: Optional[SearchParameters] = None,
) -> PlanResult:
    """Optimize portions for one day and assemble them into meals.

    Every call builds its own assignment and (unless one is passed) its own
    random generator, so concurrent solves share no state.

    Args:
        requirements: Daily targets keyed by nutrient key
        catalog: Food catalog; only foods available in ``season`` are used
        season: Season gating food availability
        rng: Random generator (seed it for reproducible plans)
        params: Search constants

    Returns:
        PlanResult with the assembled plan and search details
    """
    foods = catalog.foods_for_season(season)
    logger.info("Solving %s plan over %d of %d foods", season.value, len(foods), len(catalog))

    search = run_search(requirements, foods, rng=rng, params=params)
    meals = assemble_meals(search.assignment)

    plan = DailyDietPlan(
        meals=tuple(meals),
        season=season,
        requirements=dict(requirements),
    )
    return PlanResult(plan=plan, search=search)
