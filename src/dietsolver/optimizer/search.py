"""Bounded stochastic local search over portion assignments.

This is a naive hill-climb, not a gradient method: the penalty surface is
non-smooth (shortfall and concentration terms) and the catalog is small,
so cheap random perturbation is used instead. The loop always runs its
full iteration budget; there is no convergence check.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from dietsolver.data.foods import FoodItem
from dietsolver.optimizer.models import (
    PortionAssignment,
    RequirementMap,
    ScoredAssignment,
    SearchResult,
)
from dietsolver.optimizer.scoring import score

logger = logging.getLogger(__name__)


@dataclass
class SearchParameters:
    """Tunable constants of the search."""

    iterations: int = 1000
    initial_max_grams: float = 500.0
    perturb_count: int = 10  # leading foods (catalog order) perturbed each step
    perturb_delta: float = 50.0  # uniform delta in [-delta, delta] grams

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise ValueError("iterations must be at least 1")
        if self.initial_max_grams < 0:
            raise ValueError("initial_max_grams must be non-negative")
        if self.perturb_count < 0:
            raise ValueError("perturb_count must be non-negative")
        if self.perturb_delta < 0:
            raise ValueError("perturb_delta must be non-negative")


def initialize_assignment(
    foods: Sequence[FoodItem],
    rng: np.random.Generator,
    params: SearchParameters,
) -> PortionAssignment:
    """Draw each food's grams uniformly from [0, initial_max_grams]."""
    grams = rng.uniform(0.0, params.initial_max_grams, size=len(foods))
    return PortionAssignment(foods, grams)


def perturb(
    assignment: PortionAssignment,
    rng: np.random.Generator,
    params: SearchParameters,
) -> PortionAssignment:
    """Return a copy with the leading foods nudged by a random delta.

    The first ``perturb_count`` foods in catalog order each receive a
    uniform delta in [-perturb_delta, perturb_delta]; results are clamped
    at 0 grams.
    """
    adjusted = assignment.copy()
    count = min(params.perturb_count, len(adjusted))
    if count == 0:
        return adjusted

    deltas = rng.uniform(-params.perturb_delta, params.perturb_delta, size=count)
    adjusted.grams[:count] = np.maximum(0.0, adjusted.grams[:count] + deltas)
    return adjusted


def run_search(
    requirements: RequirementMap,
    foods: Sequence[FoodItem],
    rng: Optional[np.random.Generator] = None,
    params: Optional[SearchParameters] = None,
) -> SearchResult:
    """Search for a low-penalty portion assignment.

    Each iteration scores the current assignment, replaces the retained
    best on strict improvement only (ties keep the earliest), then
    perturbs the current assignment.

    Args:
        requirements: Daily targets keyed by nutrient key
        foods: Candidate foods in catalog order
        rng: Random generator; a fresh unseeded one is created if None
        params: Search constants; defaults if None

    Returns:
        SearchResult with the best assignment seen and the best-score history
    """
    if rng is None:
        rng = np.random.default_rng()
    if params is None:
        params = SearchParameters()

    start_time = time.time()
    foods = list(foods)

    if not foods:
        empty = PortionAssignment.zeros([])
        empty_score = score(empty.nutrients(), requirements, empty)
        logger.info("No foods available; returning empty assignment (score %.2f)", empty_score)
        return SearchResult(
            best=ScoredAssignment(assignment=empty, score=empty_score),
            iterations=0,
            elapsed_seconds=time.time() - start_time,
        )

    current = initialize_assignment(foods, rng, params)
    matrix = current.nutrient_matrix()

    best = ScoredAssignment(assignment=current.copy(), score=math.inf)
    history: list[float] = []
    improvements = 0

    for iteration in range(params.iterations):
        nutrients = current.nutrients(matrix)
        current_score = score(nutrients, requirements, current)

        if current_score < best.score:
            best = ScoredAssignment(assignment=current.copy(), score=current_score)
            improvements += 1
            logger.debug("Iteration %d: best score %.3f", iteration, current_score)

        history.append(best.score)
        current = perturb(current, rng, params)

    elapsed = time.time() - start_time
    logger.info(
        "Search finished: %d iterations, %d improvements, best score %.2f (%.3fs)",
        params.iterations,
        improvements,
        best.score,
        elapsed,
    )

    return SearchResult(
        best=best,
        iterations=params.iterations,
        score_history=history,
        improvements=improvements,
        elapsed_seconds=elapsed,
    )


def optimize(
    requirements: RequirementMap,
    foods: Sequence[FoodItem],
    rng: Optional[np.random.Generator] = None,
    params: Optional[SearchParameters] = None,
) -> PortionAssignment:
    """Return the best portion assignment found by ``run_search``."""
    return run_search(requirements, foods, rng=rng, params=params).assignment
