"""Tests for the stochastic portion search."""

from __future__ import annotations

import numpy as np
import pytest

from dietsolver.optimizer.models import PortionAssignment
from dietsolver.optimizer.scoring import score
from dietsolver.optimizer.search import (
    SearchParameters,
    initialize_assignment,
    optimize,
    perturb,
    run_search,
)


@pytest.fixture
def twelve_foods(make_food):
    """More foods than the perturbation window."""
    return [make_food(f"Food {i}", calories=50 + i, protein=i) for i in range(12)]


class TestSearchParameters:
    """Tests for parameter validation."""

    def test_defaults(self):
        params = SearchParameters()
        assert params.iterations == 1000
        assert params.initial_max_grams == 500.0
        assert params.perturb_count == 10
        assert params.perturb_delta == 50.0

    def test_zero_iterations_rejected(self):
        with pytest.raises(ValueError, match="iterations"):
            SearchParameters(iterations=0)

    def test_negative_delta_rejected(self):
        with pytest.raises(ValueError):
            SearchParameters(perturb_delta=-1)


class TestPerturbation:
    """Tests for initialization and perturbation."""

    def test_initial_grams_within_bounds(self, twelve_foods, rng):
        assignment = initialize_assignment(twelve_foods, rng, SearchParameters())
        assert len(assignment) == 12
        assert np.all(assignment.grams >= 0)
        assert np.all(assignment.grams <= 500)

    def test_only_leading_foods_change(self, twelve_foods, rng):
        """Foods past the first ten keep their grams."""
        start = PortionAssignment(twelve_foods, np.full(12, 200.0))
        moved = perturb(start, rng, SearchParameters())
        assert np.array_equal(moved.grams[10:], start.grams[10:])
        assert not np.array_equal(moved.grams[:10], start.grams[:10])
        assert np.all(np.abs(moved.grams - start.grams) <= 50)

    def test_original_not_mutated(self, twelve_foods, rng):
        start = PortionAssignment(twelve_foods, np.full(12, 200.0))
        perturb(start, rng, SearchParameters())
        assert np.all(start.grams == 200.0)

    def test_clamped_at_zero(self, twelve_foods, rng):
        start = PortionAssignment.zeros(twelve_foods)
        for _ in range(20):
            start = perturb(start, rng, SearchParameters())
            assert np.all(start.grams >= 0)


class TestRunSearch:
    """Tests for the search loop."""

    def test_empty_foods(self):
        """No foods yields the empty assignment and its deficiency score."""
        result = run_search({"protein": 50}, [], rng=np.random.default_rng(0))
        assert len(result.assignment) == 0
        assert result.score == pytest.approx(500.0)
        assert result.iterations == 0

    def test_history_non_increasing(self, sample_foods, sample_requirements, rng):
        result = run_search(sample_requirements, sample_foods, rng=rng,
                            params=SearchParameters(iterations=200))
        history = result.score_history
        assert len(history) == 200
        assert all(b <= a for a, b in zip(history, history[1:]))
        assert history[-1] == result.score

    def test_best_score_matches_assignment(self, sample_foods, sample_requirements, rng):
        result = run_search(sample_requirements, sample_foods, rng=rng,
                            params=SearchParameters(iterations=100))
        best = result.assignment
        assert score(best.nutrients(), sample_requirements, best) == pytest.approx(result.score)

    def test_grams_non_negative(self, sample_foods, sample_requirements, rng):
        best = optimize(sample_requirements, sample_foods, rng=rng,
                        params=SearchParameters(iterations=300))
        assert np.all(best.grams >= 0)
        assert [f.name for f in best.foods] == [f.name for f in sample_foods]

    def test_same_seed_same_result(self, sample_foods, sample_requirements):
        params = SearchParameters(iterations=150)
        first = optimize(sample_requirements, sample_foods, np.random.default_rng(7), params)
        second = optimize(sample_requirements, sample_foods, np.random.default_rng(7), params)
        assert first == second

    def test_ties_keep_earliest(self, sample_foods, sample_requirements, rng):
        """With zero perturbation every score ties, so only the first is kept."""
        result = run_search(sample_requirements, sample_foods, rng=rng,
                            params=SearchParameters(iterations=25, perturb_delta=0))
        assert result.improvements == 1
        assert len(set(result.score_history)) == 1

    def test_improves_on_start(self, sample_foods, sample_requirements, rng):
        result = run_search(sample_requirements, sample_foods, rng=rng,
                            params=SearchParameters(iterations=500))
        assert result.score <= result.score_history[0]
