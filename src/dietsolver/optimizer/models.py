"""Data models for the portion search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

import numpy as np

from dietsolver.data.foods import FoodItem
from dietsolver.data.nutrients import NUTRIENT_FIELDS, NutrientVector

# Nutrient key -> daily target. Missing keys mean "no constraint".
RequirementMap = Mapping[str, float]


class PortionAssignment:
    """Grams assigned to each food, indexed by catalog position.

    Foods are addressed by their index in ``foods`` rather than by object
    identity, so iteration order is always catalog order.
    """

    def __init__(self, foods: Iterable[FoodItem], grams: Iterable[float] | np.ndarray):
        self.foods: tuple[FoodItem, ...] = tuple(foods)
        self.grams: np.ndarray = np.asarray(grams, dtype=np.float64).copy()
        if self.grams.shape != (len(self.foods),):
            raise ValueError(
                f"Expected {len(self.foods)} gram values, got shape {self.grams.shape}"
            )
        if np.any(self.grams < 0):
            raise ValueError("Portion quantities must be non-negative")

    @classmethod
    def zeros(cls, foods: Iterable[FoodItem]) -> PortionAssignment:
        foods = tuple(foods)
        return cls(foods, np.zeros(len(foods)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[FoodItem, float]]) -> PortionAssignment:
        """Build an assignment from ``(food, grams)`` pairs, preserving order."""
        pairs = list(pairs)
        return cls([food for food, _ in pairs], [grams for _, grams in pairs])

    def __len__(self) -> int:
        return len(self.foods)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PortionAssignment):
            return NotImplemented
        return self.foods == other.foods and np.array_equal(self.grams, other.grams)

    def __repr__(self) -> str:
        return f"PortionAssignment({self.to_dict()!r})"

    def copy(self) -> PortionAssignment:
        return PortionAssignment(self.foods, self.grams)

    def items(self) -> Iterator[tuple[int, FoodItem, float]]:
        """Yield ``(index, food, grams)`` in catalog order."""
        for index, food in enumerate(self.foods):
            yield index, food, float(self.grams[index])

    def grams_for(self, food: FoodItem) -> float:
        """Grams assigned to ``food`` (matched case-insensitively by name)."""
        for index, candidate in enumerate(self.foods):
            if candidate.key == food.key:
                return float(self.grams[index])
        raise KeyError(food.name)

    def total_grams(self) -> float:
        return float(self.grams.sum())

    def nutrient_matrix(self) -> np.ndarray:
        """Per-100g nutrient profiles, shape (n_foods, n_nutrients)."""
        if not self.foods:
            return np.zeros((0, len(NUTRIENT_FIELDS)))
        return np.vstack([food.nutrients.to_array() for food in self.foods])

    def nutrients(self, matrix: np.ndarray | None = None) -> NutrientVector:
        """Sum of each food's profile scaled by its grams / 100.

        Args:
            matrix: Precomputed ``nutrient_matrix()``; rebuilt when omitted
        """
        if matrix is None:
            matrix = self.nutrient_matrix()
        if not self.foods:
            return NutrientVector.zero()
        totals = (self.grams / 100.0) @ matrix
        return NutrientVector.from_array(np.maximum(totals, 0.0))

    def to_dict(self) -> dict[str, float]:
        return {food.name: float(g) for food, g in zip(self.foods, self.grams)}


@dataclass(frozen=True)
class ScoredAssignment:
    """Snapshot of an assignment together with its score (lower is better)."""

    assignment: PortionAssignment
    score: float


@dataclass
class SearchResult:
    """Complete output from a local search run."""

    best: ScoredAssignment
    iterations: int
    score_history: list[float] = field(default_factory=list)  # best score after each iteration
    improvements: int = 0
    elapsed_seconds: float = 0.0

    @property
    def assignment(self) -> PortionAssignment:
        return self.best.assignment

    @property
    def score(self) -> float:
        return self.best.score
