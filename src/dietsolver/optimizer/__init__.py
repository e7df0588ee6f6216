"""Portion optimization engine."""

from dietsolver.optimizer.models import (
    PortionAssignment,
    RequirementMap,
    ScoredAssignment,
    SearchResult,
)
from dietsolver.optimizer.scoring import score, score_breakdown
from dietsolver.optimizer.search import SearchParameters, optimize, run_search

__all__ = [
    "PortionAssignment",
    "RequirementMap",
    "ScoredAssignment",
    "SearchResult",
    "SearchParameters",
    "score",
    "score_breakdown",
    "optimize",
    "run_search",
]
