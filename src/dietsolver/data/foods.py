"""Food records, seasons, and the seasonal catalog view.

The catalog is reference data: the optimizer only reads it. Catalog order
is significant because the search perturbs foods by position and meal
assembly breaks ties by position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

import pandas as pd
import yaml

from dietsolver.data.nutrients import NUTRIENT_FIELDS, NutrientVector
from dietsolver.errors import CatalogError

logger = logging.getLogger(__name__)


class Season(Enum):
    """Coarse quarter-of-year tag gating food availability."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"

    @classmethod
    def for_date(cls, day: date) -> Season:
        """Return the (northern hemisphere) season for a calendar date."""
        month = day.month
        if month in (3, 4, 5):
            return cls.SPRING
        if month in (6, 7, 8):
            return cls.SUMMER
        if month in (9, 10, 11):
            return cls.FALL
        return cls.WINTER

    @classmethod
    def parse(cls, value: str) -> Season:
        normalized = value.strip().lower()
        if normalized == "autumn":
            normalized = "fall"
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown season '{value}'. Valid: {valid}") from None


ALL_SEASONS: frozenset[Season] = frozenset(Season)


class FoodCategory(Enum):
    """Food categories used by meal assembly rules."""

    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    GRAIN = "grain"
    HERB = "herb"
    SPICE = "spice"
    LEGUME = "legume"
    NUT = "nut"
    SEED = "seed"
    PROTEIN = "protein"
    DAIRY = "dairy"
    OTHER = "other"


@dataclass(frozen=True)
class FoodItem:
    """A catalog food with its per-100g nutrient profile and ratings."""

    name: str
    category: FoodCategory
    nutrients: NutrientVector  # per 100g
    taste_score: float  # 0-10
    digestion_score: float  # 0-10, higher = easier to digest
    seasons: frozenset[Season] = ALL_SEASONS
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    is_ancient: bool = False

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Food name must not be empty")
        for label, value in (
            ("taste_score", self.taste_score),
            ("digestion_score", self.digestion_score),
        ):
            if not 0 <= value <= 10:
                raise ValueError(f"{self.name}: {label} must be within [0, 10], got {value}")

    @property
    def key(self) -> str:
        """Case-insensitive identity used for grouping and lookup."""
        return self.name.strip().lower()

    def is_available(self, season: Season) -> bool:
        return season in self.seasons


class FoodCatalog:
    """Ordered, read-only collection of foods."""

    def __init__(self, foods: Iterable[FoodItem]):
        self._foods: tuple[FoodItem, ...] = tuple(foods)
        self._by_key: dict[str, FoodItem] = {}
        for food in self._foods:
            if food.key in self._by_key:
                raise CatalogError(f"Duplicate food in catalog: {food.name}", entry=food.name)
            self._by_key[food.key] = food

    def __len__(self) -> int:
        return len(self._foods)

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self._foods)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._by_key

    @property
    def foods(self) -> tuple[FoodItem, ...]:
        return self._foods

    def names(self) -> list[str]:
        return [food.name for food in self._foods]

    def get(self, name: str) -> Optional[FoodItem]:
        """Look up a food by name, ignoring case."""
        return self._by_key.get(name.strip().lower())

    def foods_for_season(self, season: Season) -> list[FoodItem]:
        """Foods available in ``season``, in catalog order."""
        return [food for food in self._foods if food.is_available(season)]


# ============================================================================
# Catalog loading
# ============================================================================

_NUTRIENT_ATTRIBUTES = {attr for _, attr, _, _ in NUTRIENT_FIELDS}
# Accept requirement-style keys (e.g. "carbs") in catalog files as well
_NUTRIENT_ALIASES = {key: attr for key, attr, _, _ in NUTRIENT_FIELDS}


def _parse_seasons(value: Any, name: str) -> frozenset[Season]:
    if value is None:
        return ALL_SEASONS
    if isinstance(value, str):
        if value.strip().lower() == "all":
            return ALL_SEASONS
        value = [v for v in value.replace(",", ";").split(";") if v.strip()]
    try:
        return frozenset(Season.parse(str(v)) for v in value)
    except ValueError as e:
        raise CatalogError(f"{name}: {e}", entry=name) from e


def _parse_notes(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(p.strip() for p in value.split(";") if p.strip())
    return tuple(str(p) for p in value)


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def food_from_dict(data: dict[str, Any]) -> FoodItem:
    """Build a FoodItem from a plain mapping (YAML entry or CSV row).

    Nutrient amounts may appear under a ``nutrients`` sub-mapping or as
    top-level keys.
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog entry must be a mapping, got {data!r}", entry=str(data))

    name = str(data.get("name") or "").strip()
    if not name:
        raise CatalogError("Catalog entry is missing a name")

    try:
        category = FoodCategory(str(data.get("category", "other")).strip().lower())
    except ValueError:
        raise CatalogError(
            f"{name}: unknown category '{data.get('category')}'", entry=name
        ) from None

    raw_nutrients = dict(data.get("nutrients") or {})
    for key, value in data.items():
        if key in _NUTRIENT_ATTRIBUTES or key in _NUTRIENT_ALIASES:
            raw_nutrients.setdefault(key, value)

    nutrient_kwargs: dict[str, float] = {}
    for key, value in raw_nutrients.items():
        attr = _NUTRIENT_ALIASES.get(key, key)
        if attr not in _NUTRIENT_ATTRIBUTES:
            raise CatalogError(f"{name}: unknown nutrient '{key}'", entry=name)
        if value is None or (isinstance(value, float) and pd.isna(value)):
            continue
        try:
            nutrient_kwargs[attr] = float(value)
        except (TypeError, ValueError):
            raise CatalogError(f"{name}: invalid amount for '{key}': {value!r}", entry=name) from None

    try:
        return FoodItem(
            name=name,
            category=category,
            nutrients=NutrientVector(**nutrient_kwargs),
            taste_score=float(data.get("taste_score", 5.0)),
            digestion_score=float(data.get("digestion_score", 5.0)),
            seasons=_parse_seasons(data.get("seasons"), name),
            pros=_parse_notes(data.get("pros")),
            cons=_parse_notes(data.get("cons")),
            is_ancient=_parse_flag(data.get("is_ancient", False)),
        )
    except (TypeError, ValueError) as e:
        raise CatalogError(f"{name}: {e}", entry=name) from e


def _load_yaml_catalog(path: Path) -> list[FoodItem]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e

    entries = data.get("foods", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise CatalogError(f"{path}: expected a list of foods")
    return [food_from_dict(entry) for entry in entries]


def _load_csv_catalog(path: Path) -> list[FoodItem]:
    df = pd.read_csv(path)
    if "name" not in df.columns:
        raise CatalogError(f"{path}: CSV catalog requires a 'name' column")

    foods = []
    for _, row in df.iterrows():
        record = {k: v for k, v in row.items() if not (isinstance(v, float) and pd.isna(v))}
        for text_field in ("pros", "cons"):
            if text_field in record:
                record[text_field] = [p.strip() for p in str(record[text_field]).split(";") if p.strip()]
        foods.append(food_from_dict(record))
    return foods


def load_catalog(path: Path) -> FoodCatalog:
    """Load a food catalog from a YAML or CSV file.

    Args:
        path: Path to a ``.yaml``/``.yml`` or ``.csv`` catalog

    Returns:
        FoodCatalog preserving file order

    Raises:
        CatalogError: If the file is missing or malformed
    """
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        foods = _load_yaml_catalog(path)
    elif suffix == ".csv":
        foods = _load_csv_catalog(path)
    else:
        raise CatalogError(f"Unsupported catalog format '{suffix}' (use .yaml or .csv)")

    logger.debug("Loaded %d foods from %s", len(foods), path)
    return FoodCatalog(foods)


def default_catalog() -> FoodCatalog:
    """Return the built-in reference catalog."""
    from dietsolver.data.food_catalog import DEFAULT_FOODS

    return FoodCatalog(food_from_dict(entry) for entry in DEFAULT_FOODS)
