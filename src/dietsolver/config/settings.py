"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from dietsolver.errors import ConfigError
from dietsolver.optimizer.search import SearchParameters


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".dietsolver"


def _default_config_path() -> Path:
    return _default_config_dir() / "config.yaml"


@dataclass
class SearchConfig:
    """Local search configuration."""

    iterations: int = 1000
    initial_max_grams: float = 500.0
    perturb_count: int = 10
    perturb_delta: float = 50.0
    seed: Optional[int] = None  # None = fresh randomness per solve

    def to_parameters(self) -> SearchParameters:
        return SearchParameters(
            iterations=self.iterations,
            initial_max_grams=self.initial_max_grams,
            perturb_count=self.perturb_count,
            perturb_delta=self.perturb_delta,
        )


@dataclass
class CatalogConfig:
    """Food catalog configuration."""

    path: Optional[Path] = None  # None = built-in catalog


@dataclass
class ProfileConfig:
    """Default health profile used when deriving requirements."""

    sex: str = "male"
    age: int = 30
    weight_kg: float = 70.0
    height_cm: float = 175.0
    activity_level: str = "moderate"


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    season: Optional[str] = None  # None = season of today's date
    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    search: SearchConfig = field(default_factory=SearchConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.dietsolver/config.yaml

        Returns:
            Settings instance

        Raises:
            ConfigError: If the file is not valid YAML or holds bad values
        """
        if config_path is None:
            config_path = _default_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: expected a mapping at top level")

        settings = cls()
        try:
            settings._apply(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in {config_path}: {e}") from e
        return settings

    def _apply(self, data: dict[str, Any]) -> None:
        # Parse search config
        if "search" in data:
            search_data = data["search"] or {}
            if "iterations" in search_data:
                self.search.iterations = int(search_data["iterations"])
            if "initial_max_grams" in search_data:
                self.search.initial_max_grams = float(search_data["initial_max_grams"])
            if "perturb_count" in search_data:
                self.search.perturb_count = int(search_data["perturb_count"])
            if "perturb_delta" in search_data:
                self.search.perturb_delta = float(search_data["perturb_delta"])
            if search_data.get("seed") is not None:
                self.search.seed = int(search_data["seed"])
            # Validates the combined values
            self.search.to_parameters()

        # Parse catalog config
        if "catalog" in data:
            catalog_data = data["catalog"] or {}
            if catalog_data.get("path"):
                self.catalog.path = Path(catalog_data["path"]).expanduser()

        # Parse profile config
        if "profile" in data:
            profile_data = data["profile"] or {}
            if "sex" in profile_data:
                self.profile.sex = str(profile_data["sex"]).lower()
            if "age" in profile_data:
                self.profile.age = int(profile_data["age"])
            if "weight_kg" in profile_data:
                self.profile.weight_kg = float(profile_data["weight_kg"])
            if "height_cm" in profile_data:
                self.profile.height_cm = float(profile_data["height_cm"])
            if "activity_level" in profile_data:
                self.profile.activity_level = str(profile_data["activity_level"]).lower()

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if def_data.get("season"):
                self.defaults.season = str(def_data["season"]).lower()
            if "output_format" in def_data:
                self.defaults.output_format = def_data["output_format"]

    def to_dict(self) -> dict[str, Any]:
        return {
            "search": {
                "iterations": self.search.iterations,
                "initial_max_grams": self.search.initial_max_grams,
                "perturb_count": self.search.perturb_count,
                "perturb_delta": self.search.perturb_delta,
                "seed": self.search.seed,
            },
            "catalog": {
                "path": str(self.catalog.path) if self.catalog.path else None,
            },
            "profile": {
                "sex": self.profile.sex,
                "age": self.profile.age,
                "weight_kg": self.profile.weight_kg,
                "height_cm": self.profile.height_cm,
                "activity_level": self.profile.activity_level,
            },
            "defaults": {
                "season": self.defaults.season,
                "output_format": self.defaults.output_format,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.dietsolver/config.yaml
        """
        if config_path is None:
            config_path = _default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
