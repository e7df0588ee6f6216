"""CLI interface using Typer."""

from __future__ import annotations

import json
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Optional

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dietsolver.app_logging import configure_logging
from dietsolver.config import get_settings
from dietsolver.config.settings import Settings, _default_config_path
from dietsolver.data.foods import FoodCatalog, Season, default_catalog, load_catalog
from dietsolver.data.nutrients import NUTRIENT_LABELS, NUTRIENT_UNITS
from dietsolver.errors import DietSolverError
from dietsolver.export.meal_allocator import format_plan, format_plan_text
from dietsolver.planner import PlanResult, solve_daily_plan
from dietsolver.profiles.requirements import (
    ActivityLevel,
    HealthProfile,
    Sex,
    derive_requirements,
    load_requirements,
)

app = typer.Typer(
    help="Seasonal daily diet planning by stochastic local search",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Manage configuration")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(command: str, message: str, json_output: bool) -> None:
    """Report an error and exit with status 1."""
    if json_output:
        output_json({"success": False, "command": command, "errors": [message]})
    else:
        console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def resolve_season(season: Optional[str], settings: Settings) -> Season:
    value = season or settings.defaults.season
    if value is None:
        return Season.for_date(date.today())
    return Season.parse(value)


def resolve_catalog(catalog_path: Optional[Path], settings: Settings) -> FoodCatalog:
    path = catalog_path or settings.catalog.path
    if path is None:
        return default_catalog()
    return load_catalog(path)


def build_profile(
    settings: Settings,
    sex: Optional[str],
    age: Optional[int],
    weight_kg: Optional[float],
    height_cm: Optional[float],
    activity: Optional[str],
) -> HealthProfile:
    """Combine command-line options with the configured default profile."""
    defaults = settings.profile
    try:
        return HealthProfile(
            sex=Sex((sex or defaults.sex).lower()),
            age=age if age is not None else defaults.age,
            weight_kg=weight_kg if weight_kg is not None else defaults.weight_kg,
            height_cm=height_cm if height_cm is not None else defaults.height_cm,
            activity_level=ActivityLevel((activity or defaults.activity_level).lower()),
        )
    except ValueError as e:
        raise DietSolverError(str(e)) from e


# Shared profile options
SexOption = typer.Option(None, "--sex", help="male or female")
AgeOption = typer.Option(None, "--age", help="Age in years")
WeightOption = typer.Option(None, "--weight", help="Weight in kg")
HeightOption = typer.Option(None, "--height", help="Height in cm")
ActivityOption = typer.Option(
    None,
    "--activity",
    help="sedentary, light, moderate, active, extra_active",
)


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def solve(
    season: Optional[str] = typer.Option(
        None, "--season", "-s", help="spring, summer, fall or winter (default: today's season)"
    ),
    sex: Optional[str] = SexOption,
    age: Optional[int] = AgeOption,
    weight_kg: Optional[float] = WeightOption,
    height_cm: Optional[float] = HeightOption,
    activity: Optional[str] = ActivityOption,
    requirements_file: Optional[Path] = typer.Option(
        None, "--requirements", "-r", help="YAML file of nutrient targets (overrides profile)"
    ),
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", help="YAML or CSV food catalog (default: built-in)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible plan"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="Search iterations"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, markdown"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Solve a daily diet plan for a season."""
    configure_logging(verbose)

    try:
        settings = get_settings()
        plan_season = resolve_season(season, settings)
        catalog = resolve_catalog(catalog_path, settings)
        if requirements_file:
            requirements = load_requirements(requirements_file)
        else:
            profile = build_profile(settings, sex, age, weight_kg, height_cm, activity)
            requirements = derive_requirements(profile)

        search_config = settings.search
        if iterations is not None:
            search_config = replace(search_config, iterations=iterations)
        params = search_config.to_parameters()
    except (DietSolverError, ValueError) as e:
        fail("solve", str(e), json_output)
        return

    effective_seed = seed if seed is not None else search_config.seed
    rng = np.random.default_rng(effective_seed)

    if json_output:
        result = solve_daily_plan(requirements, catalog, plan_season, rng=rng, params=params)
        output_json({
            "success": True,
            "command": "solve",
            "data": {
                **format_plan(result.plan),
                "search": {
                    "best_score": round(result.search.score, 3),
                    "iterations": result.search.iterations,
                    "improvements": result.search.improvements,
                    "elapsed_seconds": round(result.search.elapsed_seconds, 3),
                    "seed": effective_seed,
                },
            },
            "human_summary": (
                f"{len(result.plan.meals)} meals for {plan_season.value}, "
                f"{result.plan.total_nutrients.calories:.0f} kcal"
            ),
        })
        return

    with console.status("[bold green]Optimizing portions..."):
        result = solve_daily_plan(requirements, catalog, plan_season, rng=rng, params=params)

    fmt = output_format or settings.defaults.output_format
    if fmt == "markdown":
        console.print(format_plan_text(result.plan))
    else:
        print_plan_tables(result)


def print_plan_tables(result: PlanResult) -> None:
    """Print a solved plan as Rich tables."""
    plan = result.plan
    header = [
        f"[bold]DAILY PLAN[/bold] - {plan.season.value.title()}",
        f"Best score: {result.search.score:.2f}",
        f"Taste: {plan.overall_taste_score:.1f}/10 | Digestion: {plan.overall_digestion_score:.1f}/10",
    ]
    console.print(Panel("\n".join(header), title="Diet Solver"))

    if not plan.meals:
        console.print("[yellow]No foods available for this season.[/yellow]")
        return

    for meal in plan.meals:
        table = Table(title=f"{meal.name} ({meal.total_nutrients.calories:.0f} kcal)")
        table.add_column("Food", style="cyan")
        table.add_column("Category", style="dim")
        table.add_column("Grams", justify="right")
        table.add_column("kcal", justify="right")
        for item in meal.items:
            table.add_row(
                item.food.name,
                item.food.category.value,
                f"{item.grams:.0f}",
                f"{item.nutrients.calories:.0f}",
            )
        console.print(table)

    nutrient_table = Table(title="Nutrient Summary")
    nutrient_table.add_column("Nutrient")
    nutrient_table.add_column("Amount", justify="right")
    nutrient_table.add_column("Target", justify="right")

    totals = plan.total_nutrients
    for key, target in plan.requirements.items():
        nutrient_table.add_row(
            NUTRIENT_LABELS.get(key, key),
            f"{totals.get(key):.1f} {NUTRIENT_UNITS.get(key, '')}",
            f"{target:.1f}",
        )
    console.print(nutrient_table)
    console.print(
        f"[dim]Iterations: {result.search.iterations} | "
        f"Improvements: {result.search.improvements} | "
        f"Time: {result.search.elapsed_seconds:.3f}s[/dim]"
    )


@app.command()
def foods(
    season: Optional[str] = typer.Option(None, "--season", "-s", help="Only foods available in this season"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML or CSV food catalog"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List catalog foods, optionally filtered by season."""
    try:
        settings = get_settings()
        catalog = resolve_catalog(catalog_path, settings)
        selected = (
            catalog.foods_for_season(Season.parse(season)) if season else list(catalog)
        )
    except (DietSolverError, ValueError) as e:
        fail("foods", str(e), json_output)
        return

    if json_output:
        output_json({
            "success": True,
            "command": "foods",
            "data": {
                "season": season,
                "foods": [
                    {
                        "name": food.name,
                        "category": food.category.value,
                        "taste_score": food.taste_score,
                        "digestion_score": food.digestion_score,
                        "seasons": sorted(s.value for s in food.seasons),
                        "calories_per_100g": food.nutrients.calories,
                    }
                    for food in selected
                ],
            },
            "human_summary": f"{len(selected)} of {len(catalog)} foods",
        })
        return

    table = Table(title="Foods" + (f" available in {season}" if season else ""))
    table.add_column("Food", style="cyan")
    table.add_column("Category")
    table.add_column("Taste", justify="right")
    table.add_column("Digestion", justify="right")
    table.add_column("kcal/100g", justify="right")
    table.add_column("Seasons", style="dim")

    for food in selected:
        table.add_row(
            food.name,
            food.category.value,
            f"{food.taste_score:.1f}",
            f"{food.digestion_score:.1f}",
            f"{food.nutrients.calories:.0f}",
            ", ".join(s.value for s in Season if s in food.seasons),
        )

    console.print(table)
    console.print(f"[dim]Showing {len(selected)} of {len(catalog)} foods[/dim]")


@app.command()
def requirements(
    sex: Optional[str] = SexOption,
    age: Optional[int] = AgeOption,
    weight_kg: Optional[float] = WeightOption,
    height_cm: Optional[float] = HeightOption,
    activity: Optional[str] = ActivityOption,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the daily nutrient targets derived for a profile."""
    try:
        settings = get_settings()
        profile = build_profile(settings, sex, age, weight_kg, height_cm, activity)
    except DietSolverError as e:
        fail("requirements", str(e), json_output)
        return

    targets = derive_requirements(profile)

    if json_output:
        output_json({
            "success": True,
            "command": "requirements",
            "data": {key: round(value, 3) for key, value in targets.items()},
            "human_summary": f"{targets['calories']:.0f} kcal/day for {profile.sex.value}",
        })
        return

    table = Table(title="Daily Requirements")
    table.add_column("Nutrient")
    table.add_column("Target", justify="right")
    table.add_column("Unit", style="dim")
    for key, value in targets.items():
        table.add_row(NUTRIENT_LABELS.get(key, key), f"{value:.1f}", NUTRIENT_UNITS.get(key, ""))
    console.print(table)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the effective configuration."""
    try:
        settings = get_settings()
    except DietSolverError as e:
        fail("config show", str(e), json_output)
        return

    data = settings.to_dict()
    if json_output:
        output_json({"success": True, "command": "config show", "data": data})
        return

    for section, values in data.items():
        console.print(f"[bold]{section}[/bold]")
        for key, value in values.items():
            console.print(f"  {key}: {value}")


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a default configuration file."""
    target = path or _default_config_path()
    if target.exists() and not force:
        console.print(f"[yellow]{target} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    Settings().save(target)
    console.print(f"[green]Wrote default configuration to {target}[/green]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
