"""Command-line interface for terroir."""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from terroir import __version__
from terroir.catalog import Catalog, load_default_catalog
from terroir.constants import DefaultInput, FlavorAttributes, UIConstants, UnitSystem
from terroir.error_handling import CatalogError, InputRangeError
from terroir.schema import FlavorProfile, ScoredGrape, ScoredRegion, SimulationResult, TerroirInput
from terroir.simulation import TerroirSimulator
from terroir.units import out_of_range_fields, require_in_range, to_display, unit_labels
from terroir.utils import round_half_away_from_zero


def _score_style(score: float) -> str:
    if score >= 75:
        return "bold green"
    elif score >= 50:
        return "bold yellow"
    return "bold red"


def create_regions_table(matches: List[ScoredRegion]) -> Table:
    """Table of matched regions, best first."""
    table = Table(
        title="🌍 Regions That Fit This Terroir",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold white"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Region", style="bold white")
    table.add_column("Location", style="cyan")
    table.add_column("Appellation", style="dim white")
    table.add_column("Score", justify="right")

    for rank, scored in enumerate(matches, start=1):
        region = scored.entity
        location = ", ".join(p for p in [region.state_or_province, region.country] if p)
        style = _score_style(scored.score)
        table.add_row(str(rank), region.name, location, region.appellation, f"[{style}]{scored.score:.0f}%[/{style}]")
    return table


def create_grapes_table(matches: List[ScoredGrape]) -> Table:
    """Table of matched grapes, best first."""
    table = Table(
        title="🍇 Grapes That Thrive Here",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold white"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Grape", style="bold white")
    table.add_column("Color")
    table.add_column("Score", justify="right")

    for rank, scored in enumerate(matches, start=1):
        grape = scored.entity
        emoji = UIConstants.GRAPE_COLORS_CHART[grape.color]['emoji']
        style = _score_style(scored.score)
        table.add_row(str(rank), grape.name, f"{emoji} {grape.color.value}", f"[{style}]{scored.score:.0f}%[/{style}]")
    return table


def create_profile_table(profile: FlavorProfile) -> Table:
    """Derived flavor profile with a 5-step bar per attribute."""
    table = Table(
        title="👅 Derived Flavor Profile",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold white"
    )
    table.add_column("Attribute", style="cyan", width=12)
    table.add_column("Value", justify="center", style="bold white")
    table.add_column("Bar", width=12)

    for name in FlavorAttributes.feature_columns():
        value = getattr(profile, name)
        filled = int(round_half_away_from_zero(value, 0))
        table.add_row(UIConstants.FEATURE_LABELS[name], f"{value:.1f}", "●" * filled + "○" * (5 - filled))
    return table


def _load_catalog(path: Optional[str]) -> Catalog:
    if path:
        return Catalog.from_json(path)
    return load_default_catalog()


def _print_result(console: Console, result: SimulationResult, system: UnitSystem) -> None:
    display = to_display(result.input, system)
    labels = unit_labels(system)
    summary = "  ".join(
        f"[bold white]{name.title()}:[/bold white] {display[name]}{labels[name]}" for name in labels
    )
    console.print(Panel(
        f"{summary}  [bold white]Soil:[/bold white] {result.input.soil_type}",
        title="🌱 Terroir",
        border_style="dim white"
    ))
    console.print(create_regions_table(list(result.matched_regions)))
    console.print(create_grapes_table(list(result.matched_grapes)))
    console.print(create_profile_table(result.derived_flavor_profile))


def cmd_simulate(args: argparse.Namespace, console: Console) -> int:
    try:
        terroir = TerroirInput(
            temperature=args.temperature,
            rainfall=args.rainfall,
            altitude=args.altitude,
            soil_type=args.soil,
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        console.print(f"[bold red]Error:[/bold red] invalid input for {fields}")
        return 2

    if args.strict:
        try:
            require_in_range(terroir)
        except InputRangeError as e:
            console.print(f"[bold red]Error:[/bold red] {e}")
            return 2
    else:
        for name in out_of_range_fields(terroir):
            console.print(f"[yellow]Warning:[/yellow] {name} is outside the usual control range")

    try:
        catalog = _load_catalog(args.catalog)
    except CatalogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1

    result = TerroirSimulator(catalog).simulate(terroir)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        system = UnitSystem.IMPERIAL if args.imperial else UnitSystem.METRIC
        _print_result(console, result, system)
    return 0


def cmd_validate(args: argparse.Namespace, console: Console) -> int:
    try:
        catalog = _load_catalog(args.catalog)
    except CatalogError as e:
        console.print(f"[bold red]Catalog invalid:[/bold red] {e}")
        return 1

    console.print(f"[green]✓[/green] {len(catalog.regions)} regions, {len(catalog.grapes)} grapes")

    dangling = catalog.dangling_references()
    if not dangling:
        console.print("[green]✓[/green] All relationship ids resolve")
        return 0

    table = Table(title="Unresolved relationship ids", box=box.SIMPLE, header_style="bold yellow")
    table.add_column("Owner")
    table.add_column("Id")
    table.add_column("Missing")
    for kind, owner_id, missing_id in dangling:
        table.add_row(kind, owner_id, missing_id)
    console.print(table)
    console.print("[dim]Unresolved ids are skipped by relationship lookups.[/dim]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terroir",
        description="Match terroir conditions to wine regions and grape varieties",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"terroir {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    simulate = subparsers.add_parser("simulate", help="Score regions and grapes for a terroir")
    simulate.add_argument("--temperature", type=float, default=DefaultInput.TEMPERATURE, help="Growing-season average in °C")
    simulate.add_argument("--rainfall", type=float, default=DefaultInput.RAINFALL, help="Annual rainfall in mm")
    simulate.add_argument("--altitude", type=float, default=DefaultInput.ALTITUDE, help="Vineyard altitude in m")
    simulate.add_argument("--soil", default=DefaultInput.SOIL_TYPE, help="Soil type label")
    simulate.add_argument("--catalog", help="Alternate catalog JSON file")
    simulate.add_argument("--json", action="store_true", help="Output as JSON")
    simulate.add_argument("--imperial", action="store_true", help="Show °F, inches and feet")
    simulate.add_argument("--strict", action="store_true", help="Reject inputs outside the control range")
    simulate.set_defaults(handler=cmd_simulate)

    validate = subparsers.add_parser("validate", help="Load and check the catalog")
    validate.add_argument("--catalog", help="Alternate catalog JSON file")
    validate.set_defaults(handler=cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    console = Console()
    return args.handler(args, console)


if __name__ == "__main__":
    sys.exit(main())
