"""Shared fixtures: small hand-built catalogs and inputs."""

import pytest

from terroir.catalog import Catalog
from terroir.schema import ClimateRange, FlavorProfile, Grape, Region, TerroirInput


def make_climate(temperature=(10, 20), rainfall=(400, 800), altitude=(0, 400), soils=("Limestone", "Clay")):
    return ClimateRange(temperature=temperature, rainfall=rainfall, altitude=altitude, soils=soils)


def make_profile(value=3.0, **overrides):
    attrs = dict(acidity=value, tannin=value, body=value, fruitiness=value, earthiness=value)
    attrs.update(overrides)
    return FlavorProfile(**attrs)


def make_region(region_id, climate=None, **overrides):
    data = dict(
        id=region_id,
        name=region_id.replace("_", " ").title(),
        country="France",
        appellation=f"{region_id} AOC",
        climate=climate or make_climate(),
        key_grapes=(),
        description="",
    )
    data.update(overrides)
    return Region(**data)


def make_grape(grape_id, climate=None, profile=None, **overrides):
    data = dict(
        id=grape_id,
        name=grape_id.replace("_", " ").title(),
        color="red",
        typical_regions=(),
        preferred_climate=climate or make_climate(),
        flavor_profile=profile or make_profile(),
        notes="",
    )
    data.update(overrides)
    return Grape(**data)


@pytest.fixture
def climate():
    """Climate band centered on 15°C / 600mm / 200m with limestone and clay."""
    return make_climate()


@pytest.fixture
def center_input():
    """Input at the exact midpoint of the `climate` fixture."""
    return TerroirInput(temperature=15, rainfall=600, altitude=200, soil_type="Limestone")


@pytest.fixture
def small_catalog():
    """Three regions and three grapes with one dangling id each way."""
    regions = [
        make_region("cool", make_climate(temperature=(8, 14)), key_grapes=("crisp", "missing_grape")),
        make_region("mild", make_climate(temperature=(12, 18)), key_grapes=("crisp", "round")),
        make_region(
            "warm",
            make_climate(temperature=(18, 26), soils=("Granite",)),
            country="United States",
            state_or_province="California",
            key_grapes=("bold",),
        ),
    ]
    grapes = [
        make_grape("crisp", make_climate(temperature=(8, 14)), make_profile(acidity=5, tannin=1, body=2),
                   color="white", typical_regions=("cool", "mild")),
        make_grape("round", make_climate(temperature=(12, 18)), make_profile(), typical_regions=("mild",)),
        make_grape("bold", make_climate(temperature=(18, 26), soils=("Granite",)),
                   make_profile(acidity=2, tannin=5, body=5), typical_regions=("warm", "missing_region")),
    ]
    return Catalog(regions, grapes)
