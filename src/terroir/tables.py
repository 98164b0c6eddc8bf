"""Pandas views of catalog entries and simulation results for display."""

from typing import Iterable

import pandas as pd

from terroir.constants import ClimateDimensions, FlavorAttributes, UIConstants
from terroir.schema import ClimateRange, FlavorProfile, Grape, Region, Scored


def _climate_columns(climate: ClimateRange) -> dict:
    row = {}
    for dimension in ClimateDimensions.all():
        low, high = getattr(climate, dimension)
        row[f"{dimension}_low"] = low
        row[f"{dimension}_high"] = high
        row[f"{dimension}_mid"] = climate.midpoint(dimension)
    row["soils"] = ", ".join(climate.soils)
    return row


def regions_frame(regions: Iterable[Region]) -> pd.DataFrame:
    """One row per region with its climate band flattened."""
    rows = [
        {
            "id": region.id,
            "name": region.name,
            "country": region.country,
            "state_or_province": region.state_or_province,
            "appellation": region.appellation,
            **_climate_columns(region.climate),
        }
        for region in regions
    ]
    return pd.DataFrame(rows)


def grapes_frame(grapes: Iterable[Grape]) -> pd.DataFrame:
    """One row per grape with climate band and flavor attributes."""
    rows = [
        {
            "id": grape.id,
            "name": grape.name,
            "color": grape.color.value,
            **_climate_columns(grape.preferred_climate),
            **grape.flavor_profile.model_dump(),
        }
        for grape in grapes
    ]
    return pd.DataFrame(rows)


def scored_frame(scored: Iterable[Scored]) -> pd.DataFrame:
    """Rank, id, name and score of scored entities, in the given order."""
    rows = [
        {"rank": rank, "id": item.entity.id, "name": item.entity.name, "score": item.score}
        for rank, item in enumerate(scored, start=1)
    ]
    return pd.DataFrame(rows, columns=["rank", "id", "name", "score"])


def profile_frame(profile: FlavorProfile) -> pd.DataFrame:
    """Attribute/value rows using display labels."""
    return pd.DataFrame(
        {
            "attribute": [UIConstants.FEATURE_LABELS[name] for name in FlavorAttributes.feature_columns()],
            "value": profile.to_array(),
        }
    )


__all__ = ['regions_frame', 'grapes_frame', 'scored_frame', 'profile_frame']
