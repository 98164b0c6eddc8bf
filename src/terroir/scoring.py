"""
Terroir Scoring Engine

Scores how closely a terroir input sits inside an entity's climate range:

1. Per dimension, the distance to the range midpoint normalized by the
   half-span (0 at the center, 1 at a boundary, >1 outside).
2. Exponential decay: 100 * e^(-d).
3. Weighted mean with temperature counting 1.2x.
4. Flat bonus when the soil label matches, then capped at 100.

Regions and grapes share the same scoring against their own climate range.
"""

import math
from typing import Iterable, Sequence

from terroir.constants import AlgorithmConstants
from terroir.schema import ClimateRange, Grape, Region, TerroirInput
from terroir.utils import safe_divide


def distance_from_midpoint(value: float, bounds: Sequence[float]) -> float:
    """
    Normalized distance from a value to the midpoint of a range.

    Zero-width ranges fall back to the absolute distance.

    Args:
        value: Point to measure
        bounds: (low, high) interval

    Returns:
        0 at the midpoint, 1 at either boundary, unbounded outside
    """
    low, high = bounds
    midpoint = (low + high) / 2
    half_span = (high - low) / 2
    distance = abs(value - midpoint)
    return safe_divide(distance, half_span, default=distance)


def distance_to_score(distance: float) -> float:
    """Exponential decay from 100 at distance 0 toward 0."""
    return AlgorithmConstants.MAX_DIMENSION_SCORE * math.exp(-distance)


def soil_matches(soil_type: str, soils: Iterable[str]) -> bool:
    """
    Case-insensitive substring match in either direction.

    "Limestone" matches "Limestone-clay", and "Volcanic basalt (Jory)" input
    matches a listed "Volcanic basalt".
    """
    needle = soil_type.lower()
    return any(needle in soil.lower() or soil.lower() in needle for soil in soils)


def climate_score(terroir: TerroirInput, climate: ClimateRange) -> float:
    """
    Score a terroir input against a climate range.

    Args:
        terroir: User's terroir point
        climate: Entity's preferred climate band

    Returns:
        Match score in [0, 100]
    """
    temp_score = distance_to_score(distance_from_midpoint(terroir.temperature, climate.temperature))
    rain_score = distance_to_score(distance_from_midpoint(terroir.rainfall, climate.rainfall))
    alt_score = distance_to_score(distance_from_midpoint(terroir.altitude, climate.altitude))

    score = (
        temp_score * AlgorithmConstants.TEMPERATURE_WEIGHT
        + rain_score * AlgorithmConstants.RAINFALL_WEIGHT
        + alt_score * AlgorithmConstants.ALTITUDE_WEIGHT
    ) / AlgorithmConstants.WEIGHT_SUM

    if soil_matches(terroir.soil_type, climate.soils):
        score += AlgorithmConstants.SOIL_MATCH_BONUS

    return min(AlgorithmConstants.MAX_SCORE, score)


# Public alias matching the engine contract
score = climate_score


def score_region(terroir: TerroirInput, region: Region) -> float:
    return climate_score(terroir, region.climate)


def score_grape(terroir: TerroirInput, grape: Grape) -> float:
    return climate_score(terroir, grape.preferred_climate)


__all__ = [
    'distance_from_midpoint',
    'distance_to_score',
    'soil_matches',
    'climate_score',
    'score',
    'score_region',
    'score_grape',
]
