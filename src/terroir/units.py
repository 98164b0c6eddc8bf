"""Display unit conversion and control-bound checks for terroir inputs."""

import math
from typing import Dict, List

from terroir.constants import ClimateDimensions, InputRanges, UnitConversions, UnitSystem
from terroir.error_handling import InputRangeError
from terroir.schema import TerroirInput


def _round_display(value: float) -> int:
    # Halves round up, as slider readouts do
    return int(math.floor(value + 0.5))


def celsius_to_fahrenheit(celsius: float) -> int:
    return _round_display(celsius * 9 / 5 + 32)


def mm_to_inches(mm: float) -> int:
    return _round_display(mm / UnitConversions.MM_PER_INCH)


def meters_to_feet(meters: float) -> int:
    return _round_display(meters * UnitConversions.FEET_PER_METER)


def to_display(terroir: TerroirInput, system: UnitSystem = UnitSystem.METRIC) -> Dict[str, float]:
    """
    Convert a terroir input's climate values for display.

    Metric values pass through unchanged; imperial values are rounded to
    whole units.
    """
    if UnitSystem(system) is UnitSystem.METRIC:
        return {
            ClimateDimensions.TEMPERATURE: terroir.temperature,
            ClimateDimensions.RAINFALL: terroir.rainfall,
            ClimateDimensions.ALTITUDE: terroir.altitude,
        }
    return {
        ClimateDimensions.TEMPERATURE: celsius_to_fahrenheit(terroir.temperature),
        ClimateDimensions.RAINFALL: mm_to_inches(terroir.rainfall),
        ClimateDimensions.ALTITUDE: meters_to_feet(terroir.altitude),
    }


def unit_labels(system: UnitSystem = UnitSystem.METRIC) -> Dict[str, str]:
    return dict(UnitConversions.UNIT_LABELS[UnitSystem(system)])


def out_of_range_fields(terroir: TerroirInput) -> List[str]:
    """Climate dimensions whose value lies outside the control bounds."""
    return [
        dimension
        for dimension, (low, high) in InputRanges.bounds().items()
        if not low <= getattr(terroir, dimension) <= high
    ]


def require_in_range(terroir: TerroirInput) -> TerroirInput:
    """Return the input unchanged, or raise InputRangeError naming bad fields."""
    fields = out_of_range_fields(terroir)
    if fields:
        raise InputRangeError(fields)
    return terroir


__all__ = [
    'celsius_to_fahrenheit',
    'mm_to_inches',
    'meters_to_feet',
    'to_display',
    'unit_labels',
    'out_of_range_fields',
    'require_in_range',
]
