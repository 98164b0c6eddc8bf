"""
Terroir Constants and Enums

Centralized constants, enums, and magic values for the matching engine,
the controls that feed it, and the displays that consume it.
"""

from enum import Enum


# =======================
# CATALOG ENUMS
# =======================

class GrapeColor(str, Enum):
    """Grape color categories."""
    RED = "red"
    WHITE = "white"
    ROSE = "rosé"


class SoilType(str, Enum):
    """Soil choices offered by the terroir controls."""
    LIMESTONE = "Limestone"
    CLAY = "Clay"
    GRANITE = "Granite"
    VOLCANIC = "Volcanic"
    SANDY = "Sandy"


class UnitSystem(str, Enum):
    """Display unit systems."""
    METRIC = "metric"
    IMPERIAL = "imperial"


# =======================
# FIELD NAME CONSTANTS
# =======================

class ClimateDimensions:
    """Continuous climate dimensions scored by the engine."""

    TEMPERATURE = "temperature"
    RAINFALL = "rainfall"
    ALTITUDE = "altitude"

    # Dimensions that can never be negative in a catalog entry
    NON_NEGATIVE = (RAINFALL, ALTITUDE)

    @classmethod
    def all(cls) -> list:
        """Get the three dimensions in scoring order."""
        return [cls.TEMPERATURE, cls.RAINFALL, cls.ALTITUDE]


class FlavorAttributes:
    """Flavor profile attribute names to avoid string hardcoding."""

    ACIDITY = "acidity"
    TANNIN = "tannin"
    BODY = "body"
    FRUITINESS = "fruitiness"
    EARTHINESS = "earthiness"

    @classmethod
    def feature_columns(cls) -> list:
        """Get the five attributes in canonical order."""
        return [cls.ACIDITY, cls.TANNIN, cls.BODY, cls.FRUITINESS, cls.EARTHINESS]


# =======================
# ALGORITHM CONSTANTS
# =======================

class AlgorithmConstants:
    """
    Algorithm constants with documentation.

    Scores are built from a per-dimension exponential decay of the normalized
    distance to a climate range's midpoint: 100 at the midpoint, ~36.8 at a
    range boundary, approaching 0 far outside it.
    """

    # DIMENSION WEIGHTS
    # Temperature is the most climate-determinative factor
    TEMPERATURE_WEIGHT = 1.2
    RAINFALL_WEIGHT = 1.0
    ALTITUDE_WEIGHT = 1.0

    # Divisor that maps the weighted sum back onto 0-100
    WEIGHT_SUM = 3.2

    # Score at distance 0 for a single dimension
    MAX_DIMENSION_SCORE = 100.0

    # SOIL BONUS
    # Flat points added when the input soil matches any preferred soil
    SOIL_MATCH_BONUS = 15.0

    # FINAL CAP
    MAX_SCORE = 100.0

    # Decimal places kept on scores and aggregated flavor attributes
    SCORE_DECIMALS = 1
    PROFILE_DECIMALS = 1

    # Neutral attribute value returned when no grapes were matched
    NEUTRAL_FLAVOR_VALUE = 3.0


class SelectionLimits:
    """Fixed result-set sizes of the presentation contract."""

    TOP_REGIONS = 5
    TOP_GRAPES = 8


# =======================
# INPUT RANGE CONSTANTS
# =======================

class InputRanges:
    """Bounds and steps of the terroir controls.

    The engine accepts anything; these only describe the controls.
    """

    MIN_TEMPERATURE = 0
    MAX_TEMPERATURE = 35
    TEMPERATURE_STEP = 1

    MIN_RAINFALL = 0
    MAX_RAINFALL = 2000
    RAINFALL_STEP = 10

    MIN_ALTITUDE = 0
    MAX_ALTITUDE = 2000
    ALTITUDE_STEP = 10

    @classmethod
    def bounds(cls) -> dict:
        """Get (min, max) per climate dimension."""
        return {
            ClimateDimensions.TEMPERATURE: (cls.MIN_TEMPERATURE, cls.MAX_TEMPERATURE),
            ClimateDimensions.RAINFALL: (cls.MIN_RAINFALL, cls.MAX_RAINFALL),
            ClimateDimensions.ALTITUDE: (cls.MIN_ALTITUDE, cls.MAX_ALTITUDE),
        }


class DefaultInput:
    """Terroir shown when the simulator first opens."""

    TEMPERATURE = 18
    RAINFALL = 600
    ALTITUDE = 300
    SOIL_TYPE = SoilType.LIMESTONE.value


# =======================
# UNIT CONVERSION CONSTANTS
# =======================

class UnitConversions:
    """Metric to imperial factors used for display only."""

    MM_PER_INCH = 25.4
    FEET_PER_METER = 3.281

    UNIT_LABELS = {
        UnitSystem.METRIC: {
            ClimateDimensions.TEMPERATURE: "°C",
            ClimateDimensions.RAINFALL: "mm",
            ClimateDimensions.ALTITUDE: "m",
        },
        UnitSystem.IMPERIAL: {
            ClimateDimensions.TEMPERATURE: "°F",
            ClimateDimensions.RAINFALL: "in",
            ClimateDimensions.ALTITUDE: "ft",
        },
    }


# =======================
# UI CONSTANTS
# =======================

class UIConstants:
    """UI-related constants."""

    GRAPE_COLORS_CHART = {
        GrapeColor.WHITE: {'primary': '#D4AF37', 'emoji': '⚪'},
        GrapeColor.RED: {'primary': '#8B0000', 'emoji': '🔴'},
        GrapeColor.ROSE: {'primary': '#FF69B4', 'emoji': '🌸'},
    }

    # Feature display names
    FEATURE_LABELS = {
        'acidity': 'Acidity',
        'tannin': 'Tannin',
        'body': 'Body',
        'fruitiness': 'Fruitiness',
        'earthiness': 'Earthiness',
    }

    RADAR_LINE_COLOR = 'rgb(114, 47, 55)'
    RADAR_FILL_COLOR = 'rgba(114, 47, 55, 0.3)'
    BAR_COLOR = '#722F37'
