"""Pydantic schemas for Terroir catalog entries, queries and results."""

import math
from typing import Generic, Optional, Tuple, TypeVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from terroir.constants import (
    AlgorithmConstants,
    ClimateDimensions,
    DefaultInput,
    FlavorAttributes,
    GrapeColor,
)

Interval = Tuple[float, float]


class ClimateRange(BaseModel):
    """Band of conditions a region or grape prefers."""

    model_config = ConfigDict(frozen=True)

    temperature: Interval = Field(..., description="Growing-season temperature range in °C")
    rainfall: Interval = Field(..., description="Annual rainfall range in mm")
    altitude: Interval = Field(..., description="Vineyard altitude range in meters")
    soils: Tuple[str, ...] = Field(default_factory=tuple, description="Dominant soil types")

    @model_validator(mode="after")
    def check_intervals(self) -> "ClimateRange":
        for dimension in ClimateDimensions.all():
            low, high = getattr(self, dimension)
            if low > high:
                raise ValueError(f"{dimension} lower bound {low} exceeds upper bound {high}")
            if dimension in ClimateDimensions.NON_NEGATIVE and low < 0:
                raise ValueError(f"{dimension} cannot be negative (got {low})")
        return self

    def midpoint(self, dimension: str) -> float:
        low, high = getattr(self, dimension)
        return (low + high) / 2


class FlavorProfile(BaseModel):
    """Sensory character on a 1-5 scale (aggregates may be fractional)."""

    model_config = ConfigDict(frozen=True)

    acidity: float = Field(..., ge=1.0, le=5.0, description="Acidity level (1=low, 5=high)")
    tannin: float = Field(..., ge=1.0, le=5.0, description="Tannin level (1=low, 5=high)")
    body: float = Field(..., ge=1.0, le=5.0, description="Body weight (1=light, 5=full)")
    fruitiness: float = Field(..., ge=1.0, le=5.0, description="Fruit intensity (1=low, 5=high)")
    earthiness: float = Field(..., ge=1.0, le=5.0, description="Earthy character (1=low, 5=high)")

    def to_array(self) -> np.ndarray:
        """Convert to numpy array in canonical attribute order"""
        return np.array([getattr(self, name) for name in FlavorAttributes.feature_columns()], dtype=float)

    @classmethod
    def from_array(cls, values) -> "FlavorProfile":
        """Create from a sequence in canonical attribute order"""
        return cls(**dict(zip(FlavorAttributes.feature_columns(), (float(v) for v in values))))

    @classmethod
    def neutral(cls) -> "FlavorProfile":
        """Profile with every attribute at the scale midpoint."""
        value = AlgorithmConstants.NEUTRAL_FLAVOR_VALUE
        return cls(acidity=value, tannin=value, body=value, fruitiness=value, earthiness=value)


class TerroirInput(BaseModel):
    """A single point in terroir space.

    No range validation is applied: out-of-bounds values (infinities
    included) simply score low. NaN is rejected since it has no distance
    to any range.
    """

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., description="Growing-season average in °C")
    rainfall: float = Field(..., description="Annual rainfall in mm")
    altitude: float = Field(..., description="Vineyard altitude in meters")
    soil_type: str = Field(..., description="Soil label, matched by substring")

    @field_validator("temperature", "rainfall", "altitude")
    @classmethod
    def reject_nan(cls, value: float) -> float:
        if math.isnan(value):
            raise ValueError("must be a number, not NaN")
        return value

    @classmethod
    def default(cls) -> "TerroirInput":
        return cls(
            temperature=DefaultInput.TEMPERATURE,
            rainfall=DefaultInput.RAINFALL,
            altitude=DefaultInput.ALTITUDE,
            soil_type=DefaultInput.SOIL_TYPE,
        )


class Region(BaseModel):
    """A wine region with its climate band."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable region identifier")
    name: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    state_or_province: Optional[str] = Field(None, description="State or province, when relevant")
    appellation: str = Field(..., description="AVA / DOC / AOC label")
    climate: ClimateRange
    key_grapes: Tuple[str, ...] = Field(default_factory=tuple, description="Grape ids (not enforced)")
    description: str = ""


class Grape(BaseModel):
    """A grape variety with its preferred climate and flavor profile."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable grape identifier")
    name: str = Field(..., min_length=1)
    color: GrapeColor
    typical_regions: Tuple[str, ...] = Field(default_factory=tuple, description="Region ids (not enforced)")
    preferred_climate: ClimateRange
    flavor_profile: FlavorProfile
    notes: str = ""


EntityT = TypeVar("EntityT")


class Scored(BaseModel, Generic[EntityT]):
    """An entity paired with its match score for one query."""

    model_config = ConfigDict(frozen=True)

    entity: EntityT
    score: float = Field(..., ge=0.0, le=AlgorithmConstants.MAX_SCORE, description="Match score (0-100)")


ScoredRegion = Scored[Region]
ScoredGrape = Scored[Grape]


class SimulationResult(BaseModel):
    """Ranked matches and the derived flavor profile for one terroir input."""

    model_config = ConfigDict(frozen=True)

    input: TerroirInput
    matched_regions: Tuple[ScoredRegion, ...]
    matched_grapes: Tuple[ScoredGrape, ...]
    derived_flavor_profile: FlavorProfile
