"""Aggregation of grape flavor profiles into one derived profile."""

from typing import Sequence

import numpy as np

from terroir.constants import AlgorithmConstants
from terroir.schema import FlavorProfile
from terroir.utils import round_half_away_from_zero


def average_profiles(profiles: Sequence[FlavorProfile]) -> FlavorProfile:
    """
    Arithmetic mean of each attribute, rounded to one decimal.

    An empty input yields the neutral profile (all 3s) so callers always
    get a usable profile.

    Args:
        profiles: Flavor profiles to combine

    Returns:
        Derived FlavorProfile
    """
    if len(profiles) == 0:
        return FlavorProfile.neutral()

    matrix = np.vstack([profile.to_array() for profile in profiles])
    means = matrix.sum(axis=0) / len(profiles)

    return FlavorProfile.from_array(
        round_half_away_from_zero(value, AlgorithmConstants.PROFILE_DECIMALS)
        for value in means
    )


__all__ = ['average_profiles']
