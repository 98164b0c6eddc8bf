"""
Tests for the terroir scoring engine.

Covers:
- Normalized midpoint distance (including zero-width ranges)
- Exponential decay of distance into a score
- Bidirectional soil matching
- Combined climate score: weighting, soil bonus, clamp
"""

import math

import pytest

from terroir.constants import AlgorithmConstants
from terroir.schema import TerroirInput
from terroir.scoring import (
    climate_score,
    distance_from_midpoint,
    distance_to_score,
    score,
    score_grape,
    score_region,
    soil_matches,
)

from conftest import make_climate, make_grape, make_region


class TestDistanceFromMidpoint:
    """Test normalized distance to a range midpoint."""

    def test_midpoint_is_zero(self):
        assert distance_from_midpoint(15, (10, 20)) == 0.0

    def test_boundaries_are_one(self):
        """Either boundary sits exactly one half-span away."""
        assert distance_from_midpoint(10, (10, 20)) == 1.0
        assert distance_from_midpoint(20, (10, 20)) == 1.0

    def test_outside_range_is_unbounded(self):
        """Distance keeps growing past the boundary instead of flooring."""
        assert distance_from_midpoint(30, (10, 20)) == 3.0
        assert distance_from_midpoint(-35, (10, 20)) == 10.0

    def test_zero_width_range_uses_absolute_distance(self):
        """Degenerate range should not divide by zero."""
        assert distance_from_midpoint(7, (5, 5)) == 2.0
        assert distance_from_midpoint(5, (5, 5)) == 0.0


class TestDistanceToScore:
    """Test exponential decay scoring."""

    def test_zero_distance_gives_100(self):
        assert distance_to_score(0) == 100.0

    def test_boundary_gives_about_36_8(self):
        assert distance_to_score(1) == pytest.approx(36.79, abs=0.01)

    def test_large_distance_stays_positive(self):
        """Decay approaches but never reaches zero."""
        assert distance_to_score(50) > 0.0

    def test_decay_is_monotonic(self):
        for step in range(20):
            assert distance_to_score(step * 0.5) > distance_to_score((step + 1) * 0.5)


class TestSoilMatches:
    """Test case-insensitive bidirectional soil matching."""

    def test_exact_match(self):
        assert soil_matches("Limestone", ["Clay", "Limestone"])

    def test_case_insensitive(self):
        assert soil_matches("limestone", ["LIMESTONE"])

    def test_input_substring_of_listed_soil(self):
        """'Volcanic' matches 'Volcanic basalt (Jory)'."""
        assert soil_matches("Volcanic", ["Volcanic basalt (Jory)"])

    def test_listed_soil_substring_of_input(self):
        """'Chalky limestone marl' contains listed 'limestone'."""
        assert soil_matches("Chalky limestone marl", ["Limestone"])

    def test_partial_word_matches(self):
        """Substring logic is character based, not word based."""
        assert soil_matches("Sand", ["Sandstone"])

    def test_no_match(self):
        assert not soil_matches("Unobtainium", ["Limestone", "Clay"])

    def test_empty_soil_list(self):
        assert not soil_matches("Limestone", [])

    def test_empty_input_matches_any_soil(self):
        """An empty label is a substring of every listed soil."""
        assert soil_matches("", ["Clay"])


class TestClimateScore:
    """Test the combined score."""

    def test_center_with_soil_match_is_capped_at_100(self, climate, center_input):
        assert climate_score(center_input, climate) == 100.0

    def test_center_without_soil_match_is_exactly_100(self, climate):
        """(120 + 100 + 100) / 3.2 == 100 with no bonus needed."""
        terroir = TerroirInput(temperature=15, rainfall=600, altitude=200, soil_type="Unobtainium")
        assert climate_score(terroir, climate) == 100.0

    def test_all_boundaries_without_soil(self, climate):
        """Every dimension at a boundary scores 100/e."""
        terroir = TerroirInput(temperature=20, rainfall=800, altitude=0, soil_type="Unobtainium")
        assert climate_score(terroir, climate) == pytest.approx(100 * math.exp(-1))

    def test_temperature_weighted_higher(self, climate):
        """Missing on temperature costs more than missing on rainfall by the same distance."""
        off_temp = TerroirInput(temperature=20, rainfall=600, altitude=200, soil_type="Unobtainium")
        off_rain = TerroirInput(temperature=15, rainfall=800, altitude=200, soil_type="Unobtainium")
        assert climate_score(off_temp, climate) < climate_score(off_rain, climate)

    def test_weighted_formula(self, climate):
        terroir = TerroirInput(temperature=20, rainfall=600, altitude=200, soil_type="Unobtainium")
        expected = (100 * math.exp(-1) * 1.2 + 100 + 100) / 3.2
        assert climate_score(terroir, climate) == pytest.approx(expected)

    def test_soil_bonus_is_exactly_15_below_cap(self, climate):
        """Below the cap, a soil match adds exactly the bonus."""
        with_soil = TerroirInput(temperature=30, rainfall=1200, altitude=800, soil_type="Clay")
        without_soil = with_soil.model_copy(update={"soil_type": "Unobtainium"})
        difference = climate_score(with_soil, climate) - climate_score(without_soil, climate)
        assert difference == pytest.approx(AlgorithmConstants.SOIL_MATCH_BONUS)

    def test_soil_bonus_never_decreases_score(self, climate):
        for temperature in (0, 10, 15, 20, 35):
            matched = TerroirInput(temperature=temperature, rainfall=500, altitude=100, soil_type="Clay")
            unmatched = matched.model_copy(update={"soil_type": "Basalt"})
            assert climate_score(matched, climate) >= climate_score(unmatched, climate)

    def test_score_within_bounds_for_extreme_inputs(self, climate):
        """Clamp holds even far outside any range."""
        extremes = [
            TerroirInput(temperature=-1000, rainfall=-1000, altitude=-1000, soil_type="Limestone"),
            TerroirInput(temperature=1e6, rainfall=1e6, altitude=1e6, soil_type=""),
            TerroirInput(temperature=15, rainfall=600, altitude=200, soil_type="clay"),
        ]
        for terroir in extremes:
            assert 0.0 <= climate_score(terroir, climate) <= 100.0

    def test_moving_temperature_away_never_increases_score(self, climate):
        previous = None
        for temperature in range(15, 60):
            terroir = TerroirInput(temperature=temperature, rainfall=500, altitude=100, soil_type="Unobtainium")
            current = climate_score(terroir, climate)
            if previous is not None:
                assert current <= previous
            previous = current

    def test_zero_width_climate_is_scored(self):
        climate = make_climate(temperature=(15, 15), rainfall=(600, 600), altitude=(0, 0), soils=())
        terroir = TerroirInput(temperature=16, rainfall=600, altitude=0, soil_type="Clay")
        expected = (100 * math.exp(-1) * 1.2 + 100 + 100) / 3.2
        assert climate_score(terroir, climate) == pytest.approx(expected)

    def test_infinite_temperature_scores_zero_on_that_dimension(self, climate):
        terroir = TerroirInput(temperature=float("inf"), rainfall=600, altitude=200, soil_type="Unobtainium")
        assert climate_score(terroir, climate) == pytest.approx((100 + 100) / 3.2)

    def test_score_alias(self, climate, center_input):
        assert score is climate_score
        assert score(center_input, climate) == 100.0


class TestEntityScoring:
    """Regions and grapes delegate to the same climate score."""

    def test_region_uses_its_climate(self, climate, center_input):
        region = make_region("test_region", climate)
        assert score_region(center_input, region) == climate_score(center_input, climate)

    def test_grape_uses_preferred_climate(self, center_input):
        climate = make_climate(temperature=(25, 30), soils=("Granite",))
        grape = make_grape("test_grape", climate)
        assert score_grape(center_input, grape) == climate_score(center_input, climate)
        assert score_grape(center_input, grape) < 100.0
