"""Tests for map highlight lookups."""

from terroir.highlights import build_map_highlights
from terroir.schema import ScoredRegion

from conftest import make_region


def scored(region_id, country, state=None, score=50.0):
    region = make_region(region_id, country=country, state_or_province=state)
    return ScoredRegion(entity=region, score=score)


class TestBuildMapHighlights:
    """Test country and state highlight codes."""

    def test_countries_deduplicated_in_order(self):
        matches = [
            scored("bordeaux", "France"),
            scored("rioja", "Spain"),
            scored("burgundy", "France"),
        ]
        highlights = build_map_highlights(matches)
        assert highlights.countries == ["FR", "ES"]
        assert highlights.country_regions == {"FR": ["Bordeaux", "Burgundy"], "ES": ["Rioja"]}

    def test_us_regions_listed_by_state(self):
        matches = [
            scored("napa_valley", "United States", "California"),
            scored("finger_lakes", "United States", "New York"),
            scored("sonoma", "United States", "California"),
        ]
        highlights = build_map_highlights(matches)
        assert highlights.countries == ["US"]
        assert highlights.states == ["CA", "NY"]
        assert highlights.state_regions == {"CA": ["Napa Valley", "Sonoma"], "NY": ["Finger Lakes"]}
        assert "US" not in highlights.country_regions

    def test_unknown_country_omitted(self):
        highlights = build_map_highlights([scored("atlantis", "Atlantis"), scored("douro", "Portugal")])
        assert highlights.countries == ["PT"]

    def test_unknown_or_missing_state_omitted(self):
        matches = [
            scored("texas_hill", "United States", "Nowhere"),
            scored("somewhere", "United States"),
        ]
        highlights = build_map_highlights(matches)
        assert highlights.countries == ["US"]
        assert highlights.states == []
        assert highlights.state_regions == {}

    def test_empty(self):
        highlights = build_map_highlights([])
        assert highlights.countries == []
        assert highlights.states == []
