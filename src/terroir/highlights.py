"""
Map highlight lookups for matched regions.

Maps region countries to ISO alpha-2 codes and United States regions to
state abbreviations so a map renderer can highlight them. Names missing from
the lookup tables are skipped; no projection math happens here.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from terroir.schema import ScoredRegion

UNITED_STATES = "United States"

COUNTRY_TO_ISO = {
    'United States': 'US',
    'France': 'FR',
    'Italy': 'IT',
    'Spain': 'ES',
    'Portugal': 'PT',
    'Argentina': 'AR',
    'South Africa': 'ZA',
    'Australia': 'AU',
    'New Zealand': 'NZ',
    'Germany': 'DE',
    'Austria': 'AT',
    'Chile': 'CL',
    'Greece': 'GR',
    'Hungary': 'HU',
}

STATE_TO_ABBR = {
    'California': 'CA', 'Oregon': 'OR', 'Washington': 'WA', 'New York': 'NY',
    'Texas': 'TX', 'Virginia': 'VA', 'Colorado': 'CO', 'Arizona': 'AZ',
    'Michigan': 'MI', 'Ohio': 'OH', 'Pennsylvania': 'PA', 'Missouri': 'MO',
    'Idaho': 'ID', 'New Mexico': 'NM', 'North Carolina': 'NC',
}


@dataclass
class MapHighlights:
    """Codes to highlight, plus region names per code for tooltips."""
    countries: List[str] = field(default_factory=list)
    states: List[str] = field(default_factory=list)
    country_regions: Dict[str, List[str]] = field(default_factory=dict)
    state_regions: Dict[str, List[str]] = field(default_factory=dict)


def build_map_highlights(matched_regions: Iterable[ScoredRegion]) -> MapHighlights:
    """
    Collect highlight codes for matched regions.

    Codes are deduplicated in order of first appearance. United States
    regions are listed under their state rather than under "US".
    """
    highlights = MapHighlights()

    for scored in matched_regions:
        region = scored.entity
        country_code = COUNTRY_TO_ISO.get(region.country)
        if country_code is None:
            continue

        if country_code not in highlights.countries:
            highlights.countries.append(country_code)

        if region.country != UNITED_STATES:
            highlights.country_regions.setdefault(country_code, []).append(region.name)
            continue

        state_code = STATE_TO_ABBR.get(region.state_or_province or "")
        if state_code is None:
            continue
        if state_code not in highlights.states:
            highlights.states.append(state_code)
        highlights.state_regions.setdefault(state_code, []).append(region.name)

    return highlights


__all__ = ['COUNTRY_TO_ISO', 'STATE_TO_ABBR', 'MapHighlights', 'build_map_highlights']
