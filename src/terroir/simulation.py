"""
TerroirSimulator: terroir -> ranked regions, grapes and a derived flavor profile

Composes the catalog, the scoring engine, ranking and aggregation:
score every region and keep the top 5, score every grape and keep the top 8,
then average the flavor profiles of the selected grapes.

Pure and deterministic: the same input and catalog always give the same
result. The catalog is read-only and may be shared across threads.
"""

import logging
from typing import List, Optional

from terroir.aggregation import average_profiles
from terroir.catalog import Catalog, load_default_catalog
from terroir.constants import AlgorithmConstants, SelectionLimits
from terroir.ranking import select_top
from terroir.schema import ScoredGrape, ScoredRegion, SimulationResult, TerroirInput
from terroir.scoring import score_grape, score_region
from terroir.utils import round_half_away_from_zero

logger = logging.getLogger(__name__)


class TerroirSimulator:
    """
    Terroir matching over an injected catalog

    Usage:
        simulator = TerroirSimulator(load_default_catalog())
        result = simulator.simulate(TerroirInput.default())
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def score_regions(self, terroir: TerroirInput) -> List[ScoredRegion]:
        """Score every catalog region, in catalog order."""
        return [
            ScoredRegion(entity=region, score=self._rounded(score_region(terroir, region)))
            for region in self.catalog.regions
        ]

    def score_grapes(self, terroir: TerroirInput) -> List[ScoredGrape]:
        """Score every catalog grape, in catalog order."""
        return [
            ScoredGrape(entity=grape, score=self._rounded(score_grape(terroir, grape)))
            for grape in self.catalog.grapes
        ]

    def simulate(self, terroir: TerroirInput) -> SimulationResult:
        """
        Run one terroir match

        Args:
            terroir: Temperature, rainfall, altitude and soil label

        Returns:
            SimulationResult with top regions, top grapes and the flavor
            profile averaged over the selected grapes
        """
        matched_regions = select_top(self.score_regions(terroir), SelectionLimits.TOP_REGIONS)
        matched_grapes = select_top(self.score_grapes(terroir), SelectionLimits.TOP_GRAPES)
        derived = average_profiles([scored.entity.flavor_profile for scored in matched_grapes])

        if matched_regions:
            top = matched_regions[0]
            logger.debug(f"Top region for {terroir.model_dump()}: {top.entity.id} ({top.score})")

        return SimulationResult(
            input=terroir,
            matched_regions=tuple(matched_regions),
            matched_grapes=tuple(matched_grapes),
            derived_flavor_profile=derived,
        )

    @staticmethod
    def _rounded(value: float) -> float:
        return round_half_away_from_zero(value, AlgorithmConstants.SCORE_DECIMALS)


def simulate(terroir: TerroirInput, catalog: Optional[Catalog] = None) -> SimulationResult:
    """Run a terroir match against `catalog`, or the process-wide default."""
    return TerroirSimulator(catalog if catalog is not None else load_default_catalog()).simulate(terroir)


__all__ = ['TerroirSimulator', 'simulate']
