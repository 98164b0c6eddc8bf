"""Terroir - match climate and soil conditions to wine regions and grapes."""

from terroir.catalog import Catalog, load_default_catalog
from terroir.schema import FlavorProfile, Grape, Region, SimulationResult, TerroirInput
from terroir.simulation import TerroirSimulator, simulate

__version__ = "0.1.0"

__all__ = [
    'Catalog',
    'load_default_catalog',
    'FlavorProfile',
    'Grape',
    'Region',
    'SimulationResult',
    'TerroirInput',
    'TerroirSimulator',
    'simulate',
    '__version__',
]
