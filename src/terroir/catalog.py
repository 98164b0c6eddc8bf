"""Catalog of wine regions and grape varieties."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from terroir import config
from terroir.error_handling import CatalogError, handle_catalog_error
from terroir.schema import Grape, Region

logger = logging.getLogger(__name__)

PACKAGED_CATALOG = "catalog.json"


class Catalog:
    """
    Immutable set of Region and Grape records addressable by identifier.

    Region <-> grape relationships are plain id lists that are not checked
    against each other. Relationship lookups are best-effort: ids that do not
    resolve are skipped, never raised.
    """

    def __init__(self, regions: Iterable[Region], grapes: Iterable[Grape]):
        self.regions: Tuple[Region, ...] = tuple(regions)
        self.grapes: Tuple[Grape, ...] = tuple(grapes)
        self._regions_by_id: Dict[str, Region] = self._index(self.regions, "region")
        self._grapes_by_id: Dict[str, Grape] = self._index(self.grapes, "grape")

    def __repr__(self) -> str:
        return f"Catalog(regions={len(self.regions)}, grapes={len(self.grapes)})"

    @staticmethod
    def _index(entities, kind: str) -> dict:
        index = {}
        for entity in entities:
            if entity.id in index:
                raise CatalogError(f"Duplicate {kind} id: {entity.id}")
            index[entity.id] = entity
        return index

    @classmethod
    def from_dict(cls, data: dict, source: str = "<dict>") -> "Catalog":
        """
        Build a catalog from raw mappings.

        Args:
            data: Mapping with "regions" and "grapes" lists
            source: Description of where data came from (for error messages)

        Raises:
            CatalogError: on any missing key or malformed entry
        """
        try:
            if not isinstance(data, dict):
                raise CatalogError(f"Catalog root must be an object, got {type(data).__name__}")
            missing = [key for key in ("regions", "grapes") if key not in data]
            if missing:
                raise CatalogError(f"Catalog {source} missing keys: {missing}")
            regions = [Region.model_validate(item) for item in data["regions"]]
            grapes = [Grape.model_validate(item) for item in data["grapes"]]
            catalog = cls(regions, grapes)
        except (CatalogError, ValidationError, TypeError) as e:
            handle_catalog_error(e, source)

        logger.info(f"Loaded catalog from {source}: {len(catalog.regions)} regions, {len(catalog.grapes)} grapes")
        dangling = catalog.dangling_references()
        if dangling:
            logger.warning(f"Catalog {source} has {len(dangling)} unresolved relationship id(s)")
        return catalog

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "Catalog":
        """Load a catalog from a JSON file."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            handle_catalog_error(e, path)
        return cls.from_dict(data, source=str(path))

    # =======================
    # LOOKUPS
    # =======================

    def region(self, region_id: str) -> Optional[Region]:
        return self._regions_by_id.get(region_id)

    def grape(self, grape_id: str) -> Optional[Grape]:
        return self._grapes_by_id.get(grape_id)

    def grapes_for_region(self, region: Region) -> List[Grape]:
        """Key grapes of a region that exist in this catalog."""
        return [self._grapes_by_id[g] for g in region.key_grapes if g in self._grapes_by_id]

    def regions_for_grape(self, grape: Grape) -> List[Region]:
        """Typical regions of a grape that exist in this catalog."""
        return [self._regions_by_id[r] for r in grape.typical_regions if r in self._regions_by_id]

    def dangling_references(self) -> List[Tuple[str, str, str]]:
        """
        List relationship ids that do not resolve.

        Returns:
            (owner kind, owner id, missing id) tuples in catalog order
        """
        dangling = []
        for region in self.regions:
            for grape_id in region.key_grapes:
                if grape_id not in self._grapes_by_id:
                    dangling.append(("region", region.id, grape_id))
        for grape in self.grapes:
            for region_id in grape.typical_regions:
                if region_id not in self._regions_by_id:
                    dangling.append(("grape", grape.id, region_id))
        return dangling


def load_packaged_catalog() -> Catalog:
    """Load the catalog shipped inside the package."""
    resource = files("terroir.data").joinpath(PACKAGED_CATALOG)
    source = f"terroir.data/{PACKAGED_CATALOG}"
    try:
        data = json.loads(resource.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        handle_catalog_error(e, source)
    return Catalog.from_dict(data, source=source)


@lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    """
    Load the process-wide catalog once.

    Uses TERROIR_CATALOG_PATH when set, otherwise the packaged catalog.
    """
    if config.CATALOG_PATH:
        return Catalog.from_json(config.CATALOG_PATH)
    return load_packaged_catalog()
