"""
Standardized Error Handling for Terroir

The scoring core is total over numeric and string inputs and raises nothing.
Errors exist only at the edges: loading the catalog, and outer surfaces that
opt into strict control bounds.
"""

import logging
from typing import Any, NoReturn

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class TerroirError(Exception):
    """Base exception for Terroir application."""
    pass


class CatalogError(TerroirError):
    """Catalog could not be loaded or is malformed. Fatal at startup."""
    pass


class InputRangeError(TerroirError):
    """Terroir input lies outside the control bounds."""

    def __init__(self, fields: list):
        self.fields = list(fields)
        super().__init__(f"Input out of range: {', '.join(self.fields)}")


def handle_catalog_error(error: Exception, source: Any) -> NoReturn:
    """
    Standardized catalog load failure handling.

    Args:
        error: Exception that occurred while reading or validating
        source: Where the catalog came from (path or description)

    Raises:
        CatalogError: always, chained to the original error
    """
    error_type = type(error).__name__

    if isinstance(error, CatalogError):
        logger.error(f"Catalog rejected ({source}): {error}")
        raise error

    if isinstance(error, ValidationError):
        logger.error(f"Catalog validation failed ({source}): {error.error_count()} error(s)")
        raise CatalogError(f"Malformed catalog entries in {source}: {error}") from error

    if error_type == "JSONDecodeError":
        logger.error(f"Invalid catalog JSON ({source}): {error}")
        raise CatalogError(f"Invalid JSON in {source}: {error}") from error

    if isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        logger.error(f"Catalog file unreadable ({source}): {error}")
        raise CatalogError(f"Cannot read catalog {source}: {error}") from error

    logger.error(f"Unexpected error loading catalog ({source}): {error_type} - {error}")
    raise CatalogError(f"Unexpected error loading catalog {source}") from error


__all__ = [
    'TerroirError',
    'CatalogError',
    'InputRangeError',
    'handle_catalog_error',
]
