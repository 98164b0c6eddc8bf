"""Ranking and selection of scored entities."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def select_top(scored: Sequence[T], limit: int) -> List[T]:
    """
    Sort scored entities by descending score and keep the first `limit`.

    Ties keep their incoming (catalog) order: sorted() is stable, including
    with reverse=True.

    Args:
        scored: Items exposing a numeric `score` attribute
        limit: Maximum number of items to return

    Returns:
        At most `limit` items, highest score first
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return sorted(scored, key=lambda item: item.score, reverse=True)[:limit]


__all__ = ['select_top']
