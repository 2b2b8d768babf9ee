"""
Utility functions for API endpoints
"""
from typing import Iterable, Optional, TypeVar

from fastapi import HTTPException

T = TypeVar("T")


def find_by_id(items: Iterable[T], item_id: str) -> Optional[T]:
    """
    Linear scan for the entity with the given id
    """
    for item in items:
        if getattr(item, "id", None) == item_id:
            return item
    return None


def get_or_404(items: Iterable[T], item_id: str) -> T:
    """
    Find an entity by id

    Raises HTTPException with 404 status if nothing matches
    """
    item = find_by_id(items, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="not found")
    return item
