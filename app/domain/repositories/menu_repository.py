"""
Menu Repository Interface.
"""

from typing import List

from app.domain.repositories.base import BaseRepository
from app.domain.models.menu_item import MenuItem


class MenuRepository(BaseRepository[MenuItem]):
    """Interface for MenuItem-specific operations."""

    def list_active(self) -> List[MenuItem]:
        """Active items in display order."""
        ...

    def swap_with_neighbor(self, item_id: int, direction: str) -> List[MenuItem]:
        """Swap an item with its neighbour in one transaction."""
        ...

    def apply_sequence(self, ids: List[int]) -> List[MenuItem]:
        """Set order = 1..n following `ids` in one transaction."""
        ...
