"""
SQLAlchemy Implementation of Menu Repository.

Reordering touches several rows; each operation commits once so that either
every new `order` value is stored or none is.
"""

from typing import List

import structlog

from app.domain.models.menu_item import MenuItem
from app.domain.repositories.menu_repository import MenuRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)


class SQLAlchemyMenuRepository(SQLAlchemyRepository[MenuItem], MenuRepository):
    """MenuItem repository implementation using SQLAlchemy."""

    def _ordering(self) -> tuple:
        return (MenuItem.order.asc(), MenuItem.id.asc())

    def list_active(self) -> List[MenuItem]:
        return (
            self.db.query(MenuItem)
            .filter(MenuItem.is_active.is_(True))
            .order_by(*self._ordering())
            .all()
        )

    def _commit_sequence(self) -> List[MenuItem]:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return self.list()

    def swap_with_neighbor(self, item_id: int, direction: str) -> List[MenuItem]:
        items = self.list()
        index = next((i for i, item in enumerate(items) if item.id == item_id), None)
        if index is None:
            raise LookupError(item_id)

        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(items):
            return items

        # Ties would make the swap a no-op, so renumber first
        orders = [item.order for item in items]
        if len(set(orders)) != len(orders):
            logger.info("Renumbering menu items with duplicate order values", count=len(items))
            for position, item in enumerate(items, start=1):
                item.order = position

        current, neighbor = items[index], items[target]
        current.order, neighbor.order = neighbor.order, current.order
        return self._commit_sequence()

    def apply_sequence(self, ids: List[int]) -> List[MenuItem]:
        by_id = {item.id: item for item in self.list()}
        for position, item_id in enumerate(ids, start=1):
            by_id[item_id].order = position
        return self._commit_sequence()
