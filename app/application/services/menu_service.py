"""Menu service — CRUD and reordering of navigation entries."""

from typing import List

import structlog

from app.core.exceptions import BadRequestException, EntityNotFoundException
from app.domain.models.menu_item import MenuItem
from app.domain.repositories.menu_repository import MenuRepository
from app.domain.schemas.menu import MenuItemCreate, MenuItemUpdate

logger = structlog.get_logger(__name__)


def list_menu_items(repo: MenuRepository) -> List[MenuItem]:
    return repo.list()


def get_menu_item(repo: MenuRepository, item_id: int) -> MenuItem:
    item = repo.get_by_id(item_id)
    if item is None:
        raise EntityNotFoundException("Menu item not found", {"id": item_id})
    return item


def create_menu_item(repo: MenuRepository, data: MenuItemCreate) -> MenuItem:
    item = repo.create(data)
    logger.info("Menu item created", item_id=item.id, order=item.order)
    return item


def update_menu_item(repo: MenuRepository, item_id: int, data: MenuItemUpdate) -> MenuItem:
    item = repo.update(get_menu_item(repo, item_id), data)
    logger.info("Menu item updated", item_id=item.id, fields=sorted(data.model_fields_set))
    return item


def delete_menu_item(repo: MenuRepository, item_id: int) -> None:
    if repo.delete(item_id) is None:
        raise EntityNotFoundException("Menu item not found", {"id": item_id})
    logger.info("Menu item deleted", item_id=item_id)


def move_menu_item(repo: MenuRepository, item_id: int, direction: str) -> List[MenuItem]:
    """Swap an item with its neighbour; both orders change together or not at all."""
    get_menu_item(repo, item_id)
    items = repo.swap_with_neighbor(item_id, direction)
    logger.info("Menu item moved", item_id=item_id, direction=direction)
    return items


def reorder_menu(repo: MenuRepository, ids: List[int]) -> List[MenuItem]:
    current = {item.id for item in repo.list()}
    if len(ids) != len(set(ids)) or set(ids) != current:
        raise BadRequestException(
            "Reorder must list every menu item exactly once",
            {"expected": sorted(current), "received": ids},
        )
    items = repo.apply_sequence(ids)
    logger.info("Menu reordered", ids=ids)
    return items
