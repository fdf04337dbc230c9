"""Menu API routes — CRUD plus move/reorder."""

from typing import List

from fastapi import APIRouter, Depends, status

from app.application.services.menu_service import (
    create_menu_item,
    delete_menu_item,
    get_menu_item,
    list_menu_items,
    move_menu_item,
    reorder_menu,
    update_menu_item,
)
from app.domain.models.user import User
from app.domain.repositories.menu_repository import MenuRepository
from app.domain.schemas.menu import (
    MenuItemCreate,
    MenuItemRead,
    MenuItemUpdate,
    MenuMoveRequest,
    MenuReorderRequest,
)
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_menu_repository

router = APIRouter(prefix="/api/menu", tags=["Menu"])


@router.get("", response_model=List[MenuItemRead])
def list_all(repo: MenuRepository = Depends(get_menu_repository)):
    return list_menu_items(repo)


# Registered before /{item_id} so "reorder" is not parsed as an id
@router.put("/reorder", response_model=List[MenuItemRead])
def reorder(
    body: MenuReorderRequest,
    repo: MenuRepository = Depends(get_menu_repository),
    admin: User = Depends(require_admin),
):
    return reorder_menu(repo, body.ids)


@router.get("/{item_id}", response_model=MenuItemRead)
def get_one(item_id: int, repo: MenuRepository = Depends(get_menu_repository)):
    return get_menu_item(repo, item_id)


@router.post("", response_model=MenuItemRead, status_code=status.HTTP_201_CREATED)
def create(
    body: MenuItemCreate,
    repo: MenuRepository = Depends(get_menu_repository),
    admin: User = Depends(require_admin),
):
    return create_menu_item(repo, body)


@router.put("/{item_id}", response_model=MenuItemRead)
def update(
    item_id: int,
    body: MenuItemUpdate,
    repo: MenuRepository = Depends(get_menu_repository),
    admin: User = Depends(require_admin),
):
    return update_menu_item(repo, item_id, body)


@router.post("/{item_id}/move", response_model=List[MenuItemRead])
def move(
    item_id: int,
    body: MenuMoveRequest,
    repo: MenuRepository = Depends(get_menu_repository),
    admin: User = Depends(require_admin),
):
    return move_menu_item(repo, item_id, body.direction)


@router.delete("/{item_id}")
def delete(
    item_id: int,
    repo: MenuRepository = Depends(get_menu_repository),
    admin: User = Depends(require_admin),
):
    delete_menu_item(repo, item_id)
    return {"success": True}
