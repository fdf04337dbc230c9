"""Pydantic schemas for navigation menu items."""

from typing import Literal, Optional

from pydantic import Field, model_validator

from app.domain.schemas.base import CamelModel, RequiredStr, require_non_null


class MenuItemCreate(CamelModel):
    title: RequiredStr
    path: RequiredStr
    order: int
    is_active: bool = True


class MenuItemUpdate(CamelModel):
    title: Optional[RequiredStr] = None
    path: Optional[RequiredStr] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def _required_not_null(self):
        return require_non_null(self, "title", "path", "order", "is_active")


class MenuItemRead(CamelModel):
    id: int
    title: str
    path: str
    order: int
    is_active: bool


class MenuMoveRequest(CamelModel):
    direction: Literal["up", "down"]


class MenuReorderRequest(CamelModel):
    ids: list[int] = Field(min_length=1)
