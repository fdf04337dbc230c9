"""News API routes — filtered listing, related posts, admin writes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from app.application.services.news_service import (
    create_news_post,
    delete_news_post,
    get_news_post,
    get_related_posts,
    list_categories,
    list_news,
    update_news_post,
)
from app.domain.models.user import User
from app.domain.repositories.news_repository import NewsRepository
from app.domain.schemas.news import NewsPostCreate, NewsPostRead, NewsPostUpdate
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_news_repository

router = APIRouter(prefix="/api/news", tags=["News"])


@router.get("", response_model=List[NewsPostRead])
def list_all(
    category: Optional[str] = None,
    q: Optional[str] = None,
    repo: NewsRepository = Depends(get_news_repository),
):
    return list_news(repo, category=category, q=q)


@router.get("/categories", response_model=List[str])
def categories():
    return list_categories()


@router.get("/{post_id}", response_model=NewsPostRead)
def get_one(post_id: int, repo: NewsRepository = Depends(get_news_repository)):
    return get_news_post(repo, post_id)


@router.get("/{post_id}/related", response_model=List[NewsPostRead])
def related(post_id: int, repo: NewsRepository = Depends(get_news_repository)):
    return get_related_posts(repo, post_id)


@router.post("", response_model=NewsPostRead, status_code=status.HTTP_201_CREATED)
def create(
    body: NewsPostCreate,
    repo: NewsRepository = Depends(get_news_repository),
    admin: User = Depends(require_admin),
):
    return create_news_post(repo, body)


@router.put("/{post_id}", response_model=NewsPostRead)
def update(
    post_id: int,
    body: NewsPostUpdate,
    repo: NewsRepository = Depends(get_news_repository),
    admin: User = Depends(require_admin),
):
    return update_news_post(repo, post_id, body)


@router.delete("/{post_id}")
def delete(
    post_id: int,
    repo: NewsRepository = Depends(get_news_repository),
    admin: User = Depends(require_admin),
):
    delete_news_post(repo, post_id)
    return {"success": True}
