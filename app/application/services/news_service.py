"""News service — admin CRUD and public filtering for news posts."""

from typing import List, Optional

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.models.news_post import NEWS_CATEGORIES, NewsPost
from app.domain.repositories.news_repository import NewsRepository
from app.domain.schemas.news import NewsFilter, NewsPostCreate, NewsPostUpdate

logger = structlog.get_logger(__name__)


def list_categories() -> List[str]:
    return list(NEWS_CATEGORIES)


def list_news(repo: NewsRepository, category: Optional[str] = None, q: Optional[str] = None) -> List[NewsPost]:
    if not category and not q:
        return repo.list()
    return repo.get_with_filters(NewsFilter(category=category, q=q))


def get_news_post(repo: NewsRepository, post_id: int) -> NewsPost:
    post = repo.get_by_id(post_id)
    if post is None:
        raise EntityNotFoundException("News post not found", {"id": post_id})
    return post


def get_related_posts(repo: NewsRepository, post_id: int, limit: int = 3) -> List[NewsPost]:
    return repo.get_related(get_news_post(repo, post_id), limit=limit)


def create_news_post(repo: NewsRepository, data: NewsPostCreate) -> NewsPost:
    post = repo.create(data)
    logger.info("News post created", post_id=post.id, category=post.category)
    return post


def update_news_post(repo: NewsRepository, post_id: int, data: NewsPostUpdate) -> NewsPost:
    post = repo.update(get_news_post(repo, post_id), data)
    logger.info("News post updated", post_id=post.id, fields=sorted(data.model_fields_set))
    return post


def delete_news_post(repo: NewsRepository, post_id: int) -> None:
    if repo.delete(post_id) is None:
        raise EntityNotFoundException("News post not found", {"id": post_id})
    logger.info("News post deleted", post_id=post_id)
