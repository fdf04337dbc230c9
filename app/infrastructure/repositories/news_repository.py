"""
SQLAlchemy Implementation of News Repository.
"""

from typing import List

from sqlalchemy import func, or_

from app.domain.models.news_post import NewsPost
from app.domain.repositories.news_repository import NewsRepository
from app.domain.schemas.news import NewsFilter
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyNewsRepository(SQLAlchemyRepository[NewsPost], NewsRepository):
    """NewsPost repository implementation using SQLAlchemy."""

    def _ordering(self) -> tuple:
        return (NewsPost.published_at.desc(), NewsPost.id.desc())

    def get_with_filters(self, filters: NewsFilter) -> List[NewsPost]:
        query = self.db.query(NewsPost)

        if filters.category and filters.category != "all":
            query = query.filter(NewsPost.category == filters.category)
        if filters.q and filters.q.strip():
            pattern = f"%{filters.q.strip().lower()}%"
            query = query.filter(
                or_(
                    func.lower(NewsPost.title).like(pattern),
                    func.lower(NewsPost.content).like(pattern),
                    func.lower(NewsPost.category).like(pattern),
                )
            )

        return query.order_by(*self._ordering()).all()

    def get_related(self, post: NewsPost, limit: int = 3) -> List[NewsPost]:
        return (
            self.db.query(NewsPost)
            .filter(NewsPost.category == post.category, NewsPost.id != post.id)
            .order_by(*self._ordering())
            .limit(limit)
            .all()
        )
