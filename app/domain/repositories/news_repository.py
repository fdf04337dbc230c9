"""
News Repository Interface.
"""

from typing import List

from app.domain.repositories.base import BaseRepository
from app.domain.models.news_post import NewsPost
from app.domain.schemas.news import NewsFilter


class NewsRepository(BaseRepository[NewsPost]):
    """Interface for NewsPost-specific operations."""

    def get_with_filters(self, filters: NewsFilter) -> List[NewsPost]:
        """Posts matching category and free-text filters, newest first."""
        ...

    def get_related(self, post: NewsPost, limit: int = 3) -> List[NewsPost]:
        """Other posts sharing the post's category."""
        ...
