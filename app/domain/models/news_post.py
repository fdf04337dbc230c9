"""News post domain model — maps to the 'news_posts' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from app.infrastructure.database import Base

NEWS_CATEGORIES = (
    "News",
    "Success Story",
    "Announcement",
    "Event Recap",
    "Community Spotlight",
)


class NewsPost(Base):
    __tablename__ = "news_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    image_url = Column(String(1024), nullable=True)
    author_name = Column(String(200), nullable=False)
    author_image_url = Column(String(1024), nullable=True)
    published_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<NewsPost {self.id} - {self.title}>"
