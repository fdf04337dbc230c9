"""Navigation menu entries."""

from sqlalchemy import Column, Integer, String, Boolean

from app.infrastructure.database import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    path = Column(String(300), nullable=False)
    # Display position; not unique, ties fall back to id
    order = Column(Integer, nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<MenuItem {self.order}: {self.title}>"
