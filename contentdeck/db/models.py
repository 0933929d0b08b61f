"""SQLAlchemy model for the flat content table."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, Text, func

from .session import Base


class Content(Base):
    __tablename__ = "content"
    # Keeps SQLite from handing out the id of a deleted last row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "created_at": self.created_at,
        }
