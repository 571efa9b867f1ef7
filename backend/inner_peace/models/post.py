"""
Inner Peace Backend — Post SQLAlchemy Model
============================================

What:  ORM model representing the `posts` table.
Who:   Used by PostService for create/list/delete, by `/init-db`
       (metadata.create_all) and by Alembic.

Table:
    posts(id SERIAL PK, author VARCHAR(100) NOT NULL, content TEXT NOT NULL,
          timestamp TIMESTAMP DEFAULT now())

Timestamps are stored as naive UTC. The Python-side default keeps
sub-second resolution on stores whose CURRENT_TIMESTAMP is coarse.
"""

from datetime import datetime, timezone
from typing import List, TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inner_peace.database import Base

if TYPE_CHECKING:
    from inner_peace.models.suggestion import Suggestion


def utcnow() -> datetime:
    """Current UTC time without tzinfo, matching the TIMESTAMP column type."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Post(Base):
    """
    A top-level user-authored item.

    Lifecycle:
        1. Created by POST /posts
        2. Never updated in place
        3. Deleted by DELETE /posts/{id}; the store cascades to its suggestions

    Query Patterns:
        - List: ORDER BY timestamp DESC, id DESC with suggestions selectin-loaded
        - Delete: DELETE ... WHERE id = :id
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    author: Mapped[str] = mapped_column(String(100), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=utcnow,
        server_default=func.now(),
    )

    # Oldest-first; id breaks ties between suggestions created in the same instant.
    # passive_deletes: the ON DELETE CASCADE in the store removes children.
    suggestions: Mapped[List["Suggestion"]] = relationship(
        back_populates="post",
        order_by="[Suggestion.timestamp, Suggestion.id]",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author='{self.author}', timestamp='{self.timestamp}')>"
