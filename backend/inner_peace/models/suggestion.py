"""
Inner Peace Backend — Suggestion SQLAlchemy Model
==================================================

What:  ORM model representing the `suggestions` table, a reply attached to
       exactly one post and optionally flagged as admin-authored.

Table:
    suggestions(id SERIAL PK,
                post_id INTEGER REFERENCES posts(id) ON DELETE CASCADE,
                author VARCHAR(100) NOT NULL, content TEXT NOT NULL,
                is_admin BOOLEAN DEFAULT false,
                timestamp TIMESTAMP DEFAULT now())
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inner_peace.database import Base
from inner_peace.models.post import utcnow

if TYPE_CHECKING:
    from inner_peace.models.post import Post


class Suggestion(Base):
    """
    A reply-like item on a post.

    Created only by POST /posts/{id}/suggestions; destroyed only through
    its parent's cascade delete.
    """

    __tablename__ = "suggestions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    post_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        index=True,
    )

    author: Mapped[str] = mapped_column(String(100), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    is_admin: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=utcnow,
        server_default=func.now(),
    )

    post: Mapped["Post"] = relationship(back_populates="suggestions")

    def __repr__(self) -> str:
        return (
            f"<Suggestion(id={self.id}, post_id={self.post_id}, "
            f"is_admin={self.is_admin})>"
        )
