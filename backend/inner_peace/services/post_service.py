"""
Inner Peace Backend — Post Service (Business Logic)
====================================================

What:  Every operation the API exposes over posts and suggestions:
       list, create post, create suggestion, delete post, init database.
How:   Validates input, runs the SQL through the ORM on the request's
       AsyncSession, and shapes rows into response schemas.
Who:   Called by route handlers; raises application exceptions that the
       global handlers in main.py turn into HTTP responses.

Error Handling Strategy:
    Store failures are caught where the statement was issued and re-raised
    as DatabaseError carrying the driver's own message. Each write is one
    transaction: committed on success, rolled back on failure.

PostService is stateless; the session and the admin secret are passed in
on every call.
"""

import logging
import re
from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inner_peace.database import Base
from inner_peace.exceptions import (
    DatabaseError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from inner_peace.models import Post, Suggestion
from inner_peace.schemas.post import (
    PostCreate,
    PostResponse,
    SuggestionCreate,
    SuggestionResponse,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_post_id(raw: str) -> Optional[int]:
    """
    Parse a post id path segment using leading-integer semantics.

    "12" → 12, "12abc" → 12, "abc" → None.
    """
    match = _LEADING_INT.match(raw or "")
    if match is None:
        return None
    return int(match.group(1))


def _store_message(exc: SQLAlchemyError) -> str:
    """The driver's message when there is one, else SQLAlchemy's."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _require_author_and_content(author: Optional[str], content: Optional[str]) -> None:
    if not author or not content:
        raise ValidationError(
            message="Author and content required",
            context={"author_present": bool(author), "content_present": bool(content)},
        )


class PostService:
    """
    Business logic layer for posts and suggestions.

    Responsibilities:
        - list_posts(): all posts newest-first, suggestions oldest-first
        - create_post(): validated insert
        - create_suggestion(): validated insert under a post id
        - delete_post(): admin-checked delete with cascade
        - init_db(): idempotent table creation
    """

    async def list_posts(self, db: AsyncSession) -> List[PostResponse]:
        """
        Return every post with its suggestions embedded.

        Query plan:
            SELECT * FROM posts ORDER BY timestamp DESC, id DESC
            SELECT * FROM suggestions WHERE post_id IN (...)
                ORDER BY timestamp ASC, id ASC
        The second statement is issued once by selectinload, not per post.

        Raises:
            DatabaseError: any store failure (→ 500)
        """
        try:
            result = await db.execute(
                select(Post)
                .options(selectinload(Post.suggestions))
                .order_by(desc(Post.timestamp), desc(Post.id))
            )
            posts = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing posts: %s", _store_message(e), exc_info=True)
            raise DatabaseError(
                message=_store_message(e),
                context={"operation": "list_posts"},
            )

        return [PostResponse.model_validate(post) for post in posts]

    async def create_post(self, db: AsyncSession, payload: PostCreate) -> PostResponse:
        """
        Insert a post and return it with an empty suggestions list.

        Raises:
            ValidationError: author or content missing/empty (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        _require_author_and_content(payload.author, payload.content)

        post = Post(author=payload.author, content=payload.content)
        try:
            db.add(post)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error creating post: %s", _store_message(e))
            raise DatabaseError(
                message=_store_message(e),
                context={"operation": "create_post"},
            )

        logger.info("Post %s created by %s", post.id, post.author)
        return PostResponse(
            id=post.id,
            author=post.author,
            content=post.content,
            timestamp=post.timestamp,
            suggestions=[],
        )

    async def create_suggestion(
        self,
        db: AsyncSession,
        raw_post_id: str,
        payload: SuggestionCreate,
    ) -> SuggestionResponse:
        """
        Insert a suggestion under the post named by `raw_post_id`.

        The post's existence is not checked first; the foreign key rejects
        orphans and that rejection is reported like any other store error.

        Raises:
            ValidationError: author or content missing/empty (→ 400)
            DatabaseError: unusable post id or insert failed (→ 500)
        """
        _require_author_and_content(payload.author, payload.content)

        post_id = parse_post_id(raw_post_id)
        if post_id is None:
            raise DatabaseError(
                message=f'invalid input syntax for type integer: "{raw_post_id}"',
                context={"operation": "create_suggestion", "post_id": raw_post_id},
            )

        suggestion = Suggestion(
            post_id=post_id,
            author=payload.author,
            content=payload.content,
            is_admin=bool(payload.is_admin),
        )
        try:
            db.add(suggestion)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(
                "Database error creating suggestion on post %s: %s",
                post_id, _store_message(e),
            )
            raise DatabaseError(
                message=_store_message(e),
                context={"operation": "create_suggestion", "post_id": post_id},
            )

        logger.info(
            "Suggestion %s created on post %s (admin=%s)",
            suggestion.id, post_id, suggestion.is_admin,
        )
        return SuggestionResponse.model_validate(suggestion)

    async def delete_post(
        self,
        db: AsyncSession,
        raw_post_id: str,
        admin_password: Optional[str],
        expected_password: Optional[str],
    ) -> None:
        """
        Delete a post (and, through the store's cascade, its suggestions).

        Authorization is an exact string comparison against the configured
        secret. No secret configured (None) means nothing is authorized; an
        empty configured secret is compared like any other value.

        Raises:
            UnauthorizedError: secret missing or wrong (→ 403)
            NotFoundError: no post with that id (→ 404)
            DatabaseError: delete failed (→ 500)
        """
        if expected_password is None or admin_password != expected_password:
            logger.warning("Rejected delete of post %s: bad admin password", raw_post_id)
            raise UnauthorizedError(context={"post_id": raw_post_id})

        post_id = parse_post_id(raw_post_id)
        if post_id is None:
            raise NotFoundError(resource="Post", resource_id=raw_post_id)

        try:
            result = await db.execute(delete(Post).where(Post.id == post_id))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error deleting post %s: %s", post_id, _store_message(e))
            raise DatabaseError(
                message=_store_message(e),
                context={"operation": "delete_post", "post_id": post_id},
            )

        if result.rowcount == 0:
            raise NotFoundError(resource="Post", resource_id=str(post_id))

        logger.info("Post %s deleted", post_id)

    async def init_db(self, db: AsyncSession) -> None:
        """
        Create `posts` and `suggestions` if they do not exist yet.

        metadata.create_all checks for each table first, so repeated calls
        are no-ops.

        Raises:
            DatabaseError: DDL failed or the store is unreachable (→ 500)
        """
        try:
            connection = await db.connection()
            await connection.run_sync(Base.metadata.create_all)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database initialization failed: %s", _store_message(e))
            raise DatabaseError(
                message=_store_message(e),
                context={"operation": "init_db"},
            )

        logger.info("Database initialized")


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
