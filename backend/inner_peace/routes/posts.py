"""
Inner Peace Backend — Posts Route Handlers
===========================================

What:  HTTP surface for posts and suggestions.
How:   Extracts path/query/body, delegates to PostService, sets status codes.
Who:   Called by the client app's feed and moderation screens.

Routes:
    GET    /posts                      list posts with nested suggestions
    POST   /posts                      create a post
    POST   /posts/{post_id}/suggestions create a suggestion on a post
    DELETE /posts/{post_id}            delete a post (adminPassword query param)

`post_id` is taken as a raw string; the service parses it, so a
non-numeric id reaches the store rules instead of failing schema validation.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from inner_peace.config import Settings, get_settings
from inner_peace.database import get_db_session
from inner_peace.schemas.post import (
    ErrorResponse,
    PostCreate,
    PostResponse,
    SuccessResponse,
    SuggestionCreate,
    SuggestionResponse,
)
from inner_peace.services.post_service import post_service

router = APIRouter(tags=["Posts"])


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List posts with their suggestions",
    description=(
        "Returns every post newest-first. Each post embeds its suggestions "
        "oldest-first. Timestamps are ISO 8601 UTC strings."
    ),
)
async def list_posts(
    db: AsyncSession = Depends(get_db_session),
) -> List[PostResponse]:
    return await post_service.list_posts(db)


@router.post(
    "/posts",
    status_code=201,
    response_model=PostResponse,
    responses={
        400: {"description": "Author or content missing", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a post",
)
async def create_post(
    payload: Optional[PostCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    """An absent body is treated like a body with no fields (→ 400)."""
    return await post_service.create_post(db, payload or PostCreate())


@router.post(
    "/posts/{post_id}/suggestions",
    status_code=201,
    response_model=SuggestionResponse,
    responses={
        400: {"description": "Author or content missing", "model": ErrorResponse},
        500: {"description": "Store error, including an unknown post", "model": ErrorResponse},
    },
    summary="Add a suggestion to a post",
    description=(
        "Creates a suggestion under the given post. `isAdmin` defaults to false. "
        "The post is not looked up first; the foreign key rejects unknown posts."
    ),
)
async def create_suggestion(
    post_id: str,
    payload: Optional[SuggestionCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> SuggestionResponse:
    return await post_service.create_suggestion(db, post_id, payload or SuggestionCreate())


@router.delete(
    "/posts/{post_id}",
    response_model=SuccessResponse,
    responses={
        403: {"description": "Wrong or missing admin password", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete a post and its suggestions",
)
async def delete_post(
    post_id: str,
    admin_password: Optional[str] = Query(
        default=None,
        alias="adminPassword",
        description="Shared admin secret",
    ),
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> SuccessResponse:
    await post_service.delete_post(
        db,
        raw_post_id=post_id,
        admin_password=admin_password,
        expected_password=settings.admin_password,
    )
    return SuccessResponse(success=True)
