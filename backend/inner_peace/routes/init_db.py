"""
Inner Peace Backend — Database Initialization Route
====================================================

What:  /init-db creates the `posts` and `suggestions` tables when absent.
How:   Answers every HTTP method (HEAD, TRACE and non-standard ones
       included) through AnyMethodRoute, then delegates to
       PostService.init_db.
When:  Run once after provisioning a fresh database (or any time after;
       it is idempotent).
"""

from typing import Any, Dict, Tuple

from fastapi import APIRouter, Depends
from fastapi.routing import APIRoute
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from inner_peace.database import get_db_session
from inner_peace.schemas.post import ErrorResponse, MessageResponse
from inner_peace.services.post_service import post_service

class AnyMethodRoute(APIRoute):
    """
    APIRoute that accepts any request method on its path.

    The declared `methods` only feed the OpenAPI document; matching and
    dispatch ignore them.
    """

    def matches(self, scope: Scope) -> Tuple[Match, Dict[str, Any]]:
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


router = APIRouter(tags=["Database"], route_class=AnyMethodRoute)


@router.api_route(
    "/init-db",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_model=MessageResponse,
    responses={500: {"description": "Table creation failed", "model": ErrorResponse}},
    summary="Create tables if they do not exist",
)
async def init_db(db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    await post_service.init_db(db)
    return MessageResponse(message="Database initialized")
