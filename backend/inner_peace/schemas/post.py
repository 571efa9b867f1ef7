"""
Inner Peace Backend — Pydantic Request/Response Schemas
========================================================

What:  Pydantic models defining the API contract with the client app.
How:   FastAPI validates request bodies against the request models and
       serializes the response models; both feed the OpenAPI docs.

Wire conventions:
    - Timestamps are ISO-8601 UTC with milliseconds and a `Z` suffix
      (2024-01-15T12:00:00.000Z).
    - The suggestion admin flag is exposed as `isAdmin`.
    - Errors are always `{"error": "<message>"}`.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer


def to_iso8601(value: datetime) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision.

    Naive values are taken to be UTC, which is how the store keeps them.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(BaseModel):
    """
    Body of POST /posts.

    Both fields are optional at the schema level so that a missing field
    reaches the service and produces the API's own 400 message instead of
    a schema error.
    """
    author: Optional[str] = Field(default=None, description="Display name of the author")
    content: Optional[str] = Field(default=None, description="Post body")


class SuggestionCreate(BaseModel):
    """Body of POST /posts/{id}/suggestions."""
    author: Optional[str] = Field(default=None, description="Display name of the author")
    content: Optional[str] = Field(default=None, description="Suggestion body")
    is_admin: Optional[bool] = Field(
        default=None,
        alias="isAdmin",
        description="Marks an admin-authored suggestion (defaults to false)",
    )

    model_config = {"populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class SuggestionResponse(BaseModel):
    id: int = Field(description="Suggestion identifier")
    post_id: Optional[int] = Field(description="Identifier of the parent post")
    author: str
    content: str
    is_admin: bool = Field(alias="isAdmin", description="Admin-authored flag")
    timestamp: datetime = Field(description="Creation time (ISO 8601, UTC)")

    model_config = {"from_attributes": True, "populate_by_name": True}

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return to_iso8601(value)


class PostResponse(BaseModel):
    """
    A post with its suggestions embedded oldest-first.

    Returned by GET /posts (as array items) and POST /posts (with an empty
    `suggestions` list).
    """
    id: int = Field(description="Post identifier")
    author: str
    content: str
    timestamp: datetime = Field(description="Creation time (ISO 8601, UTC)")
    suggestions: List[SuggestionResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return to_iso8601(value)


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True


class HealthResponse(BaseModel):
    status: str = Field(default="ok", description="Always 'ok' while the process serves requests")


class ErrorResponse(BaseModel):
    """
    Error format for every non-2xx JSON response.

    Example:
        {"error": "Author and content required"}
    """
    error: str = Field(description="Human-readable error description")
