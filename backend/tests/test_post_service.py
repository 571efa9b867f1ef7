"""
Inner Peace Backend — Post Service Unit Tests
==============================================

What:  Tests for PostService business rules against a mocked session.
How:   No database; the AsyncMock session records what the service asked for.

What we test:
    ✅ Required-field validation happens before any write
    ✅ isAdmin defaulting
    ✅ Admin secret comparison and its failure modes
    ✅ Store errors surface as DatabaseError with the driver message
    ✅ Post id parsing
"""

import pytest
from datetime import datetime
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from inner_peace.exceptions import (
    DatabaseError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from inner_peace.schemas.post import PostCreate, SuggestionCreate
from inner_peace.services.post_service import PostService, parse_post_id


def _assign_identity(obj):
    """Stands in for the INSERT assigning id and timestamp."""
    obj.id = 7
    obj.timestamp = datetime(2024, 1, 15, 12, 0, 0)


class TestParsePostId:

    def test_plain_integer(self):
        assert parse_post_id("42") == 42

    def test_leading_integer_wins(self):
        """Trailing junk is ignored, the way the client's ids have always been read."""
        assert parse_post_id("12abc") == 12

    def test_non_numeric(self):
        assert parse_post_id("abc") is None

    def test_empty(self):
        assert parse_post_id("") is None


class TestCreatePost:

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_create_post_success(self, mock_db_session):
        mock_db_session.add = MagicMock(side_effect=_assign_identity)

        result = await self.service.create_post(
            mock_db_session, PostCreate(author="alice", content="hi")
        )

        assert result.id == 7
        assert result.author == "alice"
        assert result.content == "hi"
        assert result.suggestions == []
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "author,content",
        [(None, "hi"), ("alice", None), ("", "hi"), ("alice", ""), (None, None)],
    )
    async def test_missing_fields_rejected_before_insert(self, mock_db_session, author, content):
        with pytest.raises(ValidationError, match="Author and content required"):
            await self.service.create_post(
                mock_db_session, PostCreate(author=author, content=content)
            )
        mock_db_session.add.assert_not_called()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_error_exposes_driver_message(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError(
            "INSERT INTO posts ...", {}, Exception("connection refused")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_post(
                mock_db_session, PostCreate(author="alice", content="hi")
            )

        assert exc_info.value.message == "connection refused"
        mock_db_session.rollback.assert_awaited_once()


class TestCreateSuggestion:

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_is_admin_defaults_to_false(self, mock_db_session):
        mock_db_session.add = MagicMock(side_effect=_assign_identity)

        result = await self.service.create_suggestion(
            mock_db_session, "3", SuggestionCreate(author="bob", content="nice")
        )

        added = mock_db_session.add.call_args.args[0]
        assert added.post_id == 3
        assert added.is_admin is False
        assert result.is_admin is False
        assert result.post_id == 3

    @pytest.mark.asyncio
    async def test_is_admin_accepts_camel_case_key(self, mock_db_session):
        mock_db_session.add = MagicMock(side_effect=_assign_identity)

        payload = SuggestionCreate.model_validate(
            {"author": "mod", "content": "welcome", "isAdmin": True}
        )
        result = await self.service.create_suggestion(mock_db_session, "3", payload)

        assert result.is_admin is True
        assert result.model_dump(by_alias=True)["isAdmin"] is True

    @pytest.mark.asyncio
    async def test_missing_content_rejected(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.create_suggestion(
                mock_db_session, "3", SuggestionCreate(author="bob")
            )
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_numeric_post_id_is_a_store_error(self, mock_db_session):
        with pytest.raises(DatabaseError, match="abc"):
            await self.service.create_suggestion(
                mock_db_session, "abc", SuggestionCreate(author="bob", content="nice")
            )
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_key_violation_is_a_store_error(self, mock_db_session):
        mock_db_session.commit.side_effect = IntegrityError(
            "INSERT INTO suggestions ...", {}, Exception("FOREIGN KEY constraint failed")
        )

        with pytest.raises(DatabaseError, match="FOREIGN KEY constraint failed"):
            await self.service.create_suggestion(
                mock_db_session, "999", SuggestionCreate(author="bob", content="nice")
            )
        mock_db_session.rollback.assert_awaited_once()


class TestDeletePost:

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_wrong_password_never_touches_store(self, mock_db_session):
        with pytest.raises(UnauthorizedError):
            await self.service.delete_post(mock_db_session, "1", "wrong", "secret")
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_password_rejected(self, mock_db_session):
        with pytest.raises(UnauthorizedError):
            await self.service.delete_post(mock_db_session, "1", None, "secret")

    @pytest.mark.asyncio
    async def test_unconfigured_secret_rejects_everything(self, mock_db_session):
        for supplied in (None, "", "anything"):
            with pytest.raises(UnauthorizedError):
                await self.service.delete_post(mock_db_session, "1", supplied, None)
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_secret_is_compared_plainly(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        with pytest.raises(UnauthorizedError):
            await self.service.delete_post(mock_db_session, "1", None, "")

        await self.service.delete_post(mock_db_session, "1", "", "")
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_comparison_is_exact(self, mock_db_session):
        with pytest.raises(UnauthorizedError):
            await self.service.delete_post(mock_db_session, "1", "Secret", "secret")
        with pytest.raises(UnauthorizedError):
            await self.service.delete_post(mock_db_session, "1", "secret ", "secret")

    @pytest.mark.asyncio
    async def test_no_matching_row(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        with pytest.raises(NotFoundError, match="Post not found"):
            await self.service.delete_post(mock_db_session, "1", "secret", "secret")

    @pytest.mark.asyncio
    async def test_unparseable_id_matches_nothing(self, mock_db_session):
        with pytest.raises(NotFoundError):
            await self.service.delete_post(mock_db_session, "abc", "secret", "secret")
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        await self.service.delete_post(mock_db_session, "1", "secret", "secret")

        mock_db_session.execute.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()


class TestInitDb:

    def setup_method(self):
        self.service = PostService()

    @pytest.mark.asyncio
    async def test_unreachable_store(self, mock_db_session):
        mock_db_session.connection.side_effect = OperationalError(
            "SELECT 1", {}, Exception("could not connect to server")
        )

        with pytest.raises(DatabaseError, match="could not connect to server"):
            await self.service.init_db(mock_db_session)
