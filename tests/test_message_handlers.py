"""
Unit tests for the message command and query handlers.

Mocked repositories pin down call order; the in-memory repository covers
end-to-end business scenarios.

Run with: pytest tests/test_message_handlers.py -v
"""

import pytest
from unittest.mock import AsyncMock
from message_api.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from message_api.application.queries.messages import (
    GetMessageHandler,
    GetMessageQuery,
    ListMessagesHandler,
    ListMessagesQuery,
)
from message_api.application.common.results import (
    Conflict,
    Created,
    Deleted,
    NotFound,
    Updated,
    ValidationError,
)
from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.value_objects import MessageId

VALID_CONTENT = "This is valid content with more than 10 chars."


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def repo_mock():
    repo = AsyncMock(spec=MessageRepository)
    repo.get_by_id.return_value = None
    repo.get_by_title.return_value = None
    repo.delete.return_value = True
    return repo


@pytest.fixture
def active_message(org_id):
    return Message.create(org_id, "Existing Title", VALID_CONTENT)


@pytest.fixture
def inactive_message(active_message):
    active_message.is_active = False
    return active_message


# =============================================================================
# CREATE
# =============================================================================


class TestCreateMessage:
    @pytest.mark.asyncio
    async def test_returns_created_when_valid(self, repo_mock, org_id):
        handler = CreateMessageHandler(repo_mock)

        result = await handler.execute(
            CreateMessageCommand(org_id, "Test Message", VALID_CONTENT)
        )

        assert isinstance(result, Created)
        assert result.value.is_active is True
        assert result.value.id.value
        assert result.value.organization_id == org_id
        assert result.value.updated_at is None
        repo_mock.insert.assert_awaited_once_with(result.value)

    @pytest.mark.asyncio
    async def test_returns_conflict_when_title_exists(
        self, repo_mock, org_id, active_message
    ):
        repo_mock.get_by_title.return_value = active_message
        handler = CreateMessageHandler(repo_mock)

        result = await handler.execute(
            CreateMessageCommand(org_id, "Existing Title", VALID_CONTENT)
        )

        assert isinstance(result, Conflict)
        assert "already exists" in result.reason
        repo_mock.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_returns_validation_error_when_content_invalid(self, repo_mock, org_id):
        handler = CreateMessageHandler(repo_mock)

        result = await handler.execute(
            CreateMessageCommand(org_id, "Valid Title", "short")
        )

        assert isinstance(result, ValidationError)
        assert set(result.errors) == {"content"}

    @pytest.mark.asyncio
    async def test_reports_every_invalid_field(self, repo_mock, org_id):
        handler = CreateMessageHandler(repo_mock)

        result = await handler.execute(CreateMessageCommand(org_id, "ab", "short"))

        assert isinstance(result, ValidationError)
        assert set(result.errors) == {"title", "content"}

    @pytest.mark.asyncio
    async def test_validation_runs_before_uniqueness_check(self, repo_mock, org_id):
        handler = CreateMessageHandler(repo_mock)

        await handler.execute(CreateMessageCommand(org_id, None, None))

        repo_mock.get_by_title.assert_not_awaited()


# =============================================================================
# UPDATE
# =============================================================================


class TestUpdateMessage:
    @pytest.mark.asyncio
    async def test_returns_not_found_when_message_missing(self, repo_mock, org_id):
        handler = UpdateMessageHandler(repo_mock)

        result = await handler.execute(
            UpdateMessageCommand(org_id, MessageId.generate(), "New Title", VALID_CONTENT)
        )

        assert result == NotFound("Message not found.")

    @pytest.mark.asyncio
    async def test_inactive_message_conflicts_even_with_invalid_payload(
        self, repo_mock, org_id, inactive_message
    ):
        repo_mock.get_by_id.return_value = inactive_message
        handler = UpdateMessageHandler(repo_mock)

        result = await handler.execute(
            UpdateMessageCommand(org_id, inactive_message.id, "x", "y")
        )

        assert result == Conflict("Cannot update an inactive message.")
        repo_mock.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_returns_validation_error(self, repo_mock, org_id, active_message):
        repo_mock.get_by_id.return_value = active_message
        handler = UpdateMessageHandler(repo_mock)

        result = await handler.execute(
            UpdateMessageCommand(org_id, active_message.id, "", "short")
        )

        assert isinstance(result, ValidationError)
        assert set(result.errors) == {"title", "content"}

    @pytest.mark.asyncio
    async def test_unchanged_title_skips_uniqueness_check(
        self, repo_mock, org_id, active_message
    ):
        repo_mock.get_by_id.return_value = active_message
        handler = UpdateMessageHandler(repo_mock)

        result = await handler.execute(
            UpdateMessageCommand(
                org_id, active_message.id, "Existing Title", "Brand new content body"
            )
        )

        assert isinstance(result, Updated)
        repo_mock.get_by_title.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_changed_title_taken_returns_conflict(
        self, repo_mock, org_id, active_message
    ):
        repo_mock.get_by_id.return_value = active_message
        repo_mock.get_by_title.return_value = Message.create(
            org_id, "Taken Title", VALID_CONTENT
        )
        handler = UpdateMessageHandler(repo_mock)

        result = await handler.execute(
            UpdateMessageCommand(org_id, active_message.id, "Taken Title", VALID_CONTENT)
        )

        assert isinstance(result, Conflict)
        assert "already exists" in result.reason
        repo_mock.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_applies_changes_and_sets_updated_at(
        self, repo_mock, org_id, active_message
    ):
        repo_mock.get_by_id.return_value = active_message
        handler = UpdateMessageHandler(repo_mock)

        result = await handler.execute(
            UpdateMessageCommand(
                org_id,
                active_message.id,
                "Renamed Title",
                "Revised content body",
                is_active=False,
            )
        )

        assert isinstance(result, Updated)
        saved = repo_mock.update.await_args.args[0]
        assert saved.title == "Renamed Title"
        assert saved.content == "Revised content body"
        assert saved.is_active is False
        assert saved.updated_at is not None


# =============================================================================
# DELETE
# =============================================================================


class TestDeleteMessage:
    @pytest.mark.asyncio
    async def test_returns_not_found_when_message_missing(self, repo_mock, org_id):
        handler = DeleteMessageHandler(repo_mock)

        result = await handler.execute(DeleteMessageCommand(org_id, MessageId.generate()))

        assert isinstance(result, NotFound)
        repo_mock.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_message_returns_conflict(
        self, repo_mock, org_id, inactive_message
    ):
        repo_mock.get_by_id.return_value = inactive_message
        handler = DeleteMessageHandler(repo_mock)

        result = await handler.execute(DeleteMessageCommand(org_id, inactive_message.id))

        assert result == Conflict("Cannot delete an inactive message.")

    @pytest.mark.asyncio
    async def test_vanished_record_returns_not_found(
        self, repo_mock, org_id, active_message
    ):
        repo_mock.get_by_id.return_value = active_message
        repo_mock.delete.return_value = False
        handler = DeleteMessageHandler(repo_mock)

        result = await handler.execute(DeleteMessageCommand(org_id, active_message.id))

        assert isinstance(result, NotFound)

    @pytest.mark.asyncio
    async def test_returns_deleted(self, repo_mock, org_id, active_message):
        repo_mock.get_by_id.return_value = active_message
        handler = DeleteMessageHandler(repo_mock)

        result = await handler.execute(DeleteMessageCommand(org_id, active_message.id))

        assert isinstance(result, Deleted)
        repo_mock.delete.assert_awaited_once_with(org_id, active_message.id)


# =============================================================================
# STORE FAILURES
# =============================================================================


@pytest.mark.asyncio
async def test_repository_failures_propagate(repo_mock, org_id):
    repo_mock.get_by_title.side_effect = ConnectionError("store unavailable")
    handler = CreateMessageHandler(repo_mock)

    with pytest.raises(ConnectionError):
        await handler.execute(CreateMessageCommand(org_id, "Valid Title", VALID_CONTENT))


# =============================================================================
# SCENARIOS (in-memory repository)
# =============================================================================


class TestScenarios:
    @pytest.mark.asyncio
    async def test_same_title_conflicts_within_but_not_across_organizations(
        self, repository, org_id, other_org_id
    ):
        create = CreateMessageHandler(repository)

        first = await create.execute(CreateMessageCommand(org_id, "Shared", VALID_CONTENT))
        second = await create.execute(CreateMessageCommand(org_id, "Shared", VALID_CONTENT))
        elsewhere = await create.execute(
            CreateMessageCommand(other_org_id, "Shared", VALID_CONTENT)
        )

        assert isinstance(first, Created)
        assert isinstance(second, Conflict)
        assert isinstance(elsewhere, Created)

    @pytest.mark.asyncio
    async def test_deleted_message_is_gone(self, repository, org_id):
        created = await CreateMessageHandler(repository).execute(
            CreateMessageCommand(org_id, "Short lived", VALID_CONTENT)
        )
        message_id = created.value.id

        result = await DeleteMessageHandler(repository).execute(
            DeleteMessageCommand(org_id, message_id)
        )

        assert isinstance(result, Deleted)
        assert await GetMessageHandler(repository).execute(
            GetMessageQuery(org_id, message_id)
        ) is None
        assert await ListMessagesHandler(repository).execute(
            ListMessagesQuery(org_id)
        ) == []

    @pytest.mark.asyncio
    async def test_launch_plan_lifecycle(self, repository, org_id):
        create = CreateMessageHandler(repository)
        update = UpdateMessageHandler(repository)
        delete = DeleteMessageHandler(repository)

        created = await create.execute(
            CreateMessageCommand(org_id, "Launch Plan", "Draft content body text")
        )
        assert isinstance(created, Created)
        message_id = created.value.id

        duplicate = await create.execute(
            CreateMessageCommand(org_id, "Launch Plan", "Draft content body text")
        )
        assert isinstance(duplicate, Conflict)

        deactivated = await update.execute(
            UpdateMessageCommand(
                org_id,
                message_id,
                "Launch Plan v2",
                "Revised content body",
                is_active=False,
            )
        )
        assert isinstance(deactivated, Updated)

        stored = await GetMessageHandler(repository).execute(
            GetMessageQuery(org_id, message_id)
        )
        assert stored.title == "Launch Plan v2"
        assert stored.is_active is False
        assert stored.updated_at is not None

        assert await update.execute(
            UpdateMessageCommand(org_id, message_id, "Anything", "Any content at all")
        ) == Conflict("Cannot update an inactive message.")
        assert await delete.execute(DeleteMessageCommand(org_id, message_id)) == Conflict(
            "Cannot delete an inactive message."
        )

    @pytest.mark.asyncio
    async def test_inactive_titles_still_block_reuse(self, repository, org_id):
        create = CreateMessageHandler(repository)
        created = await create.execute(
            CreateMessageCommand(org_id, "Archived", VALID_CONTENT)
        )
        await UpdateMessageHandler(repository).execute(
            UpdateMessageCommand(
                org_id, created.value.id, "Archived", VALID_CONTENT, is_active=False
            )
        )

        result = await create.execute(CreateMessageCommand(org_id, "Archived", VALID_CONTENT))

        assert isinstance(result, Conflict)
