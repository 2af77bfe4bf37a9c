"""
Unit tests for MessageService.

The repository is an AsyncMock so each test controls exactly what the
store returns and can assert which repository calls were (not) made.

Run with: pytest tests/test_message_service.py -v
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from orgmessages.application.common.results import (
    Conflict,
    Created,
    Deleted,
    NotFound,
    Updated,
    ValidationError,
)
from orgmessages.application.services import MessageService
from orgmessages.domain.entities.message import Message
from orgmessages.domain.ports.repositories import MessageRepository
from orgmessages.domain.value_objects.message_id import MessageId
from orgmessages.domain.value_objects.organization_id import OrganizationId

TITLE = "Test Message"
CONTENT = "This is a test message content that is long enough."


def _message_id() -> MessageId:
    return MessageId(str(uuid.uuid4()))


def _stored_message(organization_id, title=TITLE, is_active=True, message_id=None):
    return Message(
        id=message_id or _message_id(),
        organization_id=organization_id,
        title=title,
        content="Existing content here",
        is_active=is_active,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture()
def repo():
    return AsyncMock(spec=MessageRepository)


@pytest.fixture()
def service(repo):
    return MessageService(repo)


class TestCreateMessage:
    @pytest.mark.asyncio
    async def test_valid_request_returns_created(self, service, repo, organization_id):
        repo.get_by_title.return_value = None

        async def assign_identity(message):
            message.id = _message_id()
            message.created_at = datetime.now(timezone.utc)
            return message

        repo.create.side_effect = assign_identity

        result = await service.create_message(organization_id, TITLE, CONTENT)

        assert isinstance(result, Created)
        assert result.value.title == TITLE
        assert result.value.content == CONTENT
        assert result.value.organization_id == organization_id
        assert result.value.is_active is True
        assert result.value.id is not None
        repo.get_by_title.assert_awaited_once_with(organization_id, TITLE)
        repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_new_message_has_no_identity_before_persist(
        self, service, repo, organization_id
    ):
        repo.get_by_title.return_value = None
        repo.create.side_effect = lambda message: message

        await service.create_message(organization_id, TITLE, CONTENT)

        (sent,) = repo.create.await_args.args
        assert sent.id is None
        assert sent.created_at is None
        assert sent.is_active is True

    @pytest.mark.asyncio
    async def test_duplicate_title_returns_conflict(
        self, service, repo, organization_id
    ):
        repo.get_by_title.return_value = _stored_message(organization_id)

        result = await service.create_message(organization_id, TITLE, CONTENT)

        assert isinstance(result, Conflict)
        assert "already exists" in result.message
        assert TITLE in result.message
        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_of_inactive_message_still_conflicts(
        self, service, repo, organization_id
    ):
        repo.get_by_title.return_value = _stored_message(
            organization_id, is_active=False
        )

        result = await service.create_message(organization_id, TITLE, CONTENT)

        assert isinstance(result, Conflict)
        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "AB", None])
    async def test_invalid_title_returns_validation_error(
        self, service, repo, organization_id, title
    ):
        result = await service.create_message(organization_id, title, CONTENT)

        assert isinstance(result, ValidationError)
        assert "title" in result.errors
        repo.get_by_title.assert_not_awaited()
        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_content_returns_validation_error(
        self, service, repo, organization_id
    ):
        result = await service.create_message(organization_id, TITLE, "short")

        assert isinstance(result, ValidationError)
        assert list(result.errors) == ["content"]
        repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_errors_propagate(self, service, repo, organization_id):
        repo.get_by_title.side_effect = RuntimeError("database unavailable")

        with pytest.raises(RuntimeError, match="database unavailable"):
            await service.create_message(organization_id, TITLE, CONTENT)


class TestUpdateMessage:
    @pytest.mark.asyncio
    async def test_valid_update_returns_updated(self, service, repo, organization_id):
        existing = _stored_message(organization_id, title="Old Title")
        repo.get_by_id.return_value = existing
        repo.get_by_title.return_value = None
        repo.update.side_effect = lambda message: message

        result = await service.update_message(
            organization_id, existing.id, TITLE, CONTENT, is_active=True
        )

        assert result == Updated()
        (sent,) = repo.update.await_args.args
        assert sent.title == TITLE
        assert sent.content == CONTENT
        assert sent.is_active is True

    @pytest.mark.asyncio
    async def test_update_can_deactivate(self, service, repo, organization_id):
        existing = _stored_message(organization_id)
        repo.get_by_id.return_value = existing
        repo.get_by_title.return_value = existing
        repo.update.side_effect = lambda message: message

        result = await service.update_message(
            organization_id, existing.id, TITLE, CONTENT, is_active=False
        )

        assert isinstance(result, Updated)
        (sent,) = repo.update.await_args.args
        assert sent.is_active is False

    @pytest.mark.asyncio
    async def test_missing_message_returns_not_found(
        self, service, repo, organization_id
    ):
        message_id = _message_id()
        repo.get_by_id.return_value = None

        result = await service.update_message(
            organization_id, message_id, TITLE, CONTENT, is_active=True
        )

        assert isinstance(result, NotFound)
        assert message_id.value in result.message
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_message_returns_validation_error(
        self, service, repo, organization_id
    ):
        existing = _stored_message(organization_id, is_active=False)
        repo.get_by_id.return_value = existing

        result = await service.update_message(
            organization_id, existing.id, existing.title, CONTENT, is_active=True
        )

        assert result == ValidationError(
            {"is_active": ["Cannot update inactive messages"]}
        )
        repo.get_by_title.assert_not_awaited()
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_keeping_own_title_is_not_a_conflict(
        self, service, repo, organization_id
    ):
        existing = _stored_message(organization_id)
        repo.get_by_id.return_value = existing
        repo.get_by_title.return_value = _stored_message(
            organization_id, message_id=existing.id
        )
        repo.update.side_effect = lambda message: message

        result = await service.update_message(
            organization_id, existing.id, TITLE, CONTENT, is_active=True
        )

        assert isinstance(result, Updated)

    @pytest.mark.asyncio
    async def test_title_of_other_message_returns_conflict(
        self, service, repo, organization_id
    ):
        existing = _stored_message(organization_id, title="Mine")
        repo.get_by_id.return_value = existing
        repo.get_by_title.return_value = _stored_message(organization_id)

        result = await service.update_message(
            organization_id, existing.id, TITLE, CONTENT, is_active=True
        )

        assert isinstance(result, Conflict)
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_validation_runs_before_lookup(
        self, service, repo, organization_id
    ):
        result = await service.update_message(
            organization_id, _message_id(), "", "", is_active=True
        )

        assert isinstance(result, ValidationError)
        assert set(result.errors) == {"title", "content"}
        repo.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_message_vanishing_before_update_returns_not_found(
        self, service, repo, organization_id
    ):
        existing = _stored_message(organization_id)
        repo.get_by_id.return_value = existing
        repo.get_by_title.return_value = None
        repo.update.return_value = None

        result = await service.update_message(
            organization_id, existing.id, TITLE, CONTENT, is_active=True
        )

        assert isinstance(result, NotFound)


class TestDeleteMessage:
    @pytest.mark.asyncio
    async def test_active_message_is_deleted(self, service, repo, organization_id):
        existing = _stored_message(organization_id)
        repo.get_by_id.return_value = existing
        repo.delete.return_value = True

        result = await service.delete_message(organization_id, existing.id)

        assert result == Deleted()
        repo.delete.assert_awaited_once_with(organization_id, existing.id)

    @pytest.mark.asyncio
    async def test_missing_message_returns_not_found(
        self, service, repo, organization_id
    ):
        repo.get_by_id.return_value = None

        result = await service.delete_message(organization_id, _message_id())

        assert isinstance(result, NotFound)
        repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_message_returns_validation_error(
        self, service, repo, organization_id
    ):
        existing = _stored_message(organization_id, is_active=False)
        repo.get_by_id.return_value = existing

        result = await service.delete_message(organization_id, existing.id)

        assert result == ValidationError(
            {"is_active": ["Cannot delete inactive messages"]}
        )
        repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_delete_returns_not_found(
        self, service, repo, organization_id
    ):
        existing = _stored_message(organization_id)
        repo.get_by_id.return_value = existing
        repo.delete.return_value = False

        result = await service.delete_message(organization_id, existing.id)

        assert isinstance(result, NotFound)


class TestQueries:
    @pytest.mark.asyncio
    async def test_get_message_passes_through(self, service, repo, organization_id):
        existing = _stored_message(organization_id)
        repo.get_by_id.return_value = existing

        assert await service.get_message(organization_id, existing.id) is existing

    @pytest.mark.asyncio
    async def test_get_missing_message_returns_none(
        self, service, repo, organization_id
    ):
        repo.get_by_id.return_value = None

        assert await service.get_message(organization_id, _message_id()) is None

    @pytest.mark.asyncio
    async def test_list_messages_passes_through(self, service, repo, organization_id):
        messages = [
            _stored_message(organization_id, title="One"),
            _stored_message(organization_id, title="Two", is_active=False),
        ]
        repo.get_all.return_value = messages

        assert await service.list_messages(organization_id) == messages
        repo.get_all.assert_awaited_once_with(organization_id)


class TestScenarios:
    """End-to-end rules against the in-memory store."""

    @pytest.mark.asyncio
    async def test_titles_are_unique_per_organization(self, repository):
        service = MessageService(repository)
        org = OrganizationId(str(uuid.uuid4()))
        other_org = OrganizationId(str(uuid.uuid4()))
        title, content = "Launch Notice", "Service launching next Monday."

        first = await service.create_message(org, title, content)
        assert isinstance(first, Created)
        assert first.value.is_active is True

        assert isinstance(await service.create_message(org, title, content), Conflict)
        assert isinstance(
            await service.create_message(other_org, title, content), Created
        )

    @pytest.mark.asyncio
    async def test_inactive_message_rejects_update_and_delete(self, repository):
        service = MessageService(repository)
        org = OrganizationId(str(uuid.uuid4()))
        created = await service.create_message(
            org, "Retired Notice", "This notice has been retired."
        )
        message = created.value
        deactivated = await service.update_message(
            org, message.id, message.title, message.content, is_active=False
        )
        assert isinstance(deactivated, Updated)

        update = await service.update_message(
            org, message.id, "XYZ", "new content here", is_active=True
        )
        delete = await service.delete_message(org, message.id)

        assert update == ValidationError(
            {"is_active": ["Cannot update inactive messages"]}
        )
        assert delete == ValidationError(
            {"is_active": ["Cannot delete inactive messages"]}
        )
        assert (await service.get_message(org, message.id)).is_active is False
