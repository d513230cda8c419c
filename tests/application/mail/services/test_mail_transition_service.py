"""MailTransitionService 单元测试"""

from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

from application.mail.resolved_mail import ResolvedMail
from application.mail.services.mail_transition_service import MailTransitionService
from domain.mail.entities.mailbox import Mailbox
from domain.mail.repositories.mailbox_repository import MailboxRepository
from domain.mail.value_objects.mail_message import MailMessage


@pytest.fixture
def service(repository, notifier) -> MailTransitionService:
    return MailTransitionService(repository, notifier)


@pytest_asyncio.fixture
async def resolved(repository, service) -> ResolvedMail:
    """未读邮件 1001 的句柄"""
    await repository.create("u1")
    mail = await repository.add_unread(
        "u1", lambda mail_id: MailMessage(id=mail_id, character="Guide", message="Welcome")
    )
    mailbox = await repository.get("u1")
    return ResolvedMail(
        user_id="u1",
        mail=mail,
        read_snapshot=tuple(mailbox.read),
        unread_snapshot=tuple(mailbox.unread),
        transition=service,
    )


class TestMarkRead:
    """标记已读测试"""

    @pytest.mark.asyncio
    async def test_mark_read_moves_mail(self, service, repository, resolved, notifier, events):
        """测试邮件从未读移动到已读末尾"""
        result = await service.mark_read(resolved)
        await notifier.drain()

        assert result.success is True
        assert result.value.id == 1001
        mailbox = await repository.get("u1")
        assert mailbox.unread == []
        assert [mail.id for mail in mailbox.read] == [1001]
        assert events[-1].event_name == "mailRead"
        assert events[-1].to_payload() == {"userID": "u1", "mailID": 1001}

    @pytest.mark.asyncio
    async def test_second_read_with_same_handle(self, service, resolved):
        """测试同一句柄再次标记已读返回 ALREADY_READ"""
        await service.mark_read(resolved)

        result = await service.mark_read(resolved)

        assert result.success is False
        assert result.error_code == "ALREADY_READ"

    @pytest.mark.asyncio
    async def test_read_of_read_snapshot(self):
        """测试快照中已读的邮件直接返回 ALREADY_READ"""
        repository = Mock(spec=MailboxRepository)
        service = MailTransitionService(repository, Mock())
        mail = MailMessage(id=1001, message="Hi")
        resolved = ResolvedMail(user_id="u1", mail=mail, read_snapshot=(mail,))

        result = await service.mark_read(resolved)

        assert result.error_code == "ALREADY_READ"
        repository.move_to_read.assert_not_called()

    @pytest.mark.asyncio
    async def test_mail_missing_from_store(self, notifier):
        """测试邮件已不在存储中返回 INVALID_MAIL_ID"""
        repository = Mock(spec=MailboxRepository)
        repository.move_to_read = AsyncMock(return_value=False)
        repository.get = AsyncMock(return_value=Mailbox.empty("u1"))
        service = MailTransitionService(repository, notifier)
        resolved = ResolvedMail(user_id="u1", mail=MailMessage(id=1001, message="Hi"))

        result = await service.mark_read(resolved)

        assert result.success is False
        assert result.error_code == "INVALID_MAIL_ID"

    @pytest.mark.asyncio
    async def test_store_failure_is_reported(self, notifier, events):
        """测试存储失败返回 INTERNAL_ERROR 并发布 error 事件"""
        repository = Mock(spec=MailboxRepository)
        repository.move_to_read = AsyncMock(side_effect=RuntimeError("write failed"))
        service = MailTransitionService(repository, notifier)
        resolved = ResolvedMail(user_id="u1", mail=MailMessage(id=1001, message="Hi"))

        result = await service.mark_read(resolved)
        await notifier.drain()

        assert result.error_code == "INTERNAL_ERROR"
        assert events[-1].event_name == "error"
        assert events[-1].function == "read"
