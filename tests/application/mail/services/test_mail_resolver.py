"""MailResolver 单元测试"""

from unittest.mock import Mock

import pytest
import pytest_asyncio

from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mail_transition_service import MailTransitionService
from application.mail.services.reward_collector import RewardCollector
from domain.mail.value_objects.mail_message import MailMessage
from domain.mail.value_objects.mail_selector import MailSelector


@pytest.fixture
def transition():
    return Mock(spec=MailTransitionService)


@pytest.fixture
def collector():
    return Mock(spec=RewardCollector)


@pytest.fixture
def resolver(repository, transition, collector, notifier) -> MailResolver:
    return MailResolver(repository, transition, collector, notifier)


@pytest_asyncio.fixture
async def populated(repository):
    """创建邮箱：1001 已读，1002 未读"""
    await repository.create("u1")
    for _ in range(2):
        await repository.add_unread(
            "u1", lambda mail_id: MailMessage(id=mail_id, character="Guide", message=f"m{mail_id}")
        )
    await repository.move_to_read("u1", 1001)
    return repository


class TestFetchMail:
    """检索邮件测试"""

    @pytest.mark.asyncio
    async def test_fetch_unread_mail(self, resolver, populated, notifier, events):
        """测试检索未读邮件"""
        result = await resolver.fetch("u1", 1002)
        await notifier.drain()

        assert result.success is True
        resolved = result.value
        assert resolved.mail.message == "m1002"
        assert resolved.was_read is False
        assert [mail.id for mail in resolved.read_snapshot] == [1001]
        assert [mail.id for mail in resolved.unread_snapshot] == [1002]
        assert events[-1].event_name == "mailFetch"
        assert events[-1].mail_id == 1002

    @pytest.mark.asyncio
    async def test_fetch_read_mail_with_string_id(self, resolver, populated):
        """测试使用字符串 ID 检索已读邮件"""
        result = await resolver.fetch("u1", "1001")

        assert result.success is True
        assert result.value.was_read is True

    @pytest.mark.asyncio
    async def test_fetch_respects_selector(self, resolver, populated):
        """测试检索范围"""
        assert (await resolver.fetch("u1", 1001, MailSelector.UNREAD)).error_code == "INVALID_MAIL_ID"
        assert (await resolver.fetch("u1", 1001, MailSelector.READ)).success is True
        assert (await resolver.fetch("u1", 1002, "unread")).success is True

    @pytest.mark.asyncio
    async def test_fetch_unknown_id(self, resolver, populated, notifier, events):
        """测试检索不存在的邮件"""
        result = await resolver.fetch("u1", 1003)
        await notifier.drain()

        assert result.success is False
        assert result.error_code == "INVALID_MAIL_ID"
        assert events[-1].event_name == "error"
        assert events[-1].function == "fetch"
        assert events[-1].mail_id == 1003

    @pytest.mark.asyncio
    async def test_fetch_invalid_selector(self, resolver, populated):
        """测试非法检索范围"""
        result = await resolver.fetch("u1", 1001, "archived")

        assert result.success is False
        assert result.error_code == "INVALID_OPERATION"

    @pytest.mark.asyncio
    async def test_fetch_without_mailbox(self, resolver):
        """测试邮箱不存在"""
        result = await resolver.fetch("u1", 1001)

        assert result.success is False
        assert result.error_code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_bound_operations_delegate(self, resolver, populated, transition, collector):
        """测试句柄上的 read() / collect() 委托给对应服务"""
        resolved = (await resolver.fetch("u1", 1002)).value

        await resolved.read()
        await resolved.collect()

        transition.mark_read.assert_awaited_once_with(resolved)
        collector.collect.assert_awaited_once_with(resolved)
