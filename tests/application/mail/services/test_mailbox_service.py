"""MailboxService 门面测试"""

import pytest

from application.mail.services.mailbox_service import MailboxService
from domain.mail.value_objects.mail_selector import MailSelector


@pytest.fixture
def service(repository, inventory, notifier) -> MailboxService:
    return MailboxService("u1", repository, inventory, notifier)


class TestMailboxService:
    """单用户门面测试"""

    @pytest.mark.asyncio
    async def test_operations_are_bound_to_user(self, service, repository):
        """测试所有操作绑定到同一用户"""
        assert service.user_id == "u1"
        assert (await service.create()).success is True
        assert (await service.has()).value is True
        assert await repository.exists("u1") is True
        assert (await service.get()).value.user_id == "u1"

    @pytest.mark.asyncio
    async def test_send_read_collect(self, service, inventory):
        """测试发送、已读、领取完整流程"""
        await service.create()
        sent = await service.send("Guide", "Welcome", ["sword"])

        fetched = await service.fetch(sent.value.id)
        read = await service.read(fetched.value)
        collected = await service.collect(fetched.value)

        assert read.success is True
        assert collected.success is True
        assert inventory.items == ["sword"]
        mailbox = (await service.get()).value
        assert [mail.id for mail in mailbox.read] == [1001]

    @pytest.mark.asyncio
    async def test_fetch_with_selector(self, service):
        """测试门面透传检索范围"""
        await service.create()
        await service.send("Guide", "Welcome")

        assert (await service.fetch(1001, MailSelector.READ)).error_code == "INVALID_MAIL_ID"
        assert (await service.fetch(1001, MailSelector.UNREAD)).success is True

    @pytest.mark.asyncio
    async def test_collect_uses_bound_inventory(self, service, inventory):
        """测试领取使用门面绑定的背包"""
        inventory.capacity = 1
        await service.create()
        await service.send("Guide", "Gift", ["a", "b"])

        fetched = await service.fetch(1001)
        result = await fetched.value.collect()

        assert result.error_code == "INSUFFICIENT_CAPACITY"
        assert inventory.items == []
