"""单用户邮箱门面服务"""

import logging
from typing import Any, Optional, Sequence

from application.mail.resolved_mail import ResolvedMail
from application.mail.results import CollectResult, MailResult
from application.mail.services.mail_event_notifier import MailEventNotifier
from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mail_sender import MailSender
from application.mail.services.mail_transition_service import MailTransitionService
from application.mail.services.mailbox_lifecycle_service import MailboxLifecycleService
from application.mail.services.reward_collector import RewardCollector
from domain.mail.entities.mailbox import Mailbox
from domain.mail.repositories.mailbox_repository import MailboxRepository
from domain.mail.services.inventory_service import InventoryService
from domain.mail.value_objects.mail_message import MailMessage
from domain.mail.value_objects.mail_selector import MailSelector


class MailboxService:
    """
    单用户邮箱门面服务

    绑定到一个用户和该用户的背包，组合生命周期、检索、发送、已读、领取五个服务。

    使用示例:
        service = MailboxService(user_id, repository, inventory, notifier)
        await service.create()
        sent = await service.send(character="Guide", message="Welcome", reward=[item])
        fetched = await service.fetch(sent.value.id)
        await fetched.value.read()
        await fetched.value.collect()
    """

    def __init__(
        self,
        user_id: str,
        repository: MailboxRepository,
        inventory: InventoryService,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化门面

        Args:
            user_id: 用户标识
            repository: 用户邮箱仓储
            inventory: 该用户的背包服务
            notifier: 事件通知服务
            logger: 可选的日志记录器
        """
        self._user_id = user_id
        self._lifecycle = MailboxLifecycleService(repository, notifier, logger)
        self._sender = MailSender(repository, notifier, logger)
        self._transition = MailTransitionService(repository, notifier, logger)
        self._collector = RewardCollector(lambda _user_id: inventory, notifier, logger)
        self._resolver = MailResolver(
            repository, self._transition, self._collector, notifier, logger
        )

    @property
    def user_id(self) -> str:
        return self._user_id

    async def create(self) -> MailResult[Mailbox]:
        return await self._lifecycle.create(self._user_id)

    async def has(self) -> MailResult[bool]:
        return await self._lifecycle.has(self._user_id)

    async def get(self) -> MailResult[Mailbox]:
        return await self._lifecycle.get(self._user_id)

    async def fetch(
        self,
        mail_id: Any,
        selector: MailSelector = MailSelector.BOTH,
    ) -> MailResult[ResolvedMail]:
        return await self._resolver.fetch(self._user_id, mail_id, selector)

    async def send(
        self,
        character: Any,
        message: str,
        reward: Optional[Sequence[Any]] = None,
    ) -> MailResult[MailMessage]:
        return await self._sender.send(self._user_id, character, message, reward)

    async def read(self, resolved: ResolvedMail) -> MailResult[MailMessage]:
        return await self._transition.mark_read(resolved)

    async def collect(self, resolved: ResolvedMail) -> CollectResult:
        return await self._collector.collect(resolved)
