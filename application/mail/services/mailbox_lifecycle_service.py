"""邮箱生命周期服务"""

import logging
from typing import Optional

from application.mail.results import MailResult
from application.mail.services.base_mail_service import BaseMailService
from application.mail.services.mail_event_notifier import MailEventNotifier
from domain.mail.entities.mailbox import Mailbox
from domain.mail.events.mail_events import MailboxChecked, MailboxCreateRequested
from domain.mail.exceptions import MailboxAlreadyExistsException
from domain.mail.repositories.mailbox_repository import MailboxRepository


class MailboxLifecycleService(BaseMailService):
    """
    邮箱生命周期服务

    负责创建邮箱、检查存在性、读取整个邮箱。邮箱一经创建不会被本服务删除。
    """

    def __init__(
        self,
        repository: MailboxRepository,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化服务

        Args:
            repository: 用户邮箱仓储
            notifier: 事件通知服务
            logger: 可选的日志记录器
        """
        super().__init__(notifier, logger)
        self._repository = repository

    async def create(self, user_id: str) -> MailResult[Mailbox]:
        """
        创建用户邮箱

        在存在性检查之前发布 mailCreate 事件，即使最终失败也可被观测到。
        仓储以“仅当不存在时写入”落盘，并发创建时只有一个会成功。
        """
        self._notifier.emit(MailboxCreateRequested(user_id=user_id))
        try:
            if await self._repository.exists(user_id):
                raise MailboxAlreadyExistsException(user_id)
            mailbox = await self._repository.create(user_id)
        except Exception as e:
            return self._fail("create", e, user_id)

        self._logger.info(f"Mailbox created for user {user_id}")
        return MailResult.ok(mailbox, "Mailbox created successfully")

    async def has(self, user_id: str) -> MailResult[bool]:
        """检查用户是否已有邮箱"""
        self._notifier.emit(MailboxChecked(user_id=user_id))
        try:
            exists = await self._repository.exists(user_id)
        except Exception as e:
            return self._fail("has", e, user_id)
        return MailResult.ok(exists)

    async def get(self, user_id: str) -> MailResult[Mailbox]:
        """
        读取整个邮箱

        不预先检查存在性，邮箱不存在时由仓储报告 NOT_FOUND。
        """
        self._notifier.emit(MailboxChecked(user_id=user_id))
        try:
            mailbox = await self._repository.get(user_id)
        except Exception as e:
            return self._fail("get", e, user_id)
        return MailResult.ok(mailbox)
