"""邮件发送服务"""

import logging
from typing import Any, Optional, Sequence

from application.mail.results import MailResult
from application.mail.services.base_mail_service import BaseMailService
from application.mail.services.mail_event_notifier import MailEventNotifier
from domain.common.exceptions import InvalidOperationException
from domain.mail.events.mail_events import MailSent
from domain.mail.repositories.mailbox_repository import MailboxRepository
from domain.mail.value_objects.mail_message import MailMessage


class MailSender(BaseMailService):
    """
    邮件发送服务

    邮件 ID 由仓储在追加邮件的同一次存储调用中分配，值为 id_base + 已有邮件数 + 1（邮件从不删除）。
    写入失败时不消耗 ID。
    新邮件总是进入未读列表。
    """

    def __init__(
        self,
        repository: MailboxRepository,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(notifier, logger)
        self._repository = repository

    async def send(
        self,
        user_id: str,
        character: Any,
        message: str,
        reward: Optional[Sequence[Any]] = None,
    ) -> MailResult[MailMessage]:
        """
        发送邮件

        Args:
            user_id: 收件用户
            character: 发件角色描述
            message: 邮件正文
            reward: 奖励物品列表（可选）

        Returns:
            MailResult，成功时 value 为构造好的邮件（含 ID）
        """
        try:
            if not isinstance(message, str):
                raise InvalidOperationException(operation="send", reason="Mail message must be a string")
            if reward is not None and not isinstance(reward, (list, tuple)):
                raise InvalidOperationException(operation="send", reason="Mail reward must be a list of items")

            mail = await self._repository.add_unread(
                user_id,
                lambda mail_id: MailMessage(
                    id=mail_id,
                    character=character,
                    message=message,
                    reward=tuple(reward) if reward is not None else None,
                ),
            )
        except Exception as e:
            return self._fail("send", e, user_id)

        self._notifier.emit(MailSent(user_id=user_id, mail=mail))
        self._logger.info(f"Mail {mail.id} sent to user {user_id}")
        return MailResult.ok(mail, "Mail sent successfully")
