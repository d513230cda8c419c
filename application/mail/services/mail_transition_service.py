"""邮件已读转换服务"""

import logging
from typing import Optional

from application.mail.resolved_mail import ResolvedMail
from application.mail.results import MailResult
from application.mail.services.base_mail_service import BaseMailService
from application.mail.services.mail_event_notifier import MailEventNotifier
from domain.mail.events.mail_events import MailRead
from domain.mail.exceptions import InvalidMailIdException, MailAlreadyReadException
from domain.mail.repositories.mailbox_repository import MailboxRepository
from domain.mail.value_objects.mail_message import MailMessage


class MailTransitionService(BaseMailService):
    """
    邮件已读转换服务

    状态机：UNREAD --mark_read--> READ（终态）。

    业务流程：
    1. 快照中已在已读列表 -> ALREADY_READ
    2. 仓储在一次原子调用中重新定位并移动邮件
    3. 未移动时重新读取邮箱区分 ALREADY_READ 与 INVALID_MAIL_ID
    """

    def __init__(
        self,
        repository: MailboxRepository,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(notifier, logger)
        self._repository = repository

    async def mark_read(self, resolved: ResolvedMail) -> MailResult[MailMessage]:
        """
        将已解析的邮件标记为已读

        Args:
            resolved: 检索得到的邮件句柄

        Returns:
            MailResult，成功时 value 为被移动的邮件
        """
        user_id = resolved.user_id
        mail_id = resolved.mail.id
        try:
            if resolved.was_read:
                raise MailAlreadyReadException(mail_id)

            moved = await self._repository.move_to_read(user_id, mail_id)
            if not moved:
                # 快照已过期：邮件可能已被其他操作移走
                current = await self._repository.get(user_id)
                if current.is_read(mail_id):
                    raise MailAlreadyReadException(mail_id)
                raise InvalidMailIdException(mail_id)
        except Exception as e:
            return self._fail("read", e, user_id, mail_id)

        self._notifier.emit(MailRead(user_id=user_id, mail_id=mail_id))
        self._logger.info(f"Mail {mail_id} marked as read for user {user_id}")
        return MailResult.ok(resolved.mail, "Mail marked as read")
