"""邮件检索服务"""

import logging
from typing import Any, Optional

from application.mail.resolved_mail import ResolvedMail
from application.mail.results import MailResult
from application.mail.services.base_mail_service import BaseMailService
from application.mail.services.mail_event_notifier import MailEventNotifier
from application.mail.services.mail_transition_service import MailTransitionService
from application.mail.services.reward_collector import RewardCollector
from domain.common.exceptions import InvalidOperationException
from domain.mail.events.mail_events import MailFetched
from domain.mail.repositories.mailbox_repository import MailboxRepository
from domain.mail.value_objects.mail_selector import MailSelector


class MailResolver(BaseMailService):
    """
    邮件检索服务

    每次检索都重新读取邮箱，在选定范围内按顺序查找第一封 ID 匹配的邮件，
    返回绑定了 read() / collect() 的句柄。
    """

    def __init__(
        self,
        repository: MailboxRepository,
        transition: MailTransitionService,
        collector: RewardCollector,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化服务

        Args:
            repository: 用户邮箱仓储
            transition: 已读转换服务（绑定到句柄）
            collector: 奖励领取服务（绑定到句柄）
            notifier: 事件通知服务
            logger: 可选的日志记录器
        """
        super().__init__(notifier, logger)
        self._repository = repository
        self._transition = transition
        self._collector = collector

    async def fetch(
        self,
        user_id: str,
        mail_id: Any,
        selector: MailSelector = MailSelector.BOTH,
    ) -> MailResult[ResolvedMail]:
        """
        检索单封邮件

        Args:
            user_id: 用户标识
            mail_id: 邮件 ID（整数或数字字符串）
            selector: 检索范围，默认已读 + 未读

        Returns:
            MailResult，成功时 value 为 ResolvedMail；找不到时 INVALID_MAIL_ID
        """
        try:
            try:
                scope = MailSelector(selector)
            except ValueError:
                raise InvalidOperationException(
                    operation="fetch",
                    reason=f"Invalid selector: {selector}. Must be 'unread', 'read' or 'both'",
                )

            mailbox = await self._repository.get(user_id)
            mail = mailbox.find(mail_id, scope)
        except Exception as e:
            return self._fail("fetch", e, user_id, mail_id)

        self._notifier.emit(MailFetched(user_id=user_id, mail_id=mail.id))
        return MailResult.ok(
            ResolvedMail(
                user_id=user_id,
                mail=mail,
                read_snapshot=tuple(mailbox.read),
                unread_snapshot=tuple(mailbox.unread),
                transition=self._transition,
                collector=self._collector,
            )
        )
