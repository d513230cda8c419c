"""邮件应用服务基类"""

import logging
from typing import Any, Optional, Type

from application.mail.results import MailResult
from application.mail.services.mail_event_notifier import MailEventNotifier
from domain.common.exceptions import DomainException
from domain.mail.events.mail_events import MailOperationFailed


class BaseMailService:
    """
    邮件应用服务基类

    统一失败处理：记录日志、发布 error 事件、转换为显式的失败结果。
    """

    def __init__(
        self,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        self._notifier = notifier
        self._logger = logger or logging.getLogger(type(self).__module__)

    def _fail(
        self,
        function: str,
        error: Exception,
        user_id: str,
        mail_id: Optional[Any] = None,
        result_type: Type[MailResult] = MailResult,
    ) -> MailResult:
        result = result_type.from_exception(error)

        if isinstance(error, DomainException):
            self._logger.warning(
                f"Mail {function} rejected for user {user_id}: [{result.error_code}] {result.message}"
            )
        else:
            self._logger.error(
                f"Mail {function} failed for user {user_id}: {type(error).__name__}: {error}"
            )

        self._notifier.emit(
            MailOperationFailed(
                function=function,
                error=result.message,
                error_code=result.error_code or "",
                user_id=user_id,
                mail_id=mail_id,
            )
        )
        return result
