"""邮件查询处理器"""

from application.handlers.mail.mail_handler_result import MailHandlerResult
from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mailbox_lifecycle_service import MailboxLifecycleService
from application.queries.mail.fetch_mail import FetchMailQuery
from application.queries.mail.get_mailbox import GetMailboxQuery
from application.queries.mail.has_mailbox import HasMailboxQuery


class HasMailboxHandler:
    """查询邮箱是否存在处理器"""

    def __init__(self, lifecycle: MailboxLifecycleService):
        self._lifecycle = lifecycle

    async def handle(self, query: HasMailboxQuery) -> MailHandlerResult:
        if not query.user_id:
            return MailHandlerResult.invalid_user_id()
        result = await self._lifecycle.has(query.user_id)
        return MailHandlerResult.from_result(result)


class GetMailboxHandler:
    """查询整个邮箱处理器"""

    def __init__(self, lifecycle: MailboxLifecycleService):
        self._lifecycle = lifecycle

    async def handle(self, query: GetMailboxQuery) -> MailHandlerResult:
        if not query.user_id:
            return MailHandlerResult.invalid_user_id()
        result = await self._lifecycle.get(query.user_id)
        return MailHandlerResult.from_result(result, lambda mailbox: mailbox.to_dict())


class FetchMailHandler:
    """查询单封邮件处理器"""

    def __init__(self, resolver: MailResolver):
        self._resolver = resolver

    async def handle(self, query: FetchMailQuery) -> MailHandlerResult:
        if not query.user_id:
            return MailHandlerResult.invalid_user_id()
        result = await self._resolver.fetch(query.user_id, query.mail_id, query.selector)
        return MailHandlerResult.from_result(
            result,
            lambda resolved: {
                **resolved.mail.to_dict(),
                "is_read": resolved.was_read,
            },
        )
