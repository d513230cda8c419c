"""邮件处理器模块"""

from application.handlers.mail.mail_handler_result import MailHandlerResult
from application.handlers.mail.mail_command_handlers import (
    CreateMailboxHandler,
    SendMailHandler,
    ReadMailHandler,
    CollectRewardHandler,
)
from application.handlers.mail.mail_query_handlers import (
    HasMailboxHandler,
    GetMailboxHandler,
    FetchMailHandler,
)

__all__ = [
    "MailHandlerResult",
    "CreateMailboxHandler",
    "SendMailHandler",
    "ReadMailHandler",
    "CollectRewardHandler",
    "HasMailboxHandler",
    "GetMailboxHandler",
    "FetchMailHandler",
]
