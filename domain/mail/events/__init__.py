"""邮件领域事件模块"""

from domain.mail.events.mail_events import (
    MailboxCreateRequested,
    MailboxChecked,
    MailFetched,
    MailSent,
    MailRead,
    MailOperationFailed,
    ERROR_EVENT,
)

__all__ = [
    "MailboxCreateRequested",
    "MailboxChecked",
    "MailFetched",
    "MailSent",
    "MailRead",
    "MailOperationFailed",
    "ERROR_EVENT",
]
