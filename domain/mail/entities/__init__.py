"""邮件实体模块"""

from domain.mail.entities.mailbox import Mailbox, DEFAULT_MAIL_ID_BASE

__all__ = ["Mailbox", "DEFAULT_MAIL_ID_BASE"]
