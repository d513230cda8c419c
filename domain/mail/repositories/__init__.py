"""邮件仓储接口模块"""

from domain.mail.repositories.mailbox_repository import MailboxRepository

__all__ = ["MailboxRepository"]
