"""邮件仓储实现"""

from infrastructure.mail.repositories.key_value_mailbox_repository import KeyValueMailboxRepository

__all__ = ["KeyValueMailboxRepository"]
