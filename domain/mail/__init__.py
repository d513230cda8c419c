"""
游戏邮件界限上下文

提供用户邮箱的领域模型，包括：
- Mailbox 聚合（未读/已读两个集合）
- MailMessage 值对象与 MailSelector 枚举
- 邮件领域事件
- 仓储、键值存储、背包服务接口
"""

from domain.mail.entities.mailbox import Mailbox, DEFAULT_MAIL_ID_BASE
from domain.mail.value_objects.mail_message import MailMessage
from domain.mail.value_objects.mail_selector import MailSelector

__all__ = [
    "Mailbox",
    "DEFAULT_MAIL_ID_BASE",
    "MailMessage",
    "MailSelector",
]
