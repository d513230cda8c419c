"""邮件值对象模块"""

from domain.mail.value_objects.mail_message import MailMessage, normalize_mail_id
from domain.mail.value_objects.mail_selector import MailSelector

__all__ = [
    "MailMessage",
    "MailSelector",
    "normalize_mail_id",
]
