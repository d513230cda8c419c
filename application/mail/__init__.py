"""
游戏邮件应用层

- 服务：邮箱生命周期、邮件检索、已读转换、奖励领取、发送、事件通知
- 结果：MailResult / CollectResult 显式返回成功或失败
"""

from application.mail.results import MailResult, CollectResult
from application.mail.resolved_mail import ResolvedMail

__all__ = ["MailResult", "CollectResult", "ResolvedMail"]
