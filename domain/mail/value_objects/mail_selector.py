"""邮件检索范围枚举"""

from enum import Enum


class MailSelector(str, Enum):
    """邮件检索范围"""

    UNREAD = "unread"
    """仅未读邮件"""

    READ = "read"
    """仅已读邮件"""

    BOTH = "both"
    """已读 + 未读（先已读后未读）"""
