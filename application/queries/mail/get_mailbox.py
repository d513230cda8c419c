"""查询整个邮箱"""

from dataclasses import dataclass


@dataclass
class GetMailboxQuery:
    """查询用户的整个邮箱（未读与已读）"""

    user_id: str
