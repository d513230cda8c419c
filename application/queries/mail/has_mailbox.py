"""查询邮箱是否存在"""

from dataclasses import dataclass


@dataclass
class HasMailboxQuery:
    """查询用户是否已有邮箱"""

    user_id: str
