"""发送邮件命令"""

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class SendMailCommand:
    """
    发送邮件命令

    Attributes:
        user_id: 收件用户
        character: 发件角色描述
        message: 邮件正文
        reward: 奖励物品列表（可选）
    """

    user_id: str
    character: Any
    message: str
    reward: Optional[List[Any]] = None
