"""标记已读命令"""

from dataclasses import dataclass
from typing import Union


@dataclass
class ReadMailCommand:
    """
    标记已读命令

    Attributes:
        user_id: 用户标识
        mail_id: 邮件 ID
    """

    user_id: str
    mail_id: Union[int, str]
