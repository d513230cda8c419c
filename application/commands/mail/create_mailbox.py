"""创建邮箱命令"""

from dataclasses import dataclass


@dataclass
class CreateMailboxCommand:
    """
    创建邮箱命令

    Attributes:
        user_id: 用户标识
    """

    user_id: str
