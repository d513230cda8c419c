"""查询单封邮件"""

from dataclasses import dataclass
from typing import Union


@dataclass
class FetchMailQuery:
    """
    查询单封邮件

    Attributes:
        user_id: 用户标识
        mail_id: 邮件 ID
        selector: 检索范围 (unread/read/both)
    """

    user_id: str
    mail_id: Union[int, str]
    selector: str = "both"
