"""邮件处理器结果"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from application.mail.results import MailResult

INVALID_USER_ID = "INVALID_USER_ID"


@dataclass
class MailHandlerResult:
    """
    邮件处理器结果（面向传输层，data 可直接 JSON 序列化）

    Attributes:
        success: 是否成功
        data: 结果数据（成功时，部分失败的领取也会带上明细）
        message: 结果消息
        error_code: 错误代码（失败时）
            - ALREADY_EXISTS: 用户已有邮箱
            - NOT_FOUND: 用户没有邮箱
            - INVALID_MAIL_ID: 邮件不存在
            - ALREADY_READ: 邮件已读
            - NO_REWARD: 邮件没有奖励
            - INSUFFICIENT_CAPACITY: 背包空间不足
            - PARTIAL_COLLECTION: 部分奖励发放失败
            - INVALID_USER_ID: 用户标识为空
            - INTERNAL_ERROR: 未知错误
    """

    success: bool
    data: Optional[Any] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        result: MailResult,
        serialize: Optional[Callable[[Any], Any]] = None,
    ) -> "MailHandlerResult":
        data = result.value
        if data is not None and serialize is not None:
            data = serialize(data)
        return cls(
            success=result.success,
            data=data,
            message=result.message,
            error_code=result.error_code,
        )

    @classmethod
    def invalid_user_id(cls) -> "MailHandlerResult":
        return cls(success=False, message="User id cannot be empty", error_code=INVALID_USER_ID)
