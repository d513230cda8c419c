"""邮件操作结果"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from domain.common.exceptions import DomainException

T = TypeVar("T")

INTERNAL_ERROR = "INTERNAL_ERROR"
PARTIAL_COLLECTION = "PARTIAL_COLLECTION"


@dataclass
class MailResult(Generic[T]):
    """
    邮件操作结果

    每个公开操作都返回该对象，失败不会以异常形式抛给调用方。

    Attributes:
        success: 是否成功
        value: 操作返回值（成功时）
        message: 结果消息
        error_code: 错误代码（失败时）
    """

    success: bool
    value: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, value: Optional[T] = None, message: str = "") -> "MailResult[T]":
        return cls(success=True, value=value, message=message)

    @classmethod
    def failure(cls, error_code: str, message: str) -> "MailResult[T]":
        return cls(success=False, message=message, error_code=error_code)

    @classmethod
    def from_exception(cls, error: Exception) -> "MailResult[T]":
        """领域异常保留其错误代码，其余归为 INTERNAL_ERROR"""
        if isinstance(error, DomainException):
            return cls.failure(error.code, error.message)
        return cls.failure(INTERNAL_ERROR, f"Unexpected error: {str(error)}")


@dataclass
class CollectResult(MailResult[List[Any]]):
    """
    奖励领取结果

    Attributes:
        collected_items: 已成功放入背包的物品
        failed_items: 放入失败的物品（部分失败时，供调用方对账或补偿）
    """

    collected_items: List[Any] = field(default_factory=list)
    failed_items: List[Any] = field(default_factory=list)
