"""邮件领域事件

这些事件由应用层服务在每次操作时发布，仅用于观测，
操作结果本身通过返回值传递。

使用示例（应用层）:
    notifier.subscribe("mailSend", on_mail_sent)
    notifier.emit(MailSent(user_id=user_id, mail=mail))

载荷使用对外约定的字段名（userID、mailID），便于直接转发给外部监听方。
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from domain.common.base_event import DomainEvent
from domain.mail.value_objects.mail_message import MailMessage

ERROR_EVENT = "error"


@dataclass(frozen=True)
class MailboxCreateRequested(DomainEvent):
    """邮箱创建请求事件（在存在性检查之前发布）"""

    event_name: ClassVar[str] = "mailCreate"

    user_id: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {"userID": self.user_id}


@dataclass(frozen=True)
class MailboxChecked(DomainEvent):
    """邮箱查询事件（has 与 get 共用）"""

    event_name: ClassVar[str] = "mailHas"

    user_id: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {"userID": self.user_id}


@dataclass(frozen=True)
class MailFetched(DomainEvent):
    """单封邮件检索成功事件"""

    event_name: ClassVar[str] = "mailFetch"

    user_id: str = ""
    mail_id: int = 0

    def to_payload(self) -> Dict[str, Any]:
        return {"userID": self.user_id, "mailID": self.mail_id}


@dataclass(frozen=True)
class MailSent(DomainEvent):
    """
    邮件发送事件

    Attributes:
        user_id: 收件用户
        mail: 完整构造后的邮件（含分配的 ID）
    """

    event_name: ClassVar[str] = "mailSend"

    user_id: str = ""
    mail: Optional[MailMessage] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"userID": self.user_id}
        if self.mail is not None:
            payload.update(self.mail.to_dict())
        return payload


@dataclass(frozen=True)
class MailRead(DomainEvent):
    """邮件已读事件"""

    event_name: ClassVar[str] = "mailRead"

    user_id: str = ""
    mail_id: int = 0

    def to_payload(self) -> Dict[str, Any]:
        return {"userID": self.user_id, "mailID": self.mail_id}


@dataclass(frozen=True)
class MailOperationFailed(DomainEvent):
    """
    操作失败事件

    Attributes:
        function: 失败的操作名称（create/has/get/fetch/send/read/collect）
        error: 错误消息
        error_code: 错误代码
        user_id: 用户标识
        mail_id: 相关邮件 ID（可选）
    """

    event_name: ClassVar[str] = ERROR_EVENT

    function: str = ""
    error: str = ""
    error_code: str = ""
    user_id: str = ""
    mail_id: Optional[Any] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "function": self.function,
            "error": self.error,
            "userID": self.user_id,
        }
        if self.mail_id is not None:
            payload["mailID"] = self.mail_id
        return payload
