"""邮件值对象"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


def normalize_mail_id(mail_id: Any) -> int:
    """
    将邮件 ID 规范为整数

    调用方可能传入字符串形式的 ID（如 "1001"），与存储中的整数比较前统一转换。

    Raises:
        InvalidValueObjectException: 无法转换为整数
    """
    if isinstance(mail_id, bool):
        raise InvalidValueObjectException(
            value_object_type="MailId", value=mail_id, reason="Mail id must be an integer"
        )
    try:
        return int(mail_id)
    except (TypeError, ValueError):
        raise InvalidValueObjectException(
            value_object_type="MailId", value=mail_id, reason="Mail id must be an integer"
        )


@dataclass(frozen=True)
class MailMessage(BaseValueObject):
    """
    邮件值对象

    邮件在发送时创建，之后只会整体从未读移动到已读，不会被原地修改。

    Attributes:
        id: 邮件 ID（发送时分配，不可变）
        character: 发件角色描述（对核心不透明）
        message: 邮件正文
        reward: 奖励物品列表（可选，物品结构由背包服务解释）
    """

    id: int
    character: Any = None
    message: str = ""
    reward: Optional[Tuple[Any, ...]] = field(default=None)

    def __post_init__(self) -> None:
        # 列表奖励统一转为元组以保持不可变
        if self.reward is not None and not isinstance(self.reward, tuple):
            object.__setattr__(self, "reward", tuple(self.reward))
        super().__post_init__()

    def validate(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidValueObjectException(
                value_object_type="MailMessage",
                value=self.id,
                reason="Mail id must be an integer",
            )
        if not isinstance(self.message, str):
            raise InvalidValueObjectException(
                value_object_type="MailMessage",
                value=self.message,
                reason="Mail message must be a string",
            )

    @property
    def has_reward(self) -> bool:
        """是否带有奖励"""
        return bool(self.reward)

    def matches(self, mail_id: Any) -> bool:
        """判断是否为指定 ID 的邮件"""
        return self.id == normalize_mail_id(mail_id)

    def to_dict(self) -> Dict[str, Any]:
        """转换为存储文档结构"""
        return {
            "id": self.id,
            "character": self.character,
            "message": self.message,
            "reward": list(self.reward) if self.reward is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MailMessage":
        """从存储文档恢复"""
        reward = data.get("reward")
        return cls(
            id=normalize_mail_id(data["id"]),
            character=data.get("character"),
            message=data.get("message", ""),
            reward=tuple(reward) if reward is not None else None,
        )
