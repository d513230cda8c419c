"""用户邮箱聚合"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from domain.common.exceptions import InvalidValueObjectException
from domain.mail.exceptions import InvalidMailIdException
from domain.mail.value_objects.mail_message import MailMessage, normalize_mail_id
from domain.mail.value_objects.mail_selector import MailSelector

DEFAULT_MAIL_ID_BASE = 1000


@dataclass
class Mailbox:
    """
    用户邮箱聚合

    每个用户最多一个邮箱。该对象只是某一时刻的存储快照，
    每次操作前都会重新从仓储获取，不做缓存。

    Attributes:
        user_id: 用户标识
        unread: 未读邮件（按到达顺序）
        read: 已读邮件（按阅读顺序）
        last_id: 最近分配的邮件 ID
    """

    user_id: str
    unread: List[MailMessage] = field(default_factory=list)
    read: List[MailMessage] = field(default_factory=list)
    last_id: int = DEFAULT_MAIL_ID_BASE

    @classmethod
    def empty(cls, user_id: str, id_base: int = DEFAULT_MAIL_ID_BASE) -> "Mailbox":
        """创建空邮箱"""
        return cls(user_id=user_id, unread=[], read=[], last_id=id_base)

    @property
    def message_count(self) -> int:
        """邮件总数"""
        return len(self.unread) + len(self.read)

    def scope(self, selector: MailSelector = MailSelector.BOTH) -> List[MailMessage]:
        """
        获取检索范围内的邮件列表

        BOTH 按 “先已读后未读” 拼接，重复 ID 时以已读为准。
        """
        selector = MailSelector(selector)
        if selector == MailSelector.UNREAD:
            return list(self.unread)
        if selector == MailSelector.READ:
            return list(self.read)
        return [*self.read, *self.unread]

    def find(self, mail_id: Any, selector: MailSelector = MailSelector.BOTH) -> MailMessage:
        """
        在指定范围内查找邮件

        Raises:
            InvalidMailIdException: 范围内没有该 ID 的邮件
        """
        try:
            target = normalize_mail_id(mail_id)
        except InvalidValueObjectException:
            raise InvalidMailIdException(mail_id)
        for mail in self.scope(selector):
            if mail.id == target:
                return mail
        raise InvalidMailIdException(mail_id)

    def is_read(self, mail_id: Any) -> bool:
        target = normalize_mail_id(mail_id)
        return any(mail.id == target for mail in self.read)

    def is_unread(self, mail_id: Any) -> bool:
        target = normalize_mail_id(mail_id)
        return any(mail.id == target for mail in self.unread)

    def to_dict(self) -> Dict[str, Any]:
        """转换为存储文档结构"""
        return {
            "unread": [mail.to_dict() for mail in self.unread],
            "read": [mail.to_dict() for mail in self.read],
            "last_id": self.last_id,
        }

    @classmethod
    def from_dict(
        cls,
        user_id: str,
        data: Dict[str, Any],
        id_base: int = DEFAULT_MAIL_ID_BASE,
    ) -> "Mailbox":
        """
        从存储文档恢复

        旧文档没有 last_id 字段时，按 id_base + 邮件总数推算。
        """
        unread = [MailMessage.from_dict(item) for item in data.get("unread") or []]
        read = [MailMessage.from_dict(item) for item in data.get("read") or []]
        last_id = data.get("last_id")
        if last_id is None:
            last_id = id_base + len(unread) + len(read)
        return cls(user_id=user_id, unread=unread, read=read, last_id=int(last_id))
