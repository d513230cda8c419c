"""已解析邮件句柄"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Tuple

from domain.mail.value_objects.mail_message import MailMessage

if TYPE_CHECKING:
    from application.mail.results import CollectResult, MailResult
    from application.mail.services.mail_transition_service import MailTransitionService
    from application.mail.services.reward_collector import RewardCollector


@dataclass(frozen=True)
class ResolvedMail:
    """
    已解析邮件句柄

    检索时捕获的快照，附带绑定到该邮件的 read() / collect() 操作。
    快照不会自动刷新；绑定操作在执行修改时会针对当前存储状态重新定位。

    Attributes:
        user_id: 用户标识
        mail: 找到的邮件
        read_snapshot: 检索时的已读列表
        unread_snapshot: 检索时的未读列表
    """

    user_id: str
    mail: MailMessage
    read_snapshot: Tuple[MailMessage, ...] = ()
    unread_snapshot: Tuple[MailMessage, ...] = ()
    transition: "MailTransitionService" = field(default=None, repr=False, compare=False)  # type: ignore
    collector: "RewardCollector" = field(default=None, repr=False, compare=False)  # type: ignore

    @property
    def mail_id(self) -> int:
        return self.mail.id

    @property
    def was_read(self) -> bool:
        """检索时是否已在已读列表中"""
        return any(mail.id == self.mail.id for mail in self.read_snapshot)

    async def read(self) -> "MailResult[MailMessage]":
        """标记为已读"""
        return await self.transition.mark_read(self)

    async def collect(self) -> "CollectResult":
        """领取奖励"""
        return await self.collector.collect(self)
