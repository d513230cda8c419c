"""用户邮箱仓储接口"""

from abc import ABC, abstractmethod
from typing import Callable

from domain.mail.entities.mailbox import Mailbox
from domain.mail.value_objects.mail_message import MailMessage


class MailboxRepository(ABC):
    """
    用户邮箱仓储接口

    所有读写都限定在单个用户的命名空间下，具体实现在基础设施层。
    仓储是持久化状态的唯一所有者，调用方不应缓存返回的 Mailbox。
    """

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """
        检查用户是否已有邮箱

        Args:
            user_id: 用户标识

        Returns:
            True 如果存在，False 如果不存在
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, user_id: str) -> Mailbox:
        """
        获取用户邮箱快照

        Raises:
            MailboxNotFoundException: 用户没有邮箱
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, user_id: str) -> Mailbox:
        """
        创建空邮箱（仅当不存在时写入）

        Raises:
            MailboxAlreadyExistsException: 用户已有邮箱
        """
        raise NotImplementedError

    @abstractmethod
    async def add_unread(
        self,
        user_id: str,
        build_mail: Callable[[int], MailMessage],
    ) -> MailMessage:
        """
        原子地分配下一个邮件 ID 并把新邮件追加到未读列表

        ID 分配与追加在同一次存储调用中完成，追加失败时不消耗 ID。

        Args:
            user_id: 用户标识
            build_mail: 接收新 ID、返回邮件的函数

        Returns:
            已追加的邮件

        Raises:
            MailboxNotFoundException: 用户没有邮箱
        """
        raise NotImplementedError

    @abstractmethod
    async def move_to_read(self, user_id: str, mail_id: int) -> bool:
        """
        原子地将邮件从未读移到已读

        在同一次存储调用中重新定位邮件位置，不依赖调用方持有的快照。

        Returns:
            True 如果已移动，False 如果未读列表中没有该邮件
        """
        raise NotImplementedError
