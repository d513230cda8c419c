"""基于键值存储的用户邮箱仓储实现"""

import logging
from typing import Any, Callable, Dict, List, Optional

from domain.common.exceptions import EntityNotFoundException
from domain.mail.entities.mailbox import DEFAULT_MAIL_ID_BASE, Mailbox
from domain.mail.exceptions import MailboxAlreadyExistsException, MailboxNotFoundException
from domain.mail.repositories.mailbox_repository import MailboxRepository
from domain.mail.services.key_value_store import KeyValueStore
from domain.mail.value_objects.mail_message import MailMessage


class KeyValueMailboxRepository(MailboxRepository):
    """
    用户邮箱仓储实现

    把每个用户的邮箱保存在 "<namespace>.<user_id>" 路径下：
    - <namespace>.<user_id>.unread: 未读邮件列表
    - <namespace>.<user_id>.read: 已读邮件列表
    - <namespace>.<user_id>.last_id: 邮件 ID 计数器（与追加未读在同一次存储调用中更新）
    """

    def __init__(
        self,
        store: KeyValueStore,
        namespace: str = "mails",
        id_base: int = DEFAULT_MAIL_ID_BASE,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化仓储

        Args:
            store: 键值存储
            namespace: 路径前缀，默认 "mails"
            id_base: 邮件 ID 起始值，默认 1000
            logger: 可选的日志记录器
        """
        self._store = store
        self._namespace = namespace
        self._id_base = id_base
        self._logger = logger or logging.getLogger(__name__)

    def path_for(self, user_id: str, *fields: str) -> str:
        """构造用户命名空间下的路径"""
        key = str(user_id)
        if not key or "." in key:
            raise ValueError(f"Invalid user id for store path: '{user_id}'")
        return ".".join([self._namespace, key, *fields])

    async def exists(self, user_id: str) -> bool:
        return await self._store.exists(self.path_for(user_id))

    async def get(self, user_id: str) -> Mailbox:
        try:
            document = await self._store.get(self.path_for(user_id))
        except EntityNotFoundException:
            raise MailboxNotFoundException(user_id)
        return Mailbox.from_dict(user_id, document, id_base=self._id_base)

    async def create(self, user_id: str) -> Mailbox:
        mailbox = Mailbox.empty(user_id, id_base=self._id_base)
        created = await self._store.set_if_absent(self.path_for(user_id), mailbox.to_dict())
        if not created:
            raise MailboxAlreadyExistsException(user_id)
        self._logger.debug(f"Mailbox document created for user {user_id}")
        return mailbox

    async def add_unread(
        self,
        user_id: str,
        build_mail: Callable[[int], MailMessage],
    ) -> MailMessage:
        # 旧文档没有计数器时，从当前邮件总数推算初始值
        mailbox = await self.get(user_id)
        built: List[MailMessage] = []

        def build_item(mail_id: int) -> Dict[str, Any]:
            mail = build_mail(mail_id)
            built.append(mail)
            return mail.to_dict()

        try:
            await self._store.append_with_counter(
                self.path_for(user_id, "unread"),
                self.path_for(user_id, "last_id"),
                build_item,
                amount=1,
                initial=mailbox.last_id,
            )
        except EntityNotFoundException:
            raise MailboxNotFoundException(user_id)
        return built[-1]

    async def move_to_read(self, user_id: str, mail_id: int) -> bool:
        def is_target(item: Any) -> bool:
            return isinstance(item, dict) and MailMessage.from_dict(item).id == mail_id

        try:
            moved = await self._store.move(
                self.path_for(user_id, "unread"),
                self.path_for(user_id, "read"),
                is_target,
            )
        except EntityNotFoundException:
            raise MailboxNotFoundException(user_id)
        return moved is not None
