"""邮件领域异常"""

from typing import Any

from domain.common.exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidStateTransitionException,
)


class MailboxAlreadyExistsException(DuplicateEntityException):
    """用户已拥有邮箱"""

    def __init__(self, user_id: str):
        super().__init__(entity="Mailbox", identifier=user_id)
        self.message = "User already has a mailbox."


class MailboxNotFoundException(EntityNotFoundException):
    """用户邮箱不存在"""

    def __init__(self, user_id: str):
        super().__init__(entity="Mailbox", identifier=user_id)


class InvalidMailIdException(DomainException):
    """邮件 ID 无效"""

    code = "INVALID_MAIL_ID"

    def __init__(self, mail_id: Any):
        self.mail_id = mail_id
        super().__init__(f"Invalid mail id: {mail_id}")


class MailAlreadyReadException(InvalidStateTransitionException):
    """邮件已读"""

    code = "ALREADY_READ"

    def __init__(self, mail_id: int):
        self.mail_id = mail_id
        super().__init__(
            entity="MailMessage",
            from_state="read",
            to_state="read",
            reason=f"Mail {mail_id} has already been read",
        )


class NoRewardException(DomainException):
    """邮件没有可领取的奖励"""

    code = "NO_REWARD"

    def __init__(self, mail_id: int):
        self.mail_id = mail_id
        super().__init__(f"Mail {mail_id} has no reward to collect")


class InsufficientCapacityException(DomainException):
    """背包空间不足"""

    code = "INSUFFICIENT_CAPACITY"

    def __init__(self, user_id: str, item_count: int):
        self.user_id = user_id
        self.item_count = item_count
        super().__init__(
            f"Inventory has no space for {item_count} reward item(s)"
        )


class InventoryServiceException(DomainException):
    """背包服务调用失败"""

    code = "INVENTORY_ERROR"
