"""奖励领取服务"""

import asyncio
import logging
from typing import Any, Callable, List, Optional

from application.mail.resolved_mail import ResolvedMail
from application.mail.results import PARTIAL_COLLECTION, CollectResult
from application.mail.services.base_mail_service import BaseMailService
from application.mail.services.mail_event_notifier import MailEventNotifier
from domain.mail.events.mail_events import MailOperationFailed
from domain.mail.exceptions import InsufficientCapacityException, NoRewardException
from domain.mail.services.inventory_service import InventoryService

InventoryFactory = Callable[[str], InventoryService]


class RewardCollector(BaseMailService):
    """
    奖励领取服务

    业务流程：
    1. 邮件没有奖励 -> NO_REWARD
    2. 一次性检查背包能否容纳全部奖励 -> INSUFFICIENT_CAPACITY（不发放任何物品）
    3. 并发发放每个物品，等待全部结果后再返回
    4. 全部成功才算成功；部分失败返回已发放与失败的物品清单

    本服务不记录奖励是否已领取过，由调用方负责。
    """

    def __init__(
        self,
        inventory_factory: InventoryFactory,
        notifier: MailEventNotifier,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化服务

        Args:
            inventory_factory: 根据用户标识返回其背包服务的工厂函数
            notifier: 事件通知服务
            logger: 可选的日志记录器
        """
        super().__init__(notifier, logger)
        self._inventory_factory = inventory_factory

    async def collect(self, resolved: ResolvedMail) -> CollectResult:
        """
        领取邮件奖励

        Args:
            resolved: 检索得到的邮件句柄

        Returns:
            CollectResult，success 即领取结果
        """
        user_id = resolved.user_id
        mail = resolved.mail
        try:
            if not mail.has_reward:
                raise NoRewardException(mail.id)

            items = list(mail.reward or ())
            inventory = self._inventory_factory(user_id)

            if not await inventory.check_capacity(items):
                raise InsufficientCapacityException(user_id, len(items))

            outcomes = await asyncio.gather(
                *(inventory.add_item(item) for item in items),
                return_exceptions=True,
            )
        except Exception as e:
            return self._fail("collect", e, user_id, mail.id, result_type=CollectResult)

        collected: List[Any] = []
        failed: List[Any] = []
        errors: List[BaseException] = []
        for item, outcome in zip(items, outcomes):
            if isinstance(outcome, BaseException):
                failed.append(item)
                errors.append(outcome)
            else:
                collected.append(item)

        if failed:
            message = (
                f"{len(failed)} of {len(items)} reward item(s) could not be added: "
                f"{errors[0]}"
            )
            self._logger.error(f"Partial reward collection for mail {mail.id} of user {user_id}: {message}")
            self._notifier.emit(
                MailOperationFailed(
                    function="collect",
                    error=message,
                    error_code=PARTIAL_COLLECTION,
                    user_id=user_id,
                    mail_id=mail.id,
                )
            )
            return CollectResult(
                success=False,
                value=collected,
                message=message,
                error_code=PARTIAL_COLLECTION,
                collected_items=collected,
                failed_items=failed,
            )

        self._logger.info(f"Collected {len(collected)} reward item(s) from mail {mail.id} for user {user_id}")
        return CollectResult(
            success=True,
            value=collected,
            message="Reward collected successfully",
            collected_items=collected,
        )
