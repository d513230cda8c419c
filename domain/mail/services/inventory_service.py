"""背包服务接口"""

from typing import Any, Protocol, Sequence


class InventoryService(Protocol):
    """
    背包服务接口

    实例绑定到单个用户的背包。奖励物品对邮件核心不透明，原样转交。
    """

    async def check_capacity(self, items: Sequence[Any]) -> bool:
        """
        检查背包是否能容纳全部物品

        Args:
            items: 待放入的物品列表

        Returns:
            True 如果有足够空间
        """
        ...

    async def add_item(self, item: Any) -> None:
        """放入单个物品"""
        ...
