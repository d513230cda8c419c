"""内存背包服务实现"""

from typing import Any, Dict, List, Optional, Sequence

from domain.mail.exceptions import InsufficientCapacityException


class InMemoryInventoryService:
    """
    内存背包服务

    按物品数量计算容量，适用于开发环境与测试。

    Attributes:
        user_id: 背包所属用户
        capacity: 最大物品数量，None 表示不限
        items: 已放入的物品
    """

    def __init__(self, user_id: str = "", capacity: Optional[int] = None):
        self.user_id = user_id
        self.capacity = capacity
        self.items: List[Any] = []

    @property
    def free_slots(self) -> Optional[int]:
        """剩余格子数，不限容量时返回 None"""
        if self.capacity is None:
            return None
        return max(0, self.capacity - len(self.items))

    async def check_capacity(self, items: Sequence[Any]) -> bool:
        free = self.free_slots
        return free is None or len(items) <= free

    async def add_item(self, item: Any) -> None:
        if self.free_slots == 0:
            raise InsufficientCapacityException(self.user_id, 1)
        self.items.append(item)


class InMemoryInventoryRegistry:
    """
    内存背包注册表

    按用户缓存 InMemoryInventoryService，可直接作为奖励领取服务的背包工厂使用。
    """

    def __init__(self, capacity: Optional[int] = None):
        self._capacity = capacity
        self._inventories: Dict[str, InMemoryInventoryService] = {}

    def __call__(self, user_id: str) -> InMemoryInventoryService:
        inventory = self._inventories.get(user_id)
        if inventory is None:
            inventory = InMemoryInventoryService(user_id=user_id, capacity=self._capacity)
            self._inventories[user_id] = inventory
        return inventory
