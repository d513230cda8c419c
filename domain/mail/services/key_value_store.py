"""键值存储接口"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class KeyValueStore(ABC):
    """
    点分路径键值存储接口

    路径形如 "mails.<user_id>.unread"，每一段对应文档中的一层。
    increment、append_with_counter 与 move 对同一存储上的其他调用是原子的。
    """

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """路径上是否有值"""
        raise NotImplementedError

    @abstractmethod
    async def get(self, path: str) -> Any:
        """
        读取路径上的值

        Raises:
            EntityNotFoundException: 路径不存在
        """
        raise NotImplementedError

    @abstractmethod
    async def set_if_absent(self, path: str, value: Any) -> bool:
        """
        仅当路径没有值时写入

        Returns:
            True 如果写入成功，False 如果路径已有值
        """
        raise NotImplementedError

    @abstractmethod
    async def append(self, path: str, item: Any) -> None:
        """向路径上的列表追加元素"""
        raise NotImplementedError

    @abstractmethod
    async def remove_at(self, path: str, index: int) -> Any:
        """按下标移除列表元素，返回被移除的元素"""
        raise NotImplementedError

    @abstractmethod
    async def increment(self, path: str, amount: int = 1, initial: int = 0) -> int:
        """
        原子地自增并返回新值

        Args:
            path: 计数器路径
            amount: 增量
            initial: 路径不存在时的初始值
        """
        raise NotImplementedError

    @abstractmethod
    async def move(
        self,
        source: str,
        target: str,
        match: Callable[[Any], bool],
    ) -> Optional[Any]:
        """
        原子地把 source 列表中第一个满足 match 的元素移到 target 列表末尾

        Returns:
            被移动的元素，没有匹配时返回 None
        """
        raise NotImplementedError

    @abstractmethod
    async def append_with_counter(
        self,
        list_path: str,
        counter_path: str,
        build_item: Callable[[int], Any],
        amount: int = 1,
        initial: int = 0,
    ) -> Any:
        """
        原子地自增计数器，并把用新值构造的元素追加到列表末尾

        构造、复制或写入元素失败时计数器也不会变化。

        Args:
            list_path: 列表路径
            counter_path: 计数器路径
            build_item: 接收计数器新值、返回待追加元素的函数
            amount: 增量
            initial: 计数器不存在时的初始值

        Returns:
            已追加的元素
        """
        raise NotImplementedError
