"""内存键值存储实现"""

import asyncio
import copy
import logging
from typing import Any, Callable, Dict, Optional

from domain.mail.services.key_value_store import KeyValueStore
from infrastructure.mail.stores import document_path


class InMemoryKeyValueStore(KeyValueStore):
    """
    内存键值存储

    使用嵌套 dict 保存数据，所有写操作在同一把 asyncio.Lock 下执行，
    因此 increment 与 move 在单个事件循环内是原子的。
    适用于开发环境与测试。
    """

    def __init__(
        self,
        initial_data: Optional[Dict[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._data: Dict[str, Any] = copy.deepcopy(initial_data) if initial_data else {}
        self._lock = asyncio.Lock()
        self._logger = logger or logging.getLogger(__name__)

    def snapshot(self) -> Dict[str, Any]:
        """返回当前全部数据的副本"""
        return copy.deepcopy(self._data)

    async def exists(self, path: str) -> bool:
        return document_path.has_value(self._data, document_path.split_path(path))

    async def get(self, path: str) -> Any:
        return document_path.get_value(self._data, document_path.split_path(path))

    async def set_if_absent(self, path: str, value: Any) -> bool:
        segments = document_path.split_path(path)
        async with self._lock:
            written = document_path.set_if_absent(self._data, segments, value)
        if not written:
            self._logger.debug(f"Skip set, path already has a value: {path}")
        return written

    async def append(self, path: str, item: Any) -> None:
        segments = document_path.split_path(path)
        async with self._lock:
            document_path.append(self._data, segments, item)

    async def remove_at(self, path: str, index: int) -> Any:
        segments = document_path.split_path(path)
        async with self._lock:
            return document_path.remove_at(self._data, segments, index)

    async def increment(self, path: str, amount: int = 1, initial: int = 0) -> int:
        segments = document_path.split_path(path)
        async with self._lock:
            return document_path.increment(self._data, segments, amount, initial)

    async def move(
        self,
        source: str,
        target: str,
        match: Callable[[Any], bool],
    ) -> Optional[Any]:
        source_segments = document_path.split_path(source)
        target_segments = document_path.split_path(target)
        async with self._lock:
            return document_path.move(self._data, source_segments, target_segments, match)

    async def append_with_counter(
        self,
        list_path: str,
        counter_path: str,
        build_item: Callable[[int], Any],
        amount: int = 1,
        initial: int = 0,
    ) -> Any:
        list_segments = document_path.split_path(list_path)
        counter_segments = document_path.split_path(counter_path)
        async with self._lock:
            return document_path.append_with_counter(
                self._data, list_segments, counter_segments, build_item, amount, initial
            )
