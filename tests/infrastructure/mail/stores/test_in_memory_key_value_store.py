"""Tests for InMemoryKeyValueStore"""

import asyncio

import pytest

from domain.common.exceptions import EntityNotFoundException, InvalidOperationException
from infrastructure.mail.stores.in_memory_key_value_store import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore({"mails": {"u1": {"unread": [], "read": [], "last_id": 1000}}})


class TestInMemoryKeyValueStoreRead:
    """读取操作测试"""

    @pytest.mark.asyncio
    async def test_exists(self, store: InMemoryKeyValueStore):
        """测试路径存在判断"""
        assert await store.exists("mails.u1") is True
        assert await store.exists("mails.u2") is False
        assert await store.exists("other.u1") is False

    @pytest.mark.asyncio
    async def test_get_returns_copy(self, store: InMemoryKeyValueStore):
        """测试读取返回副本，修改不影响存储"""
        value = await store.get("mails.u1")
        value["unread"].append({"id": 1})

        assert (await store.get("mails.u1.unread")) == []

    @pytest.mark.asyncio
    async def test_get_missing_raises(self, store: InMemoryKeyValueStore):
        """测试读取不存在的路径"""
        with pytest.raises(EntityNotFoundException):
            await store.get("mails.u2")

    @pytest.mark.asyncio
    async def test_empty_segment_is_rejected(self, store: InMemoryKeyValueStore):
        """测试非法路径"""
        with pytest.raises(InvalidOperationException):
            await store.get("mails..u1")


class TestInMemoryKeyValueStoreWrite:
    """写入操作测试"""

    @pytest.mark.asyncio
    async def test_set_if_absent(self, store: InMemoryKeyValueStore):
        """测试仅在不存在时写入"""
        assert await store.set_if_absent("mails.u2", {"unread": []}) is True
        assert await store.set_if_absent("mails.u2", {"unread": [1]}) is False
        assert await store.get("mails.u2") == {"unread": []}

    @pytest.mark.asyncio
    async def test_set_if_absent_creates_parents(self):
        """测试写入时自动创建父节点"""
        store = InMemoryKeyValueStore()

        assert await store.set_if_absent("mails.u1", {"read": []}) is True
        assert store.snapshot() == {"mails": {"u1": {"read": []}}}

    @pytest.mark.asyncio
    async def test_append_and_remove_at(self, store: InMemoryKeyValueStore):
        """测试追加与按下标删除"""
        await store.append("mails.u1.unread", {"id": 1001})
        await store.append("mails.u1.unread", {"id": 1002})

        removed = await store.remove_at("mails.u1.unread", 0)

        assert removed == {"id": 1001}
        assert await store.get("mails.u1.unread") == [{"id": 1002}]

    @pytest.mark.asyncio
    async def test_remove_at_out_of_range(self, store: InMemoryKeyValueStore):
        """测试下标越界"""
        with pytest.raises(InvalidOperationException):
            await store.remove_at("mails.u1.unread", 0)

    @pytest.mark.asyncio
    async def test_append_requires_parent(self, store: InMemoryKeyValueStore):
        """测试父节点不存在时追加失败"""
        with pytest.raises(EntityNotFoundException):
            await store.append("mails.u2.unread", {"id": 1})

    @pytest.mark.asyncio
    async def test_increment(self, store: InMemoryKeyValueStore):
        """测试计数器自增"""
        assert await store.increment("mails.u1.last_id") == 1001
        assert await store.increment("mails.u1.last_id", amount=2) == 1003

    @pytest.mark.asyncio
    async def test_increment_uses_initial_when_missing(self, store: InMemoryKeyValueStore):
        """测试计数器缺失时使用初始值"""
        assert await store.increment("mails.u1.counter", initial=5) == 6

    @pytest.mark.asyncio
    async def test_concurrent_increments_are_unique(self, store: InMemoryKeyValueStore):
        """测试并发自增得到不重复的值"""
        values = await asyncio.gather(*[store.increment("mails.u1.last_id") for _ in range(20)])

        assert sorted(values) == list(range(1001, 1021))


class TestInMemoryKeyValueStoreMove:
    """移动操作测试"""

    @pytest.mark.asyncio
    async def test_move_matching_item(self, store: InMemoryKeyValueStore):
        """测试移动匹配的元素到目标列表末尾"""
        await store.append("mails.u1.unread", {"id": 1001})
        await store.append("mails.u1.unread", {"id": 1002})

        moved = await store.move("mails.u1.unread", "mails.u1.read", lambda item: item["id"] == 1002)

        assert moved == {"id": 1002}
        assert await store.get("mails.u1.unread") == [{"id": 1001}]
        assert await store.get("mails.u1.read") == [{"id": 1002}]

    @pytest.mark.asyncio
    async def test_move_without_match_returns_none(self, store: InMemoryKeyValueStore):
        """测试没有匹配元素时不修改数据"""
        await store.append("mails.u1.unread", {"id": 1001})

        moved = await store.move("mails.u1.unread", "mails.u1.read", lambda item: False)

        assert moved is None
        assert await store.get("mails.u1.read") == []

    @pytest.mark.asyncio
    async def test_concurrent_moves_move_once(self, store: InMemoryKeyValueStore):
        """测试并发移动同一元素只成功一次"""
        await store.append("mails.u1.unread", {"id": 1001})

        results = await asyncio.gather(
            *[
                store.move("mails.u1.unread", "mails.u1.read", lambda item: item["id"] == 1001)
                for _ in range(5)
            ]
        )

        assert len([result for result in results if result is not None]) == 1
        assert await store.get("mails.u1.read") == [{"id": 1001}]


class TestInMemoryKeyValueStoreAppendWithCounter:
    """计数追加测试"""

    @pytest.mark.asyncio
    async def test_append_with_counter(self, store: InMemoryKeyValueStore):
        """测试用新计数值构造并追加元素"""
        item = await store.append_with_counter(
            "mails.u1.unread", "mails.u1.last_id", lambda value: {"id": value}
        )

        assert item == {"id": 1001}
        assert store.snapshot()["mails"]["u1"] == {"unread": [{"id": 1001}], "read": [], "last_id": 1001}

    @pytest.mark.asyncio
    async def test_failed_build_keeps_counter(self, store: InMemoryKeyValueStore):
        """测试构造元素失败时计数器与列表都不变"""

        def broken(value):
            raise RuntimeError("cannot build")

        with pytest.raises(RuntimeError):
            await store.append_with_counter("mails.u1.unread", "mails.u1.last_id", broken)

        assert store.snapshot()["mails"]["u1"] == {"unread": [], "read": [], "last_id": 1000}

    @pytest.mark.asyncio
    async def test_missing_list_parent_keeps_counter(self, store: InMemoryKeyValueStore):
        """测试列表所在文档不存在时计数器不变"""
        with pytest.raises(EntityNotFoundException):
            await store.append_with_counter("mails.u2.unread", "mails.u1.last_id", lambda value: {"id": value})

        assert await store.get("mails.u1.last_id") == 1000

    @pytest.mark.asyncio
    async def test_concurrent_appends_get_unique_values(self, store: InMemoryKeyValueStore):
        """测试并发追加得到不重复的计数值"""
        items = await asyncio.gather(
            *[
                store.append_with_counter("mails.u1.unread", "mails.u1.last_id", lambda value: {"id": value})
                for _ in range(5)
            ]
        )

        assert sorted(item["id"] for item in items) == [1001, 1002, 1003, 1004, 1005]
        assert len(await store.get("mails.u1.unread")) == 5
