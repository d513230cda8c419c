"""Tests for KeyValueMailboxRepository"""

import pytest

from domain.mail.exceptions import MailboxAlreadyExistsException, MailboxNotFoundException
from domain.mail.value_objects.mail_message import MailMessage
from infrastructure.mail.repositories.key_value_mailbox_repository import KeyValueMailboxRepository
from infrastructure.mail.stores.in_memory_key_value_store import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(store: InMemoryKeyValueStore) -> KeyValueMailboxRepository:
    return KeyValueMailboxRepository(store)


class TestMailboxCreation:
    """邮箱创建测试"""

    @pytest.mark.asyncio
    async def test_create_writes_empty_document(self, repository, store):
        """测试创建写入空文档"""
        mailbox = await repository.create("u1")

        assert mailbox.last_id == 1000
        assert store.snapshot() == {"mails": {"u1": {"unread": [], "read": [], "last_id": 1000}}}
        assert await repository.exists("u1") is True

    @pytest.mark.asyncio
    async def test_create_twice_raises(self, repository):
        """测试重复创建"""
        await repository.create("u1")

        with pytest.raises(MailboxAlreadyExistsException):
            await repository.create("u1")

    @pytest.mark.asyncio
    async def test_custom_namespace(self, store):
        """测试自定义命名空间"""
        repository = KeyValueMailboxRepository(store, namespace="game_mails", id_base=5000)

        await repository.create("u1")

        assert store.snapshot()["game_mails"]["u1"]["last_id"] == 5000

    def test_user_id_with_dot_is_rejected(self, repository):
        """测试包含点号的用户 ID"""
        with pytest.raises(ValueError):
            repository.path_for("a.b")


class TestMailboxAccess:
    """邮箱读写测试"""

    @pytest.mark.asyncio
    async def test_get_missing_mailbox(self, repository):
        """测试读取不存在的邮箱"""
        assert await repository.exists("u1") is False
        with pytest.raises(MailboxNotFoundException):
            await repository.get("u1")

    @pytest.mark.asyncio
    async def test_add_unread_assigns_sequential_ids(self, repository):
        """测试追加未读邮件时顺序分配 ID"""
        await repository.create("u1")

        first = await repository.add_unread("u1", lambda mail_id: MailMessage(id=mail_id, message="a"))
        second = await repository.add_unread("u1", lambda mail_id: MailMessage(id=mail_id, message="b"))

        assert (first.id, second.id) == (1001, 1002)
        mailbox = await repository.get("u1")
        assert [mail.id for mail in mailbox.unread] == [1001, 1002]
        assert mailbox.last_id == 1002

    @pytest.mark.asyncio
    async def test_add_unread_for_missing_mailbox(self, repository):
        """测试为不存在的邮箱追加邮件"""
        with pytest.raises(MailboxNotFoundException):
            await repository.add_unread("u1", lambda mail_id: MailMessage(id=mail_id, message="a"))

    @pytest.mark.asyncio
    async def test_failed_build_does_not_consume_id(self, repository, store):
        """测试构造邮件失败时不消耗 ID"""
        await repository.create("u1")

        def broken(mail_id):
            raise RuntimeError("cannot build")

        with pytest.raises(RuntimeError):
            await repository.add_unread("u1", broken)

        assert store.snapshot()["mails"]["u1"] == {"unread": [], "read": [], "last_id": 1000}
        mail = await repository.add_unread("u1", lambda mail_id: MailMessage(id=mail_id, message="a"))
        assert mail.id == 1001

    @pytest.mark.asyncio
    async def test_add_unread_for_legacy_document(self):
        """测试旧文档（无计数器）按邮件总数继续编号"""
        store = InMemoryKeyValueStore(
            {
                "mails": {
                    "u1": {
                        "unread": [{"id": 1001, "character": "A", "message": "x", "reward": None}],
                        "read": [],
                    }
                }
            }
        )
        repository = KeyValueMailboxRepository(store)

        mail = await repository.add_unread("u1", lambda mail_id: MailMessage(id=mail_id, message="y"))

        assert mail.id == 1002
        assert store.snapshot()["mails"]["u1"]["last_id"] == 1002

    @pytest.mark.asyncio
    async def test_add_and_move_to_read(self, repository):
        """测试追加未读邮件并标记已读"""
        await repository.create("u1")
        await repository.add_unread("u1", lambda mail_id: MailMessage(id=mail_id, character="A", message="Hi"))

        assert await repository.move_to_read("u1", 1001) is True
        assert await repository.move_to_read("u1", 1001) is False

        mailbox = await repository.get("u1")
        assert mailbox.unread == []
        assert [mail.id for mail in mailbox.read] == [1001]

    @pytest.mark.asyncio
    async def test_move_to_read_missing_mailbox(self, repository):
        """测试邮箱不存在时标记已读"""
        with pytest.raises(MailboxNotFoundException):
            await repository.move_to_read("u1", 1001)
