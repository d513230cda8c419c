"""邮件应用层测试公共 fixture"""

from typing import List

import pytest

from application.mail.services.mail_event_notifier import MailEventNotifier
from domain.common.base_event import DomainEvent
from infrastructure.inventory.in_memory_inventory_service import InMemoryInventoryService
from infrastructure.mail.repositories.key_value_mailbox_repository import KeyValueMailboxRepository
from infrastructure.mail.stores.in_memory_key_value_store import InMemoryKeyValueStore


@pytest.fixture
def notifier() -> MailEventNotifier:
    return MailEventNotifier()


@pytest.fixture
def events(notifier: MailEventNotifier) -> List[DomainEvent]:
    """记录通知服务发布的所有事件（断言前需 await notifier.drain()）"""
    recorded: List[DomainEvent] = []
    notifier.subscribe("*", recorded.append)
    return recorded


@pytest.fixture
def repository() -> KeyValueMailboxRepository:
    return KeyValueMailboxRepository(InMemoryKeyValueStore())


@pytest.fixture
def inventory() -> InMemoryInventoryService:
    return InMemoryInventoryService("u1", capacity=10)
