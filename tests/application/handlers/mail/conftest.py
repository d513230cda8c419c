"""邮件处理器测试公共 fixture"""

import pytest

from application.mail.services.mail_event_notifier import MailEventNotifier
from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mail_sender import MailSender
from application.mail.services.mail_transition_service import MailTransitionService
from application.mail.services.mailbox_lifecycle_service import MailboxLifecycleService
from application.mail.services.reward_collector import RewardCollector
from infrastructure.inventory.in_memory_inventory_service import InMemoryInventoryRegistry
from infrastructure.mail.repositories.key_value_mailbox_repository import KeyValueMailboxRepository
from infrastructure.mail.stores.in_memory_key_value_store import InMemoryKeyValueStore


@pytest.fixture
def repository() -> KeyValueMailboxRepository:
    return KeyValueMailboxRepository(InMemoryKeyValueStore())


@pytest.fixture
def notifier() -> MailEventNotifier:
    return MailEventNotifier()


@pytest.fixture
def inventories() -> InMemoryInventoryRegistry:
    return InMemoryInventoryRegistry(capacity=5)


@pytest.fixture
def lifecycle(repository, notifier) -> MailboxLifecycleService:
    return MailboxLifecycleService(repository, notifier)


@pytest.fixture
def sender(repository, notifier) -> MailSender:
    return MailSender(repository, notifier)


@pytest.fixture
def resolver(repository, notifier, inventories) -> MailResolver:
    transition = MailTransitionService(repository, notifier)
    collector = RewardCollector(inventories, notifier)
    return MailResolver(repository, transition, collector, notifier)
