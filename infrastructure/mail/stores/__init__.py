"""键值存储实现"""

from infrastructure.mail.stores.in_memory_key_value_store import InMemoryKeyValueStore
from infrastructure.mail.stores.sqlalchemy_key_value_store import SqlAlchemyKeyValueStore

__all__ = ["InMemoryKeyValueStore", "SqlAlchemyKeyValueStore"]
