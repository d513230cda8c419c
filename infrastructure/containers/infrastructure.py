"""
基础设施容器（InfraContainer）

管理所有基础设施组件：数据库、键值存储、邮箱仓储、背包服务等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from infrastructure.database.database_factory import DatabaseFactory
from infrastructure.inventory.http_inventory_service import HttpInventoryServiceFactory
from infrastructure.inventory.in_memory_inventory_service import InMemoryInventoryRegistry
from infrastructure.mail.repositories.key_value_mailbox_repository import KeyValueMailboxRepository
from infrastructure.mail.stores.in_memory_key_value_store import InMemoryKeyValueStore
from infrastructure.mail.stores.sqlalchemy_key_value_store import SqlAlchemyKeyValueStore


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 数据库 ============

    # 数据库引擎（单例）
    db_engine: providers.Singleton[Engine] = providers.Singleton(
        DatabaseFactory.create_engine,
        settings=config.settings,
    )

    # Session 工厂（单例）
    db_session_factory: providers.Singleton[sessionmaker] = providers.Singleton(
        DatabaseFactory.create_session_factory,
        engine=db_engine,
    )

    # ============ 键值存储 ============

    # 按 store_backend 选择实现（memory / database）
    key_value_store = providers.Selector(
        config.settings.provided.store_backend,
        memory=providers.Singleton(InMemoryKeyValueStore),
        database=providers.Singleton(
            SqlAlchemyKeyValueStore,
            session_factory=db_session_factory,
        ),
    )

    # ============ 仓储 ============

    # 用户邮箱仓储
    mailbox_repository = providers.Singleton(
        KeyValueMailboxRepository,
        store=key_value_store,
        namespace=config.settings.provided.mail_namespace,
        id_base=config.settings.provided.mail_id_base,
    )

    # ============ 背包服务 ============

    # 背包工厂：user_id -> InventoryService（配置了 API 地址时走 HTTP）
    inventory_factory = providers.Selector(
        config.settings.provided.inventory_backend,
        memory=providers.Singleton(
            InMemoryInventoryRegistry,
            capacity=config.settings.provided.inventory_default_capacity,
        ),
        http=providers.Singleton(
            HttpInventoryServiceFactory,
            base_url=config.settings.provided.inventory_api_base_url,
            timeout=config.settings.provided.inventory_timeout,
        ),
    )
