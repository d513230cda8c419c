"""
依赖注入容器

使用示例：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    handler = boot.app.send_mail_handler()
    result = await handler.handle(SendMailCommand(user_id="u1", character="Guide", message="Welcome"))
"""

from dataclasses import dataclass
from typing import Optional

from dependency_injector import providers

from application.mail.services.mailbox_service import MailboxService
from infrastructure.config.logging_config import configure_logging
from infrastructure.config.settings import Settings
from .application import AppContainer
from .config import ConfigContainer
from .infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已连接的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer

    def mailbox_for(self, user_id: str) -> MailboxService:
        """创建绑定到指定用户及其背包的门面服务"""
        inventory = self.infra.inventory_factory()(user_id)
        return self.app.mailbox_service(user_id=user_id, inventory=inventory)


def bootstrap(settings: Optional[Settings] = None, setup_logging: bool = True) -> Bootstrap:
    """
    创建并连接所有容器

    Args:
        settings: 可选的配置实例（测试时传入），不传则读取环境变量
        setup_logging: 是否按配置初始化日志

    Returns:
        Bootstrap 实例
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(providers.Object(settings))

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)

    if setup_logging:
        configure_logging(config.settings())

    return Bootstrap(config=config, infra=infra, app=app)


__all__ = [
    "Bootstrap",
    "bootstrap",
    "ConfigContainer",
    "InfraContainer",
    "AppContainer",
]
