"""
应用容器（AppContainer）

管理应用层组件：事件通知、邮件应用服务、命令/查询处理器。
依赖 InfraContainer 获取仓储与背包服务。
"""

from typing import TYPE_CHECKING

from dependency_injector import containers, providers

# 导入邮件应用服务
from application.mail.services.mail_event_notifier import MailEventNotifier
from application.mail.services.mailbox_lifecycle_service import MailboxLifecycleService
from application.mail.services.mail_transition_service import MailTransitionService
from application.mail.services.reward_collector import RewardCollector
from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mail_sender import MailSender
from application.mail.services.mailbox_service import MailboxService

# 导入邮件 Handlers
from application.handlers.mail.mail_command_handlers import (
    CreateMailboxHandler,
    SendMailHandler,
    ReadMailHandler,
    CollectRewardHandler,
)
from application.handlers.mail.mail_query_handlers import (
    HasMailboxHandler,
    GetMailboxHandler,
    FetchMailHandler,
)

if TYPE_CHECKING:
    from .infrastructure import InfraContainer


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 事件通知 ============
    # 单例：订阅关系在整个应用内共享
    event_notifier = providers.Singleton(MailEventNotifier)

    # ============ 邮件应用服务 ============
    mailbox_lifecycle_service = providers.Singleton(
        MailboxLifecycleService,
        repository=infra.mailbox_repository,
        notifier=event_notifier,
    )

    mail_transition_service = providers.Singleton(
        MailTransitionService,
        repository=infra.mailbox_repository,
        notifier=event_notifier,
    )

    reward_collector = providers.Singleton(
        RewardCollector,
        inventory_factory=infra.inventory_factory,
        notifier=event_notifier,
    )

    mail_resolver = providers.Singleton(
        MailResolver,
        repository=infra.mailbox_repository,
        transition=mail_transition_service,
        collector=reward_collector,
        notifier=event_notifier,
    )

    mail_sender = providers.Singleton(
        MailSender,
        repository=infra.mailbox_repository,
        notifier=event_notifier,
    )

    # 单用户门面：调用时传入 user_id 与 inventory
    mailbox_service = providers.Factory(
        MailboxService,
        repository=infra.mailbox_repository,
        notifier=event_notifier,
    )

    # ============ 命令处理器 ============
    create_mailbox_handler = providers.Factory(
        CreateMailboxHandler,
        lifecycle=mailbox_lifecycle_service,
    )

    send_mail_handler = providers.Factory(
        SendMailHandler,
        sender=mail_sender,
    )

    read_mail_handler = providers.Factory(
        ReadMailHandler,
        resolver=mail_resolver,
    )

    collect_reward_handler = providers.Factory(
        CollectRewardHandler,
        resolver=mail_resolver,
    )

    # ============ 查询处理器 ============
    has_mailbox_handler = providers.Factory(
        HasMailboxHandler,
        lifecycle=mailbox_lifecycle_service,
    )

    get_mailbox_handler = providers.Factory(
        GetMailboxHandler,
        lifecycle=mailbox_lifecycle_service,
    )

    fetch_mail_handler = providers.Factory(
        FetchMailHandler,
        resolver=mail_resolver,
    )
