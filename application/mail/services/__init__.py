"""邮件应用服务"""

from application.mail.services.mail_event_notifier import MailEventNotifier, WILDCARD
from application.mail.services.mailbox_lifecycle_service import MailboxLifecycleService
from application.mail.services.mail_transition_service import MailTransitionService
from application.mail.services.reward_collector import RewardCollector, InventoryFactory
from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mail_sender import MailSender
from application.mail.services.mailbox_service import MailboxService

__all__ = [
    "MailEventNotifier",
    "WILDCARD",
    "MailboxLifecycleService",
    "MailTransitionService",
    "RewardCollector",
    "InventoryFactory",
    "MailResolver",
    "MailSender",
    "MailboxService",
]
