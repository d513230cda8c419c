"""邮件命令处理器"""

from application.commands.mail.collect_reward import CollectRewardCommand
from application.commands.mail.create_mailbox import CreateMailboxCommand
from application.commands.mail.read_mail import ReadMailCommand
from application.commands.mail.send_mail import SendMailCommand
from application.handlers.mail.mail_handler_result import MailHandlerResult
from application.mail.services.mail_resolver import MailResolver
from application.mail.services.mail_sender import MailSender
from application.mail.services.mailbox_lifecycle_service import MailboxLifecycleService


class CreateMailboxHandler:
    """创建邮箱处理器"""

    def __init__(self, lifecycle: MailboxLifecycleService):
        self._lifecycle = lifecycle

    async def handle(self, command: CreateMailboxCommand) -> MailHandlerResult:
        if not command.user_id:
            return MailHandlerResult.invalid_user_id()
        result = await self._lifecycle.create(command.user_id)
        return MailHandlerResult.from_result(result, lambda mailbox: mailbox.to_dict())


class SendMailHandler:
    """发送邮件处理器"""

    def __init__(self, sender: MailSender):
        self._sender = sender

    async def handle(self, command: SendMailCommand) -> MailHandlerResult:
        if not command.user_id:
            return MailHandlerResult.invalid_user_id()
        result = await self._sender.send(
            command.user_id,
            character=command.character,
            message=command.message,
            reward=command.reward,
        )
        return MailHandlerResult.from_result(result, lambda mail: mail.to_dict())


class ReadMailHandler:
    """
    标记已读处理器

    业务流程：
    1. 在已读 + 未读中检索邮件
    2. 通过句柄执行已读转换
    """

    def __init__(self, resolver: MailResolver):
        self._resolver = resolver

    async def handle(self, command: ReadMailCommand) -> MailHandlerResult:
        if not command.user_id:
            return MailHandlerResult.invalid_user_id()

        fetched = await self._resolver.fetch(command.user_id, command.mail_id)
        if not fetched.success:
            return MailHandlerResult.from_result(fetched)

        result = await fetched.value.read()
        return MailHandlerResult.from_result(result, lambda mail: mail.to_dict())


class CollectRewardHandler:
    """
    领取奖励处理器

    业务流程：
    1. 在已读 + 未读中检索邮件
    2. 通过句柄领取奖励，结果中附带已发放与失败的物品
    """

    def __init__(self, resolver: MailResolver):
        self._resolver = resolver

    async def handle(self, command: CollectRewardCommand) -> MailHandlerResult:
        if not command.user_id:
            return MailHandlerResult.invalid_user_id()

        fetched = await self._resolver.fetch(command.user_id, command.mail_id)
        if not fetched.success:
            return MailHandlerResult.from_result(fetched)

        result = await fetched.value.collect()
        handler_result = MailHandlerResult.from_result(result)
        if result.collected_items or result.failed_items:
            handler_result.data = {
                "mail_id": fetched.value.mail_id,
                "collected": list(result.collected_items),
                "failed": list(result.failed_items),
            }
        return handler_result
