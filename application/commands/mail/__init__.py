"""邮件命令模块"""

from application.commands.mail.create_mailbox import CreateMailboxCommand
from application.commands.mail.send_mail import SendMailCommand
from application.commands.mail.read_mail import ReadMailCommand
from application.commands.mail.collect_reward import CollectRewardCommand

__all__ = [
    "CreateMailboxCommand",
    "SendMailCommand",
    "ReadMailCommand",
    "CollectRewardCommand",
]
