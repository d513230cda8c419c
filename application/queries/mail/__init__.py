"""Mail queries package"""

from application.queries.mail.has_mailbox import HasMailboxQuery
from application.queries.mail.get_mailbox import GetMailboxQuery
from application.queries.mail.fetch_mail import FetchMailQuery

__all__ = [
    "HasMailboxQuery",
    "GetMailboxQuery",
    "FetchMailQuery",
]
