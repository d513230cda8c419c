"""Tests for domain exceptions"""

from domain.common.exceptions import DomainException
from domain.mail.exceptions import (
    InsufficientCapacityException,
    InvalidMailIdException,
    MailAlreadyReadException,
    MailboxAlreadyExistsException,
    MailboxNotFoundException,
    NoRewardException,
)


class TestMailExceptionCodes:
    """邮件异常错误代码测试"""

    def test_codes(self):
        """测试每种异常的错误代码"""
        assert MailboxAlreadyExistsException("u1").code == "ALREADY_EXISTS"
        assert MailboxNotFoundException("u1").code == "NOT_FOUND"
        assert InvalidMailIdException(1001).code == "INVALID_MAIL_ID"
        assert MailAlreadyReadException(1001).code == "ALREADY_READ"
        assert NoRewardException(1001).code == "NO_REWARD"
        assert InsufficientCapacityException("u1", 3).code == "INSUFFICIENT_CAPACITY"

    def test_all_are_domain_exceptions(self):
        """测试都继承自 DomainException 并携带消息"""
        error = MailboxAlreadyExistsException("u1")

        assert isinstance(error, DomainException)
        assert error.message == "User already has a mailbox."
        assert str(NoRewardException(1001)) == "Mail 1001 has no reward to collect"

    def test_explicit_code_overrides_default(self):
        """测试构造时指定错误代码"""
        assert DomainException("boom", code="CUSTOM").code == "CUSTOM"
