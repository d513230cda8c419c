"""领域异常定义

所有领域异常都携带 message 与 code，应用层据此构造结果对象。
"""

from typing import Any


class DomainException(Exception):
    """领域异常基类"""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str = ""):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class EntityNotFoundException(DomainException):
    """实体不存在"""

    code = "NOT_FOUND"

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} '{identifier}' not found")


class DuplicateEntityException(DomainException):
    """实体重复"""

    code = "ALREADY_EXISTS"

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} '{identifier}' already exists")


class InvalidOperationException(DomainException):
    """非法操作"""

    code = "INVALID_OPERATION"

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(reason)


class InvalidStateTransitionException(DomainException):
    """非法状态转换"""

    code = "INVALID_STATE_TRANSITION"

    def __init__(self, entity: str, from_state: str, to_state: str, reason: str):
        self.entity = entity
        self.from_state = from_state
        self.to_state = to_state
        self.reason = reason
        super().__init__(reason)


class InvalidValueObjectException(DomainException):
    """值对象无效"""

    code = "INVALID_VALUE"

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {value_object_type}: {reason}")


class ConcurrentModificationException(DomainException):
    """并发修改冲突（乐观锁版本不一致）"""

    code = "CONCURRENT_MODIFICATION"

    def __init__(self, resource: str, expected_version: int, actual_version: int):
        self.resource = resource
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"{resource} was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})"
        )
