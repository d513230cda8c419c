"""领域层公共基类与异常"""

from domain.common.base_value_object import BaseValueObject
from domain.common.base_event import DomainEvent
from domain.common.exceptions import (
    DomainException,
    EntityNotFoundException,
    DuplicateEntityException,
    InvalidOperationException,
    InvalidStateTransitionException,
    InvalidValueObjectException,
    ConcurrentModificationException,
)

__all__ = [
    "BaseValueObject",
    "DomainEvent",
    "DomainException",
    "EntityNotFoundException",
    "DuplicateEntityException",
    "InvalidOperationException",
    "InvalidStateTransitionException",
    "InvalidValueObjectException",
    "ConcurrentModificationException",
]
