"""领域事件基类"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    领域事件基类

    Attributes:
        event_name: 事件名称（订阅时使用）
        event_id: 事件唯一标识
        occurred_at: 事件发生时间
    """

    event_name: ClassVar[str] = "domainEvent"

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_payload(self) -> Dict[str, Any]:
        """转换为事件载荷（子类覆盖）"""
        return {}
