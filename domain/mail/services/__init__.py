"""邮件领域服务接口"""

from domain.mail.services.key_value_store import KeyValueStore
from domain.mail.services.inventory_service import InventoryService

__all__ = ["KeyValueStore", "InventoryService"]
