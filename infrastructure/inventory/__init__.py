"""背包服务实现"""

from infrastructure.inventory.in_memory_inventory_service import (
    InMemoryInventoryService,
    InMemoryInventoryRegistry,
)
from infrastructure.inventory.http_inventory_service import (
    HttpInventoryService,
    HttpInventoryServiceFactory,
)

__all__ = [
    "InMemoryInventoryService",
    "InMemoryInventoryRegistry",
    "HttpInventoryService",
    "HttpInventoryServiceFactory",
]
