"""HTTP 背包服务客户端实现"""

import logging
from typing import Any, Dict, Optional, Sequence

import httpx

from domain.mail.exceptions import InventoryServiceException


class HttpInventoryService:
    """
    HTTP 背包服务客户端

    通过背包服务的 REST API 检查容量和发放物品：
    - POST {base_url}/inventories/{user_id}/capacity-check  body: {"items": [...]}
      响应: {"has_space": true/false}
    - POST {base_url}/inventories/{user_id}/items  body: {"item": ...}

    非 2xx 响应、超时和网络错误都转换为 InventoryServiceException。
    不做重试：奖励发放不是幂等操作。

    Attributes:
        TIMEOUT: 默认请求超时时间（秒）
    """

    TIMEOUT: float = 10.0

    def __init__(
        self,
        base_url: str,
        user_id: str,
        timeout: float = TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化客户端

        Args:
            base_url: 背包服务地址
            user_id: 背包所属用户
            timeout: 请求超时时间（秒）
            client: 可选的共享 httpx.AsyncClient（不传则每次请求新建）
            logger: 日志记录器（可选）
        """
        self._base_url = base_url.rstrip("/")
        self._user_id = user_id
        self._timeout = timeout
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    @property
    def user_id(self) -> str:
        return self._user_id

    async def check_capacity(self, items: Sequence[Any]) -> bool:
        data = await self._post("capacity-check", {"items": list(items)})
        has_space = data.get("has_space")
        if not isinstance(has_space, bool):
            raise InventoryServiceException(
                f"Malformed capacity-check response for user {self._user_id}: {data!r}"
            )
        return has_space

    async def add_item(self, item: Any) -> None:
        await self._post("items", {"item": item})
        self._logger.debug(f"Item added to inventory of user {self._user_id}")

    async def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self._base_url}/inventories/{self._user_id}/{endpoint}"
        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=payload)
        except httpx.TimeoutException:
            self._logger.warning(f"Inventory request timeout: {url}")
            raise InventoryServiceException(f"Inventory request timeout: {endpoint}")
        except httpx.RequestError as e:
            self._logger.warning(f"Inventory request error: {url} - {e}")
            raise InventoryServiceException(f"Inventory request error: {str(e)}")

        if not 200 <= response.status_code < 300:
            self._logger.warning(f"Inventory request failed: {url} - HTTP {response.status_code}")
            raise InventoryServiceException(
                f"Inventory service returned HTTP {response.status_code} for {endpoint}"
            )

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            raise InventoryServiceException(f"Inventory service returned invalid JSON for {endpoint}")
        return data if isinstance(data, dict) else {}


class HttpInventoryServiceFactory:
    """
    HTTP 背包服务工厂

    按用户创建 HttpInventoryService，所有实例共享同一个可选的 httpx.AsyncClient。
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = HttpInventoryService.TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    def __call__(self, user_id: str) -> HttpInventoryService:
        return HttpInventoryService(
            base_url=self._base_url,
            user_id=user_id,
            timeout=self._timeout,
            client=self._client,
        )
