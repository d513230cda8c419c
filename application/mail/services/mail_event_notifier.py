"""邮件事件通知服务"""

import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Set

from domain.common.base_event import DomainEvent
from domain.mail.events.mail_events import ERROR_EVENT

EventHandler = Callable[[DomainEvent], Any]

WILDCARD = "*"


class MailEventNotifier:
    """
    邮件事件通知服务

    发布即忘：
    - emit() 从不等待处理器，也从不向调用方抛出异常
    - 有运行中的事件循环时，处理器通过 call_soon 调度；协程处理器作为任务运行
    - 处理器失败只记录日志

    订阅名为 "*" 的处理器接收所有事件。
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        初始化通知服务

        Args:
            logger: 可选的日志记录器
        """
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._pending: Set[asyncio.Task] = set()
        self._logger = logger or logging.getLogger(__name__)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """订阅事件"""
        self._handlers[event_name].append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> None:
        """取消订阅（未订阅时忽略）"""
        handlers = self._handlers.get(event_name, [])
        if handler in handlers:
            handlers.remove(handler)

    @property
    def pending_count(self) -> int:
        """尚未完成的异步处理器数量"""
        return len(self._pending)

    def emit(self, event: DomainEvent) -> None:
        """
        发布事件

        Args:
            event: 领域事件
        """
        try:
            self._log_event(event)
            handlers = [
                *self._handlers.get(event.event_name, []),
                *self._handlers.get(WILDCARD, []),
            ]
            try:
                loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
            except RuntimeError:
                loop = None

            for handler in handlers:
                if loop is not None:
                    loop.call_soon(self._invoke, handler, event)
                else:
                    self._invoke(handler, event)
        except Exception as e:
            self._logger.error(f"Failed to dispatch event {event.event_name}: {e}")

    async def drain(self) -> None:
        """等待已调度的处理器全部完成"""
        # 让 call_soon 调度的回调先执行
        await asyncio.sleep(0)
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _log_event(self, event: DomainEvent) -> None:
        payload = event.to_payload()
        if event.event_name == ERROR_EVENT:
            self._logger.warning(f"Mail event {event.event_name}: {payload}")
        else:
            self._logger.debug(f"Mail event {event.event_name}: {payload}")

    def _invoke(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            outcome = handler(event)
        except Exception as e:
            self._logger.warning(f"Event handler failed for {event.event_name}: {e}")
            return

        if not inspect.isawaitable(outcome):
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # 没有事件循环时无法运行协程处理器
            if inspect.iscoroutine(outcome):
                outcome.close()
            self._logger.warning(f"No running event loop for async handler of {event.event_name}")
            return

        task = asyncio.ensure_future(outcome, loop=loop)
        self._pending.add(task)
        task.add_done_callback(lambda done: self._on_task_done(done, event))

    def _on_task_done(self, task: asyncio.Task, event: DomainEvent) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._logger.warning(f"Async event handler failed for {event.event_name}: {error}")
