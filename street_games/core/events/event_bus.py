"""
Event Bus - 事件总线系统

同步的发布/订阅通道。账本通过它通知余额变化，UI和其他系统订阅消费。
所有投递都在调用emit的线程上同步完成，不做排队。
"""

from __future__ import annotations
from typing import Dict, List, Callable, Optional, Tuple
from collections import defaultdict
import logging

from .domain_events import EventType, EventPayload

__all__ = ['EventHandler', 'EventBus']

EventHandler = Callable[[EventPayload], None]


class EventBus:
    """
    事件总线

    负责事件的订阅、取消订阅和分发。

    投递规则：
    - 按订阅顺序依次调用emit时刻已注册的处理器
    - 单个处理器抛出异常只记录日志，不影响后续处理器
    - 同一处理器对同一事件类型重复订阅视为一次
    """

    def __init__(self, max_history_size: int = 1000):
        """
        初始化事件总线

        Args:
            max_history_size: 事件历史记录的最大条数
        """
        self._handlers: Dict[EventType, List[EventHandler]] = defaultdict(list)
        self._event_history: List[Tuple[EventType, EventPayload]] = []
        self._max_history_size = max_history_size
        self._logger = logging.getLogger(__name__)

    def on(self, event_type: EventType, handler: EventHandler) -> None:
        """
        订阅特定类型的事件

        Args:
            event_type: 事件类型
            handler: 事件处理函数，接收事件载荷
        """
        handlers = self._handlers[event_type]
        if handler in handlers:
            return
        handlers.append(handler)
        self._logger.debug(f"Handler {getattr(handler, '__name__', repr(handler))} subscribed to {event_type.name}")

    def off(self, event_type: EventType, handler: EventHandler) -> bool:
        """
        取消订阅特定类型的事件

        Args:
            event_type: 事件类型
            handler: 事件处理函数

        Returns:
            bool: 是否成功取消订阅
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        self._logger.debug(f"Handler {getattr(handler, '__name__', repr(handler))} unsubscribed from {event_type.name}")
        return True

    def emit(self, event_type: EventType, payload: EventPayload) -> None:
        """
        发布事件（同步）

        Args:
            event_type: 事件类型
            payload: 事件载荷
        """
        self._add_to_history(event_type, payload)

        # 复制一份，处理器在回调中增删订阅不影响本次投递
        handlers = list(self._handlers.get(event_type, ()))
        self._logger.debug(f"Publishing event {event_type.name} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                handler(payload)
            except Exception:
                self._logger.exception(
                    f"Error in handler {getattr(handler, '__name__', repr(handler))} for {event_type.name}"
                )

    def clear(self) -> None:
        """移除所有订阅（用于测试或整局重置）"""
        self._handlers.clear()

    def _add_to_history(self, event_type: EventType, payload: EventPayload) -> None:
        self._event_history.append((event_type, payload))
        if len(self._event_history) > self._max_history_size:
            self._event_history.pop(0)

    def get_event_history(self,
                          event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[Tuple[EventType, EventPayload]]:
        """
        获取事件历史

        Args:
            event_type: 过滤的事件类型
            limit: 返回的最大事件数量（取最近的）

        Returns:
            List[Tuple[EventType, EventPayload]]: 事件列表
        """
        events = self._event_history[:]
        if event_type:
            events = [e for e in events if e[0] == event_type]
        if limit:
            events = events[-limit:]
        return events

    def clear_history(self) -> None:
        """清空事件历史"""
        self._event_history.clear()

    def get_handler_count(self, event_type: EventType) -> int:
        """获取某事件类型的处理器数量"""
        return len(self._handlers.get(event_type, ()))
