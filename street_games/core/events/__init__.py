"""
Events Module - 领域事件

该模块实现账本与小游戏的事件系统，包括：
- 事件类型与载荷定义
- 同步事件总线

Classes:
    EventType: 事件类型枚举
    EventBus: 事件总线

Event Payloads:
    MoneyChangedEvent: 余额变化
    MinigameStartedEvent: 小游戏打开
    MinigameEndedEvent: 小游戏结束
    NotificationEvent: 提示消息
    GameOverEvent: 破产
"""

from .domain_events import (
    EventType,
    EventPayload,
    MoneyChangedEvent,
    MinigameStartedEvent,
    MinigameEndedEvent,
    NotificationEvent,
    GameOverEvent,
)

from .event_bus import (
    EventHandler,
    EventBus,
)

__all__ = [
    # 事件类型
    "EventType",

    # 事件载荷
    "EventPayload",
    "MoneyChangedEvent",
    "MinigameStartedEvent",
    "MinigameEndedEvent",
    "NotificationEvent",
    "GameOverEvent",

    # 事件总线
    "EventHandler",
    "EventBus",
]
