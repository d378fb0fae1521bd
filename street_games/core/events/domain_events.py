"""
Domain Events - 领域事件定义

定义账本与小游戏向外部（UI、其他系统）广播的事件类型及其载荷。
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any
from enum import Enum, auto

__all__ = [
    'EventType',
    'EventPayload',
    'MoneyChangedEvent',
    'MinigameStartedEvent',
    'MinigameEndedEvent',
    'NotificationEvent',
    'GameOverEvent',
]


class EventType(Enum):
    """事件类型枚举"""
    # 经济事件
    MONEY_CHANGED = auto()

    # 小游戏生命周期事件
    MINIGAME_STARTED = auto()
    MINIGAME_ENDED = auto()

    # 系统事件
    NOTIFICATION = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class EventPayload:
    """事件载荷基类"""

    def to_dict(self) -> Dict[str, Any]:
        """
        将载荷转换为字典格式，用于日志和UI层

        Returns:
            Dict[str, Any]: 载荷的字典表示
        """
        return asdict(self)


@dataclass(frozen=True)
class MoneyChangedEvent(EventPayload):
    """
    余额变化事件

    Attributes:
        amount: 变化后的余额
        delta: 相对变化前余额的差值（重置时为0）
    """
    amount: int
    delta: int


@dataclass(frozen=True)
class MinigameStartedEvent(EventPayload):
    """小游戏打开事件"""
    game_type: str


@dataclass(frozen=True)
class MinigameEndedEvent(EventPayload):
    """小游戏结束事件，money_change为本局净输赢"""
    game_type: str
    money_change: int


@dataclass(frozen=True)
class NotificationEvent(EventPayload):
    """提示消息事件（例如余额不足）"""
    message: str
    duration: float = 2.0


@dataclass(frozen=True)
class GameOverEvent(EventPayload):
    """破产事件：余额已不足以支付最低下注"""
    balance: int
    min_bet: int
