"""
游戏上下文

把事件总线、账本、随机数生成器和配置打包成一个显式传递的对象，
由顶层游戏会话持有，取代进程级单例。
"""

from dataclasses import dataclass, field
from typing import Optional
import random

from .config import EconomyConfig, TimingConfig
from .economy import Ledger
from .events import EventBus

__all__ = ['GameContext', 'create_game_context']


@dataclass
class GameContext:
    """游戏上下文，包含所有小游戏共享的资源"""
    event_bus: EventBus
    ledger: Ledger
    rng: random.Random
    timing: TimingConfig = field(default_factory=TimingConfig)


def create_game_context(economy: Optional[EconomyConfig] = None,
                        timing: Optional[TimingConfig] = None,
                        seed: Optional[int] = None) -> GameContext:
    """
    创建一个完整的游戏上下文

    Args:
        economy: 经济配置
        timing: 时间节奏配置
        seed: 随机种子，指定后所有小游戏的结果可复现

    Returns:
        GameContext: 新的上下文实例
    """
    event_bus = EventBus()
    return GameContext(
        event_bus=event_bus,
        ledger=Ledger(event_bus, economy),
        rng=random.Random(seed),
        timing=timing or TimingConfig(),
    )
