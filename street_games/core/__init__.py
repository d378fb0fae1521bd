"""
Core Module - 纯领域逻辑层

核心模块只能依赖其他核心模块，不能依赖应用层。

Modules:
    config: 经济与时间节奏配置
    context: 显式传递的游戏上下文
    events: 领域事件与事件总线
    economy: 余额账本和下注上下限
    deck: 扑克牌与牌组
"""

from .config import EconomyConfig, TimingConfig
from .context import GameContext, create_game_context

__all__ = [
    'EconomyConfig',
    'TimingConfig',
    'GameContext',
    'create_game_context',
]
