"""
Street Games Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 独立的事件总线、账本和上下文fixture
- 固定种子的随机数生成器
- 压缩停顿的时间节奏配置
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random

import pytest

from street_games.core import EconomyConfig, TimingConfig, create_game_context
from street_games.core.economy import Ledger
from street_games.core.events import EventBus, EventType


@pytest.fixture
def event_bus():
    """每个测试独立的事件总线"""
    return EventBus()


@pytest.fixture
def ledger(event_bus):
    """默认经济配置的账本（初始余额100）"""
    return Ledger(event_bus, EconomyConfig())


@pytest.fixture
def rng():
    """固定种子的随机数生成器"""
    return random.Random(20240601)


@pytest.fixture
def fast_timing():
    """所有停顿压缩到最短的时间节奏配置"""
    return TimingConfig(
        dice_roll_seconds=0.0,
        coin_min_flip_seconds=0.0,
        purrinha_reveal_interval=0.01,
        purrinha_reveal_pause=0.0,
        palitinho_dice_pause=0.0,
        palitinho_reveal_pause=0.0,
    )


@pytest.fixture
def context(fast_timing):
    """固定种子、快速节奏的游戏上下文"""
    return create_game_context(timing=fast_timing, seed=7)


@pytest.fixture
def money_events(event_bus):
    """收集MONEY_CHANGED载荷的列表"""
    received = []
    event_bus.on(EventType.MONEY_CHANGED, received.append)
    return received


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "slow: 标记耗时较长的统计测试"
    )
