"""
street_games - 街头小游戏规则与结算核心

六个小游戏（21点、扑克、骰子、猜硬币、Purrinha、Palitinho）的规则引擎，
共享同一个余额账本。渲染和输入属于外部表现层，不在本包范围内。

Packages:
    core: 配置、上下文、事件、账本、牌组
    minigames: 小游戏状态机
    application: 通用驱动器与配置服务
"""

__version__ = "1.0.0"

__all__ = []
