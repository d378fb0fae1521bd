"""
Application Layer - 应用服务层

在核心引擎之上提供资金驱动、配置预设和对UI的数据传输对象。

Services:
    GameHost: 小游戏通用驱动器（下注、推进、结算、逃跑）
    ConfigService: 配置管理服务
"""

from .types import ResultStatus, ErrorCode, CommandResult, QueryResult
from .dto import MinigameSnapshot, RoundSettlement
from .config_service import ConfigType, LoggingConfig, ConfigService, configure_logging
from .game_host import GameHost

__all__ = [
    'ResultStatus',
    'ErrorCode',
    'CommandResult',
    'QueryResult',
    'MinigameSnapshot',
    'RoundSettlement',
    'ConfigType',
    'LoggingConfig',
    'ConfigService',
    'configure_logging',
    'GameHost',
]
