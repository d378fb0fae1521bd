"""
ConfigService - 配置管理服务

集中管理经济、时间节奏和日志配置的命名预设，
为应用层提供统一的配置查询接口。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Optional

from ..core.config import EconomyConfig, TimingConfig
from .types import ErrorCode, QueryResult

__all__ = ['ConfigType', 'LoggingConfig', 'ConfigService', 'configure_logging']


class ConfigType(Enum):
    """配置类型枚举"""
    ECONOMY = "economy"
    TIMING = "timing"
    LOGGING = "logging"


@dataclass(frozen=True)
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    log_file_path: Optional[str] = None

    def __post_init__(self):
        if self.log_level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"无效的日志级别: {self.log_level}")


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.ECONOMY] = {
            'default': EconomyConfig(),
            'high_roller': EconomyConfig(
                starting_money=1000,
                bet_min_base=50,
                bet_max_base=500
            ),
        }

        self._configs[ConfigType.TIMING] = {
            'default': TimingConfig(),
            # 测试和自动对局使用，所有停顿压缩到最短
            'fast': TimingConfig(
                dice_roll_seconds=0.0,
                coin_min_flip_seconds=0.0,
                purrinha_reveal_interval=0.01,
                purrinha_reveal_pause=0.0,
                palitinho_dice_pause=0.0,
                palitinho_reveal_pause=0.0
            ),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }

        self.logger.debug("默认配置加载完成")

    def _get(self, config_type: ConfigType, profile: str) -> Any:
        profiles = self._configs[config_type]
        if profile not in profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = 'default'
        return profiles[profile]

    def get_economy_config(self, profile: str = "default") -> QueryResult[EconomyConfig]:
        """
        获取经济配置

        Args:
            profile: 配置名 (default, high_roller)

        Returns:
            查询结果，包含经济配置
        """
        return QueryResult.ok(self._get(ConfigType.ECONOMY, profile))

    def get_timing_config(self, profile: str = "default") -> QueryResult[TimingConfig]:
        """
        获取时间节奏配置

        Args:
            profile: 配置名 (default, fast)
        """
        return QueryResult.ok(self._get(ConfigType.TIMING, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置名 (default, debug, quiet)
        """
        return QueryResult.ok(self._get(ConfigType.LOGGING, profile))

    def register_profile(self, config_type: ConfigType, profile: str, config: Any) -> QueryResult[bool]:
        """注册或覆盖一个命名配置"""
        expected = {
            ConfigType.ECONOMY: EconomyConfig,
            ConfigType.TIMING: TimingConfig,
            ConfigType.LOGGING: LoggingConfig,
        }[config_type]
        if not isinstance(config, expected):
            return QueryResult.rejected(
                ErrorCode.CONFIG_TYPE_MISMATCH,
                f"配置类型不匹配: 期望 {expected.__name__}，实际 {type(config).__name__}"
            )
        self._configs[config_type][profile] = config
        self.logger.info(f"已注册{config_type.value}配置 '{profile}'")
        return QueryResult.ok(True)

    def list_profiles(self, config_type: ConfigType) -> List[str]:
        return list(self._configs[config_type].keys())


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按配置初始化根日志器

    Args:
        config: 日志配置，None时使用默认配置
    """
    config = config or LoggingConfig()
    handlers: List[logging.Handler] = []
    if config.enable_console_logging:
        handlers.append(logging.StreamHandler())
    if config.log_file_path:
        handlers.append(logging.FileHandler(config.log_file_path, encoding='utf-8'))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format=config.log_format,
        handlers=handlers,
        force=True
    )
