"""
核心配置

定义经济系统和小游戏节奏相关的配置数据类。
所有配置在构造时校验，非法配置直接抛出ValueError。
"""

from dataclasses import dataclass

__all__ = ['EconomyConfig', 'TimingConfig']


@dataclass(frozen=True)
class EconomyConfig:
    """经济系统配置（余额取整单位与动态下注上下限）"""
    starting_money: int = 100
    money_unit: int = 10              # 所有金额都取整到该单位的倍数
    bet_min_base: int = 10
    bet_max_base: int = 100
    bet_min_bonus_rate: float = 0.01  # 历史最高余额的1%
    bet_max_bonus_rate: float = 0.25  # 历史最高余额的25%
    bet_min_cap: int = 99990
    bet_max_cap: int = 999990

    def __post_init__(self):
        """验证经济配置的有效性"""
        if self.money_unit <= 0:
            raise ValueError(f"money_unit必须大于0: {self.money_unit}")
        if self.starting_money < 0:
            raise ValueError(f"starting_money不能为负数: {self.starting_money}")
        if self.starting_money % self.money_unit != 0:
            raise ValueError(f"starting_money必须是money_unit的整数倍: {self.starting_money}")
        if self.bet_min_base <= 0 or self.bet_max_base <= 0:
            raise ValueError("下注基础上下限必须大于0")
        if self.bet_min_base > self.bet_max_base:
            raise ValueError("bet_min_base不能大于bet_max_base")
        if self.bet_min_cap < self.bet_min_base:
            raise ValueError("bet_min_cap不能小于bet_min_base")
        if self.bet_max_cap < self.bet_max_base:
            raise ValueError("bet_max_cap不能小于bet_max_base")
        if self.bet_min_bonus_rate < 0 or self.bet_max_bonus_rate < 0:
            raise ValueError("奖励比例不能为负数")


@dataclass(frozen=True)
class TimingConfig:
    """
    小游戏时间节奏配置（单位：秒）

    这些数值只影响由外部update(dt)驱动的阶段推进，
    不影响任何随机结果。
    """
    dice_roll_seconds: float = 1.5
    coin_min_flip_seconds: float = 2.0
    coin_deceleration: float = 0.8
    coin_stop_speed: float = 1.0
    coin_min_speed: float = 0.5
    purrinha_reveal_interval: float = 1.0
    purrinha_reveal_pause: float = 1.5
    palitinho_dice_pause: float = 2.0
    palitinho_reveal_pause: float = 1.5

    def __post_init__(self):
        """验证时间配置"""
        for name, value in self.__dict__.items():
            if value < 0:
                raise ValueError(f"{name}不能为负数: {value}")
        if self.purrinha_reveal_interval <= 0:
            raise ValueError("purrinha_reveal_interval必须大于0")
        if self.coin_min_speed >= self.coin_stop_speed:
            raise ValueError("coin_min_speed必须小于coin_stop_speed，否则硬币永远不会停下")
