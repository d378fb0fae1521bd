"""
余额账本

玩家金钱的唯一真实来源。负责余额取整、历史最高余额跟踪和动态下注上下限，
每次有效的余额变化都通过事件总线广播MONEY_CHANGED。
"""

from dataclasses import dataclass
from typing import Optional
import logging
import math
import threading

from ..config import EconomyConfig
from ..events import EventBus, EventType, MoneyChangedEvent

__all__ = ['BetLimits', 'Ledger']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BetLimits:
    """下注上下限（按需计算，不存储）"""
    min: int
    max: int

    def clamp(self, amount: int) -> int:
        """把下注金额限制到[min, max]区间"""
        return max(self.min, min(amount, self.max))


class Ledger:
    """
    余额账本

    余额永远是money_unit的整数倍，写入时向下取整；
    历史最高余额只增不减，且始终不小于当前余额。
    所有操作都不会失败：超范围的变化只会被取整，不会被拒绝。
    """

    def __init__(self, event_bus: EventBus, config: Optional[EconomyConfig] = None):
        """
        初始化账本

        Args:
            event_bus: 用于广播余额变化的事件总线
            config: 经济配置，None时使用默认配置
        """
        self._config = config or EconomyConfig()
        self._event_bus = event_bus
        self._balance = self._align(self._config.starting_money)
        self._max_balance_reached = self._balance
        # 读-取整-写-广播 必须是一个临界区
        self._lock = threading.RLock()

    @property
    def config(self) -> EconomyConfig:
        return self._config

    @property
    def balance(self) -> int:
        """当前余额"""
        return self._balance

    @balance.setter
    def balance(self, value: int) -> None:
        """写入余额：取整、更新历史最高值，余额确有变化时广播事件"""
        with self._lock:
            old_balance = self._balance
            self._balance = self._align(value)
            if self._balance > self._max_balance_reached:
                self._max_balance_reached = self._balance
            if self._balance == old_balance:
                return
            delta = self._balance - old_balance
            logger.debug(f"[账本] 余额变化: {old_balance} -> {self._balance} (delta={delta})")
            self._event_bus.emit(
                EventType.MONEY_CHANGED,
                MoneyChangedEvent(amount=self._balance, delta=delta)
            )

    @property
    def max_balance_reached(self) -> int:
        """历史最高余额（high-water mark）"""
        return self._max_balance_reached

    def add_money(self, delta: int) -> None:
        """
        增加或减少金钱

        Args:
            delta: 变化量，可为负数
        """
        with self._lock:
            self.balance = self._balance + delta

    def can_afford(self, amount: int) -> bool:
        """余额是否足够支付指定金额"""
        return self._balance >= amount

    def get_bet_limits(self) -> BetLimits:
        """
        根据历史最高余额计算动态下注上下限

        上下限随财富单调不减，并且都有硬上限，防止通过积累财富无限抬高下注上限。

        Returns:
            BetLimits: 当前下注上下限
        """
        cfg = self._config
        bonus_min = math.floor(self._max_balance_reached * cfg.bet_min_bonus_rate)
        bonus_max = math.floor(self._max_balance_reached * cfg.bet_max_bonus_rate)

        min_bet = min(cfg.bet_min_cap, max(cfg.bet_min_base, self._align(cfg.bet_min_base + bonus_min)))
        max_bet = min(cfg.bet_max_cap, max(cfg.bet_max_base, self._align(cfg.bet_max_base + bonus_max)))
        return BetLimits(min=min_bet, max=max_bet)

    def reset(self) -> None:
        """恢复初始余额，并广播一次delta为0的事件让订阅方重新同步"""
        with self._lock:
            self._balance = self._align(self._config.starting_money)
            self._max_balance_reached = self._balance
            logger.info(f"[账本] 已重置，余额: {self._balance}")
            self._event_bus.emit(
                EventType.MONEY_CHANGED,
                MoneyChangedEvent(amount=self._balance, delta=0)
            )

    def _align(self, value: int) -> int:
        """向下取整到money_unit的整数倍"""
        unit = self._config.money_unit
        return int(value // unit) * unit

    def __repr__(self) -> str:
        return f"Ledger(balance={self._balance}, max_balance_reached={self._max_balance_reached})"
