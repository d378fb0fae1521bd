"""
小游戏基类

定义所有小游戏引擎必须满足的契约，使通用驱动器可以统一地下注、推进和结算任意游戏。
阶段转换只能向前，唯一能回到BETTING的途径是reset()。
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
import logging
import random

from ..core.config import TimingConfig
from ..core.economy import BetLimits, Ledger

__all__ = ['BaseMinigame']

logger = logging.getLogger(__name__)


class BaseMinigame(ABC):
    """
    小游戏引擎基类

    子类需要声明：
        GAME_TYPE: 游戏类型名称
        PHASE_ORDER: 阶段枚举的前进顺序，第一个必须是BETTING，最后一个必须是RESULT

    引擎从不修改账本余额，只读取下注上下限并通过settle()报告净输赢。
    """

    GAME_TYPE: str = ""
    PHASE_ORDER: Tuple[Enum, ...] = ()

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 initial_bet: Optional[int] = None):
        """
        初始化小游戏

        Args:
            ledger: 共享账本，用于读取下注上下限
            rng: 随机数生成器，None时使用新的随机数生成器
            timing: 时间节奏配置
            initial_bet: 初始下注金额，None时取最低下注
        """
        if not self.PHASE_ORDER:
            raise ValueError(f"{type(self).__name__}必须声明PHASE_ORDER")

        self._ledger = ledger
        self._rng = rng or random.Random()
        self._timing = timing or TimingConfig()
        self._phase = self.PHASE_ORDER[0]
        self._transition_history: List[Dict[str, Any]] = []

        limits = self._read_limits()
        self.min_bet = limits.min
        self.max_bet = limits.max
        self.bet_amount = limits.min if initial_bet is None else initial_bet
        self.selected_bet = self.bet_amount
        self.update_limits()

    # ------------------------------------------------------------------
    # 阶段
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Enum:
        """当前阶段"""
        return self._phase

    @property
    def betting_phase(self) -> Enum:
        return self.PHASE_ORDER[0]

    @property
    def result_phase(self) -> Enum:
        return self.PHASE_ORDER[-1]

    @property
    def is_finished(self) -> bool:
        """本局是否已到达RESULT"""
        return self._phase == self.result_phase

    @property
    def transition_history(self) -> List[Dict[str, Any]]:
        """本局的阶段转换历史"""
        return self._transition_history.copy()

    def _transition_to(self, target: Enum) -> None:
        """
        执行到目标阶段的转换

        Raises:
            ValueError: 目标阶段不在当前阶段之后时
        """
        order = self.PHASE_ORDER
        if order.index(target) <= order.index(self._phase):
            raise ValueError(f"不能从 {self._phase} 转换到 {target}")

        self._transition_history.append({'from': self._phase, 'to': target})
        logger.debug(f"[{self.GAME_TYPE}] 阶段转换: {self._phase.name} -> {target.name}")
        self._phase = target

    def _ignore(self, action: str) -> None:
        """记录一次被忽略的操作（阶段不符或轮次不符）"""
        logger.debug(f"[{self.GAME_TYPE}] 忽略操作 {action}，当前阶段: {self._phase.name}")

    # ------------------------------------------------------------------
    # 下注上下限
    # ------------------------------------------------------------------

    def _read_limits(self) -> BetLimits:
        """从账本读取下注上下限，子类可以在此基础上再加桌面限制"""
        return self._ledger.get_bet_limits()

    def clamp_bet(self, amount: int) -> int:
        """
        把金额限制到当前[min_bet, max_bet]区间，并向下取整到money_unit

        账本只接受money_unit的整数倍，未取整的下注会在扣款时被多扣。
        """
        unit = self._ledger.config.money_unit
        clamped = max(self.min_bet, min(amount, self.max_bet))
        return max(self.min_bet, int(clamped // unit) * unit)

    def update_limits(self) -> None:
        """
        重新读取下注上下限

        selected_bet总是被限制到新区间；bet_amount只在BETTING阶段调整，
        已经押下的金额在本局内不再改变。
        """
        limits = self._read_limits()
        self.min_bet = limits.min
        self.max_bet = limits.max
        self.selected_bet = self.clamp_bet(self.selected_bet)
        if self._phase == self.betting_phase:
            self.bet_amount = self.clamp_bet(self.bet_amount)

    # ------------------------------------------------------------------
    # 契约
    # ------------------------------------------------------------------

    @abstractmethod
    def start(self, bet_amount: int) -> None:
        """
        确认下注并离开BETTING阶段

        调用前驱动器必须已经从账本扣除下注金额。
        """

    def update(self, dt: float) -> bool:
        """
        推进由时间驱动的阶段

        Args:
            dt: 距上次调用经过的秒数

        Returns:
            bool: 本次调用是否发生了阶段变化
        """
        return False

    @abstractmethod
    def settle(self) -> int:
        """
        计算本局净输赢（相对于已扣除的下注）

        只在RESULT阶段有意义，其他阶段返回0。多次调用结果相同。
        """

    def escape_payout(self) -> int:
        """
        中途离开时应退还给玩家的金额

        已在RESULT阶段：下注 + 净输赢；否则下注作废，返回0。
        """
        if not self.is_finished:
            return 0
        return self.bet_amount + self.settle()

    def reset(self) -> None:
        """回到BETTING阶段，清空本局数据，保留长期存在的NPC名单"""
        # NPC补充资金按最新的最低下注判断
        self.update_limits()
        self._clear_round()
        self._phase = self.betting_phase
        self._transition_history.clear()
        self.update_limits()
        logger.debug(f"[{self.GAME_TYPE}] 已重置")

    @abstractmethod
    def _clear_round(self) -> None:
        """清空本局范围的数据（手牌、底池、赢家等）"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(phase={self._phase.name}, bet_amount={self.bet_amount})"
