"""
猜硬币（Cara ou Coroa）

结果在玩家选定正反面的那一刻由随机数决定，且每局只决定一次；
之后的旋转减速只是表现，由外部update(dt)推进，不影响结果。
"""

from enum import Enum
from typing import Optional
import logging
import math
import random

from ..core.config import TimingConfig
from ..core.economy import Ledger
from .base import BaseMinigame

__all__ = ['HeadsTailsPhase', 'CoinSide', 'HeadsTailsGame']

logger = logging.getLogger(__name__)


class HeadsTailsPhase(Enum):
    """猜硬币阶段"""
    BETTING = "betting"
    CHOOSING = "choosing"
    FLIPPING = "flipping"
    RESULT = "result"


class CoinSide(Enum):
    HEADS = "heads"
    TAILS = "tails"


class HeadsTailsGame(BaseMinigame):
    """猜硬币引擎"""

    GAME_TYPE = "heads_tails"
    PHASE_ORDER = tuple(HeadsTailsPhase)

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 initial_bet: Optional[int] = None):
        super().__init__(ledger, rng, timing, initial_bet)
        self.human_choice = CoinSide.HEADS
        self.winning_side: Optional[CoinSide] = None
        self.flip_timer = 0.0
        self.rotation_speed = 0.0
        self.current_rotation = 0.0

    def start(self, bet_amount: int) -> None:
        self.confirm_bet(bet_amount)

    def confirm_bet(self, amount: int) -> None:
        if self._phase != HeadsTailsPhase.BETTING:
            self._ignore("confirm_bet")
            return
        self.bet_amount = self.clamp_bet(amount)
        self._transition_to(HeadsTailsPhase.CHOOSING)

    def choose_side(self, side: CoinSide) -> None:
        """选定正反面，立即抽取结果并开始旋转"""
        if self._phase != HeadsTailsPhase.CHOOSING:
            self._ignore("choose_side")
            return
        self.human_choice = side
        self.flip_timer = 0.0
        self.current_rotation = 0.0
        self.rotation_speed = 20 + self._rng.random() * 10
        self.winning_side = CoinSide.HEADS if self._rng.random() < 0.5 else CoinSide.TAILS
        self._transition_to(HeadsTailsPhase.FLIPPING)
        logger.debug(f"[HeadsTails] 玩家选择 {side.name}，结果已确定")

    def update(self, dt: float) -> bool:
        if self._phase != HeadsTailsPhase.FLIPPING:
            return False

        timing = self._timing
        self.flip_timer += dt
        self.current_rotation += self.rotation_speed
        self.rotation_speed = max(timing.coin_min_speed,
                                  self.rotation_speed * (1 - dt * timing.coin_deceleration))

        if self.rotation_speed < timing.coin_stop_speed and self.flip_timer > timing.coin_min_flip_seconds:
            # 正面停在0，反面停在π
            self.current_rotation = 0.0 if self.winning_side == CoinSide.HEADS else math.pi
            self._transition_to(HeadsTailsPhase.RESULT)
            logger.info(f"[HeadsTails] 结果 {self.winning_side.name}，玩家选择 {self.human_choice.name}")
            return True
        return False

    @property
    def player_won(self) -> bool:
        return self.winning_side is not None and self.human_choice == self.winning_side

    def settle(self) -> int:
        if self._phase != HeadsTailsPhase.RESULT:
            return 0
        return self.bet_amount if self.player_won else -self.bet_amount

    def _clear_round(self) -> None:
        self.winning_side = None
        self.flip_timer = 0.0
        self.rotation_speed = 0.0
        self.current_rotation = 0.0
