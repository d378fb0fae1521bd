"""
骰子（五人猜点）

5名玩家（1名人类 + 4名NPC）各选两个1-6的数字，然后掷两颗骰子。
每名玩家的接近度分数取两种配对方式中较小的距离和，分数最低者获胜，
并列时在并列者中随机选出一名赢家。
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
import logging
import random

from ..core.config import TimingConfig
from ..core.economy import Ledger
from .base import BaseMinigame

__all__ = ['DicePhase', 'DicePlayer', 'DiceGame', 'proximity_score']

logger = logging.getLogger(__name__)

DIE_MIN = 1
DIE_MAX = 6


class DicePhase(Enum):
    """骰子阶段"""
    BETTING = "betting"
    ROLLING = "rolling"
    RESULT = "result"


@dataclass
class DicePlayer:
    name: str
    is_human: bool
    choices: Tuple[int, int] = (1, 1)
    score: int = 0


def _clamp_die(value: int) -> int:
    return max(DIE_MIN, min(DIE_MAX, value))


def proximity_score(dice: Tuple[int, int], choices: Tuple[int, int]) -> int:
    """
    接近度分数（越低越好）

    同时检查 (d1-p1, d2-p2) 和 (d1-p2, d2-p1) 两种配对，选择顺序不影响结果。

    Examples:
        >>> proximity_score((3, 5), (5, 3))
        0
    """
    d1, d2 = dice
    p1, p2 = choices
    return min(abs(d1 - p1) + abs(d2 - p2), abs(d1 - p2) + abs(d2 - p1))


class DiceGame(BaseMinigame):
    """五人骰子引擎"""

    GAME_TYPE = "dice"
    PHASE_ORDER = tuple(DicePhase)
    PLAYER_NAMES = ("Você", "Zeca", "Nando", "Beto", "Dudu")

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 initial_bet: int = 10):
        super().__init__(ledger, rng, timing, initial_bet)
        self.players: List[DicePlayer] = [
            DicePlayer(name=name, is_human=(i == 0))
            for i, name in enumerate(self.PLAYER_NAMES)
        ]
        self.human_choices: Tuple[int, int] = (1, 1)
        self.dice: Tuple[int, int] = (1, 1)
        self.winner: Optional[DicePlayer] = None
        self.winners: List[DicePlayer] = []
        self.roll_timer = 0.0

    @property
    def human(self) -> DicePlayer:
        return self.players[0]

    @property
    def is_rolling(self) -> bool:
        return self._phase == DicePhase.ROLLING

    def set_human_choices(self, choices: Sequence[int]) -> None:
        """在下注阶段调整人类玩家的两个数字"""
        if self._phase != DicePhase.BETTING or len(choices) < 2:
            self._ignore("set_human_choices")
            return
        self.human_choices = (_clamp_die(choices[0]), _clamp_die(choices[1]))

    def start(self, bet_amount: int) -> None:
        self.start_round(self.human_choices, bet_amount)

    def start_round(self, human_choices: Sequence[int], bet: int) -> None:
        """确认数字和下注，NPC随机选数，开始掷骰"""
        if self._phase != DicePhase.BETTING or len(human_choices) < 2:
            self._ignore("start_round")
            return

        self.bet_amount = self.clamp_bet(bet)
        self.human_choices = (_clamp_die(human_choices[0]), _clamp_die(human_choices[1]))
        self.human.choices = self.human_choices
        for npc in self.players[1:]:
            npc.choices = (self._rng.randint(DIE_MIN, DIE_MAX), self._rng.randint(DIE_MIN, DIE_MAX))

        self.roll_timer = 0.0
        self._transition_to(DicePhase.ROLLING)

    def update(self, dt: float) -> bool:
        if self._phase != DicePhase.ROLLING:
            return False
        self.roll_timer += dt
        if self.roll_timer >= self._timing.dice_roll_seconds:
            self.resolve()
            return True
        return False

    def resolve(self) -> None:
        """掷骰并计算赢家"""
        if self._phase != DicePhase.ROLLING:
            self._ignore("resolve")
            return

        self.dice = (self._rng.randint(DIE_MIN, DIE_MAX), self._rng.randint(DIE_MIN, DIE_MAX))

        best_score: Optional[int] = None
        winners: List[DicePlayer] = []
        for player in self.players:
            player.score = proximity_score(self.dice, player.choices)
            if best_score is None or player.score < best_score:
                best_score = player.score
                winners = [player]
            elif player.score == best_score:
                winners.append(player)

        self.winners = winners
        self.winner = self._rng.choice(winners)
        self._transition_to(DicePhase.RESULT)
        logger.info(f"[Dice] 骰子 {self.dice}，{self.winner.name} 获胜（差距 {best_score}，并列 {len(winners)} 人）")

    def settle(self) -> int:
        if self.winner is None:
            return 0
        if self.winner.is_human:
            return self.bet_amount * (len(self.players) - 1)
        return -self.bet_amount

    def _clear_round(self) -> None:
        self.winner = None
        self.winners = []
        self.roll_timer = 0.0
        for player in self.players:
            player.score = 0
