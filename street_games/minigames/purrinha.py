"""
Purrinha（猜石子）

2-5名玩家（1名人类 + NPC）各自暗中握0-3颗石子，然后依次猜所有人石子的总数，
猜得最接近的玩家赢走底池。并列时先找到的玩家获胜，不做随机裁决。

阶段: BETTING → CHOOSING → GUESSING → REVEAL → RESULT
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set
import logging
import math
import random

from ..core.config import TimingConfig
from ..core.economy import Ledger
from .base import BaseMinigame

__all__ = ['PurrinhaPhase', 'PurrinhaPlayer', 'PurrinhaGame', 'npc_guess']

logger = logging.getLogger(__name__)

MAX_STONES = 3
MAX_NPCS = 4
NPC_NAMES = ("Zé Mão", "Bigode", "Careca", "Tião")
# NPC估计其他每名玩家平均握1.5颗
AVERAGE_STONES = 1.5


class PurrinhaPhase(Enum):
    """Purrinha阶段"""
    BETTING = "betting"
    CHOOSING = "choosing"
    GUESSING = "guessing"
    REVEAL = "reveal"
    RESULT = "result"


@dataclass
class PurrinhaPlayer:
    name: str
    is_human: bool
    money: int = 0
    stones: int = 0
    guess: int = 0
    has_guessed: bool = False


def npc_guess(own_stones: int, player_count: int, jitter: float,
              max_total: int, used_guesses: Set[int]) -> int:
    """
    NPC猜测策略

    以自己的石子数加上对其他人的平均估计为基准，叠加[-1.5, 1.5)的抖动后四舍五入；
    与已有猜测重复时向上递增，到顶仍重复则后退2，避免并列吞掉底池。

    Args:
        own_stones: NPC自己的石子数
        player_count: 玩家总数
        jitter: [0, 1)区间的随机抽样
        max_total: 总数可能的最大值
        used_guesses: 已被占用的猜测

    Returns:
        int: NPC的猜测
    """
    others_estimate = (player_count - 1) * AVERAGE_STONES
    guess = math.floor(own_stones + others_estimate + (jitter - 0.5) * 3 + 0.5)
    guess = max(0, min(max_total, guess))

    while guess in used_guesses and guess < max_total:
        guess += 1
    if guess in used_guesses:
        guess = max(0, guess - 2)
    return guess


class PurrinhaGame(BaseMinigame):
    """Purrinha引擎"""

    GAME_TYPE = "purrinha"
    PHASE_ORDER = tuple(PurrinhaPhase)

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 human_money: int = 0,
                 npc_count: int = 3):
        """
        Args:
            human_money: 人类玩家当前余额（仅用于展示）
            npc_count: NPC数量，限制在1-4之间
        """
        super().__init__(ledger, rng, timing)
        npc_count = max(1, min(MAX_NPCS, npc_count))

        self.players: List[PurrinhaPlayer] = [PurrinhaPlayer(name="Você", is_human=True, money=human_money)]
        for name in NPC_NAMES[:npc_count]:
            self.players.append(PurrinhaPlayer(name=name, is_human=False, money=30 + self._rng.randint(0, 69)))

        self.pot = 0
        self.total_stones = 0
        self.winner: Optional[PurrinhaPlayer] = None
        self.reveal_timer = 0.0
        self.reveal_index = -1
        self.selected_stones = 0
        self.selected_guess = 0

    @property
    def human(self) -> PurrinhaPlayer:
        return self.players[0]

    @property
    def max_possible_total(self) -> int:
        return len(self.players) * MAX_STONES

    def start(self, bet_amount: int) -> None:
        self.confirm_bet(bet_amount)

    def confirm_bet(self, amount: int) -> None:
        """确认下注，底池为每人同额下注之和"""
        if self._phase != PurrinhaPhase.BETTING:
            self._ignore("confirm_bet")
            return
        self.bet_amount = self.clamp_bet(amount)
        self.pot = self.bet_amount * len(self.players)
        self._transition_to(PurrinhaPhase.CHOOSING)

    def choose_stones(self, count: int) -> None:
        """人类玩家选石子数（0-3），NPC同时随机选择"""
        if self._phase != PurrinhaPhase.CHOOSING:
            self._ignore("choose_stones")
            return

        self.human.stones = max(0, min(MAX_STONES, count))
        for npc in self.players[1:]:
            npc.stones = self._rng.randint(0, MAX_STONES)

        self.total_stones = sum(p.stones for p in self.players)
        self._transition_to(PurrinhaPhase.GUESSING)

    def make_guess(self, guess: int) -> None:
        """人类玩家猜总数，NPC随后依次给出不重复的猜测"""
        if self._phase != PurrinhaPhase.GUESSING:
            self._ignore("make_guess")
            return

        guess = max(0, min(self.max_possible_total, guess))
        self.human.guess = guess
        self.human.has_guessed = True

        used_guesses = {guess}
        for npc in self.players[1:]:
            npc.guess = npc_guess(npc.stones, len(self.players), self._rng.random(),
                                  self.max_possible_total, used_guesses)
            npc.has_guessed = True
            used_guesses.add(npc.guess)

        self.reveal_timer = 0.0
        self.reveal_index = -1
        self._transition_to(PurrinhaPhase.REVEAL)

    def update(self, dt: float) -> bool:
        """逐个揭示玩家的石子，全部揭示并停顿后结算"""
        if self._phase != PurrinhaPhase.REVEAL:
            return False

        interval = self._timing.purrinha_reveal_interval
        self.reveal_timer += dt
        new_index = int(self.reveal_timer // interval)
        if new_index != self.reveal_index and new_index < len(self.players):
            self.reveal_index = new_index

        if self.reveal_timer > len(self.players) * interval + self._timing.purrinha_reveal_pause:
            self._calculate_winner()
            return True
        return False

    def _calculate_winner(self) -> None:
        best_player: Optional[PurrinhaPlayer] = None
        best_diff: Optional[int] = None
        for player in self.players:
            diff = abs(player.guess - self.total_stones)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best_player = player

        self.winner = best_player
        for npc in self.players[1:]:
            # NPC余额不足时押上全部余额，不会变成负数
            npc.money = max(0, npc.money - self.bet_amount)
            if npc is best_player:
                npc.money += self.pot

        self._transition_to(PurrinhaPhase.RESULT)
        logger.info(f"[Purrinha] 总数 {self.total_stones}，{best_player.name} 猜 {best_player.guess} 获胜，底池 {self.pot}")

    def settle(self) -> int:
        if self.winner is None:
            return 0
        if self.winner.is_human:
            return self.pot - self.bet_amount
        return -self.bet_amount

    def reset(self, human_money: Optional[int] = None) -> None:
        if human_money is not None:
            self.human.money = human_money
        super().reset()

    def _clear_round(self) -> None:
        self.pot = 0
        self.total_stones = 0
        self.winner = None
        self.reveal_timer = 0.0
        self.reveal_index = -1
        self.selected_stones = 0
        self.selected_guess = 0
        for player in self.players:
            player.stones = 0
            player.guess = 0
            player.has_guessed = False
            # 破产的NPC重新补充资金
            if not player.is_human and player.money < self.min_bet:
                player.money = 50 + self._rng.randint(0, 49)
