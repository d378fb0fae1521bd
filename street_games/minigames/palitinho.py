"""
Palitinho（抽火柴）

4名玩家（1名人类）。掷骰决定抽取顺序（点数从高到低，同点按原座位顺序），
4根火柴中恰好2根是断的。所有人依次抽完后，抽到断火柴的两人输，另外两人平分底池。

阶段: BETTING → DICE_ROLL → CHOOSING → REVEAL → RESULT
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging
import random

from ..core.config import TimingConfig
from ..core.economy import BetLimits, Ledger
from .base import BaseMinigame

__all__ = ['PalitinhoPhase', 'PalitinhoPlayer', 'Matchstick', 'PalitinhoGame']

logger = logging.getLogger(__name__)

MATCHSTICK_COUNT = 4
BROKEN_COUNT = 2
# 街头桌面的下注上限
TABLE_MAX_BET = 500


class PalitinhoPhase(Enum):
    """Palitinho阶段"""
    BETTING = "betting"
    DICE_ROLL = "dice_roll"
    CHOOSING = "choosing"
    REVEAL = "reveal"
    RESULT = "result"


@dataclass
class PalitinhoPlayer:
    name: str
    is_human: bool
    dice_value: int = 0
    order: int = 0
    choice: Optional[int] = None
    is_loser: bool = False


@dataclass
class Matchstick:
    is_broken: bool = False
    picked_by: Optional[str] = None


class PalitinhoGame(BaseMinigame):
    """Palitinho引擎"""

    GAME_TYPE = "palitinho"
    PHASE_ORDER = tuple(PalitinhoPhase)
    PLAYER_NAMES = ("Você", "Soneca", "Gato", "Magrelo")

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 initial_bet: int = 20):
        super().__init__(ledger, rng, timing, initial_bet)
        self.players: List[PalitinhoPlayer] = []
        self.matchsticks: List[Matchstick] = []
        self.pot = 0
        self.current_player_idx = 0
        self.dice_timer = 0.0
        self.reveal_timer = 0.0
        self._setup_players()

    def _setup_players(self) -> None:
        self.players = [
            PalitinhoPlayer(name=name, is_human=(i == 0))
            for i, name in enumerate(self.PLAYER_NAMES)
        ]

    def _read_limits(self) -> BetLimits:
        limits = self._ledger.get_bet_limits()
        # 桌面上限不能低于动态最低下注
        return BetLimits(min=limits.min, max=max(limits.min, min(limits.max, TABLE_MAX_BET)))

    @property
    def human(self) -> PalitinhoPlayer:
        return self.players[0]

    @property
    def winners_count(self) -> int:
        return len(self.players) - BROKEN_COUNT

    @property
    def current_player(self) -> Optional[PalitinhoPlayer]:
        """当前轮到抽火柴的玩家"""
        for player in self.players:
            if player.order == self.current_player_idx:
                return player
        return None

    def start(self, bet_amount: int) -> None:
        self.confirm_bet(bet_amount)

    def confirm_bet(self, amount: int) -> None:
        """确认下注，掷骰排序并摆好火柴"""
        if self._phase != PalitinhoPhase.BETTING:
            self._ignore("confirm_bet")
            return

        self.bet_amount = self.clamp_bet(amount)
        self.pot = self.bet_amount * len(self.players)
        self.dice_timer = 0.0

        for player in self.players:
            player.dice_value = self._rng.randint(1, 6)

        # sorted是稳定排序：同点数保持座位顺序，不重掷
        ranked = sorted(self.players, key=lambda p: p.dice_value, reverse=True)
        for position, player in enumerate(ranked):
            player.order = position

        self.matchsticks = [Matchstick() for _ in range(MATCHSTICK_COUNT)]
        for idx in self._rng.sample(range(MATCHSTICK_COUNT), BROKEN_COUNT):
            self.matchsticks[idx].is_broken = True

        self._transition_to(PalitinhoPhase.DICE_ROLL)
        rolls = ", ".join(f"{p.name}={p.dice_value}" for p in self.players)
        logger.info(f"[Palitinho] 掷骰: {rolls}")

    def update(self, dt: float) -> bool:
        if self._phase == PalitinhoPhase.DICE_ROLL:
            self.dice_timer += dt
            if self.dice_timer > self._timing.palitinho_dice_pause:
                self._transition_to(PalitinhoPhase.CHOOSING)
                self.current_player_idx = 0
                self._process_npc_turns()
                return True
        elif self._phase == PalitinhoPhase.REVEAL:
            self.reveal_timer += dt
            if self.reveal_timer > self._timing.palitinho_reveal_pause:
                self.calculate_result()
                return True
        return False

    def _process_npc_turns(self) -> None:
        """NPC依次随机抽取剩余火柴，轮到人类玩家时停下等待输入"""
        while self.current_player_idx < len(self.players):
            active = self.current_player
            if active is None:
                break
            if active.is_human:
                return
            available = self.available_matchsticks()
            self._pick(active, self._rng.choice(available))

        self.reveal_timer = 0.0
        self._transition_to(PalitinhoPhase.REVEAL)

    def available_matchsticks(self) -> List[int]:
        return [i for i, stick in enumerate(self.matchsticks) if stick.picked_by is None]

    def _pick(self, player: PalitinhoPlayer, idx: int) -> None:
        self.matchsticks[idx].picked_by = player.name
        player.choice = idx
        self.current_player_idx += 1

    def choose_matchstick(self, idx: int) -> None:
        """人类玩家抽火柴；不在其回合、索引越界或已被抽走时忽略"""
        if self._phase != PalitinhoPhase.CHOOSING:
            self._ignore("choose_matchstick")
            return
        if self.human.order != self.current_player_idx:
            self._ignore("choose_matchstick (not your turn)")
            return
        if not 0 <= idx < len(self.matchsticks) or self.matchsticks[idx].picked_by is not None:
            self._ignore(f"choose_matchstick({idx})")
            return

        self._pick(self.human, idx)
        self._process_npc_turns()

    def calculate_result(self) -> None:
        """抽到断火柴的玩家判负"""
        if self._phase != PalitinhoPhase.REVEAL:
            self._ignore("calculate_result")
            return

        loser_names = {stick.picked_by for stick in self.matchsticks if stick.is_broken}
        for player in self.players:
            player.is_loser = player.name in loser_names

        self._transition_to(PalitinhoPhase.RESULT)
        logger.info(f"[Palitinho] 输家: {', '.join(sorted(loser_names))}")

    @property
    def payout(self) -> int:
        """每名赢家分得的金额（向下取整到10）"""
        return self.pot // (self.winners_count * 10) * 10

    def settle(self) -> int:
        if self._phase != PalitinhoPhase.RESULT:
            return 0
        if self.human.is_loser:
            return -self.bet_amount
        return self.payout - self.bet_amount

    def _clear_round(self) -> None:
        self._setup_players()
        self.matchsticks = []
        self.pot = 0
        self.current_player_idx = 0
        self.dice_timer = 0.0
        self.reveal_timer = 0.0
