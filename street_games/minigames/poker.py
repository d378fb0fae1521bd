"""
简化版三人德州扑克

1名人类玩家 + 2名NPC。人类玩家以下注金额作为大盲注，
阶段按 翻牌前 → 翻牌(3张) → 转牌(1张) → 河牌(1张) → 摊牌 线性推进。
牌力使用简化的单调分数，平局不再细分（先找到的最大值获胜）。
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence
import logging
import random

from ..core.config import TimingConfig
from ..core.deck import Card, Deck
from ..core.economy import Ledger
from .base import BaseMinigame

__all__ = ['PokerPhase', 'PokerPlayer', 'PokerGame', 'evaluate_hand']

logger = logging.getLogger(__name__)

PAIR_BONUS = 100
THREE_OF_A_KIND_BONUS = 500
NPC_STARTING_MONEY = 500


class PokerPhase(Enum):
    """扑克阶段"""
    BETTING = "betting"
    PRE_FLOP = "pre_flop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    RESULT = "result"


@dataclass
class PokerPlayer:
    """扑克玩家，名字和NPC资金跨局保留"""
    name: str
    is_human: bool
    money: int = 0
    hand: List[Card] = field(default_factory=list)
    current_bet: int = 0
    folded: bool = False
    last_action: str = ""


def evaluate_hand(hand: Sequence[Card], community: Sequence[Card]) -> int:
    """
    简化牌力评分

    所有牌点数之和 + 每个对子100 + 每个三条500（四条不加分）。
    """
    all_cards = list(hand) + list(community)
    rank_sum = sum(int(card.rank) for card in all_cards)
    counts = Counter(card.rank for card in all_cards).values()
    pair_bonus = sum(1 for c in counts if c == 2) * PAIR_BONUS
    three_bonus = sum(1 for c in counts if c == 3) * THREE_OF_A_KIND_BONUS
    return rank_sum + pair_bonus + three_bonus


class PokerGame(BaseMinigame):
    """三人德州扑克引擎"""

    GAME_TYPE = "poker"
    PHASE_ORDER = tuple(PokerPhase)

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 initial_bet: int = 10):
        super().__init__(ledger, rng, timing, initial_bet)
        self.players: List[PokerPlayer] = [
            PokerPlayer(name="Você", is_human=True),
            PokerPlayer(name="Geraldo", is_human=False, money=NPC_STARTING_MONEY),
            PokerPlayer(name="Tião", is_human=False, money=NPC_STARTING_MONEY),
        ]
        self.pot = 0
        self.community_cards: List[Card] = []
        self.winner: Optional[PokerPlayer] = None
        self.active_player_index = 0
        self._deck: Optional[Deck] = None

    @property
    def human(self) -> PokerPlayer:
        return self.players[0]

    def start(self, bet_amount: int) -> None:
        if self._phase != PokerPhase.BETTING:
            self._ignore("start")
            return
        self.bet_amount = self.clamp_bet(bet_amount)
        self.start_match()

    def start_match(self) -> None:
        """发底牌、下盲注，进入翻牌前"""
        if self._phase != PokerPhase.BETTING:
            self._ignore("start_match")
            return

        self._deck = Deck(self._rng)
        self._deck.shuffle()
        self.community_cards = []
        self.pot = 0
        for player in self.players:
            player.hand = self._deck.deal_cards(2)
            player.folded = False
            player.current_bet = 0
            player.last_action = ""

        # 人类玩家下大盲
        self.human.current_bet = self.bet_amount
        self.pot = self.bet_amount

        # 资金足够的NPC跟注
        for npc in self.players[1:]:
            if npc.money >= self.bet_amount:
                npc.money -= self.bet_amount
                npc.current_bet = self.bet_amount
                npc.last_action = "call"
                self.pot += self.bet_amount

        self._transition_to(PokerPhase.PRE_FLOP)
        self.active_player_index = 1
        logger.info(f"[Poker] 开局，底池 {self.pot}")

    def next_phase(self) -> None:
        """推进到下一阶段并翻开公共牌，河牌之后进入摊牌"""
        if self._phase == PokerPhase.PRE_FLOP:
            self.community_cards = self._deck.deal_cards(3)
            self._transition_to(PokerPhase.FLOP)
        elif self._phase == PokerPhase.FLOP:
            self.community_cards.append(self._deck.deal_card())
            self._transition_to(PokerPhase.TURN)
        elif self._phase == PokerPhase.TURN:
            self.community_cards.append(self._deck.deal_card())
            self._transition_to(PokerPhase.RIVER)
        elif self._phase == PokerPhase.RIVER:
            self._calculate_winner()
        else:
            self._ignore("next_phase")

    def fold(self) -> None:
        """人类玩家弃牌，剩余玩家立即摊牌"""
        if self._phase not in (PokerPhase.PRE_FLOP, PokerPhase.FLOP, PokerPhase.TURN, PokerPhase.RIVER):
            self._ignore("fold")
            return
        self.human.folded = True
        self.human.last_action = "fold"
        self._calculate_winner()

    def _calculate_winner(self) -> None:
        best_score = -1
        best_player: Optional[PokerPlayer] = None
        for player in self.players:
            if player.folded:
                continue
            score = evaluate_hand(player.hand, self.community_cards)
            if score > best_score:
                best_score = score
                best_player = player

        self.winner = best_player
        if best_player is not None and not best_player.is_human:
            best_player.money += self.pot
        self._transition_to(PokerPhase.RESULT)
        if best_player is not None:
            logger.info(f"[Poker] {best_player.name} 以 {best_score} 分赢得底池 {self.pot}")

    def settle(self) -> int:
        if self.winner is None:
            return 0
        if self.winner is self.human:
            return self.pot - self.human.current_bet
        return -self.human.current_bet

    def _clear_round(self) -> None:
        self.winner = None
        self.community_cards = []
        self.pot = 0
        self.active_player_index = 0
        self._deck = None
        for player in self.players:
            player.hand = []
            player.current_bet = 0
            player.folded = False
            player.last_action = ""
            # 破产的NPC重新补充资金
            if not player.is_human and player.money < self.min_bet:
                player.money = NPC_STARTING_MONEY
