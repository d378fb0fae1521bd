"""
21点（Blackjack）

1名玩家对庄家，标准52张牌。
- 两张牌合计21点为天生21点，立即自动停牌
- 庄家点数小于17时必须要牌（软17、硬17都停牌）
- 天生21点获胜按1.5倍赔付（向下取整）
"""

from enum import Enum
from typing import List, Optional, Sequence
import logging
import random

from ..core.config import TimingConfig
from ..core.deck import Card, Deck
from ..core.economy import Ledger
from .base import BaseMinigame

__all__ = ['BlackjackPhase', 'BlackjackOutcome', 'BlackjackGame', 'hand_points', 'is_natural']

logger = logging.getLogger(__name__)

BLACKJACK = 21
DEALER_STAND_POINTS = 17


class BlackjackPhase(Enum):
    """21点阶段"""
    BETTING = "betting"
    PLAYING = "playing"
    DEALER_TURN = "dealer_turn"
    RESULT = "result"


class BlackjackOutcome(Enum):
    """本局胜负"""
    PLAYER = "player"
    DEALER = "dealer"
    PUSH = "push"


def hand_points(hand: Sequence[Card]) -> int:
    """
    计算手牌点数

    A先按11计，总点数超过21时每张A依次降为1，直到不爆牌或没有可降级的A。

    Examples:
        >>> hand_points([Card.from_str("AS"), Card.from_str("10H")])
        21
        >>> hand_points([Card.from_str("AS"), Card.from_str("AD"), Card.from_str("9C")])
        21
    """
    total = sum(card.blackjack_points for card in hand)
    aces = sum(1 for card in hand if card.is_ace)
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
    return total


def is_natural(hand: Sequence[Card]) -> bool:
    """是否为天生21点（恰好两张牌合计21）"""
    return len(hand) == 2 and hand_points(hand) == BLACKJACK


class BlackjackGame(BaseMinigame):
    """21点游戏引擎"""

    GAME_TYPE = "blackjack"
    PHASE_ORDER = tuple(BlackjackPhase)

    def __init__(self,
                 ledger: Ledger,
                 rng: Optional[random.Random] = None,
                 timing: Optional[TimingConfig] = None,
                 initial_bet: int = 10):
        super().__init__(ledger, rng, timing, initial_bet)
        self.player_hand: List[Card] = []
        self.dealer_hand: List[Card] = []
        self.outcome: Optional[BlackjackOutcome] = None
        self._deck: Optional[Deck] = None

    def start(self, bet_amount: int) -> None:
        if self._phase != BlackjackPhase.BETTING:
            self._ignore("start")
            return
        self.bet_amount = self.clamp_bet(bet_amount)
        self.deal()

    def deal(self) -> None:
        """洗牌并各发两张，进入PLAYING；天生21点直接停牌"""
        if self._phase != BlackjackPhase.BETTING:
            self._ignore("deal")
            return

        self._deck = Deck(self._rng)
        self._deck.shuffle()
        self.player_hand = self._deck.deal_cards(2)
        self.dealer_hand = self._deck.deal_cards(2)
        self._transition_to(BlackjackPhase.PLAYING)
        logger.info(f"[Blackjack] 发牌完成，下注 {self.bet_amount}，玩家手牌: "
                    f"{' '.join(str(c) for c in self.player_hand)} ({self.calculate_points(self.player_hand)})")

        if is_natural(self.player_hand):
            logger.info("[Blackjack] 玩家天生21点，自动停牌")
            self.stand()

    def hit(self) -> None:
        """要牌，爆牌立即结束本局"""
        if self._phase != BlackjackPhase.PLAYING:
            self._ignore("hit")
            return
        self.player_hand.append(self._deck.deal_card())
        if self.calculate_points(self.player_hand) > BLACKJACK:
            self._resolve()

    def stand(self) -> None:
        """停牌，庄家开始行动"""
        if self._phase != BlackjackPhase.PLAYING:
            self._ignore("stand")
            return
        self._transition_to(BlackjackPhase.DEALER_TURN)
        self._dealer_play()

    def _dealer_play(self) -> None:
        while self.calculate_points(self.dealer_hand) < DEALER_STAND_POINTS:
            self.dealer_hand.append(self._deck.deal_card())
        self._resolve()

    def calculate_points(self, hand: Sequence[Card]) -> int:
        return hand_points(hand)

    def _resolve(self) -> None:
        player_points = self.calculate_points(self.player_hand)
        dealer_points = self.calculate_points(self.dealer_hand)

        if player_points > BLACKJACK:
            self.outcome = BlackjackOutcome.DEALER
        elif dealer_points > BLACKJACK:
            self.outcome = BlackjackOutcome.PLAYER
        elif player_points > dealer_points:
            self.outcome = BlackjackOutcome.PLAYER
        elif dealer_points > player_points:
            self.outcome = BlackjackOutcome.DEALER
        else:
            self.outcome = BlackjackOutcome.PUSH

        self._transition_to(BlackjackPhase.RESULT)
        logger.info(f"[Blackjack] 结果: {self.outcome.name} (玩家 {player_points} / 庄家 {dealer_points})")

    def settle(self) -> int:
        if self.outcome == BlackjackOutcome.PLAYER:
            if is_natural(self.player_hand):
                return self.bet_amount * 3 // 2
            return self.bet_amount
        if self.outcome == BlackjackOutcome.DEALER:
            return -self.bet_amount
        return 0

    def _clear_round(self) -> None:
        self.player_hand = []
        self.dealer_hand = []
        self.outcome = None
        self._deck = None
