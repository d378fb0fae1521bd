"""
扑克牌组管理.

标准52张牌（无大小王），洗牌使用注入的随机数生成器以支持确定性测试.
"""

import random
from typing import List, Optional

from .card import Card
from .types import Suit, Rank


class Deck:
    """
    表示一副扑克牌.

    Examples:
        >>> deck = Deck(random.Random(7))
        >>> deck.shuffle()
        >>> card = deck.deal_card()
        >>> len(deck)
        51
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌。如果为None，使用新的随机数生成器
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """重置牌组为完整的52张牌（未洗牌）."""
        self._cards = [
            Card(suit, rank)
            for suit in Suit
            for rank in Rank
        ]

    def shuffle(self) -> None:
        """Fisher-Yates洗牌."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def deal_card(self) -> Card:
        """
        从牌顶发一张牌.

        Raises:
            IndexError: 当牌组为空时
        """
        if not self._cards:
            raise IndexError("Cannot deal from empty deck")
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Raises:
            ValueError: 当count为负数时
            IndexError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise IndexError(f"Cannot deal {count} cards, only {len(self._cards)} remaining")
        return [self.deal_card() for _ in range(count)]

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
