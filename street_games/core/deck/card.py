"""
扑克牌数据结构.

定义不可变的Card类，同时提供扑克点数和21点计分.
"""

from dataclasses import dataclass
from typing import Dict

from .types import Suit, Rank

_RANK_DISPLAY: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}

_SUIT_DISPLAY: Dict[Suit, str] = {
    Suit.HEARTS: "H", Suit.DIAMONDS: "D",
    Suit.CLUBS: "C", Suit.SPADES: "S"
}


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.HEARTS, Rank.ACE)
        >>> str(card)
        'AH'
        >>> card.blackjack_points
        11
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    @property
    def blackjack_points(self) -> int:
        """
        21点计分：数字牌按面值，J/Q/K为10，A先按11计
        （软手降级由hand_points处理）.
        """
        if self.rank == Rank.ACE:
            return 11
        return min(int(self.rank), 10)

    def __str__(self) -> str:
        """返回"点数花色"格式的字符串，如"AH"表示红桃A."""
        return f"{_RANK_DISPLAY[self.rank]}{_SUIT_DISPLAY[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"10S"、"TD"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            ValueError: 当字符串格式无效时
        """
        if len(card_str) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        if card_str.startswith("10"):
            rank_str, suit_str = "10", card_str[2:]
        else:
            rank_str, suit_str = card_str[0], card_str[1:]

        rank_map = {display: rank for rank, display in _RANK_DISPLAY.items()}
        rank_map["T"] = Rank.TEN
        suit_map = {display: suit for suit, display in _SUIT_DISPLAY.items()}

        if rank_str.upper() not in rank_map:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str.upper() not in suit_map:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(suit_map[suit_str.upper()], rank_map[rank_str.upper()])
