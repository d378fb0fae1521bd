"""
扑克牌相关类型定义.

定义扑克牌的花色、点数等基础枚举类型，供21点和扑克共用.
"""

from enum import Enum, IntEnum


class Suit(Enum):
    """扑克牌花色枚举."""

    HEARTS = "♥"      # 红桃
    DIAMONDS = "♦"    # 方块
    CLUBS = "♣"       # 梅花
    SPADES = "♠"      # 黑桃


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值即扑克比牌时的点数，A最大（14）.
    21点的计分见Card.blackjack_points.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14
