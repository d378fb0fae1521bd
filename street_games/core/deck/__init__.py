"""
牌组管理模块.

提供Card和Deck类，21点和扑克共用同一套52张牌实现.
"""

from .types import Suit, Rank
from .card import Card
from .deck import Deck

__all__ = ['Suit', 'Rank', 'Card', 'Deck']
