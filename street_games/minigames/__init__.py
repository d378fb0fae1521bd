"""
小游戏引擎模块

六个相互独立的阶段状态机，共享BaseMinigame契约。
"""

from .base import BaseMinigame
from .blackjack import BlackjackGame, BlackjackPhase, BlackjackOutcome, hand_points, is_natural
from .poker import PokerGame, PokerPhase, PokerPlayer, evaluate_hand
from .dice import DiceGame, DicePhase, DicePlayer, proximity_score
from .heads_tails import HeadsTailsGame, HeadsTailsPhase, CoinSide
from .purrinha import PurrinhaGame, PurrinhaPhase, PurrinhaPlayer, npc_guess
from .palitinho import PalitinhoGame, PalitinhoPhase, PalitinhoPlayer, Matchstick

__all__ = [
    # 基类
    'BaseMinigame',

    # 21点
    'BlackjackGame',
    'BlackjackPhase',
    'BlackjackOutcome',
    'hand_points',
    'is_natural',

    # 扑克
    'PokerGame',
    'PokerPhase',
    'PokerPlayer',
    'evaluate_hand',

    # 骰子
    'DiceGame',
    'DicePhase',
    'DicePlayer',
    'proximity_score',

    # 猜硬币
    'HeadsTailsGame',
    'HeadsTailsPhase',
    'CoinSide',

    # Purrinha
    'PurrinhaGame',
    'PurrinhaPhase',
    'PurrinhaPlayer',
    'npc_guess',

    # Palitinho
    'PalitinhoGame',
    'PalitinhoPhase',
    'PalitinhoPlayer',
    'Matchstick',
]
