"""
测试辅助工具

提供可控随机数、预排牌组和把任意小游戏推进到结果阶段的驱动函数。
"""

import random
from typing import Iterable, List, Sequence

from street_games.core.deck import Card, Deck
from street_games.minigames import (
    BaseMinigame,
    BlackjackGame,
    BlackjackPhase,
    CoinSide,
    DiceGame,
    HeadsTailsGame,
    HeadsTailsPhase,
    PalitinhoGame,
    PalitinhoPhase,
    PokerGame,
    PurrinhaGame,
    PurrinhaPhase,
)


class ScriptedRandom(random.Random):
    """
    按脚本返回randint结果的随机数生成器

    脚本用尽后退回到种子随机；choice/sample/random不受脚本影响。
    """

    def __init__(self, randints: Iterable[int] = (), seed: int = 0):
        super().__init__(seed)
        self._randints: List[int] = list(randints)

    def randint(self, a: int, b: int) -> int:
        if self._randints:
            value = self._randints.pop(0)
            assert a <= value <= b, f"脚本值 {value} 超出范围 [{a}, {b}]"
            return value
        return super().randint(a, b)


class StackedDeck(Deck):
    """按给定顺序发牌的牌组，列表第一个元素最先发出，洗牌无效"""

    def __init__(self, cards: Sequence[Card]):
        super().__init__(random.Random(0))
        self._cards = list(reversed(cards))

    def shuffle(self) -> None:
        pass


def cards(*names: str) -> List[Card]:
    """cards("AS", "10H") -> [Card, Card]"""
    return [Card.from_str(name) for name in names]


def stack_deck(monkeypatch, module, card_names: Sequence[str]) -> None:
    """让module里的Deck(rng)返回预排好的牌组"""
    stacked = cards(*card_names)
    monkeypatch.setattr(module, "Deck", lambda rng=None: StackedDeck(stacked))


def play_to_result(game: BaseMinigame, bet: int = None, max_steps: int = 500,
                   start: bool = True) -> BaseMinigame:
    """
    用最简单的决策把任意小游戏推进到RESULT阶段

    21点直接停牌，扑克一路翻牌，猜硬币选正面，Purrinha握1颗猜3，
    Palitinho抽第一根可用的火柴。start为False时假定下注已由驱动器完成。
    """
    if start:
        game.start(game.min_bet if bet is None else bet)

    for _ in range(max_steps):
        if game.is_finished:
            return game
        if isinstance(game, BlackjackGame):
            if game.phase == BlackjackPhase.PLAYING:
                game.stand()
        elif isinstance(game, PokerGame):
            game.next_phase()
        elif isinstance(game, HeadsTailsGame):
            if game.phase == HeadsTailsPhase.CHOOSING:
                game.choose_side(CoinSide.HEADS)
            else:
                game.update(0.5)
        elif isinstance(game, DiceGame):
            game.update(1.0)
        elif isinstance(game, PurrinhaGame):
            if game.phase == PurrinhaPhase.CHOOSING:
                game.choose_stones(1)
            elif game.phase == PurrinhaPhase.GUESSING:
                game.make_guess(3)
            else:
                game.update(1.0)
        elif isinstance(game, PalitinhoGame):
            if game.phase == PalitinhoPhase.CHOOSING:
                game.choose_matchstick(game.available_matchsticks()[0])
            else:
                game.update(1.0)

    raise AssertionError(f"{game!r} 未能在 {max_steps} 步内结束")
