"""
GameHost - 小游戏通用驱动器

负责小游戏与账本之间的全部资金往来：
- 下注前检查余额并扣除下注
- 结果阶段把 下注 + 净输赢 退还给玩家
- 中途离开时按逃跑规则退款（未到结果阶段下注作废）
- 广播小游戏开始/结束、提示和破产事件

引擎本身从不修改余额，驱动器是唯一的资金出入口。
"""

import logging
from typing import Optional

from ..core.context import GameContext
from ..core.economy import Ledger
from ..core.events import (
    EventType,
    MinigameStartedEvent,
    MinigameEndedEvent,
    NotificationEvent,
    GameOverEvent,
)
from ..minigames.base import BaseMinigame
from .dto import MinigameSnapshot, RoundSettlement
from .types import CommandResult, ErrorCode, QueryResult

__all__ = ['GameHost']

INSUFFICIENT_BALANCE_MESSAGE = "Saldo insuficiente!"
NO_GAME_MESSAGE = "没有打开的小游戏"


class GameHost:
    """小游戏通用驱动器"""

    def __init__(self, context: GameContext):
        """
        初始化驱动器

        Args:
            context: 游戏上下文（账本、事件总线、随机数生成器）
        """
        self._context = context
        self._game: Optional[BaseMinigame] = None
        self.logger = logging.getLogger(__name__)

    @property
    def game(self) -> Optional[BaseMinigame]:
        """当前打开的小游戏"""
        return self._game

    @property
    def ledger(self) -> Ledger:
        return self._context.ledger

    def open(self, game: BaseMinigame) -> CommandResult:
        """
        打开一个小游戏

        Args:
            game: 处于BETTING阶段的小游戏引擎
        """
        if self._game is not None:
            return CommandResult.rejected(ErrorCode.GAME_ALREADY_OPEN, f"已有小游戏 {self._game.GAME_TYPE} 正在进行")
        self._game = game
        game.update_limits()
        self._context.event_bus.emit(EventType.MINIGAME_STARTED, MinigameStartedEvent(game_type=game.GAME_TYPE))
        self.logger.info(f"[驱动器] 打开小游戏 {game.GAME_TYPE}")
        return CommandResult.ok(f"已打开 {game.GAME_TYPE}")

    def place_bet(self, amount: Optional[int] = None) -> CommandResult:
        """
        下注并开始本局

        Args:
            amount: 下注金额，None时使用引擎的selected_bet；会被限制到[min_bet, max_bet]

        Returns:
            CommandResult: 余额不足时为业务规则违反
        """
        game = self._game
        if game is None:
            return CommandResult.rejected(ErrorCode.NO_GAME_OPEN, NO_GAME_MESSAGE)
        if game.phase != game.betting_phase:
            return CommandResult.rejected(ErrorCode.INVALID_PHASE, f"当前阶段 {game.phase.name} 不能下注")

        game.update_limits()
        bet = game.clamp_bet(game.selected_bet if amount is None else amount)

        if not self.ledger.can_afford(bet):
            self._context.event_bus.emit(
                EventType.NOTIFICATION,
                NotificationEvent(message=INSUFFICIENT_BALANCE_MESSAGE, duration=2.0)
            )
            self.logger.info(f"[驱动器] 余额不足: 余额 {self.ledger.balance}，下注 {bet}")
            return CommandResult.rejected(ErrorCode.INSUFFICIENT_BALANCE, INSUFFICIENT_BALANCE_MESSAGE)

        self.ledger.add_money(-bet)
        game.start(bet)
        self.logger.info(f"[驱动器] {game.GAME_TYPE} 下注 {bet}，余额 {self.ledger.balance}")
        return CommandResult.ok(f"下注 {bet}", bet_amount=bet)

    def tick(self, dt: float) -> bool:
        """推进当前小游戏的时间驱动阶段"""
        if self._game is None:
            return False
        return self._game.update(dt)

    def collect(self) -> CommandResult:
        """
        结果阶段结算：退还 下注 + 净输赢，并把引擎重置到下一局

        Returns:
            CommandResult: data['settlement']为RoundSettlement
        """
        game = self._game
        if game is None:
            return CommandResult.rejected(ErrorCode.NO_GAME_OPEN, NO_GAME_MESSAGE)
        if not game.is_finished:
            return CommandResult.rejected(ErrorCode.INVALID_PHASE, f"本局尚未结束（{game.phase.name}）")

        settlement = self._pay_out(game, abandoned=False)
        game.reset()
        self._check_game_over(game)
        return CommandResult.ok("结算完成", settlement=settlement)

    def escape(self) -> CommandResult:
        """
        中途离开并关闭小游戏

        已在结果阶段时照常结算；否则下注作废。
        """
        game = self._game
        if game is None:
            return CommandResult.rejected(ErrorCode.NO_GAME_OPEN, NO_GAME_MESSAGE)

        settlement = self._pay_out(game, abandoned=not game.is_finished)
        game.reset()
        self._game = None
        self.logger.info(f"[驱动器] 关闭小游戏 {game.GAME_TYPE}")
        return CommandResult.ok("已离开", settlement=settlement)

    def snapshot(self) -> QueryResult[MinigameSnapshot]:
        """获取当前小游戏的下注面板快照"""
        game = self._game
        if game is None:
            return QueryResult.rejected(ErrorCode.NO_GAME_OPEN, NO_GAME_MESSAGE)
        return QueryResult.ok(MinigameSnapshot(
            game_type=game.GAME_TYPE,
            phase=game.phase.value,
            bet_amount=game.bet_amount,
            selected_bet=game.selected_bet,
            min_bet=game.min_bet,
            max_bet=game.max_bet,
            balance=self.ledger.balance,
            is_finished=game.is_finished,
        ))

    def _pay_out(self, game: BaseMinigame, abandoned: bool) -> RoundSettlement:
        if game.phase == game.betting_phase:
            # 还没有下注，不涉及资金
            bet, net, abandoned = 0, 0, False
        else:
            bet = game.bet_amount
            net = game.settle() if game.is_finished else -bet
        payout = game.escape_payout()
        if payout:
            self.ledger.add_money(payout)

        self._context.event_bus.emit(
            EventType.MINIGAME_ENDED,
            MinigameEndedEvent(game_type=game.GAME_TYPE, money_change=net)
        )
        self.logger.info(f"[驱动器] {game.GAME_TYPE} 结算: 净输赢 {net}，退还 {payout}，余额 {self.ledger.balance}")
        return RoundSettlement(
            game_type=game.GAME_TYPE,
            bet_amount=bet,
            net=net,
            payout=payout,
            balance_after=self.ledger.balance,
            abandoned=abandoned,
        )

    def _check_game_over(self, game: BaseMinigame) -> None:
        if self.ledger.balance < game.min_bet:
            self._context.event_bus.emit(
                EventType.GAME_OVER,
                GameOverEvent(balance=self.ledger.balance, min_bet=game.min_bet)
            )
            self.logger.info(f"[驱动器] 余额 {self.ledger.balance} 低于最低下注 {game.min_bet}")
