"""数据传输对象定义.

这个模块定义了游戏驱动器与UI层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性。
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass


@pydantic_dataclass
class MinigameSnapshot:
    """小游戏状态快照.

    UI层渲染下注面板所需的最小信息。
    """
    game_type: str = Field(..., min_length=1, description="小游戏类型")
    phase: str = Field(..., min_length=1, description="当前阶段")
    bet_amount: int = Field(..., ge=0, description="本局下注金额")
    selected_bet: int = Field(..., ge=0, description="下注面板当前选择")
    min_bet: int = Field(..., gt=0, description="最低下注")
    max_bet: int = Field(..., gt=0, description="最高下注")
    balance: int = Field(..., description="玩家当前余额")
    is_finished: bool = Field(False, description="是否已到达结果阶段")
    timestamp: datetime = Field(default_factory=datetime.now, description="快照时间戳")

    @field_validator('game_type', 'phase')
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """类型和阶段统一为小写标识."""
        return v.strip().lower()


@pydantic_dataclass
class RoundSettlement:
    """一局结算结果.

    net为相对已扣除下注的净输赢，payout为退还给玩家的金额（下注 + 净输赢）。
    """
    game_type: str = Field(..., min_length=1, description="小游戏类型")
    bet_amount: int = Field(..., ge=0, description="本局下注金额")
    net: int = Field(..., description="净输赢")
    payout: int = Field(..., ge=0, description="退还金额")
    balance_after: int = Field(..., description="结算后余额")
    abandoned: bool = Field(False, description="是否为中途离开")
    message: Optional[str] = Field(None, description="结算描述")
    timestamp: datetime = Field(default_factory=datetime.now, description="结算时间戳")

    def __post_init__(self):
        """退还金额必须等于下注加净输赢（中途离开且下注作废时为0）."""
        expected = self.bet_amount + self.net
        if self.abandoned and self.payout == 0:
            return
        if self.payout != expected:
            raise ValueError(f"退还金额 {self.payout} 与下注加净输赢 {expected} 不一致")
