"""
Application Layer Types - 应用层类型定义

驱动器和配置服务对外返回的结果对象。命令不抛出业务异常，
而是返回带状态和错误码的结果，由调用方（UI层）决定如何提示。
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Generic, Optional, TypeVar

__all__ = ['ResultStatus', 'ErrorCode', 'CommandResult', 'QueryResult']

T = TypeVar('T')


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()
    BUSINESS_RULE_VIOLATION = auto()


class ErrorCode(str, Enum):
    """错误码，可直接与字符串比较"""
    NO_GAME_OPEN = "NO_GAME_OPEN"
    GAME_ALREADY_OPEN = "GAME_ALREADY_OPEN"
    INVALID_PHASE = "INVALID_PHASE"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    CONFIG_TYPE_MISMATCH = "CONFIG_TYPE_MISMATCH"

    @property
    def status(self) -> ResultStatus:
        """错误码对应的结果状态：调用顺序错误为验证错误，余额不足为业务规则违反"""
        if self is ErrorCode.INSUFFICIENT_BALANCE:
            return ResultStatus.BUSINESS_RULE_VIOLATION
        if self is ErrorCode.CONFIG_TYPE_MISMATCH:
            return ResultStatus.FAILURE
        return ResultStatus.VALIDATION_ERROR


@dataclass(frozen=True)
class CommandResult:
    """
    命令执行结果

    Attributes:
        data: 成功时的附加数据，例如 {'bet_amount': 20} 或 {'settlement': RoundSettlement}
    """
    success: bool
    status: ResultStatus
    message: str = ""
    error_code: Optional[ErrorCode] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def ok(cls, message: str, **data: Any) -> 'CommandResult':
        return cls(success=True, status=ResultStatus.SUCCESS, message=message, data=data or None)

    @classmethod
    def rejected(cls, error_code: ErrorCode, message: str) -> 'CommandResult':
        """按错误码创建失败结果，状态由错误码决定"""
        return cls(success=False, status=error_code.status, message=message, error_code=error_code)

    @property
    def settlement(self) -> Optional[Any]:
        """结算类命令（collect/escape）返回的RoundSettlement"""
        return (self.data or {}).get('settlement')


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[ErrorCode] = None

    @classmethod
    def ok(cls, data: T, message: str = "查询成功") -> 'QueryResult[T]':
        return cls(success=True, status=ResultStatus.SUCCESS, data=data, message=message)

    @classmethod
    def rejected(cls, error_code: ErrorCode, message: str) -> 'QueryResult[T]':
        return cls(success=False, status=error_code.status, message=message, error_code=error_code)
