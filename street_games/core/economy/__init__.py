"""
经济模块

提供余额账本和动态下注上下限。
"""

from .ledger import Ledger, BetLimits

__all__ = [
    'Ledger',
    'BetLimits',
]
