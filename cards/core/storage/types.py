"""
牌组存储结果类型.

load_result使用的带标签结果，调用方通过success字段分支，无需比较字符串.
"""

from dataclasses import dataclass
from typing import Optional

from ..deck.types import Deck

__all__ = ['LoadResult', 'FILE_NOT_READABLE', 'CORRUPT_DECK_FILE']

FILE_NOT_READABLE = "FILE_NOT_READABLE"
CORRUPT_DECK_FILE = "CORRUPT_DECK_FILE"


@dataclass(frozen=True)
class LoadResult:
    """
    读取牌组的结果.

    Attributes:
        success: 是否成功读取
        deck: 成功时的牌组
        message: 失败原因
        error_code: 失败时的错误码
    """

    success: bool
    deck: Optional[Deck] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, deck: Deck) -> 'LoadResult':
        """创建成功结果"""
        return cls(success=True, deck=deck)

    @classmethod
    def failure(cls, message: str, error_code: str) -> 'LoadResult':
        """创建失败结果"""
        return cls(success=False, message=message, error_code=error_code)
