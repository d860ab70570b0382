"""
Application Layer Types - 应用层类型定义

DeckService返回的命令结果和查询结果。
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Generic, TypeVar
from enum import Enum, auto

T = TypeVar('T')


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()


@dataclass(frozen=True)
class CommandResult:
    """命令执行结果，data携带写入的文件名和张数"""
    success: bool
    status: ResultStatus
    message: str = ""
    error_code: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, message: str, data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """创建成功结果"""
        return cls(success=True, status=ResultStatus.SUCCESS, message=message, data=data)

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None) -> 'CommandResult':
        """创建失败结果"""
        return cls(success=False, status=ResultStatus.FAILURE, message=message, error_code=error_code)


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "查询成功") -> 'QueryResult[T]':
        """创建成功结果"""
        return cls(success=True, status=ResultStatus.SUCCESS, data=data, message=message)

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None) -> 'QueryResult[T]':
        """创建失败结果"""
        return cls(success=False, status=ResultStatus.FAILURE, message=message, error_code=error_code)
