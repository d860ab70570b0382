"""
Application Layer - 应用服务层

对外提供DeckService和ConfigService，以及命令/查询结果类型。
"""

from .types import ResultStatus, CommandResult, QueryResult
from .config_service import (
    ConfigService, DeckConfig, LoggingConfig, setup_logging
)
from .deck_service import DeckService

__all__ = [
    'ResultStatus', 'CommandResult', 'QueryResult',
    'ConfigService', 'DeckConfig', 'LoggingConfig', 'setup_logging',
    'DeckService',
]
