#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理牌组工具的配置，包括：
- 牌组默认参数（手牌张数、存档文件名、随机种子）
- 日志配置

为Application层和CLI提供统一的配置入口。
"""

import logging
import os
from typing import Dict, Any, Optional, Mapping
from dataclasses import dataclass, replace
from enum import Enum

from .types import QueryResult

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

ENV_HAND_SIZE = "CARDS_HAND_SIZE"
ENV_SEED = "CARDS_SEED"
ENV_LOG_LEVEL = "CARDS_LOG_LEVEL"


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@dataclass
class DeckConfig:
    """牌组配置"""
    default_hand_size: int = 5
    default_filename: str = "my_deck"
    random_seed: Optional[int] = None   # 随机种子，用于可重现的洗牌

    def __post_init__(self):
        """验证配置的有效性"""
        if isinstance(self.default_hand_size, bool) or not isinstance(self.default_hand_size, int):
            raise ValueError(f"默认手牌张数必须是整数: {self.default_hand_size!r}")
        if self.default_hand_size < 0:
            raise ValueError(f"默认手牌张数不能为负数: {self.default_hand_size}")
        if not self.default_filename:
            raise ValueError("默认存档文件名不能为空")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_file_logging: bool = False
    log_file_path: str = "cards.log"

    def __post_init__(self):
        """规范化并验证日志级别"""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """
    按配置初始化根日志器

    Args:
        config: 日志配置

    Returns:
        配置完成的根日志器
    """
    handlers = [logging.StreamHandler()]
    if config.enable_file_logging:
        handlers.append(logging.FileHandler(config.log_file_path, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
        handlers=handlers,
        force=True
    )
    return logging.getLogger()


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ConfigService':
        """
        创建配置服务，并用环境变量覆盖默认配置

        支持的环境变量: CARDS_HAND_SIZE, CARDS_SEED, CARDS_LOG_LEVEL

        Args:
            environ: 环境变量映射，默认使用os.environ

        Returns:
            配置服务实例

        Raises:
            ValueError: 环境变量的值无效时
        """
        env = os.environ if environ is None else environ
        service = cls()

        deck_overrides: Dict[str, Any] = {}
        if env.get(ENV_HAND_SIZE):
            deck_overrides['default_hand_size'] = _parse_int(ENV_HAND_SIZE, env[ENV_HAND_SIZE])
        if env.get(ENV_SEED):
            deck_overrides['random_seed'] = _parse_int(ENV_SEED, env[ENV_SEED])
        if deck_overrides:
            service.update_deck_config(**deck_overrides)

        if env.get(ENV_LOG_LEVEL):
            service.update_logging_config(log_level=env[ENV_LOG_LEVEL])

        return service

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'seeded': DeckConfig(random_seed=42)
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='ERROR')
        }

        self.logger.debug("默认配置加载完成")

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组配置

        Args:
            profile: 配置名 (default, seeded)

        Returns:
            查询结果，包含牌组配置
        """
        return self._get_config(ConfigType.DECK, profile)

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        return self._get_config(ConfigType.LOGGING, profile)

    def update_deck_config(self, profile: str = "default", **overrides) -> DeckConfig:
        """更新牌组配置，返回新的配置对象"""
        return self._update_config(ConfigType.DECK, profile, overrides)

    def update_logging_config(self, profile: str = "default", **overrides) -> LoggingConfig:
        """更新日志配置，返回新的配置对象"""
        return self._update_config(ConfigType.LOGGING, profile, overrides)

    def _get_config(self, config_type: ConfigType, profile: str) -> QueryResult[Any]:
        profiles = self._configs[config_type]
        if profile not in profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return QueryResult.success_result(profiles[profile])

    def _update_config(self, config_type: ConfigType, profile: str, overrides: Dict[str, Any]) -> Any:
        profiles = self._configs[config_type]
        if profile not in profiles:
            raise ValueError(f"未知的{config_type.value}配置: {profile}")

        # replace会重新执行__post_init__校验
        updated = replace(profiles[profile], **overrides)
        profiles[profile] = updated
        self.logger.debug(f"{config_type.value}配置 '{profile}' 已更新: {overrides}")
        return updated


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"环境变量 {name} 必须是整数，实际: {raw!r}") from e
