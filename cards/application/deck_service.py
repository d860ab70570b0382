#!/usr/bin/env python3
"""
DeckService - 牌组服务

为UI层提供牌组操作的统一入口，包括：
- 建牌、洗牌、查牌、分牌
- 保存和读取牌组文件

存储操作的失败被转换为CommandResult/QueryResult，UI层不需要处理异常。
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from .config_service import DeckConfig
from .types import CommandResult, QueryResult
from cards.core import deck as deck_ops
from cards.core import storage
from cards.core.deck.types import Card, Deck, Hand
from cards.core.exceptions import DeckSerializationError


class DeckService:
    """
    牌组服务

    持有一个随机数生成器，种子来自DeckConfig.random_seed，保证同一种子下洗牌结果可重现。
    """

    def __init__(self, config: Optional[DeckConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        初始化牌组服务

        Args:
            config: 牌组配置（可选）
            rng: 随机数生成器（可选），提供时忽略配置中的随机种子
        """
        self.config = config or DeckConfig()
        self.rng = rng or random.Random(self.config.random_seed)
        self.logger = logging.getLogger(__name__)

    def new_deck(self) -> Deck:
        """创建一副未洗的新牌"""
        deck = deck_ops.create_deck()
        self.logger.debug(f"创建新牌组，共{len(deck)}张")
        return deck

    def shuffle(self, deck: Sequence[Card]) -> Deck:
        """洗牌"""
        shuffled = deck_ops.shuffle(deck, self.rng)
        self.logger.debug(f"洗牌完成，共{len(shuffled)}张")
        return shuffled

    def contains(self, deck: Sequence[Card], card: Card) -> bool:
        """检查牌组中是否包含指定的牌"""
        return deck_ops.contains(deck, card)

    def deal(self, deck: Sequence[Card], hand_size: int) -> Tuple[Hand, Deck]:
        """
        分牌

        Raises:
            TypeError: hand_size不是整数时
            InvalidHandSizeError: hand_size为负数时
        """
        hand, rest = deck_ops.deal(deck, hand_size)
        self.logger.debug(f"发出{len(hand)}张手牌，剩余{len(rest)}张")
        return hand, rest

    def create_hand(self, hand_size: Optional[int] = None) -> Tuple[Hand, Deck]:
        """
        新建一副牌，洗牌后发出一手牌

        Args:
            hand_size: 手牌张数，默认使用配置中的default_hand_size
        """
        if hand_size is None:
            hand_size = self.config.default_hand_size
        return self.deal(self.shuffle(self.new_deck()), hand_size)

    def save(self, deck: Sequence[Card], filename: Optional[str] = None) -> CommandResult:
        """
        保存牌组

        Args:
            deck: 卡牌序列
            filename: 文件路径，默认使用配置中的default_filename

        Returns:
            命令执行结果
        """
        filename = filename or self.config.default_filename
        try:
            storage.save(deck, filename)
        except (OSError, ValueError, DeckSerializationError) as e:
            self.logger.error(f"保存牌组到 '{filename}' 失败: {e}")
            return CommandResult.failure_result(
                f"保存牌组失败: {str(e)}",
                error_code="SAVE_FAILED"
            )

        self.logger.info(f"已保存{len(deck)}张牌到 '{filename}'")
        return CommandResult.success_result(
            f"已保存到 {filename}",
            data={'filename': filename, 'card_count': len(deck)}
        )

    def load(self, filename: Optional[str] = None) -> QueryResult[List[Card]]:
        """
        读取牌组

        Args:
            filename: 文件路径，默认使用配置中的default_filename

        Returns:
            查询结果，成功时data为牌组；失败时error_code为FILE_NOT_READABLE或CORRUPT_DECK_FILE
        """
        filename = filename or self.config.default_filename
        result = storage.load_result(filename)
        if not result.success:
            self.logger.warning(result.message)
            return QueryResult.failure_result(result.message, error_code=result.error_code)

        self.logger.info(f"已从 '{filename}' 读取{len(result.deck)}张牌")
        return QueryResult.success_result(result.deck)
