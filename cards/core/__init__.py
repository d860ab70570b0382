"""
Core Module - 纯领域逻辑层

核心模块只能依赖其他核心模块，不能依赖应用层或UI层。

Modules:
    deck: 卡牌标签和牌组操作
    storage: 牌组序列化和文件存储
    exceptions: 业务异常
"""

from .deck import (
    Card, Deck, Hand, Suit, Value, CANONICAL_CARDS,
    card_label, parse_card, is_canonical,
    create_deck, shuffle, contains, deal, create_hand,
)
from .storage import (
    DeckSerializer, LoadResult, FILE_NOT_FOUND_MESSAGE,
    save, load, load_result,
)
from .exceptions import (
    CardDeckError, InvalidHandSizeError, InvalidCardError,
    DeckSerializationError, DeckDeserializationError,
)

__all__ = [
    # 牌组
    'Card', 'Deck', 'Hand', 'Suit', 'Value', 'CANONICAL_CARDS',
    'card_label', 'parse_card', 'is_canonical',
    'create_deck', 'shuffle', 'contains', 'deal', 'create_hand',

    # 存储
    'DeckSerializer', 'LoadResult', 'FILE_NOT_FOUND_MESSAGE',
    'save', 'load', 'load_result',

    # 异常
    'CardDeckError', 'InvalidHandSizeError', 'InvalidCardError',
    'DeckSerializationError', 'DeckDeserializationError',
]
