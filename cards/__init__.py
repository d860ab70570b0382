"""
cards - 扑克牌组工具

建牌、洗牌、查牌、分牌，以及牌组的保存和读取。

新的模块化结构：
- core: 纯领域逻辑（牌组操作、存储、异常）
- application: 应用服务（DeckService、配置、结果类型）
- ui: 命令行界面
"""

__version__ = "1.0.0"

from .core import (
    Card, Deck, Hand, Suit, Value,
    create_deck, shuffle, contains, deal, create_hand,
    save, load, load_result, LoadResult, FILE_NOT_FOUND_MESSAGE,
    CardDeckError, InvalidHandSizeError,
)

__all__ = [
    'Card', 'Deck', 'Hand', 'Suit', 'Value',
    'create_deck', 'shuffle', 'contains', 'deal', 'create_hand',
    'save', 'load', 'load_result', 'LoadResult', 'FILE_NOT_FOUND_MESSAGE',
    'CardDeckError', 'InvalidHandSizeError',
]
