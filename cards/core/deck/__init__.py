"""
牌组管理模块.

提供卡牌标签工具和建牌、洗牌、查牌、分牌等纯函数.
"""

from .types import Card, Deck, Hand, Suit, Value
from .card import CANONICAL_CARDS, card_label, is_canonical, parse_card
from .deck import contains, create_deck, create_hand, deal, shuffle

__all__ = [
    'Card', 'Deck', 'Hand', 'Suit', 'Value',
    'CANONICAL_CARDS', 'card_label', 'is_canonical', 'parse_card',
    'create_deck', 'shuffle', 'contains', 'deal', 'create_hand',
]
