"""
卡牌标签工具.

卡牌本身就是形如"<Value> of <Suit>"的字符串，这里提供构造和解析标签的函数.
"""

from typing import Dict, FrozenSet, Tuple

from ..exceptions import InvalidCardError
from .types import Card, Suit, Value

__all__ = ['CANONICAL_CARDS', 'card_label', 'parse_card', 'is_canonical']

_LABEL_SEPARATOR = " of "

_VALUE_BY_NAME: Dict[str, Value] = {value.value: value for value in Value}
_SUIT_BY_NAME: Dict[str, Suit] = {suit.value: suit for suit in Suit}


def card_label(value: Value, suit: Suit) -> Card:
    """
    根据点数和花色生成卡牌标签.

    Args:
        value: 点数
        suit: 花色

    Returns:
        Card: 例如"Ace of Spades"

    Raises:
        TypeError: 当点数或花色类型无效时

    Examples:
        >>> card_label(Value.ACE, Suit.SPADES)
        'Ace of Spades'
    """
    if not isinstance(value, Value):
        raise TypeError(f"点数必须是Value类型，实际: {type(value)}")
    if not isinstance(suit, Suit):
        raise TypeError(f"花色必须是Suit类型，实际: {type(suit)}")
    return f"{value.value}{_LABEL_SEPARATOR}{suit.value}"


def parse_card(label: Card) -> Tuple[Value, Suit]:
    """
    将卡牌标签解析为点数和花色.

    Args:
        label: 卡牌标签，如"Two of Hearts"

    Returns:
        Tuple[Value, Suit]: 对应的点数和花色

    Raises:
        TypeError: 当输入不是字符串时
        InvalidCardError: 当标签不是20张规范卡牌之一时
    """
    if not isinstance(label, str):
        raise TypeError(f"输入必须是字符串，实际: {type(label)}")

    value_name, sep, suit_name = label.partition(_LABEL_SEPARATOR)
    if not sep:
        raise InvalidCardError(f"卡牌字符串格式错误: {label!r}")
    if value_name not in _VALUE_BY_NAME:
        raise InvalidCardError(f"无效的点数: {value_name!r}")
    if suit_name not in _SUIT_BY_NAME:
        raise InvalidCardError(f"无效的花色: {suit_name!r}")

    return _VALUE_BY_NAME[value_name], _SUIT_BY_NAME[suit_name]


def is_canonical(label: object) -> bool:
    """判断给定对象是否为规范卡牌标签"""
    return isinstance(label, str) and label in CANONICAL_CARDS


CANONICAL_CARDS: FrozenSet[Card] = frozenset(
    card_label(value, suit)
    for suit in Suit
    for value in Value
)
