"""
牌组操作.

提供建牌、洗牌、查牌、分牌等纯函数. 所有操作都返回新的列表，不修改输入.
洗牌支持注入随机数生成器，以便进行确定性测试.
"""

import random
from typing import Optional, Sequence, Tuple

from ..exceptions import InvalidHandSizeError
from .card import card_label
from .types import Card, Deck, Hand, Suit, Value

__all__ = ['create_deck', 'shuffle', 'contains', 'deal', 'create_hand']


def create_deck() -> Deck:
    """
    创建一副新牌.

    花色为外层循环，点数为内层循环，共20张牌，顺序固定.

    Returns:
        Deck: 未洗的牌组

    Examples:
        >>> deck = create_deck()
        >>> deck[:2]
        ['Ace of Spades', 'Two of Spades']
        >>> len(deck)
        20
    """
    return [
        card_label(value, suit)
        for suit in Suit
        for value in Value
    ]


def shuffle(deck: Sequence[Card], rng: Optional[random.Random] = None) -> Deck:
    """
    洗牌.

    复制输入后用Fisher-Yates算法随机打乱，输入本身保持不变.

    Args:
        deck: 任意卡牌序列
        rng: 随机数生成器。如果为None，使用random模块的全局随机源

    Returns:
        Deck: 输入的一个随机排列
    """
    shuffled = list(deck)
    (rng or random).shuffle(shuffled)
    return shuffled


def contains(deck: Sequence[Card], card: Card) -> bool:
    """
    检查牌组中是否包含指定的牌.

    Examples:
        >>> contains(create_deck(), "Ace of Spades")
        True
    """
    return card in deck


def deal(deck: Sequence[Card], hand_size: int) -> Tuple[Hand, Deck]:
    """
    把牌组分成手牌和剩余牌组.

    手牌数超过牌组长度时，手牌为整副牌，剩余牌组为空.

    Args:
        deck: 卡牌序列
        hand_size: 手牌张数，必须是非负整数

    Returns:
        Tuple[Hand, Deck]: (手牌, 剩余牌组)，两者依次拼接等于原牌组

    Raises:
        TypeError: 当hand_size不是整数时
        InvalidHandSizeError: 当hand_size为负数时

    Examples:
        >>> deal(["Ace of Spades", "Two of Spades"], 1)
        (['Ace of Spades'], ['Two of Spades'])
    """
    # bool是int的子类，这里要单独排除
    if isinstance(hand_size, bool) or not isinstance(hand_size, int):
        raise TypeError(f"手牌张数必须是整数，实际: {type(hand_size)}")
    if hand_size < 0:
        raise InvalidHandSizeError(f"手牌张数不能为负数: {hand_size}")

    cards = list(deck)
    return cards[:hand_size], cards[hand_size:]


def create_hand(hand_size: int, rng: Optional[random.Random] = None) -> Tuple[Hand, Deck]:
    """
    新建一副牌，洗牌后发出一手牌.

    Args:
        hand_size: 手牌张数
        rng: 随机数生成器（可选）

    Returns:
        Tuple[Hand, Deck]: (手牌, 剩余牌组)
    """
    return deal(shuffle(create_deck(), rng), hand_size)
