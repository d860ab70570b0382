"""
牌组相关类型定义.

定义卡牌的点数、花色枚举以及Card/Deck/Hand类型别名.
枚举的定义顺序即牌组的规范顺序.
"""

from enum import Enum
from typing import List


Card = str
Deck = List[Card]
Hand = List[Card]


class Value(Enum):
    """
    卡牌点数枚举.

    只包含A到5五种点数，值为卡牌标签中使用的英文名称.
    """

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"


class Suit(Enum):
    """
    卡牌花色枚举.

    顺序为黑桃、梅花、红桃、方块，create_deck按此顺序作为外层循环.
    """

    SPADES = "Spades"     # 黑桃
    CLUBS = "Clubs"       # 梅花
    HEARTS = "Hearts"     # 红桃
    DIAMONDS = "Diamonds" # 方块
