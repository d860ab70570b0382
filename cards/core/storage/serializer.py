"""
牌组序列化器

把牌组编码为UTF-8 JSON数组的字节串，并能无损还原。
格式没有版本号和文件头，只保证save写入的内容能被load原样读回。
"""

import json
from typing import Any, Sequence

from ..deck.types import Card, Deck
from ..exceptions import DeckDeserializationError, DeckSerializationError

__all__ = ['DeckSerializer', 'ENCODING']

ENCODING = 'utf-8'


class DeckSerializer:
    """
    牌组序列化器

    负责牌组与字节串之间的相互转换。
    """

    @staticmethod
    def serialize(deck: Sequence[Card]) -> bytes:
        """
        将牌组序列化为字节串

        Args:
            deck: 卡牌序列

        Returns:
            bytes: UTF-8编码的JSON数组

        Raises:
            DeckSerializationError: 序列中含有非字符串元素时抛出
        """
        cards = list(deck)
        for index, card in enumerate(cards):
            if not isinstance(card, str):
                raise DeckSerializationError(
                    f"牌组序列化失败: 第{index}个元素不是字符串: {card!r}"
                )
        return json.dumps(cards, ensure_ascii=False).encode(ENCODING)

    @staticmethod
    def deserialize(blob: bytes) -> Deck:
        """
        从字节串反序列化牌组

        Args:
            blob: serialize生成的字节串

        Returns:
            Deck: 还原出的牌组

        Raises:
            DeckDeserializationError: 字节串无法解码或内容不是字符串数组时抛出
        """
        try:
            payload = json.loads(blob.decode(ENCODING))
        except (UnicodeDecodeError, ValueError) as e:
            raise DeckDeserializationError(f"牌组反序列化失败: {str(e)}") from e

        return DeckSerializer._payload_to_deck(payload)

    @staticmethod
    def _payload_to_deck(payload: Any) -> Deck:
        """校验解析结果并转换为牌组"""
        if not isinstance(payload, list):
            raise DeckDeserializationError(
                f"牌组反序列化失败: 期望数组，实际为{type(payload).__name__}"
            )
        if not all(isinstance(card, str) for card in payload):
            raise DeckDeserializationError("牌组反序列化失败: 数组中含有非字符串元素")
        return payload
