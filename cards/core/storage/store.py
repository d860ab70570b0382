"""
牌组的文件存储.

save一次性写入整个文件，load一次性读取整个文件.
"""

from typing import Sequence, Union

from ..deck.types import Card, Deck
from ..exceptions import DeckDeserializationError
from .serializer import DeckSerializer
from .types import CORRUPT_DECK_FILE, FILE_NOT_READABLE, LoadResult

__all__ = ['FILE_NOT_FOUND_MESSAGE', 'save', 'load', 'load_result']

FILE_NOT_FOUND_MESSAGE = "That file does not exist"


def save(deck: Sequence[Card], filename: str) -> None:
    """
    把牌组写入文件，覆盖已有内容.

    Args:
        deck: 卡牌序列
        filename: 文件路径

    Raises:
        OSError: 路径不可写时（权限不足、父目录不存在等）原样抛出
        DeckSerializationError: 牌组中含有非字符串元素时
    """
    blob = DeckSerializer.serialize(deck)
    with open(filename, 'wb') as f:
        f.write(blob)


def load(filename: str) -> Union[Deck, str]:
    """
    从文件读取牌组.

    任何读取失败都返回"That file does not exist"，不区分具体原因.
    需要区分成功与失败的调用方应使用load_result.

    Args:
        filename: 文件路径

    Returns:
        读取到的牌组，或读取失败时的提示字符串

    Raises:
        DeckDeserializationError: 文件内容不是有效的牌组时
    """
    try:
        blob = _read_file(filename)
    except (OSError, ValueError):
        return FILE_NOT_FOUND_MESSAGE
    return DeckSerializer.deserialize(blob)


def load_result(filename: str) -> LoadResult:
    """
    从文件读取牌组，返回带标签的结果.

    Args:
        filename: 文件路径

    Returns:
        LoadResult: 成功时包含牌组；失败时error_code为FILE_NOT_READABLE或CORRUPT_DECK_FILE
    """
    try:
        blob = _read_file(filename)
    except (OSError, ValueError) as e:
        return LoadResult.failure(f"无法读取牌组文件 '{filename}': {e}", FILE_NOT_READABLE)

    try:
        return LoadResult.ok(DeckSerializer.deserialize(blob))
    except DeckDeserializationError as e:
        return LoadResult.failure(f"牌组文件 '{filename}' 已损坏: {e}", CORRUPT_DECK_FILE)


def _read_file(filename: str) -> bytes:
    # 路径中含有NUL字节时open抛出ValueError，与OSError同样视为读取失败
    with open(filename, 'rb') as f:
        return f.read()
