"""
牌组存储模块.

负责牌组的序列化以及文件的写入和读取.
"""

from .serializer import DeckSerializer
from .store import FILE_NOT_FOUND_MESSAGE, load, load_result, save
from .types import CORRUPT_DECK_FILE, FILE_NOT_READABLE, LoadResult

__all__ = [
    'DeckSerializer',
    'FILE_NOT_FOUND_MESSAGE', 'save', 'load', 'load_result',
    'LoadResult', 'FILE_NOT_READABLE', 'CORRUPT_DECK_FILE',
]
