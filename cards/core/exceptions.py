"""
牌组工具业务异常定义
读文件失败不在此列，由load转换为提示信息或失败结果
"""


class CardDeckError(Exception):
    """牌组工具基础异常类"""
    pass


class InvalidHandSizeError(CardDeckError, ValueError):
    """手牌张数无效异常"""
    pass


class InvalidCardError(CardDeckError, ValueError):
    """卡牌标签无效异常"""
    pass


class DeckSerializationError(CardDeckError):
    """牌组序列化异常"""
    pass


class DeckDeserializationError(CardDeckError):
    """牌组反序列化异常"""
    pass
