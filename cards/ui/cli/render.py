"""牌组CLI渲染模块.

这个模块负责把牌组和手牌渲染为命令行显示文本，
实现显示逻辑与牌组操作的分离。
"""

from typing import Sequence

from cards.core.deck.types import Card


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def render_deck(deck: Sequence[Card], title: str = "牌组") -> str:
        """渲染整副牌.

        Args:
            deck: 卡牌序列
            title: 标题

        Returns:
            每张牌一行、带序号的字符串
        """
        lines = [f"=== {title} ({len(deck)}张) ==="]
        if not deck:
            lines.append("  (空)")
        for i, card in enumerate(deck, 1):
            lines.append(f"  {i:2d}. {card}")
        return "\n".join(lines)

    @staticmethod
    def render_hand(hand: Sequence[Card], rest: Sequence[Card]) -> str:
        """渲染一手牌和剩余牌数."""
        lines = [CLIRenderer.render_deck(hand, title="手牌"), f"剩余牌组: {len(rest)}张"]
        return "\n".join(lines)

    @staticmethod
    def render_membership(card: Card, found: bool) -> str:
        """渲染查牌结果."""
        return f"{card}: {'在牌组中' if found else '不在牌组中'}"
