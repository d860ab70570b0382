"""牌组CLI用户界面模块.

这个包提供命令行界面，包括：
- click命令组（参数解析）
- 渲染器（显示逻辑）
"""

from .commands import cli, main
from .render import CLIRenderer

__all__ = [
    'cli',
    'main',
    'CLIRenderer',
]
