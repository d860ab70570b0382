"""牌组命令行入口.

使用click提供建牌、发手牌、查牌、分牌和查看存档等命令。
所有操作通过DeckService完成，本模块只负责参数解析和输出。
"""

import sys
from typing import Optional, Sequence

import click

from cards.application import ConfigService, DeckService, setup_logging
from cards.core.deck.types import Card, Deck
from .render import CLIRenderer

# 牌不在牌组中时的退出码，与click用法错误的2区分
EXIT_CARD_ABSENT = 3


def _load_or_exit(service: DeckService, filename: str) -> Deck:
    """读取牌组，失败时输出原因并以状态码1退出."""
    result = service.load(filename)
    if not result.success:
        click.echo(f"错误: {result.message}", err=True)
        sys.exit(1)
    return result.data


def _save_or_exit(service: DeckService, deck: Sequence[Card], filename: str) -> None:
    result = service.save(deck, filename)
    if not result.success:
        click.echo(f"错误: {result.message}", err=True)
        sys.exit(1)
    click.echo(result.message)


@click.group()
@click.option('--seed', type=int, default=None, help='随机种子，用于可重现的洗牌')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='日志级别')
@click.pass_context
def cli(ctx: click.Context, seed: Optional[int], log_level: Optional[str]) -> None:
    """扑克牌组工具."""
    try:
        config_service = ConfigService.from_env()
        if seed is not None:
            config_service.update_deck_config(random_seed=seed)
        if log_level is not None:
            config_service.update_logging_config(log_level=log_level)
    except ValueError as e:
        raise click.UsageError(f"配置无效: {e}", ctx=ctx) from e

    setup_logging(config_service.get_logging_config().data)
    ctx.obj = DeckService(config_service.get_deck_config().data)


@cli.command()
@click.option('--shuffle', 'do_shuffle', is_flag=True, help='建牌后洗牌')
@click.option('--save', 'save_to', type=click.Path(dir_okay=False), default=None, help='保存到文件')
@click.pass_obj
def new(service: DeckService, do_shuffle: bool, save_to: Optional[str]) -> None:
    """创建一副新牌."""
    deck = service.new_deck()
    if do_shuffle:
        deck = service.shuffle(deck)
    click.echo(CLIRenderer.render_deck(deck))
    if save_to:
        _save_or_exit(service, deck, save_to)


@cli.command()
@click.argument('size', type=click.IntRange(min=0), required=False)
@click.option('--save', 'save_to', type=click.Path(dir_okay=False), default=None, help='把剩余牌组保存到文件')
@click.pass_obj
def hand(service: DeckService, size: Optional[int], save_to: Optional[str]) -> None:
    """新建一副牌，洗牌后发出一手牌."""
    cards_in_hand, rest = service.create_hand(size)
    click.echo(CLIRenderer.render_hand(cards_in_hand, rest))
    if save_to:
        _save_or_exit(service, rest, save_to)


@cli.command()
@click.argument('filename', type=click.Path(dir_okay=False))
@click.argument('card')
@click.pass_obj
def contains(service: DeckService, filename: str, card: str) -> None:
    """检查存档牌组中是否有指定的牌，不在时以状态码3退出."""
    deck = _load_or_exit(service, filename)
    found = service.contains(deck, card)
    click.echo(CLIRenderer.render_membership(card, found))
    if not found:
        sys.exit(EXIT_CARD_ABSENT)


@cli.command()
@click.argument('filename', type=click.Path(dir_okay=False))
@click.argument('size', type=click.IntRange(min=0))
@click.option('--save', 'save_to', type=click.Path(dir_okay=False), default=None, help='把剩余牌组保存到文件')
@click.pass_obj
def deal(service: DeckService, filename: str, size: int, save_to: Optional[str]) -> None:
    """从存档牌组中发出一手牌."""
    deck = _load_or_exit(service, filename)
    cards_in_hand, rest = service.deal(deck, size)
    click.echo(CLIRenderer.render_hand(cards_in_hand, rest))
    if save_to:
        _save_or_exit(service, rest, save_to)


@cli.command()
@click.argument('filename', type=click.Path(dir_okay=False))
@click.pass_obj
def show(service: DeckService, filename: str) -> None:
    """显示存档牌组."""
    deck = _load_or_exit(service, filename)
    click.echo(CLIRenderer.render_deck(deck, title=filename))


def main() -> None:
    """console script入口."""
    cli()


if __name__ == "__main__":
    main()
