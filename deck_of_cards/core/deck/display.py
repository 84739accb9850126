"""
牌组显示.

把牌组按行分组输出到控制台.
"""

from typing import List, Optional, Sequence

import click

from ..config import DEFAULT_DESCRIPTION, DEFAULT_ROWS, DisplayConfig, RemainderPolicy
from .card import Card


def format_deck_lines(deck: Sequence[Card], config: DisplayConfig) -> List[str]:
    """
    生成牌组的显示文本行.

    每行牌数为 len(deck) // rows。使用TRUNCATE策略时，
    最后 len(deck) % rows 张牌不会输出；使用CARRY策略时追加到最后一行。

    Args:
        deck: 要显示的牌组
        config: 显示配置

    Returns:
        List[str]: 分隔线、描述行(可选)和每一行卡牌的文本
    """
    lines = [config.separator]
    if config.description is not None:
        lines.append(config.description)

    cards_in_row = len(deck) // config.rows
    for i in range(config.rows):
        start_index = i * cards_in_row
        end_index = start_index + cards_in_row
        if config.remainder is RemainderPolicy.CARRY and i == config.rows - 1:
            end_index = len(deck)
        # 每张牌后跟一个空格
        lines.append("".join(f"{card} " for card in deck[start_index:end_index]))
    return lines


def render_deck(deck: Sequence[Card],
                description: Optional[str] = DEFAULT_DESCRIPTION,
                rows: int = DEFAULT_ROWS,
                remainder: RemainderPolicy = RemainderPolicy.TRUNCATE) -> None:
    """
    把牌组按行输出到标准输出.

    Args:
        deck: 要显示的牌组
        description: 描述行，None时不输出
        rows: 输出行数，必须大于0
        remainder: 不能整除时剩余卡牌的处理策略

    Raises:
        pydantic.ValidationError: 当rows不大于0时
    """
    config = DisplayConfig(description=description, rows=rows, remainder=remainder)
    for line in format_deck_lines(deck, config):
        click.echo(line)
