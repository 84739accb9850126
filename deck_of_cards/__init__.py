"""
标准52张扑克牌组的数据模型.

Modules:
    core.deck: 花色、卡牌、标准牌组构建和牌组显示
    core.config: 显示与日志配置
    core.exceptions: 异常定义
    core.result: 操作结果对象
    ui.cli: 命令行入口
"""

from .core import (
    Suit, Card, build_numeric_card, build_face_card,
    try_build_numeric_card, try_build_face_card,
    build_standard_deck, format_deck_lines, render_deck,
    DisplayConfig, LoggingConfig, RemainderPolicy,
    DeckOfCardsError, InvalidCardSpecError, OperationResult,
)

__version__ = "1.0.0"

__all__ = [
    'Suit', 'Card', 'build_numeric_card', 'build_face_card',
    'try_build_numeric_card', 'try_build_face_card',
    'build_standard_deck', 'format_deck_lines', 'render_deck',
    'DisplayConfig', 'LoggingConfig', 'RemainderPolicy',
    'DeckOfCardsError', 'InvalidCardSpecError', 'OperationResult',
]
