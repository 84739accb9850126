#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含花色、卡牌、牌组构建与显示、配置、异常等基础组件
"""

from .deck import (
    Suit, Card, build_numeric_card, build_face_card,
    try_build_numeric_card, try_build_face_card,
    build_standard_deck, format_deck_lines, render_deck,
)
from .config import DisplayConfig, LoggingConfig, RemainderPolicy, configure_logging
from .exceptions import DeckOfCardsError, InvalidCardSpecError
from .result import OperationResult

__all__ = [
    # 卡牌相关
    'Suit', 'Card', 'build_numeric_card', 'build_face_card',
    'try_build_numeric_card', 'try_build_face_card',

    # 牌组相关
    'build_standard_deck', 'format_deck_lines', 'render_deck',

    # 配置相关
    'DisplayConfig', 'LoggingConfig', 'RemainderPolicy', 'configure_logging',

    # 异常与结果类型
    'DeckOfCardsError', 'InvalidCardSpecError', 'OperationResult',
]
