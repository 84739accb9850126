"""
扑克牌组模块.

提供Suit、Card类型，卡牌工厂函数，标准牌组构建和牌组显示功能.
"""

from .types import Suit, get_all_suits
from .card import (
    Card, build_numeric_card, build_face_card, try_build_numeric_card, try_build_face_card,
)
from .deck import build_standard_deck
from .display import format_deck_lines, render_deck

__all__ = [
    'Suit', 'get_all_suits',
    'Card', 'build_numeric_card', 'build_face_card',
    'try_build_numeric_card', 'try_build_face_card',
    'build_standard_deck',
    'format_deck_lines', 'render_deck',
]
