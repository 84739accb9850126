"""
扑克牌相关类型定义.

定义花色枚举以及卡牌编码使用的常量.
"""

from enum import Enum
from typing import List, Tuple


# 按花色声明顺序排列的显示符号：梅花、方块、红桃、黑桃
_SUIT_GLYPHS: Tuple[str, ...] = ("♣", "♦", "♥", "♠")

FACE_ABBREVIATIONS = "JQKA"
FACE_RANK_OFFSET = 9
MIN_CARD_NUMBER = 2
MAX_CARD_NUMBER = 10
CARDS_PER_SUIT = (MAX_CARD_NUMBER - MIN_CARD_NUMBER + 1) + len(FACE_ABBREVIATIONS)
STANDARD_DECK_SIZE = 4 * CARDS_PER_SUIT


class Suit(Enum):
    """
    扑克牌花色枚举.

    枚举值即声明顺序的序号，用于查找显示符号.
    """

    CLUB = 0      # 梅花
    DIAMOND = 1   # 方块
    HEART = 2     # 红桃
    SPADE = 3     # 黑桃

    @property
    def glyph(self) -> str:
        """返回花色符号"""
        return _SUIT_GLYPHS[self.value]


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按声明顺序排列的四种花色
    """
    return list(Suit)
