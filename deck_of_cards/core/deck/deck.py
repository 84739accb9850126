"""
标准牌组构建.

按固定顺序生成52张扑克牌，不包含洗牌等随机操作.
"""

import logging
from typing import List

from ..exceptions import DeckOfCardsError
from .card import Card, build_face_card, build_numeric_card
from .types import (
    FACE_ABBREVIATIONS, MAX_CARD_NUMBER, MIN_CARD_NUMBER, STANDARD_DECK_SIZE, get_all_suits,
)

logger = logging.getLogger(__name__)


def build_standard_deck() -> List[Card]:
    """
    生成一副标准的52张扑克牌.

    按花色声明顺序(梅花、方块、红桃、黑桃)遍历，每个花色先加入2-10的数字牌，
    再按J、Q、K、A的顺序加入人头牌。每次调用都返回新的列表。

    Returns:
        List[Card]: 有序的52张牌

    Raises:
        DeckOfCardsError: 当生成的牌数不是52张时
    """
    deck: List[Card] = []
    for suit in get_all_suits():
        for number in range(MIN_CARD_NUMBER, MAX_CARD_NUMBER + 1):
            deck.append(build_numeric_card(suit, number))
        for abbreviation in FACE_ABBREVIATIONS:
            deck.append(build_face_card(suit, abbreviation))

    if len(deck) != STANDARD_DECK_SIZE:
        raise DeckOfCardsError(f"标准牌组应有{STANDARD_DECK_SIZE}张牌，实际: {len(deck)}")

    logger.debug(f"生成标准牌组: {len(deck)}张")
    return deck
