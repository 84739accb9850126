"""
扑克牌数据结构.

定义不可变的Card类，以及创建数字牌和人头牌的工厂函数.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidCardSpecError
from ..result import OperationResult
from .types import (
    Suit, FACE_ABBREVIATIONS, FACE_RANK_OFFSET, MIN_CARD_NUMBER, MAX_CARD_NUMBER,
)

logger = logging.getLogger(__name__)

INVALID_CARD_SPEC = "INVALID_CARD_SPEC"


def _rank_for_face(face: str) -> Optional[int]:
    """返回face对应的rank，face无效时返回None"""
    if len(face) == 1 and face in FACE_ABBREVIATIONS:
        return FACE_ABBREVIATIONS.index(face) + FACE_RANK_OFFSET
    if face.isdecimal() and face == str(int(face)):
        number = int(face)
        if MIN_CARD_NUMBER <= number <= MAX_CARD_NUMBER:
            return number - MIN_CARD_NUMBER
    return None


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含花色、牌面和点数序号.
    数字牌2-10的rank为0-8，人头牌J/Q/K/A的rank为9-12.

    Attributes:
        suit: 花色
        face: 牌面文字，"2".."10"或"J"、"Q"、"K"、"A"
        rank: 点数序号

    Examples:
        >>> card = build_numeric_card(Suit.HEART, 7)
        >>> card.format()
        '7♥(5)'
        >>> build_face_card(Suit.SPADE, "A").rank
        12
    """

    suit: Suit
    face: str
    rank: int

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的一致性.

        Raises:
            InvalidCardSpecError: 当花色类型无效或face与rank不匹配时
        """
        if not isinstance(self.suit, Suit):
            raise InvalidCardSpecError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if (not isinstance(self.face, str) or not isinstance(self.rank, int)
                or isinstance(self.rank, bool)):
            raise InvalidCardSpecError(f"无效的牌面或点数: {self.face!r}, {self.rank!r}")
        expected_rank = _rank_for_face(self.face)
        if expected_rank is None:
            raise InvalidCardSpecError(f"无效的牌面: {self.face!r}")
        if expected_rank != self.rank:
            raise InvalidCardSpecError(
                f"牌面{self.face}的点数应为{expected_rank}，实际: {self.rank}"
            )

    @property
    def is_face_card(self) -> bool:
        """是否为人头牌(J/Q/K/A)"""
        return self.rank >= FACE_RANK_OFFSET

    def format(self) -> str:
        """
        返回卡牌的显示字符串.

        牌面截取第一个字符，"10"保留两个字符.

        Returns:
            str: 如"7♥(5)"、"10♣(8)"、"A♠(12)"
        """
        short_face = self.face[:2] if self.face == "10" else self.face[:1]
        return f"{short_face}{self.suit.glyph}({self.rank})"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.face!r}, {self.rank})"


def build_numeric_card(suit: Suit, number: int) -> Card:
    """
    创建数字牌.

    Args:
        suit: 花色
        number: 牌面数字，必须在2到10之间

    Returns:
        Card: rank为number - 2的数字牌

    Raises:
        InvalidCardSpecError: 当number不在2到10之间时
    """
    if (not isinstance(number, int) or isinstance(number, bool)
            or not MIN_CARD_NUMBER <= number <= MAX_CARD_NUMBER):
        logger.warning(f"无效的数字牌: {number!r}")
        raise InvalidCardSpecError(
            f"数字牌必须在{MIN_CARD_NUMBER}到{MAX_CARD_NUMBER}之间，实际: {number!r}"
        )
    return Card(suit, str(number), number - MIN_CARD_NUMBER)


def build_face_card(suit: Suit, abbreviation: str) -> Card:
    """
    创建人头牌.

    Args:
        suit: 花色
        abbreviation: 单个字符的缩写，"J"、"Q"、"K"或"A"（区分大小写）

    Returns:
        Card: rank为9-12的人头牌

    Raises:
        InvalidCardSpecError: 当缩写无效时
    """
    if (not isinstance(abbreviation, str) or len(abbreviation) != 1
            or abbreviation not in FACE_ABBREVIATIONS):
        logger.warning(f"无效的人头牌: {abbreviation!r}")
        raise InvalidCardSpecError(
            f"人头牌缩写必须是{'/'.join(FACE_ABBREVIATIONS)}之一，实际: {abbreviation!r}"
        )
    rank = FACE_ABBREVIATIONS.index(abbreviation) + FACE_RANK_OFFSET
    return Card(suit, abbreviation, rank)


def try_build_numeric_card(suit: Suit, number: int) -> OperationResult[Card]:
    """build_numeric_card的结果对象版本，失败时不抛出异常"""
    try:
        return OperationResult.success_result(build_numeric_card(suit, number))
    except InvalidCardSpecError as e:
        return OperationResult.failure_result(e, INVALID_CARD_SPEC)


def try_build_face_card(suit: Suit, abbreviation: str) -> OperationResult[Card]:
    """build_face_card的结果对象版本，失败时不抛出异常"""
    try:
        return OperationResult.success_result(build_face_card(suit, abbreviation))
    except InvalidCardSpecError as e:
        return OperationResult.failure_result(e, INVALID_CARD_SPEC)
