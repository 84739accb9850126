"""
扑克牌组业务异常定义.

所有库内异常都继承自DeckOfCardsError，调用方可以统一捕获.
"""


class DeckOfCardsError(Exception):
    """扑克牌组基础异常类"""
    pass


class InvalidCardSpecError(DeckOfCardsError):
    """
    无效的卡牌规格异常.

    当数字牌点数不在2-10之间、人头牌缩写不是J/Q/K/A之一，
    或者face与rank不匹配时抛出.
    """
    pass
