"""
pytest配置文件

提供牌组测试共用的fixture。
"""

import pytest

from deck_of_cards.core.deck import build_standard_deck


@pytest.fixture
def standard_deck():
    """一副新的标准牌组"""
    return build_standard_deck()
