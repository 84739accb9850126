"""
标准牌组构建的单元测试.
"""

import pytest

from deck_of_cards.core.deck import Card, Suit, build_standard_deck


@pytest.mark.unit
class TestStandardDeck:
    """标准牌组测试"""

    def test_deck_size(self, standard_deck):
        """测试牌组有52张牌"""
        assert len(standard_deck) == 52
        assert len(set(standard_deck)) == 52

    def test_each_suit_covers_all_ranks(self, standard_deck):
        """测试每个花色正好有13张牌，覆盖rank 0-12"""
        for suit in Suit:
            ranks = [card.rank for card in standard_deck if card.suit == suit]
            assert sorted(ranks) == list(range(13))

    def test_deck_order(self, standard_deck):
        """测试牌组顺序：花色按声明顺序，数字牌在前，人头牌按JQKA排列"""
        faces = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
        expected = [
            Card(suit, face, rank)
            for suit in [Suit.CLUB, Suit.DIAMOND, Suit.HEART, Suit.SPADE]
            for rank, face in enumerate(faces)
        ]
        assert standard_deck == expected

    def test_first_and_last_cards(self, standard_deck):
        """测试首尾卡牌"""
        assert standard_deck[0].format() == "2♣(0)"
        assert standard_deck[8].format() == "10♣(8)"
        assert standard_deck[-1].format() == "A♠(12)"

    def test_deterministic(self):
        """测试两次构建结果相等但互相独立"""
        first = build_standard_deck()
        second = build_standard_deck()
        assert first == second
        assert first is not second

        first.pop()
        assert len(second) == 52
