"""
Tests for hand evaluation.
"""

import random

import pytest
from pokerround.core.card import Deck, Rank, parse_cards
from pokerround.core.hand import (
    evaluate_hand, compare_hands, HandCategory, HandValue,
    get_hand_description
)


class TestHandCategories:
    """Tests for category recognition."""

    def test_flush(self):
        """Five of a suit is a flush, tiebreak is the suit's top card."""
        value = evaluate_hand(parse_cards("2s 7s 9s Js Ks Ah Ad"))
        assert value == HandValue(HandCategory.FLUSH, Rank.KING)

    def test_flush_beats_straight(self):
        """A flush that is also a straight reports Flush."""
        value = evaluate_hand(parse_cards("5h 6h 7h 8h 9h Kc 2d"))
        assert value.category == HandCategory.FLUSH
        assert value.tiebreak == Rank.NINE

    def test_straight(self):
        """Low straight with a suited run of four."""
        value = evaluate_hand(parse_cards("2h 3h 4h 5h 6c 9s Kd"))
        assert value == HandValue(HandCategory.STRAIGHT, Rank.SIX)
        assert value.tiebreak_label == "6"

    def test_wheel(self, wheel_pool):
        """A-2-3-4-5 is a Five-high straight."""
        value = evaluate_hand(wheel_pool)
        assert value == HandValue(HandCategory.STRAIGHT, Rank.FIVE)
        assert value.tiebreak_label == "5"

    def test_six_high_straight_beats_wheel(self):
        """With A-2-3-4-5-6 the higher straight is reported."""
        value = evaluate_hand(parse_cards("Ah 2c 3d 4s 5h 6c Jd"))
        assert value == HandValue(HandCategory.STRAIGHT, Rank.SIX)

    def test_highest_straight_reported(self):
        """A seven-card run reports its top."""
        value = evaluate_hand(parse_cards("4c 5d 6h 7s 8c 9d 10h"))
        assert value == HandValue(HandCategory.STRAIGHT, Rank.TEN)

    def test_broadway(self):
        """Ace-high straight."""
        value = evaluate_hand(parse_cards("10c Jd Qh Ks Ac 2d 2h"))
        assert value == HandValue(HandCategory.STRAIGHT, Rank.ACE)

    def test_gap_is_not_straight(self):
        """Five distinct ranks with a gap are not a straight."""
        value = evaluate_hand(parse_cards("2c 3d 4h 5s 7c 9d Jh"))
        assert value == HandValue(HandCategory.HIGH_CARD, Rank.JACK)

    def test_three_of_a_kind(self):
        """Trips."""
        value = evaluate_hand(parse_cards("Qc Qd Qh 2s 7c 9d Kh"))
        assert value == HandValue(HandCategory.THREE_OF_A_KIND, Rank.QUEEN)

    def test_pair(self):
        """One pair."""
        value = evaluate_hand(parse_cards("8c 8d 2h 4s 10c Qd Ah"))
        assert value == HandValue(HandCategory.PAIR, Rank.EIGHT)

    def test_high_card(self):
        """No made hand."""
        value = evaluate_hand(parse_cards("2c 4d 6h 8s 10c Jd Kh"))
        assert value == HandValue(HandCategory.HIGH_CARD, Rank.KING)

    def test_empty_pool(self):
        """An empty pool cannot be evaluated."""
        with pytest.raises(ValueError):
            evaluate_hand([])

    def test_short_pool(self):
        """Pools smaller than five cards still evaluate."""
        assert evaluate_hand(parse_cards("Ah Ad")) == HandValue(HandCategory.PAIR, Rank.ACE)


class TestReducedRankingRules:
    """Tests for the reduced ranking and its first-match policies."""

    def test_full_house_reports_trips(self):
        """Full houses are not modeled."""
        value = evaluate_hand(parse_cards("Ac Ad Ah Kc Kd 3s 4h"))
        assert value == HandValue(HandCategory.THREE_OF_A_KIND, Rank.ACE)

    def test_quads_report_trips(self):
        """Four of a kind falls back to Three of a Kind."""
        value = evaluate_hand(parse_cards("9c 9d 9h 9s 2c 4d Kh"))
        assert value == HandValue(HandCategory.THREE_OF_A_KIND, Rank.NINE)

    def test_two_trips_first_rank_wins(self):
        """The first rank in enumeration order is reported."""
        value = evaluate_hand(parse_cards("2c 2d 2h Ks Kd Kh 9c"))
        assert value == HandValue(HandCategory.THREE_OF_A_KIND, Rank.TWO)

    def test_two_pair_first_rank_wins(self):
        """Two pair reports the lower pair."""
        value = evaluate_hand(parse_cards("Ac Ad Kc Kd 3s 4h 9c"))
        assert value == HandValue(HandCategory.PAIR, Rank.KING)

    def test_flush_uses_first_suit(self):
        """With two flushes in the pool, the first suit in order is used."""
        value = evaluate_hand(parse_cards("2h 3h 4h 5h 7h 9s 10s Js Qs As"))
        assert value == HandValue(HandCategory.FLUSH, Rank.SEVEN)


class TestOrderIndependence:
    """Permuting the pool never changes the result."""

    @pytest.mark.parametrize("seed", range(20))
    def test_permutations(self, seed):
        """Shuffled copies of random pools evaluate the same."""
        rng = random.Random(seed)
        deck = Deck(rng=rng)
        deck.shuffle()
        pool = deck.deal(7)
        expected = evaluate_hand(pool)

        for _ in range(5):
            permuted = pool[:]
            rng.shuffle(permuted)
            assert evaluate_hand(permuted) == expected

    def test_wheel_permuted(self, wheel_pool):
        """Reversed wheel."""
        assert evaluate_hand(list(reversed(wheel_pool))) == evaluate_hand(wheel_pool)


class TestCompareHands:
    """Tests for comparing pools."""

    def test_category_beats_tiebreak(self):
        """A low pair beats ace high."""
        assert compare_hands(parse_cards("2c 2d 5h 7s 9c"), parse_cards("Ac Kd 5d 7h 9s")) == 1

    def test_tiebreak_decides(self):
        """Same category, higher tiebreak wins."""
        assert compare_hands(parse_cards("2c 2d 5h"), parse_cards("3c 3d 5d")) == -1

    def test_wheel_is_lowest_straight(self, wheel_pool):
        """Six-high straight beats the wheel."""
        assert compare_hands(wheel_pool, parse_cards("2h 3h 4h 5h 6c")) == -1

    def test_tie(self):
        """Equal values tie."""
        assert compare_hands(parse_cards("Ac 2d"), parse_cards("Ah 3d")) == 0


class TestDescriptions:
    """Tests for hand descriptions."""

    @pytest.mark.parametrize("value,expected", [
        (HandValue(HandCategory.FLUSH, Rank.ACE), "Flush, Ace high"),
        (HandValue(HandCategory.STRAIGHT, Rank.SIX), "Straight, Six high"),
        (HandValue(HandCategory.STRAIGHT, Rank.FIVE), "Straight, Five high (Wheel)"),
        (HandValue(HandCategory.THREE_OF_A_KIND, Rank.JACK), "Three of a Kind, Jacks"),
        (HandValue(HandCategory.PAIR, Rank.SIX), "Pair of Sixes"),
        (HandValue(HandCategory.HIGH_CARD, Rank.KING), "High Card, King"),
    ])
    def test_description(self, value, expected):
        """Readable names."""
        assert get_hand_description(value) == expected

    def test_to_dict(self):
        """JSON-ready view of a hand."""
        assert HandValue(HandCategory.PAIR, Rank.TEN).to_dict() == {
            "category": "PAIR",
            "name": "Pair",
            "tiebreak": "10",
            "description": "Pair of Tens",
        }
