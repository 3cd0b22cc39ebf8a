"""Tests for hand classification and scoring."""
import itertools
import logging
import sys

import pytest

from five_card_poker.core.card import Card, Rank, Suit
from five_card_poker.core.hand import Hand
from five_card_poker.evaluation.evaluator import (
    HandCategory, HandEvaluator, ScoreKey, classify, compare_hands, score_hand
)

logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def setup_logging():
    """Set up logging for all tests."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )


@pytest.fixture
def evaluator():
    """Create a hand evaluator instance."""
    return HandEvaluator()


@pytest.fixture
def sample_hands():
    """One hand of every category."""
    return {
        HandCategory.STRAIGHT_FLUSH: Hand.from_string("7S 8S 9S 6S 10S"),
        HandCategory.FOUR_OF_A_KIND: Hand.from_string("3S 3H 2S 3D 3C"),
        HandCategory.FULL_HOUSE: Hand.from_string("4S 5H 4C 5D 4H"),
        HandCategory.FLUSH: Hand.from_string("2S 4S 5S 6S 8S"),
        HandCategory.STRAIGHT: Hand.from_string("3S 4D 2S 6D 5C"),
        HandCategory.THREE_OF_A_KIND: Hand.from_string("4S 5H 4C 8S 4H"),
        HandCategory.TWO_PAIR: Hand.from_string("4S 5H 4C 8C 5C"),
        HandCategory.ONE_PAIR: Hand.from_string("2S 4H 6S 4D JH"),
        HandCategory.HIGH_CARD: Hand.from_string("2S 4C 7S 9H 10H"),
    }


def test_category_order():
    """Categories are ordered weakest to strongest."""
    assert list(HandCategory) == sorted(HandCategory)
    assert HandCategory.HIGH_CARD < HandCategory.ONE_PAIR < HandCategory.TWO_PAIR
    assert HandCategory.THREE_OF_A_KIND < HandCategory.STRAIGHT < HandCategory.FLUSH
    assert HandCategory.FULL_HOUSE < HandCategory.FOUR_OF_A_KIND < HandCategory.STRAIGHT_FLUSH


def test_display_names():
    assert [c.display_name for c in HandCategory] == [
        "high card", "one pair", "two pair", "three of a kind", "straight",
        "flush", "full house", "four of a kind", "straight flush",
    ]


def test_each_category_classified(evaluator, sample_hands):
    for category, hand in sample_hands.items():
        assert evaluator.classify(hand) == category


def test_categories_beat_each_other_in_order(sample_hands):
    ordered = [sample_hands[category] for category in HandCategory]
    for weaker, stronger in zip(ordered, ordered[1:]):
        assert compare_hands(stronger, weaker) == 1
        assert compare_hands(weaker, stronger) == -1


@pytest.mark.parametrize("hand_str,expected", [
    ("7S 8S 9S 6S 10S", ScoreKey(HandCategory.STRAIGHT_FLUSH, (Rank.TEN,))),
    ("AH 2H 3H 4H 5H", ScoreKey(HandCategory.STRAIGHT_FLUSH, (Rank.FIVE,))),
    ("3S 3H 4S 3D 3C", ScoreKey(HandCategory.FOUR_OF_A_KIND, (Rank.THREE, Rank.FOUR))),
    ("5H 5S 5D 9S 9D", ScoreKey(HandCategory.FULL_HOUSE, (Rank.FIVE, Rank.NINE))),
    ("4H 7H 8H 9H 6H", ScoreKey(HandCategory.FLUSH, (Rank.NINE, Rank.EIGHT, Rank.SEVEN, Rank.SIX, Rank.FOUR))),
    ("4S AH 3S 2D 5H", ScoreKey(HandCategory.STRAIGHT, (Rank.FIVE,))),
    ("4S AH AS 7C AD", ScoreKey(HandCategory.THREE_OF_A_KIND, (Rank.ACE, Rank.SEVEN, Rank.FOUR))),
    ("JD QH JS 8D QC", ScoreKey(HandCategory.TWO_PAIR, (Rank.QUEEN, Rank.JACK, Rank.EIGHT))),
    ("2S 4H 6S 4D JH", ScoreKey(HandCategory.ONE_PAIR, (Rank.FOUR, Rank.JACK, Rank.SIX, Rank.TWO))),
    ("3S 5H 6S 8D 7H", ScoreKey(HandCategory.HIGH_CARD, (Rank.EIGHT, Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.THREE))),
])
def test_score_keys(hand_str, expected):
    assert score_hand(Hand.from_string(hand_str)) == expected


def test_ace_low_straight_ranks_below_six_high():
    wheel = Hand.from_string("4S AH 3S 2D 5H")
    six_high = Hand.from_string("2H 3C 4D 5D 6H")
    assert compare_hands(six_high, wheel) == 1


def test_ace_low_straight_beats_three_of_a_kind():
    wheel = Hand.from_string("4S AH 3S 2D 5H")
    trip_aces = Hand.from_string("4S AH AS 8C AD")
    assert compare_hands(wheel, trip_aces) == 1


def test_ace_high_straight_is_best_straight():
    broadway = Hand.from_string("10S JH QD KC AS")
    king_high = Hand.from_string("9S 10H JD QC KS")
    assert classify(broadway) == HandCategory.STRAIGHT
    assert compare_hands(broadway, king_high) == 1


def test_wrap_around_is_not_straight():
    assert classify(Hand.from_string("QS KH AD 2C 3S")) == HandCategory.HIGH_CARD


def test_equal_scores_compare_as_tie():
    hand1 = Hand.from_string("3S 4S 5D 6H JH")
    hand2 = Hand.from_string("3H 4H 5C 6C JD")
    assert compare_hands(hand1, hand2) == 0
    assert score_hand(hand1) == score_hand(hand2)


def test_kicker_decides_equal_pairs():
    assert compare_hands(
        Hand.from_string("4S AH AS 8C AD"),
        Hand.from_string("4S AH AS 7C AD"),
    ) == 1
    assert compare_hands(
        Hand.from_string("JS QS JC 2D QD"),
        Hand.from_string("JD QH JS 8D QC"),
    ) == -1


def test_tie_break_compares_numerically():
    """Ten outranks nine even though '1' sorts before '9' as text."""
    assert compare_hands(
        Hand.from_string("10H 8C 6D 4S 2C"),
        Hand.from_string("9H 8D 6C 4H 2D"),
    ) == 1


def test_score_key_string():
    score = score_hand(Hand.from_string("JD QH JS 8D QC"))
    assert str(score) == "two pair [Q J 8]"


def test_every_hand_gets_exactly_one_category():
    """Classification is total over a sample of the deck."""
    deck = [Card(rank, suit) for rank in Rank for suit in Suit]
    counts = {category: 0 for category in HandCategory}
    # Every 5-card combination drawn from a 13-card slice covering all ranks and suits
    sample = deck[::4][:8] + deck[1::4][:5]
    for combo in itertools.combinations(sample, 5):
        category = classify(Hand(combo))
        assert category in HandCategory
        counts[category] += 1
    assert counts[HandCategory.HIGH_CARD] > 0
    assert counts[HandCategory.ONE_PAIR] > 0
