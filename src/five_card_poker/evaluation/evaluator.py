"""Main poker hand evaluation interface."""
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple
import logging

from five_card_poker.core.card import Rank
from five_card_poker.core.hand import Hand
from five_card_poker.evaluation.features import (
    groups_by_size, is_flush, straight_high_rank
)

logger = logging.getLogger(__name__)


class HandCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9

    @property
    def display_name(self) -> str:
        """Lower-case name used in showdown results, e.g. 'full house'."""
        return self.name.lower().replace('_', ' ')


@dataclass(frozen=True, order=True)
class ScoreKey:
    """
    Comparable score for a hand.

    Category dominates; within a category the tie-break ranks are compared
    element by element, most significant first.

    Attributes:
        category: Hand category
        tie_break: Category-specific ranks used to order equal categories
    """
    category: HandCategory
    tie_break: Tuple[Rank, ...]

    def __str__(self) -> str:
        ranks = ' '.join(rank.symbol for rank in self.tie_break)
        return f"{self.category.display_name} [{ranks}]"


class HandEvaluator:
    """
    Classifies five-card hands and compares them.

    Classification reads the rank groups, suit uniformity and straight top
    once per hand, then checks categories strongest first.
    """

    def evaluate(self, hand: Hand) -> ScoreKey:
        """
        Score a hand.

        Args:
            hand: Hand to score

        Returns:
            ScoreKey with the hand's category and tie-break ranks
        """
        groups = groups_by_size(hand)
        counts = [count for _, count in groups]
        grouped_ranks = tuple(rank for rank, _ in groups)
        flush = is_flush(hand)
        straight_top = straight_high_rank(hand)

        if straight_top is not None and flush:
            score = ScoreKey(HandCategory.STRAIGHT_FLUSH, (straight_top,))
        elif counts[0] == 4:
            score = ScoreKey(HandCategory.FOUR_OF_A_KIND, grouped_ranks)
        elif counts == [3, 2]:
            score = ScoreKey(HandCategory.FULL_HOUSE, grouped_ranks)
        elif flush:
            score = ScoreKey(HandCategory.FLUSH, grouped_ranks)
        elif straight_top is not None:
            score = ScoreKey(HandCategory.STRAIGHT, (straight_top,))
        elif counts[0] == 3:
            score = ScoreKey(HandCategory.THREE_OF_A_KIND, grouped_ranks)
        elif counts[:2] == [2, 2]:
            score = ScoreKey(HandCategory.TWO_PAIR, grouped_ranks)
        elif counts[0] == 2:
            score = ScoreKey(HandCategory.ONE_PAIR, grouped_ranks)
        else:
            score = ScoreKey(HandCategory.HIGH_CARD, grouped_ranks)

        logger.debug(f"Scored {hand}: {score}")
        return score

    def classify(self, hand: Hand) -> HandCategory:
        """Get the category of a hand."""
        return self.evaluate(hand).category

    def compare_hands(self, hand1: Hand, hand2: Hand) -> int:
        """
        Compare two poker hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        score1 = self.evaluate(hand1)
        score2 = self.evaluate(hand2)
        if score1 > score2:
            return 1
        if score1 < score2:
            return -1
        return 0


# Global instance
evaluator = HandEvaluator()


def score_hand(hand: Hand) -> ScoreKey:
    """Score a hand with the shared evaluator."""
    return evaluator.evaluate(hand)


def classify(hand: Hand) -> HandCategory:
    """Classify a hand with the shared evaluator."""
    return evaluator.classify(hand)


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands with the shared evaluator."""
    return evaluator.compare_hands(hand1, hand2)
