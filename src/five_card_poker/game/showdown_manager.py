"""Picks the winning hand(s) at showdown."""
import logging
from typing import List, Sequence, Tuple, Union

from five_card_poker.core.card import Card
from five_card_poker.core.hand import Hand
from five_card_poker.errors import EmptyInputError
from five_card_poker.evaluation.evaluator import HandEvaluator, ScoreKey, evaluator
from five_card_poker.game.game_result import ShowdownResult, Tie, Winner

logger = logging.getLogger(__name__)

HandInput = Union[Hand, Sequence[Union[Card, str]]]


class ShowdownManager:
    """Scores every hand in a showdown and reports the winner or the tie."""

    def __init__(self, hand_evaluator: HandEvaluator = evaluator):
        self.evaluator = hand_evaluator

    def rank_hands(self, hands: Sequence[HandInput]) -> List[Tuple[Hand, ScoreKey]]:
        """
        Score every hand, best first.

        Hands with equal scores keep their input order.

        Raises:
            ParseError: If a hand is given as tokens and one is malformed
            InvalidHandError: If a hand is not five distinct cards
        """
        scored = []
        for hand_input in hands:
            hand = Hand.coerce(hand_input)
            scored.append((hand, self.evaluator.evaluate(hand)))
        return sorted(scored, key=lambda item: item[1], reverse=True)

    def best_hand(self, hands: Sequence[HandInput]) -> ShowdownResult:
        """
        Find the best hand among those given.

        Args:
            hands: Hands to compare; each may be a Hand, a sequence of Cards
                   or a sequence of card tokens

        Returns:
            Winner with the category name if one hand is best, otherwise a
            Tie holding every hand that shares the best score

        Raises:
            EmptyInputError: If no hands are given
        """
        hands = list(hands)
        if not hands:
            raise EmptyInputError("best_hand requires at least one hand")

        ranked = self.rank_hands(hands)
        best_score = ranked[0][1]
        best = tuple(hand for hand, score in ranked if score == best_score)

        if len(best) > 1:
            logger.debug(f"Tie between {len(best)} hands at {best_score}")
            return Tie(hands=best, score=best_score)

        logger.debug(f"Winner {best[0]} with {best_score}")
        return Winner(
            category_name=best_score.category.display_name,
            hand=best[0],
            score=best_score,
        )


# Global instance
showdown_manager = ShowdownManager()


def best_hand(hands: Sequence[HandInput]) -> ShowdownResult:
    """Find the best hand with the shared showdown manager."""
    return showdown_manager.best_hand(hands)


def rank_hands(hands: Sequence[HandInput]) -> List[Tuple[Hand, ScoreKey]]:
    """Score and order hands with the shared showdown manager."""
    return showdown_manager.rank_hands(hands)
