"""Human-readable names and descriptions for hands and showdown results."""
from typing import Dict, List

from five_card_poker.core.card import Rank
from five_card_poker.core.hand import Hand
from five_card_poker.evaluation.evaluator import HandCategory, HandEvaluator, ScoreKey, evaluator
from five_card_poker.game.game_result import TIE_LABEL, ShowdownResult, Tie

CATEGORY_NAMES: Dict[HandCategory, str] = {
    category: category.display_name for category in HandCategory
}


def category_name(category: HandCategory) -> str:
    """Display string for a category, e.g. 'three of a kind'."""
    return CATEGORY_NAMES[category]


def format_result(result: ShowdownResult) -> str:
    """
    Render a showdown result on one line.

    Examples:
        'one pair: 2S 4H 6S 4D JH'
        'Tie: 3S 4S 5D 6H JH | 3H 4H 5C 6C JD'
    """
    if isinstance(result, Tie):
        hands = ' | '.join(str(hand) for hand in result.hands)
        return f"{TIE_LABEL}: {hands}"
    return f"{result.category_name}: {result.hand}"


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self, hand_evaluator: HandEvaluator = evaluator):
        self.evaluator = hand_evaluator

    def describe_hand(self, hand: Hand) -> str:
        """Get a basic description of the hand."""
        return category_name(self.evaluator.classify(hand))

    def describe_hand_detailed(self, hand: Hand) -> str:
        """Get a detailed description of the hand."""
        score = self.evaluator.evaluate(hand)
        category = score.category

        if category == HandCategory.STRAIGHT_FLUSH:
            return self._describe_straight_flush(score)
        elif category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {score.tie_break[0].plural_name}"
        elif category == HandCategory.FULL_HOUSE:
            trips, pair = score.tie_break
            return f"Full House, {trips.plural_name} over {pair.plural_name}"
        elif category == HandCategory.FLUSH:
            return f"{score.tie_break[0].full_name}-high Flush"
        elif category == HandCategory.STRAIGHT:
            return f"{score.tie_break[0].full_name}-high Straight"
        elif category == HandCategory.THREE_OF_A_KIND:
            return f"Three {score.tie_break[0].plural_name}"
        elif category == HandCategory.TWO_PAIR:
            high_pair, low_pair = score.tie_break[:2]
            return f"Two Pair, {high_pair.plural_name} and {low_pair.plural_name}"
        elif category == HandCategory.ONE_PAIR:
            return f"Pair of {score.tie_break[0].plural_name}"
        return f"{score.tie_break[0].full_name} High"

    def describe_ranks(self, hand: Hand) -> List[str]:
        """Rank symbols of the hand's tie-break key, most significant first."""
        return [rank.symbol for rank in self.evaluator.evaluate(hand).tie_break]

    def _describe_straight_flush(self, score: ScoreKey) -> str:
        top = score.tie_break[0]
        if top == Rank.ACE:
            return "Royal Flush"
        return f"{top.full_name}-high Straight Flush"


describer = HandDescriber()


def describe_hand(hand: Hand) -> str:
    return describer.describe_hand(hand)


def describe_hand_detailed(hand: Hand) -> str:
    return describer.describe_hand_detailed(hand)
