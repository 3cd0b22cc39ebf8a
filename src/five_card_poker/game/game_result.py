"""Showdown result types."""
from dataclasses import dataclass
from typing import Tuple, Union

from five_card_poker.core.hand import Hand
from five_card_poker.evaluation.evaluator import ScoreKey

# Shown in place of a category name when the best score is shared
TIE_LABEL = "Tie"


@dataclass(frozen=True)
class Winner:
    """A single hand holds the best score."""

    category_name: str  # e.g. "full house"
    hand: Hand
    score: ScoreKey

    @property
    def hands(self) -> Tuple[Hand, ...]:
        return (self.hand,)

    def as_tuple(self) -> Tuple[str, Hand]:
        return (self.category_name, self.hand)

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "result": "winner",
            "category": self.category_name,
            "hands": [[str(card) for card in self.hand]],
            "tie_break": [rank.symbol for rank in self.score.tie_break],
        }


@dataclass(frozen=True)
class Tie:
    """
    Two or more hands share the best score.

    The tag is always "Tie"; the shared category is kept on ``score`` for
    callers that want it. Hands keep their input order.
    """

    hands: Tuple[Hand, ...]
    score: ScoreKey
    category_name: str = TIE_LABEL

    def as_tuple(self) -> Tuple[str, list]:
        return (self.category_name, list(self.hands))

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "result": "tie",
            "category": self.category_name,
            "shared_category": self.score.category.display_name,
            "hands": [[str(card) for card in hand] for hand in self.hands],
            "tie_break": [rank.symbol for rank in self.score.tie_break],
        }


ShowdownResult = Union[Winner, Tie]
