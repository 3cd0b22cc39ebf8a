"""Five-card poker hand evaluation package."""

from five_card_poker.core.card import Card, Rank, Suit, parse_card
from five_card_poker.core.hand import Hand
from five_card_poker.errors import EmptyInputError, InvalidHandError, ParseError, PokerError
from five_card_poker.evaluation.evaluator import HandCategory, HandEvaluator, ScoreKey, classify, score_hand
from five_card_poker.evaluation.hand_description import category_name, format_result
from five_card_poker.game.game_result import ShowdownResult, Tie, Winner
from five_card_poker.game.showdown_manager import ShowdownManager, best_hand

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_card",
    "Hand",
    "PokerError",
    "ParseError",
    "InvalidHandError",
    "EmptyInputError",
    "HandCategory",
    "HandEvaluator",
    "ScoreKey",
    "classify",
    "score_hand",
    "category_name",
    "format_result",
    "ShowdownResult",
    "Winner",
    "Tie",
    "ShowdownManager",
    "best_hand",
]
