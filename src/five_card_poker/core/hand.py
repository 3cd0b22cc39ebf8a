"""Five-card hand implementation."""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from five_card_poker.core.card import Card, Rank
from five_card_poker.errors import InvalidHandError, ParseError

logger = logging.getLogger(__name__)

HAND_SIZE = 5


@dataclass(frozen=True)
class Hand:
    """
    An immutable poker hand of exactly five distinct cards.

    Cards keep the order they were supplied in; evaluation always works
    on a sorted copy.

    Attributes:
        cards: The five cards in input order
    """
    cards: Tuple[Card, ...]

    def __init__(self, cards: Iterable[Card]):
        object.__setattr__(self, 'cards', tuple(cards))
        self._validate()

    def _validate(self) -> None:
        """Ensure the hand has five distinct cards."""
        for card in self.cards:
            if not isinstance(card, Card):
                raise InvalidHandError(f"Not a card: {card!r}")
        if len(self.cards) != HAND_SIZE:
            raise InvalidHandError(
                f"A hand requires exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )
        if len(set(self.cards)) != HAND_SIZE:
            raise InvalidHandError(f"Hand contains duplicate cards: {self}")

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> 'Hand':
        """
        Create a Hand from card tokens.

        Args:
            tokens: Five card tokens, e.g. ['2S', '4C', '7S', '9H', '10H']

        Returns:
            Hand instance with the parsed cards

        Raises:
            ParseError: If any token is malformed
            InvalidHandError: If the cards do not form a valid hand
        """
        if isinstance(tokens, str):
            raise InvalidHandError(
                f"Expected a sequence of card tokens, got string {tokens!r}"
            )

        cards = []
        for i, token in enumerate(tokens):
            try:
                cards.append(Card.from_string(token))
            except ParseError as e:
                raise ParseError(f"Invalid card at position {i + 1}: {e}") from e

        hand = cls(cards)
        logger.debug(f"Created hand from tokens {list(tokens)}: {hand}")
        return hand

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """Create a Hand from whitespace-separated tokens, e.g. '3S 4S 5D 6H JH'."""
        return cls.from_tokens(hand_str.split())

    @classmethod
    def coerce(cls, value: Union['Hand', Sequence[Union[Card, str]]]) -> 'Hand':
        """Accept a Hand, a whitespace-separated string, or a sequence of Cards and/or tokens."""
        if isinstance(value, Hand):
            return value
        if isinstance(value, str):
            return cls.from_string(value)

        cards = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                try:
                    item = Card.from_string(item)
                except ParseError as e:
                    raise ParseError(f"Invalid card at position {i + 1}: {e}") from e
            cards.append(item)
        return cls(cards)

    def sorted_cards(self) -> Tuple[Card, ...]:
        """Cards sorted ascending by rank."""
        return tuple(sorted(self.cards))

    def ranks(self) -> Tuple[Rank, ...]:
        """Ranks sorted ascending."""
        return tuple(card.rank for card in self.sorted_cards())

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self.cards)
