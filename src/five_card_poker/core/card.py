"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum

from five_card_poker.errors import ParseError


class Suit(Enum):
    """Card suits."""
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """Card ranks, valued 2 (deuce) through 14 (ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Single character used in card tokens ('T' for ten)."""
        return _RANK_SYMBOLS[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        if self is Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """
        Look up a rank by its token symbol.

        Accepts '10' as well as 'T' for ten.

        Raises:
            ParseError: If the symbol is not a known rank
        """
        try:
            return _SYMBOL_RANKS[symbol]
        except KeyError:
            raise ParseError(f"Invalid rank symbol: {symbol!r}") from None

    def __str__(self) -> str:
        return self.symbol


_RANK_SYMBOLS = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

_SYMBOL_RANKS = {symbol: rank for rank, symbol in _RANK_SYMBOLS.items()}
_SYMBOL_RANKS['10'] = Rank.TEN


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards order by rank alone; suits never break ties. Equality and
    hashing use both rank and suit.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{self.rank.symbol}{self.suit.value}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Token in format 'AS' for Ace of spades. Ten may be
                      written 'TS' or '10S'. Symbols are case-sensitive.

        Returns:
            Card instance

        Raises:
            ParseError: If the token length, rank or suit is invalid
        """
        if not isinstance(card_str, str) or len(card_str) not in (2, 3):
            raise ParseError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]

        try:
            rank = Rank.from_symbol(rank_str)
        except ParseError:
            raise ParseError(f"Invalid rank in: {card_str!r}") from None

        suit = next((s for s in Suit if s.value == suit_str), None)
        if suit is None:
            raise ParseError(f"Invalid suit in: {card_str!r}")

        return cls(rank=rank, suit=suit)


def parse_card(token: str) -> Card:
    """Parse a single card token such as 'JH' or '10S'."""
    return Card.from_string(token)
