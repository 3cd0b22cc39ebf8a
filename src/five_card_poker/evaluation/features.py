"""Structural features of a five-card hand.

All functions here are pure and read only the hand they are given.
"""
from collections import Counter
from typing import Dict, List, Optional, Tuple

from five_card_poker.core.card import Card, Rank, Suit
from five_card_poker.core.hand import Hand

# Ace plays low in the wheel (A-2-3-4-5)
WHEEL_RANKS = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)


def rank_groups(hand: Hand) -> Dict[Rank, int]:
    """Map each rank in the hand to the number of cards holding it."""
    return dict(Counter(card.rank for card in hand.cards))


def suit_groups(hand: Hand) -> Dict[Suit, List[Card]]:
    """Partition the hand's cards by suit."""
    groups: Dict[Suit, List[Card]] = {}
    for card in hand.cards:
        groups.setdefault(card.suit, []).append(card)
    return groups


def groups_by_size(hand: Hand) -> List[Tuple[Rank, int]]:
    """
    Rank groups ordered by size, then rank, both descending.

    Example: 5H 5S 5D 9S 9D -> [(FIVE, 3), (NINE, 2)]
    """
    return sorted(rank_groups(hand).items(), key=lambda item: (item[1], item[0]), reverse=True)


def is_flush(hand: Hand) -> bool:
    """True when all five cards share one suit."""
    return len(suit_groups(hand)) == 1


def is_sequential(hand: Hand) -> bool:
    """
    True when the sorted ranks form a run of five.

    The wheel (A-2-3-4-5) counts as sequential.
    """
    ranks = hand.ranks()
    if ranks == WHEEL_RANKS:
        return True
    return all(high - low == 1 for low, high in zip(ranks, ranks[1:]))


def straight_high_rank(hand: Hand) -> Optional[Rank]:
    """
    Top rank of a straight, or None if the hand is not sequential.

    The wheel is topped by the five, not the ace.
    """
    if not is_sequential(hand):
        return None
    ranks = hand.ranks()
    if ranks == WHEEL_RANKS:
        return Rank.FIVE
    return ranks[-1]
