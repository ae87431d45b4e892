"""Deck implementation."""
import random
from typing import Collection, List, Optional

from .card import Card, Rank, Suit

# Cards laid out by [rank index][suit index] so a draw is two uniform picks
_GRID: List[List[Card]] = [[Card(rank, suit) for suit in Suit] for rank in Rank]

RANK_COUNT = len(Rank)
SUIT_COUNT = len(Suit)
DECK_SIZE = RANK_COUNT * SUIT_COUNT


class Deck:
    """
    A standard 52 card deck used as the source of replacement cards.

    Cards are never removed: each draw picks a uniformly random rank and a
    uniformly random suit, and draws matching an excluded card are thrown
    back and redrawn.

    Attributes:
        rng: Random number generator used for draws
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            rng: Random source; a fresh unseeded generator if not given
        """
        self.rng = rng or random.Random()

    def draw(self) -> Card:
        """Draw a uniformly random card from the full deck."""
        return _GRID[self.rng.randrange(RANK_COUNT)][self.rng.randrange(SUIT_COUNT)]

    def draw_excluding(self, excluded: Collection[Card]) -> Card:
        """
        Draw a uniformly random card that is not in excluded.

        Args:
            excluded: Cards that may not be drawn; must leave at least one
                      card available

        Returns:
            The drawn card

        Raises:
            ValueError: If every card in the deck is excluded
        """
        if len(excluded) >= DECK_SIZE and len(set(excluded)) >= DECK_SIZE:
            raise ValueError("Cannot draw: every card in the deck is excluded")
        while True:
            card = self.draw()
            if card not in excluded:
                return card

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck, ordered by rank then suit."""
        return [card for row in _GRID for card in row]

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return DECK_SIZE
