# src/draw_odds/evaluation/types.py
"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class HandCategory(IntEnum):
    """Poker hand categories; a larger value is a stronger hand."""
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
    def label(self) -> str:
        """Display name of the category."""
        return CATEGORY_NAMES[self]

    def stronger(self) -> Iterator['HandCategory']:
        """Yield every strictly stronger category, weakest first."""
        for category in HandCategory:
            if category > self:
                yield category

    def __str__(self) -> str:
        return self.label


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass(frozen=True)
class HandRank:
    """
    Ranking data for a specific five card hand.

    Attributes:
        category: Hand category (pair, flush, etc.)
        primary: Main tie-break within the category. The high card for
                 high card hands, the matched rank for pairs, trips, quads
                 and full houses, the top of the run for straights and the
                 sum of all five ranks for flushes.
        secondary: Lower pair rank for two pair hands, 0 otherwise
    """
    category: HandCategory
    primary: int
    secondary: int = 0

    @property
    def label(self) -> str:
        return self.category.label

    def describe(self) -> str:
        """Human readable summary including tie-break values."""
        if self.category == HandCategory.TWO_PAIR:
            return f"{self.label} ({self.primary} over {self.secondary})"
        return f"{self.label} ({self.primary})"

    def __str__(self) -> str:
        return self.label
