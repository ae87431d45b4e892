"""Check whether a hand beats a fixed reference ranking."""
from typing import Callable, Dict, Optional, Sequence

from draw_odds.core.card import Card
from draw_odds.core.hand import Hand
from draw_odds.evaluation.category_tests import (
    high_card, is_flush, is_full_house, is_straight, is_straight_flush,
    is_two_pair, x_of_a_kind
)
from draw_odds.evaluation.types import HandCategory, HandRank

CategoryTest = Callable[[Sequence[Card]], Optional[int]]

# One test per category, each returning the tie-break value or None
CATEGORY_TESTS: Dict[HandCategory, CategoryTest] = {
    HandCategory.HIGH_CARD: high_card,
    HandCategory.ONE_PAIR: lambda cards: x_of_a_kind(cards, 2),
    HandCategory.TWO_PAIR: is_two_pair,
    HandCategory.THREE_OF_A_KIND: lambda cards: x_of_a_kind(cards, 3),
    HandCategory.STRAIGHT: is_straight,
    HandCategory.FLUSH: is_flush,
    HandCategory.FULL_HOUSE: is_full_house,
    HandCategory.FOUR_OF_A_KIND: lambda cards: x_of_a_kind(cards, 4),
    HandCategory.STRAIGHT_FLUSH: is_straight_flush,
}


def is_improvement(reference: HandRank, candidate: Hand) -> bool:
    """
    Decide whether candidate is strictly better than reference.

    Only the reference's own category and the categories above it are
    tested, weakest first. A weaker category can never outrank the
    reference, so those tests are skipped entirely; a comparison runs at
    most 10 - reference.category category tests.

    At the reference's own category the candidate has to win on tie-break
    (two pair falls back to the lower pair when the high pairs match). Any
    stronger category the candidate reaches is an improvement outright.

    Args:
        reference: Fixed ranking to beat
        candidate: Hand to test, in any order

    Returns:
        True if candidate is better than reference
    """
    cards = candidate.cards if candidate.is_canonical else candidate.canonical().cards

    if _wins_tie_break(reference, cards):
        return True

    for category in reference.category.stronger():
        if CATEGORY_TESTS[category](cards) is not None:
            return True
    return False


def _wins_tie_break(reference: HandRank, cards: Sequence[Card]) -> bool:
    """Candidate matches the reference category with a higher tie-break."""
    value = CATEGORY_TESTS[reference.category](cards)
    if value is None:
        return False
    if value > reference.primary:
        return True
    if reference.category == HandCategory.TWO_PAIR and value == reference.primary:
        return x_of_a_kind(cards, 2) > reference.secondary
    return False
