"""Five card hand classification."""
from draw_odds.core.hand import Hand
from draw_odds.evaluation.category_tests import (
    high_card, is_flush, is_full_house, is_straight, is_two_pair, x_of_a_kind
)
from draw_odds.evaluation.types import HandCategory, HandRank


def classify(hand: Hand) -> HandRank:
    """
    Classify a hand into its strongest category.

    Categories are tried strongest first because a hand can satisfy several
    weaker tests at once (a full house also holds a pair and trips).

    Args:
        hand: Any legal hand, in any order

    Returns:
        HandRank with the category and its tie-break values
    """
    cards = hand.canonical().cards

    straight = is_straight(cards)
    flush = is_flush(cards)

    if straight is not None and flush is not None:
        return HandRank(HandCategory.STRAIGHT_FLUSH, straight)

    quads = x_of_a_kind(cards, 4)
    if quads is not None:
        return HandRank(HandCategory.FOUR_OF_A_KIND, quads)

    full_house = is_full_house(cards)
    if full_house is not None:
        return HandRank(HandCategory.FULL_HOUSE, full_house)

    if flush is not None:
        return HandRank(HandCategory.FLUSH, flush)

    if straight is not None:
        return HandRank(HandCategory.STRAIGHT, straight)

    trips = x_of_a_kind(cards, 3)
    if trips is not None:
        return HandRank(HandCategory.THREE_OF_A_KIND, trips)

    high_pair = is_two_pair(cards)
    if high_pair is not None:
        # Scanning low to high, the pair test finds the lower pair first
        return HandRank(HandCategory.TWO_PAIR, high_pair, x_of_a_kind(cards, 2))

    pair = x_of_a_kind(cards, 2)
    if pair is not None:
        return HandRank(HandCategory.ONE_PAIR, pair)

    return HandRank(HandCategory.HIGH_CARD, high_card(cards))
