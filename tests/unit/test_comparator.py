"""Tests for comparing a hand against a fixed reference ranking."""
import itertools

import pytest
from draw_odds.core.hand import Hand
from draw_odds.evaluation import comparator
from draw_odds.evaluation.classifier import classify
from draw_odds.evaluation.comparator import is_improvement
from draw_odds.evaluation.types import HandCategory, HandRank


def improves(reference_str, candidate_str):
    """Whether candidate_str beats the ranking of reference_str."""
    reference = classify(Hand.from_string(reference_str))
    return is_improvement(reference, Hand.from_string(candidate_str))


@pytest.mark.parametrize("hand_str", [
    "KH JD 8C 4S 2H",
    "0H 0D 8C 4S 2H",
    "JH JD 4C 4S AH",
    "7H 7D 7C KS 2H",
    "9H 8C 7D 6S 5H",
    "2C 3D 4H 5S AC",
    "AC JC 9C 6C 3C",
    "KH KD KC QH QD",
    "2C 2D 5H 2H 2S",
    "9S 8S 7S 6S 5S",
])
def test_hand_never_improves_on_itself(hand_str):
    """is_improvement is irreflexive, in any card order."""
    cards = Hand.from_string(hand_str).cards
    reference = classify(Hand(cards))
    for order in itertools.permutations(cards):
        assert not is_improvement(reference, Hand(order))


@pytest.mark.parametrize("reference_str", [
    "KH JD 8C 4S 2H",
    "AH AD 8C 4S 2H",
    "AH AD KC KS 2H",
    "AH AD AC KS 2H",
    "0H JC QD KS AH",
    "AC KC QC JC 9C",
    "AH AD AC KS KH",
    "AH AD AC AS KH",
])
def test_straight_flush_beats_everything_weaker(reference_str):
    """A straight flush improves on any weaker reference, even the lowest one."""
    assert improves(reference_str, "AD 2D 3D 4D 5D")


@pytest.mark.parametrize("reference_str,candidate_str,expected", [
    # High card: compare the top card
    ("KH JD 8C 4S 2H", "AH JD 8C 4S 2H", True),
    ("KH JD 8C 4S 2H", "QH JD 8C 4S 2H", False),
    ("KH JD 8C 4S 2H", "2C 2D 8C 4S 3H", True),
    # One pair
    ("5C 5D 2H 8S JC", "9C 9D 2H 8S JC", True),
    ("5C 5D 2H 8S JC", "3C 3D 2H 8S JC", False),
    ("5C 5D 2H 8S JC", "5C 5D 2H 8S AC", False),
    ("5C 5D 2H 8S JC", "3C 3D 2H 2S JC", True),
    # Two pair: high pair first, then low pair
    ("9C 9D 3H 3S KC", "9C 9D 4H 4S KC", True),
    ("9C 9D 3H 3S KC", "9C 9D 2H 2S KC", False),
    ("9C 9D 3H 3S KC", "9C 9D 3H 3S AC", False),
    ("9C 9D 3H 3S KC", "8C 8D 7H 7S KC", False),
    ("9C 9D 3H 3S KC", "0C 0D 2H 2S KC", True),
    ("9C 9D 3H 3S KC", "AC AD 2H 5S KC", False),
    # Three of a kind
    ("7C 7D 7H 2S KC", "8C 8D 8H 2S KC", True),
    ("7C 7D 7H 2S KC", "6C 6D 6H 2S KC", False),
    ("7C 7D 7H 2S KC", "3C 4D 5H 6S 7C", True),
    # Straight
    ("5C 6D 7H 8S 9C", "6C 7D 8H 9S 0C", True),
    ("5C 6D 7H 8S 9C", "4C 5D 6H 7S 8C", False),
    ("5C 6D 7H 8S 9C", "2H 5H 9H JH AH", True),
    ("2C 3D 4H 5S AC", "2C 3D 4H 5S 6C", True),
    # Flush: compared on the rank sum
    ("2H 5H 9H JH KH", "3H 5H 9H JH KH", True),
    ("2H 5H 9H JH KH", "2H 4H 9H JH KH", False),
    ("KD QD JD 9D 7D", "AC 2C 3C 4C 6C", False),
    ("2H 5H 9H JH KH", "2C 2D 2H JH JS", True),
    # Full house
    ("9C 9D 9H 2S 2C", "0C 0D 0H 2S 2C", True),
    ("9C 9D 9H 2S 2C", "8C 8D 8H 2S 2C", False),
    ("9C 9D 9H 2S 2C", "2H 2D 2S 2C 9C", True),
    # Four of a kind
    ("5C 5D 5H 5S 2C", "6C 6D 6H 6S 2C", True),
    ("5C 5D 5H 5S 2C", "4C 4D 4H 4S 2C", False),
    ("5C 5D 5H 5S 2C", "4C 5C 6C 7C 8C", True),
    # Straight flush
    ("5C 6C 7C 8C 9C", "6D 7D 8D 9D 0D", True),
    ("5C 6C 7C 8C 9C", "4D 5D 6D 7D 8D", False),
    ("5C 6C 7C 8C 9C", "AD AH AS AC KD", False),
    # Weaker categories never improve
    ("AC JC 9C 6C 3C", "AH AD KC KS QH", False),
    ("KH KD KC QH QD", "AC KC QC JC 9C", False),
])
def test_is_improvement(reference_str, candidate_str, expected):
    """Candidates win at the same category on tie-break, or by reaching a stronger one."""
    assert improves(reference_str, candidate_str) is expected


def test_candidate_order_does_not_matter():
    """Unsorted candidates are compared in canonical order."""
    reference = classify(Hand.from_string("5C 6D 7H 8S 9C"))
    assert is_improvement(reference, Hand.from_string("0C 8H 6D 9S 7C"))


@pytest.mark.parametrize("category", list(HandCategory))
def test_weaker_categories_are_never_tested(monkeypatch, category):
    """Only the reference's category and stronger ones are checked."""
    called = []
    for tested, test in list(comparator.CATEGORY_TESTS.items()):
        def spy(cards, tested=tested, test=test):
            called.append(tested)
            return test(cards)
        monkeypatch.setitem(comparator.CATEGORY_TESTS, tested, spy)

    # Seven high, no pair, no draw: no category matches or beats anything
    reference = HandRank(category, 14, 14)
    is_improvement(reference, Hand.from_string("2C 3D 5H 6S 7C"))

    assert called == [c for c in HandCategory if c >= category]
    assert len(called) == 10 - category
