"""Five card poker hand classification and draw odds estimation."""

from draw_odds.core.card import Card, Rank, Suit
from draw_odds.core.deck import Deck
from draw_odds.core.hand import Hand, HandParseError, InvalidHandError
from draw_odds.evaluation.classifier import classify
from draw_odds.evaluation.comparator import is_improvement
from draw_odds.evaluation.estimator import ReplacementEstimator, ReplacementResult, estimate
from draw_odds.evaluation.types import HandCategory, HandRank

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "Hand",
    "HandParseError",
    "InvalidHandError",
    "HandCategory",
    "HandRank",
    "classify",
    "is_improvement",
    "ReplacementEstimator",
    "ReplacementResult",
    "estimate",
]
