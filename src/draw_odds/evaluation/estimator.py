"""Monte Carlo estimate of the chance that replacing one card improves a hand."""
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from draw_odds.core.card import Card
from draw_odds.core.deck import Deck
from draw_odds.core.hand import Hand
from draw_odds.evaluation.classifier import classify
from draw_odds.evaluation.comparator import is_improvement
from draw_odds.evaluation.types import HandRank

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 750_000


@dataclass(frozen=True)
class ReplacementResult:
    """
    Outcome of one estimation run.

    Attributes:
        hand: The hand that was estimated, in input order
        reference: Ranking of the untouched hand
        sample_size: Trials run for each card
        improvements: Improving trials per card, in input order
    """
    hand: Hand
    reference: HandRank
    sample_size: int
    improvements: Tuple[int, ...]

    @property
    def probabilities(self) -> Tuple[float, ...]:
        """Percent chance (0-100) of improving by replacing each card, in input order."""
        return tuple(100 * count / self.sample_size for count in self.improvements)

    def probability_for(self, card: Card) -> float:
        """
        Percent chance of improving by replacing a specific card.

        Raises:
            ValueError: If card not in hand
        """
        for held, probability in zip(self.hand, self.probabilities):
            if held == card:
                return probability
        raise ValueError(f"Card {card} not in hand")


def count_improvements(
    reference: HandRank,
    hand: Hand,
    discard: Card,
    sample_size: int,
    seed: int
) -> int:
    """
    Replace one card sample_size times and count how often the hand improves.

    Replacements are drawn uniformly from the 47 cards that are neither
    still in the hand nor the discarded card itself.

    Args:
        reference: Ranking of the untouched hand
        hand: The untouched hand
        discard: Card being replaced
        sample_size: Number of trials
        seed: Seed for this position's random stream

    Returns:
        Number of trials where the new hand beat the reference
    """
    deck = Deck(random.Random(seed))
    excluded = frozenset(hand.cards)
    improvements = 0
    for _ in range(sample_size):
        drawn = deck.draw_excluding(excluded)
        if is_improvement(reference, hand.replace(discard, drawn)):
            improvements += 1
    return improvements


class ReplacementEstimator:
    """
    Estimates per-card improvement probabilities by random sampling.

    The sample size is fixed; there is no convergence check or early stop.

    Attributes:
        sample_size: Trials per card position
        workers: Worker processes used to run positions in parallel
        rng: Source of the per-position seeds
    """

    def __init__(
        self,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        seed: Optional[int] = None,
        workers: int = 1,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize estimator.

        Args:
            sample_size: Trials per card position
            seed: Seed for reproducible runs; ignored if rng is given
            workers: Number of processes; 1 runs everything in this process
            rng: Random source to derive per-position seeds from

        Raises:
            ValueError: If sample_size or workers is less than 1
        """
        if sample_size < 1:
            raise ValueError(f"sample_size must be at least 1, got {sample_size}")
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.sample_size = sample_size
        self.workers = workers
        self.rng = rng or random.Random(seed)

    def estimate(self, hand: Hand) -> ReplacementResult:
        """
        Estimate the chance of improving the hand by replacing each card.

        Args:
            hand: Hand to estimate, in input order

        Returns:
            ReplacementResult aligned with the input order of the hand
        """
        reference = classify(hand)
        # One stream per position; serial and parallel runs draw the same cards
        seeds = [self.rng.getrandbits(64) for _ in hand]
        logger.info(
            f"Estimating {hand} ({reference.describe()}) with "
            f"{self.sample_size} samples per card"
        )
        started = time.perf_counter()

        counts = self._run_positions(reference, hand, seeds)

        for card in hand:
            logger.debug(f"Replacing {card}: {counts[card]}/{self.sample_size} improved")
        logger.info(f"Estimated {hand} in {time.perf_counter() - started:.2f}s")

        return ReplacementResult(
            hand=hand,
            reference=reference,
            sample_size=self.sample_size,
            improvements=tuple(counts[card] for card in hand),
        )

    def _run_positions(
        self,
        reference: HandRank,
        hand: Hand,
        seeds: List[int]
    ) -> Dict[Card, int]:
        """Run every position and key the counts by the discarded card."""
        jobs = [(reference, hand, card, self.sample_size, seed) for card, seed in zip(hand, seeds)]

        if self.workers == 1:
            counts = [count_improvements(*job) for job in jobs]
        else:
            with ProcessPoolExecutor(max_workers=self.workers) as ex:
                counts = list(ex.map(count_improvements, *zip(*jobs)))

        return {card: count for card, count in zip(hand, counts)}


def estimate(
    hand: Hand,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    seed: Optional[int] = None,
    workers: int = 1
) -> ReplacementResult:
    """Estimate with a one-off ReplacementEstimator."""
    return ReplacementEstimator(sample_size=sample_size, seed=seed, workers=workers).estimate(hand)
