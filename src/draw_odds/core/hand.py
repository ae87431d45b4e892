"""Five card hand implementation."""

import logging
import re
from typing import Iterator, Sequence

from .card import Card, RANK_SYMBOLS, SUIT_SYMBOLS

logger = logging.getLogger(__name__)

HAND_SIZE = 5

# Five "<rank><suit>" tokens split by single spaces, one trailing space allowed
_CARD_PATTERN = f"[{RANK_SYMBOLS}][{SUIT_SYMBOLS}]"
_HAND_PATTERN = re.compile(f"(?:{_CARD_PATTERN} ){{{HAND_SIZE - 1}}}{_CARD_PATTERN} ?")


def _by_rank(card: Card) -> int:
    return card.rank


class InvalidHandError(ValueError):
    """Raised when cards cannot form a legal five card hand."""


class HandParseError(ValueError):
    """Raised when a line of text does not describe a legal hand."""


class Hand:
    """
    An immutable poker hand of exactly five distinct cards.

    Cards keep the order they were given in. Evaluation code works on the
    canonical order (ascending rank, stable), available via canonical().

    Attributes:
        cards: The five cards in their original order
    """

    __slots__ = ('cards',)

    def __init__(self, cards: Sequence[Card]):
        """
        Create a hand.

        Args:
            cards: Exactly five cards, no two with the same rank and suit

        Raises:
            InvalidHandError: If the card count is wrong or a card repeats
        """
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandError(
                f"A hand requires exactly {HAND_SIZE} cards, got {len(cards)}"
            )
        if len(set(cards)) != HAND_SIZE:
            raise InvalidHandError(
                f"Hand contains a repeated card: {' '.join(str(c) for c in cards)}"
            )
        object.__setattr__(self, 'cards', cards)

    def __setattr__(self, name, value):
        raise AttributeError("Hand is immutable")

    def __reduce__(self):
        # Rebuild through __init__ so pickling (worker processes) skips __setattr__
        return (Hand, (self.cards,))

    def canonical(self) -> 'Hand':
        """Return this hand sorted ascending by rank (suits keep input order on ties)."""
        return Hand(sorted(self.cards, key=_by_rank))

    @property
    def is_canonical(self) -> bool:
        """Whether the cards are already in ascending rank order."""
        return all(a.rank <= b.rank for a, b in zip(self.cards, self.cards[1:]))

    @property
    def ranks(self) -> tuple[int, ...]:
        """Integer ranks in the hand's current order."""
        return tuple(int(c.rank) for c in self.cards)

    def others(self, card: Card) -> tuple[Card, ...]:
        """
        Get the four cards that stay in the hand when one is discarded.

        Raises:
            ValueError: If card not in hand
        """
        if card not in self.cards:
            raise ValueError(f"Card {card} not in hand")
        return tuple(c for c in self.cards if c != card)

    def replace(self, discard: Card, drawn: Card) -> 'Hand':
        """
        Swap one card for another.

        The new hand comes back in canonical order, so the drawn card has to
        be found again by identity rather than by its old position.

        Args:
            discard: Card leaving the hand
            drawn: Card taking its place

        Returns:
            A new, canonically sorted hand

        Raises:
            ValueError: If discard is not in the hand
            InvalidHandError: If drawn is already in the hand
        """
        return Hand(sorted(self.others(discard) + (drawn,), key=_by_rank))

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a line of text.

        Args:
            hand_str: Five cards separated by single spaces (e.g., "2D 2C 5H 2H 2S").
                      Each card is 2 characters: rank (2-9, 0 for ten, J, Q, K, A)
                      followed by suit (C, D, H, S). One trailing space is allowed.

        Returns:
            Hand with the parsed cards, in the order given

        Raises:
            HandParseError: If the text is malformed or repeats a card
        """
        if not _HAND_PATTERN.fullmatch(hand_str):
            raise HandParseError(f"Invalid hand string: {hand_str!r}")

        cards = [Card.from_string(token) for token in hand_str.split()]

        try:
            hand = cls(cards)
        except InvalidHandError as e:
            raise HandParseError(f"Invalid hand string {hand_str!r}: {e}")

        logger.debug(f"Created hand from string '{hand_str}': {hand}")
        return hand

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __eq__(self, other: object) -> bool:
        """Hands are equal if they hold the same cards in the same order."""
        if not isinstance(other, Hand):
            return NotImplemented
        return self.cards == other.cards

    def __hash__(self) -> int:
        return hash(self.cards)

    def __repr__(self) -> str:
        return f"Hand({str(self)!r})"

    def __str__(self) -> str:
        """String representation in the input format, e.g. '2D 2C 5H 2H 2S'."""
        return ' '.join(str(card) for card in self.cards)
