"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(Enum):
    """Card suits."""
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """
    Card ranks.

    Values are the integer face values used for sorting and tie-breaks,
    with the Ace high at 14.
    """
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
        """Single character used in hand text ('0' stands for ten)."""
        return RANK_SYMBOLS[self.value - Rank.TWO]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """
        Look up a rank by its text symbol.

        Raises:
            ValueError: If the symbol is not one of 2-9, 0, J, Q, K, A
        """
        index = RANK_SYMBOLS.find(symbol)
        if len(symbol) != 1 or index < 0:
            raise ValueError(f"Invalid rank symbol: {symbol!r}")
        return cls(index + Rank.TWO)

    def __str__(self) -> str:
        return self.symbol


RANK_SYMBOLS = '234567890JQKA'
SUIT_SYMBOLS = 'CDHS'


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values: two cards are equal (and hash equal) when
    rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{self.rank.symbol}{self.suit.value}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'AS' for Ace of spades,
                     or '0H' for the ten of hearts

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = Rank.from_symbol(rank_str)
            suit = Suit(suit_str)
        except ValueError:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
