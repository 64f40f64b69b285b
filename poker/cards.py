"""Card, Deck, Suit, and Rank definitions for poker."""

from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterator

from poker.errors import AllCardsDealtError


class Suit(IntEnum):
    """Card suits.

    The numeric order is only a fixed tiebreak, it carries no poker meaning.
    """

    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4

    @property
    def short_name(self) -> str:
        return "cdhs"[self.value - 1]

    @property
    def symbol(self) -> str:
        return "♣♦♥♠"[self.value - 1]

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks (1-13, where 13 is Ace)."""

    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12
    ACE = 13

    @property
    def short_name(self) -> str:
        return "23456789TJQKA"[self.value - 1]

    @property
    def long_name(self) -> str:
        return _LONG_NAMES[self]

    @classmethod
    def from_char(cls, char: str) -> "Rank":
        """Parse a rank from its short name ('2'-'9', 'T', 'J', 'Q', 'K', 'A')."""
        index = "23456789TJQKA".find(char.upper())
        if index < 0 or len(char) != 1:
            raise ValueError(f"Invalid rank: {char}")
        return cls(index + 1)

    def __str__(self) -> str:
        return self.short_name


_LONG_NAMES = {
    Rank.TWO: "Deuce",
    Rank.THREE: "Tray",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}


@dataclass(frozen=True, order=True, slots=True)
class Card:
    """A single playing card.

    Cards order by rank first and suit second. ``Card.of`` and
    ``Card.from_string`` always hand out the same instance for one identity.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def code(self) -> str:
        """Two character code such as 'As' or 'Td'."""
        return f"{self.rank.short_name}{self.suit.short_name}"

    @classmethod
    def of(cls, rank: Rank, suit: Suit) -> "Card":
        """Return the interned card for rank and suit."""
        return _ALL_CARDS[(Rank(rank), Suit(suit))]

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td'."""
        s = s.strip()
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank = Rank.from_char(s[0])
        suit_index = "cdhs".find(s[1].lower())
        if suit_index < 0:
            raise ValueError(f"Invalid suit: {s[1]}")
        return cls.of(rank, Suit(suit_index + 1))

    @classmethod
    def all_cards(cls) -> list["Card"]:
        """All 52 cards, lowest first."""
        return sorted(_ALL_CARDS.values())


_ALL_CARDS = {
    (rank, suit): Card(rank=rank, suit=suit) for suit in Suit for rank in Rank
}


class Deck:
    """A standard 52-card deck that deals unique random cards.

    Each deck owns its remaining cards and its random generator, so
    independent decks can deal side by side.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards and shuffle."""
        self._cards = Card.all_cards()
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n > len(self._cards):
            raise AllCardsDealtError(
                f"Cannot deal {n} cards, only {len(self._cards)} remaining"
            )
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
