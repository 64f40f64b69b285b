"""Runs of consecutive ranks and the straights found inside them."""

import logging
from collections.abc import Iterable, Iterator
from itertools import product

from poker.cards import Card, Rank
from poker.errors import InsufficientCardsError
from poker.hand_values import Straight

logger = logging.getLogger(__name__)


class CardSequence:
    """An ordered run of positions, each holding one or more cards of a single rank.

    Keeping every card of a rank at its position lets the straight search
    pick the suited one when several straights share the same ranks.
    """

    def __init__(self, positions: Iterable[Iterable[Card]] = ()) -> None:
        self._positions: list[set[Card]] = [set(p) for p in positions]

    @classmethod
    def from_string(cls, text: str) -> "CardSequence":
        """Parse a sequence like ``"4s, 4d | 5s | 6s, 6c | 7s | 8s"``."""
        return cls(
            [Card.from_string(code) for code in part.split(",")]
            for part in text.split("|")
        )

    def is_empty(self) -> bool:
        return not self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[set[Card]]:
        return iter(self._positions)

    def cards_at(self, index: int) -> set[Card]:
        return self._positions[index]

    @property
    def first_rank(self) -> Rank | None:
        if self.is_empty():
            return None
        return next(iter(self._positions[0])).rank

    @property
    def last_rank(self) -> Rank | None:
        if self.is_empty():
            return None
        return next(iter(self._positions[-1])).rank

    def append(self, card: Card) -> None:
        self._positions.append({card})

    def prepend(self, card: Card) -> None:
        self._positions.insert(0, {card})

    def add_to_first(self, card: Card) -> None:
        self._positions[0].add(card)

    def add_to_last(self, card: Card) -> None:
        self._positions[-1].add(card)

    def best_straight(self) -> Straight:
        """The best straight (or straight flush) within this sequence."""
        if len(self) < 5:
            raise InsufficientCardsError(
                f"A straight needs a sequence of at least 5 ranks, got {len(self)}"
            )
        candidates = []
        for combination in product(*(sorted(p) for p in self._positions)):
            for start in range(len(combination) - 4):
                candidates.append(Straight(combination[start : start + 5]))
        return max(candidates)

    def __repr__(self) -> str:
        inner = " | ".join(
            ", ".join(str(c) for c in sorted(p)) for p in self._positions
        )
        return f"CardSequence({inner})"


def _place_ace(ace: Card, sequences: list[CardSequence]) -> None:
    """Attach an ace to every sequence it can extend.

    An ace sits low in front of a Deuce and high after a King. If a sequence
    already has an ace at either end the new one joins it, which keeps the
    suit choice open for a straight flush.
    """
    for sequence in sequences:
        if sequence.first_rank == Rank.TWO:
            sequence.prepend(ace)
        elif sequence.last_rank == Rank.KING:
            sequence.append(ace)
        elif sequence.first_rank == Rank.ACE:
            sequence.add_to_first(ace)
        elif sequence.last_rank == Rank.ACE:
            sequence.add_to_last(ace)


def find_longest_sequence(cards: Iterable[Card]) -> CardSequence:
    """The longest run of consecutive ranks in cards.

    Ties go to the run that ends on the higher rank. Aces never start a run
    on their own; they only extend wheels and broadways.
    """
    current = CardSequence()
    sequences = [current]

    for card in sorted(cards):
        if card.rank == Rank.ACE:
            _place_ace(card, sequences)
        elif current.is_empty():
            current.append(card)
        elif card.rank == current.last_rank + 1:
            current.append(card)
        elif card.rank == current.last_rank:
            current.add_to_last(card)
        else:
            current = CardSequence()
            current.append(card)
            sequences.append(current)

    longest = max(
        (s for s in sequences if not s.is_empty()),
        key=lambda s: (len(s), s.last_rank),
        default=CardSequence(),
    )
    logger.debug("Longest sequence: %r", longest)
    return longest
