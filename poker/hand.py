"""A set of up to seven cards that can be evaluated."""

from collections.abc import Iterable

from poker.cards import Card
from poker.errors import IllegalHandError
from poker.hand_evaluator import MAX_CARDS, HandEvaluator, HandResult


class Hand:
    """Community and hole cards belonging to one seat."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: set[Card] = set()
        for card in cards:
            self.add_card(card)

    @classmethod
    def from_strings(cls, *codes: str) -> "Hand":
        """Create a hand from codes like 'As', 'Kh'."""
        return cls(Card.from_string(code) for code in codes)

    @classmethod
    def from_cards(cls, *cards: Card) -> "Hand":
        return cls(cards)

    @property
    def cards(self) -> frozenset[Card]:
        return frozenset(self._cards)

    def add_card(self, card: Card) -> None:
        """Add a card, rejecting duplicates and an eighth card."""
        if card in self._cards:
            raise IllegalHandError(f"{card} is already part of the hand")
        if len(self._cards) >= MAX_CARDS:
            raise IllegalHandError(f"A hand holds at most {MAX_CARDS} cards")
        self._cards.add(card)

    def evaluate(self, result_id: str = "") -> HandResult:
        return HandEvaluator.evaluate(self._cards, result_id)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return " ".join(str(c) for c in sorted(self._cards, reverse=True))
