"""Hand evaluation for Texas Hold'em poker."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from poker.cards import Card, Rank, Suit
from poker.errors import (
    IllegalHandError,
    MalformedGroupError,
    UnevaluableHandError,
    UnsupportedCategoryError,
)
from poker.hand_values import Flush, FullHouse, HandValue, RankGroup, Straight
from poker.sequence import find_longest_sequence

logger = logging.getLogger(__name__)

MIN_CARDS = 5
MAX_CARDS = 7


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        names = {
            1: "High Card",
            2: "One Pair",
            3: "Two Pair",
            4: "Three of a Kind",
            5: "Straight",
            6: "Flush",
            7: "Full House",
            8: "Four of a Kind",
            9: "Straight Flush",
            10: "Royal Flush",
        }
        return names[self.value]


def _compare_values(mine: HandValue, theirs: HandValue) -> int:
    for kind in (RankGroup, Straight, Flush, FullHouse):
        if isinstance(mine, kind) and isinstance(theirs, kind):
            return (mine > theirs) - (mine < theirs)
    raise UnsupportedCategoryError(
        f"Cannot compare {type(mine).__name__} with {type(theirs).__name__}"
    )


@dataclass(frozen=True, eq=False, slots=True)
class HandResult:
    """Result of evaluating a poker hand.

    The breakdown holds the components that make up the five played cards,
    strongest first. Results compare by category and then component by
    component; equal results are ties regardless of suits or ids.
    """

    category: HandCategory
    breakdown: tuple[HandValue, ...]
    id: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.category, HandCategory):
            try:
                object.__setattr__(self, "category", HandCategory(self.category))
            except ValueError:
                raise UnsupportedCategoryError(
                    f"Unknown hand category: {self.category!r}"
                ) from None
        count = sum(len(value.cards) for value in self.breakdown)
        if count != MIN_CARDS:
            raise MalformedGroupError(
                f"A breakdown must hold exactly {MIN_CARDS} cards, got {count}"
            )

    @property
    def cards(self) -> tuple[Card, ...]:
        """The five played cards in breakdown order."""
        cards: list[Card] = []
        for value in self.breakdown:
            if isinstance(value, RankGroup):
                cards.extend(sorted(value.cards, reverse=True))
            elif isinstance(value, FullHouse):
                cards.extend(sorted(value.three_of_a_kind.cards, reverse=True))
                cards.extend(sorted(value.pair.cards, reverse=True))
            else:
                cards.extend(reversed(value.cards))
        return tuple(cards)

    def compare(self, other: "HandResult") -> int:
        """Return 1 if this result wins, -1 if other wins, 0 if tie."""
        if self.category != other.category:
            return 1 if self.category > other.category else -1
        if len(self.breakdown) != len(other.breakdown):
            raise UnsupportedCategoryError(
                f"Breakdowns of {self.category} results differ in shape"
            )
        for mine, theirs in zip(self.breakdown, other.breakdown):
            result = _compare_values(mine, theirs)
            if result:
                return result
        return 0

    def __lt__(self, other: "HandResult") -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "HandResult") -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "HandResult") -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "HandResult") -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.compare(other) == 0

    __hash__ = None

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.category}: {cards_str}"


def group_by_rank(cards: Iterable[Card]) -> dict[Rank, set[Card]]:
    """Map each rank present in cards to its cards."""
    groups: dict[Rank, set[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, set()).add(card)
    return groups


def group_by_suit(cards: Iterable[Card]) -> dict[Suit, set[Card]]:
    """Map every suit, in suit order, to the cards of that suit."""
    groups: dict[Suit, set[Card]] = {suit: set() for suit in Suit}
    for card in cards:
        groups[card.suit].add(card)
    return groups


def rank_groups(cards: Iterable[Card]) -> list[RankGroup]:
    """All rank groups in cards, best first (larger groups, then higher ranks)."""
    groups = [RankGroup(frozenset(c)) for c in group_by_rank(cards).values()]
    return sorted(groups, reverse=True)


class HandEvaluator:
    """Evaluate poker hands."""

    @staticmethod
    def evaluate(cards: Iterable[Card], result_id: str = "") -> HandResult:
        """Evaluate the best five card hand out of 5 to 7 unique cards."""
        cards = list(cards)
        if len(set(cards)) != len(cards):
            raise IllegalHandError("A hand cannot hold the same card twice")
        if len(cards) > MAX_CARDS:
            raise IllegalHandError(
                f"A hand holds at most {MAX_CARDS} cards, got {len(cards)}"
            )
        if len(cards) < MIN_CARDS:
            raise UnevaluableHandError(
                f"Need at least {MIN_CARDS} cards, got {len(cards)}"
            )

        category, breakdown = HandEvaluator.classify(cards)
        result = HandResult(category, tuple(breakdown), result_id)
        logger.debug("Evaluated %s as %s", result_id or "hand", result)
        return result

    @staticmethod
    def classify(cards: Sequence[Card]) -> tuple[HandCategory, list[HandValue]]:
        """Pick the category and breakdown, checking categories strongest first.

        Does not check hand size; ``evaluate`` does that before calling here.
        """
        sequence = find_longest_sequence(cards)
        groups = rank_groups(cards)
        suited = group_by_suit(cards)
        best = groups[0]
        second = groups[1] if len(groups) > 1 else None

        # Straight flushes first; a plain straight waits behind quads, boats and flushes
        straight = None
        if len(sequence) >= 5:
            straight = sequence.best_straight()
            if straight.is_royal:
                return HandCategory.ROYAL_FLUSH, [straight]
            if straight.is_flush:
                return HandCategory.STRAIGHT_FLUSH, [straight]

        if best.size == 4:
            return HandCategory.FOUR_OF_A_KIND, _pad([best], cards)

        if best.size == 3 and second is not None and second.size >= 2:
            return HandCategory.FULL_HOUSE, [FullHouse.best_from(groups)]

        # Fixed suit order: the first suit with five cards wins
        for suit_cards in suited.values():
            if len(suit_cards) >= 5:
                return HandCategory.FLUSH, [Flush.best_from(suit_cards)]

        if straight is not None:
            return HandCategory.STRAIGHT, [straight]

        if best.size == 3:
            return HandCategory.THREE_OF_A_KIND, _pad([best], cards)

        if best.size == 2 and second is not None and second.size == 2:
            return HandCategory.TWO_PAIR, _pad([best, second], cards)

        if best.size == 2:
            return HandCategory.ONE_PAIR, _pad([best], cards)

        if best.size == 1:
            return HandCategory.HIGH_CARD, _pad([], cards)

        raise UnevaluableHandError(f"No hand category matches {len(cards)} cards")


def _pad(breakdown: list[HandValue], cards: Iterable[Card]) -> list[HandValue]:
    """Fill a breakdown up to five cards with the best unused cards as kickers."""
    used = {card for value in breakdown for card in value.cards}
    count = len(used)
    for card in sorted(cards, reverse=True):
        if count >= MIN_CARDS:
            break
        if card not in used:
            breakdown.append(RankGroup.of(card))
            count += 1
    if count < MIN_CARDS:
        raise UnevaluableHandError(
            f"Not enough cards to fill a breakdown, got {count}"
        )
    return breakdown


def evaluate(cards: Iterable[Card], result_id: str = "") -> HandResult:
    """Evaluate cards into a HandResult identified by result_id."""
    return HandEvaluator.evaluate(cards, result_id)


def compare_results(first: HandResult, second: HandResult) -> int:
    """Return 1 if first wins, -1 if second wins, 0 if tie."""
    return first.compare(second)
