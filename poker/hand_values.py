"""Building blocks of an evaluated hand.

A hand value is one component of a result's breakdown. There are exactly
four kinds: RankGroup (n of a kind, also used for single kickers), Straight,
Flush and FullHouse. Each exposes its ``cards`` and orders against values of
its own kind only; comparing two different kinds raises TypeError.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from poker.cards import Card, Rank, Suit
from poker.errors import InsufficientCardsError, MalformedGroupError


class _StrengthOrdered:
    """Orders instances of one class by their ``strength`` tuple (higher is better)."""

    __slots__ = ()

    @property
    def strength(self) -> tuple[int, ...]:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.strength >= other.strength

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.strength == other.strength

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.strength))


def _format_cards(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)


@dataclass(frozen=True, eq=False, slots=True)
class RankGroup(_StrengthOrdered):
    """One to four cards sharing a rank.

    Larger groups beat smaller ones; groups of equal size are decided by rank.
    """

    cards: frozenset[Card]

    def __post_init__(self) -> None:
        if not self.cards:
            raise MalformedGroupError("A rank group needs at least one card")
        if len({c.rank for c in self.cards}) != 1:
            raise MalformedGroupError(
                f"All cards of a rank group must share a rank: {_format_cards(sorted(self.cards))}"
            )

    @classmethod
    def of(cls, *cards: Card) -> "RankGroup":
        return cls(frozenset(cards))

    @property
    def rank(self) -> Rank:
        return next(iter(self.cards)).rank

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def strength(self) -> tuple[int, ...]:
        return (self.size, self.rank)

    def best(self, n: int) -> "RankGroup":
        """A group made of this group's n best cards (highest suits first)."""
        if n > self.size:
            raise InsufficientCardsError(
                f"Cannot take {n} cards from a group of {self.size}"
            )
        if n == self.size:
            return self
        return RankGroup(frozenset(sorted(self.cards, reverse=True)[:n]))

    def __str__(self) -> str:
        return f"{self.size} of a kind: {_format_cards(sorted(self.cards, reverse=True))}"


def _is_wheel(ranks: list[Rank]) -> bool:
    return ranks == [Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE]


@dataclass(frozen=True, eq=False, slots=True)
class Straight(_StrengthOrdered):
    """Five consecutive cards, lowest first. An ace may lead a wheel (A-2-3-4-5).

    Any straight flush beats any plain straight; otherwise the top card decides.
    """

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        if len(self.cards) != 5:
            raise MalformedGroupError(
                f"A straight needs exactly 5 cards, got {len(self.cards)}"
            )
        ranks = [c.rank for c in self.cards]
        consecutive = all(b - a == 1 for a, b in zip(ranks, ranks[1:]))
        if not (consecutive or _is_wheel(ranks)):
            raise MalformedGroupError(
                f"Cards are not consecutive: {_format_cards(self.cards)}"
            )

    @property
    def is_flush(self) -> bool:
        return len({c.suit for c in self.cards}) == 1

    @property
    def is_royal(self) -> bool:
        return self.is_flush and self.highest_card.rank == Rank.ACE

    @property
    def highest_card(self) -> Card:
        return self.cards[4]

    @property
    def strength(self) -> tuple[int, ...]:
        return (int(self.is_flush), self.highest_card.rank)

    def __str__(self) -> str:
        kind = "straight flush" if self.is_flush else "straight"
        return f"{kind}: {_format_cards(self.cards)}"


@dataclass(frozen=True, eq=False, slots=True)
class Flush(_StrengthOrdered):
    """Five cards of one suit, sorted ascending by rank."""

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        if len(self.cards) != 5:
            raise MalformedGroupError(
                f"A flush needs exactly 5 cards, got {len(self.cards)}"
            )
        if len({c.suit for c in self.cards}) != 1:
            raise MalformedGroupError("All cards need to be of same suit.")

    @classmethod
    def best_from(cls, suited_cards: Iterable[Card]) -> "Flush":
        """Build the best flush out of five or more cards of one suit."""
        suited_cards = sorted(suited_cards)
        if len({c.suit for c in suited_cards}) > 1:
            raise MalformedGroupError("All cards need to be of same suit.")
        if len(suited_cards) < 5:
            raise InsufficientCardsError(
                f"At least five cards are necessary for a flush, got {len(suited_cards)}"
            )
        return cls(tuple(suited_cards[-5:]))

    @property
    def suit(self) -> Suit:
        return self.cards[0].suit

    @property
    def highest_card(self) -> Card:
        return self.cards[-1]

    @property
    def strength(self) -> tuple[int, ...]:
        return tuple(c.rank for c in reversed(self.cards))

    def __str__(self) -> str:
        return f"flush: {_format_cards(reversed(self.cards))}"


def _pair_candidate_key(group: RankGroup) -> tuple[bool, Rank]:
    # Singles always lose to real groups, rank decides otherwise
    return (group.size > 1, group.rank)


@dataclass(frozen=True, eq=False, slots=True)
class FullHouse(_StrengthOrdered):
    """A three of a kind plus a pair of a different rank."""

    three_of_a_kind: RankGroup
    pair: RankGroup

    def __post_init__(self) -> None:
        if self.three_of_a_kind.size != 3 or self.pair.size != 2:
            raise MalformedGroupError(
                "A full house needs a 3 card group and a 2 card group, got "
                f"{self.three_of_a_kind.size} and {self.pair.size}"
            )
        if self.three_of_a_kind.rank == self.pair.rank:
            raise MalformedGroupError("Three of a kind and pair must differ in rank")

    @classmethod
    def best_from(cls, groups: list[RankGroup]) -> "FullHouse":
        """Build the best full house from rank groups sorted best first.

        The first group is the three of a kind. The pair is the highest ranked
        remaining group of two or more cards, so a second three of a kind can
        supply a better pair than an actual lower pair.
        """
        if len(groups) < 2 or groups[0].size != 3 or groups[1].size < 2:
            raise MalformedGroupError(
                "A full house needs a three of a kind followed by a pair or better"
            )
        best_remaining = max(groups[1:], key=_pair_candidate_key)
        return cls(groups[0], best_remaining.best(2))

    @property
    def cards(self) -> frozenset[Card]:
        return self.three_of_a_kind.cards | self.pair.cards

    @property
    def strength(self) -> tuple[int, ...]:
        return (self.three_of_a_kind.rank, self.pair.rank)

    def __str__(self) -> str:
        return (
            f"full house: {self.three_of_a_kind.rank.long_name}s over "
            f"{self.pair.rank.long_name}s"
        )


HandValue = Union[RankGroup, Straight, Flush, FullHouse]
