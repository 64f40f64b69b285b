"""Exceptions raised by hand evaluation and ranking."""


class PokerError(Exception):
    """Base class for all poker errors."""


class MalformedGroupError(PokerError, ValueError):
    """Cards do not fit the shape of the group being built.

    Raised for mixed ranks in a rank group, mixed suits in a flush, a
    straight that is not five consecutive cards, or a full house whose
    parts have the wrong size or share a rank.
    """


class InsufficientCardsError(PokerError, ValueError):
    """Fewer cards are available than the operation needs."""


class UnevaluableHandError(PokerError, ValueError):
    """No hand category matched the supplied cards."""


class IllegalHandError(PokerError, ValueError):
    """A hand would hold a duplicate card or more than seven cards."""


class UnsupportedCategoryError(PokerError, TypeError):
    """Two results cannot be compared because of an unknown category or breakdown."""


class ResultIdNotFoundError(PokerError, KeyError):
    """No result with the requested id is present in a ledger."""

    def __init__(self, result_id: str) -> None:
        super().__init__(result_id)
        self.result_id = result_id

    def __str__(self) -> str:
        return f"No result with id {self.result_id!r}"


class AllCardsDealtError(PokerError):
    """The deck has run out of cards."""
