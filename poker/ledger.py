"""Ranking of many evaluated hands, with ties sharing a placement."""

import logging
from collections.abc import Iterable

from poker.cards import Card
from poker.errors import ResultIdNotFoundError
from poker.hand_evaluator import HandEvaluator, HandResult

logger = logging.getLogger(__name__)


class HandResultLedger:
    """Collects hand results and ranks them, best first.

    Placements are dense: results that compare equal share a place and the
    next distinct result takes the following place, so three results where
    the first two tie are placed 1, 1, 2.

    The ranking is recomputed lazily on the first read after an insert.
    A ledger is not thread safe; share it behind a single lock.

    Usage:
        ledger = HandResultLedger()
        ledger.insert(evaluate(cards, "Player 1"))
        ledger.placement_of("Player 1")
    """

    def __init__(self) -> None:
        self._results: list[HandResult] = []
        self._placements: list[list[HandResult]] = []
        self._dirty = False

    @classmethod
    def from_results(cls, *results: HandResult) -> "HandResultLedger":
        ledger = cls()
        for result in results:
            ledger.insert(result)
        return ledger

    def insert(self, result: HandResult) -> None:
        """Add an evaluated result."""
        self._results.append(result)
        self._dirty = True

    def add_hand(self, cards: Iterable[Card], result_id: str) -> HandResult:
        """Evaluate cards and add the result under result_id."""
        result = HandEvaluator.evaluate(cards, result_id)
        self.insert(result)
        return result

    def placement_of(self, result_id: str) -> int:
        """Placement (1 = best) of the result with result_id.

        Raises:
            ResultIdNotFoundError: If no result carries result_id
        """
        for place, results in enumerate(self._ranked(), start=1):
            if any(r.id == result_id for r in results):
                return place
        raise ResultIdNotFoundError(result_id)

    def results_at(self, place: int) -> list[HandResult]:
        """All results sharing placement place (empty if there is no such place)."""
        placements = self._ranked()
        if 1 <= place <= len(placements):
            return list(placements[place - 1])
        return []

    def placement_count(self) -> int:
        """Number of distinct placements; a tie counts once."""
        return len(self._ranked())

    def result_count(self) -> int:
        """Number of results, ties counted individually."""
        return len(self._results)

    def standings(self) -> list[tuple[int, list[HandResult]]]:
        """(placement, results) pairs, best placement first."""
        return [
            (place, list(results))
            for place, results in enumerate(self._ranked(), start=1)
        ]

    def __len__(self) -> int:
        return len(self._results)

    def _ranked(self) -> list[list[HandResult]]:
        if self._dirty:
            self._sort()
        return self._placements

    def _sort(self) -> None:
        # Stable sort keeps insertion order within a tie
        ordered = sorted(self._results, reverse=True)
        placements: list[list[HandResult]] = []
        for result in ordered:
            if placements and result.compare(placements[-1][0]) == 0:
                placements[-1].append(result)
            else:
                placements.append([result])
        self._placements = placements
        self._dirty = False
        logger.debug(
            "Ranked %d results into %d placements", len(ordered), len(placements)
        )
