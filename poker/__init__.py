"""Poker hand evaluation and ranking."""

from poker.cards import Card, Deck, Rank, Suit
from poker.errors import (
    AllCardsDealtError,
    IllegalHandError,
    InsufficientCardsError,
    MalformedGroupError,
    PokerError,
    ResultIdNotFoundError,
    UnevaluableHandError,
    UnsupportedCategoryError,
)
from poker.hand import Hand
from poker.hand_evaluator import (
    HandCategory,
    HandEvaluator,
    HandResult,
    compare_results,
    evaluate,
)
from poker.hand_values import Flush, FullHouse, HandValue, RankGroup, Straight
from poker.ledger import HandResultLedger
from poker.sequence import CardSequence, find_longest_sequence

__all__ = [
    "AllCardsDealtError",
    "Card",
    "CardSequence",
    "Deck",
    "Flush",
    "FullHouse",
    "Hand",
    "HandCategory",
    "HandEvaluator",
    "HandResult",
    "HandResultLedger",
    "HandValue",
    "IllegalHandError",
    "InsufficientCardsError",
    "MalformedGroupError",
    "PokerError",
    "Rank",
    "RankGroup",
    "ResultIdNotFoundError",
    "Straight",
    "Suit",
    "UnevaluableHandError",
    "UnsupportedCategoryError",
    "compare_results",
    "evaluate",
    "find_longest_sequence",
]
