"""Tests for rank groups, flushes, straights and full houses (poker/hand_values.py)."""

import pytest

from poker.cards import Card, Rank, Suit
from poker.errors import InsufficientCardsError, MalformedGroupError
from poker.hand_values import Flush, FullHouse, RankGroup, Straight
from tests.helpers.card_utils import make_cards_from_strings, ranks_of


def group(*codes):
    return RankGroup(frozenset(make_cards_from_strings(list(codes))))


class TestRankGroup:
    """Test n of a kind construction and ordering."""

    def test_properties(self):
        trips = group("7c", "7d", "7s")
        assert trips.rank == Rank.SEVEN
        assert trips.size == 3

    def test_mixed_ranks_rejected(self):
        with pytest.raises(MalformedGroupError):
            group("7c", "8c")

    def test_empty_rejected(self):
        with pytest.raises(MalformedGroupError):
            RankGroup(frozenset())

    @pytest.mark.parametrize(
        "better,worse",
        [
            (("2c", "2d"), ("Ac",)),  # more cards beats higher rank
            (("2c", "2d", "2h"), ("Ac", "Ad")),
            (("Kc", "Kd"), ("Qc", "Qd")),  # same size, rank decides
            (("3c",), ("2s",)),
        ],
    )
    def test_ordering(self, better, worse):
        assert group(*better) > group(*worse)

    def test_equal_regardless_of_suits(self):
        assert group("9c", "9d") == group("9h", "9s")
        assert not group("9c", "9d") < group("9h", "9s")

    def test_best_keeps_highest_suits(self):
        pair = group("Qc", "Qh", "Qs").best(2)
        assert pair.size == 2
        assert pair.cards == frozenset(make_cards_from_strings(["Qh", "Qs"]))

    def test_best_same_size_is_same_group(self):
        trips = group("Qc", "Qh", "Qs")
        assert trips.best(3) is trips

    def test_best_too_many_raises(self):
        with pytest.raises(InsufficientCardsError):
            group("Qc", "Qh").best(3)

    def test_not_comparable_with_other_kinds(self):
        straight = Straight(tuple(make_cards_from_strings(["5c", "6d", "7h", "8s", "9c"])))
        with pytest.raises(TypeError):
            group("Ac") < straight


class TestStraight:
    """Test straight construction and ordering."""

    def test_wheel_top_card_is_five(self):
        wheel = Straight(tuple(make_cards_from_strings(["As", "2d", "3c", "4h", "5s"])))
        assert wheel.highest_card.rank == Rank.FIVE
        assert not wheel.is_flush

    def test_royal(self):
        royal = Straight(tuple(make_cards_from_strings(["Ts", "Js", "Qs", "Ks", "As"])))
        assert royal.is_flush
        assert royal.is_royal

    def test_steel_wheel_is_not_royal(self):
        steel = Straight(tuple(make_cards_from_strings(["Ah", "2h", "3h", "4h", "5h"])))
        assert steel.is_flush
        assert not steel.is_royal

    @pytest.mark.parametrize(
        "codes",
        [
            ["5c", "6d", "7h", "8s"],
            ["5c", "6d", "7h", "8s", "9c", "Tc"],
            ["5c", "6d", "7h", "8s", "Tc"],
            ["Kc", "Ad", "2h", "3s", "4c"],
        ],
    )
    def test_malformed(self, codes):
        with pytest.raises(MalformedGroupError):
            Straight(tuple(make_cards_from_strings(codes)))

    def test_flush_beats_higher_plain_straight(self):
        low_flush = Straight(tuple(make_cards_from_strings(["Ad", "2d", "3d", "4d", "5d"])))
        broadway = Straight(tuple(make_cards_from_strings(["Tc", "Jd", "Qh", "Ks", "Ac"])))
        assert low_flush > broadway

    def test_higher_top_card_wins(self):
        six_high = Straight(tuple(make_cards_from_strings(["2c", "3d", "4h", "5s", "6c"])))
        wheel = Straight(tuple(make_cards_from_strings(["Ac", "2d", "3h", "4s", "5c"])))
        assert six_high > wheel

    def test_same_ranks_tie(self):
        first = Straight(tuple(make_cards_from_strings(["5c", "6d", "7h", "8s", "9c"])))
        second = Straight(tuple(make_cards_from_strings(["5d", "6h", "7s", "8c", "9d"])))
        assert first == second


class TestFlush:
    """Test flush construction and ordering."""

    def test_best_from_takes_top_five(self):
        flush = Flush.best_from(make_cards_from_strings(["2h", "9h", "Kh", "4h", "Th", "6h", "3h"]))
        assert ranks_of(reversed(flush.cards)) == ["K", "T", "9", "6", "4"]
        assert flush.suit == Suit.HEARTS
        assert flush.highest_card == Card.from_string("Kh")

    def test_mixed_suits_rejected(self):
        with pytest.raises(MalformedGroupError):
            Flush.best_from(make_cards_from_strings(["2h", "9h", "Kh", "4h", "Td"]))

    def test_too_few_cards(self):
        with pytest.raises(InsufficientCardsError):
            Flush.best_from(make_cards_from_strings(["2h", "9h", "Kh", "4h"]))

    def test_direct_construction_needs_five(self):
        with pytest.raises(MalformedGroupError):
            Flush(tuple(make_cards_from_strings(["2h", "9h", "Kh", "4h"])))

    @pytest.mark.parametrize(
        "better,worse",
        [
            (["Ah", "3h", "4h", "5h", "7h"], ["Kc", "Qc", "Jc", "9c", "8c"]),
            (["Ah", "Kh", "4h", "5h", "7h"], ["Ac", "Qc", "Jc", "9c", "8c"]),
            (["Ah", "Kh", "Qh", "Jh", "3h"], ["Ac", "Kc", "Qc", "Jc", "2c"]),
        ],
    )
    def test_ordering_card_by_card(self, better, worse):
        assert Flush.best_from(make_cards_from_strings(better)) > Flush.best_from(
            make_cards_from_strings(worse)
        )

    def test_same_ranks_tie(self):
        first = Flush.best_from(make_cards_from_strings(["Ah", "Kh", "9h", "5h", "2h"]))
        second = Flush.best_from(make_cards_from_strings(["As", "Ks", "9s", "5s", "2s"]))
        assert first == second


class TestFullHouse:
    """Test full house construction."""

    def test_pair_from_second_trips(self):
        groups = [
            group("Qc", "Qd", "Qh"),
            group("Jc", "Jd", "Jh"),
            group("Tc", "Td"),
        ]
        full_house = FullHouse.best_from(groups)
        assert full_house.three_of_a_kind.rank == Rank.QUEEN
        assert full_house.pair.rank == Rank.JACK
        assert full_house.pair.size == 2
        assert len(full_house.cards) == 5

    def test_singles_never_supply_pair(self):
        groups = [group("5c", "5d", "5h"), group("2c", "2d"), group("Ac"), group("Kd")]
        assert FullHouse.best_from(groups).pair.rank == Rank.TWO

    def test_precondition(self):
        with pytest.raises(MalformedGroupError):
            FullHouse.best_from([group("5c", "5d", "5h"), group("Ac")])
        with pytest.raises(MalformedGroupError):
            FullHouse.best_from([group("5c", "5d"), group("4c", "4d")])

    def test_parts_must_differ(self):
        with pytest.raises(MalformedGroupError):
            FullHouse(group("5c", "5d", "5h"), group("5c", "5s"))

    def test_ordering(self):
        aces_full = FullHouse(group("Ac", "Ad", "Ah"), group("2c", "2d"))
        kings_full = FullHouse(group("Kc", "Kd", "Kh"), group("Ac", "As"))
        kings_full_of_queens = FullHouse(group("Kc", "Kd", "Kh"), group("Qc", "Qs"))
        assert aces_full > kings_full > kings_full_of_queens
