"""Shared pytest fixtures for hand evaluation tests."""

import pytest

from config.settings import ShowdownConfig
from poker.cards import Deck
from poker.ledger import HandResultLedger
from tests.helpers.card_utils import make_cards_from_strings


@pytest.fixture
def seeded_deck():
    """Provide a reproducible deck."""
    return Deck(seed=42)


@pytest.fixture
def ledger():
    """An empty ledger."""
    return HandResultLedger()


@pytest.fixture
def cards():
    """Build cards from string codes."""
    return make_cards_from_strings


@pytest.fixture(params=[2, 6, 9])
def small_showdown_config(request):
    """Parametrize over different table sizes."""
    return ShowdownConfig(num_players=request.param, seed=7)
