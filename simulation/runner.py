"""Showdown runner: deal, evaluate and rank every seat."""

import logging
from dataclasses import dataclass, field

from config.settings import ShowdownConfig
from poker.cards import Card, Deck
from poker.hand_evaluator import HandResult
from poker.ledger import HandResultLedger
from poker.player import Player

logger = logging.getLogger(__name__)


@dataclass
class Showdown:
    """A dealt board, the seated players and their ranking."""

    board: list[Card]
    players: list[Player]
    ledger: HandResultLedger = field(default_factory=HandResultLedger)

    def result_for(self, player: Player) -> HandResult:
        place = self.ledger.placement_of(player.name)
        return next(r for r in self.ledger.results_at(place) if r.id == player.name)

    def winners(self) -> list[HandResult]:
        return self.ledger.results_at(1)


class ShowdownRunner:
    """Deals showdowns from one deck.

    The deck is reset before every deal, so repeated deals with the same
    seed are reproducible as a sequence.
    """

    def __init__(self, config: ShowdownConfig | None = None) -> None:
        self.config = config or ShowdownConfig()
        self.deck = Deck(seed=self.config.seed)

    def deal(self) -> Showdown:
        """Deal a board and hole cards, then rank every player."""
        self.deck.reset()
        players = [
            Player(id=i, hole_cards=tuple(self.deck.deal(self.config.hole_cards)))
            for i in range(1, self.config.num_players + 1)
        ]
        board = self.deck.deal(self.config.board_cards)
        logger.info(
            "Dealt board %s to %d players",
            " ".join(str(c) for c in board),
            len(players),
        )

        showdown = Showdown(board=board, players=players)
        for player in players:
            showdown.ledger.insert(player.hand_with(board).evaluate(player.name))
        return showdown

    def run(self, num_deals: int) -> list[Showdown]:
        """Deal num_deals independent showdowns."""
        return [self.deal() for _ in range(num_deals)]
