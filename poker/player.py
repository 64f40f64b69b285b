"""Players seated at a showdown."""

from dataclasses import dataclass

from poker.cards import Card
from poker.hand import Hand


@dataclass
class Player:
    """A player at the poker table."""

    id: int
    name: str = ""
    hole_cards: tuple[Card, ...] | None = None

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"Player {self.id}"

    def hand_with(self, board: list[Card]) -> Hand:
        """The player's hole cards combined with the board."""
        if self.hole_cards is None:
            raise ValueError(f"{self.name} has no hole cards")
        return Hand([*board, *self.hole_cards])
