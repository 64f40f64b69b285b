"""Configuration settings for showdown simulation."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DECK_SIZE = 52


@dataclass
class ShowdownConfig:
    """How a showdown is dealt."""

    num_players: int = 9
    board_cards: int = 5
    hole_cards: int = 2
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.num_players < 1:
            raise ValueError(f"Need at least one player, got {self.num_players}")
        hand_size = self.board_cards + self.hole_cards
        if not 5 <= hand_size <= 7:
            raise ValueError(f"Board and hole cards must total 5-7 cards, got {hand_size}")
        needed = self.board_cards + self.num_players * self.hole_cards
        if needed > DECK_SIZE:
            raise ValueError(f"Deal needs {needed} cards, deck only has {DECK_SIZE}")


@dataclass
class DisplayConfig:
    """Terminal output options."""

    show_breakdown: bool = True
    show_hole_cards: bool = True


@dataclass
class Config:
    """Complete configuration."""

    showdown: ShowdownConfig = field(default_factory=ShowdownConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "showdown" in data:
        config.showdown = ShowdownConfig(**data["showdown"])
    if "display" in data:
        config.display = DisplayConfig(**data["display"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "showdown": {
            "num_players": config.showdown.num_players,
            "board_cards": config.showdown.board_cards,
            "hole_cards": config.showdown.hole_cards,
            "seed": config.showdown.seed,
        },
        "display": {
            "show_breakdown": config.display.show_breakdown,
            "show_hole_cards": config.display.show_hole_cards,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
