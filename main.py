"""Poker hand ranking: evaluate hands and rank showdowns from the terminal."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from config.settings import DEFAULT_CONFIG, Config, ShowdownConfig, load_config, save_config
from poker.cards import Card
from poker.errors import PokerError
from poker.hand_evaluator import HandEvaluator
from poker.ledger import HandResultLedger
from simulation.runner import ShowdownRunner
from ui.display import render_board, render_cards, render_result, render_standings

app = typer.Typer(
    name="poker-rank",
    help="Evaluate poker hands and rank showdowns with tie detection.",
)
console = Console()


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_cards(codes: list[str]) -> list[Card]:
    try:
        return [Card.from_string(code) for code in codes if code.strip()]
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command()
def deal(
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Number of players"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Deal a board and hole cards, then rank every player."""
    configure_logging(verbose)

    try:
        config = load_config(config_path) if config_path else Config()
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)
    showdown_config = config.showdown
    if players is not None or seed is not None:
        try:
            showdown_config = ShowdownConfig(
                num_players=players if players is not None else showdown_config.num_players,
                board_cards=showdown_config.board_cards,
                hole_cards=showdown_config.hole_cards,
                seed=seed if seed is not None else showdown_config.seed,
            )
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    try:
        showdown = ShowdownRunner(showdown_config).deal()
    except PokerError as e:
        console.print(f"[red]Deal failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(render_board(showdown.board))
    if config.display.show_hole_cards:
        for player in showdown.players:
            console.print(f"  [cyan]{player.name}[/cyan]: {render_cards(player.hole_cards)}")
    console.print()
    console.print(
        render_standings(
            showdown.ledger,
            showdown.players if config.display.show_hole_cards else None,
            show_breakdown=config.display.show_breakdown,
        )
    )


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="5 to 7 cards, e.g. As Kd Qh Jc Ts"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Evaluate a single hand."""
    configure_logging(verbose)
    parsed = _parse_cards(cards)
    try:
        result = HandEvaluator.evaluate(parsed, "Hand")
    except PokerError as e:
        console.print(f"[red]Cannot evaluate hand: {e}[/red]")
        raise typer.Exit(1)
    console.print(render_result(result))


@app.command()
def rank(
    hands: List[str] = typer.Argument(..., help="Comma separated hands, e.g. As,Ad,2c,7h,9s"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Rank several hands against each other."""
    configure_logging(verbose)
    ledger = HandResultLedger()
    for i, hand in enumerate(hands, start=1):
        try:
            ledger.add_hand(_parse_cards(hand.split(",")), f"Hand {i}")
        except PokerError as e:
            console.print(f"[red]Hand {i}: {e}[/red]")
            raise typer.Exit(1)
    console.print(render_standings(ledger))


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(Path("showdown.yaml"), help="Where to write the config"),
) -> None:
    """Write the default configuration as YAML."""
    save_config(DEFAULT_CONFIG, path)
    console.print(f"Wrote default config to [green]{path}[/green]")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
