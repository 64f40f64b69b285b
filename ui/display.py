"""Display utilities for terminal showdown output."""

from collections.abc import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker.cards import Card, Suit
from poker.hand_evaluator import HandResult
from poker.hand_values import HandValue, RankGroup
from poker.ledger import HandResultLedger
from poker.player import Player


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}

PLACE_STYLES = {1: "bold yellow", 2: "bold white", 3: "bold dark_orange"}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_cards(cards: Iterable[Card]) -> str:
    """Render cards side by side, highest first."""
    return " ".join(render_card(c) for c in sorted(cards, reverse=True))


def render_board(board: list[Card]) -> Panel:
    """Render the community cards."""
    return Panel(
        Text.from_markup(" ".join(render_card(c) for c in board), justify="center"),
        title="[bold yellow]Board[/bold yellow]",
        border_style="blue",
    )


def render_breakdown(breakdown: Iterable[HandValue]) -> str:
    """Render breakdown components separated by bars; kickers are marked."""
    parts = []
    for value in breakdown:
        if isinstance(value, RankGroup) and value.size == 1:
            parts.append(f"[dim]kicker[/dim] {render_cards(value.cards)}")
        else:
            parts.append(render_cards(value.cards))
    return " | ".join(parts)


def render_result(result: HandResult, show_breakdown: bool = True) -> Panel:
    """Render one evaluated hand."""
    lines = [f"[bold]{result.category}[/bold]"]
    if show_breakdown:
        lines.append(render_breakdown(result.breakdown))
    else:
        lines.append(" ".join(render_card(c) for c in result.cards))
    return Panel("\n".join(lines), title=result.id or None, border_style="green")


def render_standings(
    ledger: HandResultLedger,
    players: list[Player] | None = None,
    show_breakdown: bool = True,
) -> Table:
    """Render a ledger as a placement table; tied results share a row group."""
    hole_cards = {p.name: p.hole_cards for p in players or [] if p.hole_cards}

    table = Table(title="Standings", show_lines=False)
    table.add_column("Place", justify="right")
    table.add_column("Hand", style="cyan")
    if hole_cards:
        table.add_column("Hole")
    table.add_column("Category")
    if show_breakdown:
        table.add_column("Breakdown")

    for place, results in ledger.standings():
        style = PLACE_STYLES.get(place, "")
        for i, result in enumerate(results):
            place_cell = ""
            if i == 0:
                place_cell = f"[{style}]{place}[/{style}]" if style else str(place)
            row = [place_cell, result.id]
            if hole_cards:
                row.append(render_cards(hole_cards.get(result.id, ())))
            row.append(str(result.category))
            if show_breakdown:
                row.append(render_breakdown(result.breakdown))
            table.add_row(*row)
        table.add_section()

    return table
