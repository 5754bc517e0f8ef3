"""
Rich-based CLI consumer for TournamentEvent objects.

Tournament-level events (start, bouts, stalemate, champion) are rendered
with Rich panels, rules and tables.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from knights.events import (
    BoutCompleteEvent,
    StalemateEvent,
    TournamentCompleteEvent,
    TournamentEvent,
    TournamentStartEvent,
)
from knights.knight import Knight
from knights.tournament import Tournament

console = Console(legacy_windows=False)


def display_tournament_event(event: TournamentEvent) -> None:
    """Dispatch a TournamentEvent to the appropriate display function."""
    match event:
        case TournamentStartEvent():
            _tournament_start(event)
        case BoutCompleteEvent():
            _bout_complete(event)
        case StalemateEvent():
            _stalemate(event)
        case TournamentCompleteEvent():
            _tournament_complete(event)


def render_tournament(tournament: Tournament) -> Table:
    """Table of every knight in the tournament, active ones first."""
    table = Table(
        title="Tournament",
        show_header=True,
        header_style="bold",
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Status", width=11)
    table.add_column("Gold", justify="right")
    table.add_column("Weapon", justify="right", width=7)
    table.add_column("Armour", justify="right", width=7)

    rows = [("active", k) for k in tournament.contestants]
    rows += [("eliminated", k) for k in tournament.eliminated]
    for i, (status, knight) in enumerate(rows, 1):
        style = "" if status == "active" else "dim"
        table.add_row(
            str(i),
            status,
            str(knight.gold),
            str(knight.weapon_class),
            str(knight.armour_class),
            style=style,
        )
    return table


# --------------------------------------------------------------------------- #
# Display functions                                                            #
# --------------------------------------------------------------------------- #

def _tournament_start(event: TournamentStartEvent) -> None:
    names = "  •  ".join(str(k) for k in event.contestants)
    console.print()
    console.print(
        Panel(
            f"[dim]Contestants ({len(event.contestants)}):[/]\n{names}\n\n"
            f"[dim]Draws: {event.draw_handling}  •  "
            f"{event.timestamp.strftime('%Y-%m-%d %H:%M:%S')}[/]",
            title="[bold green] Knights Tournament [/]",
            border_style="green",
            expand=False,
        )
    )
    console.print()


def _bout_complete(event: BoutCompleteEvent) -> None:
    label = f"[dim]Round {event.round_num:>3}[/]"
    if event.winner is None:
        summary = (
            f"[yellow]½[/] {_knight(event.first)} and {_knight(event.second)} draw"
        )
        if event.eliminated:
            summary += " [dim](both eliminated)[/]"
    else:
        loser = event.eliminated[0]
        summary = (
            f"[green]✓[/] [bold]{event.winner}[/] defeats {_knight(loser)}"
        )
    console.print(f"{label}  {summary}")


def _stalemate(event: StalemateEvent) -> None:
    console.print()
    console.print(
        f"[yellow]Stalemate after round {event.round_num}[/]: nobody can win, "
        f"eliminating {len(event.contestants)} knights"
    )


def _tournament_complete(event: TournamentCompleteEvent) -> None:
    if event.winner is None:
        body = "[bold red]No winner[/]"
    else:
        body = f"[bold yellow]★  {event.winner}[/]"
    console.print()
    console.print(
        Panel(
            f"{body}\n\n"
            f"[dim]{event.rounds_played} rounds  •  "
            f"{event.eliminated_count} eliminated  •  "
            f"{event.timestamp.strftime('%Y-%m-%d %H:%M:%S')}[/]",
            title="[bold green] Tournament Champion [/]",
            border_style="yellow",
            expand=False,
        )
    )


def _knight(knight: Knight) -> str:
    return f"[bold]{knight}[/]"
