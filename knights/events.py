"""
Tournament event dataclasses: the shared language between the tournament
loop and any consumer (CLI display, tests).

All events are frozen and carry copies of the knights involved, so a
consumer never sees a knight change after the event was yielded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from knights.knight import Knight, Verdict

DrawHandling = Literal["requeue", "eliminate"]


@dataclass(frozen=True)
class TournamentStartEvent:
    """Fired once before the first bout."""

    contestants: list[Knight]          # in queue order
    draw_handling: DrawHandling
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class BoutCompleteEvent:
    """
    Fired after each pairing is resolved.

    ``first`` and ``second`` are the states after any looting.  ``winner`` is
    None on a draw.
    """

    round_num: int
    first: Knight
    second: Knight
    verdict: Verdict
    winner: Knight | None
    survivors: list[Knight]    # sent back to the queue this round
    eliminated: list[Knight]   # sent out this round


@dataclass(frozen=True)
class StalemateEvent:
    """The queue is cycling through draws; everyone left is about to be eliminated."""

    round_num: int
    contestants: list[Knight]


@dataclass(frozen=True)
class TournamentCompleteEvent:
    """Fired once the queue holds at most one knight."""

    winner: Knight | None
    rounds_played: int
    eliminated_count: int
    timestamp: datetime = field(default_factory=datetime.now)


# Union type for type-safe pattern matching in consumers
TournamentEvent = (
    TournamentStartEvent
    | BoutCompleteEvent
    | StalemateEvent
    | TournamentCompleteEvent
)
