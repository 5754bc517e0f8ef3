"""
Knights tournament package.

Knight is the value type; Tournament runs the elimination queue over knights.
"""

from __future__ import annotations

from knights.events import (
    BoutCompleteEvent,
    DrawHandling,
    StalemateEvent,
    TournamentCompleteEvent,
    TournamentEvent,
    TournamentStartEvent,
)
from knights.knight import MAX_GOLD, Knight, Verdict, max_diff_classes, trainee_knight
from knights.tournament import Tournament

__all__ = [
    # Knights
    "MAX_GOLD",
    "Knight",
    "Verdict",
    "max_diff_classes",
    "trainee_knight",
    # Tournament
    "DrawHandling",
    "Tournament",
    # Events
    "TournamentEvent",
    "TournamentStartEvent",
    "BoutCompleteEvent",
    "StalemateEvent",
    "TournamentCompleteEvent",
]
