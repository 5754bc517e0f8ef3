"""
Elimination tournament.

Rules:
- Contestants wait in a FIFO queue.  Each round the two knights at the front
  fight (Knight.fight).
- The winner loots the loser (``winner += loser``) and goes to the back of the
  queue; the loser is eliminated.
- Play continues while more than one knight is queued.  The last knight
  standing, if any, is the champion.
- Draw handling (configurable):
    "requeue"   - both go back to the queue untouched.  If the queue returns
                  to an order it has already been in since the last
                  elimination, nobody can make progress: stalemate, and every
                  remaining knight is eliminated.
    "eliminate" - both drawn knights are eliminated.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator, get_args

from knights.events import (
    BoutCompleteEvent,
    DrawHandling,
    StalemateEvent,
    TournamentCompleteEvent,
    TournamentEvent,
    TournamentStartEvent,
)
from knights.knight import Knight, trainee_knight

logger = logging.getLogger(__name__)


class Tournament:
    """A knockout over a queue of knights, with a record of the fallen."""

    def __init__(
        self,
        contestants: Iterable[Knight] = (),
        draw_handling: DrawHandling = "requeue",
    ) -> None:
        if draw_handling not in get_args(DrawHandling):
            raise ValueError(
                f"Unknown draw handling: {draw_handling!r}. "
                "Valid values: requeue, eliminate"
            )
        self.draw_handling = draw_handling
        self._contestants: deque[Knight] = deque(k.copy() for k in contestants)
        if not self._contestants:
            self._contestants.append(trainee_knight())
        self._eliminated: list[Knight] = []

    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    @property
    def contestants(self) -> list[Knight]:
        return list(self._contestants)

    @property
    def eliminated(self) -> list[Knight]:
        return list(self._eliminated)

    def add(self, knight: Knight) -> None:
        self._contestants.append(knight.copy())

    def remove(self, knight: Knight) -> None:
        """Drop every contestant with exactly the same gold, weapon and armour."""
        self._contestants = deque(
            k for k in self._contestants if not k.same_stats(knight)
        )

    def __iadd__(self, knight: Knight) -> Tournament:
        self.add(knight)
        return self

    def __isub__(self, knight: Knight) -> Tournament:
        self.remove(knight)
        return self

    def size(self) -> int:
        return len(self._contestants)

    def __len__(self) -> int:
        return len(self._contestants)

    @staticmethod
    def no_winner() -> None:
        """The value run() returns when nobody is left standing."""
        return None

    def run(self) -> Knight | None:
        """Play to the end and return the champion, or no_winner()."""
        for _ in self.rounds():
            pass
        return self._contestants[0] if self._contestants else self.no_winner()

    play = run

    def rounds(self) -> Iterator[TournamentEvent]:
        """
        Play the tournament, yielding events as it progresses.

        Yields:
            TournamentStartEvent    - once, before the first bout
            BoutCompleteEvent       - once per pairing
            StalemateEvent          - at most once, if draws stop all progress
            TournamentCompleteEvent - once, when at most one knight is left
        """
        yield TournamentStartEvent(
            contestants=_snapshot(self._contestants),
            draw_handling=self.draw_handling,
        )

        round_num = 0
        eliminated_before = len(self._eliminated)
        seen_orders: set[tuple[int, ...]] = set()

        while len(self._contestants) > 1:
            round_num += 1
            first = self._contestants.popleft()
            second = self._contestants.popleft()

            verdict = first.fight(second)
            survivors: list[Knight] = []
            fallen: list[Knight] = []

            if verdict == "equal":
                if self.draw_handling == "requeue":
                    survivors = [second, first]
                else:
                    fallen = [second, first]
                logger.info("Round %d: %s and %s draw", round_num, first, second)
            else:
                winner, loser = (first, second) if verdict == "greater" else (second, first)
                winner += loser
                survivors = [winner]
                fallen = [loser]
                logger.debug("Round %d: %s defeats %s", round_num, winner, loser)

            self._contestants.extend(survivors)
            self._eliminated.extend(fallen)

            yield BoutCompleteEvent(
                round_num=round_num,
                first=first.copy(),
                second=second.copy(),
                verdict=verdict,
                winner=None if verdict == "equal" else survivors[0].copy(),
                survivors=_snapshot(survivors),
                eliminated=_snapshot(fallen),
            )

            if fallen:
                seen_orders.clear()
                continue

            # Draws leave knights untouched, so a repeated order repeats forever.
            order = tuple(id(k) for k in self._contestants)
            if order in seen_orders:
                logger.info(
                    "Round %d: stalemate, eliminating %d remaining knights",
                    round_num,
                    len(self._contestants),
                )
                yield StalemateEvent(
                    round_num=round_num,
                    contestants=_snapshot(self._contestants),
                )
                self._eliminated.extend(self._contestants)
                self._contestants.clear()
                break
            seen_orders.add(order)

        champion = self._contestants[0] if self._contestants else None
        if champion is None:
            logger.info("Tournament over after %d rounds: no winner", round_num)
        else:
            logger.info("Tournament over after %d rounds: %s wins", round_num, champion)

        yield TournamentCompleteEvent(
            winner=champion.copy() if champion is not None else None,
            rounds_played=round_num,
            eliminated_count=len(self._eliminated) - eliminated_before,
        )

    # ------------------------------------------------------------------ #
    # Copying and display                                                  #
    # ------------------------------------------------------------------ #

    def copy(self) -> Tournament:
        """Same queue, clean slate: the copy has no elimination history."""
        clone = Tournament(draw_handling=self.draw_handling)
        clone._contestants = deque(k.copy() for k in self._contestants)
        return clone

    __copy__ = copy

    def __str__(self) -> str:
        lines = [f"+ {k}" for k in self._contestants]
        lines += [f"+ {k}" for k in self._eliminated]
        lines.append("=")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Tournament(contestants={len(self._contestants)}, "
            f"eliminated={len(self._eliminated)}, draw_handling={self.draw_handling!r})"
        )


def _snapshot(knights: Iterable[Knight]) -> list[Knight]:
    return [k.copy() for k in knights]
