from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, List, Optional, Tuple

from .catalog import DRUNK
from .model import PLAYER_COUNT, Claim, DeclaredRole, NightRecord, Player, Seat, Solution


def default_seat_names() -> Tuple[str, ...]:
    return tuple(f"Player {i + 1}" for i in range(PLAYER_COUNT))


@dataclass(frozen=True)
class World:
    """Ground truth of a game being generated.

    Transitions never mutate: ``with_night`` and ``kill`` return a new world.
    """
    solution: Solution
    players: Tuple[Player, ...]
    seat_names: Tuple[str, ...] = default_seat_names()
    nights: Tuple[NightRecord, ...] = ()

    # -- transitions ------------------------------------------------------

    def with_night(self, record: NightRecord) -> "World":
        return replace(self, nights=self.nights + (record,))

    def kill(self, seat: Seat) -> "World":
        players = tuple(p.killed() if p.seat == seat else p for p in self.players)
        return replace(self, players=players)

    # -- secret facts -----------------------------------------------------

    @property
    def demon_seat(self) -> Seat:
        return self.solution.demon_seat

    @property
    def minion_seat(self) -> Seat:
        return self.solution.minion_seat

    @property
    def evil_seats(self) -> Tuple[Seat, Seat]:
        return self.solution.evil_seats

    @property
    def red_herring(self) -> Optional[Seat]:
        return self.solution.red_herring

    @property
    def current_night(self) -> int:
        return self.nights[-1].night if self.nights else 0

    def true_role(self, seat: Seat) -> str:
        return self.players[seat].true_role

    def claimed_role(self, seat: Seat) -> str:
        return self.players[seat].claimed_role

    def is_evil(self, seat: Seat) -> bool:
        return self.solution.is_evil(seat)

    def is_drunk(self, seat: Seat) -> bool:
        return self.solution.outsider_role == DRUNK and self.solution.outsider_seat == seat

    def is_lying(self, seat: Seat, poison_target: Optional[Seat]) -> bool:
        """Whether ``seat``'s information is wrong tonight."""
        return self.is_evil(seat) or self.is_drunk(seat) or seat == poison_target

    # -- public state -----------------------------------------------------

    def alive_seats(self) -> FrozenSet[Seat]:
        return frozenset(p.seat for p in self.players if p.alive)

    def dead_seats(self) -> List[Seat]:
        return [p.seat for p in self.players if not p.alive]

    def is_alive(self, seat: Seat) -> bool:
        return self.players[seat].alive

    def declared_roles(self) -> Tuple[DeclaredRole, ...]:
        return tuple(DeclaredRole(p.seat, p.claimed_role) for p in self.players)

    def claims_through(self, night: int) -> List[Claim]:
        return [c for rec in self.nights if rec.night <= night for c in rec.claims]

    def deaths_through(self, night: int) -> List[Seat]:
        return [rec.killed for rec in self.nights if rec.night <= night and rec.killed is not None]
