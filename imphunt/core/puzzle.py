"""The frozen puzzle record handed to presentation code."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .model import Checkpoint, Claim, ClaimInfo, DeclaredRole, Mode, Seat, Solution


@dataclass(frozen=True)
class PublicPlayer:
    seat: Seat
    seat_name: str
    claimed_role: str
    claimed_role_name: str
    alive: bool


@dataclass(frozen=True)
class ClaimView:
    seat: Seat
    seat_name: str
    role_id: str
    role_name: str
    night: int
    info: ClaimInfo
    description: str


@dataclass(frozen=True)
class PuzzleNight:
    night: int
    claims: Tuple[ClaimView, ...]
    killed: Optional[Seat]


@dataclass(frozen=True)
class Puzzle:
    """A generated puzzle.

    ``solution`` must not be shown to a player before the puzzle is over.
    """
    mode: Mode
    total_nights: int
    seat_names: Tuple[str, ...]
    players: Tuple[PublicPlayer, ...]
    declared_roles: Tuple[DeclaredRole, ...]
    nights: Tuple[PuzzleNight, ...]
    checkpoints: Tuple[Checkpoint, ...]
    solution: Solution
    all_claims: Tuple[Claim, ...]

    def to_dict(self) -> dict:
        """Plain-data form (lists, dicts, strings, ints) suitable for YAML or JSON."""
        return {
            "mode": self.mode.value,
            "total_nights": self.total_nights,
            "seat_names": list(self.seat_names),
            "players": [to_plain(p) for p in self.players],
            "declared_roles": [to_plain(d) for d in self.declared_roles],
            "nights": [to_plain(n) for n in self.nights],
            "checkpoints": [
                {
                    "day": cp.day,
                    "possible_demons": sorted(cp.possible_demons),
                    "candidate_count": cp.candidate_count,
                }
                for cp in self.checkpoints
            ],
            "solution": to_plain(self.solution),
            "all_claims": [to_plain(c) for c in self.all_claims],
        }


def to_plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (frozenset, set)):
        return sorted(to_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value
