from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple, Union

PLAYER_COUNT = 8
MAX_NIGHTS = 6


class Team(str, Enum):
    """Which side a role plays for."""
    GOOD = "good"
    EVIL = "evil"


class RoleType(str, Enum):
    TOWNSFOLK = "townsfolk"
    OUTSIDER = "outsider"
    MINION = "minion"
    DEMON = "demon"


class InfoKind(str, Enum):
    """The information ability a role grants."""
    ONE_OF_TWO_IS_ROLE = "one_of_two_is_role"
    EVIL_PAIR_COUNT = "evil_pair_count"
    STEP_COUNT = "step_count"
    THREE_PLAYERS_ONE_EVIL = "three_players_one_evil"
    TWO_NOT_DEMON = "two_not_demon"
    ONE_GOOD_PLAYER = "one_good_player"
    CLOSEST_EVIL_DIRECTION = "closest_evil_direction"
    EVIL_NEIGHBOR_COUNT = "evil_neighbor_count"
    IS_EITHER_DEMON = "is_either_demon"
    NONE = "none"


class Timing(str, Enum):
    FIRST_NIGHT = "first_night"
    EACH_NIGHT = "each_night"
    NONE = "none"


class Direction(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"
    EQUIDISTANT = "equidistant"


class PoisonDirection(str, Enum):
    CW = "cw"
    CCW = "ccw"


class Mode(str, Enum):
    PROGRESSIVE = "progressive"
    ALL_AT_ONCE = "all_at_once"


Seat = int


@dataclass(frozen=True)
class Role:
    """Immutable catalog entry."""
    id: str
    name: str
    type: RoleType
    team: Team
    description: str = ""
    info_kind: InfoKind = InfoKind.NONE
    timing: Timing = Timing.NONE
    alive_required: bool = False
    self_deceived: bool = False
    believes_type: Optional[RoleType] = None
    target_type: Optional[RoleType] = None
    poison_directions: Tuple[PoisonDirection, ...] = ()
    grants_red_herring: bool = False

    @property
    def has_info(self) -> bool:
        return self.info_kind is not InfoKind.NONE


@dataclass(frozen=True)
class GameType:
    """One of the four outsider x minion combinations on the script."""
    outsider: str
    minion: str
    has_poisoning: bool


@dataclass(frozen=True)
class Player:
    seat: Seat
    true_role: str
    claimed_role: str
    alive: bool = True

    def killed(self) -> "Player":
        return Player(self.seat, self.true_role, self.claimed_role, alive=False)


@dataclass(frozen=True)
class DeclaredRole:
    """What a seat publicly claims to be."""
    seat: Seat
    claimed_role: str


# ---------------------------------------------------------------------------
# Claim payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RolePairInfo:
    """One of two seats holds ``role``; or, with ``is_none``, none of that type is in play."""
    seats: Tuple[Seat, ...]
    role: Optional[str]
    is_none: bool = False


@dataclass(frozen=True)
class CountInfo:
    count: int


@dataclass(frozen=True)
class DirectionInfo:
    direction: Direction


@dataclass(frozen=True)
class SeatInfo:
    seat: Seat


@dataclass(frozen=True)
class SeatsInfo:
    seats: Tuple[Seat, ...]


@dataclass(frozen=True)
class SeatsAnswerInfo:
    seats: Tuple[Seat, ...]
    answer: bool


ClaimInfo = Union[RolePairInfo, CountInfo, DirectionInfo, SeatInfo, SeatsInfo, SeatsAnswerInfo]


@dataclass(frozen=True)
class Claim:
    """Information a seat reports for one night, under its declared role."""
    seat: Seat
    role_id: str
    night: int
    info: ClaimInfo
    description: str = field(default="", compare=False)


@dataclass(frozen=True)
class NightRecord:
    night: int
    claims: Tuple[Claim, ...] = ()
    killed: Optional[Seat] = None
    poison_target: Optional[Seat] = None


# ---------------------------------------------------------------------------
# Secret world and solver output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Solution:
    """The hidden assignment a puzzle is built around."""
    demon_seat: Seat
    minion_seat: Seat
    minion_role: str
    outsider_seat: Seat
    outsider_role: str
    poison_direction: Optional[PoisonDirection] = None
    red_herring: Optional[Seat] = None

    @property
    def evil_seats(self) -> Tuple[Seat, Seat]:
        return (self.demon_seat, self.minion_seat)

    def is_evil(self, seat: Seat) -> bool:
        return seat == self.demon_seat or seat == self.minion_seat


@dataclass(frozen=True)
class Hypothesis:
    """A fully specified candidate world considered by the solver."""
    solution: Solution
    true_roles: Tuple[str, ...]

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

    def true_role(self, seat: Seat) -> str:
        return self.true_roles[seat]

    def is_evil(self, seat: Seat) -> bool:
        return self.solution.is_evil(seat)


@dataclass(frozen=True)
class Checkpoint:
    night: int
    possible_demons: FrozenSet[Seat]
    hypothesis_count: int

    @property
    def day(self) -> int:
        return self.night

    @property
    def candidate_count(self) -> int:
        return len(self.possible_demons)
