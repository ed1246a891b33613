"""Ability registry and base class.

Each information kind on the script has one ``Ability`` subclass in this
package.  An ability knows how to produce a truthful payload, a deceptive
payload, how to check a payload against a hypothetical world, and how to
phrase a payload for a player.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import AbstractSet, Dict, Optional, Sequence, Tuple, Type

from ..core.model import ClaimInfo, Hypothesis, InfoKind, Role, Seat
from ..errors import IncompleteAbilityTableError


@dataclass(frozen=True)
class VerifyContext:
    """Facts about the claim that are not carried in its payload."""
    claimer_seat: Seat
    alive: AbstractSet[Seat]
    role: Role


class Ability:
    """Base ability adapter."""
    kind: InfoKind = InfoKind.NONE

    def truth(self, world, seat: Seat, role: Role, rng: random.Random) -> Optional[ClaimInfo]:  # pragma: no cover - abstract
        raise NotImplementedError

    def lie(self, world, seat: Seat, role: Role, rng: random.Random) -> Optional[ClaimInfo]:  # pragma: no cover - abstract
        raise NotImplementedError

    def holds(self, info: ClaimInfo, hyp: Hypothesis, ctx: VerifyContext) -> bool:  # pragma: no cover - abstract
        """Is ``info`` factually correct in ``hyp``?"""
        raise NotImplementedError

    def describe(self, info: ClaimInfo, names: Sequence[str], role: Role) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


ABILITY_REGISTRY: Dict[InfoKind, Ability] = {}


def register_ability(cls: Type[Ability]) -> Type[Ability]:
    if cls.kind in ABILITY_REGISTRY:
        raise IncompleteAbilityTableError(f"Duplicate ability for {cls.kind.value}")
    ABILITY_REGISTRY[cls.kind] = cls()
    return cls


def ability_for(kind: InfoKind) -> Ability:
    return ABILITY_REGISTRY[kind]


def sorted_seats(*seats: Seat) -> Tuple[Seat, ...]:
    return tuple(sorted(seats))


def _check_complete() -> None:
    missing = [k.value for k in InfoKind if k is not InfoKind.NONE and k not in ABILITY_REGISTRY]
    if missing:
        raise IncompleteAbilityTableError(f"No ability registered for: {', '.join(missing)}")


from . import (  # noqa: E402  (registration side effects)
    closest_direction,
    either_demon,
    evil_neighbors,
    evil_pairs,
    one_good,
    one_of_two,
    step_count,
    three_one_evil,
    two_not_demon,
)

_check_complete()
