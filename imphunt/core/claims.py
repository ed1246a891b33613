"""Claim generation and verification, dispatched by information kind."""

from __future__ import annotations

import random
from typing import Optional

from ..abilities import VerifyContext, ability_for
from .catalog import get_role
from .model import Claim, Hypothesis, Seat, Timing
from .world import World


def generate_claim(
    world: World,
    seat: Seat,
    claimed_role: str,
    should_lie: bool,
    night: int,
    rng: random.Random,
) -> Optional[Claim]:
    """Produce what ``seat`` reports on ``night`` while claiming ``claimed_role``.

    Returns ``None`` when the role has no information ability, does not act
    on this night, or needs a living holder and the seat is dead.
    """
    role = get_role(claimed_role)
    if not role.has_info or night < 1:
        return None
    if role.timing is Timing.FIRST_NIGHT and night != 1:
        return None
    if role.alive_required and not world.is_alive(seat):
        return None

    ability = ability_for(role.info_kind)
    info = ability.lie(world, seat, role, rng) if should_lie else ability.truth(world, seat, role, rng)
    if info is None:
        return None
    return Claim(
        seat=seat,
        role_id=role.id,
        night=night,
        info=info,
        description=ability.describe(info, world.seat_names, role),
    )


def verify_claim(claim: Claim, hyp: Hypothesis, should_be_true: bool, ctx: VerifyContext) -> bool:
    """A truthful seat's claim must be correct in ``hyp``; a lying seat's must be wrong."""
    role = get_role(claim.role_id)
    if not role.has_info:
        return True
    return ability_for(role.info_kind).holds(claim.info, hyp, ctx) == should_be_true
