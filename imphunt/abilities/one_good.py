"""Steward: one good player."""

from __future__ import annotations

from . import Ability, register_ability
from ..core.model import InfoKind, SeatInfo
from ..core.seating import other_seats


@register_ability
class OneGoodPlayer(Ability):
    kind = InfoKind.ONE_GOOD_PLAYER

    def truth(self, world, seat, role, rng):
        return SeatInfo(rng.choice([s for s in other_seats(seat) if not world.is_evil(s)]))

    def lie(self, world, seat, role, rng):
        return SeatInfo(rng.choice([s for s in world.evil_seats if s != seat]))

    def holds(self, info, hyp, ctx):
        return not hyp.is_evil(info.seat)

    def describe(self, info, names, role):
        return f"{names[info.seat]} is good."
