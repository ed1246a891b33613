"""Shugenja: is the closest evil player clockwise, counter-clockwise or equidistant."""

from __future__ import annotations

from . import Ability, register_ability
from ..core.model import Direction, DirectionInfo, InfoKind
from ..core.seating import closest_evil_direction

_PHRASES = {
    Direction.CLOCKWISE: "clockwise from you",
    Direction.COUNTER_CLOCKWISE: "counter-clockwise from you",
    Direction.EQUIDISTANT: "equidistant in both directions",
}


@register_ability
class ClosestEvilDirection(Ability):
    kind = InfoKind.CLOSEST_EVIL_DIRECTION

    def truth(self, world, seat, role, rng):
        return DirectionInfo(closest_evil_direction(seat, world.evil_seats))

    def lie(self, world, seat, role, rng):
        actual = closest_evil_direction(seat, world.evil_seats)
        return DirectionInfo(rng.choice([d for d in Direction if d is not actual]))

    def holds(self, info, hyp, ctx):
        return info.direction == closest_evil_direction(ctx.claimer_seat, hyp.evil_seats)

    def describe(self, info, names, role):
        return f"The closest evil player is {_PHRASES[info.direction]}."
