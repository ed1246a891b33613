"""Empath: how many alive neighbours are evil."""

from __future__ import annotations

from . import Ability, register_ability
from ..core.model import CountInfo, InfoKind
from ..core.seating import alive_neighbors


def _evil_neighbor_count(seat, alive, is_evil):
    neighbours = alive_neighbors(seat, alive)
    return sum(1 for s in neighbours if is_evil(s)), len(neighbours)


@register_ability
class EvilNeighborCount(Ability):
    kind = InfoKind.EVIL_NEIGHBOR_COUNT

    def truth(self, world, seat, role, rng):
        count, _ = _evil_neighbor_count(seat, world.alive_seats(), world.is_evil)
        return CountInfo(count)

    def lie(self, world, seat, role, rng):
        actual, total = _evil_neighbor_count(seat, world.alive_seats(), world.is_evil)
        return CountInfo(rng.choice([c for c in range(total + 1) if c != actual]))

    def holds(self, info, hyp, ctx):
        count, _ = _evil_neighbor_count(ctx.claimer_seat, ctx.alive, hyp.is_evil)
        return info.count == count

    def describe(self, info, names, role):
        n = info.count
        return f"{n} of your alive neighbours {'is' if n == 1 else 'are'} evil."
