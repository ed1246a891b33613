"""Chef: how many pairs of evil players sit next to each other."""

from __future__ import annotations

from . import Ability, register_ability
from ..core.model import CountInfo, InfoKind
from ..core.seating import count_evil_pairs


@register_ability
class EvilPairCount(Ability):
    kind = InfoKind.EVIL_PAIR_COUNT

    def truth(self, world, seat, role, rng):
        return CountInfo(count_evil_pairs(world.evil_seats))

    def lie(self, world, seat, role, rng):
        # two evil players make either 0 or 1 pair
        actual = count_evil_pairs(world.evil_seats)
        return CountInfo(rng.choice([c for c in (0, 1) if c != actual]))

    def holds(self, info, hyp, ctx):
        return info.count == count_evil_pairs(hyp.evil_seats)

    def describe(self, info, names, role):
        n = info.count
        return f"There {'is' if n == 1 else 'are'} {n} pair{'' if n == 1 else 's'} of evil players sitting next to each other."
