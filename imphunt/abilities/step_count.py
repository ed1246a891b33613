"""Clockmaker: steps from the Demon to its nearest Minion."""

from __future__ import annotations

from . import Ability, register_ability
from ..core.model import PLAYER_COUNT, CountInfo, InfoKind
from ..core.seating import steps_to_nearest


@register_ability
class StepCount(Ability):
    kind = InfoKind.STEP_COUNT

    def truth(self, world, seat, role, rng):
        return CountInfo(steps_to_nearest(world.demon_seat, [world.minion_seat]))

    def lie(self, world, seat, role, rng):
        actual = steps_to_nearest(world.demon_seat, [world.minion_seat])
        options = [d for d in range(1, PLAYER_COUNT // 2 + 1) if d != actual]
        return CountInfo(rng.choice(options))

    def holds(self, info, hyp, ctx):
        return info.count == steps_to_nearest(hyp.demon_seat, [hyp.minion_seat])

    def describe(self, info, names, role):
        n = info.count
        return f"The Demon and nearest Minion are {n} step{'' if n == 1 else 's'} apart."
