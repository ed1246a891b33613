"""Knight: two players who are not the Demon."""

from __future__ import annotations

from . import Ability, register_ability, sorted_seats
from ..core.model import InfoKind, SeatsInfo
from ..core.seating import other_seats


@register_ability
class TwoNotDemon(Ability):
    kind = InfoKind.TWO_NOT_DEMON

    def truth(self, world, seat, role, rng):
        candidates = [s for s in other_seats(seat) if s != world.demon_seat]
        return SeatsInfo(sorted_seats(*rng.sample(candidates, 2)))

    def lie(self, world, seat, role, rng):
        # the Demon is always one of the two
        candidates = [s for s in other_seats(seat) if s != world.demon_seat]
        return SeatsInfo(sorted_seats(world.demon_seat, rng.choice(candidates)))

    def holds(self, info, hyp, ctx):
        return all(s != hyp.demon_seat for s in info.seats)

    def describe(self, info, names, role):
        a, b = info.seats
        return f"{names[a]} and {names[b]} are NOT the Demon."
