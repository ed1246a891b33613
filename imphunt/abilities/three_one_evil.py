"""Noble: three players, exactly one of whom is evil."""

from __future__ import annotations

from . import Ability, register_ability
from ..core.model import InfoKind, SeatsInfo
from ..core.seating import other_seats

TWO_EVIL_LIE_CHANCE = 0.5


def _seats_info(seats) -> SeatsInfo:
    return SeatsInfo(tuple(sorted(seats)))


@register_ability
class ThreePlayersOneEvil(Ability):
    kind = InfoKind.THREE_PLAYERS_ONE_EVIL

    def truth(self, world, seat, role, rng):
        others = other_seats(seat)
        evil = [s for s in others if world.is_evil(s)]
        good = [s for s in others if not world.is_evil(s)]
        if not evil or len(good) < 2:
            return None
        return _seats_info([rng.choice(evil)] + rng.sample(good, 2))

    def lie(self, world, seat, role, rng):
        """Three players with zero or two evil among them."""
        others = other_seats(seat)
        evil = [s for s in others if world.is_evil(s)]
        good = [s for s in others if not world.is_evil(s)]
        two_evil_possible = len(evil) >= 2 and len(good) >= 1

        if two_evil_possible and rng.random() < TWO_EVIL_LIE_CHANCE:
            return _seats_info(rng.sample(evil, 2) + [rng.choice(good)])
        if len(good) >= 3:
            return _seats_info(rng.sample(good, 3))
        if two_evil_possible:
            return _seats_info(evil[:2] + [rng.choice(good)])
        return None

    def holds(self, info, hyp, ctx):
        return sum(1 for s in info.seats if hyp.is_evil(s)) == 1

    def describe(self, info, names, role):
        listed = ", ".join(names[s] for s in info.seats)
        return f"Among {listed}, exactly 1 is evil."
