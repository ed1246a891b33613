"""Fortune Teller: is either of two chosen players the Demon.

A good player (the red herring) always registers as the Demon to this
ability, so a sober answer is "yes" when either seat is the Demon or the
red herring.  A lying Fortune Teller gives the opposite answer.
"""

from __future__ import annotations

from . import Ability, register_ability, sorted_seats
from ..core.model import InfoKind, SeatsAnswerInfo
from ..core.seating import other_seats


def sober_answer(seats, demon_seat, red_herring) -> bool:
    return demon_seat in seats or (red_herring is not None and red_herring in seats)


def _choose(world, seat, rng):
    alive = world.alive_seats()
    others = [s for s in other_seats(seat) if s in alive]
    if len(others) < 2:
        others = other_seats(seat)
    return sorted_seats(*rng.sample(others, 2))


@register_ability
class IsEitherDemon(Ability):
    kind = InfoKind.IS_EITHER_DEMON

    def truth(self, world, seat, role, rng):
        chosen = _choose(world, seat, rng)
        return SeatsAnswerInfo(chosen, sober_answer(chosen, world.demon_seat, world.red_herring))

    def lie(self, world, seat, role, rng):
        chosen = _choose(world, seat, rng)
        return SeatsAnswerInfo(chosen, not sober_answer(chosen, world.demon_seat, world.red_herring))

    def holds(self, info, hyp, ctx):
        return info.answer == sober_answer(info.seats, hyp.demon_seat, hyp.red_herring)

    def describe(self, info, names, role):
        a, b = info.seats
        if info.answer:
            return f"You chose {names[a]} and {names[b]}. Yes, one of them is the Demon."
        return f"You chose {names[a]} and {names[b]}. No, neither is the Demon."
