"""Washerwoman, Librarian and Investigator: 1 of 2 players is a particular role."""

from __future__ import annotations

from . import Ability, VerifyContext, register_ability, sorted_seats
from ..core.catalog import BUTLER, DRUNK, SCRIPT, get_role
from ..core.model import InfoKind, RolePairInfo, RoleType
from ..core.seating import other_seats

# Chance of the "none in play" lie when an outsider really is in play.
NO_OUTSIDER_LIE_CHANCE = 0.3


def _pair_info(a, b, role_id) -> RolePairInfo:
    return RolePairInfo(seats=sorted_seats(a, b), role=role_id)


@register_ability
class OneOfTwoIsRole(Ability):
    kind = InfoKind.ONE_OF_TWO_IS_ROLE

    def truth(self, world, seat, role, rng):
        target_type = role.target_type
        holders = [p for p in world.players if p.seat != seat and get_role(p.true_role).type is target_type]
        if not holders:
            # unreachable with exactly one outsider per game
            if target_type is RoleType.OUTSIDER:
                return RolePairInfo(seats=(), role=None, is_none=True)
            return None
        target = rng.choice(holders)
        other = rng.choice([p.seat for p in world.players if p.seat not in (seat, target.seat)])
        return _pair_info(target.seat, other, target.true_role)

    def lie(self, world, seat, role, rng):
        if role.target_type is RoleType.TOWNSFOLK:
            return self._lie_townsfolk(world, seat, rng)
        if role.target_type is RoleType.OUTSIDER:
            return self._lie_outsider(world, seat, rng)
        # nobody ever claims a minion, so there is no public claim to lean on
        return self._lie_generic(world, seat, role.target_type, rng)

    def _lie_generic(self, world, seat, target_type, rng):
        named = rng.choice(SCRIPT[target_type])
        valid = [p.seat for p in world.players if p.seat != seat and p.true_role != named]
        if len(valid) < 2:
            valid = other_seats(seat)
        a, b = rng.sample(valid, 2)
        return _pair_info(a, b, named)

    def _lie_townsfolk(self, world, seat, rng):
        # Name a townsfolk someone claims without holding it, so the lie
        # survives a cross-check against public claims.
        false_claimers = [
            p for p in world.players
            if p.seat != seat
            and p.claimed_role != p.true_role
            and get_role(p.claimed_role).type is RoleType.TOWNSFOLK
        ]
        if false_claimers:
            claimer = rng.choice(false_claimers)
            named = claimer.claimed_role
            seconds = [
                p.seat for p in world.players
                if p.seat not in (seat, claimer.seat) and p.true_role != named
            ]
            if seconds:
                return _pair_info(claimer.seat, rng.choice(seconds), named)
        return self._lie_generic(world, seat, RoleType.TOWNSFOLK, rng)

    def _lie_outsider(self, world, seat, rng):
        has_outsider = any(
            p.seat != seat and get_role(p.true_role).type is RoleType.OUTSIDER for p in world.players
        )
        if has_outsider and rng.random() < NO_OUTSIDER_LIE_CHANCE:
            return RolePairInfo(seats=(), role=None, is_none=True)

        order = [BUTLER, DRUNK] if rng.random() < 0.5 else [DRUNK, BUTLER]
        for outsider in order:
            if outsider == BUTLER:
                claimers = [
                    p for p in world.players
                    if p.seat != seat and p.claimed_role == BUTLER and p.true_role != BUTLER
                ]
                if not claimers:
                    continue
                claimer = rng.choice(claimers)
                seconds = [
                    p.seat for p in world.players
                    if p.seat not in (seat, claimer.seat) and p.true_role != BUTLER
                ]
                if seconds:
                    return _pair_info(claimer.seat, rng.choice(seconds), BUTLER)
            else:
                # nobody publicly claims the Drunk
                valid = [p.seat for p in world.players if p.seat != seat and p.true_role != DRUNK]
                if len(valid) >= 2:
                    a, b = rng.sample(valid, 2)
                    return _pair_info(a, b, DRUNK)
        return self._lie_generic(world, seat, RoleType.OUTSIDER, rng)

    def holds(self, info, hyp, ctx: VerifyContext):
        if info.is_none:
            target_type = ctx.role.target_type
            return not any(get_role(r).type is target_type for r in hyp.true_roles)
        return any(hyp.true_role(s) == info.role for s in info.seats)

    def describe(self, info, names, role):
        if info.is_none:
            return f"There are no {role.target_type.value.capitalize()}s in play."
        a, b = info.seats
        return f"One of {names[a]} or {names[b]} is the {get_role(info.role).name}."
