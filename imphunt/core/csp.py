"""Brute-force hypothesis solver.

Every structurally possible secret world is enumerated and kept only if
each observed claim is right when its seat should be truthful and wrong
when its seat should be lying.  The search space is fixed and small
(4 game types x 336 seat triples x <=2 poison directions x <=6 red
herrings), so plain nested loops are used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from itertools import permutations
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from ..abilities import VerifyContext
from .catalog import DRUNK, GAME_TYPES, get_role
from .claims import verify_claim
from .constraints import build_true_roles, declares_red_herring_ability, red_herring_candidates, satisfies
from .model import PLAYER_COUNT, Checkpoint, Claim, DeclaredRole, Hypothesis, NightRecord, Seat, Solution
from .observations import ClaimIndex, deaths_through, index_claims, nights_through
from .seating import poison_target

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    possible_demons: FrozenSet[Seat]
    surviving_hypotheses: Tuple[Hypothesis, ...]


def declared_by_seat(declared_roles: Sequence[Union[DeclaredRole, str]]) -> Tuple[str, ...]:
    """Normalise declarations to a tuple of role ids indexed by seat."""
    if len(declared_roles) != PLAYER_COUNT:
        raise ValueError(f"Expected {PLAYER_COUNT} declared roles, got {len(declared_roles)}")
    by_seat: List[Optional[str]] = [None] * PLAYER_COUNT
    for i, entry in enumerate(declared_roles):
        if isinstance(entry, DeclaredRole):
            if not 0 <= entry.seat < PLAYER_COUNT:
                raise ValueError(f"Declared seat {entry.seat} is outside 0..{PLAYER_COUNT - 1}")
            by_seat[entry.seat] = entry.claimed_role
        else:
            by_seat[i] = entry
    if any(r is None for r in by_seat):
        raise ValueError("Every seat needs exactly one declared role")
    for role_id in by_seat:
        get_role(role_id)
    return tuple(by_seat)


def _is_truthful(hyp: Hypothesis, seat: Seat, poisoned: Optional[Seat]) -> bool:
    sol = hyp.solution
    if sol.is_evil(seat) or seat == poisoned:
        return False
    return not (sol.outsider_role == DRUNK and sol.outsider_seat == seat)


def _consistent(hyp: Hypothesis, index: ClaimIndex, nights: Iterable[NightRecord]) -> bool:
    sol = hyp.solution
    alive = set(range(PLAYER_COUNT))
    for rec in nights:
        poisoned = None
        if sol.poison_direction is not None and sol.minion_seat in alive:
            poisoned = poison_target(sol.minion_seat, sol.poison_direction, rec.night)
        tonight = frozenset(alive)
        for seat in range(PLAYER_COUNT):
            claims = index.get((seat, rec.night))
            if not claims:
                continue
            truthful = _is_truthful(hyp, seat, poisoned)
            for claim in claims:
                ctx = VerifyContext(claimer_seat=seat, alive=tonight, role=get_role(claim.role_id))
                if not verify_claim(claim, hyp, truthful, ctx):
                    return False
        # the kill lands after the night's information
        if rec.killed is not None:
            alive.discard(rec.killed)
    return True


def solve(
    observed_claims: Iterable[Claim],
    night_records: Sequence[NightRecord],
    declared_roles: Sequence[Union[DeclaredRole, str]],
    through_night: int,
) -> SolveResult:
    """Seats that could still be the Demon given everything up to ``through_night``."""
    declared = declared_by_seat(declared_roles)
    dead: AbstractSet[Seat] = deaths_through(night_records, through_night)
    index = index_claims(observed_claims, through_night)
    nights = nights_through(night_records, through_night)
    use_red_herring = declares_red_herring_ability(declared)

    hypotheses: List[Hypothesis] = []
    demons = set()
    for game_type in GAME_TYPES:
        directions = get_role(game_type.minion).poison_directions if game_type.has_poisoning else ()
        for demon, minion, outsider in permutations(range(PLAYER_COUNT), 3):
            # the Demon never dies
            if demon in dead:
                continue
            base = Solution(
                demon_seat=demon,
                minion_seat=minion,
                minion_role=game_type.minion,
                outsider_seat=outsider,
                outsider_role=game_type.outsider,
            )
            true_roles = build_true_roles(base, declared)
            if true_roles is None or not satisfies(Hypothesis(base, true_roles), declared):
                continue
            herrings = red_herring_candidates(true_roles, base) if use_red_herring else [None]
            for direction in directions or (None,):
                for herring in herrings:
                    hyp = Hypothesis(replace(base, poison_direction=direction, red_herring=herring), true_roles)
                    if _consistent(hyp, index, nights):
                        hypotheses.append(hyp)
                        demons.add(demon)

    logger.debug(
        "solve through night %d: %d hypotheses, demons %s",
        through_night, len(hypotheses), sorted(demons),
    )
    return SolveResult(possible_demons=frozenset(demons), surviving_hypotheses=tuple(hypotheses))


def solve_progressive(
    observed_claims: Sequence[Claim],
    night_records: Sequence[NightRecord],
    declared_roles: Sequence[Union[DeclaredRole, str]],
) -> List[Checkpoint]:
    """One checkpoint per night, each using only what was known by then."""
    claims = list(observed_claims)
    checkpoints = []
    for night in range(1, len(night_records) + 1):
        result = solve(claims, night_records, declared_roles, night)
        checkpoints.append(Checkpoint(
            night=night,
            possible_demons=result.possible_demons,
            hypothesis_count=len(result.surviving_hypotheses),
        ))
    return checkpoints


def narrowing_stops(checkpoints: Iterable[Checkpoint]) -> List[Checkpoint]:
    """Checkpoints where the candidate set strictly shrank, ending at a unique Demon."""
    stops: List[Checkpoint] = []
    previous = float("inf")
    for cp in checkpoints:
        if cp.candidate_count < previous:
            stops.append(cp)
            previous = cp.candidate_count
        if cp.candidate_count == 1:
            break
    return stops
