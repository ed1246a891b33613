"""Structural constraints on a candidate world.

These only look at who sits where and what everyone declared; no claim is
evaluated.  The solver uses them to prune before verification and the
generator uses the same list to validate its bluffs.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .catalog import BUTLER, DRUNK, FORTUNE_TELLER, IMP, get_role, is_townsfolk
from .model import PLAYER_COUNT, Hypothesis, Seat, Solution

Constraint = Callable[[Hypothesis, Sequence[str]], bool]


def build_true_roles(solution: Solution, declared: Sequence[str]) -> Optional[Tuple[str, ...]]:
    """Fill in every seat's true role, or ``None`` if the declarations rule it out.

    Seats outside the demon/minion/outsider triple are true Townsfolk and so
    hold exactly the role they declared; those roles must be Townsfolk and
    pairwise distinct.
    """
    roles: List[Optional[str]] = [None] * PLAYER_COUNT
    roles[solution.demon_seat] = IMP
    roles[solution.minion_seat] = solution.minion_role
    roles[solution.outsider_seat] = solution.outsider_role
    seen = set()
    for seat in range(PLAYER_COUNT):
        if roles[seat] is not None:
            continue
        claimed = declared[seat]
        if not is_townsfolk(claimed) or claimed in seen:
            return None
        seen.add(claimed)
        roles[seat] = claimed
    return tuple(roles)


def drunk_claims_unused_townsfolk(hyp: Hypothesis, declared: Sequence[str]) -> bool:
    sol = hyp.solution
    if sol.outsider_role != DRUNK:
        return True
    claimed = declared[sol.outsider_seat]
    if not is_townsfolk(claimed):
        return False
    return not any(
        declared[s] == claimed
        for s in range(PLAYER_COUNT)
        if s != sol.outsider_seat and not sol.is_evil(s)
    )


def butler_claims_self(hyp: Hypothesis, declared: Sequence[str]) -> bool:
    sol = hyp.solution
    return sol.outsider_role != BUTLER or declared[sol.outsider_seat] == BUTLER


def evil_claims_distinct(hyp: Hypothesis, declared: Sequence[str]) -> bool:
    demon, minion = hyp.evil_seats
    return declared[demon] != declared[minion]


def evil_never_claims_drunk(hyp: Hypothesis, declared: Sequence[str]) -> bool:
    return all(declared[s] != DRUNK for s in hyp.evil_seats)


def evil_claims_townsfolk_or_butler(hyp: Hypothesis, declared: Sequence[str]) -> bool:
    return all(
        declared[s] == BUTLER or is_townsfolk(declared[s])
        for s in hyp.evil_seats
    )


STRUCTURAL_CONSTRAINTS: Tuple[Constraint, ...] = (
    drunk_claims_unused_townsfolk,
    butler_claims_self,
    evil_claims_distinct,
    evil_never_claims_drunk,
    evil_claims_townsfolk_or_butler,
)


def satisfies(hyp: Hypothesis, declared: Sequence[str], constraints: Iterable[Constraint] = STRUCTURAL_CONSTRAINTS) -> bool:
    return all(c(hyp, declared) for c in constraints)


def declares_red_herring_ability(declared: Sequence[str]) -> bool:
    return any(get_role(r).grants_red_herring for r in declared)


def red_herring_candidates(true_roles: Sequence[str], solution: Solution) -> List[Seat]:
    """Good seats other than a true Fortune Teller."""
    return [
        s for s in range(PLAYER_COUNT)
        if not solution.is_evil(s) and true_roles[s] != FORTUNE_TELLER
    ]
