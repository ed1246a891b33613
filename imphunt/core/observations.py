"""Indexing of observed claims and deaths for the solver."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .model import Claim, NightRecord, Seat

ClaimIndex = Dict[Tuple[Seat, int], List[Claim]]


def index_claims(claims: Iterable[Claim], through_night: int) -> ClaimIndex:
    """Group claims by ``(seat, night)``, dropping those after ``through_night``."""
    index: ClaimIndex = defaultdict(list)
    for claim in claims:
        if claim.night <= through_night:
            index[(claim.seat, claim.night)].append(claim)
    return dict(index)


def deaths_through(night_records: Iterable[NightRecord], through_night: int) -> FrozenSet[Seat]:
    return frozenset(
        rec.killed for rec in night_records
        if rec.night <= through_night and rec.killed is not None
    )


def nights_through(night_records: Iterable[NightRecord], through_night: int) -> List[NightRecord]:
    return sorted((r for r in night_records if r.night <= through_night), key=lambda r: r.night)
