"""Seat arithmetic on the fixed ring of ``PLAYER_COUNT`` seats (0-based)."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Tuple

from .model import PLAYER_COUNT, Direction, PoisonDirection, Seat


def _mod(n: int) -> int:
    return n % PLAYER_COUNT


def cw_neighbor(seat: Seat) -> Seat:
    return _mod(seat + 1)


def ccw_neighbor(seat: Seat) -> Seat:
    return _mod(seat - 1)


def neighbors(seat: Seat) -> Tuple[Seat, Seat]:
    """Both immediate neighbours as ``(ccw, cw)``."""
    return ccw_neighbor(seat), cw_neighbor(seat)


def all_seats() -> List[Seat]:
    return list(range(PLAYER_COUNT))


def other_seats(seat: Seat) -> List[Seat]:
    return [s for s in range(PLAYER_COUNT) if s != seat]


def alive_neighbors(seat: Seat, alive: AbstractSet[Seat]) -> List[Seat]:
    """Nearest living seat in each direction, counter-clockwise first.

    Dead seats are skipped.  When only one other seat is alive it is
    returned once, not twice.
    """
    found: List[Seat] = []
    for step in (-1, 1):
        for i in range(1, PLAYER_COUNT):
            candidate = _mod(seat + step * i)
            if candidate in alive:
                if candidate not in found:
                    found.append(candidate)
                break
    return found


def poison_target(poisoner_seat: Seat, direction: PoisonDirection, night: int) -> Seat:
    """Seat poisoned on ``night``: a neighbour on night 1, one seat further each night after."""
    step = 1 if direction is PoisonDirection.CW else -1
    return _mod(poisoner_seat + step * night)


def count_evil_pairs(evil_seats: Iterable[Seat]) -> int:
    # only the clockwise neighbour is checked so each pair counts once
    evil = set(evil_seats)
    return sum(1 for s in evil if cw_neighbor(s) in evil)


def steps_to_nearest(source: Seat, targets: Iterable[Seat]) -> int:
    """Shortest arc distance from ``source`` to any of ``targets``."""
    best = PLAYER_COUNT
    for target in targets:
        dist = min(_mod(target - source), _mod(source - target))
        if dist < best:
            best = dist
    return best


def closest_evil_direction(seat: Seat, evil_seats: Iterable[Seat]) -> Direction:
    min_cw = PLAYER_COUNT
    min_ccw = PLAYER_COUNT
    for evil in evil_seats:
        if evil == seat:
            continue
        min_cw = min(min_cw, _mod(evil - seat))
        min_ccw = min(min_ccw, _mod(seat - evil))
    if min_cw < min_ccw:
        return Direction.CLOCKWISE
    if min_ccw < min_cw:
        return Direction.COUNTER_CLOCKWISE
    return Direction.EQUIDISTANT
