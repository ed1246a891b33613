"""Puzzle generation.

A single attempt builds a random secret world, simulates up to
``max_nights`` nights of claims and kills, and then asks the checkpoint
engine whether the timeline narrows to a unique Demon.  Attempts that do
not are thrown away; after ``max_retries`` failures ``None`` is returned.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple, Union

from .catalog import (
    BUTLER,
    COMPOSITION,
    DRUNK,
    GAME_TYPES,
    IMP,
    SCRIPT,
    SEAT_NAMES,
    get_role,
)
from .claims import generate_claim
from .config import GeneratorConfig
from .constraints import build_true_roles, declares_red_herring_ability, red_herring_candidates, satisfies
from .csp import narrowing_stops, solve_progressive
from .model import (
    PLAYER_COUNT,
    Checkpoint,
    Claim,
    Hypothesis,
    Mode,
    NightRecord,
    Player,
    RoleType,
    Seat,
    Solution,
)
from .puzzle import ClaimView, PublicPlayer, Puzzle, PuzzleNight
from .seating import all_seats, poison_target
from .world import World

logger = logging.getLogger(__name__)

BLUFF_ATTEMPTS = 20


def generate_puzzle(
    mode: Union[Mode, str, None] = None,
    rng: Optional[random.Random] = None,
    config: Optional[GeneratorConfig] = None,
) -> Optional[Puzzle]:
    """Generate a puzzle whose claims narrow to a single Demon.

    ``mode`` overrides ``config.mode``.  Without an explicit ``rng`` one is
    seeded from ``config.seed``.  Returns ``None`` when every attempt fails.
    """
    config = config or GeneratorConfig()
    mode = Mode(mode) if mode is not None else config.mode
    rng = rng or random.Random(config.seed)

    for attempt in range(1, config.max_retries + 1):
        puzzle = try_generate(mode, rng, config.max_nights)
        if puzzle is not None:
            logger.info(
                "generated %s puzzle on attempt %d: %d nights, %s + %s",
                mode.value, attempt, puzzle.total_nights,
                puzzle.solution.minion_role, puzzle.solution.outsider_role,
            )
            return puzzle
    logger.warning("no %s puzzle after %d attempts", mode.value, config.max_retries)
    return None


def try_generate(mode: Mode, rng: random.Random, max_nights: int) -> Optional[Puzzle]:
    """One attempt; ``None`` if the result would not be a fair puzzle."""
    game_type = rng.choice(GAME_TYPES)

    seats = all_seats()
    rng.shuffle(seats)
    demon, minion, outsider = seats[:3]
    townsfolk_seats = seats[3:]
    townsfolk_roles = rng.sample(SCRIPT[RoleType.TOWNSFOLK], COMPOSITION[RoleType.TOWNSFOLK])

    direction = None
    if game_type.has_poisoning:
        direction = rng.choice(get_role(game_type.minion).poison_directions)

    solution = Solution(
        demon_seat=demon,
        minion_seat=minion,
        minion_role=game_type.minion,
        outsider_seat=outsider,
        outsider_role=game_type.outsider,
        poison_direction=direction,
    )
    true_roles: List[str] = [""] * PLAYER_COUNT
    true_roles[demon] = IMP
    true_roles[minion] = game_type.minion
    true_roles[outsider] = game_type.outsider
    for seat, role_id in zip(townsfolk_seats, townsfolk_roles):
        true_roles[seat] = role_id

    declared = assign_bluffs(solution, tuple(true_roles), rng)
    if declared is None:
        logger.debug("no valid bluff set for %s + %s", game_type.minion, game_type.outsider)
        return None

    if declares_red_herring_ability(declared):
        solution = replace(solution, red_herring=rng.choice(red_herring_candidates(true_roles, solution)))

    names = tuple(sorted(rng.sample(SEAT_NAMES, PLAYER_COUNT)))
    players = tuple(Player(s, true_roles[s], declared[s]) for s in range(PLAYER_COUNT))
    world = simulate(World(solution, players, names), max_nights, rng)

    checkpoints = solve_progressive(world.claims_through(max_nights), world.nights, world.declared_roles())
    if not checkpoints:
        logger.debug("no nights simulated")
        return None

    if mode is Mode.ALL_AT_ONCE:
        solved = next((cp for cp in checkpoints if cp.candidate_count == 1), None)
        if solved is None:
            logger.debug("timeline never isolates the demon")
            return None
        shown = [cp for cp in checkpoints if cp.night <= solved.night]
        return build_puzzle(world, mode, solved.night, shown)

    stops = narrowing_stops(checkpoints)
    if not stops or stops[-1].candidate_count != 1:
        logger.debug("progressive narrowing ends at %s candidates", stops[-1].candidate_count if stops else None)
        return None
    return build_puzzle(world, mode, stops[-1].night, stops)


def assign_bluffs(solution: Solution, true_roles: Tuple[str, ...], rng: random.Random) -> Optional[Tuple[str, ...]]:
    """Pick declared roles for the Demon, Minion and Outsider.

    The Drunk claims a Townsfolk no true Townsfolk holds; the Butler claims
    itself; the evil pair claim distinct Townsfolk-or-Butler roles, never the
    Drunk and never the Drunk's claim.  Choices are redrawn a few times and
    checked against the solver's own structural constraints.
    """
    held = {true_roles[s] for s in range(PLAYER_COUNT) if not _is_special(solution, s)}
    townsfolk = list(SCRIPT[RoleType.TOWNSFOLK])
    evil_pool = [r for r in townsfolk + [BUTLER] if r != DRUNK]

    for _ in range(BLUFF_ATTEMPTS):
        if solution.outsider_role == DRUNK:
            drunk_options = [r for r in townsfolk if r not in held]
            if not drunk_options:
                return None
            outsider_claim = rng.choice(drunk_options)
        else:
            outsider_claim = BUTLER
        taken = {outsider_claim} if solution.outsider_role == DRUNK else set()

        demon_options = [r for r in evil_pool if r not in taken]
        if not demon_options:
            return None
        demon_claim = rng.choice(demon_options)
        minion_options = [r for r in demon_options if r != demon_claim]
        if not minion_options:
            return None
        minion_claim = rng.choice(minion_options)

        declared = list(true_roles)
        declared[solution.demon_seat] = demon_claim
        declared[solution.minion_seat] = minion_claim
        declared[solution.outsider_seat] = outsider_claim
        declared = tuple(declared)

        if build_true_roles(solution, declared) == true_roles and satisfies(Hypothesis(solution, true_roles), declared):
            return declared
    return None


def _is_special(solution: Solution, seat: Seat) -> bool:
    return solution.is_evil(seat) or seat == solution.outsider_seat


def simulate(world: World, max_nights: int, rng: random.Random) -> World:
    """Play out nights ``1..max_nights``: claims first, then the Demon's kill (night 2+)."""
    sol = world.solution
    for night in range(1, max_nights + 1):
        poisoned = None
        if sol.poison_direction is not None and world.is_alive(sol.minion_seat):
            poisoned = poison_target(sol.minion_seat, sol.poison_direction, night)

        claims: List[Claim] = []
        for player in world.players:
            if not player.alive:
                continue
            claim = generate_claim(
                world, player.seat, player.claimed_role, world.is_lying(player.seat, poisoned), night, rng,
            )
            if claim is not None:
                claims.append(claim)

        killed = None
        if night >= 2:
            victims = [p.seat for p in world.players if p.alive and p.seat != sol.demon_seat]
            if victims:
                killed = rng.choice(victims)

        world = world.with_night(NightRecord(night, tuple(claims), killed, poisoned))
        if killed is not None:
            world = world.kill(killed)
    return world


def build_puzzle(world: World, mode: Mode, total_nights: int, checkpoints: Sequence[Checkpoint]) -> Puzzle:
    names = world.seat_names
    dead = set(world.deaths_through(total_nights))
    players = tuple(
        PublicPlayer(
            seat=p.seat,
            seat_name=names[p.seat],
            claimed_role=p.claimed_role,
            claimed_role_name=get_role(p.claimed_role).name,
            alive=p.seat not in dead,
        )
        for p in world.players
    )
    nights = tuple(
        PuzzleNight(
            night=rec.night,
            claims=tuple(_view(c, names) for c in rec.claims),
            killed=rec.killed,
        )
        for rec in world.nights
        if rec.night <= total_nights
    )
    return Puzzle(
        mode=mode,
        total_nights=total_nights,
        seat_names=names,
        players=players,
        declared_roles=world.declared_roles(),
        nights=nights,
        checkpoints=tuple(cp for cp in checkpoints if cp.night <= total_nights),
        solution=world.solution,
        all_claims=tuple(world.claims_through(total_nights)),
    )


def _view(claim: Claim, names: Sequence[str]) -> ClaimView:
    return ClaimView(
        seat=claim.seat,
        seat_name=names[claim.seat],
        role_id=claim.role_id,
        role_name=get_role(claim.role_id).name,
        night=claim.night,
        info=claim.info,
        description=claim.description,
    )
