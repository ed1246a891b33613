import random
from dataclasses import replace

import pytest

from imphunt.abilities import ABILITY_REGISTRY, VerifyContext, ability_for
from imphunt.core.catalog import get_role, info_roles
from imphunt.core.claims import generate_claim, verify_claim
from imphunt.core.model import (
    CountInfo,
    Direction,
    DirectionInfo,
    InfoKind,
    NightRecord,
    RolePairInfo,
    RoleType,
    SeatsAnswerInfo,
)
from imphunt.core.seating import alive_neighbors, count_evil_pairs, steps_to_nearest
from imphunt.core.world import World
from imphunt.errors import UnknownRoleError

INFO_ROLE_IDS = [r.id for r in info_roles()]
SEEDS = range(25)


def _ctx(world, claim):
    return VerifyContext(claimer_seat=claim.seat, alive=world.alive_seats(), role=get_role(claim.role_id))


def test_every_info_kind_has_an_ability():
    assert set(ABILITY_REGISTRY) == {k for k in InfoKind if k is not InfoKind.NONE}


@pytest.mark.parametrize("role_id", INFO_ROLE_IDS)
def test_truthful_claims_verify_as_true(role_id, poisoner_world, as_hypothesis):
    hyp = as_hypothesis(poisoner_world)
    for seed in SEEDS:
        rng = random.Random(seed)
        for seat in range(5):
            claim = generate_claim(poisoner_world, seat, role_id, False, 1, rng)
            assert claim is not None
            assert verify_claim(claim, hyp, True, _ctx(poisoner_world, claim))
            assert not verify_claim(claim, hyp, False, _ctx(poisoner_world, claim))


@pytest.mark.parametrize("role_id", INFO_ROLE_IDS)
def test_deceptive_claims_verify_as_false(role_id, poisoner_world, as_hypothesis):
    hyp = as_hypothesis(poisoner_world)
    for seed in SEEDS:
        rng = random.Random(seed)
        for seat in range(8):
            claim = generate_claim(poisoner_world, seat, role_id, True, 1, rng)
            assert claim is not None
            assert verify_claim(claim, hyp, False, _ctx(poisoner_world, claim))


def test_truthful_pair_names_a_true_holder(poisoner_world):
    for seed in SEEDS:
        rng = random.Random(seed)
        for role_id in ("washerwoman", "librarian", "investigator"):
            info = generate_claim(poisoner_world, 0, role_id, False, 1, rng).info
            assert not info.is_none
            assert 0 not in info.seats
            assert any(poisoner_world.true_role(s) == info.role for s in info.seats)
            assert get_role(info.role).type is get_role(role_id).target_type


def test_deceptive_townsfolk_pair_is_corroborated_by_a_public_claim(poisoner_world):
    for seed in SEEDS:
        info = generate_claim(poisoner_world, 1, "washerwoman", True, 1, random.Random(seed)).info
        assert all(poisoner_world.true_role(s) != info.role for s in info.seats)
        assert any(poisoner_world.claimed_role(s) == info.role for s in info.seats)
        assert get_role(info.role).type is RoleType.TOWNSFOLK


def test_deceptive_outsider_pair_never_names_a_holder(make_world):
    # the Scarlet Woman bluffs Butler, so a Butler lie has a public claimant
    world = make_world(
        demon=2, minion=4, minion_role="scarlet_woman",
        outsider=6, outsider_role="drunk",
        townsfolk=["chef", "clockmaker", "noble", "steward", "knight"],
        claimed={2: "washerwoman", 4: "butler", 6: "empath"},
    )
    kinds = set()
    for seed in range(60):
        info = generate_claim(world, 0, "librarian", True, 1, random.Random(seed)).info
        if info.is_none:
            kinds.add("none")
            continue
        kinds.add(info.role)
        assert all(world.true_role(s) != info.role for s in info.seats)
        if info.role == "butler":
            assert any(world.claimed_role(s) == "butler" for s in info.seats)
    assert kinds == {"none", "butler", "drunk"}


def test_librarian_none_lie_only_when_outsider_in_play(poisoner_world):
    # seat 5 is the Drunk itself: no other outsider, so never "none"
    for seed in range(40):
        info = generate_claim(poisoner_world, 5, "librarian", True, 1, random.Random(seed)).info
        assert not info.is_none


def test_investigator_lie_uses_no_public_claim(poisoner_world):
    for seed in SEEDS:
        info = generate_claim(poisoner_world, 0, "investigator", True, 1, random.Random(seed)).info
        assert get_role(info.role).type is RoleType.MINION
        assert all(poisoner_world.true_role(s) != info.role for s in info.seats)


def test_pair_seats_are_sorted(poisoner_world):
    for seed in SEEDS:
        rng = random.Random(seed)
        for role_id in ("washerwoman", "knight", "noble", "fortune_teller"):
            for lie in (False, True):
                seats = generate_claim(poisoner_world, 1, role_id, lie, 1, rng).info.seats
                assert list(seats) == sorted(seats)


def test_counts_match_geometry(poisoner_world):
    rng = random.Random(3)
    evil = poisoner_world.evil_seats
    assert generate_claim(poisoner_world, 1, "chef", False, 1, rng).info == CountInfo(count_evil_pairs(evil))
    assert generate_claim(poisoner_world, 1, "chef", True, 1, rng).info == CountInfo(0)
    assert generate_claim(poisoner_world, 4, "clockmaker", False, 1, rng).info == CountInfo(steps_to_nearest(6, [7]))
    for seed in SEEDS:
        lie = generate_claim(poisoner_world, 4, "clockmaker", True, 1, random.Random(seed)).info
        assert lie.count in (2, 3, 4)


def test_empath_counts_alive_neighbors(poisoner_world):
    world = poisoner_world.kill(0)
    alive = world.alive_seats()
    assert alive_neighbors(1, alive) == [7, 2]
    truth = generate_claim(world, 1, "empath", False, 2, random.Random(1)).info
    assert truth == CountInfo(1)
    for seed in SEEDS:
        lie = generate_claim(world, 1, "empath", True, 2, random.Random(seed)).info
        assert lie.count in (0, 2)


def test_shugenja_lie_picks_a_wrong_direction(poisoner_world):
    truth = generate_claim(poisoner_world, 2, "shugenja", False, 1, random.Random(0)).info
    # seat 2: evil at 6 (4 either way) and 7 (3 counter-clockwise)
    assert truth == DirectionInfo(Direction.COUNTER_CLOCKWISE)
    seen = set()
    for seed in SEEDS:
        seen.add(generate_claim(poisoner_world, 2, "shugenja", True, 1, random.Random(seed)).info.direction)
    assert seen == {Direction.CLOCKWISE, Direction.EQUIDISTANT}


def test_fortune_teller_answers(poisoner_world):
    for seed in SEEDS:
        rng = random.Random(seed)
        truth = generate_claim(poisoner_world, 3, "fortune_teller", False, 1, rng).info
        expected = 6 in truth.seats or 2 in truth.seats
        assert truth.answer == expected
        lie = generate_claim(poisoner_world, 3, "fortune_teller", True, 1, rng).info
        assert lie.answer == (not (6 in lie.seats or 2 in lie.seats))
        assert 3 not in truth.seats and 3 not in lie.seats


def test_fortune_teller_picks_living_seats(poisoner_world):
    world = poisoner_world.kill(0).kill(1).kill(4)
    for seed in SEEDS:
        info = generate_claim(world, 3, "fortune_teller", False, 4, random.Random(seed)).info
        assert set(info.seats) <= world.alive_seats()


def test_knight_and_steward(poisoner_world):
    for seed in SEEDS:
        rng = random.Random(seed)
        assert 6 not in generate_claim(poisoner_world, 0, "knight", False, 1, rng).info.seats
        assert 6 in generate_claim(poisoner_world, 0, "knight", True, 1, rng).info.seats
        assert generate_claim(poisoner_world, 0, "steward", False, 1, rng).info.seat not in (0, 6, 7)
        assert generate_claim(poisoner_world, 0, "steward", True, 1, rng).info.seat in (6, 7)
        assert generate_claim(poisoner_world, 7, "steward", True, 1, rng).info.seat == 6


def test_noble_lie_has_zero_or_two_evil(poisoner_world):
    counts = set()
    for seed in range(40):
        info = generate_claim(poisoner_world, 0, "noble", True, 1, random.Random(seed)).info
        assert len(set(info.seats)) == 3
        counts.add(sum(1 for s in info.seats if poisoner_world.is_evil(s)))
    assert counts == {0, 2}


def test_no_claim_outside_schedule(poisoner_world):
    rng = random.Random(0)
    assert generate_claim(poisoner_world, 1, "chef", False, 2, rng) is None
    assert generate_claim(poisoner_world, 1, "chef", False, 0, rng) is None
    assert generate_claim(poisoner_world, 3, "empath", False, 0, rng) is None
    assert generate_claim(poisoner_world, 7, "butler", True, 1, rng) is None
    assert generate_claim(poisoner_world, 6, "imp", True, 1, rng) is None
    assert generate_claim(poisoner_world, 3, "empath", False, 3, rng) is not None


def test_dead_holder_gets_no_each_night_info(poisoner_world):
    world = poisoner_world.with_night(NightRecord(2, killed=3)).kill(3)
    assert generate_claim(world, 3, "empath", False, 3, random.Random(0)) is None
    assert generate_claim(world, 3, "fortune_teller", False, 3, random.Random(0)) is None


def test_unknown_claimed_role_raises(poisoner_world):
    with pytest.raises(UnknownRoleError):
        generate_claim(poisoner_world, 0, "undertaker", False, 1, random.Random(0))


def test_descriptions_name_the_seats(make_world):
    world = make_world(
        demon=3, minion=5, minion_role="scarlet_woman",
        outsider=7, outsider_role="butler",
        townsfolk=["washerwoman", "chef", "clockmaker", "steward", "knight"],
        claimed={3: "noble", 5: "empath", 7: "butler"},
    )
    world = World(world.solution, world.players, tuple("ABCDEFGH"))
    claim = generate_claim(world, 6, "knight", False, 1, random.Random(2))
    a, b = claim.info.seats
    assert claim.description == f"{'ABCDEFGH'[a]} and {'ABCDEFGH'[b]} are NOT the Demon."
    chef = generate_claim(world, 1, "chef", False, 1, random.Random(2))
    assert chef.description == "There are 0 pairs of evil players sitting next to each other."


def test_none_in_play_payload_describes_and_verifies(butler_world, as_hypothesis):
    librarian = get_role("librarian")
    ability = ability_for(InfoKind.ONE_OF_TWO_IS_ROLE)
    info = RolePairInfo(seats=(), role=None, is_none=True)
    ctx = VerifyContext(claimer_seat=0, alive=butler_world.alive_seats(), role=librarian)
    assert ability.describe(info, butler_world.seat_names, librarian) == "There are no Outsiders in play."
    assert not ability.holds(info, as_hypothesis(butler_world), ctx)


def test_red_herring_registers_as_demon(butler_world, as_hypothesis):
    hyp = as_hypothesis(butler_world)
    ability = ability_for(InfoKind.IS_EITHER_DEMON)
    ctx = VerifyContext(claimer_seat=0, alive=frozenset(range(8)), role=get_role("fortune_teller"))
    assert not ability.holds(SeatsAnswerInfo((1, 2), True), hyp, ctx)
    herring = replace(hyp, solution=replace(hyp.solution, red_herring=2))
    assert ability.holds(SeatsAnswerInfo((1, 2), True), herring, ctx)
