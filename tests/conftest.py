import pytest

from imphunt.core.catalog import IMP
from imphunt.core.model import PLAYER_COUNT, Hypothesis, Player, Solution
from imphunt.core.world import World


def build_world(
    demon,
    minion,
    minion_role,
    outsider,
    outsider_role,
    townsfolk,
    claimed,
    poison_direction=None,
    red_herring=None,
):
    """World with ``townsfolk`` handed out to the remaining seats in seat order."""
    solution = Solution(
        demon_seat=demon,
        minion_seat=minion,
        minion_role=minion_role,
        outsider_seat=outsider,
        outsider_role=outsider_role,
        poison_direction=poison_direction,
        red_herring=red_herring,
    )
    remaining = iter(townsfolk)
    players = []
    for seat in range(PLAYER_COUNT):
        if seat == demon:
            true_role = IMP
        elif seat == minion:
            true_role = minion_role
        elif seat == outsider:
            true_role = outsider_role
        else:
            true_role = next(remaining)
        players.append(Player(seat, true_role, claimed.get(seat, true_role)))
    return World(solution, tuple(players))


def hypothesis_of(world):
    return Hypothesis(world.solution, tuple(p.true_role for p in world.players))


@pytest.fixture
def make_world():
    return build_world


@pytest.fixture
def poisoner_world():
    """Imp 6, Poisoner 7 (adjacent), Drunk 5 bluffing Steward."""
    return build_world(
        demon=6, minion=7, minion_role="poisoner",
        outsider=5, outsider_role="drunk",
        townsfolk=["washerwoman", "chef", "librarian", "empath", "clockmaker"],
        claimed={5: "steward", 6: "noble", 7: "knight"},
        poison_direction=None,
        red_herring=2,
    )


@pytest.fixture
def butler_world():
    """Imp 3, Scarlet Woman 5 (not adjacent), Butler 7."""
    return build_world(
        demon=3, minion=5, minion_role="scarlet_woman",
        outsider=7, outsider_role="butler",
        townsfolk=["washerwoman", "chef", "clockmaker", "steward", "knight"],
        claimed={3: "noble", 5: "empath", 7: "butler"},
    )


@pytest.fixture
def as_hypothesis():
    return hypothesis_of
