import pytest

from imphunt.core.catalog import (
    GAME_TYPES,
    ROLES,
    SCRIPT,
    SEAT_NAMES,
    find_role,
    get_role,
    info_roles,
    is_evil_role,
    roles_of_type,
)
from imphunt.core.model import InfoKind, PoisonDirection, RoleType, Team, Timing
from imphunt.errors import ImphuntError, UnknownRoleError


def test_catalog_has_sixteen_roles():
    assert len(ROLES) == 16
    assert len(SCRIPT[RoleType.TOWNSFOLK]) == 11
    assert len(SCRIPT[RoleType.OUTSIDER]) == 2
    assert len(SCRIPT[RoleType.MINION]) == 2
    assert SCRIPT[RoleType.DEMON] == ("imp",)


def test_info_roles_cover_every_kind():
    kinds = {r.info_kind for r in info_roles()}
    assert kinds == {k for k in InfoKind if k is not InfoKind.NONE}
    assert all(r.type is RoleType.TOWNSFOLK for r in info_roles())


def test_role_attributes():
    empath = get_role("empath")
    assert empath.timing is Timing.EACH_NIGHT
    assert empath.alive_required
    assert get_role("chef").timing is Timing.FIRST_NIGHT
    assert get_role("librarian").target_type is RoleType.OUTSIDER
    assert get_role("fortune_teller").grants_red_herring
    assert get_role("poisoner").poison_directions == (PoisonDirection.CW, PoisonDirection.CCW)
    drunk = get_role("drunk")
    assert drunk.self_deceived
    assert drunk.believes_type is RoleType.TOWNSFOLK
    assert not drunk.has_info


def test_teams():
    assert get_role("imp").team is Team.EVIL
    assert get_role("butler").team is Team.GOOD
    assert is_evil_role("scarlet_woman")
    assert not is_evil_role("washerwoman")


def test_game_types():
    combos = {(g.outsider, g.minion) for g in GAME_TYPES}
    assert combos == {
        ("drunk", "poisoner"),
        ("drunk", "scarlet_woman"),
        ("butler", "poisoner"),
        ("butler", "scarlet_woman"),
    }
    for g in GAME_TYPES:
        assert g.has_poisoning == (g.minion == "poisoner")
        assert (g.outsider, g.minion, g.has_poisoning) == tuple(vars(g).values())


def test_roles_of_type():
    assert [r.id for r in roles_of_type(RoleType.MINION)] == ["poisoner", "scarlet_woman"]


def test_seat_name_pool():
    assert len(SEAT_NAMES) == 26
    assert len(set(SEAT_NAMES)) == 26


def test_unknown_role_is_fatal():
    with pytest.raises(UnknownRoleError) as excinfo:
        get_role("virgin")
    assert excinfo.value.role_id == "virgin"
    assert isinstance(excinfo.value, ImphuntError)
    assert isinstance(excinfo.value, KeyError)


def test_find_role_is_fallible():
    assert find_role("virgin") is None
    assert find_role("knight").name == "Knight"
