"""Role catalog for the 8-seat script.

The roles, the four legal game types and the seat-name pool are declared in
``catalog.yaml`` next to this module and loaded once at import.  Nothing in
here is mutated afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from ..errors import UnknownRoleError
from .model import GameType, InfoKind, PoisonDirection, Role, RoleType, Team, Timing

_CATALOG_FILE = Path(__file__).with_name("catalog.yaml")

try:
    _DATA = yaml.safe_load(_CATALOG_FILE.read_text(encoding="utf-8"))
except FileNotFoundError as exc:  # pragma: no cover - package ships the file
    raise SystemExit(f"Missing role catalog: {_CATALOG_FILE}") from exc

# Role ids the rules refer to directly.
IMP = "imp"
POISONER = "poisoner"
SCARLET_WOMAN = "scarlet_woman"
DRUNK = "drunk"
BUTLER = "butler"
FORTUNE_TELLER = "fortune_teller"

_TEAM_BY_TYPE = {
    RoleType.TOWNSFOLK: Team.GOOD,
    RoleType.OUTSIDER: Team.GOOD,
    RoleType.MINION: Team.EVIL,
    RoleType.DEMON: Team.EVIL,
}


def _build_role(entry: dict) -> Role:
    role_type = RoleType(entry["type"])
    believes = entry.get("believes_type")
    target = entry.get("target_type")
    return Role(
        id=entry["id"],
        name=entry["name"],
        type=role_type,
        team=_TEAM_BY_TYPE[role_type],
        description=" ".join(entry.get("description", "").split()),
        info_kind=InfoKind(entry.get("info_kind", "none")),
        timing=Timing(entry.get("timing", "none")),
        alive_required=bool(entry.get("alive_required", False)),
        self_deceived=bool(entry.get("self_deceived", False)),
        believes_type=RoleType(believes) if believes else None,
        target_type=RoleType(target) if target else None,
        poison_directions=tuple(PoisonDirection(d) for d in entry.get("poison_directions", [])),
        grants_red_herring=bool(entry.get("grants_red_herring", False)),
    )


ROLES: Dict[str, Role] = {r.id: r for r in (_build_role(e) for e in _DATA["roles"])}

# Per-type role pools, in catalog order.
SCRIPT: Dict[RoleType, Tuple[str, ...]] = {
    t: tuple(r.id for r in ROLES.values() if r.type is t) for t in RoleType
}

GAME_TYPES: Tuple[GameType, ...] = tuple(GameType(**g) for g in _DATA["game_types"])

COMPOSITION: Dict[RoleType, int] = {RoleType(k): int(v) for k, v in _DATA["composition"].items()}

SEAT_NAMES: Tuple[str, ...] = tuple(_DATA["seat_names"])


def find_role(role_id: str) -> Optional[Role]:
    """Return the role for ``role_id`` or ``None`` if it is not on the script."""
    return ROLES.get(role_id)


def get_role(role_id: str) -> Role:
    role = ROLES.get(role_id)
    if role is None:
        raise UnknownRoleError(role_id)
    return role


def roles_of_type(role_type: RoleType) -> List[Role]:
    return [ROLES[r] for r in SCRIPT[role_type]]


def info_roles() -> List[Role]:
    return [r for r in ROLES.values() if r.has_info]


def is_evil_role(role_id: str) -> bool:
    return get_role(role_id).team is Team.EVIL


def is_townsfolk(role_id: str) -> bool:
    return get_role(role_id).type is RoleType.TOWNSFOLK
