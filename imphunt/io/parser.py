"""YAML input and output.

Observation files describe a table the way a player sees it: what each seat
declared, and per night the claims made and who died.  Both hand-written
files and puzzles written by ``dump_puzzle`` load here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..abilities import ability_for
from ..core.catalog import get_role
from ..core.config import GeneratorConfig
from ..core.model import (
    PLAYER_COUNT,
    Claim,
    ClaimInfo,
    CountInfo,
    DeclaredRole,
    Direction,
    DirectionInfo,
    InfoKind,
    NightRecord,
    RolePairInfo,
    SeatInfo,
    SeatsAnswerInfo,
    SeatsInfo,
)
from ..core.puzzle import Puzzle
from ..core.world import default_seat_names
from ..errors import ConfigError, ImphuntError


@dataclass
class Observations:
    declared_roles: Tuple[DeclaredRole, ...]
    claims: List[Claim] = field(default_factory=list)
    night_records: List[NightRecord] = field(default_factory=list)
    seat_names: Tuple[str, ...] = default_seat_names()

    @property
    def total_nights(self) -> int:
        return len(self.night_records)


def _read_yaml(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_config(path: str | Path) -> GeneratorConfig:
    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping")
    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown config keys: {', '.join(unknown)}")
    return GeneratorConfig(**data)


def _seat(value: Any) -> int:
    seat = int(value)
    if not 0 <= seat < PLAYER_COUNT:
        raise ConfigError(f"Seat {seat} is outside 0..{PLAYER_COUNT - 1}")
    return seat


def parse_info(kind: InfoKind, data: Dict[str, Any]) -> ClaimInfo:
    """Build the payload dataclass for ``kind`` from a plain mapping."""
    data = dict(data or {})
    try:
        if kind is InfoKind.ONE_OF_TWO_IS_ROLE:
            if data.get("is_none") or data.get("none"):
                return RolePairInfo(seats=(), role=None, is_none=True)
            role = get_role(data["role"]).id
            return RolePairInfo(seats=tuple(sorted(_seat(s) for s in data["seats"])), role=role)
        if kind is InfoKind.CLOSEST_EVIL_DIRECTION:
            return DirectionInfo(Direction(data["direction"]))
        if kind is InfoKind.ONE_GOOD_PLAYER:
            return SeatInfo(_seat(data["seat"]))
        if kind is InfoKind.IS_EITHER_DEMON:
            return SeatsAnswerInfo(tuple(sorted(_seat(s) for s in data["seats"])), bool(data["answer"]))
        if kind in (InfoKind.THREE_PLAYERS_ONE_EVIL, InfoKind.TWO_NOT_DEMON):
            return SeatsInfo(tuple(sorted(_seat(s) for s in data["seats"])))
        if kind in (InfoKind.EVIL_PAIR_COUNT, InfoKind.STEP_COUNT, InfoKind.EVIL_NEIGHBOR_COUNT):
            return CountInfo(int(data["count"]))
    except ImphuntError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"Malformed {kind.value} info {data!r}: {exc}") from exc
    raise ConfigError(f"Role kind {kind.value} carries no information")


_MALFORMED = (AttributeError, KeyError, TypeError, ValueError)


def _parse_declared(raw: Any) -> Tuple[DeclaredRole, ...]:
    if not isinstance(raw, (dict, list)):
        raise ConfigError("declared roles must be a mapping or a list")
    try:
        if isinstance(raw, dict):
            entries = [DeclaredRole(_seat(k), get_role(v).id) for k, v in raw.items()]
        else:
            entries = []
            for i, item in enumerate(raw):
                if isinstance(item, dict):
                    entries.append(DeclaredRole(_seat(item["seat"]), get_role(item["claimed_role"]).id))
                else:
                    entries.append(DeclaredRole(i, get_role(item).id))
    except ImphuntError:
        raise
    except _MALFORMED as exc:
        raise ConfigError(f"Malformed declared roles {raw!r}: {exc!r}") from exc
    if sorted(d.seat for d in entries) != list(range(PLAYER_COUNT)):
        raise ConfigError(f"Expected one declared role for each of {PLAYER_COUNT} seats")
    return tuple(sorted(entries, key=lambda d: d.seat))


def _parse_claim(item: Dict[str, Any], night: int, names) -> Claim:
    try:
        seat = _seat(item["seat"])
        role = get_role(item.get("role_id") or item["role"])
        claim_night = int(item.get("night", night))
        info = parse_info(role.info_kind, item.get("info", {}))
    except ImphuntError:
        raise
    except _MALFORMED as exc:
        raise ConfigError(f"Malformed claim {item!r} on night {night}: {exc!r}") from exc
    if claim_night != night:
        raise ConfigError(f"Claim {item!r} is listed under night {night} but says night {claim_night}")
    return Claim(
        seat=seat,
        role_id=role.id,
        night=night,
        info=info,
        description=item.get("description") or ability_for(role.info_kind).describe(info, names, role),
    )


def _parse_night(entry: Dict[str, Any], default: int, names) -> NightRecord:
    try:
        night = int(entry.get("night", entry.get("night_num", default)))
        raw_claims = entry.get("claims") or []
        killed = entry.get("killed")
        killed = _seat(killed) if killed is not None else None
    except ImphuntError:
        raise
    except _MALFORMED as exc:
        raise ConfigError(f"Malformed night {entry!r}: {exc!r}") from exc
    if not isinstance(raw_claims, list):
        raise ConfigError(f"Night {night}: claims must be a list")
    claims = tuple(_parse_claim(c, night, names) for c in raw_claims)
    return NightRecord(night=night, claims=claims, killed=killed)


def parse_observations(data: Dict[str, Any]) -> Observations:
    """Build solver input from a plain mapping.

    Nights must be numbered ``1..n`` with none missing or repeated, since the
    solver replays them in that order.
    """
    if not isinstance(data, dict):
        raise ConfigError("Observation file must be a mapping")
    names = tuple(data.get("seat_names") or default_seat_names())
    if len(names) != PLAYER_COUNT:
        raise ConfigError(f"Expected {PLAYER_COUNT} seat names, got {len(names)}")
    declared = _parse_declared(data.get("declared_roles", data.get("declared")))

    raw_nights = data.get("nights") or []
    if not isinstance(raw_nights, list):
        raise ConfigError("nights must be a list")
    records = [_parse_night(entry, i + 1, names) for i, entry in enumerate(raw_nights)]
    records.sort(key=lambda r: r.night)
    numbers = [r.night for r in records]
    if numbers != list(range(1, len(records) + 1)):
        raise ConfigError(f"Nights must be numbered 1..{len(records)} without gaps or repeats, got {numbers}")

    claims = [c for rec in records for c in rec.claims]
    return Observations(declared_roles=declared, claims=claims, night_records=records, seat_names=names)


def load_observations(path: str | Path) -> Observations:
    """Load a YAML observation file (or a dumped puzzle) for solving."""
    return parse_observations(_read_yaml(path))


def dump_puzzle(puzzle: Puzzle, path: Optional[str | Path] = None) -> str:
    text = yaml.safe_dump(puzzle.to_dict(), sort_keys=False, allow_unicode=True)
    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
    return text
