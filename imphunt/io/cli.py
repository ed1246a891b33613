"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from . import parser
from ..core.config import GeneratorConfig
from ..core.csp import solve, solve_progressive
from ..core.generator import generate_puzzle
from ..core.model import Mode
from ..errors import ImphuntError


def _names(seats, names) -> str:
    return ", ".join(f"{names[s]} (#{s})" for s in sorted(seats)) or "none"


def _cmd_generate(args: argparse.Namespace) -> int:
    config = parser.load_config(args.config) if args.config else GeneratorConfig()
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    puzzle = generate_puzzle(mode=args.mode, config=config)
    if puzzle is None:
        print("No puzzle could be generated; try another seed.", file=sys.stderr)
        return 1
    text = parser.dump_puzzle(puzzle, args.output)
    if args.output is None:
        print(text, end="")
    else:
        print(f"Wrote {puzzle.mode.value} puzzle ({puzzle.total_nights} nights) to {args.output}")
    return 0


def _cmd_solve(args: argparse.Namespace) -> int:
    obs = parser.load_observations(args.observations)
    names = obs.seat_names
    if args.progressive:
        for cp in solve_progressive(obs.claims, obs.night_records, obs.declared_roles):
            print(f"Night {cp.night}: {cp.candidate_count} candidate(s): {_names(cp.possible_demons, names)}")
        return 0
    night = args.night if args.night is not None else obs.total_nights
    result = solve(obs.claims, obs.night_records, obs.declared_roles, night)
    print(f"Through night {night}: {len(result.surviving_hypotheses)} world(s) remain.")
    print(f"Possible Demons: {_names(result.possible_demons, names)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="imphunt", description="Generate and solve 8-seat Demon puzzles")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = ap.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a puzzle and print it as YAML")
    gen.add_argument("--mode", choices=[m.value for m in Mode], default=None)
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("--config", type=Path, default=None, help="YAML generator config")
    gen.add_argument("--output", type=Path, default=None, help="Write YAML here instead of stdout")
    gen.set_defaults(func=_cmd_generate)

    sol = sub.add_parser("solve", help="List possible Demons for an observation file")
    sol.add_argument("observations", type=Path, help="YAML observation file or dumped puzzle")
    sol.add_argument("--night", type=int, default=None, help="Only use information through this night")
    sol.add_argument("--progressive", action="store_true", help="Show every night's checkpoint")
    sol.set_defaults(func=_cmd_solve)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except ImphuntError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
