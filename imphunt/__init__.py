"""Generate and solve 8-seat hidden-role deduction puzzles."""

from .core.config import GeneratorConfig
from .core.csp import SolveResult, narrowing_stops, solve, solve_progressive
from .core.generator import generate_puzzle
from .core.puzzle import Puzzle
from .errors import ConfigError, ImphuntError, UnknownRoleError

__all__ = [
    "ConfigError",
    "GeneratorConfig",
    "ImphuntError",
    "Puzzle",
    "SolveResult",
    "UnknownRoleError",
    "generate_puzzle",
    "narrowing_stops",
    "solve",
    "solve_progressive",
]
