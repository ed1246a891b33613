from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigError
from .model import MAX_NIGHTS, Mode

MAX_RETRIES = 50


@dataclass(frozen=True)
class GeneratorConfig:
    """Knobs for ``generate_puzzle``."""
    mode: Mode = Mode.PROGRESSIVE
    max_retries: int = MAX_RETRIES
    max_nights: int = MAX_NIGHTS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "mode", Mode(self.mode))
        except ValueError as exc:
            raise ConfigError(f"Unknown mode: {self.mode!r}") from exc
        if not isinstance(self.max_retries, int) or self.max_retries < 1:
            raise ConfigError(f"max_retries must be a positive integer, got {self.max_retries!r}")
        if not isinstance(self.max_nights, int) or self.max_nights < 1:
            raise ConfigError(f"max_nights must be a positive integer, got {self.max_nights!r}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
