"""Exception hierarchy for imphunt."""

from __future__ import annotations


class ImphuntError(Exception):
    """Base class for every error raised by the package."""


class UnknownRoleError(ImphuntError, KeyError):
    """A role identifier is not in the catalog.

    The catalog is closed, so a miss always means a programming error.
    """

    def __init__(self, role_id: str) -> None:
        super().__init__(role_id)
        self.role_id = role_id

    def __str__(self) -> str:
        return f"Unknown role: {self.role_id!r}"


class ConfigError(ImphuntError, ValueError):
    """Invalid generator configuration or malformed input file."""


class IncompleteAbilityTableError(ImphuntError, RuntimeError):
    """An information kind has no registered ability implementation."""
