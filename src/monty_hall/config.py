"""Run configuration for the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .trial_generator import check_seed


class ConfigurationError(ValueError):
    """Raised when run settings are out of range."""


@dataclass(frozen=True)
class RunConfiguration:
    """
    Immutable per-run settings.

    seed=None means the generator is seeded from OS entropy.
    """
    seed: Optional[int] = None
    trial_count: int = 1

    def __post_init__(self) -> None:
        if self.trial_count < 0:
            raise ConfigurationError("trial_count must be >= 0")
        if self.seed is not None:
            try:
                check_seed(self.seed)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
