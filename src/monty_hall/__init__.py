"""
Monte Carlo simulator for the Monty Hall three-door problem.

Run from the command line via:
    python -m monty_hall -s SEED -n NUM_ITER
"""

from .config import ConfigurationError, RunConfiguration
from .run import run_session
from .session import RunSession
from .trial_generator import TrialGenerator, TritSource

__all__ = [
    "ConfigurationError",
    "RunConfiguration",
    "RunSession",
    "TrialGenerator",
    "TritSource",
    "run_session",
]
