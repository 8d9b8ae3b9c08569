from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .config import RunConfiguration
from .session import RunSession
from .trial_generator import TrialGenerator, TritSource


logger = logging.getLogger(__name__)


def run_session(
    config: RunConfiguration,
    generator: Optional[TritSource] = None,
    on_trial: Optional[Callable[[RunSession], None]] = None,
) -> RunSession:
    """
    Run config.trial_count trials and return the finished session.

    Parameters
    ----------
    config:
        Seed and trial count for this run.
    generator:
        Source of door draws. Defaults to TrialGenerator(config.seed).
    on_trial:
        Optional hook called with the session after every recorded trial.

    Returns
    -------
    RunSession
    """
    if generator is None:
        generator = TrialGenerator(config.seed)

    session = RunSession()
    logger.debug("running %d trials", config.trial_count)

    start = time.perf_counter()
    while not session.is_finished(config):
        initial_pick = generator.next_uniform_trit()
        prize_door = generator.next_uniform_trit()
        session.record_trial(initial_pick, prize_door)
        if on_trial is not None:
            on_trial(session)
    elapsed_s = time.perf_counter() - start

    session.check_invariant()
    logger.debug("finished %d trials in %.3fs", session.trials_completed, elapsed_s)
    return session
