import logging
import random
from typing import Optional, Protocol


logger = logging.getLogger(__name__)

NUM_DOORS = 3
MAX_SEED = (1 << 64) - 1


def check_seed(seed: int) -> None:
    if seed < 0 or seed > MAX_SEED:
        raise ValueError(f"seed must be in [0, {MAX_SEED}], got {seed}")


class TritSource(Protocol):
    """
    Anything that can hand out one uniform door index in {0, 1, 2} per call.
    """

    def next_uniform_trit(self) -> int:
        ...


class TrialGenerator:
    """
    TrialGenerator

    Seeded pseudo-random stream of door indices for the three-door game.

    Each trial consumes two draws:

        initial_pick = next_uniform_trit()
        prize_door   = next_uniform_trit()

    The host's reveal is never simulated. Once the contestant has picked,
    the host always leaves exactly one other closed door, so "switching
    wins" is the same event as "initial_pick != prize_door".

    ALGORITHM:

    - Mersenne Twister (random.Random) seeded with the integer seed.
    - Each draw is randrange(3).

    Same seed => same sequence of draws on any CPython 3 interpreter, which
    is what makes seeded reports byte-identical.

    When no seed is given, a 64-bit seed is pulled from the OS entropy pool
    and kept in `seed`, so the run can still be replayed with `-s`.

    This code is:
      - single-threaded
      - not thread-safe
      - not suitable for cryptographic use
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
            logger.debug("seeded from entropy: %d", seed)
        else:
            check_seed(seed)

        self.seed: int = seed
        self._rng = random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def next_uniform_trit(self) -> int:
        """
        Return one door index, uniform over {0, 1, 2}.
        """
        return self._rng.randrange(NUM_DOORS)
