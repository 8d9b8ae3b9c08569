from __future__ import annotations

from dataclasses import dataclass

from .config import RunConfiguration
from .trial_generator import NUM_DOORS


@dataclass
class RunSession:
    """
    Running tallies for one simulation run.

    Every trial lands in exactly one bucket:
      - wins_if_stayed:   the initial pick was the prize door
      - wins_if_switched: it was not, so the one remaining closed door was

    so wins_if_switched + wins_if_stayed == trials_completed always holds.
    """
    trials_completed: int = 0
    wins_if_switched: int = 0
    wins_if_stayed: int = 0

    def is_finished(self, config: RunConfiguration) -> bool:
        return self.trials_completed >= config.trial_count

    def record_trial(self, initial_pick: int, prize_door: int) -> None:
        """
        Classify one trial and bump the counters.
        """
        if not 0 <= initial_pick < NUM_DOORS or not 0 <= prize_door < NUM_DOORS:
            raise ValueError(
                f"door index out of range: initial_pick={initial_pick}, prize_door={prize_door}"
            )

        self.trials_completed += 1
        if initial_pick == prize_door:
            self.wins_if_stayed += 1
        else:
            self.wins_if_switched += 1

    def check_invariant(self) -> None:
        total = self.wins_if_switched + self.wins_if_stayed
        if total != self.trials_completed:
            raise RuntimeError(
                f"tally mismatch: {total} wins recorded for {self.trials_completed} trials"
            )

    @property
    def pct_switched(self) -> float:
        return _percent(self.wins_if_switched, self.trials_completed)

    @property
    def pct_stayed(self) -> float:
        return _percent(self.wins_if_stayed, self.trials_completed)

    def render_report(self) -> str:
        """
        Fixed-layout summary block, e.g. for 7 trials:

            Iteration:   7
            [Correct]
            changed=Yes: 5 ( 71.429%)
            changed=No : 2 ( 28.571%)

        Counts are zero-padded to the digit count of trials_completed.
        Zero trials report 0.000% for both buckets.
        """
        width = len(str(self.trials_completed))
        return (
            f"Iteration:   {self.trials_completed}\n"
            f"[Correct]\n"
            f"changed=Yes: {self.wins_if_switched:0{width}d} ({self.pct_switched:7.3f}%)\n"
            f"changed=No : {self.wins_if_stayed:0{width}d} ({self.pct_stayed:7.3f}%)\n"
        )


def _percent(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100.0 * count / total
