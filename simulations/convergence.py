# simulations/convergence.py

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import List

import matplotlib.pyplot as plt

from monty_hall import RunConfiguration, RunSession, run_session


# Keep the tool intentionally opinionated:
# - seed is fixed unless passed explicitly
# - the reference lines are the analytic answers
DEFAULT_SEED = 42
DEFAULT_TRIALS = 10_000
DEFAULT_EVERY = 100

EXPECTED_SWITCHED = 200.0 / 3.0
EXPECTED_STAYED = 100.0 / 3.0


@dataclass
class ConvergenceCurve:
    """
    Running win percentages sampled every `every` trials.
    """
    seed: int
    every: int
    trials: List[int] = field(default_factory=list)
    switched: List[float] = field(default_factory=list)
    stayed: List[float] = field(default_factory=list)

    def add_point(self, session: RunSession) -> None:
        self.trials.append(session.trials_completed)
        self.switched.append(session.pct_switched)
        self.stayed.append(session.pct_stayed)


def convergence_curve(trial_count: int, seed: int = DEFAULT_SEED, every: int = DEFAULT_EVERY) -> ConvergenceCurve:
    """
    Run one seeded session and sample the running rates.

    The final trial is always sampled, so the last point matches the
    report the CLI would print for the same seed and trial count.
    """
    if every <= 0:
        raise ValueError("every must be > 0")

    config = RunConfiguration(seed=seed, trial_count=trial_count)
    curve = ConvergenceCurve(seed=seed, every=every)

    def sample(session: RunSession) -> None:
        n = session.trials_completed
        if n % every == 0 or n == trial_count:
            curve.add_point(session)

    run_session(config, on_trial=sample)
    return curve


def format_summary_line(curve: ConvergenceCurve) -> str:
    if not curve.trials:
        return f"seed={curve.seed}: no trials"
    return (
        f"seed={curve.seed}: trials={curve.trials[-1]}, "
        f"switched={curve.switched[-1]:.3f}%, stayed={curve.stayed[-1]:.3f}%"
    )


def plot_curve(curve: ConvergenceCurve):
    """
    Draw both running rates against the analytic 2/3 and 1/3 lines.
    Returns the figure; the caller decides whether to show it.
    """
    fig = plt.figure(figsize=(10, 4))
    plt.plot(curve.trials, curve.switched, label="switch")
    plt.plot(curve.trials, curve.stayed, label="stay")
    plt.axhline(EXPECTED_SWITCHED, linestyle="--", color="gray", linewidth=0.8)
    plt.axhline(EXPECTED_STAYED, linestyle="--", color="gray", linewidth=0.8)
    plt.ylim(0, 100)
    plt.xlabel("Trials")
    plt.ylabel("Win rate (%)")
    plt.legend()
    plt.title(f"Monty Hall convergence (seed={curve.seed}, every={curve.every})")
    plt.tight_layout()
    return fig


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Plot running switch/stay win rates for one seeded run."
    )
    parser.add_argument("-n", type=int, default=DEFAULT_TRIALS, help="number of trials")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")
    parser.add_argument("--every", type=int, default=DEFAULT_EVERY, help="sample interval in trials")

    args = parser.parse_args(argv)

    curve = convergence_curve(args.n, seed=args.seed, every=args.every)
    print(format_summary_line(curve))

    plot_curve(curve)
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
