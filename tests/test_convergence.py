import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from monty_hall import RunConfiguration, run_session  # noqa: E402
from simulations.convergence import (  # noqa: E402
    convergence_curve,
    format_summary_line,
    plot_curve,
)


def test_curve_sample_points():
    curve = convergence_curve(1050, seed=3, every=100)
    assert curve.trials == [100 * i for i in range(1, 11)] + [1050]
    assert len(curve.switched) == len(curve.stayed) == 11
    for sw, st in zip(curve.switched, curve.stayed):
        assert sw + st == pytest.approx(100.0)


def test_last_point_matches_run():
    curve = convergence_curve(500, seed=11, every=50)
    session = run_session(RunConfiguration(seed=11, trial_count=500))
    assert curve.switched[-1] == session.pct_switched
    assert curve.stayed[-1] == session.pct_stayed


def test_invalid_every():
    with pytest.raises(ValueError):
        convergence_curve(10, every=0)


def test_summary_line():
    curve = convergence_curve(0, seed=1)
    assert format_summary_line(curve) == "seed=1: no trials"
    curve = convergence_curve(200, seed=1, every=100)
    assert format_summary_line(curve).startswith("seed=1: trials=200, switched=")


def test_plot_curve_draws_both_lines():
    curve = convergence_curve(300, seed=5, every=10)
    fig = plot_curve(curve)
    ax = fig.axes[0]
    labels = [line.get_label() for line in ax.get_lines()]
    assert "switch" in labels
    assert "stay" in labels
    plt.close(fig)
