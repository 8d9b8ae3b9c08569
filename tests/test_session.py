import pytest

from monty_hall import ConfigurationError, RunConfiguration, RunSession


def test_record_trial_buckets():
    session = RunSession()
    session.record_trial(1, 1)
    session.record_trial(0, 2)
    session.record_trial(2, 0)
    assert session.trials_completed == 3
    assert session.wins_if_stayed == 1
    assert session.wins_if_switched == 2
    session.check_invariant()


@pytest.mark.parametrize("pick, prize", [(3, 0), (0, 3), (-1, 1)])
def test_record_trial_rejects_out_of_range(pick, prize):
    session = RunSession()
    with pytest.raises(ValueError):
        session.record_trial(pick, prize)
    assert session.trials_completed == 0


def test_is_finished_after_exactly_trial_count():
    config = RunConfiguration(seed=1, trial_count=4)
    session = RunSession()
    for _ in range(4):
        assert not session.is_finished(config)
        session.record_trial(0, 1)
    assert session.is_finished(config)


def test_zero_trial_config_is_finished_immediately():
    assert RunSession().is_finished(RunConfiguration(trial_count=0))


def test_check_invariant_detects_mismatch():
    session = RunSession(trials_completed=3, wins_if_switched=1, wins_if_stayed=1)
    with pytest.raises(RuntimeError):
        session.check_invariant()


def test_report_format_seven_trials():
    session = RunSession(trials_completed=7, wins_if_switched=5, wins_if_stayed=2)
    assert session.render_report() == (
        "Iteration:   7\n"
        "[Correct]\n"
        "changed=Yes: 5 ( 71.429%)\n"
        "changed=No : 2 ( 28.571%)\n"
    )


def test_report_zero_pads_counts():
    session = RunSession(trials_completed=1000, wins_if_switched=993, wins_if_stayed=7)
    lines = session.render_report().splitlines()
    assert lines[2] == "changed=Yes: 0993 ( 99.300%)"
    assert lines[3] == "changed=No : 0007 (  0.700%)"


def test_report_all_one_bucket():
    session = RunSession(trials_completed=10, wins_if_switched=10, wins_if_stayed=0)
    lines = session.render_report().splitlines()
    assert lines[2] == "changed=Yes: 10 (100.000%)"
    assert lines[3] == "changed=No : 00 (  0.000%)"


def test_report_zero_trials():
    assert RunSession().render_report() == (
        "Iteration:   0\n"
        "[Correct]\n"
        "changed=Yes: 0 (  0.000%)\n"
        "changed=No : 0 (  0.000%)\n"
    )


def test_configuration_defaults_and_validation():
    config = RunConfiguration()
    assert config.seed is None
    assert config.trial_count == 1
    with pytest.raises(ConfigurationError):
        RunConfiguration(trial_count=-1)
    with pytest.raises(ConfigurationError):
        RunConfiguration(seed=-5)
    with pytest.raises(ConfigurationError):
        RunConfiguration(seed=1 << 64)
