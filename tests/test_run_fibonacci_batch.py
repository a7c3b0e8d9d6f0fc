import sys
from types import SimpleNamespace

import pytest

import run_fibonacci_batch
from run_fibonacci_batch import growth_factor, run_script_batch


class FakeClock:
    """perf_counter stand-in where each run lasts the next given duration."""

    def __init__(self, durations):
        self.readings = []
        now = 0.0
        for duration in durations:
            self.readings.extend([now, now + duration])
            now += duration
        self.readings.reverse()

    def perf_counter(self):
        return self.readings.pop()


def fake_runs(monkeypatch, exit_codes, durations=None):
    codes = iter(exit_codes)
    monkeypatch.setattr(run_fibonacci_batch, "run_command",
                        lambda command, cwd=None: SimpleNamespace(returncode=next(codes)))
    if durations is not None:
        monkeypatch.setattr(run_fibonacci_batch, "time", FakeClock(durations))


def test_runs_must_be_positive():
    with pytest.raises(SystemExit) as excinfo:
        run_fibonacci_batch.main(["--runs", "0", "--start", "3", "--end", "4"])
    assert excinfo.value.code == 2


def test_batch_without_runs_reports_failure():
    batch = run_script_batch([sys.executable, "-c", "pass"], runs=0)
    assert batch['time'] is None
    assert batch['times'] == []


def test_slow_first_run_is_not_repeated(monkeypatch):
    monkeypatch.setattr(run_fibonacci_batch, "TIME_THRESHOLD", 0)
    batch = run_script_batch([sys.executable, "-c", "pass"], runs=5)
    assert batch['single_run'] is True
    assert len(batch['times']) == 1
    assert batch['exit_code'] == 0


def test_failed_run_keeps_earlier_times(monkeypatch):
    fake_runs(monkeypatch, [0, 0, 1], durations=[0.125, 0.25, 0.5])
    batch = run_script_batch(["fib"], runs=5)
    assert batch['exit_code'] == 0
    assert batch['times'] == pytest.approx([0.125, 0.25])
    assert batch['time'] == pytest.approx(0.1875)


def test_failed_first_run(monkeypatch):
    fake_runs(monkeypatch, [3], durations=[0.1])
    batch = run_script_batch(["fib"], runs=5)
    assert batch['time'] is None
    assert batch['exit_code'] == 3


def test_outliers_removed_from_ten_runs(monkeypatch):
    fake_runs(monkeypatch, [0] * 10, durations=[0.125] * 9 + [4.0])
    batch = run_script_batch(["fib"], runs=10)
    assert batch['outliers'] == 1
    assert batch['times'] == pytest.approx([0.125] * 9)


def test_outliers_kept_below_ten_runs(monkeypatch):
    fake_runs(monkeypatch, [0] * 9, durations=[0.125] * 8 + [4.0])
    batch = run_script_batch(["fib"], runs=9)
    assert batch['outliers'] == 0
    assert len(batch['times']) == 9


def test_main_succeeds_with_small_batch(capsys):
    assert run_fibonacci_batch.main(["--runs", "2", "--start", "3", "--end", "6"]) == 0
    assert "Benchmark Complete" in capsys.readouterr().out


def test_main_fails_when_script_fails(monkeypatch):
    fake_runs(monkeypatch, [1, 1])
    assert run_fibonacci_batch.main(["--runs", "2", "--start", "3", "--end", "4"]) == 1


def test_growth_factor_skips_zero_timings():
    rows = [
        {'index': 1, 'time': 0.0},
        {'index': 2, 'time': 1.0},
        {'index': 3, 'time': 2.0},
    ]
    assert growth_factor(rows) == pytest.approx(2.0)
    assert growth_factor([{'index': 1, 'time': 0.0}, {'index': 2, 'time': 0.0}]) is None
