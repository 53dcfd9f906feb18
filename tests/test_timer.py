import io

import pytest

from gmtimer.color import GREEN, RESET
from gmtimer.timer import AutoTimer, ManualTimer


def fake_clock(*values):
    ticks = iter(values)
    return lambda: next(ticks)


def test_duration_is_in_microseconds():
    timer = ManualTimer(clock=fake_clock(1_000, 2_501_000))
    timer.start()
    timer.end()
    assert timer.duration_us() == 2500


def test_duration_truncates_toward_zero_when_negative():
    timer = ManualTimer(clock=fake_clock(5_999))
    timer.start()
    assert timer.duration_us() == -5


def test_std_report_writes_green_line():
    out = io.StringIO()
    timer = ManualTimer(
        "lbl", "std", "({label}) {duration}", stream=out,
        clock=fake_clock(1_000, 2_501_000),
    )
    timer.start()
    timer.end()
    line = timer.report()
    assert line == "(lbl) 0.002500"
    assert out.getvalue() == GREEN + "\n(lbl) 0.002500\n" + RESET


def test_precision_controls_decimals():
    timer = ManualTimer(
        "p", "std", "{duration}", precision=2, stream=io.StringIO(),
        clock=fake_clock(0, 1_500_000_000),
    )
    timer.start()
    timer.end()
    assert timer.report() == "1.50"


def test_log_report_appends_to_destination(tmp_path):
    target = tmp_path / "sub" / "t.log"
    for _ in range(2):
        timer = ManualTimer(
            "job", "log", "({label})", str(target), clock=fake_clock(0, 1000)
        )
        timer.start()
        timer.end()
        assert timer.report() == "(job)"
    assert target.read_text(encoding="utf-8").splitlines() == ["(job)", "(job)"]


def test_log_default_destination(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    timer = ManualTimer("d", "log", "{label}", clock=fake_clock(0, 0))
    timer.start()
    timer.end()
    assert timer.report() == "d"
    assert (tmp_path / "timer.log").read_text(encoding="utf-8") == "d\n"


def test_log_without_commit_placeholder_uses_marker(tmp_path):
    target = tmp_path / "m.log"
    timer = ManualTimer("x", "log", "<{commitID-s}>", str(target),
                        clock=fake_clock(0, 0))
    timer.start()
    timer.end()
    assert timer.report() == "<NOCOMMI>"


def test_unknown_mode_reports_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    timer = ManualTimer("q", "quiet", stream=out, clock=fake_clock(0, 0))
    timer.start()
    timer.end()
    assert timer.report() is None
    assert out.getvalue() == ""
    assert list(tmp_path.iterdir()) == []


def test_manual_timer_reports_on_block_exit(tmp_path):
    target = tmp_path / "ctx.log"
    with ManualTimer("m", "log", "{label} {duration}", str(target),
                     precision=3, clock=fake_clock(0, 2_000_000)) as timer:
        timer.start()
        timer.end()
        assert not target.exists()
    assert target.read_text(encoding="utf-8") == "m 0.002\n"


def test_auto_timer_measures_block(tmp_path):
    target = tmp_path / "auto.log"
    clock = fake_clock(0, 10_000, 4_010_000)
    with AutoTimer("a", "log", "{duration}", str(target), clock=clock) as timer:
        pass
    assert timer.duration_us() == 4000
    assert target.read_text(encoding="utf-8") == "0.004000\n"


def test_auto_timer_reports_when_block_raises(tmp_path):
    target = tmp_path / "err.log"
    with pytest.raises(RuntimeError):
        with AutoTimer("e", "log", "{label}", str(target),
                       clock=fake_clock(0, 0, 0)):
            raise RuntimeError("boom")
    assert target.read_text(encoding="utf-8") == "e\n"