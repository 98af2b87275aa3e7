import pytest

from timer import SimpleTimer


def test_record_accumulates():
    timer = SimpleTimer()
    for _ in range(3):
        with timer.record("step"):
            pass
    entry = timer.summary()["step"]
    assert entry["count"] == 3
    assert entry["mean"] == pytest.approx(entry["total"] / 3)


def test_record_stops_on_exception():
    timer = SimpleTimer()
    with pytest.raises(RuntimeError):
        with timer.record("failing"):
            raise RuntimeError("boom")
    assert timer.summary()["failing"]["count"] == 1
    assert "failing" not in timer.start_times


def test_stop_without_start():
    assert SimpleTimer().stop("never") == 0.0


def test_report_prints(capsys):
    timer = SimpleTimer()
    timer.report()
    with timer.record("a"):
        pass
    timer.report()
    out = capsys.readouterr().out
    assert "[a]" in out
