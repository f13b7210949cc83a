import logging

from .bench import run


def test_bench_runs(caplog):
    with caplog.at_level(logging.INFO, logger="xvii.bench"):
        timings = run(number=1)

    assert set(timings) == {"parse", "format"}
    assert all(seconds >= 0 for seconds in timings.values())
    assert "parse:" in caplog.text
