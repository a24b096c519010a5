"""Smoke tests for the benchmark script."""

import importlib.util
from pathlib import Path

import pytest

BENCH_PATH = Path(__file__).resolve().parents[2] / "scripts" / "bench.py"


@pytest.fixture(scope="module")
def bench():
    spec = importlib.util.spec_from_file_location("bench", str(BENCH_PATH))
    assert spec is not None and spec.loader is not None
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[union-attr]
    return mod


class TestBench:
    def test_every_benchmark_runs(self, bench) -> None:
        for name, fn in bench.BENCHMARKS.items():
            result = fn(10)
            assert result["ops"] == 10, name

    def test_fmt_rate(self, bench) -> None:
        assert bench.fmt_rate(2_500_000) == "2.50M"
        assert bench.fmt_rate(12_300) == "12.30K"
        assert bench.fmt_rate(3e9) == "3.00G"
        assert bench.fmt_rate(42) == "42"

    def test_main_filter(self, bench, capsys) -> None:
        bench.main(["pointer", "-n", "5"])
        out = capsys.readouterr().out
        assert "pointer (span)" in out
        assert "float" not in out

    def test_main_unknown_filter(self, bench, capsys) -> None:
        with pytest.raises(SystemExit):
            bench.main(["nope"])
        assert "No benchmark matching" in capsys.readouterr().out

    def test_profile_report(self, bench) -> None:
        report = bench.profile_report(bench.bench_pointer, 5, top_n=50)
        assert "midpoint_pointer" in report
