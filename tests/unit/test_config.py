"""Tests for BenchConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

from foldbench.core.config import BenchConfig


class TestBenchConfigDefaults:
    """Tests for default values and validation."""

    def test_defaults(self) -> None:
        config = BenchConfig()
        assert config.warmup_runs == 1
        assert config.measured_runs == 10
        assert config.iterations is None
        assert config.report_dir is None
        assert config.verbose is False

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"warmup_runs": -1}, "warmup_runs"),
            ({"measured_runs": 0}, "measured_runs"),
            ({"iterations": 0}, "iterations"),
            ({"min_sample_ns": 0}, "min_sample_ns"),
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, int], message: str) -> None:
        with pytest.raises(ValueError, match=message):
            BenchConfig(**kwargs)

    def test_report_dir_coerced_to_path(self) -> None:
        config = BenchConfig(report_dir="reports")  # type: ignore[arg-type]
        assert config.report_dir == Path("reports")

    def test_dict_round_trip(self) -> None:
        config = BenchConfig(warmup_runs=3, measured_runs=4, iterations=5, report_dir=Path("out"))
        assert BenchConfig.from_dict(config.to_dict()) == config


class TestBenchConfigFromEnv:
    """Tests for reading FOLDBENCH_* variables."""

    def test_empty_env_gives_defaults(self) -> None:
        assert BenchConfig.from_env({}) == BenchConfig()

    def test_reads_all_variables(self, tmp_path: Path) -> None:
        config = BenchConfig.from_env(
            {
                "FOLDBENCH_WARMUP_RUNS": "0",
                "FOLDBENCH_MEASURED_RUNS": "3",
                "FOLDBENCH_ITERATIONS": "7",
                "FOLDBENCH_MIN_SAMPLE_NS": "1000",
                "FOLDBENCH_REPORT_DIR": str(tmp_path),
                "FOLDBENCH_VERBOSE": "true",
            }
        )
        assert config.warmup_runs == 0
        assert config.measured_runs == 3
        assert config.iterations == 7
        assert config.min_sample_ns == 1000
        assert config.report_dir == tmp_path
        assert config.verbose is True

    def test_empty_values_ignored(self) -> None:
        config = BenchConfig.from_env({"FOLDBENCH_MEASURED_RUNS": "", "FOLDBENCH_VERBOSE": ""})
        assert config.measured_runs == 10
        assert config.verbose is False

    def test_malformed_integer(self) -> None:
        with pytest.raises(ValueError, match="FOLDBENCH_MEASURED_RUNS"):
            BenchConfig.from_env({"FOLDBENCH_MEASURED_RUNS": "many"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOLDBENCH_MEASURED_RUNS", "2")
        assert BenchConfig.from_env().measured_runs == 2
