"""
End-to-end tests for the pool-sweep CLI.

These run the real command with a tiny workload supplied through
POOL_SWEEP_* environment variables and verify that:
1. The full sweep prints the warm-up notice, header and ten rows
2. Every row is well formed and labelled 1..10 in order
3. An interrupt during a trial exits with code 130
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from pool_sweep import main as cli
from pool_sweep.reporter import HEADER, SEPARATOR

SWEEP_ROWS = 10
EXIT_INTERRUPTED = 130

SMALL_ENV = {
    "POOL_SWEEP_ITEM_COUNT": "6",
    "POOL_SWEEP_REPETITIONS": "2",
    "POOL_SWEEP_LOG_LEVEL": "WARNING",
}

runner = CliRunner()


@pytest.fixture
def small_env(monkeypatch):
    for key, value in SMALL_ENV.items():
        monkeypatch.setenv(key, value)


def _table_rows(stdout: str) -> list[str]:
    lines = stdout.splitlines()
    start = lines.index(SEPARATOR) + 1
    return [line for line in lines[start:] if line.startswith("|")]


def test_sweep_prints_full_table(small_env, reset_logging):
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "Warming up ..."
    assert "Warm-up done. Starting tests ..." in lines
    assert HEADER in lines

    rows = _table_rows(result.stdout)
    assert len(rows) == SWEEP_ROWS
    for expected_threads, row in enumerate(rows, start=1):
        cells = [cell.strip() for cell in row.strip("|").split("|")]
        assert int(cells[0]) == expected_threads
        elapsed, throughput = float(cells[1]), float(cells[2])
        assert elapsed >= 0.0
        assert throughput > 0.0
        assert len(row) == len(HEADER)


def test_sweep_interrupt_exits_130(small_env, reset_logging, monkeypatch):
    def interrupted_sweep(settings=None, reporter=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_sweep", interrupted_sweep)

    result = runner.invoke(cli.app, [])

    assert result.exit_code == EXIT_INTERRUPTED
    assert "Cancelled by user." in result.output
