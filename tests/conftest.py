"""
Pytest configuration for Pool Sweep.

Provides fixtures for:
- Small-workload settings so trials finish in milliseconds
- A captured console for asserting the exact table text
- Resetting cached settings and logging handlers between tests
"""

from __future__ import annotations

import io
import logging
from typing import Generator

import pytest
from rich.console import Console

from pool_sweep.config import Settings, get_settings
from pool_sweep.reporter import SweepReporter

SMALL_ITEM_COUNT = 12
SMALL_REPETITIONS = 3


@pytest.fixture
def small_settings() -> Settings:
    """
    Settings with a tiny workload and the full 1..10 pool-size range.
    """
    return Settings(
        item_count=SMALL_ITEM_COUNT,
        repetitions=SMALL_REPETITIONS,
        log_level="DEBUG",
    )


@pytest.fixture
def captured_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def captured_reporter(captured_output: io.StringIO) -> SweepReporter:
    """
    Reporter writing plain text into `captured_output`.
    """
    console = Console(
        file=captured_output,
        width=200,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )
    return SweepReporter(console=console)


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """
    Drop handlers installed by configure_logging so later tests don't write to
    streams that have since been closed.
    """
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
