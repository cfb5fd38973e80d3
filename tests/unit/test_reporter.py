from __future__ import annotations

import io
import math

from pool_sweep.harness import TrialResult
from pool_sweep.reporter import (
    HEADER,
    SEPARATOR,
    SweepReporter,
    format_row_prefix,
    format_row_suffix,
)

ROW_WIDTH = len(HEADER)


def test_header_and_separator_widths_match():
    assert HEADER == "| Nr. Threads | Time spent (s) | messages / s |"
    assert SEPARATOR == "|=============|================|==============|"
    assert len(SEPARATOR) == ROW_WIDTH


def test_row_cells_are_fixed_width_with_one_decimal():
    row = format_row_prefix(3) + format_row_suffix(12.3456, 202.54)
    assert row == "|           3 |           12.3 |        202.5 |"
    assert len(row) == ROW_WIDTH


def test_row_for_ten_threads():
    row = format_row_prefix(10) + format_row_suffix(0.04, 62500.0)
    assert row == "|          10 |            0.0 |      62500.0 |"


def test_infinite_throughput_still_fits_the_column():
    row = format_row_prefix(1) + format_row_suffix(0.0, math.inf)
    assert len(row) == ROW_WIDTH
    assert row.endswith("inf |")


def test_reporter_writes_row_in_two_parts(
    captured_reporter: SweepReporter, captured_output: io.StringIO
):
    result = TrialResult(
        threads=7, item_count=2_500, elapsed_ms=1_260.0, completed=True, items_completed=2_500
    )

    captured_reporter.row_started(7)
    assert captured_output.getvalue() == "|           7 | "

    captured_reporter.row_finished(result)
    assert captured_output.getvalue() == "|           7 |            1.3 |       1984.1 |\n"


def test_reporter_warmup_and_header(
    captured_reporter: SweepReporter, captured_output: io.StringIO
):
    captured_reporter.warmup_started()
    captured_reporter.warmup_finished()
    captured_reporter.header()

    assert captured_output.getvalue().splitlines() == [
        "Warming up ...",
        "Warm-up done. Starting tests ...",
        "",
        "",
        HEADER,
        SEPARATOR,
    ]
