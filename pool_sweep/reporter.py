from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.console import Console

if TYPE_CHECKING:
    from pool_sweep.harness import TrialResult

HEADER = "| Nr. Threads | Time spent (s) | messages / s |"
SEPARATOR = "|=============|================|==============|"


def format_row_prefix(threads: int) -> str:
    return f"| {threads:11d} | "


def format_row_suffix(elapsed_seconds: float, throughput: float) -> str:
    return f"{elapsed_seconds:14.1f} | {throughput:12.1f} |"


def _plain_console() -> Console:
    """Console that writes text exactly as given: no markup, highlighting or wrapping."""
    return Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


class SweepReporter:
    """
    Writes the warm-up notice and the results table as the sweep progresses.

    A row is written in two parts: the pool-size cell before its trial starts,
    the timing cells once it ends, so a long trial shows which size is running.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or _plain_console()

    def warmup_started(self) -> None:
        self.console.print("Warming up ...")

    def warmup_finished(self) -> None:
        self.console.print("Warm-up done. Starting tests ...")
        self.console.print()
        self.console.print()

    def header(self) -> None:
        self.console.print(HEADER)
        self.console.print(SEPARATOR)

    def row_started(self, threads: int) -> None:
        self.console.print(format_row_prefix(threads), end="")

    def row_finished(self, result: TrialResult) -> None:
        self.console.print(format_row_suffix(result.elapsed_seconds, result.throughput))


__all__ = [
    "HEADER",
    "SEPARATOR",
    "SweepReporter",
    "format_row_prefix",
    "format_row_suffix",
]
