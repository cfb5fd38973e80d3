"""
Harness for timing the message workload across worker-pool sizes.

Usage:
    from pool_sweep.harness import run_sweep, run_trial

    result = run_trial(threads=4)
    print(result.elapsed_ms, result.throughput)

    results = run_sweep()  # warm-up, then pool sizes 1..10, printed as a table

Each trial owns a fresh ThreadPoolExecutor that is shut down before the next
trial starts; trials never overlap.
"""

from __future__ import annotations

from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from functools import partial
from typing import List, Optional

import psutil

from pool_sweep.config import Settings, get_settings
from pool_sweep.processor import build_work_items, process_message
from pool_sweep.reporter import SweepReporter
from pool_sweep.utils.logging import get_logger
from pool_sweep.utils.profiler import profile_block

log = get_logger(__name__)

WARMUP_THREADS = 1


@dataclass
class TrialResult:
    """Measurements of one trial: a full pool lifecycle at a fixed size."""

    threads: int
    item_count: int
    elapsed_ms: float
    completed: bool
    items_completed: int
    cpu_percent: Optional[float] = None
    peak_rss_bytes: Optional[int] = None

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ms / 1000.0

    @property
    def throughput(self) -> float:
        """Messages per second, counting only items finished before the clock stopped."""
        if self.elapsed_ms <= 0:
            return float("inf")
        return self.items_completed / self.elapsed_ms * 1000


def run_trial(threads: int, settings: Optional[Settings] = None) -> TrialResult:
    """
    Process every work item on a pool of exactly `threads` workers.

    The clock starts before the first submission and stops when the wait for
    completion returns, either because every item finished or because the
    await ceiling was reached. A trial that hit the ceiling is still timed and
    returned, flagged with ``completed=False``; its throughput counts only the
    items finished in time. Items still queued are dropped and items already
    running are joined before returning.

    Raises
    ------
    ValueError
        If `threads` is less than 1.
    KeyboardInterrupt
        Propagated unchanged if the wait is interrupted; queued items are
        cancelled first.
    """
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")

    settings = settings or get_settings()
    items = build_work_items(settings.item_count, settings.text_template)
    worker = partial(process_message, repetitions=settings.repetitions)

    log.debug(
        f"[TRIAL START] threads={threads}",
        extra={"threads": threads, "items": len(items), "repetitions": settings.repetitions},
    )

    executor = ThreadPoolExecutor(max_workers=threads, thread_name_prefix=f"pool-{threads}")
    try:
        with profile_block(f"trial-{threads}") as stats:
            futures = [executor.submit(worker, item) for item in items]
            # No more submissions; workers drain the queue.
            executor.shutdown(wait=False)
            done, not_done = wait(
                futures, timeout=settings.await_timeout_seconds, return_when=ALL_COMPLETED
            )
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    completed = not not_done
    # Queued items are dropped; running ones finish before the next trial starts.
    executor.shutdown(wait=True, cancel_futures=True)

    result = TrialResult(
        threads=threads,
        item_count=len(items),
        elapsed_ms=stats.duration_ms,
        completed=completed,
        items_completed=sum(1 for f in done if f.exception() is None),
        cpu_percent=stats.cpu_percent,
        peak_rss_bytes=stats.peak_rss_bytes,
    )

    if not completed:
        log.warning(
            f"[TRIAL TIMEOUT] threads={threads} reached the await ceiling",
            extra={
                "threads": threads,
                "timeout_seconds": settings.await_timeout_seconds,
                "items_completed": result.items_completed,
                "items": result.item_count,
            },
        )
    log.debug(
        f"[TRIAL DONE] threads={threads}",
        extra={
            "threads": threads,
            "elapsed_ms": round(result.elapsed_ms, 1),
            "throughput": round(result.throughput, 1),
            "cpu_percent": result.cpu_percent,
            "peak_rss_bytes": result.peak_rss_bytes,
        },
    )
    return result


def run_sweep(
    settings: Optional[Settings] = None,
    reporter: Optional[SweepReporter] = None,
) -> List[TrialResult]:
    """
    Run the warm-up trial, then one timed trial per pool size, printing each row.

    Parameters
    ----------
    settings : Settings | None
        Workload and sweep bounds. Defaults to the cached settings.
    reporter : SweepReporter | None
        Console writer for the table. Defaults to one writing to stdout.

    Returns
    -------
    List[TrialResult]
        One result per pool size, in increasing pool-size order. The warm-up
        trial is not included.
    """
    settings = settings or get_settings()
    reporter = reporter or SweepReporter()

    log.info(
        "[SWEEP START]",
        extra={
            "min_threads": settings.min_threads,
            "max_threads": settings.max_threads,
            "items": settings.item_count,
            "repetitions": settings.repetitions,
            "logical_cpus": psutil.cpu_count(logical=True),
        },
    )

    if settings.warmup:
        reporter.warmup_started()
        warmup = run_trial(WARMUP_THREADS, settings)
        log.info(
            "[WARMUP] Completed",
            extra={"threads": WARMUP_THREADS, "elapsed_ms": round(warmup.elapsed_ms, 1)},
        )
        reporter.warmup_finished()

    reporter.header()

    results: List[TrialResult] = []
    for threads in range(settings.min_threads, settings.max_threads + 1):
        reporter.row_started(threads)
        result = run_trial(threads, settings)
        reporter.row_finished(result)
        results.append(result)
        log.info(
            f"[TRIAL {threads}/{settings.max_threads}] Completed",
            extra={
                "threads": threads,
                "elapsed_ms": round(result.elapsed_ms, 1),
                "throughput": round(result.throughput, 1),
                "cpu_percent": result.cpu_percent,
                "completed": result.completed,
            },
        )

    log.info("[SWEEP COMPLETE]", extra={"trials": len(results)})
    return results


__all__ = ["TrialResult", "WARMUP_THREADS", "run_sweep", "run_trial"]
