"""
Pool Sweep - thread-pool sizing benchmark for a CPU-bound message workload.

Each message is scanned for its highest character code, many times over and
with a needless copy per pass, so the workload is a stable profiling subject.
The harness times the same batch of messages on thread pools of 1 to 10
workers and prints elapsed time and messages per second for each size.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from pool_sweep.config import Settings, get_settings
from pool_sweep.domain.models import WorkItem
from pool_sweep.harness import TrialResult, run_sweep, run_trial
from pool_sweep.processor import build_work_items, max_char_code, process_message
from pool_sweep.reporter import SweepReporter
from pool_sweep.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Workload
    "WorkItem",
    "build_work_items",
    "max_char_code",
    "process_message",
    # Harness
    "TrialResult",
    "run_sweep",
    "run_trial",
    "SweepReporter",
    # Logging
    "configure_logging",
    "get_logger",
]
