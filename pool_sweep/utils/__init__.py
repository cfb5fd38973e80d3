"""
Utilities package for Pool Sweep.

Exports shared helpers for logging and timing.
Keep this package lightweight and free of workload-specific logic.
"""

from pool_sweep.utils.logging import configure_logging, get_logger
from pool_sweep.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
