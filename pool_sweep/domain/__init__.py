"""
Domain package for Pool Sweep.

Exports the work item model shared by the processor and the harness.
Keep this package focused on data definitions and validation concerns.
"""

from pool_sweep.domain.models import NO_RESULT, WorkItem

__all__ = [
    "NO_RESULT",
    "WorkItem",
]
