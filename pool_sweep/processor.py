"""
Message processor for Pool Sweep.

Intent:
- Give every worker a fixed, CPU-bound chunk of work per message.
- The work is deliberately wasteful: each repetition copies the whole text into
  a fresh buffer before scanning it, so allocation and copying dominate the
  profile rather than the scan itself. Do not hoist the copy out of the loop.
"""

from __future__ import annotations

from typing import List

from pool_sweep.config import REPETITIONS
from pool_sweep.domain.models import NO_RESULT, WorkItem


def max_char_code(text: str, repetitions: int = REPETITIONS) -> int:
    """
    Return the highest code point in `text`, recomputed `repetitions` times.

    Empty text yields the NUL sentinel (0).
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be >= 1, got {repetitions}")

    max_code = NO_RESULT
    for _ in range(repetitions):
        chars = list(text)
        max_code = NO_RESULT
        for i in range(len(text)):
            code = ord(chars[i])
            if code > max_code:
                max_code = code
    return max_code


def process_message(item: WorkItem, repetitions: int = REPETITIONS) -> WorkItem:
    """
    Worker function: scan the item's text and store the result on the item.

    The item is owned by the calling task for the duration of the call and is
    returned so the future publishes the completed item.
    """
    item.result = max_char_code(item.text, repetitions)
    return item


def build_work_items(count: int, template: str) -> List[WorkItem]:
    """Build `count` items, each labelled with its own index."""
    return [WorkItem(text=template.format(index=i)) for i in range(count)]


__all__ = ["build_work_items", "max_char_code", "process_message"]
