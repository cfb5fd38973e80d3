"""
Domain models for Pool Sweep.

Defines the unit of work processed by the worker pool: a text payload that is
fixed at construction and a result slot filled in by the worker that owns it.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

NO_RESULT = 0


class WorkItem(BaseModel):
    """
    A single message submitted to the pool.

    `text` cannot be reassigned once the item exists. `result` starts at the
    NUL code point and is written once by the worker processing the item.
    """

    text: str = Field(..., frozen=True, description="Payload scanned by the worker.")
    result: int = Field(NO_RESULT, ge=0, description="Highest code point found in text.")


__all__ = ["NO_RESULT", "WorkItem"]
