"""Reconciliation of item submissions into stored records.

Flow for one submission:
1) validate the submission (no I/O)
2) look up the destination identity and compute a write plan
3) execute the plan, committing after every write
"""

from __future__ import annotations

from .engine import reconcile
from .execute import ExecutionResult, execute_plan
from .plan import (
    DeleteStep,
    MergeStep,
    PlanKind,
    PlanStep,
    PutStep,
    ReadStep,
    WritePlan,
    WriteStep,
)
from .validate import validate_submission

__all__ = [
    "DeleteStep",
    "ExecutionResult",
    "MergeStep",
    "PlanKind",
    "PlanStep",
    "PutStep",
    "ReadStep",
    "WritePlan",
    "WriteStep",
    "execute_plan",
    "reconcile",
    "validate_submission",
]
