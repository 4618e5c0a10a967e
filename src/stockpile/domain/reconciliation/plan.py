"""Write plan types shared by the planner and the executor.

A write plan is the contract between:
- reconciliation (read-only lookup of the destination identity)
- execution (ordered repository writes with a commit after each one)

Keeping the plan explicit lets tests assert the exact operations a submission
produces without touching a backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockpile.domain.model import ItemRecord, RecordPatch


class PlanKind(StrEnum):
    """How a submission is materialised."""

    CREATE = "create"
    UPDATE_IN_PLACE = "update_in_place"
    RENAME_MERGE = "rename_merge"
    RENAME_CREATE = "rename_create"
    ADD_STOCK = "add_stock"


@dataclass(frozen=True, slots=True)
class ReadStep:
    """Destination snapshot the plan's summed count was derived from."""

    key: str
    observed: ItemRecord


@dataclass(frozen=True, slots=True)
class PutStep:
    key: str
    record: ItemRecord


@dataclass(frozen=True, slots=True)
class MergeStep:
    key: str
    fields: RecordPatch


@dataclass(frozen=True, slots=True)
class DeleteStep:
    key: str


type WriteStep = PutStep | MergeStep | DeleteStep
type PlanStep = ReadStep | WriteStep


@dataclass(frozen=True, slots=True, kw_only=True)
class WritePlan:
    """Ordered repository operations for one submission."""

    kind: PlanKind
    identity: str
    steps: tuple[PlanStep, ...]
    prior_identity: str | None = None

    @property
    def writes(self) -> tuple[WriteStep, ...]:
        return tuple(step for step in self.steps if not isinstance(step, ReadStep))

    @property
    def vacated_identity(self) -> str | None:
        """Identity this plan deletes as part of a rename, if any."""

        for step in self.steps:
            if isinstance(step, DeleteStep):
                return step.key
        return None
