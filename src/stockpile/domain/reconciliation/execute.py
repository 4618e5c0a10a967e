"""Execution of write plans against a unit of work.

Every write is committed before the next step is issued. A rename therefore
only deletes its source once the destination write has been confirmed; if the
destination write fails the source record is left untouched. The two commits
are not one transaction: when the source delete fails after the destination
was written, both records stay stored and ``PartialRenameFailure`` is raised
for manual reconciliation. Nothing is retried here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stockpile.domain.errors import PartialRenameFailure, RepositoryError

from .plan import DeleteStep, MergeStep, PutStep, ReadStep

if TYPE_CHECKING:
    from stockpile.domain.ports.unit_of_work import InventoryUnitOfWork

    from .plan import WritePlan, WriteStep

log = getLogger(__name__)


@dataclass(slots=True)
class ExecutionResult:
    """Identities touched while executing one plan."""

    plan: WritePlan
    written: list[str] = field(default_factory=list[str])
    deleted: list[str] = field(default_factory=list[str])


def execute_plan(plan: WritePlan, uow: InventoryUnitOfWork) -> ExecutionResult:
    """Issue the writes of ``plan`` in order, committing after each one."""

    result = ExecutionResult(plan=plan)
    for step in plan.steps:
        if isinstance(step, ReadStep):
            log.debug("Using observed %r (count=%s)", step.key, step.observed.count)
            continue
        try:
            _apply(step, uow)
            uow.commit()
        except RepositoryError as exc:
            if isinstance(step, DeleteStep) and result.written:
                log.error("Rename of %r to %r left both records stored", step.key, plan.identity)
                raise PartialRenameFailure(source=step.key, destination=plan.identity) from exc
            raise
        if isinstance(step, DeleteStep):
            result.deleted.append(step.key)
        else:
            result.written.append(step.key)
    return result


def _apply(step: WriteStep, uow: InventoryUnitOfWork) -> None:
    items = uow.repositories.items
    match step:
        case PutStep(key=key, record=record):
            log.debug("put %r count=%s", key, record.count)
            items.put(key, record)
        case MergeStep(key=key, fields=fields):
            log.debug("merge %r fields=%s", key, sorted(fields))
            items.merge(key, fields)
        case DeleteStep(key=key):
            log.debug("delete %r", key)
            items.delete(key)
