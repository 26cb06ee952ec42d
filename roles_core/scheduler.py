# roles_core/scheduler.py
from __future__ import annotations
import logging
from typing import List, Optional, Set
import numpy as np

from .assigner import assign_slot
from .fairness import count_sentinels
from .ledger import FairnessLedger
from .metadata import ScriptureIndex
from .models import (
    Assignment, EngineConfig, Grouping, GroupingResult, RoleSpec, RunResult, RunSummary,
    Slot, SlotResult,
)
from .roster import RosterIndex
from .validation import validate_groupings, validate_roles

logger = logging.getLogger(__name__)


def slot_position(grouping_index: int, slot_index: int, stride: int) -> int:
    return grouping_index * stride + slot_index


def schedule_roles(
    groupings: List[Grouping],
    roster: RosterIndex,
    roles: List[RoleSpec],
    config: Optional[EngineConfig] = None,
    rng: Optional[np.random.Generator] = None,
    metadata: Optional[ScriptureIndex] = None,
) -> RunResult:
    """
    Fill every role on every slot of every grouping.
    Raises MalformedInputError before any assignment is made when the input is structurally bad.
    """
    config = config or EngineConfig()
    validate_roles(roles, roster.selectors.keys())
    validate_groupings(groupings, config.position_stride)
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    people = roster.people(roles)
    ledger = FairnessLedger(people, never_assigned=config.never_assigned)
    logger.info("Scheduling %d groupings with %d people across %d roles",
                len(groupings), len(people), len(roles))

    out: List[GroupingResult] = []
    assignments: List[Assignment] = []
    for g_idx, grouping in enumerate(groupings):
        label = grouping.label or f"Month {g_idx + 1}"
        logger.info("Processing %s (%d slots)", label, len(grouping.dates))
        used: Set[str] = set()
        slots: List[SlotResult] = []
        for s_idx, d in enumerate(grouping.dates):
            slot = Slot(
                date=d, grouping_index=g_idx, index=s_idx,
                position=slot_position(g_idx, s_idx, config.position_stride),
            )
            picks, made = assign_slot(slot, roles, roster, ledger, used, rng, config)
            assignments.extend(made)
            fields = metadata.fields_for(d) if metadata is not None else {}
            slots.append(SlotResult(date=d, position=slot.position, roles=picks, metadata=fields))
        out.append(GroupingResult(label=label, slots=slots))

    result = RunResult(groupings=out, assignments=assignments, ledger=ledger.snapshot())
    result.summary = RunSummary(
        people_assigned=ledger.people_assigned(),
        people_total=len(ledger),
        total_assignments=ledger.total_assignments(),
        unfilled_count=count_sentinels(result, config.sentinel),
    )
    logger.info("Assigned %d of %d people, %d assignments, %d unfilled",
                result.summary.people_assigned, result.summary.people_total,
                result.summary.total_assignments, result.summary.unfilled_count)
    return result
