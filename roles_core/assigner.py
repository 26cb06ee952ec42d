# roles_core/assigner.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Set, Tuple
import numpy as np

from .constants import slot_label
from .ledger import FairnessLedger
from .models import Assignment, EngineConfig, Person, RoleSpec, Slot
from .ranking import rank_candidates
from .roster import RosterIndex

logger = logging.getLogger(__name__)


def pick_fallback(
    eligible: List[Person],
    used: Set[str],
    ledger: FairnessLedger,
    exclude: Optional[Set[str]] = None,
) -> Optional[Person]:
    """Already-used eligible person assigned longest ago; ties go to pool order."""
    exclude = exclude or set()
    pool = [p for p in eligible if p.key in used and p.key not in exclude]
    if not pool:
        return None
    return min(pool, key=lambda p: ledger.last_position(p.key))


def _fill_role(
    role: RoleSpec,
    slot: Slot,
    eligible: List[Person],
    ledger: FairnessLedger,
    used: Set[str],
    rng: np.random.Generator,
    config: EngineConfig,
) -> Tuple[List[str], List[Assignment]]:
    label = slot_label(role.name, slot.grouping_index, slot.index)
    names: List[str] = []
    made: List[Assignment] = []
    chosen: Set[str] = set()

    def commit(p: Person, reused: bool):
        used.add(p.key)
        chosen.add(p.key)
        ledger.record(p.key, slot.position, label)
        names.append(p.display)
        made.append(Assignment(role=role.name, label=label, person=p.key,
                               position=slot.position, reused=reused))

    ranked = rank_candidates(eligible, slot.position, used, ledger, rng, config)
    fresh = [p for p in ranked if p.key not in used]
    for p in fresh:
        if len(names) >= role.headcount:
            break
        commit(p, reused=False)
        logger.debug("%s -> %s", label, p.display)

    while len(names) < role.headcount:
        exclude = set() if config.allow_duplicate_in_role else chosen
        p = pick_fallback(eligible, used, ledger, exclude=exclude)
        if p is None:
            logger.warning("%s: pool exhausted, marking %s", label, config.sentinel)
            names.append(config.sentinel)
            made.append(Assignment(role=role.name, label=label, person=config.sentinel,
                                   position=slot.position))
            continue
        commit(p, reused=True)
        logger.debug("%s -> %s (reused)", label, p.display)

    return names, made


def assign_slot(
    slot: Slot,
    roles: List[RoleSpec],
    roster: RosterIndex,
    ledger: FairnessLedger,
    used: Set[str],
    rng: np.random.Generator,
    config: Optional[EngineConfig] = None,
) -> Tuple[Dict[str, List[str]], List[Assignment]]:
    """
    Fill every role on one slot, in declared order.
    Returns ({role: [display names]}, assignments made). Mutates ``used`` and ``ledger``.
    """
    config = config or EngineConfig()
    out: Dict[str, List[str]] = {}
    made: List[Assignment] = []
    for role in roles:
        eligible = roster.eligible(role, slot)
        if not eligible:
            label = slot_label(role.name, slot.grouping_index, slot.index)
            logger.warning("%s: no eligible people configured, marking %s", label, config.sentinel)
            out[role.name] = [config.sentinel] * role.headcount
            made.extend(
                Assignment(role=role.name, label=label, person=config.sentinel, position=slot.position)
                for _ in range(role.headcount)
            )
            continue
        names, role_made = _fill_role(role, slot, eligible, ledger, used, rng, config)
        out[role.name] = names
        made.extend(role_made)
    return out, made
