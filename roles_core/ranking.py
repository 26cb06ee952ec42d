# roles_core/ranking.py
"""
Weighted candidate ordering for one role on one slot.

Weight starts at ``base_weight`` and is adjusted by:
- a penalty when the person already served in the current grouping
- a bonus that shrinks as their total assignments grow
- a recency bonus for time since their last assignment (capped)
- a flat boost for someone who has never served
The result is floored so nobody is excluded outright.
"""
from __future__ import annotations
from typing import List, Optional, Set, Tuple
import numpy as np

from .ledger import FairnessLedger
from .models import EngineConfig, Person


def candidate_weight(
    person: Person,
    position: int,
    used: Set[str],
    ledger: FairnessLedger,
    config: EngineConfig,
) -> int:
    count = ledger.role_count(person.key)
    since = position - ledger.last_position(person.key)

    weight = config.base_weight
    if person.key in used:
        weight -= config.used_penalty
    weight += max(0, config.count_bonus_cap - count) * config.count_bonus_step
    weight += min(since * config.recency_step, config.recency_cap)
    if count == 0:
        weight += config.first_assignment_bonus
    return max(weight, config.weight_floor)


def candidate_weights(
    candidates: List[Person],
    position: int,
    used: Set[str],
    ledger: FairnessLedger,
    config: Optional[EngineConfig] = None,
) -> List[Tuple[Person, int]]:
    config = config or EngineConfig()
    return [(p, candidate_weight(p, position, used, ledger, config)) for p in candidates]


def _bands(weighted: List[Tuple[Person, int]], tie_band: int) -> List[List[Tuple[Person, int]]]:
    # a band holds entries within tie_band of its heaviest member
    bands: List[List[Tuple[Person, int]]] = []
    for item in weighted:
        if bands and bands[-1][0][1] - item[1] < tie_band:
            bands[-1].append(item)
        else:
            bands.append([item])
    return bands


def rank_candidates(
    candidates: List[Person],
    position: int,
    used: Set[str],
    ledger: FairnessLedger,
    rng: np.random.Generator,
    config: Optional[EngineConfig] = None,
) -> List[Person]:
    """Most preferred first. Near-equal weights are shuffled with ``rng``; the ledger is not touched."""
    if not candidates:
        return []
    config = config or EngineConfig()
    weighted = sorted(
        candidate_weights(candidates, position, used, ledger, config),
        key=lambda pw: -pw[1],
    )
    ranked: List[Person] = []
    for band in _bands(weighted, config.tie_band):
        if len(band) == 1:
            ranked.append(band[0][0])
            continue
        for i in rng.permutation(len(band)):
            ranked.append(band[int(i)][0])
    return ranked
