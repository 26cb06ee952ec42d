# roles_core/fairness.py
from __future__ import annotations
import math
from typing import Iterable, Mapping
import pandas as pd

from .models import LedgerEntry, Person, RunResult


def fairness_bound(total_slots: int, num_people: int, slack: int = 2) -> int:
    if num_people <= 0:
        return 0
    return math.ceil(total_slots / num_people) + slack


def count_sentinels(result: RunResult, sentinel: str) -> int:
    return sum(names.count(sentinel) for _, _, _, names in result.entries())


def fairness_report(entries: Mapping[str, LedgerEntry], people: Iterable[Person]) -> pd.DataFrame:
    """One row per person from a ledger snapshot, busiest first."""
    rows = []
    for p in people:
        e = entries.get(p.key) or LedgerEntry()
        rows.append({
            "name": p.display,
            "role_count": e.role_count,
            "last_position": e.last_position,
            "assignments": "; ".join(e.log),
        })
    df = pd.DataFrame(rows, columns=["name", "role_count", "last_position", "assignments"])
    if df.empty:
        return df
    return df.sort_values(["role_count", "name"], ascending=[False, True]).reset_index(drop=True)
