"""
Internal helpers for tests (not imported by the engine).
"""
from __future__ import annotations
import datetime as dt
from typing import List, Optional

from .models import Grouping, Person, RoleSpec, Slot


def quick_person(name: str) -> Person:
    p = Person.from_record({"name": name})
    if p is None:
        raise ValueError(f"not a usable name: {name!r}")
    return p

def quick_role(name: str, pool: str = "", headcount: int = 1) -> RoleSpec:
    return RoleSpec(name=name, pool=pool or name.lower(), headcount=headcount)

def quick_slot(grouping_index: int = 0, index: int = 0, stride: int = 10,
               day: Optional[dt.date] = None) -> Slot:
    return Slot(
        date=day or dt.date(2026, 1, 4) + dt.timedelta(weeks=index),
        grouping_index=grouping_index, index=index,
        position=grouping_index * stride + index,
    )

def weekly_groupings(months: int, sundays: int, start: dt.date = dt.date(2026, 1, 4)) -> List[Grouping]:
    out = []
    for m in range(months):
        first = start + dt.timedelta(weeks=m * sundays)
        out.append(Grouping(
            label=f"Month {m + 1}",
            dates=[first + dt.timedelta(weeks=i) for i in range(sundays)],
        ))
    return out
