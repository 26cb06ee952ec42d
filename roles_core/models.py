# roles_core/models.py
from __future__ import annotations
import datetime as dt
from typing import Any, Dict, Iterator, List, Optional, Tuple
from pydantic import BaseModel, Field, validator

from .constants import (
    SENTINEL, POSITION_STRIDE, NEVER_ASSIGNED,
    BASE_WEIGHT, USED_PENALTY, COUNT_BONUS_STEP, COUNT_BONUS_CAP,
    RECENCY_STEP, RECENCY_CAP, FIRST_ASSIGNMENT_BONUS, WEIGHT_FLOOR, TIE_BAND,
    normalize_name, proper_case,
)


class Person(BaseModel):
    key: str
    display: str

    @classmethod
    def from_record(cls, record: Any) -> Optional["Person"]:
        """Build from a roster entry ({"name": ...} or a bare string); None when it has no name."""
        if isinstance(record, dict):
            name = record.get("name")
        else:
            name = record
        if not isinstance(name, str):
            return None
        key = normalize_name(name)
        if not key:
            return None
        return cls(key=key, display=proper_case(name))


class RoleSpec(BaseModel):
    name: str = ""
    headcount: int = 1
    pool: str = ""                                     # roster key for a flat pool
    pools: Dict[str, str] = Field(default_factory=dict)  # sub-pool name -> roster key
    selector: str = "flat"


class Slot(BaseModel):
    date: Optional[dt.date] = None
    grouping_index: int = 0
    index: int = 0
    position: int = 0

    @property
    def is_first_in_grouping(self) -> bool:
        return self.index == 0


class Grouping(BaseModel):
    label: str = ""
    dates: List[Optional[dt.date]] = Field(default_factory=list)


class EngineConfig(BaseModel):
    base_weight: int = BASE_WEIGHT
    used_penalty: int = USED_PENALTY
    count_bonus_step: int = COUNT_BONUS_STEP
    count_bonus_cap: int = COUNT_BONUS_CAP
    recency_step: int = RECENCY_STEP
    recency_cap: int = RECENCY_CAP
    first_assignment_bonus: int = FIRST_ASSIGNMENT_BONUS
    weight_floor: int = WEIGHT_FLOOR
    tie_band: int = TIE_BAND
    position_stride: int = POSITION_STRIDE
    never_assigned: int = NEVER_ASSIGNED
    sentinel: str = SENTINEL
    allow_duplicate_in_role: bool = False
    random_seed: Optional[int] = None

    @validator("position_stride")
    def stride_positive(cls, v):
        if v <= 0:
            raise ValueError("position_stride must be positive")
        return v

    @validator("weight_floor")
    def floor_positive(cls, v):
        if v < 1:
            raise ValueError("weight_floor must be at least 1 so nobody is excluded outright")
        return v


class LedgerEntry(BaseModel):
    role_count: int = 0
    last_position: int = NEVER_ASSIGNED
    log: List[str] = Field(default_factory=list)


class Assignment(BaseModel):
    role: str
    label: str
    person: str          # normalized key, or the sentinel
    position: int
    reused: bool = False


class SlotResult(BaseModel):
    date: dt.date
    position: int
    roles: Dict[str, List[str]] = Field(default_factory=dict)   # role -> display names
    metadata: Dict[str, Any] = Field(default_factory=dict)      # non-role fields


class GroupingResult(BaseModel):
    label: str
    slots: List[SlotResult] = Field(default_factory=list)


class RunSummary(BaseModel):
    people_assigned: int = 0
    people_total: int = 0
    total_assignments: int = 0
    unfilled_count: int = 0


class RunResult(BaseModel):
    groupings: List[GroupingResult] = Field(default_factory=list)
    summary: RunSummary = Field(default_factory=RunSummary)
    assignments: List[Assignment] = Field(default_factory=list)
    ledger: Dict[str, LedgerEntry] = Field(default_factory=dict)

    def entries(self) -> Iterator[Tuple[str, SlotResult, str, List[str]]]:
        for g in self.groupings:
            for s in g.slots:
                for role, names in s.roles.items():
                    yield g.label, s, role, names
