# roles_core/ledger.py
from __future__ import annotations
from typing import Dict, Iterable, List

from .constants import NEVER_ASSIGNED
from .models import LedgerEntry, Person


class FairnessLedger:
    """
    Run-scoped fairness state, keyed by normalized person key.
    Grows only: there is no way to undo a recorded assignment.
    """

    def __init__(self, people: Iterable[Person] = (), never_assigned: int = NEVER_ASSIGNED):
        self.never_assigned = never_assigned
        self._counts: Dict[str, int] = {}
        self._last: Dict[str, int] = {}
        self._log: Dict[str, List[str]] = {}
        for p in people:
            self.register(p.key)

    def register(self, key: str):
        if key not in self._counts:
            self._counts[key] = 0
            self._last[key] = self.never_assigned
            self._log[key] = []

    def record(self, key: str, position: int, label: str):
        self.register(key)
        self._counts[key] += 1
        self._last[key] = position
        self._log[key].append(label)

    def role_count(self, key: str) -> int:
        return self._counts.get(key, 0)

    def last_position(self, key: str) -> int:
        return self._last.get(key, self.never_assigned)

    def log(self, key: str) -> List[str]:
        return list(self._log.get(key, []))

    def keys(self) -> List[str]:
        return list(self._counts.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def snapshot(self) -> Dict[str, LedgerEntry]:
        return {
            k: LedgerEntry(role_count=self._counts[k], last_position=self._last[k], log=list(self._log[k]))
            for k in self._counts
        }

    def people_assigned(self) -> int:
        return sum(1 for c in self._counts.values() if c > 0)

    def total_assignments(self) -> int:
        return sum(self._counts.values())
