"""
roles_core package: roster pools, fairness ledger, candidate ranking, slot assignment and run orchestration.
"""
from .constants import SENTINEL, POSITION_STRIDE, NEVER_ASSIGNED, normalize_name, proper_case
from .models import (
    Person, RoleSpec, Slot, Grouping, EngineConfig, LedgerEntry, Assignment,
    SlotResult, GroupingResult, RunSummary, RunResult,
)
from .roster import RosterIndex, POOL_SELECTORS, SELECTOR_POOLS
from .ledger import FairnessLedger
from .ranking import candidate_weight, candidate_weights, rank_candidates
from .assigner import assign_slot, pick_fallback
from .scheduler import schedule_roles
from .validation import MalformedInputError

__version__ = "0.1.0"
