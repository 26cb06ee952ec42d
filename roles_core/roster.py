# roles_core/roster.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .models import Person, RoleSpec, Slot

logger = logging.getLogger(__name__)

# -----------------------
# Pool selectors
# -----------------------
# A selector maps (role, slot) to the roster key the role draws from on that slot.
PoolSelector = Callable[[RoleSpec, Slot], str]

def select_flat(role: RoleSpec, slot: Slot) -> str:
    return role.pool

def select_first_slot(role: RoleSpec, slot: Slot) -> str:
    """Junior pool on the first slot of a grouping, general pool on every other slot."""
    if slot.is_first_in_grouping:
        return role.pools.get("first", "")
    return role.pools.get("rest", "")

POOL_SELECTORS: Dict[str, PoolSelector] = {
    "flat": select_flat,
    "first_slot": select_first_slot,
}

# Named sub-pools each built-in selector reads; () means the flat ``pool`` key.
SELECTOR_POOLS: Dict[str, Tuple[str, ...]] = {
    "flat": (),
    "first_slot": ("first", "rest"),
}


def _flatten(data: Mapping[str, Any], prefix: str = "") -> Dict[str, List[Any]]:
    # nested mappings become dotted keys: {"sevinisunday": {"kids": [...]}} -> "sevinisunday.kids"
    out: Dict[str, List[Any]] = {}
    for k, v in data.items():
        key = f"{prefix}{k}"
        if isinstance(v, Mapping):
            out.update(_flatten(v, prefix=f"{key}."))
        elif isinstance(v, (list, tuple)):
            out[key] = list(v)
        else:
            logger.debug("Ignoring roster entry %r: not a list of people", key)
    return out


class RosterIndex:
    """Per-pool eligible people, keyed by roster key."""

    def __init__(self, pools: Optional[Dict[str, List[Person]]] = None,
                 selectors: Optional[Dict[str, PoolSelector]] = None):
        self._pools: Dict[str, List[Person]] = dict(pools or {})
        self._selectors: Dict[str, PoolSelector] = dict(selectors or POOL_SELECTORS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any],
                     selectors: Optional[Dict[str, PoolSelector]] = None) -> "RosterIndex":
        pools: Dict[str, List[Person]] = {}
        for key, records in _flatten(data or {}).items():
            people: List[Person] = []
            seen = set()
            for rec in records:
                p = Person.from_record(rec)
                if p is None:
                    logger.debug("Dropping malformed roster entry in %r: %r", key, rec)
                    continue
                if p.key in seen:
                    continue
                seen.add(p.key)
                people.append(p)
            pools[key] = people
        return cls(pools, selectors)

    @property
    def selectors(self) -> Dict[str, PoolSelector]:
        return dict(self._selectors)

    def pool(self, key: str) -> List[Person]:
        return list(self._pools.get(key, []))

    def pool_keys(self, role: RoleSpec) -> List[str]:
        if role.pools:
            return [k for k in role.pools.values() if k]
        return [role.pool] if role.pool else []

    def eligible(self, role: RoleSpec, slot: Slot) -> List[Person]:
        """People who may fill ``role`` on ``slot``; [] when nothing is configured."""
        selector = self._selectors.get(role.selector, select_flat)
        return self.pool(selector(role, slot))

    def people(self, roles: Iterable[RoleSpec]) -> List[Person]:
        """Every distinct person reachable through ``roles``, first-seen order."""
        out: List[Person] = []
        seen = set()
        for role in roles:
            for key in self.pool_keys(role):
                for p in self._pools.get(key, []):
                    if p.key not in seen:
                        seen.add(p.key)
                        out.append(p)
        return out
