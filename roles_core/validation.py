# roles_core/validation.py
from __future__ import annotations
from typing import Iterable, List

from .models import Grouping, RoleSpec
from .roster import SELECTOR_POOLS, RosterIndex


class MalformedInputError(ValueError):
    """Structural defect in the run input; the whole run is abandoned."""


def _check_role_pools(name: str, role: RoleSpec) -> None:
    wanted = SELECTOR_POOLS.get(role.selector)
    if wanted is None:
        # custom selector: its pool layout is its own business
        return
    if not wanted:
        if not role.pool:
            extra = " (it sets 'pools'; use a selector that reads them)" if role.pools else ""
            raise MalformedInputError(f"Role '{name}' has no 'pool' for selector '{role.selector}'{extra}.")
        return
    missing = [k for k in wanted if not role.pools.get(k)]
    if missing:
        raise MalformedInputError(
            f"Role '{name}' uses selector '{role.selector}' but is missing pools: {', '.join(missing)}."
        )


def validate_roles(roles: List[RoleSpec], selectors: Iterable[str]) -> None:
    known = set(selectors)
    seen = set()
    for i, role in enumerate(roles, start=1):
        name = (role.name or "").strip()
        if not name:
            raise MalformedInputError(f"Role #{i} has no name.")
        if name in seen:
            raise MalformedInputError(f"Role '{name}' is defined twice.")
        seen.add(name)
        if role.headcount < 1:
            raise MalformedInputError(f"Role '{name}' must require at least one person.")
        if role.selector not in known:
            raise MalformedInputError(f"Role '{name}' uses unknown pool selector '{role.selector}'.")
        _check_role_pools(name, role)


def validate_groupings(groupings: List[Grouping], stride: int) -> None:
    for g_idx, g in enumerate(groupings):
        where = g.label or f"grouping {g_idx + 1}"
        if len(g.dates) > stride:
            raise MalformedInputError(
                f"{where}: {len(g.dates)} slots exceed the position stride of {stride}."
            )
        for s_idx, d in enumerate(g.dates):
            if d is None:
                raise MalformedInputError(f"{where}: slot {s_idx + 1} has no date.")


def check_coverage(roster: RosterIndex, roles: List[RoleSpec]) -> List[str]:
    """Roles (or "<role> [sub-pool]") with nobody to draw from (advisory)."""
    missing = []
    for role in roles:
        if role.pools:
            for sub, key in role.pools.items():
                if not roster.pool(key):
                    missing.append(f"{role.name} [{sub}]")
        elif not roster.pool(role.pool):
            missing.append(role.name)
    return missing
