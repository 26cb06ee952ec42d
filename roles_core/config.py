# roles_core/config.py
from __future__ import annotations
import os
import textwrap
from typing import List, Optional
import yaml

from .models import EngineConfig, RoleSpec

# ===== Engine defaults =====
DEFAULT_CONFIG = {
    "base_weight": 100,
    "used_penalty": 60,
    "count_bonus_step": 10,
    "count_bonus_cap": 10,
    "recency_step": 5,
    "recency_cap": 50,
    "first_assignment_bonus": 20,
    "weight_floor": 5,
    "tie_band": 10,              # weights closer than this are shuffled
    "position_stride": 10,       # must exceed the most slots in one grouping
    "never_assigned": -10,
    "sentinel": "TBD",
    "allow_duplicate_in_role": False,
    "random_seed": None,
}

# ===== Default roles (filled in this order every Sunday) =====
DEFAULT_ROLES_YAML = textwrap.dedent("""\
roles:
  - name: Opening Prayer
    pool: openingprayer
  - name: Praise & Worship
    pool: praiseandworship
  - name: Scripture Reading
    headcount: 2
    selector: first_slot
    pools:
      first: sevinisunday.kids
      rest: reading
  - name: Intercessory Prayer
    pool: intercessory
  - name: Offertory Prayer
    pool: offertoryprayer
""")

# ===== Sample roster =====
DEFAULT_SAMPLE_ROSTER_YAML = textwrap.dedent("""\
openingprayer:
  - name: ruth abraham
  - name: daniel joseph
  - name: grace thomas
  - name: samuel mathew
praiseandworship:
  - name: anna varghese
  - name: joel philip
  - name: miriam george
reading:
  - name: grace thomas
  - name: samuel mathew
  - name: lydia john
  - name: peter paul
  - name: hannah samuel
sevinisunday:
  kids:
    - name: aaron joseph
    - name: esther mathew
    - name: caleb george
intercessory:
  - name: ruth abraham
  - name: lydia john
  - name: joel philip
offertoryprayer:
  - name: daniel joseph
  - name: peter paul
  - name: anna varghese
""")

DEFAULT_SAMPLE_SLOTS_YAML = textwrap.dedent("""\
- label: January
  dates: [2026-01-04, 2026-01-11, 2026-01-18, 2026-01-25]
- label: February
  dates: [2026-02-01, 2026-02-08, 2026-02-15, 2026-02-22]
- label: March
  dates: [2026-03-01, 2026-03-08, 2026-03-15, 2026-03-22, 2026-03-29]
""")


def ensure_assets_exist(directory: str = "assets"):
    os.makedirs(directory, exist_ok=True)
    files = {
        "roles.yaml": DEFAULT_ROLES_YAML,
        "roster.yaml": DEFAULT_SAMPLE_ROSTER_YAML,
        "slots.yaml": DEFAULT_SAMPLE_SLOTS_YAML,
    }
    for name, text in files.items():
        path = os.path.join(directory, name)
        if not os.path.exists(path):
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)


def parse_role_specs(text: str) -> List[RoleSpec]:
    obj = yaml.safe_load(text) or {}
    items = obj.get("roles", []) if isinstance(obj, dict) else obj
    if not isinstance(items, list):
        raise ValueError("Role definitions must be a list under 'roles'.")
    return [RoleSpec(**item) for item in items]


def default_role_specs() -> List[RoleSpec]:
    return parse_role_specs(DEFAULT_ROLES_YAML)


def load_role_specs(path: Optional[str]) -> List[RoleSpec]:
    if not path:
        return default_role_specs()
    with open(path, "r", encoding="utf-8") as f:
        return parse_role_specs(f.read())


def load_engine_config(path: Optional[str] = None, **overrides) -> EngineConfig:
    values = dict(DEFAULT_CONFIG)
    if path:
        with open(path, "r", encoding="utf-8") as f:
            values.update(yaml.safe_load(f) or {})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return EngineConfig(**values)
