# roles_core/io.py
from __future__ import annotations
import io
from typing import Any, Dict, List, Optional
import pandas as pd
import yaml

from .constants import DATE_FIELD, METADATA_FIELDS
from .metadata import ScriptureIndex
from .models import Grouping, RoleSpec, RunResult, RunSummary
from .roster import RosterIndex

SLOT_COLUMNS = ["grouping", "date"]


def _load_yaml(path: str) -> Any:
    # JSON files parse as YAML too
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_roster(path: str) -> RosterIndex:
    data = _load_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError("Roster file must map role keys to lists of people.")
    return RosterIndex.from_mapping(data)


def load_scripture(path: str, year: Optional[int] = None) -> ScriptureIndex:
    return ScriptureIndex.from_mapping(_load_yaml(path) or {}, year=year)


def groupings_from_dataframe(df: pd.DataFrame) -> List[Grouping]:
    missing = [c for c in SLOT_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")
    df = df.copy()
    df["grouping"] = df["grouping"].fillna("").astype(str)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")

    order: List[str] = []
    dates: Dict[str, List] = {}
    for _, r in df.iterrows():
        g = r["grouping"]
        if g not in dates:
            order.append(g)
            dates[g] = []
        d = r["date"]
        dates[g].append(None if pd.isna(d) else d.date())
    return [Grouping(label=g, dates=dates[g]) for g in order]


def load_groupings(path: str) -> List[Grouping]:
    if path.lower().endswith(".csv"):
        return groupings_from_dataframe(pd.read_csv(path))
    items = _load_yaml(path) or []
    if not isinstance(items, list):
        raise ValueError("Slots file must be a list of groupings with 'label' and 'dates'.")
    return [Grouping(**item) for item in items]


def _cell(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " / ".join(str(v) for v in value if str(v))
    return "" if value is None else str(value)


def result_to_dataframe(result: RunResult, roles: List[RoleSpec]) -> pd.DataFrame:
    role_names = [r.name for r in roles]
    rows = []
    for g in result.groupings:
        for s in g.slots:
            row = {"Grouping": g.label, DATE_FIELD: s.date.isoformat()}
            for name in role_names:
                row[name] = _cell(s.roles.get(name, []))
            for field in METADATA_FIELDS:
                if field in s.metadata:
                    row[field] = _cell(s.metadata[field])
            rows.append(row)
    columns = ["Grouping", DATE_FIELD] + role_names
    df = pd.DataFrame(rows)
    extra = [c for c in METADATA_FIELDS if c in df.columns]
    return df.reindex(columns=columns + extra)


def save_result_csv_bytes(result: RunResult, roles: List[RoleSpec]) -> bytes:
    buf = io.StringIO()
    result_to_dataframe(result, roles).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def summary_message(summary: RunSummary, sentinel: str = "TBD") -> str:
    lines = [
        "Auto-generation completed!",
        "",
        f"{summary.people_assigned} out of {summary.people_total} people assigned roles",
        f"Total assignments: {summary.total_assignments}",
    ]
    if summary.unfilled_count > 0:
        lines.append(f'{summary.unfilled_count} positions marked as "{sentinel}"')
    else:
        lines.append("All positions filled!")
    return "\n".join(lines)
