# roles_core/metadata.py
from __future__ import annotations
import datetime as dt
from typing import Any, Dict, List, Mapping, Optional

from .constants import SCRIPTURE_PASSAGE, MEMORY_VERSE, MESSAGE_THEME, MESSAGE


def format_lookup_date(d: dt.date) -> str:
    return d.strftime("%d-%m-%Y")


def _pad_pair(values: List[str]) -> List[str]:
    return (list(values) + ["", ""])[:2]


class ScriptureIndex:
    """Passage/memory-verse/theme entries keyed by DD-MM-YYYY."""

    def __init__(self, entries: Optional[Dict[str, List[Mapping[str, Any]]]] = None):
        self._entries = dict(entries or {})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], year: Optional[int] = None) -> "ScriptureIndex":
        # accepts {"scripturePortions": {year: [...]}} or {year: [...]}
        data = data.get("scripturePortions", data) if data else {}
        years = [str(year)] if year is not None else [str(y) for y in data.keys()]
        entries: Dict[str, List[Mapping[str, Any]]] = {}
        for y in years:
            items = data.get(y)
            if items is None and y.isdigit():
                items = data.get(int(y))
            for item in items or []:
                key = str(item.get("date", "")).strip()
                if key:
                    entries[key] = list(item.get("scriptures") or [])
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def fields_for(self, d: dt.date) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        scriptures = self._entries.get(format_lookup_date(d))
        if scriptures is not None:
            fields[SCRIPTURE_PASSAGE] = _pad_pair([s.get("passage", "") for s in scriptures])
            fields[MEMORY_VERSE] = _pad_pair([s.get("mv", "") for s in scriptures])
            theme = next((s["messageTheme"] for s in scriptures if s.get("messageTheme")), None)
            if theme:
                fields[MESSAGE_THEME] = theme
        fields[MESSAGE] = ""
        return fields
