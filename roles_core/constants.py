# roles_core/constants.py
from __future__ import annotations
from typing import Dict, List

SENTINEL = "TBD"

# position = grouping_index * POSITION_STRIDE + slot_index
POSITION_STRIDE = 10
NEVER_ASSIGNED = -10

# ---------------------
# Ranking weights
# ---------------------
BASE_WEIGHT = 100
USED_PENALTY = 60
COUNT_BONUS_STEP = 10
COUNT_BONUS_CAP = 10
RECENCY_STEP = 5
RECENCY_CAP = 50
FIRST_ASSIGNMENT_BONUS = 20
WEIGHT_FLOOR = 5
TIE_BAND = 10

# --------------------------------
# Slot fields that are not roles
# --------------------------------
SCRIPTURE_PASSAGE = "Scripture Passage"
MEMORY_VERSE = "MV"
MESSAGE_THEME = "Message Theme"
MESSAGE = "Message"
DATE_FIELD = "Date"

METADATA_FIELDS: List[str] = [SCRIPTURE_PASSAGE, MEMORY_VERSE, MESSAGE_THEME, MESSAGE]

# heading -> roster key, in the order roles are filled on each Sunday
DEFAULT_ROLE_KEYS: Dict[str, str] = {
    "Opening Prayer": "openingprayer",
    "Praise & Worship": "praiseandworship",
    "Scripture Reading": "reading",
    "Intercessory Prayer": "intercessory",
    "Offertory Prayer": "offertoryprayer",
}

# ---------------------
# Normalization helpers
# ---------------------
def normalize_name(s: str) -> str:
    """Case-insensitive identity key for a person."""
    if s is None:
        return ""
    return " ".join(str(s).split()).lower()

def proper_case(s: str) -> str:
    if s is None:
        return ""
    return " ".join(w[:1].upper() + w[1:] for w in str(s).lower().split())

def slot_label(role: str, grouping_index: int, slot_index: int) -> str:
    return f"{role} (M{grouping_index + 1}S{slot_index + 1})"
