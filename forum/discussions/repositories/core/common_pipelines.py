"""Shared Pipeline Stages - Joins reused across entities (SoC)"""
from typing import List, Dict

from forum.discussions.config.settings import COLLECTIONS

# ═══════════════════════════════════════════════════════════════════════════════
# CREATOR JOIN
# ═══════════════════════════════════════════════════════════════════════════════

def build_lookup_user_stages(field: str = "createdBy") -> List[Dict]:
    """Replace a user reference with the user document.

    Documents whose user no longer exists are dropped by the unwind.
    """
    return [
        {"$lookup": {
            "from": COLLECTIONS["users"],
            "localField": field,
            "foreignField": "_id",
            "as": field
        }},
        {"$unwind": f"${field}"}
    ]

NEWEST_FIRST: Dict[str, int] = {"createdAt": -1, "_id": -1}
