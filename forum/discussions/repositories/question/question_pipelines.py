"""Question Domain Pipelines - Question DB Queries (SoC)"""
from typing import List, Dict, Optional

from bson import ObjectId

from forum.discussions.repositories.core.common_pipelines import build_lookup_user_stages, NEWEST_FIRST
from forum.discussions.utils.security.security_utils import sanitize_regex_input

# ═══════════════════════════════════════════════════════════════════════════════
# QUESTION READ PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_questions_feed_pipeline() -> List[Dict]:
    """All questions with creator, newest first"""
    return [
        *build_lookup_user_stages("createdBy"),
        {"$sort": NEWEST_FIRST}
    ]

def build_question_by_id_pipeline(question_id: ObjectId) -> List[Dict]:
    """Single question with creator"""
    return [
        {"$match": {"_id": question_id}},
        *build_lookup_user_stages("createdBy")
    ]

def build_top_discussions_pipeline(limit: int) -> List[Dict]:
    """Questions ordered by answer count ascending, as the product currently ships it"""
    return [
        *build_lookup_user_stages("createdBy"),
        {"$sort": {"computed.answers": 1}},
        {"$limit": limit}
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# SEARCH PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_search_match(query: Optional[str]) -> Dict:
    """Case-insensitive literal match on title or body; empty query matches all"""
    if not query or not query.strip():
        return {}
    pattern = sanitize_regex_input(query)
    return {"$or": [
        {"title": {"$regex": pattern, "$options": "i"}},
        {"body": {"$regex": pattern, "$options": "i"}}
    ]}

def build_question_search_pipeline(query: Optional[str], skip: int, limit: int) -> List[Dict]:
    """One page of matching questions with creator, newest first"""
    return [
        {"$match": build_search_match(query)},
        *build_lookup_user_stages("createdBy"),
        {"$sort": NEWEST_FIRST},
        {"$skip": skip},
        {"$limit": limit}
    ]
