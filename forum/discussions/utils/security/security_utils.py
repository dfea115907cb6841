"""Security utilities - DRY principle"""
import re
from typing import Any

from bson import ObjectId

def to_object_id(obj_id: Any) -> ObjectId:
    """Convert a path/claim id to ObjectId, rejecting operator documents.

    Raises bson.errors.InvalidId for malformed ids, which the resources
    report as a server error like any other query failure.
    """
    if isinstance(obj_id, dict):
        raise TypeError("ObjectId cannot be dict (NoSQL injection attempt)")
    if isinstance(obj_id, ObjectId):
        return obj_id
    return ObjectId(obj_id)

def sanitize_regex_input(pattern: str) -> str:
    """Escape regex metacharacters"""
    return re.escape(str(pattern).strip())
