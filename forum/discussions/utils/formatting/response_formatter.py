"""Uniform response envelope for all discussion resources"""
from datetime import datetime
from typing import Any, Tuple

from bson import ObjectId

def to_json_safe(value: Any) -> Any:
    """Recursively turn ObjectId into str and datetime into ISO 8601"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(item) for item in value]
    return value

def ok(data: Any) -> Tuple[dict, int]:
    return {"success": True, "data": to_json_safe(data)}, 200

def bad_request(message: str) -> Tuple[dict, int]:
    return {"success": False, "message": message}, 400

def server_error(message: str) -> Tuple[dict, int]:
    return {"success": False, "message": message}, 500
