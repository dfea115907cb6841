"""Centralized Input Validation - DRY Implementation"""
from typing import Dict

from forum.discussions.exceptions.exceptions import ValidationError

class InputValidator:
    """Centralized input validation to eliminate duplication"""

    @staticmethod
    def require_text_fields(data: Dict, *fields: str) -> Dict[str, str]:
        """Return stripped values of required text fields, or raise ValidationError"""
        values = {}
        missing = []

        for field in fields:
            value = data.get(field)
            if not isinstance(value, str) or not value.strip():
                missing.append(field)
                continue
            values[field] = value.strip()

        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        return values

def get_json_data():
    """Centralized JSON parsing"""
    from flask import request
    return request.get_json(silent=True) or {}

def get_optional_query_params(**param_defaults):
    """Get optional query parameters with defaults"""
    from flask import request
    params = {}

    for param, default in param_defaults.items():
        params[param] = request.args.get(param, default)

    return params
