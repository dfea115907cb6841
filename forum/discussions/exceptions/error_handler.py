"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple

from forum.discussions.config.settings import MAX_ERROR_MESSAGE_LENGTH
from forum.discussions.exceptions.exceptions import ValidationError
from forum.discussions.utils.formatting.response_formatter import bad_request, server_error

logger = logging.getLogger(__name__)


# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for resources"""

    if isinstance(e, ValidationError):
        logger.warning(f"Validation failed: {e}")
        return bad_request(str(e))

    sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:MAX_ERROR_MESSAGE_LENGTH]
    logger.error(f"Unexpected error: {type(e).__name__}: {sanitized_error}")
    return server_error(sanitized_error or "Server error")
