"""Pagination Utilities - DRY Implementation for Consistent Pagination (SoC)"""
from typing import Optional, Tuple

from forum.discussions.config.settings import MAX_PAGE_SIZE, SEARCH_PER_PAGE

def get_pagination_params(page_param: Optional[str], limit_param: Optional[str], default_limit: int = SEARCH_PER_PAGE) -> Tuple[int, int]:
    """
    Extract and validate pagination parameters - DRY utility

    Args:
        page_param: Page parameter as string
        limit_param: Limit parameter as string
        default_limit: Page size used when limit_param is absent or invalid

    Returns:
        Tuple of (page, limit) as integers
    """
    try:
        page = int(page_param) if page_param else 1
        page = max(1, page)
    except (ValueError, TypeError):
        page = 1

    try:
        limit = int(limit_param) if limit_param else default_limit
        limit = max(1, min(limit, MAX_PAGE_SIZE))
    except (ValueError, TypeError):
        limit = default_limit

    return page, limit

def page_to_skip(page: int, limit: int) -> int:
    """Offset of the first document of a 1-based page"""
    return (max(1, page) - 1) * limit
