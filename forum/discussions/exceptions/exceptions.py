"""Custom exceptions - SoC principle"""

class DiscussionError(Exception):
    """Base exception for Discussions module"""
    pass

class ValidationError(DiscussionError):
    """Input validation error"""
    pass
