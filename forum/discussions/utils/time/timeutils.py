"""Time utilities - DRY principle"""
from datetime import datetime, timezone

# MongoDB stores naive UTC; aware UTC is converted on write
def now_utc() -> datetime:
    return datetime.now(timezone.utc)
