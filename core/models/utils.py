"""ID and timestamp utilities."""

import secrets
from datetime import datetime, timezone


def gen_id(prefix: str) -> str:
    """Generate prefixed IDs: ai_xxx, user_xxx"""
    return f"{prefix}{secrets.token_urlsafe(12)}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
