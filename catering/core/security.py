# catering/core/security.py
import re
import secrets
import hashlib
from datetime import datetime, timedelta, timezone
from typing import Optional

from catering.core.config import settings

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
PHONE_PATTERN = re.compile(r'^\+?[1-9]\d{1,14}$')
PHONE_SEPARATORS = re.compile(r'[\s\-\(\)\.]')


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_session_token() -> str:
    """Random 64-character hex token handed to the client in the session cookie."""
    return secrets.token_hex(32)


def token_digest(token: str) -> str:
    """
    Digest stored in place of the session token.

    Only the SHA-256 hex digest reaches the database, so a leaked sessions
    table cannot be replayed as cookies.
    """
    return hashlib.sha256(token.encode()).hexdigest()


def session_expiry(now: Optional[datetime] = None) -> datetime:
    return (now or utc_now()) + timedelta(seconds=settings.SESSION_MAX_AGE)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def is_valid_phone(phone: str) -> bool:
    """
    Loose E.164 check for customer phone numbers.

    Spaces, dashes, dots and parentheses are ignored, so "+1 (555) 010-0100"
    passes.
    """
    return bool(PHONE_PATTERN.match(PHONE_SEPARATORS.sub('', phone)))
