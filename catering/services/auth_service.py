# catering/services/auth_service.py
import logging
from typing import Optional, Tuple

from catering.models.user import User, Session
from catering.core.security import new_session_token, token_digest, session_expiry, utc_now
from catering.exceptions.auth_exceptions import (
    AdminRequiredError,
    InvalidSessionError,
    MissingSessionError,
    SessionExpiredError,
    UserNotActiveError
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Cookie sessions for staff.

    Credentials are checked upstream; this service only issues, resolves
    and revokes session tokens.
    """

    @staticmethod
    async def open_session(user: User) -> Tuple[str, Session]:
        """
        Issue a new session for user.

        Returns:
            Tuple of (plain token for the cookie, stored session)
        """
        token = new_session_token()
        session = await Session.create(
            user=user,
            token_digest=token_digest(token),
            expires_at=session_expiry()
        )
        logger.info(f"Session opened for user {user.id}")
        return token, session

    @staticmethod
    async def authenticate(token: Optional[str]) -> User:
        """
        Resolve a session token to its active user.

        Raises:
            MissingSessionError: If no token is given
            InvalidSessionError: If the token is unknown
            SessionExpiredError: If the session expired; it is removed
            UserNotActiveError: If the account is deactivated
        """
        if not token:
            raise MissingSessionError()

        session = await Session.filter(token_digest=token_digest(token)).select_related("user").first()
        if session is None:
            raise InvalidSessionError()

        if session.is_expired():
            await session.delete()
            raise SessionExpiredError()

        if not session.user.is_active:
            raise UserNotActiveError(str(session.user.id))

        return session.user

    @staticmethod
    def ensure_admin(user: User) -> User:
        """
        Raises:
            AdminRequiredError: If user is not an admin
        """
        if not user.is_admin:
            raise AdminRequiredError(str(user.id))
        return user

    @staticmethod
    async def close_session(token: str) -> bool:
        """Revoke a session; returns False if it was already gone."""
        deleted = await Session.filter(token_digest=token_digest(token)).delete()
        return deleted > 0

    @staticmethod
    async def purge_expired_sessions() -> int:
        """Delete every expired session and return how many were removed."""
        deleted = await Session.filter(expires_at__lte=utc_now()).delete()
        if deleted:
            logger.info(f"Purged {deleted} expired sessions")
        return deleted
