# catering/api/v1/dependencies/auth.py
from typing import Optional
from fastapi import Cookie, Depends, HTTPException, status

from catering.models.user import User
from catering.services.auth_service import AuthService
from catering.core.config import settings
from catering.exceptions.auth_exceptions import (
    AdminRequiredError,
    AuthException,
    MissingSessionError,
    UserNotActiveError
)


def _auth_http_error(e: AuthException) -> HTTPException:
    if isinstance(e, (UserNotActiveError, AdminRequiredError)):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


async def get_session_token(
        session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> str:
    """
    Session token from the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing
    """
    if not session_id:
        raise _auth_http_error(MissingSessionError())
    return session_id


async def get_current_user(
        session_token: str = Depends(get_session_token)
) -> User:
    """
    Authenticated user behind the session cookie.

    Raises:
        HTTPException: 401 if the session is invalid or expired,
            403 if the account is deactivated
    """
    try:
        return await AuthService.authenticate(session_token)
    except AuthException as e:
        raise _auth_http_error(e)


async def require_admin(
        current_user: User = Depends(get_current_user)
) -> User:
    """
    Raises:
        HTTPException: 403 if the user is not an admin
    """
    try:
        return AuthService.ensure_admin(current_user)
    except AdminRequiredError as e:
        raise _auth_http_error(e)
