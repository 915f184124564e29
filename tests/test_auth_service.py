# tests/test_auth_service.py
from datetime import timedelta

import pytest

from catering.core.security import is_valid_phone, token_digest, utc_now
from catering.models.user import Session
from catering.services.auth_service import AuthService
from catering.exceptions.auth_exceptions import (
    AdminRequiredError,
    InvalidSessionError,
    MissingSessionError,
    SessionExpiredError,
    UserNotActiveError,
)


async def test_only_token_digest_is_stored(staff):
    token, session = await AuthService.open_session(staff)

    assert session.token_digest == token_digest(token)
    assert session.token_digest != token


async def test_authenticate_returns_session_user(staff):
    token, _ = await AuthService.open_session(staff)

    user = await AuthService.authenticate(token)

    assert user.id == staff.id


async def test_missing_and_unknown_tokens(staff):
    with pytest.raises(MissingSessionError):
        await AuthService.authenticate(None)
    with pytest.raises(InvalidSessionError):
        await AuthService.authenticate("not-a-session")


async def test_expired_session_is_removed(staff):
    token, session = await AuthService.open_session(staff)
    await Session.filter(id=session.id).update(expires_at=utc_now() - timedelta(minutes=1))

    with pytest.raises(SessionExpiredError):
        await AuthService.authenticate(token)

    assert not await Session.exists(id=session.id)


async def test_deactivated_user_is_rejected(staff):
    token, _ = await AuthService.open_session(staff)
    staff.is_active = False
    await staff.save()

    with pytest.raises(UserNotActiveError):
        await AuthService.authenticate(token)


async def test_ensure_admin(staff, admin):
    assert AuthService.ensure_admin(admin) is admin
    with pytest.raises(AdminRequiredError):
        AuthService.ensure_admin(staff)


async def test_close_session(staff):
    token, _ = await AuthService.open_session(staff)

    assert await AuthService.close_session(token) is True
    assert await AuthService.close_session(token) is False


async def test_purge_expired_sessions(staff):
    _, stale = await AuthService.open_session(staff)
    live_token, _ = await AuthService.open_session(staff)
    await Session.filter(id=stale.id).update(expires_at=utc_now() - timedelta(days=1))

    assert await AuthService.purge_expired_sessions() == 1
    assert (await AuthService.authenticate(live_token)).id == staff.id


@pytest.mark.parametrize("phone,valid", [
    ("+15550100", True),
    ("+1 (555) 010-0100", True),
    ("0123", False),
    ("call me", False),
])
def test_phone_check(phone, valid):
    assert is_valid_phone(phone) is valid
