# catering/api/v1/endpoints/auth.py
from fastapi import APIRouter, status, Response, Depends

from catering.schemas.user import UserResponseSchema
from catering.services.auth_service import AuthService
from catering.api.v1.dependencies.auth import get_current_user, get_session_token
from catering.models.user import User
from catering.core.config import settings

router = APIRouter(prefix="/auth", tags=["authentication"])


def clear_session_cookie(response: Response) -> None:
    """Clear session cookie from response."""
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        secure=settings.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite=settings.SESSION_COOKIE_SAMESITE
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, operation_id="logout")
async def logout(
    response: Response,
    session_token: str = Depends(get_session_token)
) -> None:
    """Logout user by invalidating session."""
    await AuthService.close_session(session_token)
    clear_session_cookie(response)


@router.get("/me", response_model=UserResponseSchema, operation_id="getCurrentUser")
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
) -> UserResponseSchema:
    """Get current user information."""
    return UserResponseSchema.from_orm_user(current_user)
