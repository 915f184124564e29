# catering/schemas/user.py
from pydantic import BaseModel
from datetime import datetime
from uuid import UUID


class UserResponseSchema(BaseModel):
    """Schema for user responses."""

    id: UUID
    email: str
    role: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_orm_user(cls, user) -> "UserResponseSchema":
        """
        Create schema from User ORM model.

        Args:
            user: User model instance

        Returns:
            UserResponseSchema instance
        """
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at
        )
