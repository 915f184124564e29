# catering/models/user.py
from tortoise import Model, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class UserRole(str, Enum):
    """Staff roles: admins manage the catalog and see every order."""

    ADMIN = "admin"
    USER = "user"


class User(Model):
    """
    Staff member who takes orders.

    Accounts are provisioned outside this service; only role and active
    flag matter here.
    """

    id = fields.UUIDField(pk=True)
    email = fields.CharField(max_length=255, unique=True, index=True)
    role = fields.CharEnumField(UserRole, default=UserRole.USER)
    is_active = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    sessions: fields.ReverseRelation["Session"]
    orders: fields.ReverseRelation["Order"]

    class Meta:
        table = "users"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __str__(self) -> str:
        return f"{self.email} [{self.role}]"


class Session(Model):
    """Cookie session; only the token digest is stored."""

    id = fields.UUIDField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="sessions",
        on_delete=fields.CASCADE
    )
    token_digest = fields.CharField(max_length=64, unique=True, index=True)
    expires_at = fields.DatetimeField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "sessions"

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        expires_at = self.expires_at
        # naive values are UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return (now or datetime.now(timezone.utc)) >= expires_at

    def __str__(self) -> str:
        return f"Session of {self.user_id} until {self.expires_at:%Y-%m-%d %H:%M}"
