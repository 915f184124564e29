# catering/exceptions/auth_exceptions.py
class AuthException(Exception):
    """Base exception for session and permission errors."""
    pass


class MissingSessionError(AuthException):
    """Raised when a request carries no session cookie."""

    def __init__(self):
        super().__init__("Not authenticated")


class InvalidSessionError(AuthException):
    """Raised when a session token matches no stored session."""

    def __init__(self):
        super().__init__("Invalid session")


class SessionExpiredError(AuthException):
    """Raised when a session is past its expiry."""

    def __init__(self):
        super().__init__("Session has expired")


class UserNotActiveError(AuthException):
    """Raised when the session belongs to a deactivated account."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User account is not active")


class AdminRequiredError(AuthException):
    """Raised when a non-admin calls an admin-only operation."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Admin role required")
