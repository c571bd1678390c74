class AccountError(Exception):
    """Base exception for credential store errors."""


class UserNotFoundError(AccountError):
    """Raised when no user matches the given username."""


class InvalidPasswordError(AccountError):
    """Raised when the password does not match the stored hash."""


class UserAlreadyExistsError(AccountError):
    """Raised on signup when the username or email is already registered."""
