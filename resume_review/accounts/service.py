from psycopg.errors import UniqueViolation
from werkzeug.security import check_password_hash, generate_password_hash

from resume_review.accounts.exceptions import (
    InvalidPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from resume_review.accounts.models import UserProfile
from resume_review.database.repositories.user_repository import UserRepository
from resume_review.logging.logger import Log


class AccountService:
    """Login and signup on top of the users table."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def login(self, username: str, password: str) -> UserProfile:
        """Return the user's profile if the credentials match.

        Raises:
            UserNotFoundError: unknown username.
            InvalidPasswordError: password does not match.
        """
        user = self._user_repo.find_by_username(username)
        if user is None:
            raise UserNotFoundError(f"User '{username}' not found")
        if not check_password_hash(user.password_hash, password):
            raise InvalidPasswordError(f"Invalid password for '{username}'")
        Log.info("User logged in", username=username)
        return UserProfile.from_record(user)

    def signup(
        self,
        *,
        username: str,
        email: str,
        password: str,
        name: str,
        age: int,
    ) -> UserProfile:
        """Register a new user.

        Raises:
            UserAlreadyExistsError: username or email already registered.
        """
        if self._user_repo.find_by_username_or_email(username, email) is not None:
            raise UserAlreadyExistsError(f"User '{username}' or '{email}' already exists")
        try:
            user = self._user_repo.create(
                username=username,
                email=email,
                password_hash=generate_password_hash(password),
                name=name,
                age=age,
            )
        except UniqueViolation as exc:
            raise UserAlreadyExistsError(
                f"User '{username}' or '{email}' already exists"
            ) from exc
        Log.info("User created", username=username)
        return UserProfile.from_record(user)
