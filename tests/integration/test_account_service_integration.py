import uuid

import pytest

from resume_review.accounts.exceptions import (
    InvalidPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from resume_review.accounts.service import AccountService
from resume_review.database.repositories.user_repository import UserRepository


def _unique_username() -> str:
    return f"it_{uuid.uuid4().hex[:10]}"


class TestAccountServiceIntegration:
    def test_signup_then_login(self, cleanup_usernames: list[str]) -> None:
        username = _unique_username()
        cleanup_usernames.append(username)
        service = AccountService(UserRepository())

        created = service.signup(
            username=username,
            email=f"{username}@example.com",
            password="s3cret",
            name="Integration",
            age=30,
        )
        profile = service.login(username, "s3cret")

        assert created == profile
        stored = UserRepository().find_by_username(username)
        assert stored is not None
        assert stored.password_hash != "s3cret"

    def test_duplicate_email_rejected(self, cleanup_usernames: list[str]) -> None:
        first, second = _unique_username(), _unique_username()
        cleanup_usernames.extend([first, second])
        service = AccountService(UserRepository())
        service.signup(
            username=first, email=f"{first}@example.com", password="pw", name="First", age=20
        )

        with pytest.raises(UserAlreadyExistsError):
            service.signup(
                username=second, email=f"{first}@example.com", password="pw", name="Second", age=21
            )

    def test_login_failures(self, cleanup_usernames: list[str]) -> None:
        username = _unique_username()
        cleanup_usernames.append(username)
        service = AccountService(UserRepository())
        service.signup(
            username=username, email=f"{username}@example.com", password="pw", name="Login", age=22
        )

        with pytest.raises(InvalidPasswordError):
            service.login(username, "wrong")
        with pytest.raises(UserNotFoundError):
            service.login(_unique_username(), "pw")
