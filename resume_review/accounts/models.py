from dataclasses import dataclass

from resume_review.database.models import UserRecord


@dataclass(frozen=True)
class UserProfile:
    """Public view of a user; never carries password material."""

    username: str
    email: str
    name: str
    age: int

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserProfile":
        return cls(
            username=record.username,
            email=record.email,
            name=record.name,
            age=record.age,
        )
