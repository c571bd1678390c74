from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserRecord:
    """Represents a row from the users table."""

    id: int
    username: str
    email: str
    password_hash: str
    name: str
    age: int
    created_at: datetime | None = None
