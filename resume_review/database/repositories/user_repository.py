from typing import Any

from psycopg.rows import dict_row

from resume_review.database.connection import get_connection
from resume_review.database.models import UserRecord

_USER_COLUMNS = "id, username, email, password_hash, name, age, created_at"


def _to_record(row: dict[str, Any]) -> UserRecord:
    return UserRecord(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        name=row["name"],
        age=row["age"],
        created_at=row["created_at"],
    )


class UserRepository:
    """Database operations for the users table."""

    def find_by_username(self, username: str) -> UserRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_USER_COLUMNS} FROM users WHERE username = %s",
                    (username,),
                )
                row = cur.fetchone()
        return _to_record(row) if row is not None else None

    def find_by_username_or_email(self, username: str, email: str) -> UserRecord | None:
        """Return any user already holding this username or this email."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_USER_COLUMNS}
                    FROM users
                    WHERE username = %s OR email = %s
                    LIMIT 1
                    """,
                    (username, email),
                )
                row = cur.fetchone()
        return _to_record(row) if row is not None else None

    def create(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        name: str,
        age: int,
    ) -> UserRecord:
        """Insert a user and return the stored row.

        Raises:
            psycopg.errors.UniqueViolation: if username or email is taken.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO users (username, email, password_hash, name, age)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING {_USER_COLUMNS}
                    """,
                    (username, email, password_hash, name, age),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError("INSERT ... RETURNING produced no row")
        return _to_record(row)
