import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from resume_review.config.settings import Settings
from resume_review.database.connection import close_pool, ensure_schema, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "resume_review_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def cleanup_usernames(db_conn: psycopg.Connection[Any]) -> Generator[list[str], None, None]:
    usernames: list[str] = []
    yield usernames
    if not usernames:
        return
    with db_conn.cursor() as cur:
        cur.execute("DELETE FROM users WHERE username = ANY(%s)", (usernames,))
    db_conn.commit()
