import os
import shutil
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from expense_intake.config.settings import Settings
from expense_intake.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "expenses_test")
    return Settings()


def _check_database_reachable(settings: Settings) -> None:
    psycopg.connect(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=3,
    ).close()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        _check_database_reachable(test_settings)
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text())
            conn.commit()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def household_id(integration_pool: None) -> Generator[str, None, None]:
    """A fresh household id; every row it owns is removed afterwards."""
    hid = f"test-{uuid.uuid4().hex}"
    yield hid
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM expenses WHERE household_id = %s", (hid,))
            cur.execute("DELETE FROM subcategories WHERE household_id = %s", (hid,))
            cur.execute("DELETE FROM categories WHERE household_id = %s", (hid,))
            cur.execute("DELETE FROM household_members WHERE household_id = %s", (hid,))
        conn.commit()


@pytest.fixture
def seed_categories(db_conn: psycopg.Connection[Any], household_id: str) -> dict[str, list[str]]:
    taxonomy = {"Casa": ["Mantenimiento", "Limpieza"], "Comida": ["Supermercado"], "Otros": []}
    with db_conn.cursor() as cur:
        for category, subcategories in taxonomy.items():
            cur.execute(
                "INSERT INTO categories (household_id, name) VALUES (%s, %s) RETURNING id",
                (household_id, category),
            )
            row = cur.fetchone()
            assert row is not None
            for name in subcategories:
                cur.execute(
                    "INSERT INTO subcategories (category_id, household_id, name) VALUES (%s, %s, %s)",
                    (row[0], household_id, name),
                )
    db_conn.commit()
    return taxonomy


@pytest.fixture
def seed_members(db_conn: psycopg.Connection[Any], household_id: str) -> list[str]:
    members = [("user-1", "active"), ("user-2", "active"), ("user-3", "invited")]
    with db_conn.cursor() as cur:
        for user_id, status in members:
            cur.execute(
                "INSERT INTO household_members (household_id, user_id, status) VALUES (%s, %s, %s)",
                (household_id, user_id, status),
            )
    db_conn.commit()
    return [user_id for user_id, status in members if status == "active"]


@pytest.fixture
def ffmpeg_available() -> None:
    if shutil.which("ffmpeg") is None or shutil.which("ffprobe") is None:
        pytest.skip("ffmpeg/ffprobe not installed")
