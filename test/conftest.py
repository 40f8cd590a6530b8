from __future__ import annotations

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load test/.env first, then fallback to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# Never point the test run at a real database or write log files
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("RFID_DB_ENABLE_FILE_LOGGING", "false")

TEST_DATABASE_URL = os.environ["DATABASE_URL"]


@pytest.fixture(scope="session")
def test_database_url() -> str:
    """In-memory SQLite URL used instead of PostgreSQL."""
    return TEST_DATABASE_URL
