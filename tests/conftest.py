"""
Shared fixtures: every test gets its own SQLite file and a cheap bcrypt cost.
"""
import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from sessionauth.config import Settings
from sessionauth.database import Database
from sessionauth.main import create_app
from sessionauth.services.auth import AuthService
from sessionauth.services.passwords import PasswordVerifier
from sessionauth.services.sessions import SessionManager, SessionStore
from sessionauth.services.todos import TodoStore
from sessionauth.services.users import UserStore

from tests.helpers import COOKIE_NAME


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}",
        session_cookie_name=COOKIE_NAME,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def client(test_settings):
    """Synchronous client; entering it runs the app lifespan (opens the DB)."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def database(test_settings):
    db = Database(test_settings.database_url)
    await db.open()
    yield db
    await db.close()


@pytest.fixture
def user_store(database) -> UserStore:
    return UserStore(database)


@pytest.fixture
def session_manager(database, user_store) -> SessionManager:
    return SessionManager(SessionStore(database), user_store)


@pytest.fixture
def password_verifier() -> PasswordVerifier:
    return PasswordVerifier(rounds=4)


@pytest.fixture
def auth_service(user_store, password_verifier, session_manager) -> AuthService:
    return AuthService(user_store, password_verifier, session_manager)


@pytest.fixture
def todo_store(database) -> TodoStore:
    return TodoStore(database)


