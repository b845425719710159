"""Service test fixtures — file-backed SQLite DB, real repositories, FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - Repositories are the real SQLAlchemy adapters (no repository fakes)
    - Only the token adapter is faked in use-case tests, so calls can be asserted
    - Route tests run against the real JWT adapter and the real use case

Design Decisions:
    - File-backed SQLite over :memory:: separate pooled connections, so
      short-lived sessions behave as they do against PostgreSQL
    - get_db_manager overridden AND the module singleton patched: health
      probes read the singleton directly
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

import editfolio.infrastructure.database as db_module
from editfolio.config import get_settings
from editfolio.core.domain_types import UserRole
from editfolio.core.user_commands import CreateAdminUser
from editfolio.db.base import Base
import editfolio.models  # noqa: F401
from editfolio.infrastructure.database import DatabaseSessionManager, get_db_manager
from editfolio.infrastructure.manager_repository import SqlAlchemyManagerRepository
from editfolio.infrastructure.token_adapter import JwtTokenGenerator
from editfolio.infrastructure.user_repository import SqlAlchemyUserRepository
from editfolio.main import app
from editfolio.services.user_use_case import UserUseCase


class FakeTokenGenerator:
    """Records every user it was asked to mint a token for."""

    def __init__(self):
        self.generated_for = []

    def generate(self, user) -> str:
        self.generated_for.append(user.id)
        return f"token-{user.id}"

    def decode(self, token: str):
        raise NotImplementedError


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'editfolio.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
def user_repo(db_manager):
    return SqlAlchemyUserRepository(db_manager)


@pytest.fixture
def manager_repo(db_manager):
    return SqlAlchemyManagerRepository(db_manager)


@pytest.fixture
def token_generator():
    return FakeTokenGenerator()


@pytest.fixture
def use_case(user_repo, manager_repo, token_generator):
    return UserUseCase(
        user_repo, manager_repo, token_generator, timeout_seconds=5.0,
    )


@pytest.fixture
def jwt_tokens():
    """Same signing config the routes use."""
    settings = get_settings()
    return JwtTokenGenerator(settings.jwt_secret, settings.jwt_algorithm)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with the DB manager overridden."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def auth_header(user_repo, jwt_tokens):
    """Build a bearer header for a persisted user id."""
    async def _header(user_id) -> dict:
        user = await user_repo.get_by_id(user_id)
        return {"Authorization": f"Bearer {jwt_tokens.generate(user)}"}
    return _header


@pytest.fixture
async def super_admin_id(use_case):
    return await use_case.create_admin_user(
        CreateAdminUser(
            name="Root", email="root@editfolio.io",
            password="root-password", nickname="root",
        ),
        role=UserRole.SUPER_ADMIN,
    )


@pytest.fixture
async def admin_id(use_case):
    return await use_case.create_admin_user(CreateAdminUser(
        name="Kim", email="a@b.com", password="Pw1!", nickname="K",
    ))
