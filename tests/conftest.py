"""
Fixtures pytest partagees pour les tests du broker.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base et logs temporaires
- Base SQLite en memoire (engine asynchrone + fabrique de sessions)
- Repositories SQLModel branches sur cette base
- Capacites de securite rapides (peu d'iterations PBKDF2)
"""

from pathlib import Path

import pytest
import pytest_asyncio

from bookstore_broker.config import Settings
from bookstore_broker.infrastructure.persistence.database import (
    create_engine,
    create_session_factory,
    init_db,
)
from bookstore_broker.infrastructure.persistence.repositories import (
    SQLModelBookStoreRepository,
    SQLModelServiceBindingRepository,
    SQLModelServiceInstanceRepository,
    SQLModelUserRepository,
)
from bookstore_broker.infrastructure.security import (
    Pbkdf2PasswordEncoder,
    SecurePasswordGenerator,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et les logs de chaque test.
    """
    return Settings(
        base_url="https://broker.example.com",
        database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        password_hash_iterations=1000,
        log_file=tmp_path / "test.log",
    )


@pytest_asyncio.fixture
async def session_factory():
    """Fabrique de sessions sur une base SQLite en memoire, tables creees."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def instance_repository(session_factory) -> SQLModelServiceInstanceRepository:
    return SQLModelServiceInstanceRepository(session_factory)


@pytest.fixture
def binding_repository(session_factory) -> SQLModelServiceBindingRepository:
    return SQLModelServiceBindingRepository(session_factory)


@pytest.fixture
def bookstore_repository(session_factory) -> SQLModelBookStoreRepository:
    return SQLModelBookStoreRepository(session_factory)


@pytest.fixture
def user_repository(session_factory) -> SQLModelUserRepository:
    return SQLModelUserRepository(session_factory)


@pytest.fixture
def password_encoder() -> Pbkdf2PasswordEncoder:
    """Encodeur PBKDF2 avec peu d'iterations pour des tests rapides."""
    return Pbkdf2PasswordEncoder(iterations=1000)


@pytest.fixture
def password_generator() -> SecurePasswordGenerator:
    return SecurePasswordGenerator()
