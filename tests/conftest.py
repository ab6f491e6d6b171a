"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Callable, Generator, Dict, Any
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db
from database.models import Base, UserORM
from core.security import hash_password
from repositories.memory_user_repository import InMemoryUserRepository


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


# ==================== User Fixtures ====================

@pytest.fixture
def user_data() -> Dict[str, Any]:
    """Sample user data for testing."""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "password": "secret123"
    }


@pytest.fixture
def other_user_data() -> Dict[str, Any]:
    return {
        "name": "Bob",
        "email": "bob@example.com",
        "password": "hunter2024"
    }


def _build_user(data: Dict[str, Any]) -> UserORM:
    salt_hex, hash_hex = hash_password(data["password"])
    return UserORM(
        name=data["name"],
        email=data["email"],
        password_salt=salt_hex,
        password_hash=hash_hex,
    )


@pytest.fixture
def make_user() -> Callable[[Dict[str, Any]], UserORM]:
    """Factory for transient UserORM instances with a hashed password."""
    return _build_user


@pytest.fixture
def user_instance(db_session: Session, user_data: Dict[str, Any]) -> UserORM:
    """Create a user in the database."""
    user = _build_user(user_data)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user_instance(db_session: Session, other_user_data: Dict[str, Any]) -> UserORM:
    """Create a second user in the database."""
    user = _build_user(other_user_data)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
