"""
Tests for user repository CRUD operations.

The contract tests run against both implementations (SQLAlchemy and
in-memory). Tests cover:
- Saving (insert / update) and id assignment
- Finding by id and by email
- Listing with skip/limit and counting
- Deleting
- Store failures surfaced as StoreUnavailableException
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session
from typing import Dict, Any

from database.models import UserORM
from repositories.base_repository import is_unique_violation
from repositories.interfaces import IUserRepository
from repositories.user_repository import UserRepository
from repositories.memory_user_repository import InMemoryUserRepository
from core.exceptions import (
    NotFoundException,
    DuplicateException,
    StoreUnavailableException,
)


@pytest.fixture(params=["sqlalchemy", "memory"])
def user_repository(request, db_session: Session) -> IUserRepository:
    """Each contract test runs once per repository implementation."""
    if request.param == "sqlalchemy":
        return UserRepository(db_session)
    return InMemoryUserRepository()


def _fields(user: UserORM) -> Dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "password_salt": user.password_salt,
        "password_hash": user.password_hash,
    }


class TestUserRepositorySave:
    """Tests for inserting and updating users."""

    def test_save_new_user_assigns_id(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        created = user_repository.save(make_user(user_data))

        assert created.id == 1
        assert created.name == user_data["name"]
        assert created.email == user_data["email"]
        assert created.created_at is not None

    def test_save_assigns_increasing_ids(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any],
        other_user_data: Dict[str, Any]
    ):
        first = user_repository.save(make_user(user_data))
        second = user_repository.save(make_user(other_user_data))

        assert second.id > first.id

    def test_save_existing_user_updates(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        created = user_repository.save(make_user(user_data))

        user = user_repository.get_by_id(created.id)
        user.name = "Alice Liddell"
        user_repository.save(user)

        assert user_repository.get_by_id(created.id).name == "Alice Liddell"
        assert user_repository.count() == 1

    def test_save_unknown_id_raises(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        user = make_user(user_data)
        user.id = 999

        with pytest.raises(NotFoundException):
            user_repository.save(user)

    def test_save_duplicate_email_raises(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        user_repository.save(make_user(user_data))

        with pytest.raises(DuplicateException):
            user_repository.save(make_user({**user_data, "name": "Otra Alice"}))

        assert user_repository.count() == 1


class TestUserRepositoryRead:
    """Tests for reading users."""

    def test_get_by_id_round_trip(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        saved = _fields(user_repository.save(make_user(user_data)))

        found = user_repository.get_by_id(saved["id"])

        assert _fields(found) == saved

    def test_get_by_id_nonexistent_raises(self, user_repository: IUserRepository):
        with pytest.raises(NotFoundException):
            user_repository.get_by_id(42)

    def test_find_by_id_nonexistent_returns_none(self, user_repository: IUserRepository):
        assert user_repository.find_by_id(42) is None

    def test_get_by_email(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any],
        other_user_data: Dict[str, Any]
    ):
        alice = user_repository.save(make_user(user_data))
        user_repository.save(make_user(other_user_data))

        found = user_repository.get_by_email(user_data["email"])

        assert found.id == alice.id
        assert found.email == user_data["email"]

    def test_get_by_email_on_empty_store_raises(self, user_repository: IUserRepository):
        with pytest.raises(NotFoundException) as exc_info:
            user_repository.get_by_email("nobody@example.com")

        assert "nobody@example.com" in exc_info.value.message

    def test_find_by_email_nonexistent_returns_none(self, user_repository: IUserRepository):
        assert user_repository.find_by_email("nobody@example.com") is None

    def test_get_all_ordered_and_paginated(
        self,
        user_repository: IUserRepository,
        make_user
    ):
        for i in range(5):
            user_repository.save(make_user({
                "name": f"User {i}",
                "email": f"user{i}@example.com",
                "password": "password123",
            }))

        all_users = user_repository.get_all()
        page = user_repository.get_all(skip=2, limit=2)

        assert [u.id for u in all_users] == sorted(u.id for u in all_users)
        assert len(all_users) == 5
        assert [u.email for u in page] == ["user2@example.com", "user3@example.com"]
        assert user_repository.count() == 5

    def test_get_all_returns_every_record(self, user_repository: IUserRepository):
        for i in range(120):
            user_repository.save(UserORM(
                name=f"User {i}",
                email=f"bulk{i}@example.com",
                password_salt="00" * 16,
                password_hash="00" * 32,
            ))

        users = user_repository.get_all()

        assert len(users) == user_repository.count() == 120
        assert users[-1].email == "bulk119@example.com"
        assert len(user_repository.get_all(skip=100)) == 20

    def test_get_all_empty(self, user_repository: IUserRepository):
        assert user_repository.get_all() == []
        assert user_repository.count() == 0


class TestUserRepositoryDelete:
    """Tests for deleting users."""

    def test_delete_then_get_raises(
        self,
        user_repository: IUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        created = user_repository.save(make_user(user_data))

        user_repository.delete(created.id)

        with pytest.raises(NotFoundException):
            user_repository.get_by_id(created.id)
        assert user_repository.count() == 0

    def test_delete_nonexistent_raises(self, user_repository: IUserRepository):
        with pytest.raises(NotFoundException):
            user_repository.delete(7)


class TestInMemoryUserRepository:
    """Behaviour specific to the in-memory implementation."""

    def test_returned_entities_do_not_alias_store(
        self,
        memory_repository: InMemoryUserRepository,
        make_user,
        user_data: Dict[str, Any]
    ):
        created = memory_repository.save(make_user(user_data))

        fetched = memory_repository.get_by_id(created.id)
        fetched.name = "Changed without save"

        assert memory_repository.get_by_id(created.id).name == user_data["name"]


class TestUserRepositoryStoreFailures:
    """SQLAlchemy errors are surfaced as StoreUnavailableException."""

    def test_read_failure(self, db_session: Session, monkeypatch):
        def broken_get(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(db_session, "get", broken_get)
        repository = UserRepository(db_session)

        with pytest.raises(StoreUnavailableException):
            repository.find_by_id(1)

    def test_write_failure(
        self,
        db_session: Session,
        monkeypatch,
        make_user,
        user_data: Dict[str, Any]
    ):
        def broken_commit():
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db_session, "commit", broken_commit)
        repository = UserRepository(db_session)

        with pytest.raises(StoreUnavailableException) as exc_info:
            repository.save(make_user(user_data))

        assert exc_info.value.status_code == 503

    def test_not_null_violation_is_not_a_duplicate(
        self,
        db_session: Session,
        make_user,
        user_data: Dict[str, Any]
    ):
        user = make_user(user_data)
        user.name = None
        repository = UserRepository(db_session)

        with pytest.raises(StoreUnavailableException):
            repository.save(user)

        assert repository.count() == 0


class TestIsUniqueViolation:
    """Classification of IntegrityError by driver message."""

    @pytest.mark.parametrize("message, expected", [
        ("UNIQUE constraint failed: users.email", True),
        ('duplicate key value violates unique constraint "users_email_key"', True),
        ("(1062, \"Duplicate entry 'a@b.c' for key 'email'\")", True),
        ("NOT NULL constraint failed: users.name", False),
        ("value too long for type character varying(200)", False),
    ])
    def test_message(self, message: str, expected: bool):
        error = IntegrityError("INSERT", {}, Exception(message))

        assert is_unique_violation(error) is expected
