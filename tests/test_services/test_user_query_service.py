"""
Tests for the read services and DeleteUserService.
"""

import pytest
from unittest.mock import MagicMock
from typing import Dict, Any

from models.users import UserDTO
from repositories.memory_user_repository import InMemoryUserRepository
from services.create_user_service import CreateUserService
from services.delete_user_service import DeleteUserService
from services.audit_service import AuditService
from services.user_query_service import (
    GetUserService,
    FindUserByEmailService,
    ListUsersService,
)
from core.exceptions import NotFoundException


@pytest.fixture
def create(memory_repository: InMemoryUserRepository) -> CreateUserService:
    return CreateUserService(memory_repository)


class TestGetUserService:

    def test_returns_saved_fields(
        self,
        memory_repository: InMemoryUserRepository,
        create: CreateUserService,
        user_data: Dict[str, Any]
    ):
        create.execute(UserDTO(**user_data))

        user = GetUserService(memory_repository).execute(1)

        assert (user.id, user.name, user.email) == (1, "Alice", "alice@example.com")

    def test_not_found_passes_through(self, memory_repository: InMemoryUserRepository):
        with pytest.raises(NotFoundException):
            GetUserService(memory_repository).execute(1)


class TestFindUserByEmailService:

    def test_finds_by_normalized_email(
        self,
        memory_repository: InMemoryUserRepository,
        create: CreateUserService,
        user_data: Dict[str, Any]
    ):
        created = create.execute(UserDTO(**user_data))

        found = FindUserByEmailService(memory_repository).execute(" ALICE@example.com")

        assert found.id == created.id

    def test_unknown_email_on_empty_store(self, memory_repository: InMemoryUserRepository):
        with pytest.raises(NotFoundException):
            FindUserByEmailService(memory_repository).execute("nobody@example.com")


class TestListUsersService:

    def test_pages_and_total(
        self,
        memory_repository: InMemoryUserRepository,
        create: CreateUserService
    ):
        for i in range(5):
            create.execute(UserDTO(name=f"User {i}", email=f"u{i}@example.com", password="password1"))

        service = ListUsersService(memory_repository)
        first, total = service.execute(page=0, page_size=2)
        last, _ = service.execute(page=2, page_size=2)

        assert total == 5
        assert [u.id for u in first] == [1, 2]
        assert [u.id for u in last] == [5]


class TestDeleteUserService:

    def test_delete_then_get_raises(
        self,
        memory_repository: InMemoryUserRepository,
        create: CreateUserService,
        user_data: Dict[str, Any]
    ):
        created = create.execute(UserDTO(**user_data))
        audit = MagicMock(spec=AuditService)

        DeleteUserService(memory_repository, audit).execute(created.id)

        with pytest.raises(NotFoundException):
            GetUserService(memory_repository).execute(created.id)
        audit.record.assert_called_once_with("user.deleted", "user", created.id)

    def test_delete_unknown_raises_without_audit(self, memory_repository: InMemoryUserRepository):
        audit = MagicMock(spec=AuditService)

        with pytest.raises(NotFoundException):
            DeleteUserService(memory_repository, audit).execute(3)
        audit.record.assert_not_called()

    def test_audit_failure_does_not_undo_delete(
        self,
        memory_repository: InMemoryUserRepository,
        create: CreateUserService,
        user_data: Dict[str, Any]
    ):
        created = create.execute(UserDTO(**user_data))
        audit = MagicMock(spec=AuditService)
        audit.record.side_effect = RuntimeError("audit store down")

        DeleteUserService(memory_repository, audit).execute(created.id)

        assert memory_repository.count() == 0
